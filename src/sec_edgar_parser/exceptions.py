"""
Exception hierarchy for EDGAR document parsing.

Every failure surfaces as exactly one EdgarParseError subclass naming the
offending element. Optional data that is missing is never an error; it is
represented as None on the returned record.
"""

from typing import Optional


class EdgarParseError(ValueError):
    """Base class for all parse failures."""


class MalformedXmlError(EdgarParseError):
    """
    Input is not a well-formed XML document.

    The message carries the underlying lxml diagnostic.
    """


class MissingRequiredElementError(EdgarParseError):
    """
    A required element or attribute is absent.

    Attributes:
        tag: Name of the missing element (attributes as 'element/@attr')

    Example:
        >>> raise MissingRequiredElementError('issuer')
        Traceback (most recent call last):
        ...
        MissingRequiredElementError: Required element 'issuer' not found
    """

    def __init__(self, tag: str, parent: Optional[str] = None):
        self.tag = tag
        self.parent = parent
        location = f" under '{parent}'" if parent else ""
        super().__init__(f"Required element '{tag}' not found{location}")


class TypeCoercionError(EdgarParseError):
    """
    A required numeric or boolean leaf does not parse to its declared type.

    Attributes:
        tag: Element whose text failed to convert
        raw_text: The offending text, verbatim
    """

    def __init__(self, tag: str, raw_text: str, expected: str = "value"):
        self.tag = tag
        self.raw_text = raw_text
        self.expected = expected
        super().__init__(
            f"Element '{tag}' holds '{raw_text}', which is not a valid {expected}"
        )


class UnresolvedReferenceError(EdgarParseError):
    """
    A contextRef or unitRef names an id that was never declared.

    Only raised when strict reference checking is enabled in ParserConfig;
    by default the referencing fact is dropped instead.
    """

    def __init__(self, kind: str, ref: str, tag: Optional[str] = None):
        self.kind = kind
        self.ref = ref
        self.tag = tag
        source = f" on '{tag}'" if tag else ""
        super().__init__(f"Unresolved {kind} '{ref}'{source}")
