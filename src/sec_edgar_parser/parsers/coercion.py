"""
Typed decoders for schema-mapped leaves.

coerce_value() (the int -> float -> bool -> text chain) lives with the Value
types in models/values.py and is re-exported here. The decoders below are for
leaves whose type the schema fixes; they raise ValueError and leave the
strict/lenient decision to the RecordMapper.
"""

from sec_edgar_parser.models.values import INT_PATTERN, coerce_value

_TRUE_FLAGS = frozenset({'true', '1', 'y', 'yes'})
_FALSE_FLAGS = frozenset({'false', '0', 'n', 'no'})

__all__ = ['coerce_value', 'parse_int', 'parse_flag']


def parse_int(text: str) -> int:
    """
    Parse a typed integer leaf (13F counts, amounts, voting authority).

    Surrounding whitespace is ignored.

    Raises:
        ValueError: If the text is not an integer

    Example:
        >>> parse_int(' 100 ')
        100
    """
    stripped = text.strip()
    if not INT_PATTERN.fullmatch(stripped):
        raise ValueError(f"Not an integer: '{text}'")
    return int(stripped)


def parse_flag(text: str) -> bool:
    """
    Parse an EDGAR boolean leaf.

    EDGAR schemas mix 'true'/'false', '1'/'0' and 'Y'/'N' across form
    versions; all are accepted case-insensitively.

    Raises:
        ValueError: If the text is not a recognised flag
    """
    flag = text.strip().lower()
    if flag in _TRUE_FLAGS:
        return True
    if flag in _FALSE_FLAGS:
        return False
    raise ValueError(f"Not a boolean flag: '{text}'")
