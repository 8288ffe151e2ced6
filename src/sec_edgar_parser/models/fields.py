"""
Declarative XML field tables for EDGAR record models.

Each record model declares, per field, where the value lives in the XML
tree and whether the published EDGAR technical specification requires it:

    class Issuer(EdgarRecord):
        cik: Annotated[Optional[str], XmlField('issuerCik', required=True)] = None

The RecordMapper reads these annotations from ``model_fields`` and performs
the recursive descent; no record has a hand-written parse function.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class XmlField:
    """
    Location and presence rule for one record field.

    Attributes:
        tag: Local name of the child element. None means the record's own
            element (used with ``attribute`` or for the element's text).
        required: Absence is an error under the strict policy.
        container: For list fields, the wrapper element(s) holding the items.
        attribute: Read this attribute instead of the element text.
        separator: For List[int] fields, split each item's text on this.
        decoder: Explicit text decoder, overriding the one implied by the
            field type.
    """

    tag: Optional[str] = None
    required: bool = False
    container: Optional[str] = None
    attribute: Optional[str] = None
    separator: Optional[str] = None
    decoder: Optional[Callable[[str], Any]] = None

    @property
    def label(self) -> str:
        """Element path used in error messages."""
        name = self.tag or '.'
        if self.attribute:
            return f"{name}/@{self.attribute}"
        return name


class EdgarRecord(BaseModel):
    """
    Base class for every schema-mapped record.

    Records are immutable once built. A record is either present with its
    sub-fields or absent (None) on its parent; there is no partial presence.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def xml_fields(cls) -> Dict[str, XmlField]:
        """Field name -> XmlField for every annotated field, in declaration order."""
        table = {}
        for name, info in cls.model_fields.items():
            for meta in info.metadata:
                if isinstance(meta, XmlField):
                    table[name] = meta
                    break
        return table
