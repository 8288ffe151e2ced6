"""
Tagged scalar value type shared by XBRL facts and ownership leaves.

A Value is exactly one of IntValue, FloatValue, BoolValue or TextValue.
The 'kind' field is the discriminator, so a dumped value is unambiguous at
any host boundary:

    >>> IntValue(value=42).model_dump()
    {'kind': 'int', 'value': 42}

coerce_value() picks the variant with an ordered fallback chain:

    int64 -> float64 -> "true"/"false" -> text

The grammar is deliberately narrower than Python's int()/float(): no
surrounding whitespace, no digit-group underscores, ASCII digits only.
"""

import re
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from sec_edgar_parser.models.fields import EdgarRecord, XmlField

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

INT_PATTERN = re.compile(r'[+-]?[0-9]+')
FLOAT_PATTERN = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|[+-]?(?:inf|infinity|nan)',
    re.IGNORECASE,
)


class IntValue(BaseModel):
    """Signed 64-bit integer."""

    kind: Literal['int'] = 'int'
    value: int

    model_config = ConfigDict(frozen=True, strict=True)


class FloatValue(BaseModel):
    """
    64-bit float, including inf and nan.

    NaN never equals itself, so two parses of a document holding a NaN
    fact compare unequal; compare their model_dump_json() output instead.
    """

    kind: Literal['float'] = 'float'
    value: float

    model_config = ConfigDict(frozen=True, strict=True)


class BoolValue(BaseModel):
    kind: Literal['bool'] = 'bool'
    value: bool

    model_config = ConfigDict(frozen=True, strict=True)


class TextValue(BaseModel):
    kind: Literal['text'] = 'text'
    value: str

    model_config = ConfigDict(frozen=True, strict=True)


Value = Annotated[
    Union[IntValue, FloatValue, BoolValue, TextValue],
    Field(discriminator='kind'),
]


def _parse_int64(text: str) -> Optional[int]:
    if not INT_PATTERN.fullmatch(text):
        return None
    number = int(text)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def coerce_value(text: str) -> Union[IntValue, FloatValue, BoolValue, TextValue]:
    """
    Convert raw leaf text into exactly one Value variant.

    Args:
        text: Element text, unmodified

    Returns:
        IntValue, FloatValue, BoolValue or TextValue

    Example:
        >>> coerce_value('42')
        IntValue(kind='int', value=42)
        >>> coerce_value('42.5')
        FloatValue(kind='float', value=42.5)
        >>> coerce_value('true')
        BoolValue(kind='bool', value=True)
        >>> coerce_value('42x')
        TextValue(kind='text', value='42x')
    """
    number = _parse_int64(text)
    if number is not None:
        return IntValue(value=number)

    # Integers beyond int64 land here, as do exponents, inf and nan
    if FLOAT_PATTERN.fullmatch(text):
        return FloatValue(value=float(text))

    if text == 'true' or text == 'false':
        return BoolValue(value=text == 'true')

    return TextValue(value=text)


class ValueFootnote(EdgarRecord):
    """
    EDGAR scalar leaf that can carry a footnote reference.

    XML shape:
        <transactionShares>
            <value>100</value>
            <footnoteId id="F1"/>
        </transactionShares>

    Either half may be absent; a price reported only through a footnote has
    value=None.
    """

    value: Annotated[Optional[Value], XmlField('value', decoder=coerce_value)] = None
    footnote_id: Annotated[Optional[str], XmlField('footnoteId', attribute='id')] = None
