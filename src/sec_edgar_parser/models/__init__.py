"""
Pydantic models for decoded EDGAR documents.

- values: tagged Value union and the ValueFootnote leaf
- fields: XmlField declarations and the EdgarRecord base
- xbrl: contexts, units and facts of XBRL instance documents
- ownership: Forms 3/4/5
- thirteenf: 13F primary document and information table
"""

from sec_edgar_parser.models.fields import EdgarRecord, XmlField
from sec_edgar_parser.models.values import (
    BoolValue,
    FloatValue,
    IntValue,
    TextValue,
    Value,
    ValueFootnote,
    coerce_value,
)
from sec_edgar_parser.models.xbrl import Context, Fact, Period, Segment, XbrlDocument
from sec_edgar_parser.models.ownership import OwnershipDocument
from sec_edgar_parser.models.thirteenf import InformationTable, TableEntry, ThirteenFDocument

__all__ = [
    'EdgarRecord',
    'XmlField',
    'BoolValue',
    'FloatValue',
    'IntValue',
    'TextValue',
    'Value',
    'ValueFootnote',
    'coerce_value',
    'Context',
    'Fact',
    'Period',
    'Segment',
    'XbrlDocument',
    'OwnershipDocument',
    'InformationTable',
    'TableEntry',
    'ThirteenFDocument',
]
