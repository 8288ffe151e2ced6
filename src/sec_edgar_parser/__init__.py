"""
sec-edgar-parser: typed records from SEC EDGAR XML filings.

Main package exports for user-facing API.
"""

from sec_edgar_parser.api import FilingParser
from sec_edgar_parser.config import ParsePolicy, ParserConfig
from sec_edgar_parser.exceptions import (
    EdgarParseError,
    MalformedXmlError,
    MissingRequiredElementError,
    TypeCoercionError,
    UnresolvedReferenceError,
)
from sec_edgar_parser.types import FormTypes
from sec_edgar_parser.parsers import (
    parse_form13f_document,
    parse_form13f_table,
    parse_ownership_form,
    parse_xbrl,
)

__all__ = [
    'FilingParser',
    'ParsePolicy',
    'ParserConfig',
    'FormTypes',
    'EdgarParseError',
    'MalformedXmlError',
    'MissingRequiredElementError',
    'TypeCoercionError',
    'UnresolvedReferenceError',
    'parse_xbrl',
    'parse_ownership_form',
    'parse_form13f_document',
    'parse_form13f_table',
]
