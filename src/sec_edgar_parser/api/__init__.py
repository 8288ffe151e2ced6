"""
User-facing API for sec-edgar-parser.

FilingParser dispatches a document to the right schema parser by EDGAR
form type.
"""

from sec_edgar_parser.api.filing_parser import FilingParser

__all__ = [
    'FilingParser',
]
