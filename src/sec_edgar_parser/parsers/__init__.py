"""
XML parsing modules for EDGAR documents.

- XBRL: index units and contexts first, then resolve facts in one pass
- Ownership / 13F: one schema-driven RecordMapper, policy per document type
- All tag matching is by local name; comments and PIs are ignored
"""

from .xml_reader import parse_document
from .coercion import coerce_value, parse_flag, parse_int
from .record_mapper import RecordMapper
from .xbrl_parser import build_unit_index, build_context_index, extract_facts, parse_xbrl
from .ownership_parser import parse_ownership_form
from .thirteenf_parser import parse_form13f_document, parse_form13f_table

__all__ = [
    # XML reading
    'parse_document',
    # Coercion
    'coerce_value',
    'parse_flag',
    'parse_int',
    # Record mapping
    'RecordMapper',
    # XBRL
    'build_unit_index',
    'build_context_index',
    'extract_facts',
    'parse_xbrl',
    # Schema documents
    'parse_ownership_form',
    'parse_form13f_document',
    'parse_form13f_table',
]
