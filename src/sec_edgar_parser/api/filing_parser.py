"""
FilingParser: one entry point for every supported EDGAR document.

Routes a document to the XBRL, ownership or 13F parser by form type and
applies one ParserConfig to all of them.

Usage:
    >>> parser = FilingParser()
    >>> doc = parser.parse(xml_text, '4')
    >>> doc.issuer.name
    'Acme Corp'

    >>> table = parser.parse_information_table(info_table_xml)
"""

import logging
from typing import Optional, Union

from sec_edgar_parser.config import ParserConfig, get_forms_config, get_parser_config
from sec_edgar_parser.models import InformationTable, OwnershipDocument, ThirteenFDocument, XbrlDocument
from sec_edgar_parser.parsers import (
    parse_form13f_document,
    parse_form13f_table,
    parse_ownership_form,
    parse_xbrl,
)
from sec_edgar_parser.validators import validate_form_type

logger = logging.getLogger(__name__)

ParsedDocument = Union[XbrlDocument, OwnershipDocument, ThirteenFDocument]


class FilingParser:
    """
    Form-type aware facade over the document parsers.

    Args:
        config: Parser settings. Defaults to the global config loaded from
            the environment.

    Example:
        >>> from sec_edgar_parser import FilingParser
        >>> from sec_edgar_parser.config import ParserConfig, ParsePolicy
        >>> parser = FilingParser(ParserConfig(ownership_policy=ParsePolicy.STRICT))
        >>> parser.parse(form4_xml, '4')
        Traceback (most recent call last):
        ...
        MissingRequiredElementError: Required element 'issuer' not found under 'ownershipDocument'
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or get_parser_config()

    def parse(self, xml: Union[str, bytes], form_type: str) -> ParsedDocument:
        """
        Parse a document using the schema registered for its form type.

        For 13F form types this parses the primary document; use
        parse_information_table() for the holdings table.

        Args:
            xml: Document text
            form_type: EDGAR form type (e.g. '4', '13F-HR', '10-K')

        Returns:
            XbrlDocument, OwnershipDocument or ThirteenFDocument

        Raises:
            ValueError: If the form type is not supported
            EdgarParseError: If the document fails to parse
        """
        form_type = validate_form_type(form_type)
        schema = get_forms_config().schema_for(form_type)

        logger.debug(f"Parsing form {form_type} with {schema} schema")

        if schema == 'ownership':
            return self.parse_ownership(xml)
        if schema == 'thirteenf':
            return self.parse_thirteenf(xml)
        return self.parse_xbrl(xml)

    def parse_xbrl(self, xml: Union[str, bytes]) -> XbrlDocument:
        return parse_xbrl(xml, strict_references=self.config.strict_references)

    def parse_ownership(self, xml: Union[str, bytes]) -> OwnershipDocument:
        return parse_ownership_form(xml, policy=self.config.ownership_policy)

    def parse_thirteenf(self, xml: Union[str, bytes]) -> ThirteenFDocument:
        return parse_form13f_document(xml, policy=self.config.thirteenf_policy)

    def parse_information_table(self, xml: Union[str, bytes]) -> InformationTable:
        return parse_form13f_table(xml, policy=self.config.thirteenf_policy)
