"""
Form 13F parsing: primary document and information table.

Both documents share the 13F policy from ParserConfig (strict by default).
Under the strict policy one bad <infoTable> row aborts the whole table;
under the lenient policy the row is kept with None fields.
"""

import logging
from typing import Optional, Union

from lxml import etree

from sec_edgar_parser.config import ParsePolicy, get_parser_config
from sec_edgar_parser.exceptions import MissingRequiredElementError
from sec_edgar_parser.models.thirteenf import InformationTable, ThirteenFDocument
from sec_edgar_parser.parsers.record_mapper import RecordMapper
from sec_edgar_parser.parsers.xml_reader import local_name, parse_document

logger = logging.getLogger(__name__)

DOCUMENT_ROOT_TAG = 'edgarSubmission'
TABLE_ROOT_TAG = 'informationTable'


def _check_root(root: etree._Element, expected: str, policy: ParsePolicy) -> None:
    if local_name(root) == expected:
        return
    if policy is ParsePolicy.STRICT:
        raise MissingRequiredElementError(expected)
    logger.warning(f"Expected <{expected}> root, got <{local_name(root)}>; mapping anyway")


def _resolve_policy(policy: Optional[ParsePolicy]) -> ParsePolicy:
    return ParsePolicy(policy or get_parser_config().thirteenf_policy)


def parse_form13f_document(
    xml: Union[str, bytes],
    policy: Optional[ParsePolicy] = None
) -> ThirteenFDocument:
    """
    Parse a 13F primary document (<edgarSubmission>).

    Args:
        xml: Document text
        policy: Override ParserConfig.thirteenf_policy for this call

    Returns:
        ThirteenFDocument

    Raises:
        MalformedXmlError: If the input is not well-formed
        MissingRequiredElementError: Strict policy only
        TypeCoercionError: Strict policy only
    """
    policy = _resolve_policy(policy)
    root = parse_document(xml, huge_tree=get_parser_config().huge_tree)
    _check_root(root, DOCUMENT_ROOT_TAG, policy)

    document = RecordMapper(policy).map(root, ThirteenFDocument)

    logger.debug(f"Parsed 13F primary document policy={policy.value}")
    return document


def parse_form13f_table(
    xml: Union[str, bytes],
    policy: Optional[ParsePolicy] = None
) -> InformationTable:
    """
    Parse a 13F information table (<informationTable>).

    Args:
        xml: Document text
        policy: Override ParserConfig.thirteenf_policy for this call

    Returns:
        InformationTable with entries in document order

    Example:
        >>> table = parse_form13f_table(xml)
        >>> table.entries[0].cusip
        '037833100'
    """
    policy = _resolve_policy(policy)
    root = parse_document(xml, huge_tree=get_parser_config().huge_tree)
    _check_root(root, TABLE_ROOT_TAG, policy)

    table = RecordMapper(policy).map(root, InformationTable)

    logger.debug(f"Parsed 13F information table: {len(table.entries)} entries")
    return table
