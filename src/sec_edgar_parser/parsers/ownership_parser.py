"""
Ownership document (Forms 3, 4, 5) parsing.

The record shape lives entirely in models/ownership.py; this module only
parses the XML, checks the root element, and runs the RecordMapper under
the policy configured for ownership documents.
"""

import logging
from typing import Optional, Union

from sec_edgar_parser.config import ParsePolicy, get_parser_config
from sec_edgar_parser.exceptions import MissingRequiredElementError
from sec_edgar_parser.models.ownership import OwnershipDocument
from sec_edgar_parser.parsers.record_mapper import RecordMapper
from sec_edgar_parser.parsers.xml_reader import local_name, parse_document

logger = logging.getLogger(__name__)

ROOT_TAG = 'ownershipDocument'


def parse_ownership_form(
    xml: Union[str, bytes],
    policy: Optional[ParsePolicy] = None
) -> OwnershipDocument:
    """
    Parse a Form 3, 4 or 5 ownership document.

    Args:
        xml: Document text
        policy: Override ParserConfig.ownership_policy for this call

    Returns:
        OwnershipDocument

    Raises:
        MalformedXmlError: If the input is not well-formed
        MissingRequiredElementError: Strict policy only
        TypeCoercionError: Strict policy only

    Example:
        >>> doc = parse_ownership_form(xml, policy=ParsePolicy.STRICT)
        >>> doc.reporting_owner.relationship.is_director
        True
    """
    config = get_parser_config()
    policy = ParsePolicy(policy or config.ownership_policy)

    root = parse_document(xml, huge_tree=config.huge_tree)

    if local_name(root) != ROOT_TAG:
        if policy is ParsePolicy.STRICT:
            raise MissingRequiredElementError(ROOT_TAG)
        logger.warning(f"Expected <{ROOT_TAG}> root, got <{local_name(root)}>; mapping anyway")

    document = RecordMapper(policy).map(root, OwnershipDocument)

    logger.debug(
        f"Parsed ownership document type={document.document_type} "
        f"footnotes={len(document.footnotes)} policy={policy.value}"
    )
    return document
