"""
XBRL instance document parsing.

Resolution happens in two phases:
1. Index: build the unit and context dictionaries from the top-level
   <unit> and <context> declarations
2. Resolve: walk the top-level fact elements once, joining each against the
   dictionaries by contextRef / unitRef

Only direct children of the root are visited in either phase. Facts nested
inside tuples are not part of EDGAR's dimensional subset.
"""

import logging
from typing import Dict, List, Optional, Union

from lxml import etree

from sec_edgar_parser.config import get_parser_config
from sec_edgar_parser.exceptions import MissingRequiredElementError, UnresolvedReferenceError
from sec_edgar_parser.models.values import coerce_value
from sec_edgar_parser.models.xbrl import Context, Fact, Period, Segment, XbrlDocument
from sec_edgar_parser.parsers.xml_reader import (
    child_text,
    find_child,
    find_children,
    iter_elements,
    local_name,
    namespace,
    parse_document,
    strip_prefix,
)

logger = logging.getLogger(__name__)

XBRLDI_PREFIX = 'xbrldi'


def build_unit_index(root: etree._Element) -> Dict[str, str]:
    """
    Build id -> measure mapping from top-level <unit> declarations.

    A bare <measure> resolves to its text; a <divide> resolves to
    'numerator/denominator'. Missing ids and measures degrade to empty
    strings rather than raising.

    Args:
        root: Instance document root (<xbrl>)

    Returns:
        Dictionary mapping unit id to canonical measure string
        Example: {'USD': 'iso4217:USD', 'USDPerShare': 'iso4217:USD/xbrli:shares'}
    """
    units = {}

    for unit in find_children(root, 'unit'):
        unit_id = unit.get('id', '')

        divide = find_child(unit, 'divide')
        if divide is not None:
            numerator = child_text(find_child(divide, 'unitNumerator'), 'measure') or ''
            denominator = child_text(find_child(divide, 'unitDenominator'), 'measure') or ''
            measure = f"{numerator}/{denominator}"
        else:
            measure = child_text(unit, 'measure') or ''

        units[unit_id] = measure

    return units


def _parse_segments(entity: etree._Element, xbrldi_ns: str) -> List[Segment]:
    segments = []
    for segment in find_children(entity, 'segment'):
        for member in find_children(segment, 'explicitMember'):
            if namespace(member) != xbrldi_ns:
                continue

            dimension = member.get('dimension')
            if dimension is None:
                raise MissingRequiredElementError('explicitMember/@dimension', parent='segment')
            if member.text is None:
                raise MissingRequiredElementError('explicitMember', parent='segment')

            segments.append(Segment(
                dimension=strip_prefix(dimension),
                member=strip_prefix(member.text)
            ))
    return segments


def _parse_period(context: etree._Element) -> Period:
    period = find_child(context, 'period')
    return Period(
        instant=child_text(period, 'instant'),
        start_date=child_text(period, 'startDate'),
        end_date=child_text(period, 'endDate'),
    )


def build_context_index(root: etree._Element) -> Dict[str, Context]:
    """
    Build id -> Context mapping from top-level <context> declarations.

    CRITICAL: a context without an id or without an entity/identifier chain
    aborts the whole document. Every fact that references the context would
    otherwise be joined against an anonymous entity.

    Args:
        root: Instance document root (<xbrl>)

    Returns:
        Dictionary mapping context id to Context

    Raises:
        MissingRequiredElementError: If a context id, entity, identifier,
            or an explicit member's dimension/text is missing
    """
    xbrldi_ns = root.nsmap.get(XBRLDI_PREFIX) or ''
    contexts = {}

    for context in find_children(root, 'context'):
        context_id = context.get('id')
        if context_id is None:
            raise MissingRequiredElementError('context/@id')

        entity = find_child(context, 'entity')
        if entity is None:
            raise MissingRequiredElementError('entity', parent='context')

        identifier = child_text(entity, 'identifier')
        if identifier is None:
            raise MissingRequiredElementError('identifier', parent='entity')

        contexts[context_id] = Context(
            entity=identifier,
            segments=_parse_segments(entity, xbrldi_ns),
            period=_parse_period(context),
        )

    return contexts


def extract_facts(
    root: etree._Element,
    contexts: Dict[str, Context],
    units: Dict[str, str],
    strict_references: bool = False
) -> List[Fact]:
    """
    Join top-level fact elements against the context and unit dictionaries.

    Elements whose contextRef is not declared are skipped (or rejected when
    ``strict_references`` is set). An unresolvable unitRef leaves
    ``unit=None`` under the default behaviour.

    Args:
        root: Instance document root
        contexts: Output of build_context_index()
        units: Output of build_unit_index()
        strict_references: Raise instead of dropping/ignoring

    Returns:
        Facts in document order

    Raises:
        UnresolvedReferenceError: Only with strict_references=True
    """
    facts = []
    dropped = 0

    for element in iter_elements(root):
        context_ref = element.get('contextRef')
        if context_ref is None:
            continue

        concept = local_name(element)
        context = contexts.get(context_ref)
        if context is None:
            if strict_references:
                raise UnresolvedReferenceError('contextRef', context_ref, concept)
            logger.debug(f"Dropping fact '{concept}': contextRef '{context_ref}' not declared")
            dropped += 1
            continue

        unit = _resolve_unit(element, units, concept, strict_references)

        facts.append(Fact(
            context=context.model_copy(deep=True),
            concept=concept,
            value=coerce_value(element.text or ''),
            decimals=element.get('decimals'),
            unit=unit,
        ))

    if dropped:
        logger.debug(f"Dropped {dropped} facts with undeclared contexts")

    return facts


def _resolve_unit(
    element: etree._Element,
    units: Dict[str, str],
    concept: str,
    strict_references: bool
) -> Optional[str]:
    unit_ref = element.get('unitRef')
    if unit_ref is None:
        return None

    unit = units.get(unit_ref)
    if unit is None and strict_references:
        raise UnresolvedReferenceError('unitRef', unit_ref, concept)
    return unit


def parse_xbrl(
    xml: Union[str, bytes],
    strict_references: Optional[bool] = None
) -> XbrlDocument:
    """
    Parse an XBRL instance document into facts.

    Args:
        xml: Instance document text
        strict_references: Override ParserConfig.strict_references

    Returns:
        XbrlDocument with facts in document order

    Raises:
        MalformedXmlError: If the input is not well-formed
        MissingRequiredElementError: If a context is missing its id or entity
        UnresolvedReferenceError: Only when strict references are enabled

    Example:
        >>> doc = parse_xbrl(xml)
        >>> doc.facts[0].concept, doc.facts[0].unit
        ('Assets', 'USD')
    """
    config = get_parser_config()
    if strict_references is None:
        strict_references = config.strict_references

    root = parse_document(xml, huge_tree=config.huge_tree)

    units = build_unit_index(root)
    contexts = build_context_index(root)
    facts = extract_facts(root, contexts, units, strict_references)

    logger.debug(
        f"Parsed XBRL instance: {len(units)} units, {len(contexts)} contexts, "
        f"{len(facts)} facts"
    )
    return XbrlDocument(facts=facts)
