"""
Thin navigation layer over lxml for EDGAR documents.

EDGAR schemas are matched on local tag names: ownership and 13F documents
are frequently served with and without default namespaces, so
``find_child(node, 'issuer')`` matches ``<issuer>`` and ``<ns1:issuer>``
alike. Comments and processing instructions are never returned as children.
"""

from typing import Iterator, List, Optional, Union

from lxml import etree

from sec_edgar_parser.exceptions import MalformedXmlError


def parse_document(xml: Union[str, bytes], huge_tree: bool = True) -> etree._Element:
    """
    Parse an XML document and return its root element.

    Args:
        xml: Document text. ``str`` input is already decoded, so it is
            parsed as UTF-8 whatever encoding its XML declaration names;
            ``bytes`` input honours the declaration.
        huge_tree: Lift lxml's depth and text-size safety limits

    Returns:
        Root element

    Raises:
        MalformedXmlError: If the input is not well-formed
    """
    encoding = None
    if isinstance(xml, str):
        # Already decoded text: the declared encoding no longer applies
        xml = xml.encode('utf-8')
        encoding = 'utf-8'

    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=huge_tree,
        encoding=encoding,
    )
    try:
        root = etree.fromstring(xml, parser)
    except etree.XMLSyntaxError as e:
        raise MalformedXmlError(f"Malformed XML: {e}") from e

    if root is None:
        raise MalformedXmlError("Malformed XML: document has no root element")
    return root


def local_name(node: etree._Element) -> str:
    """Tag name with any namespace removed: '{uri}Assets' -> 'Assets'."""
    return etree.QName(node).localname


def namespace(node: etree._Element) -> str:
    """Namespace URI of the tag, or '' when unqualified."""
    return etree.QName(node).namespace or ''


def iter_elements(node: etree._Element) -> Iterator[etree._Element]:
    """Direct element children, skipping comments and processing instructions."""
    for child in node:
        if isinstance(child.tag, str):
            yield child


def find_child(node: etree._Element, tag: str) -> Optional[etree._Element]:
    """First direct child with the given local name, or None."""
    for child in iter_elements(node):
        if local_name(child) == tag:
            return child
    return None


def find_children(node: etree._Element, tag: str) -> List[etree._Element]:
    """All direct children with the given local name, in document order."""
    return [child for child in iter_elements(node) if local_name(child) == tag]


def child_text(node: Optional[etree._Element], tag: str) -> Optional[str]:
    """
    Text of the first child with the given local name.

    Returns None when either the child or its text is absent.
    """
    if node is None:
        return None
    child = find_child(node, tag)
    if child is None:
        return None
    return child.text


def strip_prefix(qualified: str) -> str:
    """
    Remove a namespace prefix: 'us-gaap:SomeAxis' -> 'SomeAxis'.

    Only text before the first ':' is removed; unprefixed values are
    returned unchanged.
    """
    _, sep, rest = qualified.partition(':')
    return rest if sep else qualified
