"""
Schema-driven record mapping.

One recursive-descent engine for every EDGAR record type. The shape of each
record comes from its XmlField annotations (see models/fields.py); the decode
rule comes from the field type:

    str               -> element text, verbatim
    int               -> parse_int()
    bool              -> parse_flag()
    EdgarRecord       -> recurse into the child element
    List[EdgarRecord] -> every matching child, in document order
    List[int]         -> every matching child, split on XmlField.separator

or from an explicit ``XmlField.decoder`` (e.g. coerce_value for the value
half of a value+footnote leaf).

The policy is fixed per mapper instance, so one document never mixes
strict and lenient behaviour.
"""

import logging
import types
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from lxml import etree

from sec_edgar_parser.config import ParsePolicy
from sec_edgar_parser.exceptions import MissingRequiredElementError, TypeCoercionError
from sec_edgar_parser.models.fields import EdgarRecord, XmlField
from sec_edgar_parser.parsers.coercion import parse_flag, parse_int
from sec_edgar_parser.parsers.xml_reader import find_child, find_children, local_name

logger = logging.getLogger(__name__)

R = TypeVar('R', bound=EdgarRecord)

_UNION_TYPES = (Union, types.UnionType)

_TYPE_DECODERS: Dict[type, Callable[[str], Any]] = {
    str: str,
    int: parse_int,
    bool: parse_flag,
}

_TYPE_NAMES = {
    int: 'integer',
    bool: 'boolean',
}


def _unwrap(annotation: Any) -> Tuple[Any, bool]:
    """
    Reduce a field annotation to (target type, is_list).

    Optional[X] -> (X, False); List[X] -> (X, True)
    """
    origin = get_origin(annotation)
    if origin in _UNION_TYPES:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
        return annotation, False
    if origin in (list, List):
        return get_args(annotation)[0], True
    return annotation, False


def _is_record(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, EdgarRecord)


class RecordMapper:
    """
    Maps an lxml element onto an EdgarRecord subclass.

    Args:
        policy: STRICT raises on the first missing required element or
            unparseable required leaf; LENIENT turns both into None.

    Example:
        >>> mapper = RecordMapper(ParsePolicy.LENIENT)
        >>> document = mapper.map(root, OwnershipDocument)
    """

    def __init__(self, policy: ParsePolicy):
        self.policy = ParsePolicy(policy)

    @property
    def strict(self) -> bool:
        return self.policy is ParsePolicy.STRICT

    def map(self, node: etree._Element, model: Type[R]) -> R:
        """Build one record from ``node`` using the model's field table."""
        values = {}
        for name, field in model.xml_fields().items():
            annotation = model.model_fields[name].annotation
            values[name] = self._map_field(node, field, annotation)
        return model(**values)

    def _map_field(self, node: etree._Element, field: XmlField, annotation: Any) -> Any:
        target, is_list = _unwrap(annotation)

        if is_list:
            return self._map_list(node, field, target)

        if _is_record(target):
            child = find_child(node, field.tag) if field.tag else node
            if child is None:
                return self._missing(node, field)
            return self.map(child, target)

        raw = self._read_raw(node, field)
        if raw is None:
            return self._missing(node, field)
        return self._decode(raw, field, target)

    def _map_list(self, node: etree._Element, field: XmlField, item_type: Any) -> list:
        containers = find_children(node, field.container) if field.container else [node]
        items = []
        for container in containers:
            for element in find_children(container, field.tag):
                if _is_record(item_type):
                    items.append(self.map(element, item_type))
                elif field.separator:
                    items.extend(self._split_items(element, field, item_type))
                elif element.text is not None:
                    decoded = self._decode(element.text, field, item_type)
                    if decoded is not None:
                        items.append(decoded)
        return items

    def _split_items(self, element: etree._Element, field: XmlField, item_type: Any) -> list:
        items = []
        for part in (element.text or '').split(field.separator):
            part = part.strip()
            if not part:
                continue
            decoded = self._decode(part, field, item_type)
            if decoded is not None:
                items.append(decoded)
        return items

    def _read_raw(self, node: etree._Element, field: XmlField) -> Optional[str]:
        element = find_child(node, field.tag) if field.tag else node
        if element is None:
            return None
        if field.attribute:
            return element.get(field.attribute)
        return element.text

    def _decode(self, raw: str, field: XmlField, target: Any) -> Any:
        decoder = field.decoder or _TYPE_DECODERS.get(target)
        if decoder is None:
            raise TypeError(f"No decoder for field '{field.label}' of type {target!r}")

        try:
            return decoder(raw)
        except ValueError:
            expected = _TYPE_NAMES.get(target, 'value')
            if self.strict and (field.required or field.separator):
                raise TypeCoercionError(field.label, raw, expected)
            logger.debug(f"Discarding unparseable {expected} in '{field.label}': {raw!r}")
            return None

    def _missing(self, node: etree._Element, field: XmlField) -> None:
        if self.strict and field.required:
            raise MissingRequiredElementError(field.label, parent=local_name(node))
        return None
