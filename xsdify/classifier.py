""" Classifies JSON Schema nodes and resolves their XSD restrictions """

import json
from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from xsdify.keywords import (EXCLUSIVE_FACETS, FACET_COMMON_KEYWORDS, NEGATIVE_INTEGER, NON_NEGATIVE_INTEGER,
                             NON_POSITIVE_INTEGER, POSITIVE_INTEGER, TYPES, facet_name, format_type_name,
                             legal_keywords, primitive_type_name)


class SchemaKind(Enum):
    """ The effective type of a schema node """
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_primitive(self) -> bool:
        return self not in (SchemaKind.ARRAY, SchemaKind.OBJECT)

    @classmethod
    def from_name(cls, name: Any) -> Optional['SchemaKind']:
        """Return the kind for a JSON Schema type name, None if the name is not recognized."""
        if not isinstance(name, str) or name not in TYPES:
            return None
        return cls(name)


@dataclass(frozen=True)
class Restriction:
    """ Result of resolving a node's restrictions.

    base_type is the qualified XSD type used either as the restriction base or
    as the element's type attribute. facets holds (facet name, literal value)
    pairs in emission order. is_restricted tells whether a simpleType wrapper
    is required.
    """
    base_type: Optional[str]
    facets: Tuple[Tuple[str, str], ...] = ()
    is_restricted: bool = False


def effective_type(node: Any) -> Optional[SchemaKind]:
    """Determine the effective type of a schema node.

    A string type is used as is. For a list of types the first non-null
    string entry wins; a list holding only "null" yields NULL. Anything else
    is undetermined (None).
    """
    if not isinstance(node, dict):
        return None
    declared = node.get('type')
    if isinstance(declared, str):
        return SchemaKind.from_name(declared)
    if isinstance(declared, list):
        names = [t for t in declared if isinstance(t, str)]
        for name in names:
            if name != 'null':
                return SchemaKind.from_name(name)
        if 'null' in names:
            return SchemaKind.NULL
    return None


def is_nillable(node: Any) -> bool:
    """True if the node's type list admits null."""
    return isinstance(node, dict) and isinstance(node.get('type'), list) and 'null' in node['type']


def is_required(node: Any, key: Optional[str] = None, parent_required: Iterable[str] = ()) -> bool:
    """Decide whether a node is a mandatory element.

    Honors both the per-node boolean flag (draft 3) and the parent's array of
    required property names (draft 4 and later).
    """
    if isinstance(node, dict) and node.get('required') is True:
        return True
    return key is not None and key in parent_required


def required_names(node: Any) -> Set[str]:
    """Names listed in an object node's 'required' array."""
    if isinstance(node, dict) and isinstance(node.get('required'), list):
        return {name for name in node['required'] if isinstance(name, str)}
    return set()


def xsd_literal(value: Any, integral: bool = False) -> str:
    """Render a JSON value as an XSD attribute literal.

    Numbers are written in plain decimal notation, never in exponent form.
    With integral set, whole-valued floats lose their fractional part.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        number = Decimal(repr(value))
        if not number.is_finite():
            return json.dumps(value)
        if integral and number == number.to_integral_value():
            number = number.to_integral_value()
        return format(number, 'f')
    return json.dumps(value, separators=(',', ':'))


INTEGRAL_KEYWORDS = frozenset(["maxLength", "minLength"])


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _integer_boundary(node: Dict[str, Any], consumed: Set[str]) -> Optional[str]:
    base_type = None
    minimum, exclusive_minimum = node.get('minimum'), node.get('exclusiveMinimum')
    if _is_number(minimum) and minimum == 0 and isinstance(exclusive_minimum, bool):
        base_type = POSITIVE_INTEGER if exclusive_minimum else NON_POSITIVE_INTEGER
        consumed.update(('minimum', 'exclusiveMinimum'))
    maximum, exclusive_maximum = node.get('maximum'), node.get('exclusiveMaximum')
    if _is_number(maximum) and maximum == 0 and isinstance(exclusive_maximum, bool):
        base_type = NEGATIVE_INTEGER if exclusive_maximum else NON_NEGATIVE_INTEGER
        consumed.update(('maximum', 'exclusiveMaximum'))
    return base_type


def resolve_restrictions(node: Dict[str, Any], kind: SchemaKind) -> Restriction:
    """Resolve the XSD base type and facets for a primitive node."""
    json_type = kind.value
    base_type = primitive_type_name(json_type)
    consumed: Set[str] = set()
    # facet overrides for inclusive bounds turned exclusive by a boolean flag
    renamed: Dict[str, str] = {}

    if kind is SchemaKind.INTEGER:
        boundary_type = _integer_boundary(node, consumed)
        if boundary_type:
            base_type = boundary_type

    if kind in (SchemaKind.INTEGER, SchemaKind.NUMBER):
        for bound, flag in (('minimum', 'exclusiveMinimum'), ('maximum', 'exclusiveMaximum')):
            if flag in consumed or not isinstance(node.get(flag), bool):
                continue
            consumed.add(flag)
            if node[flag] and bound in node:
                renamed[bound] = EXCLUSIVE_FACETS[bound]

    if kind is SchemaKind.STRING:
        date_type = format_type_name(node.get('format'))
        if date_type:
            base_type = date_type

    legal = legal_keywords(json_type) | FACET_COMMON_KEYWORDS
    candidates = [key for key in node.keys() if key in legal and key not in consumed and key != 'format']
    if not candidates:
        return Restriction(base_type)

    # facets whose values must be written as integers
    integral = kind is SchemaKind.INTEGER
    facets: List[Tuple[str, str]] = []
    for keyword in candidates:
        name = renamed.get(keyword) or facet_name(json_type, keyword)
        if not name:
            continue
        value = node[keyword]
        values = value if isinstance(value, list) and keyword != 'const' else [value]
        for item in values:
            if item is None:
                continue
            facets.append((name, xsd_literal(item, integral or keyword in INTEGRAL_KEYWORDS)))
    return Restriction(base_type, tuple(facets), True)
