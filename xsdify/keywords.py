""" JSON Schema keyword tables and their XSD equivalents """

from types import MappingProxyType
from typing import Mapping, Optional

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
DEFAULT_ROOT_ELEMENT = "ROOT_OBJECT"

# JSON Schema type names
TYPES = frozenset(["string", "array", "object", "number", "integer", "boolean", "null"])

# restriction keywords that are legal per JSON Schema type
_NUMERIC_KEYWORDS = frozenset(["maximum", "minimum", "exclusiveMaximum", "exclusiveMinimum", "multipleOf"])
LEGAL_KEYWORDS: Mapping[str, frozenset] = MappingProxyType({
    "number": _NUMERIC_KEYWORDS,
    "integer": _NUMERIC_KEYWORDS,
    "string": frozenset(["maxLength", "minLength", "pattern", "format", "formatMaximum", "formatMinimum",
                         "formatExclusiveMaximum", "formatExclusiveMinimum"]),
    "array": frozenset(["maxItems", "minItems", "uniqueItems", "items", "additionalItems", "contains"]),
    "object": frozenset(["required", "properties", "patternProperties", "additionalProperties", "maxProperties",
                         "minProperties", "dependencies", "patternGroups", "patternRequired"]),
    "boolean": frozenset(),
    "null": frozenset(),
})

# keywords that may become facets regardless of the type
FACET_COMMON_KEYWORDS = frozenset(["enum", "const"])

_NUMERIC_FACETS = MappingProxyType({
    "maximum": "xs:maxInclusive",
    "minimum": "xs:minInclusive",
    "exclusiveMaximum": "xs:maxExclusive",
    "exclusiveMinimum": "xs:minExclusive",
})
FACETS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "string": MappingProxyType({
        "maxLength": "xs:maxLength",
        "minLength": "xs:minLength",
        "pattern": "xs:pattern",
        "formatMaximum": "xs:maxInclusive",
        "formatMinimum": "xs:minInclusive",
        "formatExclusiveMaximum": "xs:maxExclusive",
        "formatExclusiveMinimum": "xs:minExclusive",
    }),
    "number": _NUMERIC_FACETS,
    "integer": _NUMERIC_FACETS,
    "common": MappingProxyType({
        "enum": "xs:enumeration",
        "const": "xs:enumeration",
    }),
})

PRIMITIVE_TYPE_NAMES: Mapping[str, str] = MappingProxyType({
    "string": "xs:string",
    "number": "xs:decimal",
    "integer": "xs:integer",
    "boolean": "xs:boolean",
})

FORMAT_TYPE_NAMES: Mapping[str, str] = MappingProxyType({
    "date-time": "xs:dateTime",
    "date": "xs:date",
    "time": "xs:time",
})

POSITIVE_INTEGER = "xs:positiveInteger"
NON_POSITIVE_INTEGER = "xs:nonPositiveInteger"
NEGATIVE_INTEGER = "xs:negativeInteger"
NON_NEGATIVE_INTEGER = "xs:nonNegativeInteger"

# inclusive/exclusive facet pair for draft-4 style boolean exclusives
EXCLUSIVE_FACETS: Mapping[str, str] = MappingProxyType({
    "minimum": "xs:minExclusive",
    "maximum": "xs:maxExclusive",
})


def legal_keywords(json_type: str) -> frozenset:
    """Restriction keywords that are legal for the given JSON Schema type."""
    return LEGAL_KEYWORDS.get(json_type, frozenset())


def facet_name(json_type: str, keyword: str) -> Optional[str]:
    """XSD facet for a restriction keyword, or None if XSD has no equivalent."""
    if keyword in FACET_COMMON_KEYWORDS:
        return FACETS["common"][keyword]
    return FACETS.get(json_type, MappingProxyType({})).get(keyword)


def primitive_type_name(json_type: str) -> Optional[str]:
    """Qualified XSD type for a JSON Schema primitive type."""
    return PRIMITIVE_TYPE_NAMES.get(json_type)


def format_type_name(format_value: str) -> Optional[str]:
    """Qualified XSD type for a date/time string format. Other formats yield None."""
    if not isinstance(format_value, str):
        return None
    return FORMAT_TYPE_NAMES.get(format_value)
