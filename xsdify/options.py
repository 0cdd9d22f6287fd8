""" Conversion options for the JSON Schema to XSD converter """

from dataclasses import dataclass
from typing import Any, Dict, Optional

from xsdify.keywords import DEFAULT_ROOT_ELEMENT, XSD_NAMESPACE

# option names accepted by from_dict, including the camelCase spelling of the options object
_ALIASES = {
    'xmlNamespace': 'xml_namespace',
    'targetNamespace': 'target_namespace',
    'elementFormDefault': 'element_form_default',
    'rootElementName': 'root_element_name',
    'rootElement': 'root_element_name',
    'resolveRefs': 'resolve_refs',
}


@dataclass(frozen=True)
class ConversionOptions:
    """ Settings for a single conversion """
    xml_namespace: str = XSD_NAMESPACE
    target_namespace: Optional[str] = None
    element_form_default: Optional[str] = None
    root_element_name: str = DEFAULT_ROOT_ELEMENT
    resolve_refs: bool = True

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]]) -> 'ConversionOptions':
        """Build options from a dict, ignoring unknown keys and non-string values for string settings."""
        if not options:
            return cls()
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name == 'resolve_refs':
                if isinstance(value, bool):
                    values[name] = value
            elif name in ('xml_namespace', 'target_namespace', 'element_form_default', 'root_element_name'):
                if isinstance(value, str):
                    values[name] = value
        return cls(**values)
