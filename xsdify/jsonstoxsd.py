# pylint: disable=line-too-long

""" JsonSchemaToXSD class for converting JSON Schema documents to XML Schema (XSD) """

import json
import logging
import os
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from xsdify.classifier import (SchemaKind, effective_type, is_nillable, is_required, required_names,
                               resolve_restrictions)
from xsdify.options import ConversionOptions
from xsdify.refs import inline_local_refs
from xsdify.xmlsink import XmlSink, pretty_print

logger = logging.getLogger(__name__)

XS_SCHEMA = "xs:schema"
XS_ELEMENT = "xs:element"
XS_SEQUENCE = "xs:sequence"
XS_SIMPLE_TYPE = "xs:simpleType"
XS_COMPLEX_TYPE = "xs:complexType"
XS_RESTRICTION = "xs:restriction"


class RootState(Enum):
    """ Lifecycle of the synthetic root element """
    NO_ROOT_YET = "no_root_yet"
    ROOT_OPEN = "root_open"
    ROOT_CLOSED = "root_closed"


class EmissionContext:
    """ Per-conversion state: the sink being written and the root element bookkeeping """

    def __init__(self, sink: XmlSink, root_element_name: str):
        self.sink = sink
        self.root_element_name = root_element_name
        self.root_state = RootState.NO_ROOT_YET

    def open_root(self) -> None:
        """Open the synthetic root element. Allowed exactly once per conversion."""
        if self.root_state is not RootState.NO_ROOT_YET:
            raise RuntimeError(f"Root element cannot be opened in state {self.root_state.name}")
        self.sink.start_element(XS_ELEMENT).write_attribute("name", self.root_element_name)
        self.root_state = RootState.ROOT_OPEN

    def close_root(self) -> None:
        """Close the synthetic root element opened by open_root."""
        if self.root_state is not RootState.ROOT_OPEN:
            raise RuntimeError(f"Root element cannot be closed in state {self.root_state.name}")
        self.sink.end_element()
        self.root_state = RootState.ROOT_CLOSED


class JsonSchemaToXSD:
    """ Converts JSON Schema to XSD """

    def __init__(self, options: Optional[ConversionOptions] = None):
        self.options = options or ConversionOptions()

    def write_comments(self, ctx: EmissionContext, node: Dict[str, Any]) -> None:
        """Write title and description as comments ahead of the node's element."""
        for key in ('title', 'description'):
            text = node.get(key)
            if isinstance(text, str):
                ctx.sink.write_comment(text)

    def write_occurrence(self, ctx: EmissionContext, node: Dict[str, Any], key: Optional[str], parent_required: Iterable[str]) -> None:
        """Write nillable and occurrence attributes on the currently open element."""
        if is_nillable(node):
            ctx.sink.write_attribute("nillable", "true")
        if is_required(node, key, parent_required):
            ctx.sink.write_attribute("minOccurs", "1").write_attribute("maxOccurs", "1")

    def process_object(self, ctx: EmissionContext, node: Dict[str, Any], key: Optional[str], parent_required: Iterable[str]) -> None:
        """Emit a complexType/sequence for an object node and recurse into its properties."""
        opened_root = False
        opened_element = False
        if ctx.root_state is RootState.NO_ROOT_YET:
            self.write_comments(ctx, node)
            ctx.open_root()
            opened_root = True
        elif key is not None:
            self.write_comments(ctx, node)
            ctx.sink.start_element(XS_ELEMENT).write_attribute("name", key)
            self.write_occurrence(ctx, node, key, parent_required)
            opened_element = True

        ctx.sink.start_element(XS_COMPLEX_TYPE).start_element(XS_SEQUENCE)
        properties = node.get('properties')
        if isinstance(properties, dict):
            required = required_names(node)
            for prop_name, prop_schema in properties.items():
                if isinstance(prop_schema, dict):
                    self.process_node(ctx, prop_schema, prop_name, required)
                else:
                    logger.debug("Skipping property %s, schema is not an object", prop_name)
        ctx.sink.end_element().end_element()

        if opened_element:
            ctx.sink.end_element()
        if opened_root:
            ctx.close_root()

    def process_array(self, ctx: EmissionContext, node: Dict[str, Any], key: Optional[str], parent_required: Iterable[str]) -> None:
        """Emit an element for an array node and recurse into its items."""
        is_root = key is None and ctx.root_state is RootState.NO_ROOT_YET
        if is_root:
            ctx.open_root()
            if is_nillable(node):
                ctx.sink.write_attribute("nillable", "true")
        else:
            ctx.sink.start_element(XS_ELEMENT)
            if key is not None:
                ctx.sink.write_attribute("name", key)
            self.write_occurrence(ctx, node, key, parent_required)

        items = node.get('items')
        if isinstance(items, dict):
            items = [items]
        if isinstance(items, list):
            for item in items:
                if isinstance(item, dict):
                    self.process_node(ctx, item)

        if is_root:
            ctx.close_root()
        else:
            ctx.sink.end_element()

    def process_primitive(self, ctx: EmissionContext, node: Dict[str, Any], kind: SchemaKind, key: Optional[str], parent_required: Iterable[str]) -> None:
        """Emit a single element for a primitive node, either typed directly or with a restriction."""
        self.write_comments(ctx, node)
        is_root = key is None and ctx.root_state is RootState.NO_ROOT_YET
        if is_root:
            ctx.open_root()
        else:
            ctx.sink.start_element(XS_ELEMENT)
            if key is not None:
                ctx.sink.write_attribute("name", key)
        if is_root:
            # occurrence constraints are not allowed on global elements
            if is_nillable(node):
                ctx.sink.write_attribute("nillable", "true")
        else:
            self.write_occurrence(ctx, node, key, parent_required)

        restriction = resolve_restrictions(node, kind)
        if restriction.is_restricted and restriction.base_type:
            ctx.sink.start_element(XS_SIMPLE_TYPE).start_element(XS_RESTRICTION)
            ctx.sink.write_attribute("base", restriction.base_type)
            for facet, value in restriction.facets:
                ctx.sink.start_element(facet).write_attribute("value", value).end_element()
            ctx.sink.end_element().end_element()
        elif restriction.base_type:
            ctx.sink.write_attribute("type", restriction.base_type)

        if is_root:
            ctx.close_root()
        else:
            ctx.sink.end_element()

    def process_node(self, ctx: EmissionContext, node: Dict[str, Any], key: Optional[str] = None, parent_required: Iterable[str] = ()) -> None:
        """Dispatch a schema node on its effective type."""
        kind = effective_type(node)
        logger.debug("Processing node %s as %s", key, kind.value if kind else "undetermined")
        if kind is SchemaKind.OBJECT:
            self.process_object(ctx, node, key, parent_required)
        elif kind is SchemaKind.ARRAY:
            self.process_array(ctx, node, key, parent_required)
        elif kind is not None and kind.is_primitive:
            self.process_primitive(ctx, node, kind, key, parent_required)
        else:
            # no recognized type, pass through to nested schemas
            for member_key, member in node.items():
                if isinstance(member, dict):
                    self.process_node(ctx, member, member_key)

    def json_schema_to_xsd(self, json_schema: Any) -> str:
        """Convert a parsed JSON Schema document to pretty-printed XSD text."""
        sink = XmlSink()
        sink.start_document().start_element(XS_SCHEMA)
        sink.write_attribute("xmlns:xs", self.options.xml_namespace)
        if self.options.target_namespace is not None:
            sink.write_attribute("targetNamespace", self.options.target_namespace)
        if self.options.element_form_default is not None:
            sink.write_attribute("elementFormDefault", self.options.element_form_default)

        if self.options.resolve_refs:
            json_schema = inline_local_refs(json_schema)
        ctx = EmissionContext(sink, self.options.root_element_name)
        if isinstance(json_schema, dict):
            self.process_node(ctx, json_schema)
        else:
            logger.debug("Schema document is not an object, nothing to convert")

        sink.end_element().end_document()
        return pretty_print(sink.to_string())

    def save_xsd_to_file(self, xsd: str, xml_path: str) -> None:
        """Save the XML schema to a file."""
        os.makedirs(os.path.dirname(xml_path) or '.', exist_ok=True)
        with open(xml_path, 'w', encoding='utf-8') as xml_file:
            xml_file.write(xsd)

    def convert_json_schema_to_xsd(self, json_schema_path: str, xml_file_path: str) -> None:
        """Convert JSON Schema file to XML schema file."""
        with open(json_schema_path, 'r', encoding='utf-8') as json_file:
            json_schema = json.load(json_file)

        xsd = self.json_schema_to_xsd(json_schema)
        self.save_xsd_to_file(xsd, xml_file_path)


def convert_json_schema_to_xsd_string(json_schema: Any, options: ConversionOptions | Dict[str, Any] | None = None) -> str:
    """Convert an in-memory JSON Schema document to XSD text."""
    if not isinstance(options, ConversionOptions):
        options = ConversionOptions.from_dict(options)
    return JsonSchemaToXSD(options).json_schema_to_xsd(json_schema)


def convert_json_schema_to_xsd(json_schema_path: str, xsd_file_path: str, root_element_name: str = ConversionOptions.root_element_name,
                               target_namespace: Optional[str] = None, element_form_default: Optional[str] = None,
                               xml_namespace: str = ConversionOptions.xml_namespace, resolve_refs: bool = True) -> None:
    """Convert JSON Schema file to XSD file."""
    options = ConversionOptions(
        xml_namespace=xml_namespace or ConversionOptions.xml_namespace,
        target_namespace=target_namespace or None,
        element_form_default=element_form_default or None,
        root_element_name=root_element_name or ConversionOptions.root_element_name,
        resolve_refs=resolve_refs)
    JsonSchemaToXSD(options).convert_json_schema_to_xsd(json_schema_path, xsd_file_path)
