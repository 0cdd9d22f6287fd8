""" Incremental XML writer and pretty-printer used by the XSD emitter """

import re
from typing import List, Optional
import xml.etree.ElementTree as ET
from xml.etree.ElementTree import Element, SubElement, tostring
from xml.dom import minidom

# everything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile('[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]')


class XmlSinkError(ValueError):
    """ Raised when the sink is driven out of order """


class XmlSink:
    """ Streams start/attribute/end calls into an ElementTree document.

    Names are written as given, so prefixed names such as "xs:element" are
    kept verbatim and the caller is responsible for declaring the prefix.
    """

    def __init__(self) -> None:
        self.root: Optional[Element] = None
        self._stack: List[Element] = []
        self._started = False
        self._ended = False

    @property
    def depth(self) -> int:
        """Number of elements currently open."""
        return len(self._stack)

    def start_document(self) -> 'XmlSink':
        if self._started:
            raise XmlSinkError("Document already started")
        self._started = True
        return self

    def start_element(self, name: str) -> 'XmlSink':
        if not self._started or self._ended:
            raise XmlSinkError(f"Cannot start element {name} outside of a document")
        if self._stack:
            element = SubElement(self._stack[-1], name)
        elif self.root is None:
            element = Element(name)
            self.root = element
        else:
            raise XmlSinkError(f"Document already has a root element, cannot start {name}")
        self._stack.append(element)
        return self

    def write_attribute(self, name: str, value: str) -> 'XmlSink':
        if not self._stack:
            raise XmlSinkError(f"Cannot write attribute {name} without an open element")
        self._stack[-1].set(name, strip_invalid_chars(value))
        return self

    def write_comment(self, text: str) -> 'XmlSink':
        if not self._stack:
            raise XmlSinkError("Comments must be written inside an open element")
        self._stack[-1].append(ET.Comment(sanitize_comment(text)))
        return self

    def end_element(self) -> 'XmlSink':
        if not self._stack:
            raise XmlSinkError("No open element to end")
        self._stack.pop()
        return self

    def end_document(self) -> 'XmlSink':
        if self._stack:
            raise XmlSinkError(f"Cannot end document with {len(self._stack)} open element(s)")
        self._ended = True
        return self

    def to_string(self) -> str:
        if self.root is None:
            raise XmlSinkError("Document has no root element")
        if self._stack:
            raise XmlSinkError(f"Cannot serialize document with {len(self._stack)} open element(s)")
        return tostring(self.root, encoding='unicode')


def strip_invalid_chars(text: str) -> str:
    """Remove characters that XML 1.0 does not allow in a document."""
    return _INVALID_XML_CHARS.sub('', str(text))


def sanitize_comment(text: str) -> str:
    """Make text safe to place inside an XML comment."""
    text = strip_invalid_chars(text)
    while '--' in text:
        text = text.replace('--', '- -')
    if text.endswith('-'):
        text += ' '
    return text


def pretty_print(xml_text: str, indent: str = "  ") -> str:
    """Reformat an XML string with one construct per line and a UTF-8 declaration."""
    pretty_tree = minidom.parseString(xml_text.encode('utf-8')).toprettyxml(indent=indent, encoding='UTF-8')
    return pretty_tree.decode('utf-8')
