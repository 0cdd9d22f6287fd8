import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from xsdify.xmlsink import XmlSink, XmlSinkError, pretty_print, sanitize_comment, strip_invalid_chars


class TestXmlSink(unittest.TestCase):

    def test_builds_nested_document(self):
        sink = XmlSink()
        sink.start_document().start_element("a").write_attribute("x", "1")
        sink.start_element("b").end_element()
        sink.end_element().end_document()
        self.assertEqual(sink.to_string(), '<a x="1"><b /></a>')

    def test_depth_tracks_open_elements(self):
        sink = XmlSink().start_document()
        self.assertEqual(sink.depth, 0)
        sink.start_element("a").start_element("b")
        self.assertEqual(sink.depth, 2)
        sink.end_element()
        self.assertEqual(sink.depth, 1)
        sink.end_element()
        self.assertEqual(sink.depth, 0)

    def test_comments(self):
        sink = XmlSink().start_document().start_element("a").write_comment("hello").end_element().end_document()
        self.assertEqual(sink.to_string(), '<a><!--hello--></a>')

    def test_misuse_raises(self):
        with self.assertRaises(XmlSinkError):
            XmlSink().start_element("a")
        sink = XmlSink().start_document()
        with self.assertRaises(XmlSinkError):
            sink.end_element()
        with self.assertRaises(XmlSinkError):
            sink.write_attribute("x", "1")
        with self.assertRaises(XmlSinkError):
            sink.write_comment("orphan")
        sink.start_element("a")
        with self.assertRaises(XmlSinkError):
            sink.to_string()
        with self.assertRaises(XmlSinkError):
            sink.end_document()
        sink.end_element()
        with self.assertRaises(XmlSinkError):
            sink.start_element("second")

    def test_sanitize_comment(self):
        self.assertEqual(sanitize_comment("a -- b"), "a - - b")
        self.assertEqual(sanitize_comment("a---b"), "a- - -b")
        self.assertEqual(sanitize_comment("trailing-"), "trailing- ")

    def test_strip_invalid_chars(self):
        self.assertEqual(strip_invalid_chars("a\u0001b\u001fc"), "abc")
        self.assertEqual(strip_invalid_chars("tab\tline\nend\r"), "tab\tline\nend\r")
        self.assertEqual(strip_invalid_chars("caf\u00e9 \U0001F600"), "caf\u00e9 \U0001F600")
        self.assertEqual(strip_invalid_chars("\ufffe\uffff"), "")

    def test_control_characters_are_dropped(self):
        self.assertEqual(sanitize_comment("a\u0001-\u0002-b"), "a- -b")
        sink = XmlSink().start_document().start_element("a").write_attribute("x", "1\u00082")
        sink.write_comment("note\u000b").end_element().end_document()
        text = sink.to_string()
        self.assertEqual(text, '<a x="12"><!--note--></a>')
        self.assertIn("<!--note-->", pretty_print(text))

    def test_pretty_print(self):
        text = pretty_print('<a><b c="1"/><!--note--></a>')
        lines = text.splitlines()
        self.assertEqual(lines[0], '<?xml version="1.0" encoding="UTF-8"?>')
        self.assertEqual(lines[1], '<a>')
        self.assertEqual(lines[2], '  <b c="1"/>')
        self.assertEqual(lines[3], '  <!--note-->')
        self.assertEqual(lines[4], '</a>')


if __name__ == '__main__':
    unittest.main()
