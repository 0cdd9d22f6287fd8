import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from xsdify.keywords import (FACETS, LEGAL_KEYWORDS, TYPES, facet_name, format_type_name, legal_keywords,
                             primitive_type_name)


class TestKeywordTables(unittest.TestCase):

    def test_recognized_types(self):
        self.assertEqual(TYPES, {"string", "array", "object", "number", "integer", "boolean", "null"})

    def test_legal_keywords(self):
        self.assertIn("maxLength", legal_keywords("string"))
        self.assertIn("format", legal_keywords("string"))
        self.assertIn("exclusiveMinimum", legal_keywords("integer"))
        self.assertEqual(legal_keywords("integer"), legal_keywords("number"))
        self.assertNotIn("maxLength", legal_keywords("number"))
        self.assertEqual(legal_keywords("unknown"), frozenset())

    def test_facet_names(self):
        self.assertEqual(facet_name("string", "maxLength"), "xs:maxLength")
        self.assertEqual(facet_name("string", "pattern"), "xs:pattern")
        self.assertEqual(facet_name("integer", "minimum"), "xs:minInclusive")
        self.assertEqual(facet_name("number", "exclusiveMaximum"), "xs:maxExclusive")
        self.assertEqual(facet_name("boolean", "enum"), "xs:enumeration")
        self.assertEqual(facet_name("string", "const"), "xs:enumeration")
        self.assertIsNone(facet_name("integer", "multipleOf"))
        self.assertIsNone(facet_name("string", "minimum"))

    def test_primitive_type_names(self):
        self.assertEqual(primitive_type_name("string"), "xs:string")
        self.assertEqual(primitive_type_name("integer"), "xs:integer")
        self.assertEqual(primitive_type_name("number"), "xs:decimal")
        self.assertEqual(primitive_type_name("boolean"), "xs:boolean")
        self.assertIsNone(primitive_type_name("null"))
        self.assertIsNone(primitive_type_name("object"))

    def test_format_type_names(self):
        self.assertEqual(format_type_name("date-time"), "xs:dateTime")
        self.assertEqual(format_type_name("date"), "xs:date")
        self.assertEqual(format_type_name("time"), "xs:time")
        self.assertIsNone(format_type_name("email"))
        self.assertIsNone(format_type_name(42))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            LEGAL_KEYWORDS["string"] = frozenset()  # type: ignore[index]
        with self.assertRaises(TypeError):
            FACETS["string"]["pattern"] = "xs:other"  # type: ignore[index]


if __name__ == '__main__':
    unittest.main()
