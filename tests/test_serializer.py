"""Tests for the literal serializer."""

import logging
from locale_converter.models import Leaf, Node
from locale_converter.parser import parse_literal
from locale_converter.serializer import LiteralSerializer, serialize_literal


class TestLiteralSerializer:
    """Tests for LiteralSerializer class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.serializer = LiteralSerializer()

    def test_serialize_sample(self, sample_tree):
        """Test exact output layout."""
        assert self.serializer.serialize(sample_tree) == (
            "export default {\n"
            "  home: {\n"
            "    title: 'Welcome'\n"
            "  },\n"
            "  footer: 'Bye'\n"
            "} as const;\n"
        )

    def test_serialize_empty_root(self):
        """Test serializing an empty tree."""
        assert serialize_literal(Node()) == "export default {\n} as const;\n"

    def test_serialize_empty_nested_node(self):
        """Test closing brace indentation of an empty nested object."""
        assert serialize_literal(Node({"a": Node()})) == (
            "export default {\n"
            "  a: {\n"
            "  }\n"
            "} as const;\n"
        )

    def test_escape_single_quote(self):
        """Test that single quotes in values are escaped."""
        text = serialize_literal(Node({"msg": Leaf("it's fine")}))

        assert "  msg: 'it\\'s fine'\n" in text
        assert parse_literal(text)["msg"] == Leaf("it's fine")

    def test_other_characters_pass_through(self):
        """Test that newlines and backslashes are written as-is."""
        text = serialize_literal(Node({"path": Leaf("C:\\dir\nnext")}))

        assert "  path: 'C:\\dir\nnext'\n" in text

    def test_key_quoting(self):
        """Test bare and quoted key rendering."""
        text = serialize_literal(Node({
            "nav-bar": Leaf("a"),
            "navBar": Leaf("b"),
            "2fa": Leaf("c"),
            "$ok": Leaf("d"),
            "with space": Leaf("e"),
            "_private": Leaf("f"),
        }))

        assert "  'nav-bar': 'a',\n" in text
        assert "  navBar: 'b',\n" in text
        assert "  '2fa': 'c',\n" in text
        assert "  $ok: 'd',\n" in text
        assert "  'with space': 'e',\n" in text
        assert "  _private: 'f'\n" in text

    def test_render_key(self):
        """Test the key rendering helper directly."""
        assert LiteralSerializer.render_key("title") == "title"
        assert LiteralSerializer.render_key("nav-bar") == "'nav-bar'"
        assert LiteralSerializer.render_key("a.b") == "'a.b'"

    def test_keys_are_not_escaped(self, caplog):
        """Test that quotes in keys are written verbatim and reported."""
        with caplog.at_level(logging.WARNING):
            text = self.serializer.serialize(Node({"it's": Leaf("x")}))

        assert "  'it's': 'x'\n" in text
        assert "will not parse back" in caplog.text

    def test_literal_round_trip(self, nested_tree):
        """Test that parsing serialized output gives the same tree."""
        text = serialize_literal(nested_tree)
        reparsed = parse_literal(text)

        assert reparsed == nested_tree
        assert list(reparsed.keys()) == list(nested_tree.keys())

    def test_round_trip_quote_after_backslash(self):
        """Test a backslash directly before a single quote."""
        tree = Node({"odd": Leaf("a\\'b")})

        assert parse_literal(serialize_literal(tree)) == tree
