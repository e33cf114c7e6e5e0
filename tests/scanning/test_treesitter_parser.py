"""Tests for tree-sitter parser wrapper."""

import pytest

from source_overlap.exceptions import ParsingError
from source_overlap.scanning.treesitter_parser import TreeSitterParser, node_text


class TestSupportedGrammars:
    """Test grammar registry."""

    @pytest.mark.parametrize("grammar", ["python", "rust", "typescript", "tsx"])
    def test_expected_grammars(self, grammar):
        """Python, Rust, TypeScript and TSX grammars are registered."""
        assert TreeSitterParser().is_grammar_supported(grammar)

    def test_unknown_grammar(self):
        """is_grammar_supported reflects the registry."""
        parser = TreeSitterParser()
        assert parser.is_grammar_supported("rust")
        assert not parser.is_grammar_supported("cobol")


class TestTreeSitterParser:
    """Test parsing through the wrapper."""

    def test_parse_python_returns_tree(self, parser):
        """parse() returns a tree for valid Python."""
        tree = parser.parse(b"def foo():\n    pass\n", "python")
        assert tree.root_node.type == "module"

    def test_parse_rust_returns_tree(self, parser):
        """parse() returns a tree for valid Rust."""
        tree = parser.parse(b"pub fn foo() {}\n", "rust")
        assert tree.root_node.type == "source_file"

    def test_parse_tsx(self, parser):
        """The TSX grammar accepts JSX."""
        tree = parser.parse(b"const a = <div>hi</div>;\n", "tsx")
        assert tree.root_node is not None

    def test_syntax_errors_still_produce_tree(self, parser):
        """Broken source yields a tree with error nodes, not an exception."""
        tree = parser.parse(b"def (:\n", "python")
        assert tree.root_node.has_error

    def test_unknown_grammar_raises(self, parser):
        """An unregistered grammar is a ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            parser.parse(b"x", "cobol", "legacy.cbl")
        assert exc_info.value.language == "cobol"
        assert exc_info.value.filepath == "legacy.cbl"

    def test_node_text_decodes(self, parser):
        """node_text returns str for a node."""
        tree = parser.parse(b"import os\n", "python")
        assert node_text(tree.root_node).strip() == "import os"
