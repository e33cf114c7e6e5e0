"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing across the supported
grammars. Parsers are created lazily, one per grammar, on first use.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "python", "pkg/mod.py")
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import tree_sitter
import tree_sitter_python
import tree_sitter_rust
import tree_sitter_typescript

from ..exceptions import ParsingError
from ..logging_config import get_logger

logger = get_logger(__name__)

# Grammar name -> function returning the raw language capsule.
# TSX is bundled with tree-sitter-typescript and exposed separately.
_GRAMMARS: dict[str, Callable[[], Any]] = {
    "python": tree_sitter_python.language,
    "rust": tree_sitter_rust.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}


def node_text(node: Any) -> str:
    """Decode a node's source text."""
    text = node.text
    if text is None:
        return ""
    return text.decode("utf-8", errors="replace")


class TreeSitterParser:
    """Wrapper around tree-sitter for multi-grammar parsing.

    A grammar that cannot be initialised, or a parse that yields no tree,
    raises ParsingError. It is never treated as an unsupported ecosystem.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, Any] = {}

    def _parser_for(self, grammar: str, filepath: str) -> Any:
        parser = self._parsers.get(grammar)
        if parser is not None:
            return parser

        if not self.is_grammar_supported(grammar):
            raise ParsingError(filepath, grammar, "no grammar registered")
        lang_fn = _GRAMMARS[grammar]

        try:
            # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
            lang_obj = tree_sitter.Language(lang_fn())
            parser = tree_sitter.Parser(lang_obj)
        except (TypeError, ValueError, RuntimeError) as e:
            logger.warning(f"Failed to initialise {grammar} grammar: {e}")
            raise ParsingError(filepath, grammar, f"grammar initialisation failed: {e}")

        self._parsers[grammar] = parser
        return parser

    def parse(self, code: bytes, grammar: str, filepath: Optional[str] = None) -> Any:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            grammar: Grammar name (e.g., "python", "tsx")
            filepath: Path used in error reports

        Returns:
            tree_sitter.Tree

        Raises:
            ParsingError: If the grammar cannot be loaded or no tree is produced
        """
        label = filepath or "<source>"
        parser = self._parser_for(grammar, label)
        try:
            tree = parser.parse(code)
        except (TypeError, ValueError, RuntimeError) as e:
            raise ParsingError(label, grammar, str(e))
        if tree is None or tree.root_node is None:
            raise ParsingError(label, grammar, "parser produced no syntax tree")
        return tree

    def is_grammar_supported(self, grammar: str) -> bool:
        """Check if a grammar is registered."""
        return grammar in _GRAMMARS
