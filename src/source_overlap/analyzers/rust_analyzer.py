"""Rust language analyzer"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..scanning.syntax import ImportInfo
from ..scanning.treesitter_parser import node_text
from .base import SourceAnalyzer

PATH_KEYWORDS = ("crate", "self", "super")

# Top-level items that export their name when marked `pub`
EXPORTABLE_ITEMS = frozenset(
    {
        "function_item",
        "struct_item",
        "enum_item",
        "type_item",
        "const_item",
        "static_item",
        "trait_item",
        "impl_item",
    }
)

SEPARATOR = "::"


class RustAnalyzer(SourceAnalyzer):
    """Extracts `use` declarations and `pub` items from Rust sources.

    Handles:
        use std::path::Path;            -> ("std::path", ["Path"])
        use std::io::{self, Read};      -> ("std::io", ["self", "Read"])
        use super::*;                   -> ("super", ["*"])
        use std::fmt::Result as FmtRes; -> ("std::fmt", ["FmtRes"])
        use serde;                      -> ("", ["serde"])
        use {a, b};                     -> ("", ["a", "b"])
        use a::{c::{d, e}, f::*};       -> ("a", ["c::{d, e}", "f::*"])
    """

    language = "rust"
    default_grammar = "rust"

    def _extract_imports(self, node: Any) -> Iterable[ImportInfo]:
        if node.type != "use_declaration":
            return []
        info = self._use_target(node)
        return [info] if info is not None else []

    def _extract_export(self, node: Any) -> Optional[str]:
        if node.type not in EXPORTABLE_ITEMS:
            return None
        if not self._has_child(node, "visibility_modifier"):
            return None
        return self._find_child_text(node, ("identifier", "type_identifier"))

    def _use_target(self, node: Any) -> Optional[ImportInfo]:
        for child in node.children:
            kind = child.type
            if kind == "scoped_identifier":
                parts = self._path_parts(child)
                if not parts:
                    return None
                return ImportInfo(SEPARATOR.join(parts[:-1]), [parts[-1]])
            if kind == "scoped_use_list":
                return self._scoped_use_list(child)
            if kind == "use_wildcard":
                return ImportInfo(SEPARATOR.join(self._path_parts(child)), ["*"])
            if kind == "use_as_clause":
                return self._use_as_clause(child)
            if kind == "identifier":
                return ImportInfo("", [node_text(child)])
            if kind in PATH_KEYWORDS:
                return ImportInfo(node_text(child), [])
            if kind == "use_list":
                return ImportInfo("", self._use_list_items(child))
        return None

    def _path_parts(self, node: Any) -> list[str]:
        """Path segments of a scoped_identifier, or of the prefix before `::{...}` / `::*`."""
        parts: list[str] = []
        for child in node.children:
            if child.type == "scoped_identifier":
                parts.extend(self._path_parts(child))
            elif child.type == "identifier" or child.type in PATH_KEYWORDS:
                parts.append(node_text(child))
        return parts

    def _scoped_use_list(self, node: Any) -> ImportInfo:
        items: list[str] = []
        use_list = self._find_child_by_type(node, ("use_list",))
        if use_list is not None:
            items = self._use_list_items(use_list)
        return ImportInfo(SEPARATOR.join(self._path_parts(node)), items)

    def _use_list_items(self, node: Any) -> list[str]:
        items: list[str] = []
        for child in node.children:
            if child.type in ("identifier", "self"):
                items.append(node_text(child))
            elif child.type == "use_as_clause":
                alias = self._alias_of(child)
                if alias:
                    items.append(alias)
            elif child.type in ("scoped_identifier", "scoped_use_list", "use_wildcard"):
                # {sub::Item}, {sub::{A, B}} and {sub::*} keep the entry as written
                items.append(node_text(child))
        return items

    def _use_as_clause(self, node: Any) -> Optional[ImportInfo]:
        parts: list[str] = []
        alias: Optional[str] = None
        seen_as = False
        for child in node.children:
            if child.type == "as":
                seen_as = True
            elif seen_as:
                if child.type == "identifier":
                    alias = node_text(child)
            elif child.type == "scoped_identifier":
                parts.extend(self._path_parts(child))
            elif child.type == "identifier" or child.type in PATH_KEYWORDS:
                parts.append(node_text(child))

        if not parts:
            return None
        original = parts.pop()
        return ImportInfo(SEPARATOR.join(parts), [alias or original])

    @staticmethod
    def _alias_of(node: Any) -> Optional[str]:
        """Alias of a use_as_clause nested in braces, else its first identifier."""
        seen_as = False
        for child in node.children:
            if child.type == "as":
                seen_as = True
            elif seen_as and child.type == "identifier":
                return node_text(child)
        for child in node.children:
            if child.type == "identifier":
                return node_text(child)
        return None
