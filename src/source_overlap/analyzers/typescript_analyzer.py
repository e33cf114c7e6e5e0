"""TypeScript/JavaScript language analyzer"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..scanning.syntax import ImportInfo
from ..scanning.treesitter_parser import node_text
from .base import SourceAnalyzer

EXPORTED_DECLARATIONS = (
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
    "abstract_class_declaration",
    "interface_declaration",
)

# Declarations allowed after `declare`; function_signature is the bodiless form
AMBIENT_DECLARATIONS = EXPORTED_DECLARATIONS + ("function_signature",)


def unquote(literal: str) -> str:
    """Strip the surrounding quotes of a string literal."""
    return literal.strip("'\"`")


class TypeScriptAnalyzer(SourceAnalyzer):
    """Extracts ES module imports and exported declarations.

    Handles:
        import React from 'react';              -> ("react", ["React"])
        import { a, b as c } from './util';     -> ("./util", ["a", "c"])
        import D, { e } from 'pkg';             -> ("pkg", ["D", "e"])
        import * as lodash from 'lodash';       -> ("lodash", ["* as lodash"])
        import './styles.css';                  -> ("./styles.css", [])
        import fs = require('fs');              -> ("fs", ["fs"])

    ``.tsx`` and ``.jsx`` files are parsed with the TSX grammar but tagged
    ``typescript``.
    """

    language = "typescript"
    default_grammar = "typescript"

    def _extract_imports(self, node: Any) -> Iterable[ImportInfo]:
        if node.type != "import_statement":
            return []
        info = self._import_statement(node)
        return [info] if info is not None else []

    def _extract_export(self, node: Any) -> Optional[str]:
        if node.type != "export_statement":
            return None
        declaration = self._find_child_by_type(
            node, AMBIENT_DECLARATIONS + ("ambient_declaration",)
        )
        if declaration is not None and declaration.type == "ambient_declaration":
            declaration = self._find_child_by_type(declaration, AMBIENT_DECLARATIONS)
        if declaration is None:
            return None
        return self._find_child_text(declaration, ("identifier", "type_identifier"))

    def _import_statement(self, node: Any) -> Optional[ImportInfo]:
        module_path = ""
        items: list[str] = []
        for child in node.children:
            if child.type == "string":
                module_path = unquote(node_text(child))
            elif child.type == "import_clause":
                items.extend(self._clause_items(child))
            elif child.type == "import_require_clause":
                name = self._find_child_text(child, ("identifier",))
                source = self._find_child_text(child, ("string",))
                if source:
                    module_path = unquote(source)
                if name:
                    items.append(name)

        if not module_path:
            return None
        return ImportInfo(module_path, items)

    def _clause_items(self, node: Any) -> list[str]:
        items: list[str] = []
        for child in node.children:
            if child.type == "identifier":
                # default import
                items.append(node_text(child))
            elif child.type == "named_imports":
                for spec in child.children:
                    if spec.type == "import_specifier":
                        name = self._specifier_name(spec)
                        if name:
                            items.append(name)
            elif child.type == "namespace_import":
                alias = self._find_child_text(child, ("identifier",))
                if alias:
                    items.append(f"* as {alias}")
        return items

    @staticmethod
    def _specifier_name(node: Any) -> Optional[str]:
        """Alias if present, otherwise the original name."""
        alias = node.child_by_field_name("alias")
        if alias is not None:
            return node_text(alias)
        name = node.child_by_field_name("name")
        if name is not None:
            return unquote(node_text(name))
        return None
