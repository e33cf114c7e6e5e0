"""Python language analyzer"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..scanning.syntax import ImportInfo
from ..scanning.treesitter_parser import node_text
from .base import SourceAnalyzer

DEFINITIONS = ("function_definition", "class_definition")


class PythonAnalyzer(SourceAnalyzer):
    """Extracts import statements and public top-level definitions.

    Python has no export marker, so every top-level function or class whose
    name does not start with an underscore counts as exported. Relative
    imports keep their leading dots in the module path.
    """

    language = "python"
    default_grammar = "python"

    def _extract_imports(self, node: Any) -> Iterable[ImportInfo]:
        if node.type == "import_statement":
            return self._import_statement(node)
        if node.type == "import_from_statement":
            info = self._import_from_statement(node)
            return [info] if info is not None else []
        if node.type == "future_import_statement":
            return [ImportInfo("__future__", self._imported_names(node))]
        return []

    def _extract_export(self, node: Any) -> Optional[str]:
        if node.type == "decorated_definition":
            node = node.child_by_field_name("definition")
            if node is None:
                return None
        if node.type not in DEFINITIONS:
            return None
        name = self._find_child_text(node, ("identifier",))
        if name and not name.startswith("_"):
            return name
        return None

    def _import_statement(self, node: Any) -> list[ImportInfo]:
        """`import a.b, c as d` yields one ImportInfo per module."""
        imports: list[ImportInfo] = []
        for child in node.children:
            if child.type == "dotted_name":
                imports.append(ImportInfo(self._dotted_name(child), []))
            elif child.type == "aliased_import":
                module, alias = self._split_alias(child)
                if module:
                    imports.append(ImportInfo(module, [f"as {alias}"] if alias else []))
        return imports

    def _import_from_statement(self, node: Any) -> Optional[ImportInfo]:
        module_path = ""
        for child in node.children:
            if child.type == "import":
                break
            if child.type == "dotted_name":
                module_path = self._dotted_name(child)
            elif child.type == "relative_import":
                module_path = self._relative_import(child)

        if not module_path:
            return None
        return ImportInfo(module_path, self._imported_names(node))

    def _imported_names(self, node: Any) -> list[str]:
        """Names after the `import` keyword, alias preferred over the original."""
        items: list[str] = []
        seen_import = False
        for child in node.children:
            if child.type == "import":
                seen_import = True
            elif not seen_import:
                continue
            elif child.type == "wildcard_import":
                items.append("*")
            elif child.type == "dotted_name":
                items.append(self._dotted_name(child))
            elif child.type == "aliased_import":
                original, alias = self._split_alias(child)
                items.append(alias or original)
        return items

    @staticmethod
    def _dotted_name(node: Any) -> str:
        return ".".join(node_text(c) for c in node.children if c.type == "identifier")

    def _relative_import(self, node: Any) -> str:
        prefix = self._find_child_text(node, ("import_prefix",)) or ""
        module = self._find_child_by_type(node, ("dotted_name",))
        return prefix + (self._dotted_name(module) if module is not None else "")

    def _split_alias(self, node: Any) -> tuple[str, Optional[str]]:
        """(original dotted name, alias) of an aliased_import."""
        name_node = node.child_by_field_name("name")
        alias_node = node.child_by_field_name("alias")
        original = self._dotted_name(name_node) if name_node is not None else ""
        alias = node_text(alias_node) if alias_node is not None else None
        return original, alias
