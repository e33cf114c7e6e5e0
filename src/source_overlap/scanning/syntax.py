"""Syntax facts extracted from a single source file.

FileAnalysis records what a file imports and what it publicly declares:
    - Per-import: module_path as written, and the names drawn from it
    - Per-file: exported top-level names and the ecosystem tag

The facts are purely syntactic. Nothing here is resolved against other files.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .languages import UNKNOWN_LANGUAGE


@dataclass(frozen=True)
class ImportInfo:
    """An import statement.

    Attributes:
        module_path: Module being imported from (e.g., "std::path", "xml.etree",
            "./components/Button"). Empty for a bare single-name import.
        items: Names imported, in source order. Empty for a whole-module import.
            A wildcard import is ``("*",)``; a namespace import is
            ``("* as alias",)``.
    """

    module_path: str
    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence from callers while keeping the value immutable.
        object.__setattr__(self, "items", tuple(self.items))

    def segments(self, separator: str) -> list[str]:
        """Split module_path on the ecosystem separator."""
        return self.module_path.split(separator)


@dataclass(frozen=True)
class FileAnalysis:
    """Complete import/export extraction for a file.

    Attributes:
        imports: Import declarations in source order
        exports: Publicly visible top-level declaration names
        language: Ecosystem tag, or "unknown" for unsupported files
    """

    imports: tuple[ImportInfo, ...] = field(default_factory=tuple)
    exports: tuple[str, ...] = field(default_factory=tuple)
    language: str = UNKNOWN_LANGUAGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "imports", tuple(self.imports))
        object.__setattr__(self, "exports", tuple(self.exports))

    @classmethod
    def empty(cls, language: str = UNKNOWN_LANGUAGE) -> FileAnalysis:
        """Analysis with no imports or exports, tagged with ``language``."""
        return cls(imports=(), exports=(), language=language)

    @property
    def is_supported(self) -> bool:
        """False when the file's ecosystem has no grammar."""
        return self.language != UNKNOWN_LANGUAGE

