"""Ecosystem configurations: the single source of truth for file classification.

Each ecosystem names the grammar used to parse it, the separator its import
paths use, and the extensions that belong to it. Extensions without an entry
here are still walked when they appear in a scan allow-list, but analyze to an
empty ``"unknown"`` result.

Adding a new ecosystem:
  1. Add an EcosystemConfig entry to ECOSYSTEMS below.
  2. Register a SourceAnalyzer for its tag in ``source_overlap.analyzers``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Union

UNKNOWN_LANGUAGE = "unknown"

# Separator used to split import paths of files whose ecosystem is unknown.
DEFAULT_IMPORT_SEPARATOR = "/"


@dataclass(frozen=True)
class EcosystemConfig:
    """Everything the analyzers and traversals need to know about an ecosystem."""

    name: str
    extensions: tuple[str, ...]

    # Separator between module path segments in import statements.
    import_separator: str

    # Extension -> tree-sitter grammar name. Extensions missing here use ``name``.
    grammar_overrides: tuple[tuple[str, str], ...] = ()

    def grammar_for(self, extension: str) -> str:
        """Return the grammar name for a (lower-case, dotted) extension."""
        for ext, grammar in self.grammar_overrides:
            if ext == extension:
                return grammar
        return self.name


# ── Ecosystem definitions ──────────────────────────────────────────

ECOSYSTEMS: dict[str, EcosystemConfig] = {
    "rust": EcosystemConfig(
        name="rust",
        extensions=(".rs",),
        import_separator="::",
    ),
    "python": EcosystemConfig(
        name="python",
        extensions=(".py",),
        import_separator=".",
    ),
    "typescript": EcosystemConfig(
        name="typescript",
        extensions=(".ts", ".tsx", ".js", ".jsx"),
        import_separator="/",
        grammar_overrides=((".tsx", "tsx"), (".jsx", "tsx")),
    ),
}


# ── Extension allow-lists (no leading dot) ─────────────────────────

SOURCE_EXTENSIONS: tuple[str, ...] = (
    "rs",
    "ts",
    "tsx",
    "js",
    "jsx",
    "py",
    "go",
    "java",
    "cpp",
    "c",
    "h",
    "hpp",
    "cs",
    "rb",
    "swift",
    "kt",
)

CONFIG_EXTENSIONS: tuple[str, ...] = ("json", "toml", "yaml", "yml")

# Walked when comparing two projects: common source formats plus config formats.
SCAN_EXTENSIONS: tuple[str, ...] = (
    "rs",
    "ts",
    "tsx",
    "js",
    "jsx",
    "py",
    "go",
    "java",
    "cpp",
    "c",
    "h",
    "hpp",
) + CONFIG_EXTENSIONS

# Directory names never descended into (hidden directories are skipped too).
SKIP_DIRS: frozenset[str] = frozenset({"target", "node_modules", "__pycache__"})


# Extension to ecosystem mapping (built from ECOSYSTEMS)
_EXTENSION_TO_LANGUAGE: dict[str, str] = {}
for _name, _cfg in ECOSYSTEMS.items():
    for _ext in _cfg.extensions:
        _EXTENSION_TO_LANGUAGE[_ext] = _name


def extension_of(filepath: Union[str, PurePath]) -> str:
    """Return the extension of ``filepath`` without the leading dot."""
    return PurePath(filepath).suffix[1:]


def detect_language(filepath: Union[str, PurePath]) -> str:
    """Detect the ecosystem tag from a file extension.

    Args:
        filepath: Path object or string

    Returns:
        Ecosystem tag (e.g., "rust", "python") or "unknown"
    """
    ext = Path(filepath).suffix.lower()
    return _EXTENSION_TO_LANGUAGE.get(ext, UNKNOWN_LANGUAGE)


def get_ecosystem(name: str) -> EcosystemConfig | None:
    """Look up an ecosystem by tag, or None if the tag is not supported."""
    return ECOSYSTEMS.get(name)


def grammar_for_path(filepath: Union[str, PurePath]) -> str | None:
    """Return the grammar name used to parse ``filepath``, or None if unsupported."""
    cfg = get_ecosystem(detect_language(filepath))
    if cfg is None:
        return None
    return cfg.grammar_for(Path(filepath).suffix.lower())


def import_separator(language: str) -> str:
    """Return the import-path separator for an ecosystem tag.

    Unknown tags fall back to ``"/"``.
    """
    cfg = get_ecosystem(language)
    return cfg.import_separator if cfg is not None else DEFAULT_IMPORT_SEPARATOR

