"""Shared test fixtures for Source Overlap tests."""

from pathlib import Path
from typing import Callable, Dict, Union

import pytest

from source_overlap.exceptions import ParsingError
from source_overlap.scanning.treesitter_parser import TreeSitterParser

FileSpec = Dict[str, Union[str, bytes]]


def build_tree(root: Path, files: FileSpec) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path) -> Callable[..., Path]:
    """Factory: make_tree({"src/a.rs": "..."}, name="proj") -> project root."""

    def _make(files: FileSpec, name: str = "project") -> Path:
        return build_tree(tmp_path / name, files)

    return _make


@pytest.fixture(scope="session")
def parser() -> TreeSitterParser:
    """One parser for the session so grammars load once."""
    return TreeSitterParser()


class GrammarFailingParser(TreeSitterParser):
    """Parser whose ``parse`` raises ParsingError for one grammar."""

    def __init__(self, failing_grammar: str):
        super().__init__()
        self.failing_grammar = failing_grammar

    def parse(self, code, grammar, filepath=None):
        if grammar == self.failing_grammar:
            raise ParsingError(filepath or "<source>", grammar, "grammar unavailable")
        return super().parse(code, grammar, filepath)


@pytest.fixture
def failing_parser() -> Callable[[str], TreeSitterParser]:
    """Factory: failing_parser("python") -> parser that cannot parse Python."""
    return GrammarFailingParser
