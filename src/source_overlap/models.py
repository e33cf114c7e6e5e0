"""Cross-project shared-code models.

A SharedCandidate is directional: ``path_a`` always lives in project A and
``path_b`` in project B, both relative to their project roots. A SharedReport
holds candidates sorted by descending similarity with at most one entry per
``(path_a, path_b)`` pair.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SharedKind(Enum):
    """Why two files were paired."""

    SAME_FILE_NAME = "same_file_name"  # matching file stem
    SAME_EXPORT = "same_export"  # same exported symbol name
    SAME_CONSTANT = "same_constant"  # same identifier across naming conventions
    SIMILAR_CONTENT = "similar_content"  # high line overlap

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SharedKind.SAME_FILE_NAME: "Same file name",
    SharedKind.SAME_EXPORT: "Same export",
    SharedKind.SAME_CONSTANT: "Same constant/type",
    SharedKind.SIMILAR_CONTENT: "Similar content",
}


@dataclass(frozen=True)
class SharedCandidate:
    """A pair of files suspected of holding duplicated logic."""

    kind: SharedKind
    path_a: str
    path_b: str
    description: str
    similarity: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.similarity <= 1.0:
            raise ValueError(f"similarity must be between 0.0 and 1.0, got {self.similarity}")

    @property
    def pair(self) -> tuple[str, str]:
        return (self.path_a, self.path_b)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "path_a": self.path_a,
            "path_b": self.path_b,
            "description": self.description,
            "similarity": self.similarity,
        }


@dataclass(frozen=True)
class SharedReport:
    """Result of comparing two project trees."""

    project_a: str
    project_b: str
    candidates: tuple[SharedCandidate, ...] = field(default_factory=tuple)
    files_scanned_a: int = 0
    files_scanned_b: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates))

    def __len__(self) -> int:
        return len(self.candidates)

    def by_kind(self, kind: SharedKind) -> list[SharedCandidate]:
        """Candidates of one kind, in report order."""
        return [c for c in self.candidates if c.kind is kind]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready structure; candidate order is preserved."""
        return {
            "project_a": self.project_a,
            "project_b": self.project_b,
            "files_scanned_a": self.files_scanned_a,
            "files_scanned_b": self.files_scanned_b,
            "candidates": [c.to_dict() for c in self.candidates],
        }
