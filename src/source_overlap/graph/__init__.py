"""Dependency lookups over a directory tree."""

from .importers import find_importers, find_importers_among, find_importers_cached, imports_target

__all__ = ["find_importers", "find_importers_cached", "find_importers_among", "imports_target"]
