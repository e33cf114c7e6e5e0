"""Identifier normalization utilities."""

from .identifier import extract_identifiers, normalize_identifier, split_tokens

__all__ = ["normalize_identifier", "extract_identifiers", "split_tokens"]
