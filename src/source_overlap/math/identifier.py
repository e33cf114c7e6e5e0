"""Identifier normalization across naming conventions.

``normalize_identifier`` maps SCREAMING_SNAKE, snake_case, kebab-case,
camelCase and PascalCase spellings of the same words onto one lowercase
snake_case form, so ``TRUCK_SPECS``, ``truckSpecs`` and ``TruckSpecs`` all
become ``truck_specs``. ``extract_identifiers`` pulls constant-like and
mixed-case tokens out of raw source text.
"""

import re
from typing import List, Tuple

# Separators between identifier tokens: anything but letters, digits and "_"
_TOKEN_SPLIT = re.compile(r"\W")

# Lines starting with these are treated as comments and skipped
COMMENT_PREFIXES = ("//", "#", "/*", "*")

WORD_SEPARATORS = frozenset("_-")


def normalize_identifier(name: str) -> str:
    """Canonical lowercase snake_case form of ``name``.

    ``_`` and ``-`` separate words and are dropped. An uppercase character
    starts a new word when the current word is non-empty and does not end in
    an uppercase character, so runs of capitals stay together
    (``HTTPServer`` -> ``httpserver``).

    Examples:
        >>> normalize_identifier("TRUCK_SPECS")
        'truck_specs'
        >>> normalize_identifier("fillRatioZ")
        'fill_ratio_z'
    """
    words: List[str] = []
    current: List[str] = []

    for ch in name:
        if ch in WORD_SEPARATORS:
            if current:
                words.append("".join(current).lower())
                current = []
        elif ch.isupper() and current and not current[-1].isupper():
            words.append("".join(current).lower())
            current = [ch]
        else:
            current.append(ch)

    if current:
        words.append("".join(current).lower())
    return "_".join(words)


def _is_constant_token(word: str, min_length: int) -> bool:
    return (
        len(word) >= min_length
        and "_" in word
        and all(c.isupper() or c.isdigit() or c == "_" for c in word)
    )


def _is_mixed_case_token(word: str, min_length: int) -> bool:
    return (
        len(word) >= min_length
        and any(c.islower() for c in word)
        and any(c.isupper() for c in word)
    )


def split_tokens(line: str) -> List[str]:
    """Split a line on every character that is neither alphanumeric nor ``_``."""
    return _TOKEN_SPLIT.split(line)


def extract_identifiers(content: str, min_length: int = 4) -> List[Tuple[str, str]]:
    """Extract ``(normalized, original)`` identifier pairs from source text.

    Two token shapes are collected from every non-comment line:
        - UPPER_CASE constants containing an underscore (``DEFAULT_BED_AREA``)
        - mixed-case words (``truckSpecs``, ``TruckSpecs``)

    Tokens shorter than ``min_length`` are ignored. Order follows the source,
    constants before mixed-case words on each line; duplicates are kept.
    """
    identifiers: List[Tuple[str, str]] = []

    for line in content.splitlines():
        trimmed = line.strip()
        if trimmed.startswith(COMMENT_PREFIXES):
            continue

        words = split_tokens(trimmed)
        for word in words:
            if _is_constant_token(word, min_length):
                identifiers.append((normalize_identifier(word), word))
        for word in words:
            if _is_mixed_case_token(word, min_length):
                identifiers.append((normalize_identifier(word), word))

    return identifiers
