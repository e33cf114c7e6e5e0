"""Configuration loading and management for Source Overlap.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in DetectorConfig)
    2. Project config (./source-overlap.toml)
    3. Explicit config file
    4. Environment variables (OVERLAP_* prefix)
    5. Keyword overrides

Example:
    >>> config = load_config(same_export_similarity=0.8)
    >>> config.same_export_similarity
    0.8
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import InvalidConfigError
from .scanning.languages import CONFIG_EXTENSIONS, SCAN_EXTENSIONS, SKIP_DIRS

PROJECT_CONFIG_NAME = "source-overlap.toml"
ENV_PREFIX = "OVERLAP_"


# Generic names that appear in nearly every codebase; matching on them is noise.
DEFAULT_COMMON_SYMBOLS: frozenset[str] = frozenset(
    {
        "main",
        "new",
        "default",
        "init",
        "run",
        "start",
        "stop",
        "get",
        "set",
        "test",
        "setup",
        "teardown",
        "build",
        "create",
        "delete",
        "update",
        "Default",
        "Display",
        "Debug",
        "Clone",
        "Error",
        "Result",
        "App",
        "Config",
        "Options",
        "Settings",
        "Context",
        "State",
    }
)

DEFAULT_COMMON_NORMALIZED: frozenset[str] = frozenset(
    {
        "get_value",
        "set_value",
        "to_string",
        "from_string",
        "file_path",
        "file_name",
        "base_path",
        "is_empty",
        "new_error",
        "parse_error",
        "read_file",
        "write_file",
    }
)


@dataclass(frozen=True)
class StoplistConfig:
    """Names suppressed from cross-project matching.

    Attributes:
        common_symbols: Exported names too generic to indicate duplication
        common_normalized: Normalized identifiers too generic to indicate duplication
    """

    common_symbols: frozenset[str] = DEFAULT_COMMON_SYMBOLS
    common_normalized: frozenset[str] = DEFAULT_COMMON_NORMALIZED

    def __post_init__(self) -> None:
        # TOML hands us lists
        object.__setattr__(self, "common_symbols", frozenset(self.common_symbols))
        object.__setattr__(self, "common_normalized", frozenset(self.common_normalized))

    def is_common_symbol(self, name: str) -> bool:
        return name in self.common_symbols

    def is_common_normalized(self, normalized: str) -> bool:
        return normalized in self.common_normalized


DEFAULT_STOPLISTS = StoplistConfig()


@dataclass(frozen=True)
class DetectorConfig:
    """Tuning for import analysis and cross-project comparison.

    Attributes:
        Scoring:
            same_export_similarity: Fixed score of a shared exported name
            cross_convention_similarity: Fixed score of a shared normalized identifier
            near_identical_threshold: Content similarity above this is near-identical
            diverged_threshold: Content similarity above this is partially diverged

        Identifier extraction:
            min_identifier_length: Shortest raw token considered an identifier
            min_normalized_length: Shortest normalized form eligible for matching

        File selection:
            scan_extensions: Extensions (no dot) walked during comparison
            config_extensions: Structured-config extensions excluded from
                identifier extraction
            skip_dirs: Directory names never descended into
            comment_markers: Line prefixes treated as comment-only lines

        stoplists: Generic names suppressed from matching
    """

    # Scoring
    same_export_similarity: float = 0.7
    cross_convention_similarity: float = 0.6
    near_identical_threshold: float = 0.95
    diverged_threshold: float = 0.3

    # Identifier extraction
    min_identifier_length: int = 4
    min_normalized_length: int = 6

    # File selection
    scan_extensions: tuple[str, ...] = SCAN_EXTENSIONS
    config_extensions: tuple[str, ...] = CONFIG_EXTENSIONS
    skip_dirs: frozenset[str] = SKIP_DIRS
    comment_markers: tuple[str, ...] = ("//", "#")

    stoplists: StoplistConfig = field(default_factory=StoplistConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        object.__setattr__(self, "scan_extensions", tuple(self.scan_extensions))
        object.__setattr__(self, "config_extensions", tuple(self.config_extensions))
        object.__setattr__(self, "skip_dirs", frozenset(self.skip_dirs))
        object.__setattr__(self, "comment_markers", tuple(self.comment_markers))

        # Scores and thresholds must be in [0, 1]
        unit_fields = [
            "same_export_similarity",
            "cross_convention_similarity",
            "near_identical_threshold",
            "diverged_threshold",
        ]
        for field_name in unit_fields:
            value = getattr(self, field_name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{field_name} must be between 0.0 and 1.0")

        if self.diverged_threshold > self.near_identical_threshold:
            raise ValueError("diverged_threshold must not exceed near_identical_threshold")

        if self.min_identifier_length < 1:
            raise ValueError("min_identifier_length must be at least 1")
        if self.min_normalized_length < 1:
            raise ValueError("min_normalized_length must be at least 1")

        if any(ext.startswith(".") for ext in self.scan_extensions):
            raise ValueError("scan_extensions must not include the leading dot")

    def is_config_file(self, extension: str) -> bool:
        """True for structured-config formats (no leading dot)."""
        return extension.lower() in self.config_extensions


# Default configuration (singleton)
DEFAULT_CONFIG = DetectorConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> DetectorConfig:
    """Load configuration with auto-discovery and merging.

    Configuration sources are merged in priority order (lowest to highest):
        1. Defaults (DetectorConfig field defaults)
        2. Project config (./source-overlap.toml)
        3. Explicit config file (if config_file provided)
        4. Environment variables (OVERLAP_* prefix)
        5. Keyword overrides

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct field overrides

    Returns:
        Validated DetectorConfig instance

    Raises:
        InvalidConfigError: If a config file is missing or invalid, or a value
            fails validation

    Example:
        >>> config = load_config(config_file=Path("custom.toml"))
    """
    merged: dict[str, Any] = {}

    # 1. Project config
    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    # 2. Explicit config file (highest priority from files)
    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise InvalidConfigError("config_file", config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    # 3. Environment variables (OVERLAP_* prefix)
    merged.update(_load_env_vars())

    # 4. Keyword overrides (highest priority)
    merged.update(overrides)

    # Handle [stoplists] section from TOML
    stoplists = merged.pop("stoplists", None)
    if stoplists is not None:
        if isinstance(stoplists, dict):
            try:
                merged["stoplists"] = StoplistConfig(**stoplists)
            except TypeError as e:
                raise InvalidConfigError("stoplists", stoplists, str(e))
        elif isinstance(stoplists, StoplistConfig):
            merged["stoplists"] = stoplists
        else:
            raise InvalidConfigError("stoplists", stoplists, "expected a table")

    try:
        return DetectorConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise InvalidConfigError("configuration", sorted(merged), str(e))
    except ValueError as e:
        raise InvalidConfigError("configuration", sorted(merged), str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load scalar configuration fields from OVERLAP_* environment variables.

    Supported environment variables:
        OVERLAP_SAME_EXPORT_SIMILARITY: float
        OVERLAP_CROSS_CONVENTION_SIMILARITY: float
        OVERLAP_NEAR_IDENTICAL_THRESHOLD: float
        OVERLAP_DIVERGED_THRESHOLD: float
        OVERLAP_MIN_IDENTIFIER_LENGTH: int
        OVERLAP_MIN_NORMALIZED_LENGTH: int

    Returns:
        Dict of field_name -> parsed_value for any OVERLAP_* vars found.
    """
    type_hints = get_type_hints(DetectorConfig)

    result: dict[str, Any] = {}

    for field_name in DetectorConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Collections and nested configs are not settable from the environment and
    yield None.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        InvalidConfigError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Python 3.10 uses the tomli backport (declared in setup.py)
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config_file", path, str(e))
