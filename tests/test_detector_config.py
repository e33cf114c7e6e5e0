"""Tests for configuration defaults, validation and loading."""

import pytest

from source_overlap.config import (
    DEFAULT_CONFIG,
    DetectorConfig,
    StoplistConfig,
    load_config,
)
from source_overlap.exceptions import InvalidConfigError

ENV_KEYS = [
    "OVERLAP_SAME_EXPORT_SIMILARITY",
    "OVERLAP_CROSS_CONVENTION_SIMILARITY",
    "OVERLAP_NEAR_IDENTICAL_THRESHOLD",
    "OVERLAP_DIVERGED_THRESHOLD",
    "OVERLAP_MIN_IDENTIFIER_LENGTH",
    "OVERLAP_MIN_NORMALIZED_LENGTH",
]


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run in an empty directory with no OVERLAP_* variables set."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDetectorConfigDefaults:
    """Test default values."""

    def test_scores_and_thresholds(self):
        assert DEFAULT_CONFIG.same_export_similarity == 0.7
        assert DEFAULT_CONFIG.cross_convention_similarity == 0.6
        assert DEFAULT_CONFIG.near_identical_threshold == 0.95
        assert DEFAULT_CONFIG.diverged_threshold == 0.3

    def test_extraction_minimums(self):
        assert DEFAULT_CONFIG.min_identifier_length == 4
        assert DEFAULT_CONFIG.min_normalized_length == 6

    def test_file_selection(self):
        assert "rs" in DEFAULT_CONFIG.scan_extensions
        assert "toml" in DEFAULT_CONFIG.scan_extensions
        assert DEFAULT_CONFIG.is_config_file("JSON")
        assert not DEFAULT_CONFIG.is_config_file("rs")
        assert "node_modules" in DEFAULT_CONFIG.skip_dirs

    def test_stoplists(self):
        assert DEFAULT_CONFIG.stoplists.is_common_symbol("main")
        assert not DEFAULT_CONFIG.stoplists.is_common_symbol("TruckSpecs")
        assert DEFAULT_CONFIG.stoplists.is_common_normalized("file_path")


class TestDetectorConfigValidation:
    """Test __post_init__ validation."""

    @pytest.mark.parametrize(
        "field_name", ["same_export_similarity", "cross_convention_similarity", "diverged_threshold"]
    )
    def test_unit_interval(self, field_name):
        with pytest.raises(ValueError, match=field_name):
            DetectorConfig(**{field_name: 1.5})

    def test_threshold_order(self):
        with pytest.raises(ValueError):
            DetectorConfig(near_identical_threshold=0.2, diverged_threshold=0.5)

    def test_minimum_lengths(self):
        with pytest.raises(ValueError):
            DetectorConfig(min_identifier_length=0)
        with pytest.raises(ValueError):
            DetectorConfig(min_normalized_length=0)

    def test_extensions_without_dot(self):
        with pytest.raises(ValueError):
            DetectorConfig(scan_extensions=(".rs",))

    def test_collections_coerced(self):
        config = DetectorConfig(scan_extensions=["rs"], skip_dirs=["vendor"])
        assert config.scan_extensions == ("rs",)
        assert config.skip_dirs == frozenset({"vendor"})

    def test_stoplist_coerced(self):
        assert StoplistConfig(common_symbols=["Foo"]).common_symbols == frozenset({"Foo"})


class TestLoadConfig:
    """Test configuration source merging."""

    def test_defaults(self, isolated):
        assert load_config() == DEFAULT_CONFIG

    def test_project_config_discovered(self, isolated):
        (isolated / "source-overlap.toml").write_text("diverged_threshold = 0.4\n")
        assert load_config().diverged_threshold == 0.4

    def test_explicit_file_overrides_project(self, isolated):
        (isolated / "source-overlap.toml").write_text("diverged_threshold = 0.4\n")
        custom = isolated / "custom.toml"
        custom.write_text("diverged_threshold = 0.5\nscan_extensions = [\"rs\", \"py\"]\n")
        config = load_config(custom)
        assert config.diverged_threshold == 0.5
        assert config.scan_extensions == ("rs", "py")

    def test_env_overrides_file(self, isolated, monkeypatch):
        custom = isolated / "custom.toml"
        custom.write_text("same_export_similarity = 0.5\n")
        monkeypatch.setenv("OVERLAP_SAME_EXPORT_SIMILARITY", "0.8")
        monkeypatch.setenv("OVERLAP_MIN_NORMALIZED_LENGTH", "8")
        config = load_config(custom)
        assert config.same_export_similarity == 0.8
        assert config.min_normalized_length == 8

    def test_overrides_win(self, isolated, monkeypatch):
        monkeypatch.setenv("OVERLAP_SAME_EXPORT_SIMILARITY", "0.8")
        assert load_config(same_export_similarity=0.9).same_export_similarity == 0.9

    def test_stoplists_table(self, isolated):
        custom = isolated / "custom.toml"
        custom.write_text('[stoplists]\ncommon_symbols = ["Widget"]\n')
        config = load_config(custom)
        assert config.stoplists.common_symbols == frozenset({"Widget"})
        assert config.stoplists.is_common_normalized("file_path")

    def test_missing_file(self, isolated):
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(isolated / "absent.toml")
        assert exc_info.value.key == "config_file"

    def test_malformed_toml(self, isolated):
        custom = isolated / "bad.toml"
        custom.write_text("diverged_threshold = = 1\n")
        with pytest.raises(InvalidConfigError):
            load_config(custom)

    def test_unknown_key(self, isolated):
        custom = isolated / "custom.toml"
        custom.write_text("no_such_setting = 1\n")
        with pytest.raises(InvalidConfigError):
            load_config(custom)

    def test_unknown_stoplist_key(self, isolated):
        custom = isolated / "custom.toml"
        custom.write_text('[stoplists]\nnames = ["x"]\n')
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(custom)
        assert exc_info.value.key == "stoplists"

    def test_invalid_value(self, isolated):
        with pytest.raises(InvalidConfigError):
            load_config(diverged_threshold=2.0)

    def test_unparsable_env_value(self, isolated, monkeypatch):
        monkeypatch.setenv("OVERLAP_MIN_IDENTIFIER_LENGTH", "four")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "OVERLAP_MIN_IDENTIFIER_LENGTH"
