"""Tests for same-export and cross-convention matching."""

from source_overlap.cache import AnalysisCache
from source_overlap.config import DetectorConfig, StoplistConfig
from source_overlap.models import SharedKind
from source_overlap.similarity import (
    collect_exports,
    collect_normalized_identifiers,
    cross_convention_candidates,
    same_export_candidates,
)


class TestCollectExports:
    """Tests for export indexing."""

    def test_indexes_by_relative_path(self, make_tree, parser):
        root = make_tree(
            {
                "src/a.rs": "pub fn shared_helper() {}\n",
                "pkg/b.py": "def shared_helper():\n    pass\n",
                "notes.txt": "nothing",
            }
        )
        files = [root / "pkg" / "b.py", root / "src" / "a.rs"]
        index = collect_exports(root, files, AnalysisCache(parser))
        assert index == {"shared_helper": ["pkg/b.py", "src/a.rs"]}

    def test_parse_failures_skipped(self, make_tree, failing_parser):
        root = make_tree(
            {
                "src/a.rs": "pub fn shared_helper() {}\n",
                "pkg/b.py": "def shared_helper():\n    pass\n",
            }
        )
        files = [root / "pkg" / "b.py", root / "src" / "a.rs"]
        index = collect_exports(root, files, AnalysisCache(failing_parser("python")))
        assert index == {"shared_helper": ["src/a.rs"]}


class TestSameExportCandidates:
    """Tests for same_export_candidates."""

    def test_every_path_combination(self):
        exports_a = {"TruckSpecs": ["a1.rs", "a2.rs"]}
        exports_b = {"TruckSpecs": ["b1.ts"]}
        result = same_export_candidates(exports_a, exports_b)
        assert [c.pair for c in result] == [("a1.rs", "b1.ts"), ("a2.rs", "b1.ts")]
        assert all(c.kind is SharedKind.SAME_EXPORT for c in result)
        assert all(c.similarity == 0.7 for c in result)
        assert result[0].description == "Symbol 'TruckSpecs' is exported by both projects"

    def test_common_symbols_suppressed(self):
        assert same_export_candidates({"main": ["a.rs"]}, {"main": ["b.rs"]}) == []

    def test_only_shared_names(self):
        assert same_export_candidates({"Alpha": ["a.rs"]}, {"Beta": ["b.rs"]}) == []

    def test_custom_stoplist_and_score(self):
        config = DetectorConfig(
            same_export_similarity=0.9,
            stoplists=StoplistConfig(common_symbols=frozenset({"Alpha"})),
        )
        exports_a = {"Alpha": ["a.rs"], "main": ["m.rs"]}
        exports_b = {"Alpha": ["b.rs"], "main": ["n.rs"]}
        result = same_export_candidates(exports_a, exports_b, config)
        assert [(c.pair, c.similarity) for c in result] == [(("m.rs", "n.rs"), 0.9)]


class TestCollectNormalizedIdentifiers:
    """Tests for identifier indexing."""

    def test_config_files_skipped(self, make_tree):
        root = make_tree({"a.json": '{"TRUCK_SPECS": 1}', "a.rs": "const TRUCK_SPECS: u8 = 1;"})
        index = collect_normalized_identifiers(root, [root / "a.json", root / "a.rs"])
        assert index == {"truck_specs": [("TRUCK_SPECS", "a.rs")]}

    def test_spellings_sorted_and_deduplicated(self, make_tree):
        root = make_tree(
            {
                "one.ts": "truckSpecs\nTRUCK_SPECS\n",
                "two.ts": "TruckSpecs\ntruckSpecs\n",
            }
        )
        index = collect_normalized_identifiers(root, [root / "one.ts", root / "two.ts"])
        assert index["truck_specs"] == [
            ("TRUCK_SPECS", "one.ts"),
            ("TruckSpecs", "two.ts"),
            ("truckSpecs", "one.ts"),
        ]

    def test_unreadable_files_skipped(self, tmp_path):
        assert collect_normalized_identifiers(tmp_path, [tmp_path / "absent.rs"]) == {}


class TestCrossConventionCandidates:
    """Tests for cross_convention_candidates."""

    def test_different_spellings_match(self):
        ids_a = {"truck_specs": [("TRUCK_SPECS", "a.rs")]}
        ids_b = {"truck_specs": [("truckSpecs", "b.ts"), ("TruckSpecs", "c.ts")]}
        result = cross_convention_candidates(ids_a, ids_b)
        assert len(result) == 1
        candidate = result[0]
        assert candidate.kind is SharedKind.SAME_CONSTANT
        assert candidate.pair == ("a.rs", "b.ts")
        assert candidate.similarity == 0.6
        assert candidate.description == (
            "Cross-convention match: 'TRUCK_SPECS' (A) <-> 'truckSpecs' (B) "
            "[normalized: truck_specs]"
        )

    def test_identical_spelling_skipped(self):
        ids = {"truck_specs": [("truckSpecs", "a.ts")]}
        assert cross_convention_candidates(ids, {"truck_specs": [("truckSpecs", "b.ts")]}) == []

    def test_short_normalized_form_skipped(self):
        ids_a = {"max_x": [("MAX_X", "a.rs")]}
        ids_b = {"max_x": [("maxX", "b.ts")]}
        assert cross_convention_candidates(ids_a, ids_b) == []

    def test_common_normalized_form_skipped(self):
        ids_a = {"file_path": [("FILE_PATH", "a.rs")]}
        ids_b = {"file_path": [("filePath", "b.ts")]}
        assert cross_convention_candidates(ids_a, ids_b) == []
