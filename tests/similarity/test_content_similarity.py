"""Tests for line-based content similarity."""

import pytest

from source_overlap.similarity import (
    content_similarity,
    jaccard,
    significant_lines,
    text_similarity,
)


class TestSignificantLines:
    """Tests for line filtering."""

    def test_trims_and_drops_blank_and_comment_lines(self):
        content = "  let a = 1;  \n\n// note\n# note\nlet b = 2;\nlet a = 1;\n"
        assert significant_lines(content) == {"let a = 1;", "let b = 2;"}

    def test_custom_markers(self):
        assert significant_lines("-- sql comment\nSELECT 1;", ["--"]) == {"SELECT 1;"}


class TestJaccard:
    """Tests for the Jaccard index."""

    def test_both_empty(self):
        assert jaccard(set(), set()) == 1.0

    def test_one_empty(self):
        assert jaccard({"a"}, set()) == 0.0
        assert jaccard(set(), {"a"}) == 0.0

    def test_partial_overlap(self):
        assert jaccard({"a", "b", "c"}, {"b", "c", "d"}) == pytest.approx(0.5)


class TestTextSimilarity:
    """Tests for text_similarity."""

    def test_comments_and_whitespace_ignored(self):
        a = "fn main() {}\n// version one\n"
        b = "    fn main() {}\n\n# version two\n"
        assert text_similarity(a, b) == 1.0

    def test_comment_only_files_are_identical(self):
        assert text_similarity("// a\n", "# b\n") == 1.0

    def test_order_independent(self):
        assert text_similarity("a\nb\n", "b\na\n") == 1.0


class TestContentSimilarity:
    """Tests for file-level similarity."""

    def test_file_against_itself(self, tmp_path):
        path = tmp_path / "a.rs"
        path.write_text("fn a() {}\nfn b() {}\n")
        assert content_similarity(path, path) == 1.0

    def test_symmetric_and_bounded(self, tmp_path):
        a = tmp_path / "a.py"
        b = tmp_path / "b.py"
        a.write_text("x = 1\ny = 2\nz = 3\n")
        b.write_text("x = 1\nq = 9\n")
        forward = content_similarity(a, b)
        assert forward == content_similarity(b, a)
        assert 0.0 <= forward <= 1.0
        assert forward == pytest.approx(1 / 4)

    def test_unreadable_file_scores_zero(self, tmp_path):
        a = tmp_path / "a.py"
        a.write_text("x = 1\n")
        assert content_similarity(a, tmp_path / "absent.py") == 0.0
        assert content_similarity(tmp_path / "absent.py", a) == 0.0
