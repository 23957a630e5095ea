"""Tests for the whole-file text adapter."""

from alignby.engine.text import align_text, join_lines, split_lines


class TestSplitLines:
    def test_mixed_terminators(self):
        assert split_lines("a\r\nb\rc\n") == (["a", "b", "c"], ["\r\n", "\r", "\n"])

    def test_no_trailing_newline(self):
        assert split_lines("a\n\nb") == (["a", "", "b"], ["\n", "\n", ""])

    def test_empty(self):
        assert split_lines("") == ([], [])

    def test_other_control_characters_stay_in_line(self):
        assert split_lines("a\x0cb\n") == (["a\x0cb"], ["\n"])

    def test_join_restores_text(self):
        text = "x\r\n\ny\rz"
        assert join_lines(*split_lines(text)) == text


class TestAlignText:
    def test_empty(self):
        assert align_text("") == ""

    def test_single_newline(self):
        assert align_text("\n") == "\n"

    def test_fixture_file(self, marked_source, aligned_source):
        assert align_text(marked_source) == aligned_source

    def test_keeps_crlf(self):
        text = 'align_by "="\r\na = 1\r\nbb = 2\r\n'
        assert align_text(text) == 'align_by "="\r\na  = 1\r\nbb = 2\r\n'

    def test_keeps_missing_trailing_newline(self):
        text = 'align_by "="\na = 1\nbb = 2'
        assert align_text(text) == 'align_by "="\na  = 1\nbb = 2'

    def test_sorted_lines_keep_positional_endings(self):
        text = 'align_by sort "="\nb=1\na=1'
        assert align_text(text) == 'align_by sort "="\na=1\nb=1'

    def test_squeeze(self):
        text = 'align_by "="\nx     = 1\nyy = 2\n'
        assert align_text(text, squeeze=True) == 'align_by "="\nx  = 1\nyy = 2\n'
