"""Tests for the escape-aware splitter."""

from subtoggle.core.tokenizer import split


class TestSplit:
    def test_plain_fields(self):
        assert split("a/b/c", "/") == ["a", "b", "c"]

    def test_trailing_delimiter_gives_empty_field(self):
        assert split("a/b/", "/") == ["a", "b", ""]

    def test_empty_text(self):
        assert split("", "/") == [""]

    def test_only_delimiters(self):
        assert split("//", "/") == ["", "", ""]

    def test_escaped_delimiter_kept_in_field(self):
        assert split("a\\/b/c", "/") == ["a\\/b", "c"]

    def test_escaped_backslash_does_not_escape_delimiter(self):
        assert split("a\\\\/b", "/") == ["a\\\\", "b"]

    def test_trailing_backslash(self):
        assert split("a\\", "/") == ["a\\"]

    def test_other_escapes_untouched(self):
        assert split("\\d+/\\n", "/") == ["\\d+", "\\n"]

    def test_other_delimiter(self):
        assert split("foo#bar#g", "#") == ["foo", "bar", "g"]

    def test_maxsplit_keeps_remainder(self):
        assert split("a/b/c/d/e", "/", maxsplit=2) == ["a", "b", "c/d/e"]

    def test_maxsplit_zero(self):
        assert split("a/b", "/", maxsplit=0) == ["a/b"]

    def test_maxsplit_larger_than_fields(self):
        assert split("a/b", "/", maxsplit=5) == ["a", "b"]

    def test_maxsplit_remainder_keeps_escapes(self):
        assert split("a/b\\/c/d", "/", maxsplit=1) == ["a", "b\\/c/d"]

    def test_escaped_delimiters_do_not_count(self):
        text = "a\\/b/c"
        assert len(split(text, "/")) == 2
