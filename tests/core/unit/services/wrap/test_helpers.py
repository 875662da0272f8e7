"""Tests for trimming and segment splitting helpers."""

from linewrap.core.services.wrap import split_segments, trim_trailing_whitespace


class TestTrimTrailingWhitespace:
    """Tests for trailing whitespace removal."""

    def test_none(self):
        """None is passed through."""
        assert trim_trailing_whitespace(None) is None

    def test_empty(self):
        """Empty string stays empty."""
        assert trim_trailing_whitespace('') == ''

    def test_all_whitespace(self):
        """All-whitespace input becomes empty."""
        assert trim_trailing_whitespace(' \t \x0b ') == ''

    def test_keeps_leading_whitespace(self):
        """Only the end of the string is trimmed."""
        assert trim_trailing_whitespace('  abc  ') == '  abc'

    def test_trims_control_characters(self):
        """Any character up to and including space counts as whitespace."""
        assert trim_trailing_whitespace('abc\x00\x01\x1f ') == 'abc'

    def test_keeps_non_ascii_spaces(self):
        """Characters above space are never trimmed."""
        assert trim_trailing_whitespace('abc\xa0') == 'abc\xa0'


class TestSplitSegments:
    """Tests for splitting on line delimiters."""

    def test_single_segment(self):
        """Text without delimiters is one segment."""
        assert split_segments('one two') == ['one two']

    def test_each_delimiter(self):
        """CR, LF and FF all separate segments."""
        assert split_segments('a\rb\nc\fd') == ['a', 'b', 'c', 'd']

    def test_skips_empty_fields(self):
        """Leading, trailing and repeated delimiters yield no empty segments."""
        assert split_segments('\r\n\none\r\n\r\ntwo\n\f') == ['one', 'two']

    def test_keeps_other_whitespace(self):
        """Spaces and tabs inside a segment are preserved."""
        assert split_segments('  a\t \nb  ') == ['  a\t ', 'b  ']

    def test_only_delimiters(self):
        """Delimiter-only input has no segments."""
        assert split_segments('\n\r\f') == []
