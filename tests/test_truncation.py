"""Tests for text/truncation module."""

import pytest

from strext.exceptions import InvalidArgumentError
from strext.text.truncation import ELLIPSIS, truncate, truncate_with_ellipsis


class TestTruncate:
    """Tests for truncate function."""

    def test_long_text_is_cut_to_max_length(self):
        """Text longer than max_length keeps only its prefix."""
        result = truncate("This is a very long string that needs to be truncated", 20)
        assert result == "This is a very long "
        assert len(result) == 20

    def test_short_text_unchanged(self):
        """Text shorter than max_length is returned as-is."""
        assert truncate("Short string", 50) == "Short string"

    def test_exact_length_unchanged(self):
        """Text exactly at max_length is not cut."""
        assert truncate("Exact", 5) == "Exact"

    def test_none_returns_none(self):
        """Absent text stays absent."""
        assert truncate(None, 10) is None

    def test_none_with_zero_returns_none(self):
        """Zero max_length does not turn None into an empty string."""
        assert truncate(None, 0) is None

    def test_zero_max_length_returns_empty_string(self):
        """Zero max_length yields an empty, present string."""
        result = truncate("Some string", 0)
        assert result == ""
        assert result is not None

    def test_empty_text_unchanged(self):
        """Empty text fits any bound."""
        assert truncate("", 5) == ""
        assert truncate("", 0) == ""

    @pytest.mark.parametrize("max_length", [-1, -10])
    def test_negative_max_length_raises(self, max_length):
        """Negative max_length is rejected."""
        with pytest.raises(InvalidArgumentError, match="^Max length cannot be negative"):
            truncate("Some string", max_length)

    def test_negative_max_length_raises_for_none(self):
        """Validation runs before the None check."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            truncate(None, -1)
        assert exc_info.value.param_name == "max_length"

    def test_result_is_prefix(self):
        """Every cut result is a prefix of the input."""
        text = "abcdefghij"
        for n in range(len(text)):
            assert truncate(text, n) == text[:n]

    def test_cuts_by_code_point(self):
        """Truncation counts code points, not graphemes."""
        text = "e\u0301te"  # e + combining acute accent
        assert truncate(text, 1) == "e"


class TestTruncateWithEllipsis:
    """Tests for truncate_with_ellipsis function."""

    def test_long_text_gets_ellipsis(self):
        """Long text is cut and ends with '...'."""
        result = truncate_with_ellipsis("This is a very long string that needs truncation", 20)
        assert result == "This is a very lo..."
        assert len(result) == 20

    def test_short_text_unchanged(self):
        """Short text gets no ellipsis."""
        assert truncate_with_ellipsis("Short", 20) == "Short"

    def test_exact_length_has_no_ellipsis(self):
        """Text exactly at max_length is left alone."""
        assert truncate_with_ellipsis("Exactly ten", 11) == "Exactly ten"

    def test_one_over_limit(self):
        """One character too many still reserves room for the suffix."""
        assert truncate_with_ellipsis("abcdef", 5) == "ab..."

    def test_minimum_length_gives_bare_ellipsis(self):
        """max_length of 3 leaves room only for the dots."""
        assert truncate_with_ellipsis("Some string", 3) == ELLIPSIS

    def test_none_returns_none(self):
        """Absent text stays absent."""
        assert truncate_with_ellipsis(None, 10) is None

    @pytest.mark.parametrize("max_length", [2, 0, -5])
    def test_too_small_max_length_raises(self, max_length):
        """max_length below 3 cannot hold the ellipsis."""
        with pytest.raises(
            InvalidArgumentError,
            match="^Max length must be at least 3 to accommodate ellipsis",
        ):
            truncate_with_ellipsis("Some string", max_length)

    def test_too_small_max_length_raises_for_none(self):
        """Validation runs before the None check."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            truncate_with_ellipsis(None, 2)
        assert exc_info.value.param_name == "max_length"

    def test_truncated_result_shape(self):
        """Truncated output is max_length long with the input prefix kept."""
        text = "The quick brown fox jumps over the lazy dog"
        for n in range(3, len(text)):
            result = truncate_with_ellipsis(text, n)
            assert len(result) == n
            assert result.endswith(ELLIPSIS)
            assert result[: n - 3] == text[: n - 3]
