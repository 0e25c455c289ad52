"""Tests for utils/text_split.py."""

import pytest

from marknotion.utils.text_split import ELLIPSIS, split_string, truncate_with_ellipsis

# =========================================================================
# split_string tests
# =========================================================================

class TestSplitString:
    """Tests for split_string utility."""

    def test_empty(self):
        assert split_string("") == []

    def test_under_limit(self):
        assert split_string("hello") == ["hello"]

    def test_at_limit(self):
        assert split_string("a" * 2000) == ["a" * 2000]

    def test_over_limit(self):
        parts = split_string("a" * 4500)
        assert [len(p) for p in parts] == [2000, 2000, 500]

    def test_custom_limit(self):
        assert split_string("hello world", 5) == ["hello", " worl", "d"]

    def test_astral_characters_not_split(self):
        text = "\U0001F600" * 5
        assert split_string(text, 2) == ["\U0001F600" * 2, "\U0001F600" * 2, "\U0001F600"]

    @pytest.mark.parametrize("limit", [0, -1])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValueError, match="limit"):
            split_string("abc", limit)


# =========================================================================
# truncate_with_ellipsis tests
# =========================================================================

class TestTruncateWithEllipsis:
    """Tests for truncate_with_ellipsis utility."""

    def test_short_unchanged(self):
        assert truncate_with_ellipsis("abc", 10) == "abc"

    def test_exact_unchanged(self):
        assert truncate_with_ellipsis("abcdef", 6) == "abcdef"

    def test_truncated(self):
        assert truncate_with_ellipsis("abcdefgh", 6) == "abc..."

    def test_notion_content_limit(self):
        result = truncate_with_ellipsis("x" * 2001, 2000)
        assert len(result) == 2000
        assert result.endswith(ELLIPSIS)

    @pytest.mark.parametrize("limit", [0, 3])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValueError, match="limit"):
            truncate_with_ellipsis("abcdef", limit)
