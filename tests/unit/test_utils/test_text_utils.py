"""
Unit tests for utils.text_utils module.
"""
import pytest
from utils.text_utils import (
    normalize_query,
    is_numeric_query,
    contains_casefold,
    escape_like,
)


class TestNormalizeQuery:
    """Tests for normalize_query function."""

    def test_none(self):
        """Test None becomes empty string."""
        assert normalize_query(None) == ""

    def test_keeps_whitespace(self):
        """Test surrounding whitespace is part of the query."""
        assert normalize_query("  cola ") == "  cola "

    def test_whitespace_only_is_not_blank(self):
        """Test only the empty string counts as blank."""
        assert normalize_query("   ") == "   "
        assert normalize_query("") == ""


class TestIsNumericQuery:
    """Tests for is_numeric_query function."""

    @pytest.mark.parametrize("query", ["123", "0042", "1.5", "-7"])
    def test_numeric(self, query):
        """Test plain numbers are numeric."""
        assert is_numeric_query(query)

    @pytest.mark.parametrize("query", ["", "P1", "12a", "nan", "inf"])
    def test_not_numeric(self, query):
        """Test text and non-finite values are not numeric."""
        assert not is_numeric_query(query)


class TestContainsCasefold:
    """Tests for contains_casefold function."""

    def test_case_insensitive(self):
        """Test matching ignores case."""
        assert contains_casefold("Lemon Soda", "soda")

    def test_none_never_matches(self):
        """Test missing field does not match."""
        assert not contains_casefold(None, "soda")

    def test_no_match(self):
        """Test absent substring."""
        assert not contains_casefold("Chips", "soda")


class TestEscapeLike:
    """Tests for escape_like function."""

    def test_wildcards_escaped(self):
        """Test % and _ are escaped."""
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_escape_char_escaped(self):
        """Test the escape character itself is doubled."""
        assert escape_like("a\\b") == "a\\\\b"

    def test_plain_text_unchanged(self):
        """Test text without wildcards is unchanged."""
        assert escape_like("cola") == "cola"
