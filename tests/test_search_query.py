"""Unit tests for Drive query escaping."""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from gdrive_mcp.client.search import build_full_text_query, escape_query_string


def _has_unescaped_quote(literal: str) -> bool:
    """Scan a query literal body the way the Drive parser would."""
    i = 0
    while i < len(literal):
        if literal[i] == "\\":
            i += 2
            continue
        if literal[i] == "'":
            return True
        i += 1
    return False


class TestEscapeQueryString:
    """Tests for escape_query_string."""

    def test_plain_text_unchanged(self):
        assert escape_query_string("budget 2024") == "budget 2024"

    def test_single_quotes_escaped(self):
        assert escape_query_string("O'Brien's file") == "O\\'Brien\\'s file"

    def test_backslash_escaped(self):
        assert escape_query_string("C:\\reports") == "C:\\\\reports"

    def test_backslash_before_quote(self):
        """A trailing backslash must not swallow the escape of the next quote."""
        assert escape_query_string("\\'") == "\\\\\\'"

    def test_empty_string(self):
        assert escape_query_string("") == ""

    def test_no_unescaped_quote_survives(self):
        samples = [
            "'",
            "''",
            "\\",
            "\\\\'",
            "a'b\\c'd",
            "' or name contains '",
            "\\' or '1'='1",
        ]
        for sample in samples:
            assert not _has_unescaped_quote(escape_query_string(sample)), sample

    def test_other_characters_untouched(self):
        sample = 'double "quotes" and (parens) & = < > unicode é'
        assert escape_query_string(sample) == sample


class TestBuildFullTextQuery:
    """Tests for build_full_text_query."""

    def test_wraps_in_full_text_clause(self):
        assert build_full_text_query("budget") == "fullText contains 'budget'"

    def test_escapes_input(self):
        assert build_full_text_query("O'Brien's file") == "fullText contains 'O\\'Brien\\'s file'"

    def test_injection_stays_inside_literal(self):
        query = build_full_text_query("x' or trashed = true or name contains '")
        literal = query[len("fullText contains '"):-1]
        assert query.endswith("'")
        assert not _has_unescaped_quote(literal)
