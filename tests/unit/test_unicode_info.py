"""
Unit tests for Unicode character descriptions.
"""

from translit.unicode_info import UnicodeChar, code_for, describe, name_for, unicode_info


class TestDescribe:
    """Tests for the single character helpers."""

    def test_code_for(self):
        """Test U+ notation with at least four hex digits."""
        assert code_for("x") == "U+0078"
        assert code_for("\U0001F600") == "U+1F600"

    def test_describe(self):
        """Test the one-line description."""
        assert describe("x") == "U+0078 LATIN SMALL LETTER X"
        assert describe("\u0627") == "U+0627 ARABIC LETTER ALEF"

    def test_hardwired_names(self):
        """Test names for control characters."""
        assert describe("\n") == "U+000A NEWLINE"
        assert name_for("\t") == "TAB"

    def test_unnamed(self):
        """Test an unassigned code point."""
        assert name_for("\u0378") == "<UNNAMED>"


class TestUnicodeInfo:
    """Tests for unicode_info."""

    def test_per_code_point(self):
        """Test one record per code point."""
        info = unicode_info("a\u0301")
        assert info == [
            UnicodeChar("a", "LATIN SMALL LETTER A", "U+0061", "Ll"),
            UnicodeChar("\u0301", "COMBINING ACUTE ACCENT", "U+0301", "Mn"),
        ]

    def test_control_characters_blank(self):
        """Test that newline and tab get an empty display character."""
        info = unicode_info("\t")
        assert info == [UnicodeChar("", "TAB", "U+0009", "Cc")]
