"""
Unit tests for the passthrough classifier.
"""

import pytest

from translit.passthrough import COMMON_PUNCTUATION, DIGITS, NBSP, PassthroughClassifier


class TestPassthroughClassifier:
    """Tests for PassthroughClassifier."""

    def test_members_pass(self):
        """Test that listed characters pass through."""
        classifier = PassthroughClassifier(COMMON_PUNCTUATION)
        assert classifier.is_passthrough(" ")
        assert classifier.is_passthrough(NBSP)
        assert classifier.is_passthrough(".")

    def test_ascii_off_by_default(self):
        """Test that ASCII letters are not accepted by default."""
        classifier = PassthroughClassifier(COMMON_PUNCTUATION)
        assert not classifier.accept_all_ascii
        assert not classifier.is_passthrough("a")

    def test_accept_all_ascii(self):
        """Test that every ASCII character passes with accept_all_ascii."""
        classifier = PassthroughClassifier(accept_all_ascii=True)
        assert classifier.is_passthrough("a")
        assert classifier.is_passthrough("\x7f")
        assert not classifier.is_passthrough("é")

    def test_accept_any(self):
        """Test the classifier that lets everything through."""
        classifier = PassthroughClassifier.everything()
        assert classifier.is_passthrough("ж")
        assert classifier("Σ")

    def test_digits(self):
        """Test the predefined digit set."""
        classifier = PassthroughClassifier(DIGITS)
        assert all(classifier.is_passthrough(d) for d in "0123456789")
        assert not classifier.is_passthrough("௧")

    def test_multi_character_entry_rejected(self):
        """Test that set members must be single code points."""
        with pytest.raises(ValueError):
            PassthroughClassifier(["ab"])

    def test_contains(self):
        """Test membership syntax."""
        classifier = PassthroughClassifier(" ")
        assert " " in classifier
        assert "x" not in classifier
        assert "  " not in classifier
