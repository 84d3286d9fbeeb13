"""
Unit tests for normalization modules.
"""

import pytest
import pandas as pd
import sys
from pathlib import Path

# Add package root to path
sys.path.append(str(Path(__file__).parent.parent))

from sentence_fuzzy.normalize.sentence_normalizer import SentenceNormalizer


class TestSentenceNormalizer:
    """Test cases for sentence normalization."""

    def setup_method(self):
        """Setup test fixtures."""
        self.normalizer = SentenceNormalizer(min_word_length=3)

    def test_normalize_sentence_basic(self):
        """Test case folding and punctuation removal."""
        assert self.normalizer.normalize_sentence("The quick brown fox.") == "the quick brown fox"
        assert self.normalizer.normalize_sentence("Hello, World!") == "hello world"
        assert self.normalizer.normalize_sentence("Room 42") == "room 42"

    def test_normalize_sentence_merges_words(self):
        """Test that punctuation between words is dropped without a space."""
        assert self.normalizer.normalize_sentence("well-known") == "wellknown"
        assert self.normalizer.normalize_sentence("end.Start") == "endstart"

    def test_normalize_sentence_keeps_spaces(self):
        """Test that runs of spaces are not collapsed."""
        assert self.normalizer.normalize_sentence("a  b") == "a  b"
        assert self.normalizer.normalize_sentence("tab\there") == "tabhere"

    def test_normalize_sentence_unicode(self):
        """Test letters and digits of other scripts."""
        assert self.normalizer.normalize_sentence("Привет, МИР!") == "привет мир"
        assert self.normalizer.normalize_sentence("Straße №5") == "straße 5"
        assert self.normalizer.normalize_sentence("x²") == "x"

    def test_normalize_sentence_final_sigma(self):
        """Test that capital sigma folds the same way in every position."""
        assert self.normalizer.normalize_sentence("ΟΔΟΣ") == "οδοσ"
        assert self.normalizer.normalize_sentence("ΟΔΟΣ") == self.normalizer.normalize_sentence("οδοσ")
        assert self.normalizer.normalize_sentence("ΣΟΦΟΣ ΛΟΓΟΣ") == "σοφοσ λογοσ"

    def test_extract_tokens(self):
        """Test token extraction and length filter."""
        assert self.normalizer.extract_tokens("the quick brown fox") == ["the", "quick", "brown", "fox"]
        assert self.normalizer.extract_tokens("hi to the  moon") == ["the", "moon"]
        assert self.normalizer.extract_tokens("") == []

    def test_extract_tokens_keeps_duplicates(self):
        """Test that repeated words stay in order."""
        assert self.normalizer.extract_tokens("apple pie apple") == ["apple", "pie", "apple"]

    def test_tokenize_custom_length(self):
        """Test tokenization with a different minimum word length."""
        normalizer = SentenceNormalizer(min_word_length=5)
        assert normalizer.tokenize("The quick, brown fox!") == ["quick", "brown"]

    def test_is_blank(self):
        """Test blank and missing value detection."""
        assert self.normalizer.is_blank("")
        assert self.normalizer.is_blank("   ")
        assert self.normalizer.is_blank("\t\n")
        assert self.normalizer.is_blank(None)
        assert self.normalizer.is_blank(float("nan"))
        assert self.normalizer.is_blank(pd.NA)
        assert not self.normalizer.is_blank("hello")
        assert not self.normalizer.is_blank("!")

    def test_is_blank_rejects_non_text(self):
        """Test that non-text values are rejected."""
        with pytest.raises(TypeError):
            self.normalizer.is_blank(42)
        with pytest.raises(TypeError):
            self.normalizer.is_blank(["hello"])


if __name__ == "__main__":
    pytest.main([__file__])
