"""
Sentence normalization for SentenceFuzzy.

Folds case, strips punctuation and symbols, and splits sentences into
tokens long enough to take part in fuzzy matching.
"""

import logging
from typing import Any, List
import pandas as pd

logger = logging.getLogger(__name__)


class SentenceNormalizer:
    """
    Normalizes sentences and extracts matchable tokens.

    Only letters, decimal digits and the plain space survive normalization.
    Runs of spaces are not collapsed; the empty pieces they leave behind are
    dropped by the token length filter.
    """

    def __init__(self, min_word_length: int = 3):
        """
        Initialize sentence normalizer.

        Args:
            min_word_length: Shortest token kept by tokenization
        """
        self.min_word_length = min_word_length
        logger.debug(f"Initialized SentenceNormalizer (min_word_length={min_word_length})")

    @staticmethod
    def is_blank(sentence: Any) -> bool:
        """
        Check whether a sentence is missing, empty or whitespace only.

        Missing values coming from DataFrame cells (None, NaN, pd.NA) count
        as blank.

        Raises:
            TypeError: if the value is neither text nor a missing value
        """
        if isinstance(sentence, str):
            return not sentence.strip()
        if pd.api.types.is_scalar(sentence) and pd.isna(sentence):
            return True
        raise TypeError(f"Expected a sentence string, got {type(sentence).__name__}")

    @staticmethod
    def is_normal_char(char: str) -> bool:
        """Letters and digits of any script, and the space character."""
        return char.isalpha() or char.isdecimal() or char == ' '

    def normalize_sentence(self, sentence: str) -> str:
        """
        Normalize a single sentence.

        Punctuation is removed without substitution, so "well-known" becomes
        "wellknown".

        Args:
            sentence: Raw sentence

        Returns:
            Normalized sentence
        """
        # Per character, so a word-final capital sigma folds to "σ" like any other
        lowered = ''.join(char.lower() for char in sentence)
        return ''.join(char for char in lowered if self.is_normal_char(char))

    def extract_tokens(self, sentence: str) -> List[str]:
        """
        Extract tokens from a normalized sentence.

        Args:
            sentence: Normalized sentence

        Returns:
            List of tokens at least min_word_length characters long, in order
        """
        return [word for word in sentence.split(' ') if len(word) >= self.min_word_length]

    def tokenize(self, sentence: str) -> List[str]:
        """Normalize a raw sentence and extract its tokens."""
        return self.extract_tokens(self.normalize_sentence(sentence))
