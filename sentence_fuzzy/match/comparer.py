"""
Fuzzy sentence comparer for SentenceFuzzy.

Combines normalization, tokenization and word-level fuzzy matching into a
single similarity coefficient with a threshold-based equality decision.
"""

import logging
from typing import Any, Dict, List, Optional

from sentence_fuzzy.match.word_matcher import WordMatcher
from sentence_fuzzy.normalize.config import (check_comparer_settings, get_default_comparer_config,
                                             load_comparer_config, merge_configs)
from sentence_fuzzy.normalize.sentence_normalizer import SentenceNormalizer

logger = logging.getLogger(__name__)


class FuzzyComparer:
    """
    Fuzzy equality scorer for pairs of sentences.

    The similarity of two sentences is m / (n1 + n2 - m), where n1 and n2 are
    their token counts and m is the number of tokens paired up by greedy
    first-fit matching with word-level fuzzy equality.

    Settings are fixed at construction, so one instance can be shared between
    threads. All matching state is local to each call.

    Cost grows as O(n1 * n2 * L^2) word comparisons, L being the longest token,
    which is fine for sentences but slow for whole documents.
    """

    def __init__(self, threshold_sentence: float = 0.25, threshold_word: float = 0.45,
                 min_word_length: int = 3, subtoken_length: int = 2):
        """
        Initialize fuzzy comparer with its settings.

        Args:
            threshold_sentence: Minimum similarity for sentences to be fuzzy equal
            threshold_word: Minimum subtoken coefficient for tokens to be fuzzy equal
            min_word_length: Shorter words are ignored
            subtoken_length: Subtoken width, not larger than min_word_length

        Raises:
            ConfigurationError: if any setting breaks a construction rule
        """
        check_comparer_settings(threshold_sentence, threshold_word, min_word_length, subtoken_length)

        self._threshold_sentence = threshold_sentence
        self._threshold_word = threshold_word
        self._min_word_length = min_word_length
        self._subtoken_length = subtoken_length

        self._normalizer = SentenceNormalizer(min_word_length)
        self._word_matcher = WordMatcher(threshold_word, subtoken_length)

        logger.info(f"Initialized {self!r}")

    @property
    def threshold_sentence(self) -> float:
        return self._threshold_sentence

    @property
    def threshold_word(self) -> float:
        return self._threshold_word

    @property
    def min_word_length(self) -> int:
        return self._min_word_length

    @property
    def subtoken_length(self) -> int:
        return self._subtoken_length

    def __repr__(self) -> str:
        return (f"FuzzyComparer(threshold_sentence={self._threshold_sentence}, "
                f"threshold_word={self._threshold_word}, "
                f"min_word_length={self._min_word_length}, "
                f"subtoken_length={self._subtoken_length})")

    def is_fuzzy_equal(self, first: str, second: str) -> bool:
        """
        Check whether two sentences are fuzzy equal.

        Args:
            first: First sentence
            second: Second sentence

        Returns:
            True if the similarity reaches threshold_sentence
        """
        return self._threshold_sentence <= self.calculate_similarity(first, second)

    def calculate_similarity(self, first: str, second: str) -> float:
        """
        Calculate the fuzzy similarity of two sentences.

        Two blank sentences are identical (1.0); a blank and a non-blank one
        share nothing (0.0).

        Args:
            first: First sentence
            second: Second sentence

        Returns:
            Similarity coefficient in [0, 1]
        """
        return self.compare(first, second)["similarity"]

    def compare(self, first: str, second: str) -> Dict[str, Any]:
        """
        Compare two sentences and report how the score was reached.

        Args:
            first: First sentence
            second: Second sentence

        Returns:
            Dictionary with similarity, decision, matched tokens and the
            tokens of each sentence
        """
        first_blank = self._normalizer.is_blank(first)
        second_blank = self._normalizer.is_blank(second)

        if first_blank or second_blank:
            similarity = 1.0 if first_blank and second_blank else 0.0
            return self._build_result(similarity, [], [], [])

        tokens_first = self._normalizer.tokenize(first)
        tokens_second = self._normalizer.tokenize(second)

        matched_tokens = self.get_fuzzy_equal_tokens(tokens_first, tokens_second)

        equal_count = len(matched_tokens)
        union_count = len(tokens_first) + len(tokens_second) - equal_count

        if union_count == 0:
            # Only short words on both sides: nothing left to tell them apart
            similarity = 1.0
        else:
            similarity = equal_count / union_count

        logger.debug(f"Matched {equal_count} of {len(tokens_first)}/{len(tokens_second)} tokens, "
                     f"similarity={similarity:.3f}")

        return self._build_result(similarity, matched_tokens, tokens_first, tokens_second)

    def get_fuzzy_equal_tokens(self, tokens_first: List[str], tokens_second: List[str]) -> List[str]:
        """
        Pair up fuzzy equal tokens greedily.

        Each token of the first sequence takes the first unused fuzzy equal
        token of the second sequence, if any.

        Args:
            tokens_first: Tokens of the first sentence
            tokens_second: Tokens of the second sentence

        Returns:
            Matched tokens of the first sequence, in order
        """
        used = [False] * len(tokens_second)
        equal_tokens = []

        for token_first in tokens_first:
            for j, token_second in enumerate(tokens_second):
                if not used[j] and self._word_matcher.is_fuzzy_equal(token_first, token_second):
                    used[j] = True
                    equal_tokens.append(token_first)
                    break

        return equal_tokens

    def _build_result(self, similarity: float, matched_tokens: List[str],
                      tokens_first: List[str], tokens_second: List[str]) -> Dict[str, Any]:
        return {
            "similarity": similarity,
            "is_fuzzy_equal": self._threshold_sentence <= similarity,
            "matched_tokens": matched_tokens,
            "first_tokens": tokens_first,
            "second_tokens": tokens_second
        }


def create_fuzzy_comparer(config_path: Optional[str] = None, **overrides) -> FuzzyComparer:
    """
    Convenience function to create a fuzzy comparer.

    Args:
        config_path: Path to YAML configuration file (optional)
        **overrides: Settings taking precedence over the file and the defaults

    Returns:
        Initialized fuzzy comparer

    Raises:
        ConfigurationError: if the resulting settings are invalid
    """
    if config_path:
        config = load_comparer_config(config_path)
    else:
        config = get_default_comparer_config()

    config = merge_configs(config, overrides)

    return FuzzyComparer(
        threshold_sentence=config["threshold_sentence"],
        threshold_word=config["threshold_word"],
        min_word_length=config["min_word_length"],
        subtoken_length=config["subtoken_length"]
    )
