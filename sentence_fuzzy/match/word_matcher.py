"""
Word-level fuzzy matching for SentenceFuzzy.

Decomposes tokens into overlapping fixed-width subtokens and scores their
overlap with a Tanimoto coefficient.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


class WordMatcher:
    """
    Decides whether two tokens are spelling variants of each other.

    Subtokens are matched greedily: each subtoken of the first token takes
    the first unused equal subtoken of the second token. The matching is
    first-fit, not maximum, and scores depend on it.
    """

    def __init__(self, threshold_word: float = 0.45, subtoken_length: int = 2):
        """
        Initialize word matcher.

        Args:
            threshold_word: Minimum Tanimoto coefficient for two tokens to be fuzzy equal
            subtoken_length: Width of the sliding window used to cut subtokens
        """
        self.threshold_word = threshold_word
        self.subtoken_length = subtoken_length
        logger.debug(f"Initialized WordMatcher (threshold_word={threshold_word}, "
                     f"subtoken_length={subtoken_length})")

    def get_subtokens(self, token: str) -> List[str]:
        """
        Cut a token into overlapping subtokens.

        Args:
            token: Normalized token, at least subtoken_length characters long

        Returns:
            len(token) - subtoken_length + 1 subtokens, in order
        """
        width = self.subtoken_length
        return [token[i:i + width] for i in range(len(token) - width + 1)]

    def count_equal_subtokens(self, first_subtokens: List[str], second_subtokens: List[str]) -> int:
        """
        Count greedily matched subtokens.

        Args:
            first_subtokens: Subtokens of the first token
            second_subtokens: Subtokens of the second token

        Returns:
            Number of one-to-one exact matches
        """
        used = [False] * len(second_subtokens)
        equal_count = 0

        for first in first_subtokens:
            for j, second in enumerate(second_subtokens):
                if not used[j] and first == second:
                    used[j] = True
                    equal_count += 1
                    break

        return equal_count

    def calculate_word_similarity(self, first_token: str, second_token: str) -> float:
        """
        Calculate the Tanimoto coefficient of two tokens over their subtokens.

        Args:
            first_token: First normalized token
            second_token: Second normalized token

        Returns:
            Coefficient in [0, 1]
        """
        first_subtokens = self.get_subtokens(first_token)
        second_subtokens = self.get_subtokens(second_token)
        equal_count = self.count_equal_subtokens(first_subtokens, second_subtokens)

        # Never zero while both tokens yield at least one subtoken
        union_count = len(first_subtokens) + len(second_subtokens) - equal_count
        return equal_count / union_count

    def is_fuzzy_equal(self, first_token: str, second_token: str) -> bool:
        """Check whether two tokens reach the word threshold."""
        return self.threshold_word <= self.calculate_word_similarity(first_token, second_token)
