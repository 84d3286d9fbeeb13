"""
SentenceFuzzy - Fuzzy Sentence Comparison Engine

Scores how similar two natural-language sentences are while tolerating
typos, inflection and minor word-order or spelling differences, using
subtoken overlap instead of dictionaries or language models.
"""

from sentence_fuzzy.exceptions import ConfigurationError
from sentence_fuzzy.match.comparer import FuzzyComparer, create_fuzzy_comparer

__version__ = "1.0.0"
__author__ = "SentenceFuzzy Team"

__all__ = [
    "__version__",
    "__author__",
    "ConfigurationError",
    "FuzzyComparer",
    "create_fuzzy_comparer",
]
