"""
Exceptions raised by SentenceFuzzy.
"""


class ConfigurationError(ValueError):
    """Raised when comparer settings break one of the construction rules."""
