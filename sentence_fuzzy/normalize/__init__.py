"""
Sentence normalization modules for SentenceFuzzy.

Handles case folding, character filtering and tokenization of sentences,
plus loading and validation of comparer configuration.
"""
