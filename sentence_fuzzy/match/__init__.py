"""
Matching engine for SentenceFuzzy.

Implements word-level subtoken matching and sentence-level greedy token
matching combined into a single similarity coefficient.
"""
