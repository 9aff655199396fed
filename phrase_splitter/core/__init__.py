"""Core phrase splitting, statistics, and transcript record.

WHY: The core package is the stable heart of the project: the pure
phrase splitter and the statistics built on it. Formatters, the CLI,
and the HTTP API all consume these functions.

HOW: phrases.py holds the splitter and its two formatting helpers,
stats.py computes PhraseStats, ir.py defines the TranscriptRecord that
formatters receive.

RULES:
- Nothing in core performs I/O or keeps state between calls
- Degenerate input yields empty results, never exceptions
"""

from phrase_splitter.core.phrases import (
    format_phrases_with_spacing,
    split_into_phrases,
    split_transcript_into_phrases,
)
from phrase_splitter.core.stats import PhraseStats, get_phrase_stats

__all__ = [
    "PhraseStats",
    "format_phrases_with_spacing",
    "get_phrase_stats",
    "split_into_phrases",
    "split_transcript_into_phrases",
]
