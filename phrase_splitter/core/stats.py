"""Aggregate statistics over a split transcript.

WHY: Callers deciding how to present a transcript (one blob or spaced
phrases) want a quick summary: how many phrases, how many words, and how
long a typical phrase is.

HOW: get_phrase_stats() splits the transcript with split_into_phrases()
and counts words independently on the *original* string, then averages.

RULES:
- total_words counts the tokens of re.split(r"\\s+", transcript) on the
  unnormalized text: "" counts as 1, and leading or trailing whitespace
  each add one empty token
- avg_words_per_phrase rounds half up (5 / 2 -> 3) and is 0 with no phrases
- Non-str input gives all-zero stats with no phrases
- PhraseStats is frozen; phrases is a tuple copy
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from phrase_splitter.core.phrases import split_into_phrases

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class PhraseStats:
    """Summary of one split transcript.

    RULES:
    - phrase_count == len(phrases)
    - total_words is computed from the original text, not from phrases
    - avg_words_per_phrase is an int (rounded half up)
    """

    phrase_count: int
    total_words: int
    avg_words_per_phrase: int
    phrases: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase record shape used by the HTTP API."""
        return {
            "phraseCount": self.phrase_count,
            "totalWords": self.total_words,
            "avgWordsPerPhrase": self.avg_words_per_phrase,
            "phrases": list(self.phrases),
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_words(transcript: str) -> int:
    """Count whitespace-delimited tokens, empty edge tokens included."""
    return len(_WHITESPACE_RUN.split(transcript))


def get_phrase_stats(transcript: Any) -> PhraseStats:
    """Split ``transcript`` and compute phrase count and word averages.

    Args:
        transcript: The raw transcript text.

    Returns:
        A PhraseStats carrying the counts and a copy of the phrases.
    """
    if not isinstance(transcript, str):
        return PhraseStats(phrase_count=0, total_words=0, avg_words_per_phrase=0)

    phrases = split_into_phrases(transcript)
    total_words = count_words(transcript)
    if phrases:
        avg = _round_half_up(total_words / len(phrases))
    else:
        avg = 0

    return PhraseStats(
        phrase_count=len(phrases),
        total_words=total_words,
        avg_words_per_phrase=avg,
        phrases=tuple(phrases),
    )
