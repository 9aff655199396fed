"""Phrase splitter: segments a transcript into sentence and dialogue phrases.

WHY: ASR output is one long run of text. Readers want one sentence (or one
quoted utterance) per paragraph. A naive split on ". " breaks inside quoted
dialogue and on decimal numbers, so the splitter tracks quotes and looks
ahead before deciding that a sentence really ended.

HOW: The text is whitespace-normalized, then scanned once left to right.
Every character is appended to a phrase buffer. Three pieces of scan state
live in local variables: whether we are inside a quoted span, which closing
quote we expect, and whether the open quote was introduced by a colon.
The buffer is flushed as a phrase when:
  - a colon-introduced quote closes (the lead-in and the quote stay together)
  - a sentence end outside quotes is followed by an uppercase ASCII letter,
    a quote character, or the end of the text
Whatever remains after the scan becomes the last phrase.

RULES:
- Non-str, empty, or whitespace-only input returns [] (never raises)
- Every phrase is trimmed and non-empty
- Phrases keep source order; no characters other than whitespace are dropped
- One quote-expectation slot: nested or mixed quotes are not tracked as levels
- An unclosed quote suppresses sentence splitting for the rest of the text
- Apostrophes are quote characters too, so "It's" opens a quoted span
- No abbreviation dictionary: "Dr. Smith" splits after "Dr."
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List

_WHITESPACE_RUN = re.compile(r"\s+")

QUOTE_CHARS = frozenset({'"', "'", "\u201c", "\u201d", "\u2018", "\u2019"})
"""ASCII double/single quotes and the four curly quote code points."""

# Opening quote -> expected closing quote. ASCII quotes close themselves;
# a quote character missing here (a stray closing curly quote) does too.
_CLOSING_QUOTES = {
    '"': '"',
    "'": "'",
    "\u201c": "\u201d",
    "\u2018": "\u2019",
}

_SENTENCE_TERMINATORS = frozenset({".", "!", "?"})

# How far past a colon we look for the quote that opens dialogue.
_COLON_LOOKAHEAD = 9


def _normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip both ends."""
    return _WHITESPACE_RUN.sub(" ", text.strip())


def _is_uppercase_ascii(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_sentence_end(char: str, next_char: str) -> bool:
    """True for ``.``/``!``/``?`` followed by whitespace, a quote, or nothing."""
    if char not in _SENTENCE_TERMINATORS:
        return False
    return not next_char or next_char.isspace() or next_char in QUOTE_CHARS


def _has_quote_ahead(text: str, index: int) -> bool:
    """Check whether a quote follows position ``index`` through whitespace only.

    Looks at most _COLON_LOOKAHEAD characters past ``index``.
    """
    end = min(index + 1 + _COLON_LOOKAHEAD, len(text))
    for j in range(index + 1, end):
        if text[j] in QUOTE_CHARS:
            return True
        if not text[j].isspace():
            return False
    return False


def _next_non_space(text: str, index: int) -> str:
    """Return the first non-whitespace character after ``index``, or ""."""
    for j in range(index + 1, len(text)):
        if not text[j].isspace():
            return text[j]
    return ""


def split_into_phrases(text: Any) -> List[str]:
    """Split a transcript into an ordered list of phrases.

    WHY: This is the single entry point for phrase segmentation. The
    formatters, CLI, and HTTP API all go through it.

    HOW: See the module docstring for the scan. Scan state is local to
    this call, so concurrent calls never interfere.

    RULES:
    - Returns [] for non-str input and for text that normalizes to ""
    - A colon-introduced quote is flushed together with its lead-in clause
    - Sentence ends inside a quoted span never split
    - Deterministic: the same input always yields the same list

    Args:
        text: The raw transcript. Anything that is not a str is treated
              as empty input.

    Returns:
        A new list of trimmed, non-empty phrase strings in source order.
    """
    if not text or not isinstance(text, str):
        return []

    normalized = _normalize_whitespace(text)
    last_index = len(normalized) - 1

    phrases: List[str] = []
    current = ""
    in_quotes = False
    quote_char = None
    after_colon = False

    def add_phrase(phrase: str) -> None:
        trimmed = phrase.strip()
        if trimmed:
            phrases.append(trimmed)

    for i, char in enumerate(normalized):
        next_char = normalized[i + 1] if i < last_index else ""
        current += char

        if char in QUOTE_CHARS:
            if not in_quotes:
                in_quotes = True
                quote_char = _CLOSING_QUOTES.get(char, char)
                if current[:-1].strip().endswith(":"):
                    after_colon = True
            elif char == quote_char:
                in_quotes = False
                if after_colon:
                    # Dialogue after "said:" ends here, lead-in included
                    add_phrase(current)
                    current = ""
                    after_colon = False
                    continue
                quote_char = None

        if char == ":" and not in_quotes and _has_quote_ahead(normalized, i):
            after_colon = True

        if not in_quotes and _is_sentence_end(char, next_char):
            following = _next_non_space(normalized, i)
            if (
                not following
                or _is_uppercase_ascii(following)
                or following in QUOTE_CHARS
                or i == last_index
            ):
                add_phrase(current)
                current = ""
                after_colon = False

    add_phrase(current)
    return phrases


def format_phrases_with_spacing(phrases: Iterable[str]) -> str:
    """Join phrases with a blank line between each pair.

    RULES:
    - Separator is exactly "\\n\\n"
    - Empty input gives ""; no trailing separator
    """
    return "\n\n".join(phrases)


def split_transcript_into_phrases(transcript: Any) -> str:
    """Split a transcript and return the phrases as one display-ready string."""
    return format_phrases_with_spacing(split_into_phrases(transcript))
