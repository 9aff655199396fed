"""Shared test fixtures for the phrase_splitter test suite.

WHY: Several test modules need the same sample transcripts and records.
Centralizing them here keeps every module on the same inputs.

HOW: Module-level constants hold literal transcripts; pytest fixtures
wrap them (and a TranscriptRecord) for injection.

RULES:
- Sample transcripts are plain literals with hand-checked expected phrases
- Fixtures return fresh objects so tests can mutate them freely
"""

from typing import List

import pytest

from phrase_splitter.core.ir import TranscriptRecord


DIALOGUE_TRANSCRIPT = (
    'The meeting started late. She said: "We need more time." '
    "Nobody answered. Then the manager spoke: “Fine, one more week.” "
    "Everyone nodded."
)

DIALOGUE_PHRASES: List[str] = [
    "The meeting started late.",
    'She said: "We need more time."',
    "Nobody answered.",
    "Then the manager spoke: “Fine, one more week.”",
    "Everyone nodded.",
]


@pytest.fixture
def dialogue_transcript():
    """A transcript mixing narration and colon-introduced quotes."""
    return DIALOGUE_TRANSCRIPT


@pytest.fixture
def dialogue_phrases():
    """Expected phrases for dialogue_transcript."""
    return list(DIALOGUE_PHRASES)


@pytest.fixture
def sample_record():
    """A Whisper transcript record with two sentences."""
    return TranscriptRecord(
        text="Hello world. This is a test.",
        transcript_id="1718000000000",
        provider="whisper",
        model="base",
        language="it",
    )
