"""Phrases formatter: one sentence or quoted utterance per paragraph.

WHY: Long transcripts are hard to scan as one blob. Splitting at sentence
and dialogue boundaries, with a blank line between phrases, makes them
readable at a glance.

HOW: Runs split_transcript_into_phrases() over the record text.

RULES:
- Phrases separated by exactly one blank line ("\\n\\n")
- Empty or whitespace-only text gives empty content
- Output suffix: "-phrases.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from phrase_splitter.core.ir import TranscriptRecord
from phrase_splitter.core.phrases import split_transcript_into_phrases
from phrase_splitter.formatters.base import BaseFormatter, FormatterOutput


class PhrasesFormatter(BaseFormatter):
    """Formatter that splits the transcript into blank-line-separated phrases."""

    @property
    def name(self) -> str:
        return "Phrases"

    def format(self, record: TranscriptRecord) -> List[FormatterOutput]:
        """Split the record text into phrases.

        Returns:
            A single-element list containing the phrases output.
        """
        return [
            FormatterOutput(
                suffix="-phrases.txt",
                content=split_transcript_into_phrases(record.text),
                media_type="text/plain",
            )
        ]
