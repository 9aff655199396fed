"""Plain text formatter: the transcript exactly as transcribed.

WHY: Sometimes the reader wants the original blob, untouched, for
archival or for pasting into another tool.

HOW: Emits the record's text unchanged.

RULES:
- Content is byte-for-byte the record text (no normalization)
- Output suffix: "-transcript.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from phrase_splitter.core.ir import TranscriptRecord
from phrase_splitter.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that returns the raw transcript text."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, record: TranscriptRecord) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-transcript.txt",
                content=record.text,
                media_type="text/plain",
            )
        ]
