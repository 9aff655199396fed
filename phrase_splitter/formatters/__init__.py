"""Output formatter registry and download helpers.

WHY: The CLI and API layers need a single lookup to find the right
formatter by name, and a single rule for naming downloaded transcripts.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["phrases"]()``.
download_filename() and select_download_output() reproduce the download
behavior of the transcription UI: one .txt file per transcript, holding
either the raw text or the phrases view, produced by the registered
formatter.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API fields)
- Values are BaseFormatter subclasses (not instances)
- Download file name: {provider}_{model}_{language}_{id}.txt
"""

from __future__ import annotations

from phrase_splitter.core.ir import TranscriptRecord
from phrase_splitter.formatters.base import BaseFormatter, FormatterOutput
from phrase_splitter.formatters.phrases import PhrasesFormatter
from phrase_splitter.formatters.plain_text import PlainTextFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "phrases": PhrasesFormatter,
}


def download_filename(record: TranscriptRecord) -> str:
    """Build the download file name for a transcript.

    RULES:
    - Provider is "gemini" for Gemini transcripts, "whisper" otherwise
    - Always ends in ".txt"
    """
    return "{}_{}_{}_{}.txt".format(
        record.provider_name, record.model, record.language, record.transcript_id,
    )


def select_download_output(record: TranscriptRecord, show_phrases: bool) -> FormatterOutput:
    """Run the formatter that backs a transcript download.

    RULES:
    - show_phrases picks the "phrases" formatter, otherwise "plain_text"
    - Only the first output is used; both formatters produce exactly one
    """
    key = "phrases" if show_phrases else "plain_text"
    return FORMATTERS[key]().format(record)[0]


def select_download_text(record: TranscriptRecord, show_phrases: bool) -> str:
    """Return the phrases view when ``show_phrases`` is set, else the raw text."""
    return select_download_output(record, show_phrases).content
