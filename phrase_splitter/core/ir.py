"""Transcript record handed from a transcription surface to the formatters.

WHY: A transcript is more than its text. When it is saved or downloaded
the file name carries the provider, model, and language that produced it,
so formatters and download helpers need those alongside the text.

HOW: A single dataclass mirrors one entry in a list of finished
transcriptions: an id, the provider ("whisper" or "gemini"), the model
name, the language code, and the text itself.

RULES:
- text is the raw transcript exactly as the backend returned it
- transcript_id is any stable identifier (a timestamp works)
- provider is "whisper" unless the transcript came from Gemini
"""

from __future__ import annotations

from dataclasses import dataclass

PROVIDER_WHISPER = "whisper"
PROVIDER_GEMINI = "gemini"


@dataclass
class TranscriptRecord:
    """One finished transcription."""

    text: str
    transcript_id: str = "transcript"
    provider: str = PROVIDER_WHISPER
    model: str = "base"
    language: str = "en"

    @property
    def provider_name(self) -> str:
        """Provider label used in file names: "gemini" or "whisper"."""
        if self.provider == PROVIDER_GEMINI:
            return PROVIDER_GEMINI
        return PROVIDER_WHISPER
