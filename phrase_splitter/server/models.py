"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint has its own request and response model. All models
include Field descriptions for rich OpenAPI docs. The stats response
uses camelCase aliases so the wire shape is
{phraseCount, totalWords, avgWordsPerPhrase, phrases}.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- text fields accept null; null behaves like empty text
- Response models never expose internal implementation details
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from phrase_splitter.core.stats import PhraseStats


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TextRequest(BaseModel):
    """A transcript to split or summarize."""

    text: Optional[str] = Field(
        default=None,
        description="Raw transcript text. Null or blank text yields no phrases.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"text": 'He said: "Hello there." Then he left.'},
        ]
    }}


class FormatRequest(BaseModel):
    """Phrases to join for display."""

    phrases: List[str] = Field(
        description="Ordered phrases to join with blank lines.",
    )


class DownloadRequest(BaseModel):
    """A finished transcript to download as a text file.

    RULES:
    - provider other than "gemini" is named "whisper" in the file name
    - show_phrases selects the phrases view instead of the raw text
    """

    text: str = Field(description="Raw transcript text.")
    transcript_id: str = Field(
        default="transcript",
        description="Stable transcript identifier, used in the file name.",
    )
    provider: str = Field(default="whisper", description="'whisper' or 'gemini'.")
    model: str = Field(default="base", description="Model that produced the transcript.")
    language: str = Field(default="en", description="Transcript language code.")
    show_phrases: bool = Field(
        default=False,
        description="Download the phrases view instead of the raw text.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class PhraseStatsResponse(BaseModel):
    """Phrase count, word count, and average words per phrase."""

    model_config = ConfigDict(populate_by_name=True)

    phrase_count: int = Field(alias="phraseCount", description="Number of phrases.")
    total_words: int = Field(
        alias="totalWords",
        description="Whitespace-delimited tokens in the original text.",
    )
    avg_words_per_phrase: int = Field(
        alias="avgWordsPerPhrase",
        description="total_words / phrase_count rounded half up; 0 without phrases.",
    )
    phrases: List[str] = Field(description="The phrases, in source order.")

    @classmethod
    def from_stats(cls, stats: PhraseStats) -> PhraseStatsResponse:
        return cls.model_validate(stats.to_dict())


class PhrasesResponse(BaseModel):
    """Result of splitting a transcript."""

    phrases: List[str] = Field(description="Trimmed, non-empty phrases in source order.")
    formatted: str = Field(description="Phrases joined with blank lines.")
    stats: PhraseStatsResponse = Field(description="Aggregate statistics.")


class FormattedResponse(BaseModel):
    """Display-ready transcript text."""

    text: str = Field(description="Phrases joined with blank lines.")


class FormatInfo(BaseModel):
    """Metadata for an available output format."""

    key: str = Field(description="Format identifier used in CLI flags.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix appended to the source stem.")


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(description="Service status, always 'ok' when reachable.")
    version: str = Field(description="Application version.")
    timestamp: str = Field(description="Current server time, ISO 8601 UTC.")
    uptime_s: float = Field(description="Seconds since the application started.")
    environment: str = Field(description="Deployment environment name.")


class ErrorResponse(BaseModel):
    """Consistent error body for 4xx responses."""

    detail: str = Field(description="Human-readable error message.")
