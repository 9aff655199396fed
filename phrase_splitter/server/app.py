"""FastAPI application exposing the phrase splitter over HTTP.

WHY: Transcription front-ends (browser UIs, scripts, other services) need
the phrase view without embedding the splitter. FastAPI provides request
validation and automatic OpenAPI documentation at /docs and /redoc.

HOW: A single FastAPI app exposes the four core operations (split,
format, split-and-format, stats), a transcript download endpoint that
names files the same way the UI does, a format listing, and a health
check. Every handler is a thin wrapper over phrase_splitter.core.

RULES:
- Text longer than MAX_TEXT_CHARS is rejected with 413
- Download name fields outside [A-Za-z0-9._-] (or containing "..") get 400
- Null or blank text is not an error: it yields empty phrases
- Error responses use a consistent ErrorResponse schema
- Handlers never mutate module state except the startup timestamp
"""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from phrase_splitter import __version__
from phrase_splitter.config import (
    API_HOST,
    API_PORT,
    APP_ENVIRONMENT,
    LOG_LEVEL,
    MAX_TEXT_CHARS,
)
from phrase_splitter.core.ir import TranscriptRecord
from phrase_splitter.core.phrases import (
    format_phrases_with_spacing,
    split_into_phrases,
)
from phrase_splitter.core.stats import get_phrase_stats
from phrase_splitter.formatters import (
    FORMATTERS,
    download_filename,
    select_download_output,
)
from phrase_splitter.server.models import (
    DownloadRequest,
    ErrorResponse,
    FormatInfo,
    FormatRequest,
    FormattedResponse,
    HealthResponse,
    PhraseStatsResponse,
    PhrasesResponse,
    TextRequest,
)

logger = logging.getLogger(__name__)

_started_at = time.monotonic()

app = FastAPI(
    title="Transcript Phrase Splitter API",
    description=(
        "Split speech-to-text transcripts into sentence and dialogue "
        "phrases, format them for display, compute phrase statistics, "
        "and download transcripts as text files."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

_SAFE_NAME_PART = re.compile(r"[A-Za-z0-9._-]+")

_TOO_LARGE = {413: {"model": ErrorResponse, "description": "Text exceeds the size limit"}}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_text_size(text: Optional[str]) -> None:
    """Raise 413 if ``text`` is longer than MAX_TEXT_CHARS."""
    if text is not None and len(text) > MAX_TEXT_CHARS:
        raise HTTPException(
            status_code=413,
            detail="Text too large ({:,} chars, max {:,})".format(
                len(text), MAX_TEXT_CHARS
            ),
        )


# ---------------------------------------------------------------------------
# Endpoints: Phrases
# ---------------------------------------------------------------------------


@app.post(
    "/phrases",
    response_model=PhrasesResponse,
    tags=["phrases"],
    summary="Split a transcript into phrases",
    description=(
        "Splits the text at sentence ends and colon-introduced dialogue. "
        "Returns the phrases, the blank-line formatted text, and statistics."
    ),
    responses=_TOO_LARGE,
)
async def create_phrases(request: TextRequest) -> PhrasesResponse:
    _check_text_size(request.text)
    phrases = split_into_phrases(request.text)
    stats = get_phrase_stats(request.text)
    logger.debug("Split %d chars into %d phrases", len(request.text or ""), len(phrases))
    return PhrasesResponse(
        phrases=phrases,
        formatted=format_phrases_with_spacing(phrases),
        stats=PhraseStatsResponse.from_stats(stats),
    )


@app.post(
    "/phrases/format",
    response_model=FormattedResponse,
    tags=["phrases"],
    summary="Join phrases with blank lines",
    description="Joins the given phrases with a blank line between each pair.",
)
async def format_phrases(request: FormatRequest) -> FormattedResponse:
    return FormattedResponse(text=format_phrases_with_spacing(request.phrases))


@app.post(
    "/phrases/stats",
    response_model=PhraseStatsResponse,
    response_model_by_alias=True,
    tags=["phrases"],
    summary="Compute phrase statistics",
    description=(
        "Returns phraseCount, totalWords, avgWordsPerPhrase, and the phrases. "
        "totalWords counts whitespace-separated tokens of the original text."
    ),
    responses=_TOO_LARGE,
)
async def phrase_stats(request: TextRequest) -> PhraseStatsResponse:
    _check_text_size(request.text)
    return PhraseStatsResponse.from_stats(get_phrase_stats(request.text))


# ---------------------------------------------------------------------------
# Endpoints: Transcripts
# ---------------------------------------------------------------------------


@app.post(
    "/transcripts/download",
    tags=["transcripts"],
    summary="Download a transcript as a text file",
    description=(
        "Returns the raw transcript, or its phrases view when show_phrases "
        "is true, as a text/plain attachment named "
        "{provider}_{model}_{language}_{transcript_id}.txt. Name fields "
        "may contain only letters, digits, '.', '_' and '-'."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unsafe characters in a download name field"},
        **_TOO_LARGE,
    },
)
async def download_transcript(request: DownloadRequest) -> Response:
    _check_text_size(request.text)
    for field in ("transcript_id", "provider", "model", "language"):
        value = getattr(request, field)
        if not _SAFE_NAME_PART.fullmatch(value) or ".." in value:
            raise HTTPException(
                status_code=400,
                detail="Invalid {}: use only letters, digits, '.', '_' and '-'".format(field),
            )

    record = TranscriptRecord(
        text=request.text,
        transcript_id=request.transcript_id,
        provider=request.provider,
        model=request.model,
        language=request.language,
    )
    filename = download_filename(record)
    output = select_download_output(record, request.show_phrases)

    logger.info("Serving transcript download %s", filename)
    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description="Returns all output formats with identifiers, names, and file suffixes.",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    empty_record = TranscriptRecord(text="")
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        outputs = formatter.format(empty_record)
        suffix = outputs[0].suffix if outputs else ""
        result.append(FormatInfo(key=key, name=formatter.name, suffix=suffix))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime_s=round(time.monotonic() - _started_at, 3),
        environment=APP_ENVIRONMENT,
    )


def run_api():
    """Entry point for the phrase-splitter-api console script."""
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting phrase splitter API on %s:%d", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
