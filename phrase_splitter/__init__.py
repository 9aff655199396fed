"""Transcript Phrase Splitter: sentence and dialogue aware transcript chunking.

WHY: Speech-to-text backends (Whisper, Gemini) return a transcript as one
flat blob of text. Reading, reviewing, or downloading a long transcript is
much easier when it is broken into phrases: one sentence or one quoted
utterance per paragraph.

HOW: A pure, single-pass phrase splitter (core) feeds pluggable formatters
(raw blob or blank-line-separated phrases). The CLI and the FastAPI server
are thin surfaces over the same core functions.

RULES:
- The core is pure: no I/O, no shared state, no exceptions for bad input
- All surfaces (CLI, HTTP, formatters) call the same core functions
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
