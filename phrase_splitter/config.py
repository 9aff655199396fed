"""Configuration constants and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Server binding, request size limits, and accepted
input file types are plain data, not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from the environment with defaults.
load_int_setting() gives a clear error when a numeric setting is malformed.

RULES:
- Every default can be overridden via an environment variable
- Numeric settings that fail to parse raise ValueError at import time
- SUPPORTED_TEXT_FORMATS lists accepted transcript file extensions
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def load_int_setting(name: str, default: int) -> int:
    """Read an integer setting from the environment.

    WHY: Ports and size limits come from .env files as strings. A typo
    like ``API_PORT=80OO`` should fail loudly, not silently fall back.

    RULES:
    - Missing or blank variable returns ``default``
    - Non-integer values raise ValueError naming the variable
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "Setting {} must be an integer, got {!r}.".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# Supported transcript file extensions (CLI input)
# ---------------------------------------------------------------------------

SUPPORTED_TEXT_FORMATS: set[str] = {".txt", ".text", ".md"}
"""Transcript file extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# HTTP API configuration
# ---------------------------------------------------------------------------

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = load_int_setting("API_PORT", 8000)
MAX_TEXT_CHARS = load_int_setting("MAX_TEXT_CHARS", 1_000_000)
APP_ENVIRONMENT = os.getenv("APP_ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
