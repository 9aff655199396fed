"""Command-line interface for the Transcript Phrase Splitter.

WHY: Transcripts usually arrive as .txt files saved from a transcription
service. Users need a simple way to turn one into a phrase-per-paragraph
file, or to pipe text through the splitter, from the terminal.

HOW: Uses argparse to accept an input file (or "-" for stdin), output
format selection, output directory, and a stats flag. Reads the text,
wraps it in a TranscriptRecord, runs the selected formatters, and saves
each output next to the source (or to --output-dir). With --stdout, or
when reading stdin, the phrases view is printed to stdout instead.

RULES:
- Positional argument: input transcript path, or "-" for stdin
- Validates file extension against SUPPORTED_TEXT_FORMATS before reading
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-phrases-2.txt)
- --stats prints phrase count, word count, and average to stderr
- Status output goes to stderr; only phrase text ever goes to stdout
- Errors print "Error: ..." to stderr and exit with status 1
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from phrase_splitter.config import SUPPORTED_TEXT_FORMATS
from phrase_splitter.core.ir import TranscriptRecord
from phrase_splitter.core.phrases import split_transcript_into_phrases
from phrase_splitter.core.stats import get_phrase_stats
from phrase_splitter.formatters import FORMATTERS
from phrase_splitter.formatters.base import FormatterOutput

STDIN_MARKER = "-"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Pick a free output path for one formatter output.

    RULES:
    - First choice is {stem}{suffix}, e.g. interview-phrases.txt or
      interview-transcript.txt
    - If taken, a counter starting at 2 goes before ".txt"
      (interview-phrases-2.txt, interview-phrases-3.txt, ...)
    - Existing files are never overwritten
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    suffix_name, suffix_ext = os.path.splitext(suffix)

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Write one formatter output as UTF-8 and return the path used."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_format_keys(formats: Optional[str]) -> List[str]:
    if not formats:
        return list(FORMATTERS.keys())

    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _read_input(input_file: str) -> Tuple[str, Optional[Path]]:
    """Read transcript text from a file path or stdin.

    RULES:
    - "-" reads all of stdin and returns no input path
    - Files must exist and have a supported extension

    Returns:
        Tuple of (text, input_path or None).
    """
    if input_file == STDIN_MARKER:
        return sys.stdin.read(), None

    input_path = Path(input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_TEXT_FORMATS:
        _fail("Unsupported file type '{}'. Supported formats: {}".format(
            ext, ", ".join(sorted(SUPPORTED_TEXT_FORMATS))
        ))

    return input_path.read_text(encoding="utf-8"), input_path


def _report_stats(text: str) -> None:
    stats = get_phrase_stats(text)
    _status("Phrases: {}".format(stats.phrase_count))
    _status("Words: {}".format(stats.total_words))
    _status("Average words per phrase: {}".format(stats.avg_words_per_phrase))


def _run(args: argparse.Namespace) -> None:
    """Execute the split-and-save pipeline for one input."""
    format_keys = _parse_format_keys(args.formats)
    text, input_path = _read_input(args.input_file)

    if args.stats:
        _report_stats(text)

    if args.stdout or input_path is None:
        content = split_transcript_into_phrases(text)
        if content:
            sys.stdout.write(content + "\n")
        return

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    record = TranscriptRecord(text=text, transcript_id=input_path.stem)
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("Running {} formatter...".format(formatter.name))
        for output in formatter.format(record):
            saved_path = _save_output(output, input_path.stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="phrase_splitter",
        description="Split a transcript into sentence and dialogue phrases, "
                    "separated by blank lines.",
    )

    parser.add_argument(
        "input_file",
        help="Path to a transcript text file, or '-' to read from stdin.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the phrases to stdout instead of writing files.",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print phrase and word counts to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        _run(args)
    except (OSError, UnicodeDecodeError) as exc:
        _fail(str(exc))


if __name__ == "__main__":
    main()
