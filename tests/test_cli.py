"""Tests for the command-line interface.

WHY: The CLI is the main way transcripts on disk get split. It must
validate input before touching the file system, keep stdout clean for
piping, and never overwrite earlier output.

HOW: main() is called with explicit argv. File I/O uses tmp_path;
stdin is replaced via monkeypatch; stdout/stderr are read with capsys.

RULES:
- Error paths assert SystemExit code 1 and an "Error:" line on stderr
- No test depends on the current working directory
"""

import io

import pytest

from phrase_splitter.cli import _read_input, _resolve_output_path, build_parser, main


@pytest.fixture
def transcript_file(tmp_path):
    path = tmp_path / "interview.txt"
    path.write_text("Hello world. This is a test.", encoding="utf-8")
    return path


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["in.txt"])
        assert args.input_file == "in.txt"
        assert args.formats is None
        assert args.output_dir is None
        assert args.stdout is False
        assert args.stats is False

    def test_flags(self):
        args = build_parser().parse_args(
            ["in.txt", "--formats", "phrases", "--output-dir", "out", "--stdout", "--stats"]
        )
        assert args.formats == "phrases"
        assert args.output_dir == "out"
        assert args.stdout is True
        assert args.stats is True


class TestFileOutput:

    def test_writes_all_formats(self, transcript_file, tmp_path):
        main([str(transcript_file)])
        phrases = tmp_path / "interview-phrases.txt"
        raw = tmp_path / "interview-transcript.txt"
        assert phrases.read_text(encoding="utf-8") == "Hello world.\n\nThis is a test."
        assert raw.read_text(encoding="utf-8") == "Hello world. This is a test."

    def test_selected_format_only(self, transcript_file, tmp_path):
        main([str(transcript_file), "--formats", "phrases"])
        assert (tmp_path / "interview-phrases.txt").exists()
        assert not (tmp_path / "interview-transcript.txt").exists()

    def test_conflict_adds_counter(self, transcript_file, tmp_path):
        main([str(transcript_file), "--formats", "phrases"])
        main([str(transcript_file), "--formats", "phrases"])
        assert (tmp_path / "interview-phrases.txt").exists()
        assert (tmp_path / "interview-phrases-2.txt").exists()

    def test_output_dir(self, transcript_file, tmp_path):
        out = tmp_path / "out"
        out.mkdir()
        main([str(transcript_file), "--output-dir", str(out), "--formats", "phrases"])
        assert (out / "interview-phrases.txt").exists()

    def test_status_goes_to_stderr(self, transcript_file, capsys):
        main([str(transcript_file)])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved: interview-phrases.txt" in captured.err


class TestStdout:

    def test_stdout_flag(self, transcript_file, capsys, tmp_path):
        main([str(transcript_file), "--stdout"])
        captured = capsys.readouterr()
        assert captured.out == "Hello world.\n\nThis is a test.\n"
        assert not (tmp_path / "interview-phrases.txt").exists()

    def test_stdin_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('He said: "Hi." Then he left.'))
        main(["-"])
        assert capsys.readouterr().out == 'He said: "Hi."\n\nThen he left.\n'

    def test_blank_stdin_prints_nothing(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
        main(["-"])
        assert capsys.readouterr().out == ""

    def test_stats_on_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("One two three. Four five."))
        main(["-", "--stats"])
        captured = capsys.readouterr()
        assert "Phrases: 2" in captured.err
        assert "Words: 5" in captured.err
        assert "Average words per phrase: 3" in captured.err
        assert captured.out == "One two three.\n\nFour five.\n"


class TestErrors:

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unsupported_extension(self, tmp_path, capsys):
        path = tmp_path / "audio.mp3"
        path.write_bytes(b"\x00\x01")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert "Unsupported file type '.mp3'" in capsys.readouterr().err

    def test_unknown_format(self, transcript_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(transcript_file), "--formats", "phrases,srt"])
        assert exc_info.value.code == 1
        assert "Unknown format 'srt'" in capsys.readouterr().err

    def test_missing_output_dir(self, transcript_file, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(transcript_file), "--output-dir", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Output directory does not exist" in capsys.readouterr().err

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "broken.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestResolveOutputPath:

    def test_free_name(self, tmp_path):
        assert _resolve_output_path("a", "-phrases.txt", tmp_path) == tmp_path / "a-phrases.txt"

    def test_counter_increments(self, tmp_path):
        (tmp_path / "a-phrases.txt").touch()
        (tmp_path / "a-phrases-2.txt").touch()
        assert _resolve_output_path("a", "-phrases.txt", tmp_path) == tmp_path / "a-phrases-3.txt"

    def test_transcript_suffix_conflict(self, tmp_path):
        (tmp_path / "a-transcript.txt").touch()
        assert _resolve_output_path("a", "-transcript.txt", tmp_path) == (
            tmp_path / "a-transcript-2.txt"
        )


class TestReadInput:

    def test_stdin_has_no_path(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("Hi."))
        assert _read_input("-") == ("Hi.", None)

    def test_file_returns_resolved_path(self, transcript_file):
        text, path = _read_input(str(transcript_file))
        assert text == "Hello world. This is a test."
        assert path == transcript_file.resolve()
