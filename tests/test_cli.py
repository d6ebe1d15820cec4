"""Tests for the command-line interface.

WHY: The CLI is how the justifier is normally run. It must write the same
text the library produces, keep CRLF line breaks intact on disk, and fail
with usage text and exit status 1 without creating output on any error.

HOW: main() is called with an explicit argv list. Files live in tmp_path;
stdin and stdout are swapped with monkeypatch and capsys.

RULES:
- Every failure path asserts exit code 1 and that no output file exists.
"""

import io
import logging

import pytest

from text_justifier import justify_text
from text_justifier.cli import build_parser, main


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def input_file(tmp_path, sample_document):
    path = tmp_path / "in.txt"
    path.write_bytes(sample_document.encode("utf-8"))
    return path


class TestSuccess:
    """Happy paths."""

    def test_writes_justified_file(self, input_file, tmp_path, sample_document, capsys):
        out = tmp_path / "out.txt"
        main([str(input_file), str(out), "--width", "72", "--encoding", "utf-8"])

        written = out.read_bytes().decode("utf-8")
        assert written == justify_text(sample_document, 72)
        assert b"\r\n" in out.read_bytes()
        assert b"\r\r\n" not in out.read_bytes()
        assert "Wrote" in capsys.readouterr().err

    def test_width_from_environment(self, input_file, tmp_path, monkeypatch):
        monkeypatch.setenv("TEXT_JUSTIFIER_WIDTH", "66")
        out = tmp_path / "out.txt"
        main([str(input_file), str(out), "--encoding", "utf-8"])
        lines = out.read_bytes().decode("utf-8").split("\r\n")
        assert len(lines[2]) == 66

    def test_stdin_to_stdout(self, sample_document, monkeypatch, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(sample_document.encode("utf-8")), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        main(["-", "-", "--width", "80", "--encoding", "utf-8"])
        assert capsys.readouterr().out == justify_text(sample_document, 80)

    def test_non_ascii_text(self, tmp_path):
        src = tmp_path / "in.txt"
        src.write_bytes("Överskrift\r\n\r\nÅtta små ägg låg på ön.".encode("utf-8"))
        out = tmp_path / "out.txt"
        main([str(src), str(out), "--width", "60", "--encoding", "utf-8"])
        assert out.read_bytes().decode("utf-8").startswith("    Överskrift\r\n\r\n    Åtta")

    def test_stdin_stdout_use_requested_encoding(self, monkeypatch, capsysbinary):
        text = "Överskrift\r\n\r\nÅtta små ägg låg på ön."
        # The wrapper claims utf-8; the CLI must decode the raw bytes itself
        stdin = io.TextIOWrapper(io.BytesIO(text.encode("latin-1")), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        main(["-", "-", "--width", "60", "--encoding", "latin-1"])
        out = capsysbinary.readouterr().out
        assert out == b"    \xd6verskrift\r\n\r\n    \xc5tta sm\xe5 \xe4gg l\xe5g p\xe5 \xf6n."
        assert out == justify_text(text, 60).encode("latin-1")


class TestLogging:
    """--verbose switches the package logger to DEBUG."""

    def test_verbose_logs_options(self, input_file, tmp_path, caplog):
        main([str(input_file), str(tmp_path / "out.txt"), "--width", "60", "--encoding", "utf-8", "-v"])
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert "Options: width=60 encoding=utf-8" in messages

    def test_quiet_by_default(self, input_file, tmp_path, caplog):
        main([str(input_file), str(tmp_path / "out.txt"), "--width", "60", "--encoding", "utf-8"])
        assert not [r for r in caplog.records if r.getMessage().startswith("Options:")]


class TestFailures:
    """Every error exits 1 with usage text and no output."""

    def test_missing_arguments(self, capsys):
        assert _run([]) == 1
        assert "Usage" in capsys.readouterr().err

    def test_malformed_width(self, input_file, tmp_path, capsys):
        out = tmp_path / "out.txt"
        assert _run([str(input_file), str(out), "--width", "wide"]) == 1
        assert "Usage" in capsys.readouterr().err
        assert not out.exists()

    @pytest.mark.parametrize("width", ["59", "121"])
    def test_width_out_of_range(self, input_file, tmp_path, capsys, width):
        out = tmp_path / "out.txt"
        assert _run([str(input_file), str(out), "--width", width]) == 1
        err = capsys.readouterr().err
        assert "out of range" in err
        assert "Usage" in err
        assert not out.exists()

    def test_oversized_word(self, tmp_path, capsys):
        src = tmp_path / "in.txt"
        long_word = "w" * 70
        src.write_text("Some text " + long_word, encoding="utf-8")
        out = tmp_path / "out.txt"
        assert _run([str(src), str(out), "--width", "60", "--encoding", "utf-8"]) == 1
        err = capsys.readouterr().err
        assert long_word in err
        assert "=70" in err
        assert "N=60" in err
        assert not out.exists()

    def test_missing_input_file(self, tmp_path, capsys):
        out = tmp_path / "out.txt"
        assert _run([str(tmp_path / "nope.txt"), str(out), "--width", "60"]) == 1
        assert "Could not read" in capsys.readouterr().err
        assert not out.exists()

    def test_unwritable_output(self, input_file, tmp_path, capsys):
        out = tmp_path / "missing-dir" / "out.txt"
        assert _run([str(input_file), str(out), "--width", "60", "--encoding", "utf-8"]) == 1
        assert "Could not write" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys):
        src = tmp_path / "in.txt"
        src.write_bytes(b"\xff\xfe\xfa broken")
        out = tmp_path / "out.txt"
        assert _run([str(src), str(out), "--width", "60", "--encoding", "utf-8"]) == 1
        assert "Could not read" in capsys.readouterr().err
        assert not out.exists()

    def test_unknown_encoding(self, input_file, tmp_path, capsys):
        out = tmp_path / "out.txt"
        assert _run([str(input_file), str(out), "--encoding", "klingon"]) == 1
        assert "Unknown encoding" in capsys.readouterr().err


class TestParser:
    """Parser construction."""

    def test_positional_and_flags(self):
        args = build_parser().parse_args(["a.txt", "b.txt", "--width", "90", "-v"])
        assert args.input_file == "a.txt"
        assert args.output_file == "b.txt"
        assert args.width == 90
        assert args.verbose is True
        assert args.encoding is None
