"""Command-line interface for the text justifier.

WHY: The usual way to use the justifier is as a batch tool: read one text
file, write its justified version to another. The CLI wires together option
validation, file I/O, and the core algorithm behind a single command.

HOW: argparse accepts the input and output paths plus --width, --encoding
and --verbose. Options are validated through JustifyOptions before any file
is opened. The whole document is justified in memory, and only then is the
output file written, so a failed run never leaves partial output behind.

RULES:
- Positional arguments: input path, output path ("-" means stdin/stdout)
- Every failure prints "Error: ..." and the usage text to stderr, exit 1
- Malformed arguments also exit 1 (argparse's default of 2 is overridden)
- Status messages go to stderr; stdout only carries justified text
- Output is written with newline="" (files) or as raw bytes (stdout) so
  CRLF line breaks are preserved; stdin and stdout honour --encoding
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from text_justifier import __version__
from text_justifier.config import MAX_WIDTH, MIN_WIDTH, LINE_BREAK
from text_justifier.core import assemble, tokenize
from text_justifier.errors import JustifyError
from text_justifier.models import JustifyOptions

logger = logging.getLogger(__name__)

USAGE_TEXT = """Usage:
    python -m text_justifier IN_FILE OUT_FILE [--width N] [--encoding ENC]

    IN_FILE   path to input file ("-" reads stdin)
    OUT_FILE  path to output file ("-" writes stdout)
    --width   target line width, {}..{} (default: TEXT_JUSTIFIER_WIDTH or 100)
""".format(MIN_WIDTH, MAX_WIDTH)


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments the same way as other errors."""

    def error(self, message: str) -> NoReturn:
        _fail(message)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _fail(message: object) -> NoReturn:
    """Report a fatal error with usage text and exit with status 1."""
    print("Error: {}".format(message), file=sys.stderr)
    print(file=sys.stderr)
    print(USAGE_TEXT, file=sys.stderr)
    sys.exit(1)


def _read_input(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.buffer.read().decode(encoding)
    return Path(path).read_text(encoding=encoding)


def _write_output(path: str, content: str, encoding: str) -> None:
    if path == "-":
        # Raw bytes so the encoding applies and CRLF is not translated
        data = content.encode(encoding)
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(content)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser.
    """
    parser = _UsageParser(
        prog="text_justifier",
        description="Reflow plain text into fixed-width justified paragraphs.",
    )
    parser.add_argument("input_file", help="Path to the input text file ('-' for stdin).")
    parser.add_argument("output_file", help="Path to the output file ('-' for stdout).")
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Target line width, {}..{} (default: TEXT_JUSTIFIER_WIDTH or 100).".format(
            MIN_WIDTH, MAX_WIDTH
        ),
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of input and output (default: platform encoding).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
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

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    # basicConfig is a no-op when the host already configured logging
    logging.getLogger("text_justifier").setLevel(level)

    try:
        options = JustifyOptions.build(width=args.width, encoding=args.encoding)
    except JustifyError as e:
        _fail(e)
    logger.debug("Options: width=%d encoding=%s", options.width, options.encoding)

    try:
        text = _read_input(args.input_file, options.encoding)
    except (OSError, UnicodeError) as e:
        _fail("Could not read {}: {}".format(args.input_file, e))

    try:
        result = assemble(tokenize(text), options.width)
    except JustifyError as e:
        _fail(e)

    try:
        _write_output(args.output_file, result, options.encoding)
    except (OSError, UnicodeError) as e:
        _fail("Could not write {}: {}".format(args.output_file, e))

    if args.output_file != "-":
        line_count = result.count(LINE_BREAK) + 1 if result else 0
        _status("Wrote {} lines ({} columns) to {}".format(
            line_count, options.width, args.output_file
        ))


if __name__ == "__main__":
    main()
