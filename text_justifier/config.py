"""Configuration constants, width limits, and .env loading.

WHY: Centralizes every tunable value so it is easy to find, update, and
override. The target width used to be a compile-time constant; it is now a
default that can be changed per machine (``.env``), per shell (environment
variable), or per run (``--width``).

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values. validate_width() is the single place that enforces the
allowed width range, so the library API and the CLI reject the same values.

RULES:
- Widths must lie in [MIN_WIDTH, MAX_WIDTH] inclusive (60..120)
- TEXT_JUSTIFIER_WIDTH overrides the default width of 100
- TEXT_JUSTIFIER_ENCODING overrides the platform default encoding
- Output line breaks are always CRLF
- Paragraph indent is four spaces
"""

from __future__ import annotations

import locale
import os

from dotenv import load_dotenv

from text_justifier.errors import ConfigurationError

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

MIN_WIDTH = 60
MAX_WIDTH = 120

INDENT = "    "
"""Prefix for the first word of every paragraph."""

LINE_BREAK = "\r\n"
"""Line break written between output lines."""

FALLBACK_WIDTH = 100

# ---------------------------------------------------------------------------
# Environment-driven defaults
# ---------------------------------------------------------------------------

DEFAULT_ENCODING = os.getenv("TEXT_JUSTIFIER_ENCODING") or locale.getpreferredencoding(False)


def validate_width(width: int) -> int:
    """Check that a width lies in the supported range.

    WHY: Lines narrower than 60 columns make the paragraph heuristics
    unreliable and wider than 120 stop being readable; both are refused up
    front so no partial output is ever produced.

    RULES:
    - Bounds are inclusive: 60 and 120 are accepted
    - Raises ConfigurationError otherwise
    """
    if width < MIN_WIDTH or width > MAX_WIDTH:
        raise ConfigurationError(
            "Text width N={} is out of range; it must be between {} and {}.".format(
                width, MIN_WIDTH, MAX_WIDTH
            )
        )
    return width


def load_default_width() -> int:
    """Read the default width from the environment.

    Falls back to FALLBACK_WIDTH when TEXT_JUSTIFIER_WIDTH is unset. A value
    that is not an integer raises ConfigurationError; range checking is left
    to validate_width() at the point of use.
    """
    raw = os.getenv("TEXT_JUSTIFIER_WIDTH", "").strip()
    if not raw:
        return FALLBACK_WIDTH
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            "TEXT_JUSTIFIER_WIDTH must be an integer, got '{}'.".format(raw)
        ) from None
