"""Text Justifier — reflow plain text into fixed-width justified paragraphs.

WHY: Plain-text documents (READMEs, letters, e-mail digests) often need a
classic typeset look: every line exactly N columns wide, paragraphs
indented, titles left alone. This package does that transform and nothing
else, so it can be called from scripts, tests, or the bundled CLI.

HOW: The single public entry point is justify_text(text, width). It checks
the width against the supported range, tokenizes the text, and runs the
line assembler. File handling lives in the CLI, not here.

RULES:
- justify_text() is the ONLY public API for producing justified text.
- width=None uses the configured default (TEXT_JUSTIFIER_WIDTH or 100).
- Widths outside 60..120 raise ConfigurationError before any processing.
- A word longer than the width raises OversizedWordError; nothing is returned.
- Re-justifying justified text is not guaranteed to reproduce it.
"""

from typing import Optional

from text_justifier.config import load_default_width, validate_width
from text_justifier.core import assemble, tokenize
from text_justifier.errors import ConfigurationError, JustifyError, OversizedWordError

__version__ = "0.1.0"

__all__ = [
    "justify_text",
    "ConfigurationError",
    "JustifyError",
    "OversizedWordError",
]


def justify_text(text: str, width: Optional[int] = None) -> str:
    """Justify ``text`` to ``width`` columns.

    Args:
        text: Raw input text, any line-ending convention.
        width: Target line width (60..120). Default: configured width.

    Returns:
        The justified text with CRLF line breaks.

    Raises:
        ConfigurationError: If the width is out of range.
        OversizedWordError: If a word is longer than the width.
    """
    if width is None:
        width = load_default_width()
    validate_width(width)
    return assemble(tokenize(text), width)
