"""Tokenization of raw text into words and line-break markers.

WHY: Line assembly needs to see explicit line breaks as their own tokens
(they drive the paragraph heuristic) while every other run of characters
between spaces is a word. Carrying each word's length alongside its text
saves rescanning during length accounting.

HOW: Every line-break sequence is rewritten as a line break surrounded by
single spaces, then the text is split on single spaces. Normalization moves
every line-break character into a piece of its own, so word pieces never
contain one. Empty pieces are dropped, and a line-break piece becomes a
newline marker.

RULES:
- tokenize() is a pure generator: no shared state, restartable by calling again
- Splitting is on single spaces only; tabs stay inside words
- "\\r\\n", "\\n" and "\\r" all count as one line break
- Empty pieces never reach the line assembler
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_MARKER = "\n"


@dataclass(frozen=True)
class Token:
    """One word or one explicit line break.

    Attributes:
        text: Word text with line-break characters removed ("" for markers).
        length: Character count of ``text``.
        is_newline: True for a line-break marker.
    """

    text: str
    length: int
    is_newline: bool = False

    @property
    def starts_upper(self) -> bool:
        """True if the first character is an uppercase letter."""
        return bool(self.text) and self.text[0].isupper()


NEWLINE = Token(text="", length=0, is_newline=True)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` in order.

    Args:
        text: Raw input text with any line-ending convention.

    Yields:
        Token objects: words and NEWLINE markers.
    """
    normalized = LINE_BREAK_RE.sub(" {} ".format(_MARKER), text)
    for piece in normalized.split(" "):
        if piece == _MARKER:
            yield NEWLINE
            continue
        if not piece:
            continue
        yield Token(text=piece, length=len(piece))
