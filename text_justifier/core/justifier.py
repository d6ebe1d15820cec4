"""Line assembly, paragraph detection, and space distribution.

WHY: This module is the whole justification algorithm: it turns a token
stream into lines of exactly N characters, indents paragraphs, and leaves
short single-line paragraphs (titles) alone.

HOW: A Justifier consumes tokens one at a time:
  1. Words are packed greedily into a PendingLine until the next word would
     overflow the width; the full line is then padded by distribute_spaces()
     and written to the output buffer.
  2. Consecutive line-break markers are counted. When the count is positive
     and the next word starts with an uppercase letter, a new paragraph
     begins: the pending line is flushed, the counted line breaks are
     emitted, and the word is indented.
  3. distribute_spaces() widens interword gaps one space at a time, starting
     from the rightmost gap and cycling back, until the line is N wide.

RULES:
- Width-driven flushes always justify; they never apply the title check.
- Paragraph-boundary and end-of-document flushes apply the title check:
  a line shorter than width // 2 is emitted with single spaces.
- A one-word line is never padded.
- PendingLine.length always equals the characters the line renders to
  before padding (words plus one space per gap).
- Output line breaks are config.LINE_BREAK (CRLF).
- Each Justifier owns its state; nothing is shared between documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from text_justifier.config import INDENT, LINE_BREAK
from text_justifier.core.tokens import Token
from text_justifier.errors import ConfigurationError, OversizedWordError

logger = logging.getLogger(__name__)


@dataclass
class PendingLine:
    """Words collected for the line currently being built.

    ``length`` counts the words plus one separating space per gap; extra
    padding is only added by distribute_spaces().
    """

    words: List[str] = field(default_factory=list)
    length: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.words

    def add(self, word: str, word_length: int) -> None:
        """Append a word, accounting for the separating space if needed."""
        if self.words:
            self.length += 1
        self.words.append(word)
        self.length += word_length

    def clear(self) -> None:
        self.words.clear()
        self.length = 0

    def render(self) -> str:
        """Join the words with single spaces (no padding)."""
        return " ".join(self.words)


def distribute_spaces(words: Sequence[str], length: int, width: int) -> str:
    """Pad a line to ``width`` by widening its interword gaps.

    WHY: Justified text spreads the missing columns over the gaps. Adding
    them from the right keeps the left edge of each line visually stable.

    HOW: Every gap starts as one space. Extra spaces go to the rightmost gap
    first, then the next gap to the left, wrapping back to the rightmost gap
    after the leftmost one. Within one pass no gap gets a second extra space
    before every gap has had one.

    RULES:
    - ``length`` is the single-spaced length of the line
    - Stops as soon as the line is ``width`` wide; a line already at or
      beyond ``width`` is returned single-spaced
    - A line with zero or one word is returned unchanged

    Args:
        words: Words of the line in order.
        length: Character count of the words joined by single spaces.
        width: Target line width.

    Returns:
        The justified line.
    """
    if len(words) <= 1:
        return "".join(words)

    gaps = [1] * (len(words) - 1)
    gap = len(gaps) - 1
    while length < width:
        gaps[gap] += 1
        length += 1
        gap = gap - 1 if gap > 0 else len(gaps) - 1

    parts = [words[0]]
    for spaces, word in zip(gaps, words[1:]):
        parts.append(" " * spaces)
        parts.append(word)
    return "".join(parts)


class Justifier:
    """Stateful line assembler for a single document.

    Feed tokens in order with feed(), then call finish() once to flush the
    last line and get the justified text.
    """

    def __init__(self, width: int) -> None:
        if width < 1:
            raise ConfigurationError("Text width must be positive, got {}.".format(width))
        self.width = width
        self.line = PendingLine()
        self.pending_breaks = 0
        self.lines_emitted = 0
        self._started = False
        self._output: List[str] = []

    def feed(self, token: Token) -> None:
        """Process one token.

        Raises:
            OversizedWordError: If the word is longer than the width.
        """
        if token.is_newline:
            self.pending_breaks += 1
            return

        if token.length > self.width:
            raise OversizedWordError(token.text, token.length, self.width)

        word, word_length = token.text, token.length
        if self.pending_breaks > 0 and token.starts_upper:
            self._flush(title_check=True)
            self._output.append(LINE_BREAK * self.pending_breaks)
            word, word_length = INDENT + word, word_length + len(INDENT)
        elif not self._started:
            word, word_length = INDENT + word, word_length + len(INDENT)
        self._started = True
        self.pending_breaks = 0

        line = self.line
        if not line.is_empty and (
            line.length + 1 + word_length > self.width or line.length == self.width
        ):
            self._flush(title_check=False)
            self._output.append(LINE_BREAK)
        line.add(word, word_length)

    def finish(self) -> str:
        """Flush the last line and return the justified document."""
        self._flush(title_check=True)
        return "".join(self._output)

    def _flush(self, title_check: bool) -> None:
        line = self.line
        if line.is_empty:
            return
        if title_check and line.length < self.width // 2:
            self._output.append(line.render())
        else:
            self._output.append(distribute_spaces(line.words, line.length, self.width))
        self.lines_emitted += 1
        line.clear()


def assemble(tokens: Iterable[Token], width: int) -> str:
    """Justify a token stream to ``width`` columns.

    The width range is not checked here beyond being positive; callers that
    accept user input go through justify_text() or the CLI, which enforce
    the supported range first.

    Raises:
        OversizedWordError: If any word is longer than ``width``.
    """
    justifier = Justifier(width)
    count = 0
    for token in tokens:
        justifier.feed(token)
        count += 1
    result = justifier.finish()
    logger.debug(
        "Justified %d tokens into %d lines at width %d",
        count, justifier.lines_emitted, width,
    )
    return result
