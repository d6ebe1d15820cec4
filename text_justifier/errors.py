"""Error taxonomy for the text justifier.

WHY: Justification is a one-shot batch transform: every failure is terminal
for the run. Callers (the CLI, library users, tests) need to tell a bad
configuration apart from bad input text without parsing messages.

HOW: A single JustifyError base with two concrete subclasses. Both also
derive from ValueError so generic ``except ValueError`` handlers (the style
used throughout the CLI) still catch them.

RULES:
- ConfigurationError is raised before any text is processed.
- OversizedWordError carries the offending word, its length and the width.
- File I/O failures are plain OSError and are never wrapped here.
"""

from __future__ import annotations


class JustifyError(Exception):
    """Base class for all justifier errors."""


class ConfigurationError(JustifyError, ValueError):
    """The requested width or encoding cannot be used."""


class OversizedWordError(JustifyError, ValueError):
    """A single word does not fit on a line of the configured width.

    Attributes:
        word: The offending word (line-break characters stripped).
        length: Its character count.
        width: The configured line width.
    """

    def __init__(self, word: str, length: int, width: int) -> None:
        self.word = word
        self.length = length
        self.width = width
        super().__init__(
            'Word ("{}"={}) is longer than text width N={}, adjust the width.'.format(
                word, length, width
            )
        )
