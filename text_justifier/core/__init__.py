"""Core justification pipeline: tokenize, assemble lines, distribute spaces.

tokens.py turns raw text into words and line-break markers; justifier.py
packs them into lines and pads each line to the target width.
"""

from text_justifier.core.justifier import Justifier, PendingLine, assemble, distribute_spaces
from text_justifier.core.tokens import NEWLINE, Token, tokenize

__all__ = [
    "Justifier",
    "PendingLine",
    "assemble",
    "distribute_spaces",
    "NEWLINE",
    "Token",
    "tokenize",
]
