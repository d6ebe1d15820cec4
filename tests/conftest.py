"""Shared test fixtures for the text_justifier test suite.

WHY: Several test modules need the same multi-paragraph sample document and
must not be affected by a developer's local TEXT_JUSTIFIER_* settings.

HOW: An autouse fixture strips the width variable from the environment for
every test; sample documents are plain module constants exposed as fixtures.

RULES:
- Sample text uses CRLF line breaks, like the files the tool writes.
- No sample word is longer than 12 characters, so no line is single-word.
"""

import pytest

SAMPLE_DOCUMENT = (
    "Reflowing Text\r\n"
    "\r\n"
    "Typesetting by hand was slow work. Every line of a printed page had to "
    "be filled with metal spacers until the type sat tight in the frame, and "
    "the compositor spread the extra room between the words of the line.\r\n"
    "\r\n"
    "Plain text tools can do the same job in a fraction of a second. They "
    "read the words in order, pack as many as fit on a line, and then widen "
    "the gaps until the right edge is straight. Short headings are left as "
    "they are, because stretching them across the page looks odd.\r\n"
    "\r\n"
    "Closing Words\r\n"
)


@pytest.fixture(autouse=True)
def _clean_width_env(monkeypatch):
    """Make every test start from the built-in default width."""
    monkeypatch.delenv("TEXT_JUSTIFIER_WIDTH", raising=False)


@pytest.fixture
def sample_document():
    """A title, two body paragraphs, and a closing title."""
    return SAMPLE_DOCUMENT
