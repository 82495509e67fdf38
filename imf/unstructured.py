"""Folding of unstructured header field values (RFC 5322 section 2.2.3).

WHY: Free-text fields such as Content-Description or arbitrary ``X-``
fields can be longer than a header line should be. The caller writes
``Name:`` itself and this module produces everything after the colon,
folded so continuation lines stay within the recommended line length.

HOW: The text is split on whitespace and the words are re-joined with a
single space. A running column starts at ``prepend`` (the width of the
``Name:`` prefix already on the line). Before a word would push the
column past LINE_LENGTH, a fold (CRLF followed by one space) is emitted
instead of the separating space.

RULES:
- Output always starts with one space (after the colon) and ends in CRLF
- A word longer than the line is never split; it sits alone on its line
- The first word always stays on the first line
- Runs of whitespace (including embedded CR/LF) collapse to one space
- Empty or all-whitespace text yields ``" \\r\\n"``
"""

from __future__ import annotations

from typing import List

LINE_LENGTH = 78
"""Recommended maximum line length, excluding CRLF (RFC 5322 section 2.1.1)."""


def fold(text: str, prepend: int, line_length: int = LINE_LENGTH) -> List[str]:
    """Split ``text`` into the lines of a folded field value.

    Each returned line is the content that follows the single leading
    space of that line (the space after the colon on the first line, the
    folding whitespace on continuation lines).

    Args:
        text: Free text to fold.
        prepend: Characters already on the first line before the value.
        line_length: Maximum line length to aim for.

    Returns:
        One string per output line; ``[""]`` for empty text.
    """
    words = text.split()
    if not words:
        return [""]

    lines: List[str] = []
    current: List[str] = []
    # +1 for the space that precedes the value on every line
    column = prepend + 1

    for word in words:
        if current and column + 1 + len(word) > line_length:
            lines.append(" ".join(current))
            current = [word]
            column = 1 + len(word)
        elif current:
            current.append(word)
            column += 1 + len(word)
        else:
            current.append(word)
            column += len(word)

    lines.append(" ".join(current))
    return lines


def encode(text: str, prepend: int, line_length: int = LINE_LENGTH) -> str:
    """Encode ``text`` as a folded unstructured field value.

    Args:
        text: Free text of the field.
        prepend: Width of the ``Name:`` prefix written by the caller.
        line_length: Maximum line length to aim for.

    Returns:
        The field value, beginning with a space and ending in CRLF.
    """
    lines = fold(text, prepend, line_length)
    return " " + "\r\n ".join(lines) + "\r\n"
