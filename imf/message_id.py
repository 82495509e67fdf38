"""Message identifier encoding (RFC 5322 section 3.6.4).

WHY: Content-ID reuses the msg-id syntax of Message-ID, so the MIME
encoder hands identifiers to this module instead of formatting them
itself.

HOW: Each identifier is wrapped in angle brackets unless it already has
them; identifiers are separated by a single space and the value ends in
CRLF.

RULES:
- ``encode([])`` is a caller error (``ValueError``)
- Identifiers are not validated beyond being non-empty
"""

from __future__ import annotations

from typing import Iterable


def format_id(message_id: str) -> str:
    """Return ``message_id`` in its bracketed ``<left@right>`` form."""
    message_id = message_id.strip()
    if not message_id:
        raise ValueError("Message identifier must not be empty")
    if message_id.startswith("<") and message_id.endswith(">"):
        return message_id
    return "<{}>".format(message_id)


def encode(message_ids: Iterable[str]) -> str:
    formatted = [format_id(message_id) for message_id in message_ids]
    if not formatted:
        raise ValueError("At least one message identifier is required")
    return " ".join(formatted) + "\r\n"
