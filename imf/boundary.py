"""Unique boundary token generation for multipart bodies.

Boundaries only need to be unique enough never to collide with body
content, so a random UUID rendered as 32 hex characters is used (it is
also a valid RFC 2046 ``bchars`` sequence). Callers that need stable
output inject their own factory instead of calling ``generate()``.
"""

from __future__ import annotations

import uuid

# RFC 2046 section 5.1.1: a boundary is 1 to 70 characters.
MAX_BOUNDARY_LENGTH = 70


def generate(prefix: str = "") -> str:
    """Return a fresh boundary token, optionally prefixed.

    Raises:
        ValueError: If the prefix would push the token past 70 characters.
    """
    token = prefix + uuid.uuid4().hex
    if len(token) > MAX_BOUNDARY_LENGTH:
        raise ValueError(
            "Boundary prefix too long: {} characters (limit {} with the "
            "32-character token)".format(len(prefix), MAX_BOUNDARY_LENGTH - 32)
        )
    return token
