"""Exception types raised by the MIME encoder.

WHY: The encoder itself is total over the data model, but two things can
still go wrong at its edges: a strict caller asks for framing mismatches
to be rejected, and a JSON tree document may not describe a valid tree.
Callers need typed exceptions to tell these apart from programming
errors.

HOW: A small hierarchy rooted at MimeEncoderError. The concrete errors
also subclass ValueError because both describe bad input values.

RULES:
- Construction-time validation of the IR raises plain ValueError
- Unknown field or body types raise TypeError (a programming error)
"""

from __future__ import annotations


class MimeEncoderError(Exception):
    """Base class for errors raised by this package."""


class BodyShapeError(MimeEncoderError, ValueError):
    """Raised in strict mode when a body's shape contradicts its header.

    WHY: Framing is decided by the header alone. A boundary with a leaf
    body, or a list body without a boundary, still encodes, but the
    result is not what the caller meant.

    HOW: Raised by the encoder before any bytes for the part are built.

    RULES:
    - Never raised in permissive mode (a warning is logged instead)
    - ``boundary`` is the declared boundary or None
    - ``body_kind`` is "data", "part" or "list"
    """

    def __init__(self, boundary: bytes | None, body_kind: str) -> None:
        self.boundary = boundary
        self.body_kind = body_kind
        if boundary is None:
            detail = "no boundary declared but body is a {}".format(body_kind)
        else:
            detail = "boundary {!r} declared but body is {}".format(
                boundary.decode("utf-8", "replace"), body_kind,
            )
        super().__init__("Body shape does not match header: " + detail)


class TreeLoadError(MimeEncoderError, ValueError):
    """Raised when a JSON part-tree document cannot be turned into a Part.

    RULES:
    - ``path`` points at the offending element, e.g. ``"body/1/header/0"``
    - Schema violations and undecodable base64 payloads both land here
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        if path:
            message = "{} (at {})".format(message, path)
        super().__init__(message)
