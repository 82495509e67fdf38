"""Internet Message Format field helpers.

WHY: The MIME encoder needs a handful of RFC 5322 building blocks that are
not MIME-specific: folding free-text header values, writing message
identifiers, formatting dates, and producing unique boundary tokens. They
live in their own small library so the encoder core only consumes them
through narrow, well-defined functions.

HOW: One module per concern. Every function is pure except
``boundary.generate()``, which draws from ``uuid.uuid4()``.

RULES:
- Every encoder returns ``str`` and, where it produces a complete field
  value, terminates it with CRLF.
- No function here knows about MIME parts or trees.
"""

from . import boundary, date_field, message_id, unstructured

__all__ = [
    "boundary",
    "date_field",
    "message_id",
    "unstructured",
]
