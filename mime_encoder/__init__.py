"""MIME part encoder: typed part trees to RFC 2045/2046 wire bytes.

WHY: Emails and HTTP multipart payloads are trees of MIME entities whose
wire form has strict framing: header field syntax, folded parameters,
blank-line separators and boundary delimiter lines. This package builds
that byte sequence from a typed, immutable tree so callers never
concatenate MIME by hand.

HOW: Three stages, each independently testable: build a tree (by hand,
with the builders, or from JSON via the loader), encode it with
``encode()``, and hand the bytes to whatever transport needs them.

RULES:
- ``encode(part)`` is the single encoding entry point
- Body bytes are written as given; transfer encoding is the caller's job
- Framing follows the header's Content-Type boundary, not the body shape
"""

from mime_encoder.core.builders import (
    multipart_alternative,
    multipart_mixed,
    multipart_related,
    text_html,
)
from mime_encoder.core.encoder import encode
from mime_encoder.core.ir import (
    ContentDescription,
    ContentDisposition,
    ContentId,
    ContentTransferEncoding,
    ContentType,
    Data,
    Disposition,
    DispositionParameters,
    DispositionType,
    GenericField,
    MediaType,
    Mechanism,
    MimeVersion,
    Part,
)
from mime_encoder.errors import BodyShapeError, MimeEncoderError, TreeLoadError

__version__ = "0.1.0"

__all__ = [
    "encode",
    "multipart_alternative",
    "multipart_mixed",
    "multipart_related",
    "text_html",
    "ContentDescription",
    "ContentDisposition",
    "ContentId",
    "ContentTransferEncoding",
    "ContentType",
    "Data",
    "Disposition",
    "DispositionParameters",
    "DispositionType",
    "GenericField",
    "MediaType",
    "Mechanism",
    "MimeVersion",
    "Part",
    "BodyShapeError",
    "MimeEncoderError",
    "TreeLoadError",
]
