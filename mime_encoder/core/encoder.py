"""Recursive MIME part encoder: part tree in, wire bytes out.

WHY: A MIME message (or an HTTP multipart payload) is a tree of parts,
each a header followed by a body, where multipart bodies interleave
their children with boundary delimiter lines (RFC 2046 section 5.1).
This module is the single entry point that walks that tree and produces
the exact byte sequence.

HOW: encode_part() renders the header, asks resolve_boundary() whether
the Content-Type declares a boundary, and picks one of two framings:

  no boundary   header CRLF body CRLF   (header and its CRLF omitted
                                          when the header is empty)
  boundary B    header CRLF "--B" CRLF
                fragment ( CRLF "--B" CRLF fragment )*
                CRLF "--B--" CRLF

render_body() turns a body into fragments: one per Data, one per nested
Part, one per item of a list body. Nested parts use their own framing
(_render_nested_part) rather than re-entering encode_part().

RULES:
- Framing is decided by the header alone, never by the body's shape
- A body that disagrees with its header is encoded anyway and logged at
  WARNING; with strict=True it raises BodyShapeError instead
- A nested multipart is written as "--B" CRLF header body CRLF "--B--"
  CRLF with no blank line between its header and body
- Fragments that are not separated by a boundary are concatenated
- Pure: no I/O, no shared state, identical trees give identical bytes
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from mime_encoder import config
from mime_encoder.core.fields import encode_field
from mime_encoder.core.ir import Body, ContentType, Data, Field, Part, body_kind
from mime_encoder.errors import BodyShapeError

logger = logging.getLogger(__name__)

CRLF = b"\r\n"


def encode_header(header: Sequence[Field]) -> bytes:
    """Concatenate the encoded fields of ``header`` in order.

    An empty header encodes to ``b""``.
    """
    return "".join(encode_field(field) for field in header).encode("utf-8")


def resolve_boundary(header: Sequence[Field]) -> Optional[bytes]:
    """Return the boundary declared by the header's Content-Type, if any.

    Only the first Content-Type field is consulted. A header without a
    Content-Type, or whose Content-Type has no ``boundary`` parameter,
    yields None.
    """
    for field in header:
        if isinstance(field, ContentType):
            boundary = field.media_type.parameters.get("boundary")
            if boundary is None:
                return None
            return boundary.encode("utf-8")
    return None


def _check_shape(boundary: Optional[bytes], body: Body, strict: bool) -> None:
    kind = body_kind(body)
    if boundary is not None and kind == "data":
        mismatch = True
    elif boundary is None and kind == "list":
        mismatch = True
    else:
        mismatch = False
    if not mismatch:
        return
    if strict:
        raise BodyShapeError(boundary, kind)
    logger.warning(
        "Header/body mismatch: boundary=%r, body is %s; encoding as declared by header",
        boundary, kind,
    )


def render_body(body: Body, strict: bool = False) -> List[bytes]:
    """Render a body into its ordered list of fragments.

    Data yields its bytes, a nested Part yields one self-framed fragment,
    and a list body yields one fragment per item (none when empty).
    """
    if isinstance(body, Data):
        return [body.content]
    if isinstance(body, Part):
        return [_render_nested_part(body, strict)]
    if isinstance(body, (list, tuple)):
        fragments: List[bytes] = []
        for item in body:
            fragments.extend(render_body(item, strict))
        return fragments
    raise TypeError("Unsupported body type: {}".format(type(body).__name__))


def _render_nested_part(part: Part, strict: bool) -> bytes:
    header = encode_header(part.header)
    boundary = resolve_boundary(part.header)
    _check_shape(boundary, part.body, strict)
    content = b"".join(render_body(part.body, strict))

    if boundary is None:
        if not header:
            return content
        return header + CRLF + content

    delimiter = b"--" + boundary
    return delimiter + CRLF + header + content + CRLF + delimiter + b"--" + CRLF


def encode_part(part: Part, strict: Optional[bool] = None) -> bytes:
    """Encode a complete part tree.

    Args:
        part: Root of the tree (a message, or a standalone entity).
        strict: Raise BodyShapeError on header/body mismatches instead of
                logging a warning. None uses config.STRICT_SHAPE_CHECK.

    Returns:
        The wire representation of the part.

    Raises:
        BodyShapeError: In strict mode, for any mismatched part in the tree.
    """
    if strict is None:
        strict = config.STRICT_SHAPE_CHECK

    header = encode_header(part.header)
    boundary = resolve_boundary(part.header)
    _check_shape(boundary, part.body, strict)
    fragments = render_body(part.body, strict)

    logger.debug(
        "Encoding part: %d header fields, boundary=%r, %d body fragments",
        len(part.header), boundary, len(fragments),
    )

    if boundary is None:
        content = b"".join(fragments)
        if not header:
            return content + CRLF
        return header + CRLF + content + CRLF

    delimiter = b"--" + boundary
    separator = CRLF + delimiter + CRLF
    return (
        header + CRLF
        + delimiter + CRLF
        + separator.join(fragments) + CRLF
        + delimiter + b"--" + CRLF
    )


def encode(part: Part, strict: Optional[bool] = None) -> bytes:
    """Encode ``part`` to bytes. Alias of encode_part() for the public API."""
    return encode_part(part, strict=strict)
