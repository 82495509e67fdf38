"""Tree builders for the common MIME shapes.

WHY: Most messages are assembled from the same few containers:
multipart/mixed for attachments, multipart/related for HTML with inline
images, multipart/alternative for text-and-HTML, and an inline HTML leaf.
Building those by hand means repeating the same Content-Type and boundary
boilerplate every time.

HOW: Each builder returns a Part ready to be placed in a parent body.
Multipart builders draw their boundary from an injected factory so tests
(and callers that need reproducible output) can pass a fixed one.

RULES:
- multipart_* header: exactly one Content-Type with a boundary parameter
- multipart_* body: the given items, unchanged, as a list body
- text_html: Content-Type text/html, Content-Transfer-Encoding
  quoted-printable, Content-Disposition inline, Data body
- text_html does not quoted-printable encode its input; callers pass
  already encoded bytes
- Default boundary factory: imf.boundary.generate with the configured
  MIME_BOUNDARY_PREFIX
"""

from __future__ import annotations

from typing import Callable, Sequence, Union

from imf import boundary as boundary_tokens
from mime_encoder import config
from mime_encoder.core.ir import (
    BodyItem,
    ContentDisposition,
    ContentTransferEncoding,
    ContentType,
    Data,
    Disposition,
    DispositionType,
    MediaType,
    Mechanism,
    Part,
)

BoundaryFactory = Callable[[], str]


def default_boundary() -> str:
    """Generate a boundary token using the configured prefix."""
    return boundary_tokens.generate(config.BOUNDARY_PREFIX)


def multipart(
    subtype: str,
    parts: Sequence[BodyItem],
    boundary_factory: BoundaryFactory = default_boundary,
) -> Part:
    """Wrap ``parts`` in a ``multipart/<subtype>`` container."""
    media_type = MediaType(
        type="multipart",
        subtype=subtype,
        parameters={"boundary": boundary_factory()},
    )
    return Part(header=(ContentType(media_type),), body=tuple(parts))


def multipart_mixed(
    parts: Sequence[BodyItem],
    boundary_factory: BoundaryFactory = default_boundary,
) -> Part:
    return multipart("mixed", parts, boundary_factory)


def multipart_related(
    parts: Sequence[BodyItem],
    boundary_factory: BoundaryFactory = default_boundary,
) -> Part:
    return multipart("related", parts, boundary_factory)


def multipart_alternative(
    parts: Sequence[BodyItem],
    boundary_factory: BoundaryFactory = default_boundary,
) -> Part:
    return multipart("alternative", parts, boundary_factory)


def text_html(content: Union[bytes, str]) -> Part:
    """Build an inline, quoted-printable ``text/html`` leaf part.

    Args:
        content: HTML already in quoted-printable form.
    """
    return Part(
        header=(
            ContentType(MediaType(type="text", subtype="html")),
            ContentTransferEncoding(Mechanism.QUOTED_PRINTABLE),
            ContentDisposition(Disposition(DispositionType.INLINE)),
        ),
        body=Data(content),
    )
