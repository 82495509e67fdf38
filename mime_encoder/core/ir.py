"""Dataclasses describing a MIME part tree.

WHY: The encoder turns a tree of MIME entities into bytes. Callers build
that tree once (by hand, with the builders, or from a JSON document) and
the encoder only reads it. A small set of immutable, well-typed classes
makes the closed set of header fields and body shapes explicit.

HOW: The model is a hierarchy of frozen dataclasses:
  Part          — one MIME entity: header fields plus a body
  Field types   — MimeVersion, ContentType, ContentTransferEncoding,
                  ContentId, ContentDescription, ContentDisposition,
                  GenericField (any other field name)
  MediaType     — type/subtype plus parameters (e.g. boundary, charset)
  Disposition   — inline/attachment plus optional RFC 2183 parameters
  Data          — a leaf payload of raw bytes
A body is a Data, a single nested Part, or a sequence of Data/Part items.

RULES:
- Everything is frozen; sequences are normalised to tuples on construction
- Data bytes are already transfer-encoded by the caller
- MediaType parameters keep insertion order, so output is byte stable
- A body is composite exactly when the Content-Type declares a boundary;
  this is a caller contract, not something the types enforce
"""

from __future__ import annotations

import enum
import types
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional, Sequence, Tuple, Union


class Mechanism(str, enum.Enum):
    """Content-Transfer-Encoding mechanisms (RFC 2045 section 6.1)."""

    SEVEN_BIT = "7bit"
    EIGHT_BIT = "8bit"
    BINARY = "binary"
    QUOTED_PRINTABLE = "quoted-printable"
    BASE64 = "base64"


class DispositionType(str, enum.Enum):
    """Content-Disposition types (RFC 2183 section 2.1)."""

    INLINE = "inline"
    ATTACHMENT = "attachment"


@dataclass(frozen=True)
class MediaType:
    """A media type such as ``text/html`` or ``multipart/mixed; boundary=...``.

    RULES:
    - type and subtype are non-empty
    - parameters maps attribute names to raw (unquoted) values; keys are
      unique by construction and iterate in insertion order
    - parameters is a read-only copy of the mapping given at construction
    """

    type: str
    subtype: str
    parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.type or not self.subtype:
            raise ValueError(
                "Media type needs a non-empty type and subtype, got {!r}/{!r}".format(
                    self.type, self.subtype,
                )
            )
        object.__setattr__(self, "parameters", types.MappingProxyType(dict(self.parameters)))

    def __hash__(self) -> int:
        return hash((self.type, self.subtype, frozenset(self.parameters.items())))


@dataclass(frozen=True)
class DispositionParameters:
    """Optional Content-Disposition parameters (RFC 2183 section 2).

    RULES:
    - Every field is optional; None means "not present"
    - size is a positive number of octets
    - The three dates are calendar timestamps; naive values mean UTC
    """

    filename: Optional[str] = None
    creation_date: Optional[datetime] = None
    modification_date: Optional[datetime] = None
    read_date: Optional[datetime] = None
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size is not None and self.size <= 0:
            raise ValueError("Disposition size must be positive, got {}".format(self.size))


@dataclass(frozen=True)
class Disposition:
    type: DispositionType
    parameters: DispositionParameters = field(default_factory=DispositionParameters)


# ---------------------------------------------------------------------------
# Header fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MimeVersion:
    major: int = 1
    minor: int = 0

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0:
            raise ValueError(
                "MIME version numbers must be non-negative, got {}.{}".format(
                    self.major, self.minor,
                )
            )


@dataclass(frozen=True)
class ContentType:
    media_type: MediaType


@dataclass(frozen=True)
class ContentTransferEncoding:
    mechanism: Mechanism


@dataclass(frozen=True)
class ContentId:
    """Content-ID value, with or without the surrounding angle brackets."""

    message_id: str


@dataclass(frozen=True)
class ContentDescription:
    text: str


@dataclass(frozen=True)
class ContentDisposition:
    disposition: Disposition


@dataclass(frozen=True)
class GenericField:
    """Any header field without a dedicated type, e.g. ``Subject`` or ``X-Mailer``.

    The value is treated as free text and folded on output.
    """

    name: str
    text: str

    def __post_init__(self) -> None:
        if not self.name or ":" in self.name or any(c.isspace() for c in self.name):
            raise ValueError("Invalid header field name: {!r}".format(self.name))


Field = Union[
    MimeVersion,
    ContentType,
    ContentTransferEncoding,
    ContentId,
    ContentDescription,
    ContentDisposition,
    GenericField,
]


# ---------------------------------------------------------------------------
# Bodies and parts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Data:
    """A leaf body: raw payload bytes written to the output unchanged.

    A ``str`` is accepted for convenience and stored as UTF-8; bytearray
    and memoryview are copied to bytes. Anything else is a TypeError.
    """

    content: bytes

    def __post_init__(self) -> None:
        if isinstance(self.content, str):
            object.__setattr__(self, "content", self.content.encode("utf-8"))
        elif isinstance(self.content, (bytearray, memoryview)):
            object.__setattr__(self, "content", bytes(self.content))
        elif not isinstance(self.content, bytes):
            raise TypeError(
                "Data content must be bytes or str, got {}".format(type(self.content).__name__)
            )


@dataclass(frozen=True)
class Part:
    """One MIME entity: an ordered header and a body.

    RULES:
    - header order is preserved on output
    - body is Data, a nested Part, or a sequence of Data/Part items
    - list bodies are stored as tuples
    """

    header: Tuple[Field, ...] = ()
    body: "Body" = field(default_factory=lambda: Data(b""))

    def __post_init__(self) -> None:
        object.__setattr__(self, "header", tuple(self.header))
        if isinstance(self.body, list):
            object.__setattr__(self, "body", tuple(self.body))


BodyItem = Union[Data, Part]
Body = Union[Data, Part, Sequence[BodyItem]]


def body_kind(body: Body) -> str:
    """Name the shape of a body: ``"data"``, ``"part"`` or ``"list"``."""
    if isinstance(body, Data):
        return "data"
    if isinstance(body, Part):
        return "part"
    if isinstance(body, (list, tuple)):
        return "list"
    raise TypeError("Unsupported body type: {}".format(type(body).__name__))

