"""Shared test fixtures for the mime_encoder test suite.

WHY: Several test modules need the same deterministic inputs: a boundary
factory that never changes between runs and a small multipart message
exercising every field type.

HOW: Pytest fixtures provide a sequential boundary factory and a
pre-built sample message tree. SAMPLE_TREE_DOCUMENT is the JSON form of
a simple two-part message for loader and CLI tests.

RULES:
- Boundaries are fixed strings so expected bytes can be written literally.
- Dates are naive and therefore rendered as UTC.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Iterator

import pytest

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

SAMPLE_BOUNDARY = "XyZ"

SAMPLE_TREE_DOCUMENT: Dict[str, Any] = {
    "header": [
        {"field": "mime-version", "major": 1, "minor": 0},
        {
            "field": "content-type",
            "type": "multipart",
            "subtype": "mixed",
            "parameters": {"boundary": SAMPLE_BOUNDARY},
        },
    ],
    "body": [
        {"data": "first"},
        {"data": "second"},
    ],
}

SAMPLE_TREE_BYTES = (
    b"Mime-Version: 1.0\r\n"
    b'Content-Type: multipart/mixed;\r\n boundary="XyZ"\r\n'
    b"\r\n"
    b"--XyZ\r\n"
    b"first"
    b"\r\n--XyZ\r\n"
    b"second"
    b"\r\n--XyZ--\r\n"
)


@pytest.fixture
def boundary_factory() -> Callable[[], str]:
    """A boundary factory yielding "b1", "b2", ... in call order."""
    counter: Iterator[int] = iter(range(1, 1000))
    return lambda: "b{}".format(next(counter))


@pytest.fixture
def sample_tree_document() -> Dict[str, Any]:
    return dict(SAMPLE_TREE_DOCUMENT)


@pytest.fixture
def attachment_part() -> Part:
    """A base64 attachment leaf carrying every non-structural field type."""
    return Part(
        header=(
            ContentType(MediaType("application", "pdf", {"name": "report.pdf"})),
            ContentTransferEncoding(Mechanism.BASE64),
            ContentId("report@example.com"),
            ContentDescription("Quarterly report"),
            ContentDisposition(Disposition(
                DispositionType.ATTACHMENT,
                DispositionParameters(
                    filename="report.pdf",
                    creation_date=datetime(1997, 11, 21, 9, 55, 6),
                    size=9,
                ),
            )),
            GenericField("X-Origin", "scanner"),
        ),
        body=Data(b"JVBERi0xLg=="),
    )


@pytest.fixture
def plain_part() -> Part:
    return Part(
        header=(ContentType(MediaType("text", "plain", {"charset": "us-ascii"})),),
        body=Data(b"Hello, world."),
    )


@pytest.fixture
def mixed_message(plain_part, attachment_part) -> Part:
    """A top-level multipart/mixed message with a fixed boundary."""
    return Part(
        header=(
            MimeVersion(1, 0),
            ContentType(MediaType("multipart", "mixed", {"boundary": SAMPLE_BOUNDARY})),
        ),
        body=(plain_part, attachment_part),
    )
