"""Unit tests for the JSON part-tree loader.

WHY: The loader is the boundary where untrusted documents become trees.
Bad documents must fail with a TreeLoadError pointing at the problem,
never with a half-built tree or a bare KeyError.

HOW: Documents are loaded from dicts and from files under tmp_path, then
checked structurally or encoded and compared with expected bytes.
"""

import json
from datetime import datetime, timezone

import pytest

from conftest import SAMPLE_TREE_BYTES
from mime_encoder.core.encoder import encode
from mime_encoder.core.ir import (
    ContentDescription,
    ContentDisposition,
    ContentId,
    ContentTransferEncoding,
    ContentType,
    Data,
    DispositionType,
    GenericField,
    Mechanism,
    MimeVersion,
    Part,
)
from mime_encoder.core.loader import load_part, load_part_file
from mime_encoder.errors import TreeLoadError


class TestLoadPart:
    def test_sample_document_encodes(self, sample_tree_document):
        assert encode(load_part(sample_tree_document)) == SAMPLE_TREE_BYTES

    def test_every_field_kind(self):
        part = load_part({
            "header": [
                {"field": "mime-version"},
                {"field": "content-type", "type": "text", "subtype": "plain",
                 "parameters": {"charset": "utf-8", "format": "flowed"}},
                {"field": "content-transfer-encoding", "mechanism": "quoted-printable"},
                {"field": "content-id", "id": "c1@example.com"},
                {"field": "content-description", "text": "Greeting"},
                {"field": "content-disposition", "type": "attachment",
                 "parameters": {"filename": "hi.txt", "size": 5,
                                "creation-date": "2021-01-01T12:00:00Z"}},
                {"field": "generic", "name": "X-Trace", "text": "abc"},
            ],
            "body": {"data": "hello"},
        })
        mime_version, content_type, cte, content_id, description, disposition, generic = part.header
        assert mime_version == MimeVersion(1, 0)
        assert isinstance(content_type, ContentType)
        assert list(content_type.media_type.parameters) == ["charset", "format"]
        assert cte == ContentTransferEncoding(Mechanism.QUOTED_PRINTABLE)
        assert content_id == ContentId("c1@example.com")
        assert description == ContentDescription("Greeting")
        assert isinstance(disposition, ContentDisposition)
        assert disposition.disposition.type is DispositionType.ATTACHMENT
        params = disposition.disposition.parameters
        assert params.filename == "hi.txt"
        assert params.size == 5
        assert params.creation_date == datetime(2021, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert generic == GenericField("X-Trace", "abc")
        assert part.body == Data(b"hello")

    def test_nested_part_and_base64(self):
        part = load_part({
            "body": [
                {"part": {"body": {"data_base64": "AAEC"}}},
                {"data": "tail"},
            ],
        })
        assert part.header == ()
        assert part.body == (Part((), Data(b"\x00\x01\x02")), Data(b"tail"))

    def test_single_nested_part_body(self):
        part = load_part({"body": {"part": {"header": [], "body": {"data": "x"}}}})
        assert part.body == Part((), Data(b"x"))


class TestLoadErrors:
    def test_missing_body(self):
        with pytest.raises(TreeLoadError):
            load_part({"header": []})

    def test_unknown_field_kind(self):
        with pytest.raises(TreeLoadError):
            load_part({"header": [{"field": "bogus"}], "body": {"data": ""}})

    def test_bad_mechanism(self):
        with pytest.raises(TreeLoadError):
            load_part({
                "header": [{"field": "content-transfer-encoding", "mechanism": "uuencode"}],
                "body": {"data": ""},
            })

    def test_bad_timestamp_reports_path(self):
        with pytest.raises(TreeLoadError) as excinfo:
            load_part({
                "header": [{"field": "content-disposition", "type": "inline",
                            "parameters": {"read-date": "yesterday"}}],
                "body": {"data": ""},
            })
        assert excinfo.value.path == "header/0/parameters/read-date"

    def test_bad_base64_reports_path(self):
        with pytest.raises(TreeLoadError) as excinfo:
            load_part({"body": [{"data_base64": "not base64!"}]})
        assert excinfo.value.path == "body/0/data_base64"

    def test_non_positive_size(self):
        with pytest.raises(TreeLoadError):
            load_part({
                "header": [{"field": "content-disposition", "type": "attachment",
                            "parameters": {"size": 0}}],
                "body": {"data": ""},
            })


class TestLoadPartFile:
    def test_reads_json_file(self, tmp_path, sample_tree_document):
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(sample_tree_document), encoding="utf-8")
        assert encode(load_part_file(path)) == SAMPLE_TREE_BYTES

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TreeLoadError):
            load_part_file(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"body": {"data": "caf\xe9"}}')
        with pytest.raises(TreeLoadError, match="UTF-8"):
            load_part_file(path)
