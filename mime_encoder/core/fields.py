"""Header field encoding: one field in, its wire text out.

WHY: Every MIME header field has its own fixed template (RFC 2045,
RFC 2183). Keeping the per-field formatting in one place lets the part
encoder treat a header as a plain sequence of already-rendered strings.

HOW: encode_field() dispatches on the field's dataclass type. Fields with
structured values (Content-Type, Content-Disposition) delegate to
encode_media_type() / encode_disposition(), which produce their own CRLF
because their parameters are folded one per continuation line. Free-text
fields delegate to imf.unstructured for folding; Content-ID delegates to
imf.message_id; disposition dates go through imf.date_field.

RULES:
- Every encoded field ends with exactly one trailing CRLF
- Media type parameters are rendered attr="value" in mapping order,
  one per continuation line
- Disposition parameters are rendered in the fixed order filename,
  creation-date, modification-date, read-date, size; absent ones skipped
- filename is written unquoted, dates quoted, size as a decimal integer
- Content-Description folds with a continuation width of 20, generic
  fields with len(name) + 1
"""

from __future__ import annotations

from typing import List

from imf import date_field, message_id, unstructured
from mime_encoder.core.ir import (
    ContentDescription,
    ContentDisposition,
    ContentId,
    ContentTransferEncoding,
    ContentType,
    Disposition,
    DispositionType,
    Field,
    GenericField,
    MediaType,
    Mechanism,
    MimeVersion,
)

CRLF = "\r\n"

# Width of "Content-Description:" already on the first line.
_DESCRIPTION_PREPEND = 20

# Separator between media type parameters: a fold, then the next attribute.
_MEDIA_TYPE_PARAM_SEP = CRLF + " "

# Separator between disposition parameters.
_DISPOSITION_PARAM_SEP = ";" + CRLF + " "


def encode_mechanism(mechanism: Mechanism) -> str:
    """Return the Content-Transfer-Encoding keyword for ``mechanism``."""
    return Mechanism(mechanism).value


def encode_media_type(media_type: MediaType) -> str:
    """Render a media type with its parameters, CRLF-terminated.

    ``text/plain`` with no parameters becomes ``"text/plain\\r\\n"``;
    with parameters each ``attr="value"`` sits on its own continuation
    line after ``type/subtype;``.
    """
    head = "{}/{}".format(media_type.type, media_type.subtype)
    params = [
        '{}="{}"'.format(attribute, value)
        for attribute, value in media_type.parameters.items()
    ]
    if not params:
        return head + CRLF
    return head + ";" + CRLF + " " + _MEDIA_TYPE_PARAM_SEP.join(params) + CRLF


def _disposition_params(disposition: Disposition) -> List[str]:
    params = disposition.parameters
    rendered: List[str] = []
    if params.filename is not None:
        rendered.append("filename={}".format(params.filename))
    if params.creation_date is not None:
        rendered.append('creation-date="{}"'.format(date_field.format_date(params.creation_date)))
    if params.modification_date is not None:
        rendered.append('modification-date="{}"'.format(date_field.format_date(params.modification_date)))
    if params.read_date is not None:
        rendered.append('read-date="{}"'.format(date_field.format_date(params.read_date)))
    if params.size is not None:
        rendered.append("size={:d}".format(params.size))
    return rendered


def encode_disposition(disposition: Disposition) -> str:
    """Render a Content-Disposition value, CRLF-terminated."""
    head = DispositionType(disposition.type).value
    params = _disposition_params(disposition)
    if not params:
        return head + CRLF
    return head + ";" + CRLF + " " + _DISPOSITION_PARAM_SEP.join(params) + CRLF


def encode_field(field: Field) -> str:
    """Encode one header field into its complete text, including CRLF.

    Raises:
        TypeError: If ``field`` is not one of the header field types.
    """
    if isinstance(field, MimeVersion):
        return "Mime-Version: {:d}.{:d}{}".format(field.major, field.minor, CRLF)
    if isinstance(field, ContentType):
        return "Content-Type: " + encode_media_type(field.media_type)
    if isinstance(field, ContentTransferEncoding):
        return "Content-Transfer-Encoding: " + encode_mechanism(field.mechanism) + CRLF
    if isinstance(field, ContentId):
        return "Content-ID: " + message_id.encode([field.message_id])
    if isinstance(field, ContentDescription):
        return "Content-Description:" + unstructured.encode(field.text, _DESCRIPTION_PREPEND)
    if isinstance(field, ContentDisposition):
        return "Content-Disposition: " + encode_disposition(field.disposition)
    if isinstance(field, GenericField):
        return field.name + ":" + unstructured.encode(field.text, len(field.name) + 1)
    raise TypeError("Unsupported header field type: {}".format(type(field).__name__))
