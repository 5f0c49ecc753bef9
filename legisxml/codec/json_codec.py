"""JSON interchange form of the document tree.

Keys are lower-camel-case mirrors of the XML names; element tags are not
represented. Empty values are omitted rather than written as null, apart
from the required fields.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from legisxml.config import settings
from legisxml.enums import DocumentType
from legisxml.errors import DecodeError, UnknownDocumentType
from legisxml.models.documents import (
    DOCUMENT_TYPES,
    Amendment,
    Bill,
    Document,
    EngrossedAmendment,
    Resolution,
)

logger = logging.getLogger(__name__)


def encode_json(document: Document, indent: int | None = None) -> bytes:
    """Serialize a document tree to UTF-8 JSON.

    Args:
        document: Tree to encode.
        indent: Indentation width; defaults to ``settings.json_indent``.
            Zero gives compact output.
    """
    if indent is None:
        indent = settings.json_indent
    data = document.model_dump_json(by_alias=True, indent=indent or None)
    return data.encode("utf-8")


def decode_json(data: bytes | str, document_type: DocumentType) -> Document:
    """Decode JSON produced by ``encode_json`` into a fresh tree.

    Raises:
        UnknownDocumentType: If ``document_type`` is UNKNOWN.
        DecodeError: On syntax errors, unknown keys, wrong types, unknown
            span kinds or over-deep references.
    """
    document_cls = DOCUMENT_TYPES.get(document_type)
    if document_cls is None:
        raise UnknownDocumentType()

    try:
        document = document_cls.model_validate_json(data)
    except ValidationError as e:
        raise DecodeError.from_validation_error(e) from e

    logger.debug(f"Decoded {document_type.value} from JSON")
    return document


def bill_from_json(data: bytes | str) -> Bill:
    return decode_json(data, DocumentType.BILL)


def resolution_from_json(data: bytes | str) -> Resolution:
    return decode_json(data, DocumentType.RESOLUTION)


def amendment_from_json(data: bytes | str) -> Amendment:
    return decode_json(data, DocumentType.AMENDMENT)


def engrossed_amendment_from_json(data: bytes | str) -> EngrossedAmendment:
    return decode_json(data, DocumentType.ENGROSSED_AMENDMENT)
