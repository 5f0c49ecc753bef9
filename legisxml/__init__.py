"""legisxml: round-trip USLM bills, resolutions and amendments.

Documents move between three forms: USLM XML on the wire, an immutable
in-memory tree, and a JSON interchange form::

    from legisxml import read_document, encode_json, decode_json

    bill = read_document("BILLS-114s32cds.xml")
    data = encode_json(bill)
    assert decode_json(data, bill.document_type) == bill
"""

from legisxml.capabilities import as_capability, supports
from legisxml.codec import (
    amendment_from_json,
    bill_from_json,
    decode_amendment,
    decode_bill,
    decode_document,
    decode_engrossed_amendment,
    decode_json,
    decode_resolution,
    detect_document_type,
    encode_json,
    encode_xml,
    engrossed_amendment_from_json,
    read_document,
    resolution_from_json,
)
from legisxml.enums import Capability, DocumentType
from legisxml.errors import DecodeError, LegislativeDocumentError, UnknownDocumentType
from legisxml.models import Amendment, Bill, Document, EngrossedAmendment, Resolution

__all__ = [
    "Amendment",
    "Bill",
    "Capability",
    "DecodeError",
    "Document",
    "DocumentType",
    "EngrossedAmendment",
    "LegislativeDocumentError",
    "Resolution",
    "UnknownDocumentType",
    "amendment_from_json",
    "as_capability",
    "bill_from_json",
    "decode_amendment",
    "decode_bill",
    "decode_document",
    "decode_engrossed_amendment",
    "decode_json",
    "decode_resolution",
    "detect_document_type",
    "encode_json",
    "encode_xml",
    "engrossed_amendment_from_json",
    "read_document",
    "resolution_from_json",
    "supports",
]
