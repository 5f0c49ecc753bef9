"""XML and JSON codecs and document-type detection."""

from legisxml.codec.detect import detect_document_type
from legisxml.codec.json_codec import (
    amendment_from_json,
    bill_from_json,
    decode_json,
    encode_json,
    engrossed_amendment_from_json,
    resolution_from_json,
)
from legisxml.codec.xml_decoder import (
    DocumentDecoder,
    decode_amendment,
    decode_bill,
    decode_document,
    decode_engrossed_amendment,
    decode_resolution,
    read_document,
)
from legisxml.codec.xml_encoder import DocumentEncoder, encode_xml

__all__ = [
    "DocumentDecoder",
    "DocumentEncoder",
    "amendment_from_json",
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
]
