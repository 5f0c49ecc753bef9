"""Tests for the JSON interchange form."""

import json

import pytest

from legisxml.codec.json_codec import (
    amendment_from_json,
    bill_from_json,
    decode_json,
    encode_json,
    engrossed_amendment_from_json,
    resolution_from_json,
)
from legisxml.codec.xml_decoder import decode_document
from legisxml.codec.xml_encoder import encode_xml
from legisxml.enums import DocumentType
from legisxml.errors import DecodeError, UnknownDocumentType
from legisxml.models import (
    Amendment,
    Bill,
    EngrossedAmendment,
    Meta,
    Resolution,
)
from legisxml.namespaces import NAMESPACE_DC, NAMESPACE_USLM

FIXTURE_NAMES = ["bill", "resolution", "engrossed", "amendment"]


class TestRoundTrip:
    """decode_json(encode_json(D), type(D)) == D."""

    @pytest.mark.parametrize("name", FIXTURE_NAMES)
    def test_fixture_round_trip(self, name: str, request: pytest.FixtureRequest) -> None:
        document = request.getfixturevalue(name)

        decoded = decode_json(encode_json(document), document.document_type)

        assert decoded == document
        assert decoded is not document

    def test_result_shares_no_nodes(self, bill: Bill) -> None:
        decoded = decode_json(encode_json(bill), DocumentType.BILL)

        assert decoded.main.sections[0] == bill.main.sections[0]
        assert decoded.main.sections[0] is not bill.main.sections[0]

    def test_namespace_strings_preserved(self, bill: Bill) -> None:
        decoded = decode_json(encode_json(bill), DocumentType.BILL)

        assert decoded.xmlns_dc == NAMESPACE_DC
        assert decoded.xmlns_uslm == NAMESPACE_USLM
        assert decoded.xsi_schema_location == bill.xsi_schema_location

    def test_per_variant_wrappers(
        self,
        bill: Bill,
        resolution: Resolution,
        amendment: Amendment,
        engrossed: EngrossedAmendment,
    ) -> None:
        assert isinstance(bill_from_json(encode_json(bill)), Bill)
        assert isinstance(resolution_from_json(encode_json(resolution)), Resolution)
        assert isinstance(amendment_from_json(encode_json(amendment)), Amendment)
        assert isinstance(
            engrossed_amendment_from_json(encode_json(engrossed)), EngrossedAmendment
        )

    def test_accepts_str(self, amendment: Amendment) -> None:
        text = encode_json(amendment).decode("utf-8")

        assert amendment_from_json(text) == amendment


def empty_block_bill(body: str) -> bytes:
    return f'<bill xmlns="{NAMESPACE_USLM}">{body}</bill>'.encode("utf-8")


EMPTY_BLOCKS = {
    "content": empty_block_bill(
        '<main><section><num value="1">1.</num><content/></section></main>'
    ),
    "chapeau": empty_block_bill("<main><section><chapeau/></section></main>"),
    "heading": empty_block_bill("<main><section><heading/></section></main>"),
    "num": empty_block_bill("<main><section><num/></section></main>"),
    "preface": empty_block_bill("<preface/>"),
    "main": empty_block_bill("<main/>"),
    "inner_ref": empty_block_bill(
        '<main><section><content>See <ref href="/a">A<ref/></ref>.</content>'
        "</section></main>"
    ),
}


class TestEmptyBlocks:
    """A present but empty block stays present through both codecs."""

    @pytest.mark.parametrize("name", list(EMPTY_BLOCKS))
    def test_json_round_trip(self, name: str) -> None:
        document = decode_document(EMPTY_BLOCKS[name])

        assert decode_json(encode_json(document), DocumentType.BILL) == document

    @pytest.mark.parametrize("name", list(EMPTY_BLOCKS))
    def test_xml_round_trip(self, name: str) -> None:
        document = decode_document(EMPTY_BLOCKS[name])

        assert decode_document(encode_xml(document)) == document

    def test_empty_block_written_as_empty_object(self) -> None:
        data = json.loads(encode_json(decode_document(EMPTY_BLOCKS["content"])))

        assert data["main"]["sections"][0]["content"] == {}

    def test_empty_preface_kept(self) -> None:
        document = decode_document(EMPTY_BLOCKS["preface"])
        data = json.loads(encode_json(document))

        assert document.preface is not None
        assert data["preface"] == {}

    def test_empty_inner_ref_kept(self) -> None:
        document = decode_document(EMPTY_BLOCKS["inner_ref"])
        decoded = decode_json(encode_json(document), DocumentType.BILL)

        ref = decoded.main.sections[0].content.spans[0]
        assert ref.text == "A"
        assert ref.inner_ref is not None
        assert ref.inner_ref.text == ""


class TestEncoding:
    """Key naming, omission and formatting."""

    def test_camel_case_keys(self, bill: Bill) -> None:
        data = json.loads(encode_json(bill))

        assert data["xmlnsDC"] == NAMESPACE_DC
        assert data["xmlnsUSLM"] == NAMESPACE_USLM
        assert data["xmlLang"] == "en"
        assert data["meta"]["docNumber"] == "32"
        assert data["meta"]["dcTitle"].startswith("114 S32 CDS")
        assert len(data["meta"]["citableAs"]) == 3
        sponsor = data["preface"]["actions"][0]["actionDescription"]["sponsors"][0]
        assert sponsor == {"text": "Mrs. Feinstein", "senateId": "S221"}

    def test_no_nulls(self, bill: Bill) -> None:
        assert b"null" not in encode_json(bill)

    def test_empty_values_omitted(self, bill: Bill) -> None:
        data = json.loads(encode_json(bill))
        section = data["main"]["sections"][0]

        assert "chapeau" not in section
        assert "subsections" not in section
        assert "role" not in section
        assert "endMarker" not in data["main"]

    def test_required_fields_kept(self) -> None:
        data = json.loads(encode_json(Bill(meta=Meta())))

        assert data == {"xmlns": NAMESPACE_USLM, "meta": {"dcType": "", "docNumber": ""}}

    def test_spans_as_single_key_objects(self, bill: Bill) -> None:
        data = json.loads(encode_json(bill))
        chapeau = data["main"]["sections"][1]["chapeau"]

        assert chapeau["spans"] == [
            {"ref": {"text": "21 U.S.C. 959", "href": "/us/usc/t21/s959"}}
        ]

    def test_class_key(self, bill: Bill) -> None:
        data = json.loads(encode_json(bill))

        assert data["main"]["sections"][2]["subsections"][1]["class"] == "inline"

    def test_non_ascii_kept(self, bill: Bill) -> None:
        assert "amended—".encode("utf-8") in encode_json(bill)

    def test_indentation(self, amendment: Amendment) -> None:
        assert encode_json(amendment).startswith(b'{\n  "xmlns"')
        assert b"\n" not in encode_json(amendment, indent=0)


class TestDecodeErrors:
    """Invalid JSON surfaces as DecodeError."""

    def test_syntax_error_has_position(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_json(b'{"xmlns": ', DocumentType.BILL)

        assert exc_info.value.line == 1
        assert exc_info.value.column is not None

    def test_unknown_key(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_json(b'{"xmlns": "x", "bogus": 1}', DocumentType.BILL)

        assert exc_info.value.path == "bogus"

    def test_wrong_type(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_json(b'{"meta": {"docNumber": 32}}', DocumentType.BILL)

        assert exc_info.value.path == "meta.docNumber"

    def test_unknown_span_kind(self) -> None:
        data = json.dumps(
            {"main": {"sections": [{"content": {"spans": [{"blink": {"text": "x"}}]}}]}}
        )

        with pytest.raises(DecodeError, match="unknown span kind"):
            decode_json(data, DocumentType.BILL)

    def test_ref_too_deep(self) -> None:
        deep = {"ref": {"innerRef": {"innerRef": {"text": "c"}}}}
        data = json.dumps({"main": {"sections": [{"content": {"spans": [deep]}}]}})

        with pytest.raises(DecodeError):
            decode_json(data, DocumentType.BILL)

    def test_unknown_document_type(self) -> None:
        with pytest.raises(UnknownDocumentType):
            decode_json(b"{}", DocumentType.UNKNOWN)

    def test_variant_specific_fields(self, engrossed: EngrossedAmendment) -> None:
        with pytest.raises(DecodeError):
            decode_json(encode_json(engrossed), DocumentType.AMENDMENT)
