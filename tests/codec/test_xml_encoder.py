"""Tests for encoding document trees to USLM XML."""

import pytest
from lxml import etree

from legisxml.codec.xml_decoder import decode_bill, decode_document
from legisxml.codec.xml_encoder import XML_DECLARATION, encode_xml
from legisxml.models import (
    Bill,
    Content,
    Italic,
    Main,
    Meta,
    Num,
    Ref,
    Section,
)
from legisxml.namespaces import NAMESPACE_DC, NAMESPACE_USLM

FIXTURE_NAMES = ["bill", "resolution", "engrossed", "amendment"]


class TestRoundTrip:
    """decode(encode_xml(D)) == D for decoded documents."""

    @pytest.mark.parametrize("name", FIXTURE_NAMES)
    def test_fixture_round_trip(self, name: str, request: pytest.FixtureRequest) -> None:
        document = request.getfixturevalue(name)

        assert decode_document(encode_xml(document)) == document

    @pytest.mark.parametrize("name", FIXTURE_NAMES)
    def test_encoding_is_stable(self, name: str, request: pytest.FixtureRequest) -> None:
        document = request.getfixturevalue(name)
        encoded = encode_xml(document)

        assert encode_xml(decode_document(encoded)) == encoded

    def test_constructed_document_round_trip(self) -> None:
        bill = Bill(
            xmlns_dc=NAMESPACE_DC,
            meta=Meta(doc_number="5", dc_type="House Bill", citable_as=("a", "b")),
            main=Main(
                sections=(
                    Section(
                        num=Num(value="1", text="SECTION 1. "),
                        content=Content(
                            text="  spaced   text  ",
                            spans=(
                                Ref(text="outer", href="/a", inner_ref=Ref(text="inner")),
                                Italic(text="it"),
                            ),
                        ),
                    ),
                )
            ),
        )

        assert decode_bill(encode_xml(bill)) == bill


class TestOutput:
    """Shape of the serialized XML."""

    def test_declaration(self, bill: Bill) -> None:
        assert encode_xml(bill).startswith(XML_DECLARATION)
        assert XML_DECLARATION == b'<?xml version="1.0" encoding="UTF-8"?>\n'

    def test_parses_as_xml(self, engrossed) -> None:
        root = etree.fromstring(encode_xml(engrossed))

        assert etree.QName(root).localname == "engrossedAmendment"
        assert root.get("styleType") == "traditional"

    def test_structural_indentation(self, bill: Bill) -> None:
        output = encode_xml(bill)

        assert b"\n  <meta>\n    <dc:title>" in output
        assert b"\n  <preface>" in output

    def test_text_bearing_nodes_verbatim(self, bill: Bill) -> None:
        output = encode_xml(bill)

        assert (
            b"<content>This Act may be cited as the ."
            b"<quotedText>Transnational Drug Trafficking Act of 2015</quotedText></content>"
        ) in output

    def test_uslm_prefix_declared_without_prefixing_elements(self, bill: Bill) -> None:
        output = encode_xml(bill)

        assert b'xmlns:uslm="http://schemas.gpo.gov/xml/uslm"' in output
        assert b"<uslm:" not in output
        assert b'<bill xmlns' in output

    def test_root_declarations(self, bill: Bill) -> None:
        root = etree.fromstring(encode_xml(bill))

        assert root.nsmap[None] == NAMESPACE_USLM
        assert root.nsmap["dc"] == NAMESPACE_DC
        assert root.nsmap["uslm"] == NAMESPACE_USLM
        assert root.get("{http://www.w3.org/XML/1998/namespace}lang") == "en"

    def test_canonical_block_order(self) -> None:
        data = (
            f'<bill xmlns="{NAMESPACE_USLM}" xmlns:dc="{NAMESPACE_DC}">'
            f"<main><section/></main>"
            f"<preface><docNumber>9</docNumber></preface>"
            f"<meta><docNumber>9</docNumber><dc:type>House Bill</dc:type></meta>"
            f"</bill>"
        ).encode("utf-8")

        output = encode_xml(decode_bill(data))

        assert output.index(b"<meta>") < output.index(b"<preface>") < output.index(b"<main>")
        assert output.index(b"<dc:type>") < output.index(b"<docNumber>9</docNumber>")


class TestOmitIfEmpty:
    """Absent fields are omitted; required fields are always written."""

    def test_required_fields_written_when_empty(self) -> None:
        output = encode_xml(Bill(xmlns_dc=NAMESPACE_DC, meta=Meta()))

        assert b"<dc:type/>" in output
        assert b"<docNumber/>" in output

    def test_empty_fields_omitted(self) -> None:
        output = encode_xml(
            Bill(xmlns_dc=NAMESPACE_DC, meta=Meta(doc_number="5", dc_type="House Bill"))
        )

        assert b"<dc:title" not in output
        assert b"citableAs" not in output
        assert b"<preface" not in output
        assert b"endMarker" not in output

    def test_empty_attributes_omitted(self) -> None:
        bill = Bill(main=Main(sections=(Section(num=Num(text="SEC. 1.")),)))

        output = encode_xml(bill)

        assert b"<section>" in output
        assert b"<num>SEC. 1.</num>" in output
        assert b'id=""' not in output

    def test_default_namespace_always_written(self) -> None:
        assert f'xmlns="{NAMESPACE_USLM}"'.encode() in encode_xml(Bill())

    def test_empty_default_namespace_written(self) -> None:
        bill = Bill(xmlns="", meta=Meta(doc_number="7", dc_type="House Bill"))

        output = encode_xml(bill)

        assert b'<bill xmlns="">' in output
        assert b"<meta>" in output
        assert decode_bill(output) == bill

    def test_empty_default_namespace_with_prefixes(self) -> None:
        bill = Bill(xmlns="", xmlns_uslm=NAMESPACE_USLM)

        output = encode_xml(bill)

        assert b'xmlns=""' in output
        assert f'xmlns:uslm="{NAMESPACE_USLM}"'.encode() in output
        assert decode_bill(output) == bill
