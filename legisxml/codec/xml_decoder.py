"""Decode USLM XML into the immutable document tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, TypeVar

from lxml import etree
from pydantic import ValidationError

from legisxml.codec.detect import detect_document_type, root_element_name
from legisxml.enums import DocumentType
from legisxml.errors import DecodeError, UnknownDocumentType
from legisxml.models.base import USLMModel
from legisxml.models.body import (
    AmendMain,
    AmendmentInstruction,
    EnactingFormula,
    Endorsement,
    LongTitle,
    Main,
    Notation,
    Preamble,
    Recital,
    ReferenceItem,
    ResolvingClause,
    Signature,
    Signatures,
    TableOfContents,
)
from legisxml.models.documents import (
    DOCUMENT_TYPES,
    Amendment,
    AmendmentLike,
    Bill,
    BillLike,
    Document,
    EngrossedAmendment,
    Resolution,
)
from legisxml.models.hierarchy import (
    HIERARCHY_TAGS,
    LEVEL_TYPES,
    AmendmentContent,
    Chapeau,
    Content,
    Heading,
    Level,
    Num,
    QuotedContent,
)
from legisxml.models.inline import MAX_REF_DEPTH, SPAN_TYPES, MixedContent, Ref, Span
from legisxml.models.metadata import AmendMeta, BaseMeta, Meta, RelatedDocument
from legisxml.models.preface import (
    Action,
    ActionDate,
    ActionDescription,
    AmendPreface,
    Committee,
    CongressElement,
    Cosponsor,
    CurrentChamber,
    DistributionCode,
    Preface,
    SessionElement,
    Sponsor,
)
from legisxml.namespaces import NAMESPACE_XML

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=USLMModel)

# Meta leaf elements, keyed by model field. Dublin Core names are matched by
# local name like everything else.
_META_LEAVES = (
    ("dc_title", "title"),
    ("dc_type", "type"),
    ("dc_creator", "creator"),
    ("dc_publisher", "publisher"),
    ("dc_format", "format"),
    ("dc_language", "language"),
    ("dc_rights", "rights"),
    ("doc_number", "docNumber"),
    ("doc_stage", "docStage"),
    ("current_chamber", "currentChamber"),
    ("congress", "congress"),
    ("session", "session"),
    ("public_private", "publicPrivate"),
    ("processed_by", "processedBy"),
    ("processed_date", "processedDate"),
)


def _local_name(elem: etree._Element) -> str:
    return etree.QName(elem).localname


def _elements(parent: etree._Element) -> list[etree._Element]:
    """Return the element children of a node, skipping comments and PIs."""
    return [child for child in parent if isinstance(child.tag, str)]


def _find(parent: etree._Element, name: str) -> etree._Element | None:
    for child in _elements(parent):
        if _local_name(child) == name:
            return child
    return None


def _find_all(parent: etree._Element, name: str) -> list[etree._Element]:
    return [child for child in _elements(parent) if _local_name(child) == name]


def own_text(elem: etree._Element) -> str:
    """Return an element's own character data.

    This is the leading text plus the tail after every child node, in
    document order. Text inside child elements is excluded.
    """
    parts = [elem.text or ""]
    for child in elem:
        parts.append(child.tail or "")
    return "".join(parts)


def _child_text(parent: etree._Element, name: str) -> str:
    child = _find(parent, name)
    return own_text(child) if child is not None else ""


class DocumentDecoder:
    """Decoder for USLM bill, resolution and amendment XML.

    The complete buffer is parsed up front; any syntax error, unexpected root
    element, nesting violation or model validation failure raises DecodeError
    and no partial tree is returned.
    """

    def __init__(self) -> None:
        self._parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_blank_text=False,
        )

    def decode(self, data: bytes, document_type: DocumentType) -> Document:
        """Decode ``data`` as the given document variant."""
        if document_type not in DOCUMENT_TYPES:
            raise UnknownDocumentType(root_element_name(data))

        root = self._parse(data)
        name = _local_name(root)
        if name != document_type.value:
            raise DecodeError(
                f"expected <{document_type.value}> root element, found <{name}>",
                line=root.sourceline,
            )

        document_cls = DOCUMENT_TYPES[document_type]
        fields = self._root_fields(root)
        if issubclass(document_cls, BillLike):
            fields.update(self._bill_blocks(root))
        else:
            fields.update(self._amendment_blocks(root, document_cls))

        document = self._build(document_cls, root, **fields)
        logger.info(
            f"Decoded {document_type.value} {self._describe(document)}"
        )
        return document

    # ------------------------------------------------------------------
    # Parsing and model construction
    # ------------------------------------------------------------------

    def _parse(self, data: bytes) -> etree._Element:
        if not data.strip():
            raise DecodeError("document is empty", line=1, column=1)
        try:
            return etree.fromstring(data, self._parser)
        except etree.XMLSyntaxError as e:
            line, column = e.position
            raise DecodeError(f"malformed XML: {e.msg}", line=line, column=column) from e

    def _build(self, model_cls: type[M], elem: etree._Element, **fields: Any) -> M:
        """Construct a model, reporting validation failures at the element's line."""
        try:
            return model_cls(**fields)
        except ValidationError as e:
            raise DecodeError.from_validation_error(e, line=elem.sourceline) from e

    def _attributes(self, elem: etree._Element, model_cls: type[USLMModel]) -> dict[str, str]:
        return {
            name: elem.get(model_cls.field_key(name), "")
            for name in model_cls.xml_attributes
        }

    def _describe(self, document: Document) -> str:
        meta = document.meta if isinstance(document, BillLike) else document.amend_meta
        if meta is None:
            return "(no metadata)"
        return f"{meta.doc_number or '?'} ({meta.dc_type or 'untyped'}, congress {meta.congress or '?'})"

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------

    def _root_fields(self, root: etree._Element) -> dict[str, Any]:
        nsmap = root.nsmap
        fields: dict[str, Any] = {
            "xmlns": nsmap.get(None) or "",
            "xmlns_dc": nsmap.get("dc") or "",
            "xmlns_html": nsmap.get("html") or "",
            "xmlns_uslm": nsmap.get("uslm") or "",
            "xmlns_xsi": nsmap.get("xsi") or "",
            "xsi_schema_location": "",
            "xml_lang": "",
        }
        for key, value in root.attrib.items():
            qname = etree.QName(key)
            if qname.localname == "schemaLocation":
                fields["xsi_schema_location"] = value
            elif qname.namespace == NAMESPACE_XML and qname.localname == "lang":
                fields["xml_lang"] = value
        return fields

    def _bill_blocks(self, root: etree._Element) -> dict[str, Any]:
        fields: dict[str, Any] = {"end_marker": _child_text(root, "endMarker")}
        meta = _find(root, "meta")
        if meta is not None:
            fields["meta"] = self._decode_meta(meta, Meta)
        preface = _find(root, "preface")
        if preface is not None:
            fields["preface"] = self._decode_preface(preface)
        main = _find(root, "main")
        if main is not None:
            fields["main"] = self._decode_main(main)
        return fields

    def _amendment_blocks(
        self, root: etree._Element, document_cls: type[AmendmentLike]
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        meta = _find(root, "amendMeta")
        if meta is not None:
            fields["amend_meta"] = self._decode_meta(meta, AmendMeta)
        preface = _find(root, "amendPreface")
        if preface is not None:
            fields["amend_preface"] = self._decode_amend_preface(preface)
        main = _find(root, "amendMain")
        if main is not None:
            fields["amend_main"] = self._decode_amend_main(main)

        if document_cls is EngrossedAmendment:
            fields["style_type"] = root.get("styleType", "")
            signatures = _find(root, "signatures")
            if signatures is not None:
                fields["signatures"] = self._decode_signatures(signatures)
            endorsement = _find(root, "endorsement")
            if endorsement is not None:
                fields["endorsement"] = self._decode_endorsement(endorsement)
        return fields

    # ------------------------------------------------------------------
    # Metadata and preface
    # ------------------------------------------------------------------

    def _decode_meta(self, elem: etree._Element, meta_cls: type[BaseMeta]) -> BaseMeta:
        fields: dict[str, Any] = {
            name: _child_text(elem, tag) for name, tag in _META_LEAVES
        }
        fields["citable_as"] = tuple(own_text(c) for c in _find_all(elem, "citableAs"))

        if meta_cls is AmendMeta:
            fields["amend_degree"] = _child_text(elem, "amendDegree")
        else:
            fields["related_documents"] = tuple(
                self._text_node(c, RelatedDocument)
                for c in _find_all(elem, "relatedDocument")
            )
            fields["popular_name"] = _child_text(elem, "popularName")
        return self._build(meta_cls, elem, **fields)

    def _decode_preface(self, elem: etree._Element) -> Preface:
        return self._build(
            Preface,
            elem,
            slug_line=_child_text(elem, "slugLine"),
            distribution_code=self._optional(elem, "distributionCode", DistributionCode),
            congress=self._optional(elem, "congress", CongressElement),
            session=self._optional(elem, "session", SessionElement),
            dc_type=_child_text(elem, "type"),
            doc_number=_child_text(elem, "docNumber"),
            dc_title=_child_text(elem, "title"),
            current_chamber=self._optional(elem, "currentChamber", CurrentChamber),
            actions=tuple(self._decode_action(a) for a in _find_all(elem, "action")),
        )

    def _decode_amend_preface(self, elem: etree._Element) -> AmendPreface:
        return self._build(
            AmendPreface,
            elem,
            slug_line=_child_text(elem, "slugLine"),
            current_chamber=self._optional(elem, "currentChamber", CurrentChamber),
            actions=tuple(self._decode_action(a) for a in _find_all(elem, "action")),
        )

    def _decode_action(self, elem: etree._Element) -> Action:
        date = _find(elem, "date")
        description = _find(elem, "actionDescription")
        return self._build(
            Action,
            elem,
            **self._attributes(elem, Action),
            date=self._mixed(date, ActionDate) if date is not None else None,
            action_description=(
                self._decode_action_description(description)
                if description is not None
                else None
            ),
            action_instruction=_child_text(elem, "actionInstruction"),
        )

    def _decode_action_description(self, elem: etree._Element) -> ActionDescription:
        return self._mixed(
            elem,
            ActionDescription,
            handled={"sponsor", "cosponsor", "committee"},
            sponsors=tuple(self._mixed(c, Sponsor) for c in _find_all(elem, "sponsor")),
            cosponsors=tuple(
                self._mixed(c, Cosponsor) for c in _find_all(elem, "cosponsor")
            ),
            committees=tuple(
                self._text_node(c, Committee) for c in _find_all(elem, "committee")
            ),
        )

    # ------------------------------------------------------------------
    # Main body
    # ------------------------------------------------------------------

    def _decode_main(self, elem: etree._Element) -> Main:
        long_title = _find(elem, "longTitle")
        toc = _find(elem, "toc")
        preamble = _find(elem, "preamble")
        return self._build(
            Main,
            elem,
            **self._attributes(elem, Main),
            long_title=(
                self._build(
                    LongTitle,
                    long_title,
                    doc_title=_child_text(long_title, "docTitle"),
                    official_title=_child_text(long_title, "officialTitle"),
                )
                if long_title is not None
                else None
            ),
            enacting_formula=self._optional_mixed(elem, "enactingFormula", EnactingFormula),
            toc=self._decode_toc(toc) if toc is not None else None,
            preamble=self._decode_preamble(preamble) if preamble is not None else None,
            sections=self._levels(elem, "section"),
            titles=self._levels(elem, "title"),
            end_marker=_child_text(elem, "endMarker"),
        )

    def _decode_toc(self, elem: etree._Element) -> TableOfContents:
        items = []
        for item in _find_all(elem, "referenceItem"):
            items.append(
                self._build(
                    ReferenceItem,
                    item,
                    **self._attributes(item, ReferenceItem),
                    designator=_child_text(item, "designator"),
                    label=_child_text(item, "label"),
                )
            )
        return self._build(TableOfContents, elem, reference_items=tuple(items))

    def _decode_preamble(self, elem: etree._Element) -> Preamble:
        recitals = tuple(
            self._mixed(
                recital,
                Recital,
                handled={"paragraph"},
                paragraphs=self._levels(recital, "paragraph"),
            )
            for recital in _find_all(elem, "recital")
        )
        return self._build(
            Preamble,
            elem,
            recitals=recitals,
            resolving_clause=self._optional_mixed(elem, "resolvingClause", ResolvingClause),
        )

    def _decode_amend_main(self, elem: etree._Element) -> AmendMain:
        instructions = []
        for instruction in _find_all(elem, "amendmentInstruction"):
            instructions.append(
                self._build(
                    AmendmentInstruction,
                    instruction,
                    num=self._optional(instruction, "num", Num),
                    content=self._optional_content(instruction),
                )
            )
        signatures = _find(elem, "signatures")
        endorsement = _find(elem, "endorsement")
        return self._build(
            AmendMain,
            elem,
            **self._attributes(elem, AmendMain),
            resolving_clause=self._optional_mixed(elem, "resolvingClause", ResolvingClause),
            sections=self._levels(elem, "section"),
            doc_title=_child_text(elem, "docTitle"),
            amendment_instructions=tuple(instructions),
            signatures=self._decode_signatures(signatures) if signatures is not None else None,
            endorsement=(
                self._decode_endorsement(endorsement) if endorsement is not None else None
            ),
        )

    def _decode_signatures(self, elem: etree._Element) -> Signatures:
        signatures = []
        for signature in _find_all(elem, "signature"):
            signatures.append(
                self._build(
                    Signature,
                    signature,
                    text=own_text(signature),
                    notation=self._optional(signature, "notation", Notation),
                    role=_child_text(signature, "role"),
                )
            )
        return self._build(Signatures, elem, signatures=tuple(signatures))

    def _decode_endorsement(self, elem: etree._Element) -> Endorsement:
        return self._build(
            Endorsement,
            elem,
            **self._attributes(elem, Endorsement),
            congress=self._optional(elem, "congress", CongressElement),
            session=self._optional(elem, "session", SessionElement),
            dc_type=_child_text(elem, "type"),
            doc_number=_child_text(elem, "docNumber"),
            doc_title=_child_text(elem, "docTitle"),
        )

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    def _levels(self, parent: etree._Element, tag: str) -> tuple[Level, ...]:
        return tuple(
            self._decode_level(child, LEVEL_TYPES[tag]) for child in _find_all(parent, tag)
        )

    def _decode_level(self, elem: etree._Element, level_cls: type[Level]) -> Level:
        """Decode one hierarchy level and, recursively, the levels it contains.

        A hierarchy element that the level does not allow as a direct child
        is a DecodeError; other unexpected elements are ignored.
        """
        allowed = {tag: name for name, tag in level_cls.child_levels}
        children: dict[str, list[Level]] = {name: [] for name, _ in level_cls.child_levels}
        for child in _elements(elem):
            name = _local_name(child)
            if name in allowed:
                children[allowed[name]].append(self._decode_level(child, LEVEL_TYPES[name]))
            elif name in HIERARCHY_TAGS:
                raise DecodeError(
                    f"<{name}> is not allowed directly inside <{level_cls.tag}>",
                    line=child.sourceline,
                )

        return self._build(
            level_cls,
            elem,
            **self._attributes(elem, level_cls),
            num=self._optional(elem, "num", Num),
            heading=self._optional_mixed(elem, "heading", Heading),
            chapeau=self._optional_mixed(elem, "chapeau", Chapeau),
            content=self._optional_content(elem),
            **{name: tuple(levels) for name, levels in children.items()},
        )

    def _optional_content(self, parent: etree._Element) -> Content | None:
        elem = _find(parent, "content")
        if elem is None:
            return None
        return self._mixed(
            elem,
            Content,
            handled={"quotedContent", "amendmentContent"},
            quoted_content=tuple(
                self._nested_levels(c, QuotedContent) for c in _find_all(elem, "quotedContent")
            ),
            amendment_content=tuple(
                self._nested_levels(c, AmendmentContent)
                for c in _find_all(elem, "amendmentContent")
            ),
        )

    def _nested_levels(
        self, elem: etree._Element, container_cls: type[QuotedContent | AmendmentContent]
    ) -> QuotedContent | AmendmentContent:
        return self._build(
            container_cls,
            elem,
            **self._attributes(elem, container_cls),
            **{name: self._levels(elem, tag) for name, tag in container_cls.child_levels},
        )

    # ------------------------------------------------------------------
    # Text-bearing nodes
    # ------------------------------------------------------------------

    def _text_node(self, elem: etree._Element, model_cls: type[M], **fields: Any) -> M:
        return self._build(
            model_cls,
            elem,
            **self._attributes(elem, model_cls),
            text=own_text(elem),
            **fields,
        )

    def _optional(
        self, parent: etree._Element, name: str, model_cls: type[M]
    ) -> M | None:
        elem = _find(parent, name)
        return self._text_node(elem, model_cls) if elem is not None else None

    def _optional_mixed(
        self, parent: etree._Element, name: str, model_cls: type[MixedContent]
    ) -> MixedContent | None:
        elem = _find(parent, name)
        return self._mixed(elem, model_cls) if elem is not None else None

    def _mixed(
        self,
        elem: etree._Element,
        model_cls: type[M],
        handled: set[str] | frozenset[str] = frozenset(),
        **fields: Any,
    ) -> M:
        """Decode a text-bearing element into own text plus its allowed spans."""
        spans = []
        for child in _elements(elem):
            name = _local_name(child)
            if name in model_cls.span_tags:
                spans.append(self._decode_span(child, SPAN_TYPES[name]))
            elif name not in handled:
                logger.debug(
                    f"Ignoring <{name}> inside <{_local_name(elem)}> at line {child.sourceline}"
                )
        return self._text_node(elem, model_cls, spans=tuple(spans), **fields)

    def _decode_span(self, elem: etree._Element, span_cls: type[Span], depth: int = 1) -> Span:
        fields: dict[str, Any] = {}
        if span_cls is Ref:
            inner = _find_all(elem, "ref")
            if len(inner) > 1:
                raise DecodeError(
                    "a reference may contain at most one nested reference",
                    line=inner[1].sourceline,
                )
            if inner:
                if depth >= MAX_REF_DEPTH:
                    raise DecodeError(
                        f"references nest at most {MAX_REF_DEPTH} levels deep",
                        line=inner[0].sourceline,
                    )
                fields["inner_ref"] = self._decode_span(inner[0], Ref, depth + 1)
        for child in _elements(elem):
            name = _local_name(child)
            if span_cls is not Ref or name != "ref":
                logger.debug(
                    f"Ignoring <{name}> inside <{_local_name(elem)}> at line {child.sourceline}"
                )
        return self._text_node(elem, span_cls, **fields)


_decoder = DocumentDecoder()


def decode_bill(data: bytes) -> Bill:
    return _decoder.decode(data, DocumentType.BILL)


def decode_resolution(data: bytes) -> Resolution:
    return _decoder.decode(data, DocumentType.RESOLUTION)


def decode_amendment(data: bytes) -> Amendment:
    return _decoder.decode(data, DocumentType.AMENDMENT)


def decode_engrossed_amendment(data: bytes) -> EngrossedAmendment:
    return _decoder.decode(data, DocumentType.ENGROSSED_AMENDMENT)


def decode_document(data: bytes) -> Document:
    """Detect the variant of ``data`` and decode it.

    Raises:
        UnknownDocumentType: If the root element is not a supported variant.
        DecodeError: If the document is malformed.
    """
    document_type = detect_document_type(data)
    if document_type is DocumentType.UNKNOWN:
        raise UnknownDocumentType(root_element_name(data))
    return _decoder.decode(data, document_type)


def read_document(source: str | Path | IO[bytes]) -> Document:
    """Read a whole document from a path or binary stream and decode it."""
    if isinstance(source, (str, Path)):
        data = Path(source).read_bytes()
    else:
        data = source.read()
    return decode_document(data)
