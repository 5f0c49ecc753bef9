"""Encode a document tree back to USLM XML.

Output order is canonical: blocks and fields are written in model
declaration order, whatever order the source document used. Empty fields are
left out, apart from the required ones (root ``xmlns``, ``docNumber`` and
``dc:type``).

Indentation is whitespace-only and goes between structural elements. The
interior of text-bearing elements is written verbatim, so decoding the
output yields a tree equal to the one encoded.
"""

from __future__ import annotations

import logging
from xml.sax.saxutils import quoteattr

from lxml import etree

from legisxml.models.base import USLMModel
from legisxml.models.body import (
    AmendMain,
    Endorsement,
    Main,
    Preamble,
    Signatures,
    TableOfContents,
)
from legisxml.models.documents import BillLike, Document, EngrossedAmendment
from legisxml.models.hierarchy import AmendmentContent, Content, Level, QuotedContent
from legisxml.models.inline import MixedContent, Ref, Span
from legisxml.models.metadata import AmendMeta, BaseMeta, Meta
from legisxml.models.preface import Action, ActionDescription, AmendPreface, Preface
from legisxml.namespaces import NAMESPACE_DC, NAMESPACE_XML, NAMESPACE_XSI, NAMESPACES

logger = logging.getLogger(__name__)

XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "  "

# Leaf element per meta field, in emission order. True marks Dublin Core.
_META_LEAVES = (
    ("dc_title", "title", True),
    ("dc_type", "type", True),
    ("dc_creator", "creator", True),
    ("dc_publisher", "publisher", True),
    ("dc_format", "format", True),
    ("dc_language", "language", True),
    ("dc_rights", "rights", True),
    ("doc_number", "docNumber", False),
    ("citable_as", "citableAs", False),
    ("doc_stage", "docStage", False),
    ("current_chamber", "currentChamber", False),
    ("amend_degree", "amendDegree", False),
    ("congress", "congress", False),
    ("session", "session", False),
    ("public_private", "publicPrivate", False),
    ("processed_by", "processedBy", False),
    ("processed_date", "processedDate", False),
    ("related_documents", "relatedDocument", False),
    ("popular_name", "popularName", False),
)


class DocumentEncoder:
    """Writes one document tree as an lxml element tree, then serializes it."""

    def __init__(self, document: Document) -> None:
        self.document = document
        self._namespace = document.xmlns
        self._dc_namespace = document.xmlns_dc or NAMESPACE_DC
        # Qualified tags of elements whose interior is written verbatim
        self._verbatim: set[str] = set()

    def encode(self) -> bytes:
        document = self.document
        nsmap, deferred = self._namespace_map()
        root = etree.Element(self._tag(document.document_type.value), nsmap=nsmap)

        if isinstance(document, EngrossedAmendment) and document.style_type:
            root.set("styleType", document.style_type)
        if document.xsi_schema_location:
            xsi = document.xmlns_xsi or NAMESPACE_XSI
            root.set(f"{{{xsi}}}schemaLocation", document.xsi_schema_location)
        if document.xml_lang:
            root.set(f"{{{NAMESPACE_XML}}}lang", document.xml_lang)

        if isinstance(document, BillLike):
            if document.meta is not None:
                self._meta(root, "meta", document.meta)
            if document.preface is not None:
                self._preface(root, document.preface)
            if document.main is not None:
                self._main(root, document.main)
            self._leaf(root, "endMarker", document.end_marker)
        else:
            if document.amend_meta is not None:
                self._meta(root, "amendMeta", document.amend_meta)
            if document.amend_preface is not None:
                self._amend_preface(root, document.amend_preface)
            if document.amend_main is not None:
                self._amend_main(root, document.amend_main)
            if isinstance(document, EngrossedAmendment):
                if document.signatures is not None:
                    self._signatures(root, document.signatures)
                if document.endorsement is not None:
                    self._endorsement(root, document.endorsement)

        self._indent(root)
        body = etree.tostring(root, encoding="UTF-8")
        body = self._declare(body, deferred)
        logger.debug(f"Encoded {document.document_type.value} ({len(body)} bytes)")
        return XML_DECLARATION + body + b"\n"

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def _namespace_map(self) -> tuple[dict[str | None, str], list[tuple[str, str]]]:
        """Split root declarations into an lxml nsmap and textual declarations.

        A prefix bound to the same URI as the default namespace cannot go
        through the nsmap: lxml would then qualify every element with that
        prefix. Such declarations, and an empty default namespace, are
        written into the start tag afterwards.
        """
        document = self.document
        nsmap: dict[str | None, str] = {}
        deferred = []
        if document.xmlns:
            nsmap[None] = document.xmlns
        else:
            deferred.append(("xmlns", ""))

        declared = {
            "dc": document.xmlns_dc,
            "html": document.xmlns_html,
            "uslm": document.xmlns_uslm,
            "xsi": document.xmlns_xsi,
        }
        for prefix in NAMESPACES:
            uri = declared[prefix]
            if not uri:
                continue
            if uri == document.xmlns:
                deferred.append((f"xmlns:{prefix}", uri))
            else:
                nsmap[prefix] = uri
        return nsmap, deferred

    def _declare(self, body: bytes, deferred: list[tuple[str, str]]) -> bytes:
        if not deferred:
            return body
        start = len(b"<" + self.document.document_type.value.encode("ascii"))
        declarations = "".join(
            f" {name}={quoteattr(uri)}" for name, uri in deferred
        ).encode("utf-8")
        return body[:start] + declarations + body[start:]

    def _tag(self, name: str) -> str:
        if self._namespace:
            return f"{{{self._namespace}}}{name}"
        return name

    # ------------------------------------------------------------------
    # Element helpers
    # ------------------------------------------------------------------

    def _element(
        self, parent: etree._Element, name: str, node: USLMModel | None = None, dc: bool = False
    ) -> etree._Element:
        tag = f"{{{self._dc_namespace}}}{name}" if dc else self._tag(name)
        elem = etree.SubElement(parent, tag)
        if node is not None:
            for key, value in node.xml_attribute_items():
                elem.set(key, value)
        return elem

    def _leaf(
        self,
        parent: etree._Element,
        name: str,
        value: str,
        required: bool = False,
        dc: bool = False,
    ) -> None:
        if value or required:
            elem = self._element(parent, name, dc=dc)
            elem.text = value or None
            self._verbatim.add(elem.tag)

    def _text_node(self, parent: etree._Element, name: str, node: USLMModel) -> etree._Element:
        elem = self._element(parent, name, node)
        elem.text = getattr(node, "text") or None
        self._verbatim.add(elem.tag)
        return elem

    def _mixed(self, parent: etree._Element, name: str, node: MixedContent) -> etree._Element:
        """Write own text first, then the spans in order."""
        elem = self._text_node(parent, name, node)
        for span in node.spans:
            self._span(elem, span)
        return elem

    def _span(self, parent: etree._Element, span: Span) -> None:
        elem = self._text_node(parent, span.tag, span)
        if isinstance(span, Ref) and span.inner_ref is not None:
            self._span(elem, span.inner_ref)

    # ------------------------------------------------------------------
    # Metadata and preface
    # ------------------------------------------------------------------

    def _meta(self, parent: etree._Element, name: str, meta: BaseMeta) -> None:
        elem = self._element(parent, name)
        for field_name, tag, dc in _META_LEAVES:
            if field_name == "amend_degree" and not isinstance(meta, AmendMeta):
                continue
            if field_name in ("related_documents", "popular_name") and not isinstance(
                meta, Meta
            ):
                continue

            value = getattr(meta, field_name)
            if field_name == "citable_as":
                for citation in value:
                    self._leaf(elem, tag, citation, required=True)
            elif field_name == "related_documents":
                for related in value:
                    self._text_node(elem, tag, related)
            else:
                required = field_name in meta.required_fields
                self._leaf(elem, tag, value, required=required, dc=dc)

    def _preface(self, parent: etree._Element, preface: Preface) -> None:
        elem = self._element(parent, "preface")
        self._leaf(elem, "slugLine", preface.slug_line)
        if preface.distribution_code is not None:
            self._text_node(elem, "distributionCode", preface.distribution_code)
        if preface.congress is not None:
            self._text_node(elem, "congress", preface.congress)
        if preface.session is not None:
            self._text_node(elem, "session", preface.session)
        self._leaf(elem, "type", preface.dc_type, dc=True)
        self._leaf(elem, "docNumber", preface.doc_number)
        self._leaf(elem, "title", preface.dc_title, dc=True)
        if preface.current_chamber is not None:
            self._text_node(elem, "currentChamber", preface.current_chamber)
        for action in preface.actions:
            self._action(elem, action)

    def _amend_preface(self, parent: etree._Element, preface: AmendPreface) -> None:
        elem = self._element(parent, "amendPreface")
        self._leaf(elem, "slugLine", preface.slug_line)
        if preface.current_chamber is not None:
            self._text_node(elem, "currentChamber", preface.current_chamber)
        for action in preface.actions:
            self._action(elem, action)

    def _action(self, parent: etree._Element, action: Action) -> None:
        elem = self._element(parent, "action", action)
        if action.date is not None:
            self._mixed(elem, "date", action.date)
        if action.action_description is not None:
            self._action_description(elem, action.action_description)
        self._leaf(elem, "actionInstruction", action.action_instruction)

    def _action_description(
        self, parent: etree._Element, description: ActionDescription
    ) -> None:
        elem = self._text_node(parent, "actionDescription", description)
        for sponsor in description.sponsors:
            self._mixed(elem, "sponsor", sponsor)
        for cosponsor in description.cosponsors:
            self._mixed(elem, "cosponsor", cosponsor)
        for committee in description.committees:
            self._text_node(elem, "committee", committee)
        for span in description.spans:
            self._span(elem, span)

    # ------------------------------------------------------------------
    # Main body
    # ------------------------------------------------------------------

    def _main(self, parent: etree._Element, main: Main) -> None:
        elem = self._element(parent, "main", main)
        if main.long_title is not None:
            long_title = self._element(elem, "longTitle")
            self._leaf(long_title, "docTitle", main.long_title.doc_title)
            self._leaf(long_title, "officialTitle", main.long_title.official_title)
        if main.enacting_formula is not None:
            self._mixed(elem, "enactingFormula", main.enacting_formula)
        if main.toc is not None:
            self._toc(elem, main.toc)
        if main.preamble is not None:
            self._preamble(elem, main.preamble)
        for section in main.sections:
            self._level(elem, section)
        for title in main.titles:
            self._level(elem, title)
        self._leaf(elem, "endMarker", main.end_marker)

    def _toc(self, parent: etree._Element, toc: TableOfContents) -> None:
        elem = self._element(parent, "toc")
        for item in toc.reference_items:
            item_elem = self._element(elem, "referenceItem", item)
            self._leaf(item_elem, "designator", item.designator)
            self._leaf(item_elem, "label", item.label)

    def _preamble(self, parent: etree._Element, preamble: Preamble) -> None:
        elem = self._element(parent, "preamble")
        for recital in preamble.recitals:
            recital_elem = self._mixed(elem, "recital", recital)
            for paragraph in recital.paragraphs:
                self._level(recital_elem, paragraph)
        if preamble.resolving_clause is not None:
            self._mixed(elem, "resolvingClause", preamble.resolving_clause)

    def _amend_main(self, parent: etree._Element, main: AmendMain) -> None:
        elem = self._element(parent, "amendMain", main)
        if main.resolving_clause is not None:
            self._mixed(elem, "resolvingClause", main.resolving_clause)
        for section in main.sections:
            self._level(elem, section)
        self._leaf(elem, "docTitle", main.doc_title)
        for instruction in main.amendment_instructions:
            instruction_elem = self._element(elem, "amendmentInstruction")
            if instruction.num is not None:
                self._text_node(instruction_elem, "num", instruction.num)
            if instruction.content is not None:
                self._content(instruction_elem, instruction.content)
        if main.signatures is not None:
            self._signatures(elem, main.signatures)
        if main.endorsement is not None:
            self._endorsement(elem, main.endorsement)

    def _signatures(self, parent: etree._Element, signatures: Signatures) -> None:
        elem = self._element(parent, "signatures")
        for signature in signatures.signatures:
            signature_elem = self._text_node(elem, "signature", signature)
            if signature.notation is not None:
                self._text_node(signature_elem, "notation", signature.notation)
            self._leaf(signature_elem, "role", signature.role)

    def _endorsement(self, parent: etree._Element, endorsement: Endorsement) -> None:
        elem = self._element(parent, "endorsement", endorsement)
        if endorsement.congress is not None:
            self._text_node(elem, "congress", endorsement.congress)
        if endorsement.session is not None:
            self._text_node(elem, "session", endorsement.session)
        self._leaf(elem, "type", endorsement.dc_type, dc=True)
        self._leaf(elem, "docNumber", endorsement.doc_number)
        self._leaf(elem, "docTitle", endorsement.doc_title)

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    def _level(self, parent: etree._Element, level: Level) -> None:
        elem = self._element(parent, level.tag, level)
        if level.num is not None:
            self._text_node(elem, "num", level.num)
        if level.heading is not None:
            self._mixed(elem, "heading", level.heading)
        if level.chapeau is not None:
            self._mixed(elem, "chapeau", level.chapeau)
        if level.content is not None:
            self._content(elem, level.content)
        for child in level.children():
            self._level(elem, child)

    def _content(self, parent: etree._Element, content: Content) -> None:
        elem = self._mixed(parent, "content", content)
        for quoted in content.quoted_content:
            self._nested_levels(elem, "quotedContent", quoted)
        for amendment in content.amendment_content:
            self._nested_levels(elem, "amendmentContent", amendment)

    def _nested_levels(
        self,
        parent: etree._Element,
        name: str,
        container: QuotedContent | AmendmentContent,
    ) -> None:
        elem = self._element(parent, name, container)
        for field_name, _ in container.child_levels:
            for level in getattr(container, field_name):
                self._level(elem, level)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _indent(self, elem: etree._Element, level: int = 0) -> None:
        """Indent structural elements in place.

        Text-bearing elements keep their interior untouched, but structural
        elements nested inside them (quoted content, recital paragraphs) are
        still laid out internally.
        """
        children = list(elem)
        if not children:
            return
        if elem.tag in self._verbatim:
            for child in children:
                self._indent(child, level + 1)
            return

        padding = "\n" + INDENT * (level + 1)
        elem.text = padding
        for child in children:
            self._indent(child, level + 1)
            child.tail = padding
        children[-1].tail = "\n" + INDENT * level


def encode_xml(document: Document) -> bytes:
    """Serialize a document tree to UTF-8 USLM XML."""
    return DocumentEncoder(document).encode()
