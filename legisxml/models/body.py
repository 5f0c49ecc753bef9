"""Main body blocks of bills and amendments, and the engrossment trailers."""

from typing import ClassVar

from pydantic import Field

from legisxml.models.base import USLMModel
from legisxml.models.hierarchy import Content, Num, Paragraph, Section, Title
from legisxml.models.inline import ITALIC_SPANS, PARAGRAPH_SPANS, MixedContent
from legisxml.models.preface import CongressElement, SessionElement


class LongTitle(USLMModel):
    doc_title: str = ""
    official_title: str = ""


class EnactingFormula(MixedContent):
    span_tags: ClassVar[frozenset[str]] = ITALIC_SPANS


class ReferenceItem(USLMModel):
    """Table-of-contents entry."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("role",)

    role: str = ""
    designator: str = ""
    label: str = ""


class TableOfContents(USLMModel):
    reference_items: tuple[ReferenceItem, ...] = ()


class Recital(MixedContent):
    """A "Whereas" clause of a resolution preamble."""

    span_tags: ClassVar[frozenset[str]] = PARAGRAPH_SPANS

    paragraphs: tuple[Paragraph, ...] = ()


class ResolvingClause(MixedContent):
    xml_attributes: ClassVar[tuple[str, ...]] = ("class_",)
    span_tags: ClassVar[frozenset[str]] = ITALIC_SPANS

    class_: str = Field("", alias="class")


class Preamble(USLMModel):
    recitals: tuple[Recital, ...] = ()
    resolving_clause: ResolvingClause | None = None


class Main(USLMModel):
    """Body of a bill or resolution."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("style_type",)

    style_type: str = ""
    long_title: LongTitle | None = None
    enacting_formula: EnactingFormula | None = None
    toc: TableOfContents | None = None
    preamble: Preamble | None = None
    sections: tuple[Section, ...] = ()
    titles: tuple[Title, ...] = ()
    end_marker: str = ""


class AmendmentInstruction(USLMModel):
    num: Num | None = None
    content: Content | None = None


class Notation(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("type",)

    type: str = ""
    text: str = ""


class Signature(USLMModel):
    """Attestation line; ``text`` is the signature's own character data."""

    text: str = ""
    notation: Notation | None = None
    role: str = ""


class Signatures(USLMModel):
    signatures: tuple[Signature, ...] = ()


class Endorsement(USLMModel):
    """Back-of-document endorsement of an engrossed measure."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("orientation",)

    orientation: str = ""
    congress: CongressElement | None = None
    session: SessionElement | None = None
    dc_type: str = ""
    doc_number: str = ""
    doc_title: str = ""


class AmendMain(USLMModel):
    """Body of an amendment."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("amendment_instruction_line_numbering",)

    amendment_instruction_line_numbering: str = ""
    resolving_clause: ResolvingClause | None = None
    sections: tuple[Section, ...] = ()
    doc_title: str = ""
    amendment_instructions: tuple[AmendmentInstruction, ...] = ()
    signatures: Signatures | None = None
    endorsement: Endorsement | None = None
