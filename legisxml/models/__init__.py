"""Immutable document tree."""

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
    Bill,
    Document,
    EngrossedAmendment,
    LegislativeDocument,
    Resolution,
)
from legisxml.models.hierarchy import (
    AmendmentContent,
    Chapeau,
    Clause,
    Content,
    Heading,
    Level,
    Num,
    Paragraph,
    QuotedContent,
    Section,
    Subclause,
    Subparagraph,
    Subsection,
    Title,
)
from legisxml.models.inline import (
    AmendingAction,
    Bold,
    Inline,
    Italic,
    MixedContent,
    P,
    QuotedText,
    Ref,
    ShortTitle,
    Span,
    Sub,
    Sup,
    Term,
)
from legisxml.models.metadata import AmendMeta, Meta, RelatedDocument
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

__all__ = [
    "DOCUMENT_TYPES",
    "Action",
    "ActionDate",
    "ActionDescription",
    "AmendMain",
    "AmendMeta",
    "AmendPreface",
    "AmendingAction",
    "Amendment",
    "AmendmentContent",
    "AmendmentInstruction",
    "Bill",
    "Bold",
    "Chapeau",
    "Clause",
    "Committee",
    "CongressElement",
    "Content",
    "Cosponsor",
    "CurrentChamber",
    "DistributionCode",
    "Document",
    "EnactingFormula",
    "Endorsement",
    "EngrossedAmendment",
    "Heading",
    "Inline",
    "Italic",
    "LegislativeDocument",
    "Level",
    "LongTitle",
    "Main",
    "Meta",
    "MixedContent",
    "Notation",
    "Num",
    "P",
    "Paragraph",
    "Preamble",
    "Preface",
    "QuotedContent",
    "QuotedText",
    "Recital",
    "Ref",
    "ReferenceItem",
    "RelatedDocument",
    "Resolution",
    "ResolvingClause",
    "Section",
    "SessionElement",
    "ShortTitle",
    "Signature",
    "Signatures",
    "Span",
    "Sponsor",
    "Sub",
    "Subclause",
    "Subparagraph",
    "Subsection",
    "Sup",
    "TableOfContents",
    "Term",
    "Title",
    "USLMModel",
]
