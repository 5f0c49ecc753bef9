"""Capability dispatch over the closed set of document variants.

Callers that only care about one aspect of a document (its identity, its
sponsors, its action history) ask for that capability instead of switching
on the concrete variant::

    view = as_capability(document, Capability.SPONSORSHIP)
    if view is not None:
        for sponsor in view.sponsors:
            ...

Views are thin wrappers over the same tree; nothing is copied or
re-parsed. The free functions below are the projections the views use, and
every one of them is pure: an absent block yields "" or ().
"""

from __future__ import annotations

from dataclasses import dataclass

from legisxml.enums import Capability
from legisxml.models.documents import AmendmentLike, BillLike, Document
from legisxml.models.hierarchy import Section
from legisxml.models.metadata import AmendMeta, BaseMeta
from legisxml.models.preface import Action, Committee, Cosponsor, Sponsor


def _meta(document: Document) -> BaseMeta | None:
    if isinstance(document, BillLike):
        return document.meta
    return document.amend_meta


def _meta_field(document: Document, name: str) -> str:
    meta = _meta(document)
    return getattr(meta, name) if meta is not None else ""


# -----------------------------------------------------------------------------
# Identity
# -----------------------------------------------------------------------------


def document_number(document: Document) -> str:
    return _meta_field(document, "doc_number")


def document_type(document: Document) -> str:
    """Human-readable type from ``dc:type``, e.g. "Senate Bill"."""
    return _meta_field(document, "dc_type")


def congress(document: Document) -> str:
    return _meta_field(document, "congress")


def session(document: Document) -> str:
    return _meta_field(document, "session")


def title(document: Document) -> str:
    return _meta_field(document, "dc_title")


def stage(document: Document) -> str:
    return _meta_field(document, "doc_stage")


def chamber(document: Document) -> str:
    return _meta_field(document, "current_chamber")


def is_public(document: Document) -> bool:
    meta = _meta(document)
    return meta.is_public if meta is not None else False


def citations(document: Document) -> tuple[str, ...]:
    meta = _meta(document)
    return meta.citable_as if meta is not None else ()


# -----------------------------------------------------------------------------
# Actions, sponsorship and committees
# -----------------------------------------------------------------------------


def actions(document: Document) -> tuple[Action, ...]:
    preface = document.preface if isinstance(document, BillLike) else document.amend_preface
    return preface.actions if preface is not None else ()


def sponsors(document: Document) -> tuple[Sponsor, ...]:
    """Sponsors named across all actions, in action order."""
    return tuple(
        sponsor
        for action in actions(document)
        if action.action_description is not None
        for sponsor in action.action_description.sponsors
    )


def cosponsors(document: Document) -> tuple[Cosponsor, ...]:
    return tuple(
        cosponsor
        for action in actions(document)
        if action.action_description is not None
        for cosponsor in action.action_description.cosponsors
    )


def committees(document: Document) -> tuple[Committee, ...]:
    return tuple(
        committee
        for action in actions(document)
        if action.action_description is not None
        for committee in action.action_description.committees
    )


# -----------------------------------------------------------------------------
# Hierarchy
# -----------------------------------------------------------------------------


def sections(document: Document) -> tuple[Section, ...]:
    """Top-level sections of the document body."""
    if isinstance(document, BillLike):
        return document.main.sections if document.main is not None else ()
    return document.amend_main.sections if document.amend_main is not None else ()


# -----------------------------------------------------------------------------
# Dublin Core and processing metadata
# -----------------------------------------------------------------------------


def creator(document: Document) -> str:
    return _meta_field(document, "dc_creator")


def publisher(document: Document) -> str:
    return _meta_field(document, "dc_publisher")


def language(document: Document) -> str:
    return _meta_field(document, "dc_language")


def rights(document: Document) -> str:
    return _meta_field(document, "dc_rights")


def processed_by(document: Document) -> str:
    return _meta_field(document, "processed_by")


def processed_date(document: Document) -> str:
    return _meta_field(document, "processed_date")


# -----------------------------------------------------------------------------
# Amendments
# -----------------------------------------------------------------------------


def amendment_degree(document: Document) -> str:
    """Degree of an amendment ("first", "second"); "" for bills and resolutions."""
    if not isinstance(document, AmendmentLike):
        return ""
    meta = document.amend_meta
    return meta.amend_degree if isinstance(meta, AmendMeta) else ""


# -----------------------------------------------------------------------------
# Views
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class IdentityView:
    document: Document

    @property
    def document_number(self) -> str:
        return document_number(self.document)

    @property
    def document_type(self) -> str:
        return document_type(self.document)

    @property
    def congress(self) -> str:
        return congress(self.document)

    @property
    def session(self) -> str:
        return session(self.document)

    @property
    def title(self) -> str:
        return title(self.document)

    @property
    def stage(self) -> str:
        return stage(self.document)

    @property
    def chamber(self) -> str:
        return chamber(self.document)

    @property
    def is_public(self) -> bool:
        return is_public(self.document)

    @property
    def citations(self) -> tuple[str, ...]:
        return citations(self.document)


@dataclass(frozen=True)
class AmendmentView(IdentityView):
    @property
    def amendment_degree(self) -> str:
        return amendment_degree(self.document)


@dataclass(frozen=True)
class SponsorshipView:
    document: Document

    @property
    def sponsors(self) -> tuple[Sponsor, ...]:
        return sponsors(self.document)

    @property
    def cosponsors(self) -> tuple[Cosponsor, ...]:
        return cosponsors(self.document)


@dataclass(frozen=True)
class ActionsView:
    document: Document

    @property
    def actions(self) -> tuple[Action, ...]:
        return actions(self.document)


@dataclass(frozen=True)
class CommitteesView:
    document: Document

    @property
    def committees(self) -> tuple[Committee, ...]:
        return committees(self.document)


@dataclass(frozen=True)
class HierarchyView:
    document: Document

    @property
    def sections(self) -> tuple[Section, ...]:
        return sections(self.document)


@dataclass(frozen=True)
class DublinCoreView:
    document: Document

    @property
    def creator(self) -> str:
        return creator(self.document)

    @property
    def publisher(self) -> str:
        return publisher(self.document)

    @property
    def language(self) -> str:
        return language(self.document)

    @property
    def rights(self) -> str:
        return rights(self.document)

    @property
    def processed_by(self) -> str:
        return processed_by(self.document)

    @property
    def processed_date(self) -> str:
        return processed_date(self.document)


CapabilityView = (
    IdentityView
    | SponsorshipView
    | ActionsView
    | CommitteesView
    | HierarchyView
    | DublinCoreView
)

_VIEWS: dict[Capability, type[CapabilityView]] = {
    Capability.IDENTITY: IdentityView,
    Capability.SPONSORSHIP: SponsorshipView,
    Capability.ACTIONS: ActionsView,
    Capability.COMMITTEES: CommitteesView,
    Capability.HIERARCHY: HierarchyView,
    Capability.DUBLIN_CORE: DublinCoreView,
    Capability.AMENDMENT: AmendmentView,
}


def supports(document: Document, capability: Capability) -> bool:
    """Return True if the document's variant declares the capability."""
    return capability in type(document).capabilities


def as_capability(document: Document, capability: Capability) -> CapabilityView | None:
    """Return a view of the document for one capability, or None if unsupported."""
    if not supports(document, capability):
        return None
    return _VIEWS[capability](document)
