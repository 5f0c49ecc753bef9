"""Preface blocks: congress and session, chamber, and the action history."""

from typing import ClassVar

from legisxml.models.base import USLMModel
from legisxml.models.inline import INLINE_SPANS, MixedContent


class DistributionCode(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("display",)

    display: str = ""
    text: str = ""


class CongressElement(USLMModel):
    """``<congress value="114">114th CONGRESS</congress>``"""

    xml_attributes: ClassVar[tuple[str, ...]] = ("value",)

    value: str = ""
    text: str = ""


class SessionElement(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("value",)

    value: str = ""
    text: str = ""


class CurrentChamber(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("value",)

    value: str = ""
    text: str = ""


class ActionDate(MixedContent):
    """Date of an action: ISO ``date`` attribute plus display text."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("date",)
    span_tags: ClassVar[frozenset[str]] = INLINE_SPANS

    date: str = ""


class Legislator(MixedContent):
    """Member of Congress named in an action description."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("senate_id", "house_id")
    span_tags: ClassVar[frozenset[str]] = INLINE_SPANS

    senate_id: str = ""
    house_id: str = ""

    @property
    def identifier(self) -> str:
        """Senate ID when present, otherwise House ID, otherwise ""."""
        return self.senate_id or self.house_id

    @property
    def name(self) -> str:
        return self.text


class Sponsor(Legislator):
    pass


class Cosponsor(Legislator):
    pass


class Committee(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("committee_id",)

    committee_id: str = ""
    text: str = ""

    @property
    def identifier(self) -> str:
        return self.committee_id

    @property
    def name(self) -> str:
        return self.text


class ActionDescription(MixedContent):
    """Narrative of an action with the members and committees it names.

    The sponsor, cosponsor and committee elements are interleaved with the
    narrative text in XML; their tails belong to ``text``.
    """

    span_tags: ClassVar[frozenset[str]] = INLINE_SPANS

    sponsors: tuple[Sponsor, ...] = ()
    cosponsors: tuple[Cosponsor, ...] = ()
    committees: tuple[Committee, ...] = ()


class Action(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("action_stage",)

    action_stage: str = ""
    date: ActionDate | None = None
    action_description: ActionDescription | None = None
    action_instruction: str = ""


class Preface(USLMModel):
    """Preface of a bill or resolution."""

    slug_line: str = ""
    distribution_code: DistributionCode | None = None
    congress: CongressElement | None = None
    session: SessionElement | None = None
    dc_type: str = ""
    doc_number: str = ""
    dc_title: str = ""
    current_chamber: CurrentChamber | None = None
    actions: tuple[Action, ...] = ()


class AmendPreface(USLMModel):
    slug_line: str = ""
    current_chamber: CurrentChamber | None = None
    actions: tuple[Action, ...] = ()
