"""Document metadata blocks (``<meta>`` and ``<amendMeta>``)."""

from typing import ClassVar

from legisxml.models.base import USLMModel


class RelatedDocument(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("role", "href")

    role: str = ""
    href: str = ""
    text: str = ""


class BaseMeta(USLMModel):
    """Identity and Dublin Core fields shared by bills and amendments.

    ``doc_number`` and ``dc_type`` are always written by both codecs, even
    when empty.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset({"doc_number", "dc_type"})

    dc_title: str = ""
    dc_type: str = ""
    dc_creator: str = ""
    dc_publisher: str = ""
    dc_format: str = ""
    dc_language: str = ""
    dc_rights: str = ""
    doc_number: str = ""
    citable_as: tuple[str, ...] = ()
    doc_stage: str = ""
    current_chamber: str = ""
    congress: str = ""
    session: str = ""
    public_private: str = ""
    processed_by: str = ""
    processed_date: str = ""

    @property
    def is_public(self) -> bool:
        return self.public_private == "public"


class Meta(BaseMeta):
    """Metadata of a bill or resolution."""

    related_documents: tuple[RelatedDocument, ...] = ()
    popular_name: str = ""


class AmendMeta(BaseMeta):
    """Metadata of an amendment; ``amend_degree`` is "first" or "second"."""

    amend_degree: str = ""
