"""The four document variants: Bill, Resolution, Amendment, EngrossedAmendment.

The variant set is closed. Each class names its XML root element through
``document_type`` and declares the capabilities it satisfies, so dispatch
never has to inspect content.
"""

from typing import ClassVar, Union

from pydantic import Field

from legisxml.enums import Capability, DocumentType
from legisxml.models.base import USLMModel
from legisxml.models.body import AmendMain, Endorsement, Main, Signatures
from legisxml.models.metadata import AmendMeta, Meta
from legisxml.models.preface import AmendPreface, Preface
from legisxml.namespaces import NAMESPACE_USLM

BILL_CAPABILITIES = frozenset(
    {
        Capability.IDENTITY,
        Capability.SPONSORSHIP,
        Capability.ACTIONS,
        Capability.COMMITTEES,
        Capability.HIERARCHY,
        Capability.DUBLIN_CORE,
    }
)
AMENDMENT_CAPABILITIES = frozenset(
    {
        Capability.IDENTITY,
        Capability.AMENDMENT,
        Capability.ACTIONS,
        Capability.DUBLIN_CORE,
    }
)


class LegislativeDocument(USLMModel):
    """Root of a document tree.

    The namespace fields hold the declarations found on the root element and
    are written back verbatim; ``xmlns`` is always emitted.
    """

    document_type: ClassVar[DocumentType] = DocumentType.UNKNOWN
    capabilities: ClassVar[frozenset[Capability]] = frozenset()
    required_fields: ClassVar[frozenset[str]] = frozenset({"xmlns"})

    xmlns: str = NAMESPACE_USLM
    xmlns_dc: str = Field("", alias="xmlnsDC")
    xmlns_html: str = Field("", alias="xmlnsHTML")
    xmlns_uslm: str = Field("", alias="xmlnsUSLM")
    xmlns_xsi: str = Field("", alias="xmlnsXSI")
    xsi_schema_location: str = ""
    xml_lang: str = ""


class BillLike(LegislativeDocument):
    capabilities: ClassVar[frozenset[Capability]] = BILL_CAPABILITIES

    meta: Meta | None = None
    preface: Preface | None = None
    main: Main | None = None
    end_marker: str = ""


class Bill(BillLike):
    document_type: ClassVar[DocumentType] = DocumentType.BILL


class Resolution(BillLike):
    document_type: ClassVar[DocumentType] = DocumentType.RESOLUTION


class AmendmentLike(LegislativeDocument):
    capabilities: ClassVar[frozenset[Capability]] = AMENDMENT_CAPABILITIES

    amend_meta: AmendMeta | None = None
    amend_preface: AmendPreface | None = None
    amend_main: AmendMain | None = None


class Amendment(AmendmentLike):
    document_type: ClassVar[DocumentType] = DocumentType.AMENDMENT


class EngrossedAmendment(AmendmentLike):
    """Amendment as passed by one chamber, with attestation and endorsement."""

    document_type: ClassVar[DocumentType] = DocumentType.ENGROSSED_AMENDMENT

    style_type: str = ""
    signatures: Signatures | None = None
    endorsement: Endorsement | None = None


Document = Union[Bill, Resolution, Amendment, EngrossedAmendment]

DOCUMENT_TYPES: dict[DocumentType, type[LegislativeDocument]] = {
    cls.document_type: cls for cls in (Bill, Resolution, Amendment, EngrossedAmendment)
}
