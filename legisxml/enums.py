"""Enumerations shared across the package."""

import enum


class DocumentType(str, enum.Enum):
    """Concrete document variant, named after its XML root element."""

    BILL = "bill"
    RESOLUTION = "resolution"
    AMENDMENT = "amendment"
    ENGROSSED_AMENDMENT = "engrossedAmendment"
    UNKNOWN = "unknown"


class Capability(str, enum.Enum):
    """Narrow read-only views a document variant may satisfy."""

    IDENTITY = "identity"  # number, type, congress, stage, citations
    SPONSORSHIP = "sponsorship"  # sponsors and cosponsors
    ACTIONS = "actions"  # legislative action history
    COMMITTEES = "committees"  # committees referenced by actions
    HIERARCHY = "hierarchy"  # top-level sections
    DUBLIN_CORE = "dublin_core"  # creator, publisher, language, processing
    AMENDMENT = "amendment"  # amendment degree
