"""Section hierarchy: Title > Section > Subsection > ... > Subclause.

Every level carries the same identity attributes and optional num, heading,
chapeau and content blocks. The levels a node may contain directly are
declared in ``child_levels``; quoted and amendment content embed their own
level subtrees, which is the only structural recursion in the model.
"""

from typing import ClassVar

from pydantic import Field

from legisxml.models.base import USLMModel
from legisxml.models.inline import ALL_SPANS, INLINE_SPANS, MixedContent

CHAPEAU_SPANS = frozenset(
    {"inline", "i", "b", "term", "ref", "quotedText", "shortTitle", "amendingAction"}
)


class Num(USLMModel):
    """Enumerator of a level: ``value`` is the bare designation, ``text`` its display form."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("value",)

    value: str = ""
    text: str = ""


class Heading(MixedContent):
    xml_attributes: ClassVar[tuple[str, ...]] = ("class_",)
    span_tags: ClassVar[frozenset[str]] = INLINE_SPANS | {"i", "b"}

    class_: str = Field("", alias="class")


class Chapeau(MixedContent):
    """Lead-in text that precedes the child levels."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("class_",)
    span_tags: ClassVar[frozenset[str]] = CHAPEAU_SPANS

    class_: str = Field("", alias="class")


class Content(MixedContent):
    """Body text of a level, possibly embedding quoted or amendment content."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("class_",)
    span_tags: ClassVar[frozenset[str]] = ALL_SPANS

    class_: str = Field("", alias="class")
    quoted_content: tuple["QuotedContent", ...] = ()
    amendment_content: tuple["AmendmentContent", ...] = ()


class Level(USLMModel):
    """Common shape of every hierarchy level.

    ``tag`` is the XML element name of the level; ``child_levels`` pairs each
    child-level field with the element name it holds, in emission order.
    """

    tag: ClassVar[str] = ""
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = ()
    xml_attributes: ClassVar[tuple[str, ...]] = ("id", "identifier", "class_", "role")

    id: str = ""
    identifier: str = ""
    class_: str = Field("", alias="class")
    role: str = ""
    num: Num | None = None
    heading: Heading | None = None
    chapeau: Chapeau | None = None
    content: Content | None = None

    @property
    def num_text(self) -> str:
        return self.num.text if self.num is not None else ""

    @property
    def num_value(self) -> str:
        """Designation from the ``value`` attribute, independent of display text."""
        return self.num.value if self.num is not None else ""

    @property
    def heading_text(self) -> str:
        return self.heading.text if self.heading is not None else ""

    @property
    def chapeau_text(self) -> str:
        return self.chapeau.text if self.chapeau is not None else ""

    @property
    def content_text(self) -> str:
        return self.content.text if self.content is not None else ""

    def children(self) -> tuple["Level", ...]:
        """Return all direct child levels in emission order."""
        result: list[Level] = []
        for field_name, _ in self.child_levels:
            result.extend(getattr(self, field_name))
        return tuple(result)


class Subclause(Level):
    tag: ClassVar[str] = "subclause"


class Clause(Level):
    tag: ClassVar[str] = "clause"
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (("subclauses", "subclause"),)

    subclauses: tuple[Subclause, ...] = ()


class Subparagraph(Level):
    tag: ClassVar[str] = "subparagraph"
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (("clauses", "clause"),)

    clauses: tuple[Clause, ...] = ()


class Paragraph(Level):
    tag: ClassVar[str] = "paragraph"
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (
        ("subparagraphs", "subparagraph"),
    )

    subparagraphs: tuple[Subparagraph, ...] = ()


class Subsection(Level):
    tag: ClassVar[str] = "subsection"
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (("paragraphs", "paragraph"),)

    paragraphs: tuple[Paragraph, ...] = ()


class Section(Level):
    tag: ClassVar[str] = "section"
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (
        ("subsections", "subsection"),
        ("paragraphs", "paragraph"),
    )

    subsections: tuple[Subsection, ...] = ()
    paragraphs: tuple[Paragraph, ...] = ()


class Title(Level):
    tag: ClassVar[str] = "title"
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (("sections", "section"),)

    sections: tuple[Section, ...] = ()


class QuotedContent(USLMModel):
    """Text quoted for insertion by an amendment, with its own level subtree."""

    xml_attributes: ClassVar[tuple[str, ...]] = ("id", "style_type")
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (
        ("sections", "section"),
        ("subsections", "subsection"),
        ("paragraphs", "paragraph"),
        ("subparagraphs", "subparagraph"),
        ("clauses", "clause"),
        ("subclauses", "subclause"),
    )

    id: str = ""
    style_type: str = ""
    sections: tuple[Section, ...] = ()
    subsections: tuple[Subsection, ...] = ()
    paragraphs: tuple[Paragraph, ...] = ()
    subparagraphs: tuple[Subparagraph, ...] = ()
    clauses: tuple[Clause, ...] = ()
    subclauses: tuple[Subclause, ...] = ()


class AmendmentContent(USLMModel):
    xml_attributes: ClassVar[tuple[str, ...]] = ("class_", "changed", "style_type")
    child_levels: ClassVar[tuple[tuple[str, str], ...]] = (("sections", "section"),)

    class_: str = Field("", alias="class")
    changed: str = ""
    style_type: str = ""
    sections: tuple[Section, ...] = ()


for _model in (
    Content,
    Subclause,
    Clause,
    Subparagraph,
    Paragraph,
    Subsection,
    Section,
    Title,
    QuotedContent,
    AmendmentContent,
):
    _model.model_rebuild()

LEVEL_TYPES: dict[str, type[Level]] = {
    cls.tag: cls
    for cls in (Title, Section, Subsection, Paragraph, Subparagraph, Clause, Subclause)
}
HIERARCHY_TAGS = frozenset(LEVEL_TYPES)
