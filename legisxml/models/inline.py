"""Mixed content: character data interleaved with inline markup spans.

A text-bearing node keeps two things apart:

- ``text``: the element's own character data, meaning its leading text plus
  the tail text after each child element, concatenated in document order.
  Text inside child elements is never folded in.
- ``spans``: the ordered immediate child markup spans, each carrying its own
  text.

In JSON the spans are an ordered array of single-key objects whose key is
the span kind::

    "spans": [{"ref": {"text": "21 U.S.C. 959", "href": "/us/usc/t21/s959"}},
              {"i": {"text": "Provided"}}]
"""

from typing import Any, ClassVar

from pydantic import (
    Field,
    FieldSerializationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from legisxml.models.base import USLMModel

# A reference may wrap one further reference, which may not wrap another.
MAX_REF_DEPTH = 2


class Span(USLMModel):
    """Base class for inline markup spans."""

    tag: ClassVar[str] = ""

    text: str = ""


class Italic(Span):
    tag: ClassVar[str] = "i"


class Bold(Span):
    tag: ClassVar[str] = "b"


class Sup(Span):
    tag: ClassVar[str] = "sup"


class Sub(Span):
    tag: ClassVar[str] = "sub"


class Term(Span):
    tag: ClassVar[str] = "term"


class QuotedText(Span):
    tag: ClassVar[str] = "quotedText"


class Inline(Span):
    """Generic ``<inline>`` span, typically a small-caps or emphasis run."""

    tag: ClassVar[str] = "inline"
    xml_attributes: ClassVar[tuple[str, ...]] = ("class_", "role")

    class_: str = Field("", alias="class")
    role: str = ""


class P(Span):
    """Paragraph run inside a recital."""

    tag: ClassVar[str] = "p"
    xml_attributes: ClassVar[tuple[str, ...]] = ("class_",)

    class_: str = Field("", alias="class")


class ShortTitle(Span):
    tag: ClassVar[str] = "shortTitle"
    xml_attributes: ClassVar[tuple[str, ...]] = ("role",)

    role: str = ""


class AmendingAction(Span):
    """Verb of an amendment instruction ("striking", "inserting")."""

    tag: ClassVar[str] = "amendingAction"
    xml_attributes: ClassVar[tuple[str, ...]] = ("type",)

    type: str = ""


class Ref(Span):
    """Cross-reference with an optional nested reference.

    Nesting is bounded: ``inner_ref`` may be set, but the inner reference
    must not carry an ``inner_ref`` of its own.
    """

    tag: ClassVar[str] = "ref"
    xml_attributes: ClassVar[tuple[str, ...]] = ("href",)

    href: str = ""
    inner_ref: "Ref | None" = None

    @model_validator(mode="after")
    def _check_nesting(self) -> "Ref":
        if self.inner_ref is not None and self.inner_ref.inner_ref is not None:
            raise ValueError(
                f"references nest at most {MAX_REF_DEPTH} levels deep"
            )
        return self


Ref.model_rebuild()

SPAN_TYPES: dict[str, type[Span]] = {
    cls.tag: cls
    for cls in (
        Italic,
        Bold,
        Sup,
        Sub,
        Term,
        Ref,
        Inline,
        P,
        ShortTitle,
        QuotedText,
        AmendingAction,
    )
}

ALL_SPANS = frozenset(SPAN_TYPES)
INLINE_SPANS = frozenset({"inline"})
ITALIC_SPANS = frozenset({"i"})
PARAGRAPH_SPANS = frozenset({"p"})


class MixedContent(USLMModel):
    """Text-bearing node holding own character data plus inline spans.

    Subclasses declare the span kinds they accept in ``span_tags``.
    """

    span_tags: ClassVar[frozenset[str]] = frozenset()

    text: str = ""
    spans: tuple[Span, ...] = ()

    @field_validator("spans", mode="before")
    @classmethod
    def _load_spans(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return value

        spans = []
        for entry in value:
            if isinstance(entry, Span):
                span = entry
            elif isinstance(entry, dict) and len(entry) == 1:
                kind, body = next(iter(entry.items()))
                span_cls = SPAN_TYPES.get(kind)
                if span_cls is None:
                    raise ValueError(f"unknown span kind {kind!r}")
                span = span_cls.model_validate(body)
            else:
                raise ValueError("each span must be an object with exactly one key")

            if span.tag not in cls.span_tags:
                raise ValueError(f"<{span.tag}> spans are not allowed here")
            spans.append(span)
        return tuple(spans)

    @field_serializer("spans")
    def _dump_spans(
        self, spans: tuple[Span, ...], info: FieldSerializationInfo
    ) -> list[dict[str, Any]]:
        return [
            {span.tag: span.model_dump(mode=info.mode, by_alias=info.by_alias)}
            for span in spans
        ]

    def spans_of(self, span_cls: type[Span]) -> tuple[Span, ...]:
        """Return the spans of one kind, in document order."""
        return tuple(span for span in self.spans if isinstance(span, span_cls))
