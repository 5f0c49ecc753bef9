"""Base model shared by every node of the document tree."""

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel


def is_empty(value: Any) -> bool:
    """Return True for values both codecs leave out: None, "" and empty sequences."""
    if value is None:
        return True
    if isinstance(value, (str, tuple, list)):
        return len(value) == 0
    return False


class USLMModel(BaseModel):
    """Immutable USLM node with camelCase JSON keys and omit-if-empty output.

    Field names are snake_case in Python and lower camel case on the wire, so
    ``doc_number`` reads and writes as ``docNumber``. For fields listed in
    ``xml_attributes`` the same key is the XML attribute name.

    Empty values (None, "", empty tuples) are dropped from serialized output
    unless the field is listed in ``required_fields``; the XML encoder
    consults the same declaration.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    required_fields: ClassVar[frozenset[str]] = frozenset()
    xml_attributes: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def field_key(cls, name: str) -> str:
        """Return the wire key of a field (JSON key, XML attribute name)."""
        return cls.model_fields[name].alias or name

    def xml_attribute_items(self) -> list[tuple[str, str]]:
        """Return the non-empty XML attributes of this node as (name, value) pairs."""
        items = []
        for name in self.xml_attributes:
            value = getattr(self, name)
            if value:
                items.append((self.field_key(name), value))
        return items

    @model_serializer(mode="wrap")
    def _omit_empty(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        # Omission looks at field values, so a present but empty block such as
        # ``Content()`` still serializes as ``{}``.
        data = handler(self)
        for name in type(self).model_fields:
            if name in self.required_fields or not is_empty(getattr(self, name)):
                continue
            data.pop(self.field_key(name) if info.by_alias else name, None)
        return data
