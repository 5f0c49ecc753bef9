"""Errors raised while decoding legislative documents."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import ValidationError

_JSON_POSITION = re.compile(r"line (\d+) column (\d+)")


class LegislativeDocumentError(Exception):
    """Base class for all errors raised by legisxml."""


class DecodeError(LegislativeDocumentError):
    """Malformed or structurally unexpected XML or JSON input.

    Decoding is all-or-nothing, so a DecodeError never comes with a partial
    tree. ``line`` and ``column`` locate the failure in the source text when
    known; ``path`` is the dotted location of the offending field for JSON
    input.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        path: str | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        location = []
        if self.line is not None:
            location.append(f"line {self.line}")
        if self.column is not None:
            location.append(f"column {self.column}")
        if self.path:
            location.append(f"at {self.path}")
        if not location:
            return self.message
        return f"{self.message} ({', '.join(location)})"

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, *, line: int | None = None
    ) -> DecodeError:
        """Build a DecodeError from the first error of a pydantic ValidationError."""
        errors = exc.errors()
        if not errors:
            return cls(str(exc), line=line)

        first = errors[0]
        path = ".".join(str(part) for part in first.get("loc", ())) or None
        message = first.get("msg", str(exc))
        column = None

        # json_invalid errors carry the position inside the message
        if first.get("type") == "json_invalid":
            match = _JSON_POSITION.search(message)
            if match:
                line, column = int(match.group(1)), int(match.group(2))

        return cls(message, line=line, column=column, path=path)


class UnknownDocumentType(LegislativeDocumentError):
    """The root element does not name a supported document variant."""

    def __init__(self, root_name: str | None = None) -> None:
        self.root_name = root_name
        if root_name:
            message = f"unknown document type: root element <{root_name}>"
        else:
            message = "unknown document type: no root element found"
        super().__init__(message)
