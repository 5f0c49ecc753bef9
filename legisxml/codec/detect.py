"""Identify the document variant from the root element name.

Detection scans only the document prolog and the root start tag's name, so
it never builds a tree and never looks at attributes: a namespace URI or
attribute value that happens to contain "amendment" cannot misclassify a
document.
"""

import logging
import re

from legisxml.enums import DocumentType

logger = logging.getLogger(__name__)

_PROLOG = re.compile(
    rb"""
    (?:
        \s+                                  # whitespace
      | <\?.*?\?>                            # XML declaration, processing instructions
      | <!--.*?-->                           # comments
      | <!DOCTYPE(?:[^\[>]|\[.*?\])*>        # DOCTYPE with optional internal subset
    )*
    """,
    re.VERBOSE | re.DOTALL,
)

_ROOT_NAME = re.compile(rb"<(?:[A-Za-z_][\w.\-]*:)?([A-Za-z_][\w.\-]*)")

_BOM = b"\xef\xbb\xbf"

# Checked in order; the engrossed variant comes before the plain amendment.
_ROOT_TYPES = (
    DocumentType.ENGROSSED_AMENDMENT,
    DocumentType.AMENDMENT,
    DocumentType.RESOLUTION,
    DocumentType.BILL,
)


def root_element_name(data: bytes) -> str | None:
    """Return the local name of the root element, or None if there is none."""
    if data.startswith(_BOM):
        data = data[len(_BOM) :]
    prolog = _PROLOG.match(data)
    position = prolog.end() if prolog else 0
    match = _ROOT_NAME.match(data, position)
    if not match:
        return None
    return match.group(1).decode("ascii", errors="replace")


def detect_document_type(data: bytes) -> DocumentType:
    """Classify a byte buffer by its root element.

    Returns DocumentType.UNKNOWN when the root element is missing or is not
    one of the supported variants; detection itself never raises.
    """
    name = root_element_name(data)
    if name is None:
        logger.debug("No root element found")
        return DocumentType.UNKNOWN

    for document_type in _ROOT_TYPES:
        if name == document_type.value:
            return document_type

    logger.debug(f"Unrecognized root element <{name}>")
    return DocumentType.UNKNOWN
