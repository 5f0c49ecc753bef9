"""Shared fixtures: sample USLM documents under tests/fixtures."""

from pathlib import Path

import pytest

from legisxml.codec.xml_decoder import (
    decode_amendment,
    decode_bill,
    decode_engrossed_amendment,
    decode_resolution,
)
from legisxml.models import Amendment, Bill, EngrossedAmendment, Resolution

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BILL_PATH = FIXTURES_DIR / "BILLS-114s32cds.xml"
RESOLUTION_PATH = FIXTURES_DIR / "BILLS-116sres100ats.xml"
ENGROSSED_PATH = FIXTURES_DIR / "BILLS-116hr1865eas.xml"
AMENDMENT_PATH = FIXTURES_DIR / "amendment.xml"


@pytest.fixture
def bill_xml() -> bytes:
    """Senate bill S. 32 (114th Congress), committee discharged."""
    return BILL_PATH.read_bytes()


@pytest.fixture
def resolution_xml() -> bytes:
    """Senate simple resolution S. Res. 100 (116th Congress)."""
    return RESOLUTION_PATH.read_bytes()


@pytest.fixture
def engrossed_xml() -> bytes:
    """Senate engrossed amendment to H.R. 1865 (116th Congress)."""
    return ENGROSSED_PATH.read_bytes()


@pytest.fixture
def amendment_xml() -> bytes:
    return AMENDMENT_PATH.read_bytes()


@pytest.fixture
def bill(bill_xml: bytes) -> Bill:
    return decode_bill(bill_xml)


@pytest.fixture
def resolution(resolution_xml: bytes) -> Resolution:
    return decode_resolution(resolution_xml)


@pytest.fixture
def engrossed(engrossed_xml: bytes) -> EngrossedAmendment:
    return decode_engrossed_amendment(engrossed_xml)


@pytest.fixture
def amendment(amendment_xml: bytes) -> Amendment:
    return decode_amendment(amendment_xml)
