"""Tests for the command-line program."""

import logging
from pathlib import Path

import pytest

from legisxml.cli import main
from legisxml.codec.xml_decoder import decode_bill, read_document

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BILL_PATH = FIXTURES_DIR / "BILLS-114s32cds.xml"
ENGROSSED_PATH = FIXTURES_DIR / "BILLS-116hr1865eas.xml"


class TestDetect:
    def test_prints_type_per_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["detect", str(BILL_PATH), str(ENGROSSED_PATH)]) == 0

        out = capsys.readouterr().out
        assert f"{BILL_PATH}: bill" in out
        assert f"{ENGROSSED_PATH}: engrossedAmendment" in out

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["detect", str(tmp_path / "missing.xml")]) == 1


class TestSummary:
    def test_bill_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["summary", str(BILL_PATH)]) == 0

        out = capsys.readouterr().out
        assert "Number: 32" in out
        assert "Type: Senate Bill" in out
        assert "S221: Mrs. Feinstein" in out
        assert "Cosponsors: 5" in out
        assert "SSJU00: Committee on the Judiciary" in out
        assert "Sections (3):" in out
        assert "Amendment degree" not in out

    def test_engrossed_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["summary", str(ENGROSSED_PATH)]) == 0

        out = capsys.readouterr().out
        assert "Amendment degree: first" in out
        assert "Sponsors" not in out

    def test_unknown_document(self, tmp_path: Path) -> None:
        path = tmp_path / "usc17.xml"
        path.write_bytes(b'<usc xmlns="http://xml.house.gov/schemas/uslm/1.0"/>')

        assert main(["summary", str(path)]) == 1

    def test_malformed_document(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xml"
        path.write_bytes(b"<bill><meta></bill>")

        assert main(["summary", str(path)]) == 1


class TestConversion:
    def test_json_then_xml(self, tmp_path: Path) -> None:
        json_path = tmp_path / "bill.json"
        xml_path = tmp_path / "bill.xml"

        assert main(["to-json", str(BILL_PATH), "-o", str(json_path)]) == 0
        assert main(["to-xml", str(json_path), "--type", "bill", "-o", str(xml_path)]) == 0

        assert decode_bill(xml_path.read_bytes()) == read_document(BILL_PATH)

    def test_to_xml_wrong_type(self, tmp_path: Path) -> None:
        json_path = tmp_path / "bill.json"
        main(["to-json", str(BILL_PATH), "-o", str(json_path)])

        assert main(["to-xml", str(json_path), "--type", "engrossedAmendment"]) == 1

    def test_unwritable_output(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        output = tmp_path / "missing" / "bill.json"

        with caplog.at_level(logging.ERROR, logger="legisxml.cli"):
            assert main(["to-json", str(BILL_PATH), "-o", str(output)]) == 1

        assert f"Could not write {output}" in caplog.text
        assert "Could not read" not in caplog.text

    def test_roundtrip(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["roundtrip", str(ENGROSSED_PATH)]) == 0

        out = capsys.readouterr().out
        assert "JSON round trip ok" in out
        assert "XML round trip ok" in out

    def test_no_command(self) -> None:
        assert main([]) == 1
