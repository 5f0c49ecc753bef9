"""CLI for inspecting and converting USLM legislative documents."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from legisxml import capabilities
from legisxml.capabilities import AmendmentView, as_capability
from legisxml.codec.detect import detect_document_type
from legisxml.codec.json_codec import decode_json, encode_json
from legisxml.codec.xml_decoder import decode_document, read_document
from legisxml.codec.xml_encoder import encode_xml
from legisxml.config import settings
from legisxml.enums import Capability, DocumentType
from legisxml.errors import LegislativeDocumentError
from legisxml.models.documents import Document

logger = logging.getLogger(__name__)

_CONVERTIBLE_TYPES = [t.value for t in DocumentType if t is not DocumentType.UNKNOWN]


def _write_output(data: bytes, output: Path | None) -> int:
    if output is None:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return 0
    try:
        output.write_bytes(data)
    except OSError as e:
        logger.error(f"Could not write {output}: {e}")
        return 1
    logger.info(f"Wrote {len(data)} bytes to {output}")
    return 0


def detect_files(paths: list[Path]) -> int:
    """Print the detected document type of each file."""
    failed = 0
    for path in paths:
        try:
            document_type = detect_document_type(path.read_bytes())
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            failed += 1
            continue
        print(f"{path}: {document_type.value}")
    return 1 if failed else 0


def print_summary(document: Document) -> None:
    """Print identity, sponsorship, actions and structure of a document."""
    identity = as_capability(document, Capability.IDENTITY)
    print(f"\n{document.document_type.value}: {identity.title or '(untitled)'}")
    print(f"  Number: {identity.document_number}")
    print(f"  Type: {identity.document_type}")
    print(f"  Congress: {identity.congress}, session {identity.session}")
    print(f"  Stage: {identity.stage}")
    print(f"  Chamber: {identity.chamber}")
    print(f"  Public: {identity.is_public}")
    if identity.citations:
        print(f"  Citable as: {', '.join(identity.citations)}")

    amendment = as_capability(document, Capability.AMENDMENT)
    if isinstance(amendment, AmendmentView):
        print(f"  Amendment degree: {amendment.amendment_degree}")

    sponsorship = as_capability(document, Capability.SPONSORSHIP)
    if sponsorship is not None:
        print(f"\n  Sponsors ({len(sponsorship.sponsors)}):")
        for sponsor in sponsorship.sponsors:
            print(f"    {sponsor.identifier}: {sponsor.name}")
        print(f"  Cosponsors: {len(sponsorship.cosponsors)}")

    committees = as_capability(document, Capability.COMMITTEES)
    if committees is not None and committees.committees:
        print("\n  Committees:")
        for committee in committees.committees:
            print(f"    {committee.identifier}: {committee.name}")

    actions = capabilities.actions(document)
    if actions:
        print(f"\n  Actions ({len(actions)}):")
        for action in actions:
            date = action.date.date if action.date is not None else "?"
            stage = f" [{action.action_stage}]" if action.action_stage else ""
            print(f"    {date}{stage}")

    hierarchy = as_capability(document, Capability.HIERARCHY)
    if hierarchy is not None and hierarchy.sections:
        print(f"\n  Sections ({len(hierarchy.sections)}):")
        for section in hierarchy.sections[:10]:
            print(f"    {section.num_text.strip()} {section.heading_text}")
        if len(hierarchy.sections) > 10:
            print(f"    ... and {len(hierarchy.sections) - 10} more")

    dublin_core = as_capability(document, Capability.DUBLIN_CORE)
    if dublin_core is not None:
        print("\n  Dublin Core:")
        print(f"    Creator: {dublin_core.creator}")
        print(f"    Publisher: {dublin_core.publisher}")
        print(f"    Language: {dublin_core.language}")
        print(f"    Processed: {dublin_core.processed_date} by {dublin_core.processed_by}")
    print()


def roundtrip(path: Path) -> int:
    """Decode a file, pass it through JSON and XML, and compare the trees."""
    document = read_document(path)
    from_json = decode_json(encode_json(document), document.document_type)
    from_xml = decode_document(encode_xml(document))

    json_ok = from_json == document
    xml_ok = from_xml == document
    print(f"{path}: JSON round trip {'ok' if json_ok else 'MISMATCH'}")
    print(f"{path}: XML round trip {'ok' if xml_ok else 'MISMATCH'}")
    return 0 if json_ok and xml_ok else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="USLM legislative document toolkit")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Detect command
    detect_parser = subparsers.add_parser("detect", help="Detect document types")
    detect_parser.add_argument("files", type=Path, nargs="+", help="XML files to inspect")

    # Summary command
    summary_parser = subparsers.add_parser("summary", help="Summarize a document")
    summary_parser.add_argument("file", type=Path, help="XML file to summarize")

    # To-json command
    to_json_parser = subparsers.add_parser("to-json", help="Convert XML to JSON")
    to_json_parser.add_argument("file", type=Path, help="XML file to convert")
    to_json_parser.add_argument(
        "-o", "--output", type=Path, help="Output file (default: stdout)"
    )

    # To-xml command
    to_xml_parser = subparsers.add_parser("to-xml", help="Convert JSON back to XML")
    to_xml_parser.add_argument("file", type=Path, help="JSON file to convert")
    to_xml_parser.add_argument(
        "--type",
        required=True,
        choices=_CONVERTIBLE_TYPES,
        help="Document type of the JSON input",
    )
    to_xml_parser.add_argument(
        "-o", "--output", type=Path, help="Output file (default: stdout)"
    )

    # Roundtrip command
    roundtrip_parser = subparsers.add_parser(
        "roundtrip", help="Check that a document survives JSON and XML round trips"
    )
    roundtrip_parser.add_argument("file", type=Path, help="XML file to check")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)-5.5s [%(name)s] %(message)s",
    )

    try:
        if args.command == "detect":
            return detect_files(args.files)

        elif args.command == "summary":
            print_summary(read_document(args.file))
            return 0

        elif args.command == "to-json":
            return _write_output(encode_json(read_document(args.file)), args.output)

        elif args.command == "to-xml":
            document = decode_json(args.file.read_bytes(), DocumentType(args.type))
            return _write_output(encode_xml(document), args.output)

        elif args.command == "roundtrip":
            return roundtrip(args.file)

        else:
            parser.print_help()
            return 1

    except LegislativeDocumentError as e:
        logger.error(f"{args.file}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
