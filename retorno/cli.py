"""Command-line summary and re-export of a re-contact roster."""
import argparse
import logging
from pathlib import Path

from retorno.core import config
from retorno.core.logging import configure_logging
from retorno.core.models import Status
from retorno.export.sinks import write_excel
from retorno.review.session import TriageSession

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    Status.UNTOUCHED: "Sin contactar",
    Status.PENDING: "Pendiente",
    Status.PURCHASED: "Compró",
    Status.NOT_PURCHASED: "No compró",
}


def build_parser() -> argparse.ArgumentParser:
    """Create a small argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Summarize and re-export a customer re-contact roster")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Roster workbook to load (defaults to RETORNO_INPUT_PATH)",
    )
    parser.add_argument(
        "--sheet",
        default=None,
        help="Sheet holding the roster (defaults to RETORNO_SHEET_NAME or 'retorno')",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the normalized roster to this workbook",
    )
    parser.add_argument(
        "--search",
        default=None,
        help="List pending customers whose name or code contains this text",
    )
    return parser


def main() -> None:
    """Entrypoint for inspecting a roster from the command line."""

    configure_logging()
    args = build_parser().parse_args()
    input_path = args.input or config.input_path()

    session = TriageSession(sheet_name=args.sheet or config.sheet_name())
    session.load_workbook(input_path)
    for alert in session.alerts:
        logger.warning("Alert: %s", alert)

    counts = session.counts()
    print(f"Roster: {len(session.store)} customers ({input_path})")
    for status, label in STATUS_LABELS.items():
        print(f"  {label}: {counts[status]}")

    if args.search is not None:
        matches = session.pending_list(args.search)
        print(f"Pending matching {args.search!r}: {len(matches)}")
        for record in matches:
            print(f"  [{record.code or '-'}] {record.display_name} {record.phone}".rstrip())

    if args.output:
        write_excel(session.store.all(), args.output, sheet_name=session.sheet_name)
        logger.info("Wrote roster workbook to %s", args.output)
        print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
