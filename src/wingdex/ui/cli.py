# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from wingdex.adapters.snapshot import JsonSnapshotStore
from wingdex.app import (
    annotate_species,
    build_catalog,
    build_resolver,
    build_snapshot_store,
    confirm_outing,
    export_dex,
    export_outing,
    identify_candidates,
    import_checklist,
    merge_dex_export,
    rebuild_dex,
    resolve_species,
    search_species,
)
from wingdex.config import (
    ConfigurationError,
    configure_logging,
    get_storage_config,
    get_taxonomy_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bird life list and species taxonomy tools")
    parser.add_argument(
        "--snapshot",
        type=Path,
        help="Snapshot JSON file to operate on (defaults to the configured data directory)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search the species taxonomy")
    search.add_argument("query", type=str, help="Prefix or fragment of a common/scientific name")
    search.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results, clamped to 1-25 (defaults to config)",
    )

    resolve = subparsers.add_parser("resolve", help="Resolve a free-form species name")
    resolve.add_argument("name", type=str, help="Name as written by a person, model or import")

    identify = subparsers.add_parser(
        "identify",
        help="Canonicalize species candidates from a vision-model JSON response",
    )
    identify.add_argument("file", type=Path, help="JSON file with a 'candidates' array")

    subparsers.add_parser("rebuild", help="Recompute the Dex from outings and observations")

    confirm = subparsers.add_parser(
        "confirm",
        help="Confirm the pending observations of an outing and update the Dex",
    )
    confirm.add_argument("outing_id", type=str, help="Identifier of the outing to confirm")

    import_csv = subparsers.add_parser("import-csv", help="Import an eBird checklist CSV")
    import_csv.add_argument("file", type=Path, help="CSV export to import")
    import_csv.add_argument(
        "--user-id",
        type=str,
        help="User id to attach to imported outings (defaults to config)",
    )

    merge = subparsers.add_parser("merge", help="Merge an exported Dex JSON into the snapshot")
    merge.add_argument("file", type=Path, help="Exported Dex (JSON array or snapshot)")

    note = subparsers.add_parser("note", help="Set the notes of a Dex entry")
    note.add_argument("species", type=str, help="Species name exactly as stored in the Dex")
    note.add_argument("notes", type=str, help="New notes (empty string clears them)")

    export_outing_parser = subparsers.add_parser(
        "export-outing",
        help="Export the confirmed observations of an outing as eBird record CSV",
    )
    export_outing_parser.add_argument("outing_id", type=str, help="Identifier of the outing")
    export_outing_parser.add_argument(
        "--no-header",
        action="store_true",
        help="Omit the header row",
    )

    export = subparsers.add_parser("export-dex", help="Export the Dex as CSV")
    export.add_argument(
        "--output",
        type=Path,
        help="Write the CSV to this file instead of stdout",
    )

    return parser.parse_args(list(argv))


def _store(args: argparse.Namespace) -> JsonSnapshotStore:
    if args.snapshot is not None:
        return JsonSnapshotStore(args.snapshot)
    return build_snapshot_store()


def _run(args: argparse.Namespace) -> None:
    command: str = args.command
    if command == "search":
        catalog = build_catalog()
        for result in search_species(args.query, catalog=catalog, limit=args.limit):
            print(f"{result.common}\t{result.scientific}")
    elif command == "resolve":
        resolution = resolve_species(args.name, resolver=build_resolver())
        print(resolution.label)
        if resolution.reference_code:
            print(f"code: {resolution.reference_code}")
        if resolution.article_title:
            print(f"article: {resolution.article_title}")
        if not resolution.matched:
            log.warning("No taxonomy match for %r", args.name)
    elif command == "identify":
        text = args.file.read_text(encoding="utf-8")
        for candidate in identify_candidates(text, resolver=build_resolver()):
            print(f"{candidate.confidence:.2f}\t{candidate.species}")
    elif command == "rebuild":
        rebuild_dex(store=_store(args))
    elif command == "confirm":
        result = confirm_outing(args.outing_id, store=_store(args))
        print(f"new species: {result.new_species_count}")
    elif command == "import-csv":
        user_id = args.user_id or get_storage_config().user_id
        outcome = import_checklist(
            args.file.read_text(encoding="utf-8"),
            store=_store(args),
            resolver=build_resolver(get_taxonomy_config()),
            user_id=user_id,
        )
        counts = outcome.conflict_counts
        print(
            f"rows: {len(outcome.previews)}, outings: {len(outcome.batch.outings)}, "
            f"new species: {outcome.new_species_count}"
        )
        for conflict, count in sorted(counts.items()):
            print(f"{conflict}: {count}")
    elif command == "merge":
        result = merge_dex_export(args.file, store=_store(args))
        print(f"species: {len(result.entries)}, new species: {result.new_species_count}")
    elif command == "note":
        if not annotate_species(args.species, args.notes, store=_store(args)):
            raise ValueError(f"No Dex entry for species: {args.species}")
    elif command == "export-outing":
        print(
            export_outing(
                args.outing_id,
                store=_store(args),
                resolver=build_resolver(),
                include_header=not args.no_header,
            )
        )
    elif command == "export-dex":
        csv_text = export_dex(store=_store(args))
        if args.output is not None:
            args.output.write_text(csv_text + "\n", encoding="utf-8")
        else:
            print(csv_text)
    else:
        raise ValueError(f"Unsupported command: {command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        _run(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
