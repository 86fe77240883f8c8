# ruff: noqa: T201

from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from circuitdiff.adapters.export import CsvComparisonExporter, ExcelComparisonExporter
from circuitdiff.adapters.feed import (
    ExplicitFileSnapshotFeed,
    JsonFileSnapshotFeed,
    load_circuit_set,
)
from circuitdiff.adapters.permissions import StaticPermissions
from circuitdiff.app import export_comparison, review_circuit_differences
from circuitdiff.config import (
    FeedConfig,
    configure_logging,
    get_export_config,
    get_feed_config,
    get_view_config,
)
from circuitdiff.domain.errors import InputUnavailableError
from circuitdiff.domain.filtering import ChangeFilter, CircuitFilter, CircuitSort
from circuitdiff.domain.model import Side, SnapshotScope
from circuitdiff.domain.reconciliation import match_by_id, match_by_revision
from circuitdiff.domain.view import ViewStatus
from circuitdiff.presentation import format_currency, format_difference, format_signed_currency

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from circuitdiff.domain.ports import CircuitSnapshotFeed, ComparisonExporter
    from circuitdiff.domain.view import ReconciliationView

log = logging.getLogger(__name__)

MATCH_STRATEGIES = {"id": match_by_id, "revision": match_by_revision}
EXPORTERS: dict[str, ComparisonExporter] = {
    "csv": CsvComparisonExporter(),
    "xlsx": ExcelComparisonExporter(),
}
STATUS_MESSAGES = {
    ViewStatus.LOADING: "Loading circuit data",
    ViewStatus.ERROR: "Error loading circuit data",
    ViewStatus.NO_CHANGES: "No changes to review",
    ViewStatus.PERMISSION_DENIED: "You don't have permission to modify circuits",
}


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--proposal",
        help="Proposal id of the comparison scope (read from --active when omitted)",
    )
    parser.add_argument(
        "--location",
        help="Location id of the comparison scope (read from --active when omitted)",
    )
    parser.add_argument("--active", type=Path, help="Active snapshot JSON file")
    parser.add_argument("--proposed", type=Path, help="Proposed snapshot JSON file")
    parser.add_argument(
        "--feed-dir",
        type=Path,
        help="Snapshot directory laid out as <proposal>/<location>/<side>.json "
        "(defaults to CIRCUITDIFF_FEED_DIR)",
    )
    parser.add_argument(
        "--match",
        choices=sorted(MATCH_STRATEGIES),
        default="id",
        help="Identity strategy pairing active and proposed circuits (default: %(default)s)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Review proposed circuit changes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    review = subparsers.add_parser("review", help="Show circuit differences and cost impact")
    _add_source_arguments(review)
    review.add_argument(
        "--type",
        choices=[choice.value for choice in ChangeFilter],
        default=ChangeFilter.ALL.value,
        help="Only show one kind of change (default: %(default)s)",
    )
    review.add_argument(
        "--search",
        default="",
        help="Case-insensitive search over carrier, type and bandwidth",
    )
    review.add_argument("--carrier", help="Exact carrier name to show")
    review.add_argument("--sort", help="Sort as <field>-<direction>, e.g. monthlycost-desc")
    review.add_argument(
        "--read-only",
        action="store_true",
        help="Review without the permission to modify circuits",
    )

    export = subparsers.add_parser("export", help="Export all circuit differences")
    _add_source_arguments(export)
    export.add_argument("--format", choices=sorted(EXPORTERS), default="csv")
    export.add_argument(
        "--output",
        type=Path,
        help="Output file (defaults to a file in CIRCUITDIFF_EXPORT_DIR)",
    )

    return parser.parse_args(list(argv))


def _build_feed(args: argparse.Namespace) -> CircuitSnapshotFeed:
    if args.active or args.proposed:
        if not (args.active and args.proposed):
            raise ValueError("--active and --proposed must be given together")
        return ExplicitFileSnapshotFeed(active_path=args.active, proposed_path=args.proposed)
    if args.feed_dir:
        return JsonFileSnapshotFeed(config=FeedConfig(feed_dir=args.feed_dir))
    return JsonFileSnapshotFeed(config=get_feed_config())


def _resolve_scope(args: argparse.Namespace) -> SnapshotScope:
    if args.proposal and args.location:
        return SnapshotScope(proposal_id=args.proposal, location_id=args.location)
    if args.proposal or args.location:
        raise ValueError("--proposal and --location must be given together")
    if not (args.active and args.proposed):
        raise ValueError("--proposal and --location are required without --active and --proposed")
    scope = load_circuit_set(args.active, side=Side.ACTIVE).scope
    log.debug("Comparison scope %s read from %s", scope, args.active)
    return scope


def _use_system_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        log.debug("System collation locale unavailable, using default ordering")


def _print_view(view: ReconciliationView) -> None:
    message = STATUS_MESSAGES.get(view.status)
    if view.status is ViewStatus.ERROR:
        print(f"{message}: {view.error}")
        return
    if view.status is ViewStatus.LOADING:
        print(message)
        return

    print(f"Monthly impact:  {format_signed_currency(view.impact.monthly_impact)}")
    print(f"One-time impact: {format_currency(view.impact.one_time_impact)}")
    if message is not None:
        print(message)
        return

    for row in view.rows:
        circuit = row.circuit
        print(
            f"[{row.bucket.value}] {circuit.carrier} - {circuit.type.value} "
            f"{circuit.bandwidth} - {format_currency(circuit.monthly_cost)}/mo"
        )
        for difference in row.differences:
            print(f"    {format_difference(difference)}")


def _run_review(args: argparse.Namespace, scope: SnapshotScope) -> ViewStatus:
    view_config = get_view_config()
    circuit_sort = CircuitSort.parse(args.sort) if args.sort else view_config.default_sort
    circuit_filter = CircuitFilter(
        type=ChangeFilter(args.type),
        search=args.search,
        carrier=args.carrier,
    )
    view = review_circuit_differences(
        scope,
        feed=_build_feed(args),
        permissions=StaticPermissions(allowed=not args.read_only),
        circuit_filter=circuit_filter,
        circuit_sort=circuit_sort,
        key=MATCH_STRATEGIES[args.match],
    )
    _print_view(view)
    return view.status


def _run_export(args: argparse.Namespace, scope: SnapshotScope) -> bool:
    view = review_circuit_differences(
        scope,
        feed=_build_feed(args),
        permissions=StaticPermissions(allowed=True),
        key=MATCH_STRATEGIES[args.match],
    )
    if view.status is ViewStatus.ERROR:
        print(f"{STATUS_MESSAGES[ViewStatus.ERROR]}: {view.error}")
        return False

    exporter = EXPORTERS[args.format]
    destination = args.output or (
        get_export_config().ensure_export_dir()
        / f"circuit-differences-{scope.proposal_id}-{scope.location_id}{exporter.file_suffix}"
    )
    notification = export_comparison(view.comparison, exporter=exporter, destination=destination)
    print(notification.message)
    return notification.path is not None


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    _use_system_collation()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        scope = _resolve_scope(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except InputUnavailableError as exc:
        print(f"{STATUS_MESSAGES[ViewStatus.ERROR]}: {exc}")
        sys.exit(1)

    try:
        if parsed_args.command == "review":
            status = _run_review(parsed_args, scope)
            if status is ViewStatus.ERROR:
                sys.exit(1)
        elif parsed_args.command == "export":
            if not _run_export(parsed_args, scope):
                sys.exit(1)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during circuit review")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
