"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from circuitdiff.config import get_view_config
from circuitdiff.domain.errors import ExportError, InputUnavailableError
from circuitdiff.domain.reconciliation import ComparisonEngine, aggregate_cost_impact, match_by_id
from circuitdiff.domain.session import ReconciliationSession
from circuitdiff.domain.view import build_reconciliation_view
from circuitdiff.presentation import format_currency, format_signed_currency

if TYPE_CHECKING:
    from pathlib import Path

    from circuitdiff.domain.filtering import CircuitFilter, CircuitSort
    from circuitdiff.domain.model import SnapshotScope
    from circuitdiff.domain.ports import (
        CircuitSnapshotFeed,
        CircuitSnapshots,
        ComparisonExporter,
        PermissionProvider,
    )
    from circuitdiff.domain.reconciliation import ComparisonResult, MatchKey
    from circuitdiff.domain.session import Clock
    from circuitdiff.domain.view import ReconciliationView


log = getLogger(__name__)


def review_snapshots(
    snapshots: CircuitSnapshots | None,
    *,
    circuit_filter: CircuitFilter | None = None,
    circuit_sort: CircuitSort | None = None,
    can_modify: bool = True,
    error: InputUnavailableError | None = None,
    key: MatchKey = match_by_id,
) -> ReconciliationView:
    """Build the reconciliation view for already materialized snapshots."""

    view = build_reconciliation_view(
        snapshots.active if snapshots else None,
        snapshots.proposed if snapshots else None,
        circuit_filter=circuit_filter,
        circuit_sort=circuit_sort,
        can_modify=can_modify,
        error=error,
        engine=ComparisonEngine(key=key),
    )
    if view.has_result:
        log.info(
            "Circuit review %s: added=%s, removed=%s, modified=%s, visible=%s, "
            "monthly=%s, one_time=%s",
            view.status,
            len(view.comparison.added),
            len(view.comparison.removed),
            len(view.comparison.modified),
            len(view.rows),
            format_signed_currency(view.impact.monthly_impact),
            format_currency(view.impact.one_time_impact),
        )
    return view


def open_review_session(
    scope: SnapshotScope,
    *,
    key: MatchKey = match_by_id,
    clock: Clock | None = None,
) -> ReconciliationSession:
    """Start an interactive session using the configured sort and search quiet period."""

    config = get_view_config()
    search = config.search_debouncer(clock) if clock is not None else config.search_debouncer()
    return ReconciliationSession(
        scope=scope,
        engine=ComparisonEngine(key=key),
        circuit_sort=config.default_sort,
        search=search,
    )


def review_circuit_differences(
    scope: SnapshotScope,
    *,
    feed: CircuitSnapshotFeed,
    permissions: PermissionProvider,
    circuit_filter: CircuitFilter | None = None,
    circuit_sort: CircuitSort | None = None,
    key: MatchKey = match_by_id,
) -> ReconciliationView:
    """Fetch both snapshots for ``scope`` and build the reconciliation view.

    Feed failures surface as an ``ERROR`` view instead of an empty comparison.
    """

    try:
        snapshots = feed(scope)
    except InputUnavailableError as exc:
        log.warning("Circuit snapshots unavailable for %s: %s", scope, exc)
        return review_snapshots(None, error=exc)

    return review_snapshots(
        snapshots,
        circuit_filter=circuit_filter,
        circuit_sort=circuit_sort,
        can_modify=permissions.can_modify_circuits(),
        key=key,
    )


class NotificationLevel(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ExportNotification:
    """Transient user-facing outcome of an export attempt."""

    level: NotificationLevel
    message: str
    path: Path | None = None
    retryable: bool = False


def export_comparison(
    comparison: ComparisonResult,
    *,
    exporter: ComparisonExporter,
    destination: Path,
) -> ExportNotification:
    """Export the full, unfiltered comparison and report the outcome.

    Exporter failures are reported as a retryable notification; the comparison
    itself is never touched.
    """

    impact = aggregate_cost_impact(comparison)
    try:
        written = exporter(comparison, impact=impact, destination=destination)
    except (ExportError, OSError):
        log.exception("Failed to export circuit differences to %s", destination)
        return ExportNotification(
            level=NotificationLevel.ERROR,
            message="Failed to export circuit differences",
            retryable=True,
        )

    log.info("Exported %s circuit differences to %s", comparison.total, written)
    return ExportNotification(
        level=NotificationLevel.SUCCESS,
        message=f"Circuit differences exported to {written.name}",
        path=written,
    )


__all__ = [
    "ExportNotification",
    "NotificationLevel",
    "export_comparison",
    "review_circuit_differences",
    "review_snapshots",
]
