"""Reconciliation view composed for an external windowed renderer.

The view is a full, deterministic re-derivation from the current inputs every
time it is built: match, diff, aggregate, filter, sort, flatten. Nothing is
patched incrementally, so two builds from equal inputs are equal.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, overload

from .filtering import CircuitFilter, CircuitSort, apply_filter_and_sort
from .model import ChangeKind
from .reconciliation import ComparisonEngine, ComparisonResult, CostImpact, aggregate_cost_impact

if TYPE_CHECKING:
    from .errors import InputUnavailableError
    from .model import Circuit, CircuitSet
    from .reconciliation import FieldDifference


class ViewStatus(StrEnum):
    """Mutually exclusive states a renderer branches on."""

    LOADING = "loading"
    ERROR = "error"
    NO_CHANGES = "no_changes"
    PERMISSION_DENIED = "permission_denied"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class ViewRow:
    """One renderable item, tagged with the bucket it came from."""

    bucket: ChangeKind
    circuit: Circuit
    differences: tuple[FieldDifference, ...] = ()


class FlattenedView(Sequence[ViewRow]):
    """Index-addressable concatenation of added, removed and modified rows.

    Renderers only need ``length()`` and ``item_at(index)``; the standard
    sequence protocol is provided on top of those.
    """

    __slots__ = ("_added", "_modified", "_removed")

    def __init__(self, result: ComparisonResult | None = None) -> None:
        result = result or ComparisonResult()
        self._added = result.added
        self._removed = result.removed
        self._modified = result.modified

    def length(self) -> int:
        return len(self._added) + len(self._removed) + len(self._modified)

    def item_at(self, index: int) -> ViewRow:
        if index < 0 or index >= self.length():
            raise IndexError(f"Row index out of range: {index}")
        if index < len(self._added):
            return ViewRow(bucket=ChangeKind.ADDED, circuit=self._added[index])
        index -= len(self._added)
        if index < len(self._removed):
            return ViewRow(bucket=ChangeKind.REMOVED, circuit=self._removed[index])
        index -= len(self._removed)
        entry = self._modified[index]
        return ViewRow(
            bucket=ChangeKind.MODIFIED,
            circuit=entry.circuit,
            differences=entry.differences,
        )

    def __len__(self) -> int:
        return self.length()

    @overload
    def __getitem__(self, index: int) -> ViewRow: ...

    @overload
    def __getitem__(self, index: slice) -> list[ViewRow]: ...

    def __getitem__(self, index: int | slice) -> ViewRow | list[ViewRow]:
        if isinstance(index, slice):
            return [self.item_at(position) for position in range(*index.indices(self.length()))]
        return self.item_at(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlattenedView):
            return NotImplemented
        return self._buckets() == other._buckets()

    def __hash__(self) -> int:
        return hash(self._buckets())

    def _buckets(self) -> tuple[tuple[object, ...], ...]:
        return (self._added, self._removed, self._modified)

    def __repr__(self) -> str:
        return (
            f"FlattenedView(added={len(self._added)}, removed={len(self._removed)}, "
            f"modified={len(self._modified)})"
        )


@dataclass(frozen=True, slots=True)
class ReconciliationView:
    """Everything a renderer and the export collaborator need for one cycle.

    ``comparison`` and ``impact`` always describe the unfiltered result;
    ``visible`` and ``rows`` reflect the current filter and sort.
    """

    status: ViewStatus
    comparison: ComparisonResult = field(default_factory=ComparisonResult)
    visible: ComparisonResult = field(default_factory=ComparisonResult)
    impact: CostImpact = field(default_factory=CostImpact)
    rows: FlattenedView = field(default_factory=FlattenedView)
    error: str | None = None

    @property
    def has_result(self) -> bool:
        return self.status not in {ViewStatus.LOADING, ViewStatus.ERROR}


def build_reconciliation_view(
    active: CircuitSet | None,
    proposed: CircuitSet | None,
    *,
    circuit_filter: CircuitFilter | None = None,
    circuit_sort: CircuitSort | None = None,
    can_modify: bool = True,
    error: InputUnavailableError | None = None,
    engine: ComparisonEngine | None = None,
) -> ReconciliationView:
    """Derive the view for the current snapshots and user selection.

    A missing snapshot means the inputs are still loading; ``error`` takes
    precedence over both snapshots.
    """

    if error is not None:
        return ReconciliationView(status=ViewStatus.ERROR, error=str(error))
    if active is None or proposed is None:
        return ReconciliationView(status=ViewStatus.LOADING)

    comparison = (engine or ComparisonEngine()).compare(active, proposed)
    impact = aggregate_cost_impact(comparison)
    visible = apply_filter_and_sort(
        comparison,
        circuit_filter or CircuitFilter(),
        circuit_sort or CircuitSort(),
    )

    if visible.is_empty:
        status = ViewStatus.NO_CHANGES
        rows = FlattenedView()
    elif not can_modify:
        status = ViewStatus.PERMISSION_DENIED
        rows = FlattenedView()
    else:
        status = ViewStatus.READY
        rows = FlattenedView(visible)

    return ReconciliationView(
        status=status,
        comparison=comparison,
        visible=visible,
        impact=impact,
        rows=rows,
    )
