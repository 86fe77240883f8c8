"""Flatten a comparison result into export rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from circuitdiff.domain.model import ChangeKind
from circuitdiff.presentation import format_difference

if TYPE_CHECKING:
    from collections.abc import Iterator

    from circuitdiff.domain.model import Circuit, Money
    from circuitdiff.domain.reconciliation import ComparisonResult, FieldDifference

EXPORT_HEADERS: Final[tuple[str, ...]] = (
    "Change",
    "Circuit ID",
    "Carrier",
    "Type",
    "Purpose",
    "Bandwidth",
    "Monthly Cost",
    "Installation Cost",
    "Changes",
)


@dataclass(frozen=True, slots=True)
class ExportRow:
    change: ChangeKind
    circuit_id: str
    carrier: str
    type: str
    purpose: str
    bandwidth: str
    monthly_cost: Money
    installation_cost: Money
    changes: str

    def as_list(self) -> list[object]:
        return [
            self.change.value,
            self.circuit_id,
            self.carrier,
            self.type,
            self.purpose,
            self.bandwidth,
            self.monthly_cost,
            self.installation_cost,
            self.changes,
        ]


def export_rows(result: ComparisonResult) -> Iterator[ExportRow]:
    """Yield added, removed, then modified rows in result order."""

    for circuit in result.added:
        yield _row(ChangeKind.ADDED, circuit)
    for circuit in result.removed:
        yield _row(ChangeKind.REMOVED, circuit)
    for entry in result.modified:
        yield _row(ChangeKind.MODIFIED, entry.circuit, entry.differences)


def _row(
    change: ChangeKind,
    circuit: Circuit,
    differences: tuple[FieldDifference, ...] = (),
) -> ExportRow:
    return ExportRow(
        change=change,
        circuit_id=circuit.id,
        carrier=circuit.carrier,
        type=circuit.type.value,
        purpose=circuit.purpose.value,
        bandwidth=circuit.bandwidth,
        monthly_cost=circuit.monthly_cost,
        installation_cost=circuit.installation_cost,
        changes="; ".join(format_difference(difference) for difference in differences),
    )
