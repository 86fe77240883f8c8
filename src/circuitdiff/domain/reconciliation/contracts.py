"""Shared comparison contract components.

This module intentionally holds only:
- the match key strategy alias and matcher output
- the classified comparison result and its parts
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterator

    from circuitdiff.domain.model import Circuit, CircuitId, Side


MatchKey: TypeAlias = "Callable[[Circuit, Side], Hashable]"


@dataclass(frozen=True, slots=True)
class CommonPair:
    """Active and proposed versions of the same circuit identity."""

    active: Circuit
    proposed: Circuit


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Raw classification produced by the matcher, in input insertion order."""

    added: tuple[Circuit, ...] = ()
    removed: tuple[Circuit, ...] = ()
    common: tuple[CommonPair, ...] = ()

    @property
    def added_ids(self) -> tuple[CircuitId, ...]:
        return tuple(circuit.id for circuit in self.added)

    @property
    def removed_ids(self) -> tuple[CircuitId, ...]:
        return tuple(circuit.id for circuit in self.removed)


@dataclass(frozen=True, slots=True)
class FieldDifference:
    """One changed field of a modified circuit.

    ``old`` and ``new`` keep their domain types (``Decimal``, ``int``, ``date``,
    enum members); formatting is left to the presentation layer.
    """

    field: str
    old: object
    new: object


@dataclass(frozen=True, slots=True)
class ModifiedCircuit:
    """Proposed version of a circuit together with what changed."""

    circuit: Circuit
    differences: tuple[FieldDifference, ...]
    previous: Circuit

    def difference_for(self, field: str) -> FieldDifference | None:
        for difference in self.differences:
            if difference.field == field:
                return difference
        return None


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Three disjoint buckets of changed circuits.

    Unchanged pairs are never present in any bucket.
    """

    added: tuple[Circuit, ...] = ()
    removed: tuple[Circuit, ...] = ()
    modified: tuple[ModifiedCircuit, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)

    @property
    def total(self) -> int:
        return len(self.added) + len(self.removed) + len(self.modified)

    def circuits(self) -> Iterator[Circuit]:
        """Iterate every classified circuit (proposed version for modified ones)."""

        yield from self.added
        yield from self.removed
        for entry in self.modified:
            yield entry.circuit
