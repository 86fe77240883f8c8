"""Orchestrator for circuit comparison.

The engine composes the matcher and differ stages without prescribing concrete
implementations, so callers can inject another identity strategy or differ.
It is a pure function of its inputs: no I/O, no logging, no cached state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from circuitdiff.domain.errors import ScopeMismatchError

from .contracts import ComparisonResult, ModifiedCircuit
from .diff import diff_circuits
from .match import match_by_id, match_circuits

if TYPE_CHECKING:
    from circuitdiff.domain.model import CircuitSet

    from .contracts import MatchKey
    from .diff import DiffCircuits
    from .match import MatchCircuits


@dataclass(frozen=True, slots=True)
class ComparisonEngine:
    """Run matching and differencing for one (proposal, location) scope."""

    match: MatchCircuits = match_circuits
    diff: DiffCircuits = diff_circuits
    key: MatchKey = match_by_id

    def compare(self, active: CircuitSet, proposed: CircuitSet) -> ComparisonResult:
        """Classify ``proposed`` against ``active`` into added/removed/modified."""

        if active.scope != proposed.scope:
            raise ScopeMismatchError(active.scope, proposed.scope)

        matched = self.match(active.circuits, proposed.circuits, key=self.key)
        modified: list[ModifiedCircuit] = []
        for pair in matched.common:
            differences = self.diff(pair.active, pair.proposed)
            if not differences:
                continue
            modified.append(
                ModifiedCircuit(
                    circuit=pair.proposed,
                    differences=differences,
                    previous=pair.active,
                )
            )

        return ComparisonResult(
            added=matched.added,
            removed=matched.removed,
            modified=tuple(modified),
        )


def compare_circuit_sets(
    active: CircuitSet,
    proposed: CircuitSet,
    *,
    key: MatchKey = match_by_id,
) -> ComparisonResult:
    """Compare two circuit sets with the default matcher and differ."""

    return ComparisonEngine(key=key).compare(active, proposed)
