"""Ports for obtaining circuit snapshots from the live-sync collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from circuitdiff.domain.model import CircuitSet, SnapshotScope


@dataclass(frozen=True, slots=True)
class CircuitSnapshots:
    """Full replacement snapshots of both sides of one scope."""

    active: CircuitSet
    proposed: CircuitSet


@runtime_checkable
class CircuitSnapshotFeed(Protocol):
    """Callable port returning the current snapshots for a scope.

    Implementations raise ``InputUnavailableError`` when the upstream source
    cannot be read; they never return partial data.
    """

    def __call__(self, scope: SnapshotScope) -> CircuitSnapshots: ...


__all__ = ["CircuitSnapshotFeed", "CircuitSnapshots"]
