"""Circuit domain model."""

from __future__ import annotations

from .circuit import Circuit, CircuitSet
from .enums import BillingFrequency, ChangeKind, CircuitPurpose, CircuitStatus, CircuitType, Side
from .primitives import ZERO, CircuitId, LocationId, Money, ProposalId, SnapshotScope

__all__ = [
    "ZERO",
    "BillingFrequency",
    "ChangeKind",
    "Circuit",
    "CircuitId",
    "CircuitPurpose",
    "CircuitSet",
    "CircuitStatus",
    "CircuitType",
    "LocationId",
    "Money",
    "ProposalId",
    "Side",
    "SnapshotScope",
]
