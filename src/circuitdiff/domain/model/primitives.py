"""Domain primitives: scalar aliases + small value objects.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

CircuitId: TypeAlias = str
LocationId: TypeAlias = str
ProposalId: TypeAlias = str
Money: TypeAlias = Decimal

ZERO: Money = Decimal(0)


@dataclass(frozen=True, slots=True)
class SnapshotScope:
    """The (proposal, location) pair every circuit comparison is confined to."""

    proposal_id: ProposalId
    location_id: LocationId

    def __str__(self) -> str:
        return f"{self.proposal_id}/{self.location_id}"
