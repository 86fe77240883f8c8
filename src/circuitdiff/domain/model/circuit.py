"""Circuit snapshots and per-side circuit sets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date  # noqa: TC003
from decimal import Decimal
from typing import TYPE_CHECKING

from .enums import BillingFrequency, CircuitPurpose, CircuitStatus, CircuitType, Side
from .primitives import ZERO, CircuitId, LocationId, Money, SnapshotScope

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True, kw_only=True)
class Circuit:
    """Immutable value snapshot of one network circuit record."""

    id: CircuitId
    carrier: str
    type: CircuitType
    purpose: CircuitPurpose
    status: CircuitStatus = CircuitStatus.ACTIVE
    bandwidth: str = ""
    upload_bandwidth: str | None = None
    monthly_cost: Money = ZERO
    installation_cost: Money = ZERO
    static_ips: int = 0
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    contract_term: int = 12
    billing: BillingFrequency = BillingFrequency.MONTHLY
    usage_charges: bool = False
    notes: str = ""
    location_id: LocationId = ""
    replaces_id: CircuitId | None = None

    def __post_init__(self) -> None:
        # ints and floats from test builders or loose callers become Decimal
        for name in ("monthly_cost", "installation_cost"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))
        if self.monthly_cost < 0:
            raise ValueError(f"Circuit {self.id}: monthly cost must be non-negative")
        if self.installation_cost < 0:
            raise ValueError(f"Circuit {self.id}: installation cost must be non-negative")
        if self.static_ips < 0:
            raise ValueError(f"Circuit {self.id}: static IP count must be non-negative")


@dataclass(frozen=True, slots=True)
class CircuitSet:
    """Ordered circuits for one side of one (proposal, location) scope."""

    scope: SnapshotScope
    side: Side
    circuits: tuple[Circuit, ...] = ()

    @classmethod
    def of(cls, scope: SnapshotScope, side: Side, circuits: Iterable[Circuit]) -> CircuitSet:
        return cls(scope=scope, side=side, circuits=tuple(circuits))

    def __iter__(self) -> Iterator[Circuit]:
        return iter(self.circuits)

    def __len__(self) -> int:
        return len(self.circuits)
