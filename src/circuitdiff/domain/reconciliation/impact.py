"""Monthly and one-time cost impact of accepting a comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from circuitdiff.domain.model import ZERO

if TYPE_CHECKING:
    from circuitdiff.domain.model import Money

    from .contracts import ComparisonResult


@dataclass(frozen=True, slots=True)
class CostImpact:
    """Signed financial delta of a comparison; derived, never persisted."""

    monthly_impact: Money = ZERO
    one_time_impact: Money = ZERO


def aggregate_cost_impact(result: ComparisonResult) -> CostImpact:
    """Reduce a comparison result into its cost impact.

    Added circuits count in full, removed circuits subtract their monthly cost,
    and modified circuits contribute their monthly delta. One-time impact only
    counts added installation costs and installation cost increases; removed
    circuits are sunk cost, so the total is never negative.
    """

    monthly = ZERO
    one_time = ZERO

    for circuit in result.added:
        monthly += circuit.monthly_cost
        one_time += circuit.installation_cost

    for circuit in result.removed:
        monthly -= circuit.monthly_cost

    for entry in result.modified:
        monthly += entry.circuit.monthly_cost - entry.previous.monthly_cost
        installation_delta = entry.circuit.installation_cost - entry.previous.installation_cost
        if installation_delta > 0:
            one_time += installation_delta

    return CostImpact(monthly_impact=monthly, one_time_impact=one_time)
