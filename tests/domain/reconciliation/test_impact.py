from __future__ import annotations

from decimal import Decimal

from circuitdiff.domain.reconciliation import (
    ComparisonResult,
    CostImpact,
    ModifiedCircuit,
    aggregate_cost_impact,
    diff_circuits,
)
from tests.helpers.circuits import make_circuit


def _modified(
    previous_overrides: dict[str, object], new_overrides: dict[str, object]
) -> ModifiedCircuit:
    previous = make_circuit("m", **previous_overrides)
    circuit = make_circuit("m", **new_overrides)
    return ModifiedCircuit(
        circuit=circuit,
        differences=diff_circuits(previous, circuit),
        previous=previous,
    )


def test_empty_result_has_zero_impact() -> None:
    assert aggregate_cost_impact(ComparisonResult()) == CostImpact()


def test_single_added_circuit_counts_monthly_cost() -> None:
    added = make_circuit("a", monthly_cost=275, installation_cost=0)

    impact = aggregate_cost_impact(ComparisonResult(added=(added,)))

    assert impact.monthly_impact == Decimal(275)


def test_single_removed_circuit_subtracts_monthly_cost() -> None:
    removed = make_circuit("r", monthly_cost=180, installation_cost=999)

    impact = aggregate_cost_impact(ComparisonResult(removed=(removed,)))

    assert impact.monthly_impact == Decimal(-180)
    assert impact.one_time_impact == Decimal(0)


def test_modified_circuits_contribute_monthly_delta() -> None:
    cheaper = _modified({"monthly_cost": 400}, {"monthly_cost": 350})
    pricier = _modified({"monthly_cost": 100}, {"monthly_cost": 160})

    impact = aggregate_cost_impact(ComparisonResult(modified=(cheaper, pricier)))

    assert impact.monthly_impact == Decimal(10)


def test_one_time_impact_counts_added_installs_and_increases_only() -> None:
    added = make_circuit("a", installation_cost=1500)
    removed = make_circuit("r", installation_cost=800)
    increased = _modified({"installation_cost": 100}, {"installation_cost": 250})
    decreased = _modified({"installation_cost": 900}, {"installation_cost": 0})

    impact = aggregate_cost_impact(
        ComparisonResult(added=(added,), removed=(removed,), modified=(increased, decreased))
    )

    assert impact.one_time_impact == Decimal(1650)


def test_one_time_impact_is_never_negative() -> None:
    decreased = _modified({"installation_cost": 900}, {"installation_cost": 0})
    removed = make_circuit("r", installation_cost=800)

    impact = aggregate_cost_impact(ComparisonResult(removed=(removed,), modified=(decreased,)))

    assert impact.one_time_impact == Decimal(0)
