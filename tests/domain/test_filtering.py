from __future__ import annotations

import pytest

from circuitdiff.domain.errors import InvalidSortError
from circuitdiff.domain.filtering import (
    ChangeFilter,
    CircuitFilter,
    CircuitSort,
    SortDirection,
    SortField,
    apply_filter_and_sort,
    compare_values,
    filter_comparison,
    sort_comparison,
)
from circuitdiff.domain.model import CircuitType
from circuitdiff.domain.reconciliation import ComparisonResult, compare_circuit_sets
from tests.helpers.circuits import active_set, make_circuit, proposed_set


def _reference_result() -> ComparisonResult:
    active = active_set(make_circuit(1, carrier="AT&T", monthly_cost=500))
    proposed = proposed_set(
        make_circuit(1, carrier="AT&T", monthly_cost=650),
        make_circuit(2, carrier="Verizon", monthly_cost=300),
    )
    return compare_circuit_sets(active, proposed)


def _mixed_result() -> ComparisonResult:
    active = active_set(
        make_circuit("r1", carrier="Lumen", type=CircuitType.DIA, monthly_cost=900),
        make_circuit("m1", carrier="Comcast", bandwidth="300 Mbps", monthly_cost=100),
    )
    proposed = proposed_set(
        make_circuit("m1", carrier="Comcast", bandwidth="1 Gbps", monthly_cost=150),
        make_circuit("a1", carrier="Verizon", type=CircuitType.BROADBAND, monthly_cost=80),
        make_circuit("a2", carrier="AT&T", type=CircuitType.MPLS, monthly_cost=1200),
    )
    return compare_circuit_sets(active, proposed)


def test_type_filter_empties_other_buckets_without_dropping_them() -> None:
    filtered = filter_comparison(_mixed_result(), CircuitFilter(type=ChangeFilter.ADDED))

    assert [circuit.id for circuit in filtered.added] == ["a1", "a2"]
    assert filtered.removed == ()
    assert filtered.modified == ()


def test_search_is_case_insensitive_across_carrier_type_and_bandwidth() -> None:
    result = _mixed_result()

    by_carrier = filter_comparison(result, CircuitFilter(search="veri"))
    by_type = filter_comparison(result, CircuitFilter(search="dia"))
    by_bandwidth = filter_comparison(result, CircuitFilter(search="1 GBPS"))

    assert [circuit.id for circuit in by_carrier.circuits()] == ["a1"]
    assert [circuit.id for circuit in by_type.circuits()] == ["r1"]
    assert [circuit.id for circuit in by_bandwidth.circuits()] == ["m1"]


def test_carrier_filter_is_exact_and_case_sensitive() -> None:
    result = _mixed_result()

    exact = filter_comparison(result, CircuitFilter(carrier="Verizon"))
    wrong_case = filter_comparison(result, CircuitFilter(carrier="verizon"))

    assert [circuit.id for circuit in exact.circuits()] == ["a1"]
    assert wrong_case.is_empty


def test_search_and_carrier_must_both_match() -> None:
    filtered = filter_comparison(_mixed_result(), CircuitFilter(search="mpls", carrier="Verizon"))

    assert filtered.is_empty


def test_modified_bucket_filters_on_proposed_circuit() -> None:
    filtered = filter_comparison(_mixed_result(), CircuitFilter(search="300 mbps"))

    assert filtered.is_empty


def test_reference_example_filter_yields_no_changes() -> None:
    filtered = filter_comparison(
        _reference_result(),
        CircuitFilter(type=ChangeFilter.MODIFIED, search="verizon"),
    )

    assert filtered.added == ()
    assert filtered.removed == ()
    assert filtered.modified == ()
    assert filtered.is_empty


def test_sort_by_monthly_cost_is_numeric() -> None:
    result = ComparisonResult(
        added=(
            make_circuit("a", monthly_cost=1000),
            make_circuit("b", monthly_cost=90),
            make_circuit("c", monthly_cost=250),
        )
    )

    ascending = sort_comparison(result, CircuitSort(field=SortField.MONTHLY_COST))
    descending = sort_comparison(
        result, CircuitSort(field=SortField.MONTHLY_COST, direction=SortDirection.DESC)
    )

    assert [circuit.id for circuit in ascending.added] == ["b", "c", "a"]
    assert [circuit.id for circuit in descending.added] == ["a", "c", "b"]


def test_sort_by_text_ignores_case() -> None:
    result = ComparisonResult(
        removed=(
            make_circuit("1", carrier="verizon"),
            make_circuit("2", carrier="AT&T"),
            make_circuit("3", carrier="Comcast"),
        )
    )

    ordered = sort_comparison(result, CircuitSort(field=SortField.CARRIER))

    assert [circuit.carrier for circuit in ordered.removed] == ["AT&T", "Comcast", "verizon"]


def test_modified_bucket_sorts_by_nested_circuit() -> None:
    ordered = sort_comparison(
        _mixed_result(),
        CircuitSort(field=SortField.MONTHLY_COST, direction=SortDirection.DESC),
    )

    assert [circuit.id for circuit in ordered.added] == ["a2", "a1"]
    assert [entry.circuit.id for entry in ordered.modified] == ["m1"]


def test_descending_order_mirrors_ascending_order_for_ties() -> None:
    result = ComparisonResult(
        added=(
            make_circuit("x", carrier="Same"),
            make_circuit("y", carrier="Other"),
            make_circuit("z", carrier="same"),
        )
    )

    ascending = sort_comparison(result, CircuitSort(field=SortField.CARRIER))
    descending = sort_comparison(
        result, CircuitSort(field=SortField.CARRIER, direction=SortDirection.DESC)
    )

    assert list(descending.added) == list(reversed(ascending.added))
    tied_ascending = [c.id for c in ascending.added if c.carrier.lower() == "same"]
    tied_descending = [c.id for c in descending.added if c.carrier.lower() == "same"]
    assert tied_descending == list(reversed(tied_ascending))


@pytest.mark.parametrize(
    "circuit_sort",
    [
        CircuitSort(),
        CircuitSort(field=SortField.MONTHLY_COST, direction=SortDirection.DESC),
        CircuitSort(field=SortField.TYPE, direction=SortDirection.DESC),
    ],
)
def test_filter_and_sort_is_idempotent(circuit_sort: CircuitSort) -> None:
    circuit_filter = CircuitFilter(search="o")
    once = apply_filter_and_sort(_mixed_result(), circuit_filter, circuit_sort)

    assert apply_filter_and_sort(once, circuit_filter, circuit_sort) == once


def test_filter_and_sort_do_not_mutate_input() -> None:
    result = _mixed_result()
    snapshot = (result.added, result.removed, result.modified)

    apply_filter_and_sort(
        result,
        CircuitFilter(type=ChangeFilter.ADDED),
        CircuitSort(field=SortField.MONTHLY_COST, direction=SortDirection.DESC),
    )

    assert (result.added, result.removed, result.modified) == snapshot


def test_ids_differing_only_in_case_still_reverse_in_descending_order() -> None:
    result = ComparisonResult(
        added=(make_circuit("A", carrier="Same"), make_circuit("a", carrier="Same"))
    )

    ascending = sort_comparison(result, CircuitSort(field=SortField.CARRIER))
    descending = sort_comparison(
        result, CircuitSort(field=SortField.CARRIER, direction=SortDirection.DESC)
    )

    assert [c.id for c in ascending.added] == ["A", "a"]
    assert [c.id for c in descending.added] == ["a", "A"]


def test_sort_tolerates_nul_characters_in_text() -> None:
    result = ComparisonResult(
        added=(make_circuit("1", carrier="Veri\x00zon"), make_circuit("2", carrier="AT&T"))
    )

    ordered = sort_comparison(result, CircuitSort(field=SortField.CARRIER))

    assert [c.id for c in ordered.added] == ["2", "1"]
    assert compare_values("a\x00b", "ab") == 0


def test_compare_values_mixes_numbers_and_text() -> None:
    assert compare_values(2, 10) < 0
    assert compare_values("b", "A") > 0
    assert compare_values("10", "9") < 0
    assert compare_values(True, 2) != 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("carrier-asc", CircuitSort(field=SortField.CARRIER, direction=SortDirection.ASC)),
        (
            "monthlycost-desc",
            CircuitSort(field=SortField.MONTHLY_COST, direction=SortDirection.DESC),
        ),
        (" Bandwidth-DESC ", CircuitSort(field=SortField.BANDWIDTH, direction=SortDirection.DESC)),
        ("type", CircuitSort(field=SortField.TYPE, direction=SortDirection.ASC)),
    ],
)
def test_sort_parse(raw: str, expected: CircuitSort) -> None:
    assert CircuitSort.parse(raw) == expected


def test_sort_parse_rejects_unknown_fields() -> None:
    with pytest.raises(InvalidSortError, match="notes-asc"):
        CircuitSort.parse("notes-asc")


def test_sort_round_trips_through_string() -> None:
    circuit_sort = CircuitSort(field=SortField.MONTHLY_COST, direction=SortDirection.DESC)

    assert str(circuit_sort) == "monthlycost-desc"
