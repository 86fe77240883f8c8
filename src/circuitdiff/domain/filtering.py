"""Filter and sort pipeline over a classified comparison result.

Each bucket is filtered and sorted independently. Buckets excluded by the
selected change type come back empty rather than missing, so the result shape
never changes. Inputs are never mutated.
"""

from __future__ import annotations

import locale
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Final, TypeVar

from .errors import InvalidSortError
from .reconciliation import ComparisonResult

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .model import Circuit
    from .reconciliation import ModifiedCircuit


class ChangeFilter(StrEnum):
    ALL = "all"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class SortField(StrEnum):
    CARRIER = "carrier"
    TYPE = "type"
    BANDWIDTH = "bandwidth"
    MONTHLY_COST = "monthlycost"

    @property
    def attribute(self) -> str:
        return _SORT_ATTRIBUTES[self]


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


_SORT_ATTRIBUTES: Final[dict[SortField, str]] = {
    SortField.CARRIER: "carrier",
    SortField.TYPE: "type",
    SortField.BANDWIDTH: "bandwidth",
    SortField.MONTHLY_COST: "monthly_cost",
}

_SEARCH_ATTRIBUTES: Final[tuple[str, ...]] = ("carrier", "type", "bandwidth")


@dataclass(frozen=True, slots=True)
class CircuitFilter:
    """Transient user selection of which changes to show."""

    type: ChangeFilter = ChangeFilter.ALL
    search: str = ""
    carrier: str | None = None

    def includes(self, bucket: ChangeFilter) -> bool:
        return self.type is ChangeFilter.ALL or self.type is bucket

    def matches(self, circuit: Circuit) -> bool:
        return self._matches_search(circuit) and self._matches_carrier(circuit)

    def _matches_search(self, circuit: Circuit) -> bool:
        if not self.search:
            return True
        needle = self.search.lower()
        return any(needle in str(getattr(circuit, name)).lower() for name in _SEARCH_ATTRIBUTES)

    def _matches_carrier(self, circuit: Circuit) -> bool:
        if not self.carrier:
            return True
        return circuit.carrier == self.carrier


@dataclass(frozen=True, slots=True)
class CircuitSort:
    """Transient user selection of the ordering applied inside each bucket."""

    field: SortField = SortField.CARRIER
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: str) -> CircuitSort:
        """Parse ``"<field>-<direction>"``, e.g. ``"monthlycost-desc"``."""

        field_name, sep, direction = value.strip().lower().rpartition("-")
        if not sep:
            field_name, direction = direction, SortDirection.ASC.value
        try:
            return cls(field=SortField(field_name), direction=SortDirection(direction))
        except ValueError as exc:
            raise InvalidSortError(f"Invalid sort specification: {value!r}") from exc

    def __str__(self) -> str:
        return f"{self.field.value}-{self.direction.value}"


def filter_comparison(result: ComparisonResult, circuit_filter: CircuitFilter) -> ComparisonResult:
    """Return a new result keeping only circuits selected by ``circuit_filter``."""

    added = removed = modified = ()
    if circuit_filter.includes(ChangeFilter.ADDED):
        added = tuple(circuit for circuit in result.added if circuit_filter.matches(circuit))
    if circuit_filter.includes(ChangeFilter.REMOVED):
        removed = tuple(circuit for circuit in result.removed if circuit_filter.matches(circuit))
    if circuit_filter.includes(ChangeFilter.MODIFIED):
        modified = tuple(
            entry for entry in result.modified if circuit_filter.matches(entry.circuit)
        )
    return ComparisonResult(added=added, removed=removed, modified=modified)


def sort_comparison(result: ComparisonResult, circuit_sort: CircuitSort) -> ComparisonResult:
    """Return a new result with every bucket ordered by ``circuit_sort``.

    Ties on the sort field are broken by circuit id, so the ordering is total:
    descending output is the exact mirror of ascending output and re-sorting an
    already sorted bucket leaves it unchanged.
    """

    attribute = circuit_sort.field.attribute
    sign = -1 if circuit_sort.direction is SortDirection.DESC else 1

    def circuit_of_entry(entry: ModifiedCircuit) -> Circuit:
        return entry.circuit

    return ComparisonResult(
        added=_sorted(result.added, _identity, attribute=attribute, sign=sign),
        removed=_sorted(result.removed, _identity, attribute=attribute, sign=sign),
        modified=_sorted(result.modified, circuit_of_entry, attribute=attribute, sign=sign),
    )


def apply_filter_and_sort(
    result: ComparisonResult,
    circuit_filter: CircuitFilter,
    circuit_sort: CircuitSort,
) -> ComparisonResult:
    """Filter then sort ``result``; idempotent for a fixed filter and sort."""

    return sort_comparison(filter_comparison(result, circuit_filter), circuit_sort)


def compare_values(left: object, right: object) -> int:
    """Numeric comparison when both values are numbers, locale-aware text otherwise."""

    if _is_number(left) and _is_number(right):
        return (left > right) - (left < right)  # type: ignore[operator]
    left_key = _collation_key(left)
    right_key = _collation_key(right)
    return (left_key > right_key) - (left_key < right_key)


def _collation_key(value: object) -> str:
    # strxfrm rejects embedded NUL characters
    return locale.strxfrm(str(value).lower().replace("\x00", ""))


def _is_number(value: object) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _identity(circuit: Circuit) -> Circuit:
    return circuit


T = TypeVar("T")


def _sorted(
    items: Sequence[T],
    circuit_of: Callable[[T], Circuit],
    *,
    attribute: str,
    sign: int,
) -> tuple[T, ...]:
    def compare(left: T, right: T) -> int:
        left_circuit, right_circuit = circuit_of(left), circuit_of(right)
        order = compare_values(getattr(left_circuit, attribute), getattr(right_circuit, attribute))
        if order == 0:
            # raw ids keep the order total, even for ids differing only in case
            order = (left_circuit.id > right_circuit.id) - (left_circuit.id < right_circuit.id)
        return sign * order

    return tuple(sorted(items, key=cmp_to_key(compare)))
