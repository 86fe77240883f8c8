"""Pair active and proposed circuits by identity.

Responsibilities of this stage:
- index each side by match key (last record per id wins)
- keep distinct proposed circuits that share a key apart, never dropping one
- classify proposed circuits as added or common in one pass
- leave every active circuit not claimed by a proposed one as removed

Ordering follows the insertion order of each input set; the filter/sort
pipeline decides presentation order later.
"""

from __future__ import annotations

from operator import itemgetter
from typing import TYPE_CHECKING, Protocol

from circuitdiff.domain.model import Side

from .contracts import CommonPair, MatchResult

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable

    from circuitdiff.domain.model import Circuit

    from .contracts import MatchKey


def match_by_id(circuit: Circuit, side: Side) -> Hashable:  # noqa: ARG001
    """Match on the stable id assigned by the upstream record store."""

    return circuit.id


def match_by_revision(circuit: Circuit, side: Side) -> Hashable:
    """Match a proposed revision to the active circuit it replaces.

    Proposed circuits carrying ``replaces_id`` are keyed by that id so a relinked
    record shows up as modified instead of an unrelated added/removed pair.
    """

    if side is Side.PROPOSED and circuit.replaces_id is not None:
        return circuit.replaces_id
    return circuit.id


class MatchCircuits(Protocol):
    """Classify two circuit sequences into added, removed and common pairs."""

    def __call__(
        self,
        active: Iterable[Circuit],
        proposed: Iterable[Circuit],
        *,
        key: MatchKey = ...,
    ) -> MatchResult: ...


def match_circuits(
    active: Iterable[Circuit],
    proposed: Iterable[Circuit],
    *,
    key: MatchKey = match_by_id,
) -> MatchResult:
    """Classify circuits in O(n + m) using a keyed lookup of the active side."""

    active_by_key = _index(active, key=key, side=Side.ACTIVE)
    proposed_by_key, displaced = _index_proposed(proposed, key=key)

    added: list[tuple[int, Circuit]] = list(displaced)
    common: list[CommonPair] = []
    for match_key, (position, circuit) in proposed_by_key.items():
        previous = active_by_key.get(match_key)
        if previous is None:
            added.append((position, circuit))
        else:
            common.append(CommonPair(active=previous, proposed=circuit))
    added.sort(key=itemgetter(0))

    removed = [
        circuit
        for match_key, circuit in active_by_key.items()
        if match_key not in proposed_by_key
    ]
    return MatchResult(
        added=tuple(circuit for _, circuit in added),
        removed=tuple(removed),
        common=tuple(common),
    )


def _index(circuits: Iterable[Circuit], *, key: MatchKey, side: Side) -> dict[Hashable, Circuit]:
    indexed: dict[Hashable, Circuit] = {}
    for circuit in circuits:
        indexed[key(circuit, side)] = circuit
    return indexed


def _index_proposed(
    circuits: Iterable[Circuit], *, key: MatchKey
) -> tuple[dict[Hashable, tuple[int, Circuit]], list[tuple[int, Circuit]]]:
    """Index proposed circuits by key, remembering each one's input position.

    A repeated id replaces its earlier record in place. Distinct ids that land
    on the same key cannot both pair with one active circuit: a circuit keyed
    through a link (key differs from its own id) keeps the key over one keyed
    by its own id, otherwise the later circuit wins. The loser is returned as
    displaced and classified as added.
    """

    indexed: dict[Hashable, tuple[int, Circuit]] = {}
    displaced: list[tuple[int, Circuit]] = []
    for position, circuit in enumerate(circuits):
        match_key = key(circuit, Side.PROPOSED)
        claimed = indexed.get(match_key)
        if claimed is None:
            indexed[match_key] = (position, circuit)
        elif claimed[1].id == circuit.id:
            indexed[match_key] = (claimed[0], circuit)
        elif match_key == circuit.id and match_key != claimed[1].id:
            displaced.append((position, circuit))
        else:
            displaced.append(claimed)
            indexed[match_key] = (position, circuit)
    return indexed, displaced
