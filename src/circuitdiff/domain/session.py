"""Caller-side state around the pure reconciliation view.

The view builder itself keeps no state. A session remembers the latest input
snapshots and user selection, numbers every input change with a generation,
memoizes the last build, and tells callers when a result they hold has been
superseded by newer inputs.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from datetime import timedelta
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from .errors import ScopeMismatchError
from .filtering import CircuitFilter, CircuitSort
from .reconciliation import ComparisonEngine
from .view import build_reconciliation_view

if TYPE_CHECKING:
    from collections.abc import Hashable

    from .errors import InputUnavailableError
    from .model import CircuitSet, SnapshotScope
    from .view import ReconciliationView

DEFAULT_SEARCH_QUIET_PERIOD = timedelta(milliseconds=300)

log = getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> float: ...


@dataclass(frozen=True, slots=True)
class RenderedView:
    """A built view tagged with the input generation it was derived from."""

    generation: int
    view: ReconciliationView


@dataclass(slots=True)
class SearchDebouncer:
    """Coalesce rapid search keystrokes into one final value.

    A submitted value becomes final once no newer value arrived for
    ``quiet_period``. Callers poll from their event loop; nothing here sleeps.
    """

    quiet_period: timedelta = DEFAULT_SEARCH_QUIET_PERIOD
    clock: Clock = time.monotonic
    _pending: str | None = field(default=None, init=False, repr=False)
    _submitted_at: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.quiet_period < timedelta(0):
            raise ValueError("Quiet period must be non-negative")

    def submit(self, value: str) -> None:
        self._pending = value
        self._submitted_at = self.clock()

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def poll(self) -> str | None:
        """Return the settled value once, or ``None`` while typing continues."""

        if self._pending is None:
            return None
        if self.clock() - self._submitted_at < self.quiet_period.total_seconds():
            return None
        value, self._pending = self._pending, None
        return value


@dataclass(slots=True)
class ReconciliationSession:
    """Track live inputs for one (proposal, location) scope."""

    scope: SnapshotScope
    engine: ComparisonEngine = field(default_factory=ComparisonEngine)
    circuit_filter: CircuitFilter = field(default_factory=CircuitFilter)
    circuit_sort: CircuitSort = field(default_factory=CircuitSort)
    can_modify: bool = True
    search: SearchDebouncer = field(default_factory=SearchDebouncer)
    active: CircuitSet | None = None
    proposed: CircuitSet | None = None
    error: InputUnavailableError | None = None
    generation: int = 0
    _cache_key: Hashable | None = field(default=None, init=False, repr=False)
    _cache: RenderedView | None = field(default=None, init=False, repr=False)

    def push_snapshots(self, active: CircuitSet, proposed: CircuitSet) -> int:
        """Replace both snapshots with a fresh push from the live feed."""

        for snapshot in (active, proposed):
            if snapshot.scope != self.scope:
                raise ScopeMismatchError(self.scope, snapshot.scope)
        self.active = active
        self.proposed = proposed
        self.error = None
        return self._advance()

    def push_error(self, error: InputUnavailableError) -> int:
        self.error = error
        return self._advance()

    def set_filter(self, circuit_filter: CircuitFilter) -> int:
        self.circuit_filter = circuit_filter
        return self._advance()

    def set_sort(self, circuit_sort: CircuitSort) -> int:
        self.circuit_sort = circuit_sort
        return self._advance()

    def set_permission(self, *, can_modify: bool) -> int:
        self.can_modify = can_modify
        return self._advance()

    def type_search(self, text: str) -> None:
        """Record a search keystroke; the filter changes once typing settles."""
        self.search.submit(text)

    def settle_search(self) -> int | None:
        """Apply a settled search term, returning the new generation if one was applied."""

        text = self.search.poll()
        if text is None or text == self.circuit_filter.search:
            return None
        return self.set_filter(replace(self.circuit_filter, search=text))

    def render(self) -> RenderedView:
        """Build the view for the current inputs, reusing the last build if unchanged."""

        key = self._structural_key()
        if self._cache is not None and self._cache_key == key:
            if self._cache.generation != self.generation:
                self._cache = RenderedView(generation=self.generation, view=self._cache.view)
            return self._cache

        view = build_reconciliation_view(
            self.active,
            self.proposed,
            circuit_filter=self.circuit_filter,
            circuit_sort=self.circuit_sort,
            can_modify=self.can_modify,
            error=self.error,
            engine=self.engine,
        )
        self._cache_key = key
        self._cache = RenderedView(generation=self.generation, view=view)
        return self._cache

    def accept(self, rendered: RenderedView) -> bool:
        """Return ``True`` if ``rendered`` reflects the latest inputs.

        Superseded results must be dropped by the caller, never merged.
        """

        if rendered.generation != self.generation:
            log.debug(
                "Discarding superseded view for %s: generation=%s, latest=%s",
                self.scope,
                rendered.generation,
                self.generation,
            )
            return False
        return True

    def _advance(self) -> int:
        self.generation += 1
        return self.generation

    def _structural_key(self) -> Hashable:
        return (
            self.active,
            self.proposed,
            self.circuit_filter,
            self.circuit_sort,
            self.can_modify,
            None if self.error is None else str(self.error),
        )

