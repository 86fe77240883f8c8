"""Defaults for the interactive reconciliation view."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING

from circuitdiff.domain.errors import InvalidSortError
from circuitdiff.domain.filtering import CircuitSort
from circuitdiff.domain.session import DEFAULT_SEARCH_QUIET_PERIOD, SearchDebouncer

from .env import env_int, optional_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from circuitdiff.domain.session import Clock


_DEFAULT_QUIET_MS = DEFAULT_SEARCH_QUIET_PERIOD // timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class ViewConfig:
    search_quiet_period: timedelta = DEFAULT_SEARCH_QUIET_PERIOD
    default_sort: CircuitSort = field(default_factory=CircuitSort)

    def search_debouncer(self, clock: Clock = time.monotonic) -> SearchDebouncer:
        """Debouncer for search input using the configured quiet period."""
        return SearchDebouncer(quiet_period=self.search_quiet_period, clock=clock)


def get_view_config() -> ViewConfig:
    quiet_ms = env_int(
        "CIRCUITDIFF_SEARCH_DEBOUNCE_MS",
        default=_DEFAULT_QUIET_MS,
        minimum=_DEFAULT_QUIET_MS,
    )
    raw_sort = optional_env_var("CIRCUITDIFF_DEFAULT_SORT")
    try:
        default_sort = CircuitSort.parse(raw_sort) if raw_sort else CircuitSort()
    except InvalidSortError as exc:
        raise ConfigurationError(f"CIRCUITDIFF_DEFAULT_SORT: {exc}") from exc
    return ViewConfig(
        search_quiet_period=timedelta(milliseconds=quiet_ms),
        default_sort=default_sort,
    )
