"""Error taxonomy for the circuit comparison domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import SnapshotScope


class CircuitDiffError(Exception):
    """Base class for all circuit comparison errors."""


class InputUnavailableError(CircuitDiffError):
    """Raised when an upstream circuit snapshot could not be obtained."""

    def __init__(self, message: str, *, scope: SnapshotScope | None = None) -> None:
        self.scope = scope
        prefix = f"[{scope}] " if scope is not None else ""
        super().__init__(f"{prefix}{message}")


class ScopeMismatchError(CircuitDiffError, ValueError):
    """Raised when active and proposed sets belong to different scopes."""

    def __init__(self, active: SnapshotScope, proposed: SnapshotScope) -> None:
        self.active = active
        self.proposed = proposed
        super().__init__(
            f"Cannot compare circuit sets across scopes: active={active}, proposed={proposed}"
        )


class InvalidSortError(CircuitDiffError, ValueError):
    """Raised when a sort specification cannot be parsed."""


class ExportError(CircuitDiffError):
    """Raised by exporters when an artifact cannot be produced."""
