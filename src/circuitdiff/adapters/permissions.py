"""Permission adapters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StaticPermissions:
    """Fixed capability, e.g. from a CLI flag or a resolved user role."""

    allowed: bool = True

    def can_modify_circuits(self) -> bool:
        return self.allowed
