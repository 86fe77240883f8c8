"""Ports for the permission collaborator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PermissionProvider(Protocol):
    """Supplies the "may modify circuits" capability of the current caller."""

    def can_modify_circuits(self) -> bool: ...


__all__ = ["PermissionProvider"]
