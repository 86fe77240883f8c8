"""Domain ports (interfaces) for external collaborators."""

from __future__ import annotations

from .export import ComparisonExporter
from .feed import CircuitSnapshotFeed, CircuitSnapshots
from .permissions import PermissionProvider

__all__ = [
    "CircuitSnapshotFeed",
    "CircuitSnapshots",
    "ComparisonExporter",
    "PermissionProvider",
]
