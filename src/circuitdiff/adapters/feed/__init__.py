"""Circuit snapshot feed adapter package."""

from __future__ import annotations

from .files import ExplicitFileSnapshotFeed, JsonFileSnapshotFeed, load_circuit_set
from .schema import CircuitPayload, CircuitSnapshotPayload
from .translator import translate_circuit, translate_snapshot

__all__ = [
    "CircuitPayload",
    "CircuitSnapshotPayload",
    "ExplicitFileSnapshotFeed",
    "JsonFileSnapshotFeed",
    "load_circuit_set",
    "translate_circuit",
    "translate_snapshot",
]
