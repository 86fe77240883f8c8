"""JSON file backed snapshot feed."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from circuitdiff.domain.errors import InputUnavailableError
from circuitdiff.domain.model import Side
from circuitdiff.domain.ports.feed import CircuitSnapshots

from .schema import CircuitSnapshotPayload
from .translator import translate_snapshot

if TYPE_CHECKING:
    from pathlib import Path

    from circuitdiff.config import FeedConfig
    from circuitdiff.domain.model import CircuitSet, SnapshotScope

log = getLogger(__name__)


def load_circuit_set(path: Path, *, side: Side, scope: SnapshotScope | None = None) -> CircuitSet:
    """Read one snapshot document, raising ``InputUnavailableError`` on any failure."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        payload = CircuitSnapshotPayload.model_validate(raw)
    except OSError as exc:
        message = f"Cannot read {side} snapshot {path}: {exc}"
        raise InputUnavailableError(message, scope=scope) from exc
    except json.JSONDecodeError as exc:
        message = f"Malformed {side} snapshot {path}: {exc}"
        raise InputUnavailableError(message, scope=scope) from exc
    except ValidationError as exc:
        raise InputUnavailableError(
            f"Invalid {side} snapshot {path}: {exc.error_count()} validation error(s)",
            scope=scope,
        ) from exc

    circuit_set = translate_snapshot(payload, side=side)
    if scope is not None and circuit_set.scope != scope:
        raise InputUnavailableError(
            f"{side} snapshot {path} belongs to {circuit_set.scope}", scope=scope
        )
    log.debug("Loaded %s %s circuits from %s", len(circuit_set), side, path)
    return circuit_set


@dataclass(frozen=True, slots=True)
class JsonFileSnapshotFeed:
    """Serve snapshots stored as ``<feed_dir>/<proposal>/<location>/<side>.json``."""

    config: FeedConfig

    def __call__(self, scope: SnapshotScope) -> CircuitSnapshots:
        active = load_circuit_set(
            self.config.snapshot_path(scope.proposal_id, scope.location_id, Side.ACTIVE),
            side=Side.ACTIVE,
            scope=scope,
        )
        proposed = load_circuit_set(
            self.config.snapshot_path(scope.proposal_id, scope.location_id, Side.PROPOSED),
            side=Side.PROPOSED,
            scope=scope,
        )
        return CircuitSnapshots(active=active, proposed=proposed)


@dataclass(frozen=True, slots=True)
class ExplicitFileSnapshotFeed:
    """Serve one fixed pair of snapshot files regardless of the requested scope path."""

    active_path: Path
    proposed_path: Path

    def __call__(self, scope: SnapshotScope) -> CircuitSnapshots:
        return CircuitSnapshots(
            active=load_circuit_set(self.active_path, side=Side.ACTIVE, scope=scope),
            proposed=load_circuit_set(self.proposed_path, side=Side.PROPOSED, scope=scope),
        )
