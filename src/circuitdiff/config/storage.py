"""File locations for snapshot input and export output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import optional_env_var, require_env_vars


@dataclass(frozen=True, slots=True)
class ExportConfig:
    export_dir: Path

    def resolve_export_dir(self) -> Path:
        return self.export_dir.expanduser().resolve()

    def ensure_export_dir(self) -> Path:
        export_dir = self.resolve_export_dir()
        export_dir.mkdir(parents=True, exist_ok=True)
        return export_dir


@dataclass(frozen=True, slots=True)
class FeedConfig:
    feed_dir: Path

    def snapshot_path(self, proposal_id: str, location_id: str, side: str) -> Path:
        return self.feed_dir.expanduser().resolve() / proposal_id / location_id / f"{side}.json"


def get_export_config() -> ExportConfig:
    env_dir = optional_env_var("CIRCUITDIFF_EXPORT_DIR")
    return ExportConfig(export_dir=Path(env_dir) if env_dir else Path.cwd())


def get_feed_config() -> FeedConfig:
    values = require_env_vars(("CIRCUITDIFF_FEED_DIR",))
    return FeedConfig(feed_dir=Path(values["CIRCUITDIFF_FEED_DIR"]))
