from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.helpers.circuits import DEFAULT_SCOPE, snapshot_document

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CIRCUITDIFF_SEARCH_DEBOUNCE_MS",
        "CIRCUITDIFF_DEFAULT_SORT",
        "CIRCUITDIFF_EXPORT_DIR",
        "CIRCUITDIFF_FEED_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def active_payload() -> list[dict[str, object]]:
    return [
        {
            "id": 1,
            "carrier": "AT&T",
            "type": "MPLS",
            "purpose": "Primary",
            "bandwidth": "100 Mbps",
            "monthlycost": 500,
            "installation_cost": 0,
            "contract_start_date": "2024-01-01",
            "contract_term": 36,
        },
        {
            "id": 3,
            "carrier": "Comcast",
            "type": "Broadband",
            "purpose": "Backup",
            "bandwidth": "300 Mbps",
            "monthlycost": 120,
            "installation_cost": 99,
        },
    ]


@pytest.fixture
def proposed_payload() -> list[dict[str, object]]:
    return [
        {
            "id": 1,
            "carrier": "AT&T",
            "type": "MPLS",
            "purpose": "Primary",
            "bandwidth": "100 Mbps",
            "monthlycost": 650,
            "installation_cost": 0,
            "contract_start_date": "2024-01-01",
            "contract_term": 36,
        },
        {
            "id": 2,
            "carrier": "Verizon",
            "type": "DIA",
            "purpose": "Secondary",
            "bandwidth": "1 Gbps",
            "monthlycost": 300,
            "installation_cost": 1500,
        },
    ]


@pytest.fixture
def write_snapshot(tmp_path: Path) -> Callable[[str, list[dict[str, object]]], Path]:
    def _write(name: str, circuits: list[dict[str, object]]) -> Path:
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(snapshot_document(circuits, scope=DEFAULT_SCOPE)))
        return path

    return _write
