"""Schema validation for circuit snapshot payloads."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from circuitdiff.adapters.feed.schema import CircuitPayload, CircuitSnapshotPayload
from circuitdiff.domain.model import BillingFrequency, CircuitType
from tests.helpers.circuits import snapshot_document


def test_schema_accepts_snapshot_document(active_payload: list[dict[str, object]]) -> None:
    parsed = CircuitSnapshotPayload.model_validate(snapshot_document(active_payload))

    assert parsed.proposal_id == "proposal-1"
    assert [circuit.id for circuit in parsed.circuits] == ["1", "3"]
    assert parsed.circuits[0].monthlycost == Decimal(500)
    assert parsed.circuits[0].contract_start_date == date(2024, 1, 1)
    assert parsed.circuits[1].type is CircuitType.BROADBAND


def test_schema_applies_defaults_and_blank_values() -> None:
    parsed = CircuitPayload.model_validate(
        {
            "id": "c1",
            "carrier": "Lumen",
            "type": "DIA",
            "purpose": "Primary",
            "contract_end_date": "",
            "upload_bandwidth": " ",
            "unknown": "ignored",
        }
    )

    assert parsed.contract_end_date is None
    assert parsed.upload_bandwidth is None
    assert parsed.billing is BillingFrequency.MONTHLY
    assert parsed.monthlycost == Decimal(0)


def test_schema_rejects_unknown_enum_values() -> None:
    with pytest.raises(ValidationError):
        CircuitPayload.model_validate(
            {"id": "c1", "carrier": "Lumen", "type": "Satellite", "purpose": "Primary"}
        )


def test_schema_rejects_negative_costs() -> None:
    with pytest.raises(ValidationError):
        CircuitPayload.model_validate(
            {
                "id": "c1",
                "carrier": "Lumen",
                "type": "DIA",
                "purpose": "Primary",
                "monthlycost": -1,
            }
        )
