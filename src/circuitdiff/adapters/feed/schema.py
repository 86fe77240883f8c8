"""Pydantic models for circuit snapshot payloads."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from circuitdiff.domain.model import (
    BillingFrequency,
    CircuitPurpose,
    CircuitStatus,
    CircuitType,
)


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CircuitPayload(SnapshotBaseModel):
    id: str
    carrier: str
    type: CircuitType
    purpose: CircuitPurpose
    status: CircuitStatus = CircuitStatus.ACTIVE
    bandwidth: str = ""
    upload_bandwidth: str | None = None
    monthlycost: Decimal = Field(default=Decimal(0), ge=0)
    installation_cost: Decimal = Field(default=Decimal(0), ge=0)
    static_ips: int = Field(default=0, ge=0)
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    contract_term: int = Field(default=12, ge=0)
    billing: BillingFrequency = BillingFrequency.MONTHLY
    usage_charges: bool = False
    notes: str | None = None
    location_id: str = ""
    replaces_id: str | None = None

    @field_validator("id", "replaces_id", "location_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: object) -> object:
        # upstream stores emit numeric ids as well as uuids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("contract_start_date", "contract_end_date", "upload_bandwidth", mode="before")
    @classmethod
    def _blank_as_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CircuitSnapshotPayload(SnapshotBaseModel):
    proposal_id: str
    location_id: str
    circuits: list[CircuitPayload] = Field(default_factory=list["CircuitPayload"])

    @field_validator("proposal_id", "location_id", mode="before")
    @classmethod
    def _coerce_scope_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
