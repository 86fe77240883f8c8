"""Translate snapshot payloads into domain circuit sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from circuitdiff.domain.model import Circuit, CircuitSet, SnapshotScope

if TYPE_CHECKING:
    from circuitdiff.domain.model import Side

    from .schema import CircuitPayload, CircuitSnapshotPayload


def translate_snapshot(payload: CircuitSnapshotPayload, *, side: Side) -> CircuitSet:
    scope = SnapshotScope(proposal_id=payload.proposal_id, location_id=payload.location_id)
    circuits = (
        translate_circuit(circuit, default_location=payload.location_id)
        for circuit in payload.circuits
    )
    return CircuitSet.of(scope, side, circuits)


def translate_circuit(circuit: CircuitPayload, *, default_location: str = "") -> Circuit:
    return Circuit(
        id=circuit.id,
        carrier=circuit.carrier,
        type=circuit.type,
        purpose=circuit.purpose,
        status=circuit.status,
        bandwidth=circuit.bandwidth,
        upload_bandwidth=circuit.upload_bandwidth,
        monthly_cost=circuit.monthlycost,
        installation_cost=circuit.installation_cost,
        static_ips=circuit.static_ips,
        contract_start_date=circuit.contract_start_date,
        contract_end_date=circuit.contract_end_date,
        contract_term=circuit.contract_term,
        billing=circuit.billing,
        usage_charges=circuit.usage_charges,
        notes=circuit.notes or "",
        location_id=circuit.location_id or default_location,
        replaces_id=circuit.replaces_id,
    )
