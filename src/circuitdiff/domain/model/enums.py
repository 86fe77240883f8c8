"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CircuitType(StrEnum):
    MPLS = "MPLS"
    DIA = "DIA"
    BROADBAND = "Broadband"


class CircuitPurpose(StrEnum):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    BACKUP = "Backup"


class CircuitStatus(StrEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    QUOTED = "Quoted"


class BillingFrequency(StrEnum):
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    ANNUALLY = "Annually"


class Side(StrEnum):
    """Which half of a comparison a circuit set represents."""

    ACTIVE = "active"
    PROPOSED = "proposed"


class ChangeKind(StrEnum):
    """Classification bucket of a reconciled circuit."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
