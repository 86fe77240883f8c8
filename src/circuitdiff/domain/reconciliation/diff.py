"""Field-level differences between two versions of one circuit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol

from .contracts import FieldDifference

if TYPE_CHECKING:
    from circuitdiff.domain.model import Circuit

# Public field name -> Circuit attribute. Identity fields are never diffed.
COMPARABLE_FIELDS: Final[dict[str, str]] = {
    "carrier": "carrier",
    "type": "type",
    "purpose": "purpose",
    "status": "status",
    "bandwidth": "bandwidth",
    "upload_bandwidth": "upload_bandwidth",
    "monthlycost": "monthly_cost",
    "installation_cost": "installation_cost",
    "static_ips": "static_ips",
    "contract_start_date": "contract_start_date",
    "contract_end_date": "contract_end_date",
    "contract_term": "contract_term",
    "billing": "billing",
    "usage_charges": "usage_charges",
    "notes": "notes",
    "location_id": "location_id",
}


class DiffCircuits(Protocol):
    """Compute the changed fields between an active and a proposed circuit."""

    def __call__(self, active: Circuit, proposed: Circuit) -> tuple[FieldDifference, ...]: ...


def diff_circuits(active: Circuit, proposed: Circuit) -> tuple[FieldDifference, ...]:
    """Return one ``FieldDifference`` per comparable field whose value changed.

    An empty tuple means the pair is unchanged.
    """

    differences: list[FieldDifference] = []
    for field, attribute in COMPARABLE_FIELDS.items():
        old = getattr(active, attribute)
        new = getattr(proposed, attribute)
        if not values_equal(old, new):
            differences.append(FieldDifference(field=field, old=old, new=new))
    return tuple(differences)


def values_equal(old: object, new: object) -> bool:
    """Strict value equality that never raises.

    Booleans never equal numbers, and values whose comparison fails are equal
    only when they are the same object.
    """

    if old is new:
        return True
    if isinstance(old, bool) != isinstance(new, bool):
        return False
    try:
        return bool(old == new)
    except Exception:  # noqa: BLE001
        return False
