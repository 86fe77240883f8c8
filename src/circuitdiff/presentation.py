"""Display formatting at the presentation boundary.

Domain values stay numeric; these helpers turn them into US-locale strings for
renderers and exporters.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from circuitdiff.domain.reconciliation import FieldDifference

CENT: Final = Decimal("0.01")
EMPTY_VALUE: Final = "—"

FIELD_LABELS: Final[dict[str, str]] = {
    "carrier": "Carrier",
    "type": "Type",
    "purpose": "Purpose",
    "status": "Status",
    "bandwidth": "Bandwidth",
    "upload_bandwidth": "Upload bandwidth",
    "monthlycost": "Monthly cost",
    "installation_cost": "Installation cost",
    "static_ips": "Static IPs",
    "contract_start_date": "Contract start",
    "contract_end_date": "Contract end",
    "contract_term": "Contract term",
    "billing": "Billing",
    "usage_charges": "Usage charges",
    "notes": "Notes",
    "location_id": "Location",
}

MONEY_FIELDS: Final = frozenset({"monthlycost", "installation_cost"})


def format_currency(amount: Decimal | float) -> str:
    """Format ``amount`` like ``$1,234.50``; negatives as ``-$1,234.50``."""

    value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_signed_currency(amount: Decimal | float) -> str:
    """Format with an explicit ``+`` for non-negative amounts (impact display)."""

    formatted = format_currency(amount)
    return formatted if formatted.startswith("-") else f"+{formatted}"


def format_value(field: str, value: object) -> str:
    if value is None or value == "":
        return EMPTY_VALUE
    if field in MONEY_FIELDS and isinstance(value, Decimal | int | float):
        return format_currency(value)
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    if field == "contract_term":
        return f"{value} months"
    return str(value)


def field_label(field: str) -> str:
    return FIELD_LABELS.get(field, field.replace("_", " ").capitalize())


def format_difference(difference: FieldDifference) -> str:
    """Render ``"<Label>: <old> → <new>"``."""

    old = format_value(difference.field, difference.old)
    new = format_value(difference.field, difference.new)
    return f"{field_label(difference.field)}: {old} → {new}"
