from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from circuitdiff.domain.model import CircuitStatus
from circuitdiff.domain.reconciliation import FieldDifference
from circuitdiff.presentation import (
    format_currency,
    format_difference,
    format_signed_currency,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal(0), "$0.00"),
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("-1234.5"), "-$1,234.50"),
        (Decimal("0.005"), "$0.01"),
        (1500, "$1,500.00"),
    ],
)
def test_format_currency(amount: Decimal | int, expected: str) -> None:
    assert format_currency(amount) == expected


def test_format_signed_currency() -> None:
    assert format_signed_currency(Decimal(450)) == "+$450.00"
    assert format_signed_currency(Decimal(0)) == "+$0.00"
    assert format_signed_currency(Decimal(-20)) == "-$20.00"


@pytest.mark.parametrize(
    ("difference", "expected"),
    [
        (
            FieldDifference(field="monthlycost", old=Decimal(500), new=Decimal(650)),
            "Monthly cost: $500.00 → $650.00",
        ),
        (FieldDifference(field="usage_charges", old=False, new=True), "Usage charges: No → Yes"),
        (
            FieldDifference(field="contract_end_date", old=None, new=date(2027, 6, 30)),
            "Contract end: — → 2027-06-30",
        ),
        (
            FieldDifference(field="status", old=CircuitStatus.ACTIVE, new=CircuitStatus.QUOTED),
            "Status: Active → Quoted",
        ),
        (
            FieldDifference(field="contract_term", old=12, new=36),
            "Contract term: 12 months → 36 months",
        ),
        (FieldDifference(field="notes", old="", new="Upgrade"), "Notes: — → Upgrade"),
    ],
)
def test_format_difference(difference: FieldDifference, expected: str) -> None:
    assert format_difference(difference) == expected
