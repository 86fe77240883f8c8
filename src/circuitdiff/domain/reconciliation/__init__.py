"""Circuit reconciliation core.

Layered flow:
1) match active and proposed circuits by an injectable identity key
2) diff common pairs field by field, dropping unchanged pairs
3) aggregate the monthly and one-time cost impact of the classified result
"""

from __future__ import annotations

from .contracts import (
    CommonPair,
    ComparisonResult,
    FieldDifference,
    MatchKey,
    MatchResult,
    ModifiedCircuit,
)
from .diff import COMPARABLE_FIELDS, diff_circuits, values_equal
from .engine import ComparisonEngine, compare_circuit_sets
from .impact import CostImpact, aggregate_cost_impact
from .match import match_by_id, match_by_revision, match_circuits

__all__ = [
    "COMPARABLE_FIELDS",
    "CommonPair",
    "ComparisonEngine",
    "ComparisonResult",
    "CostImpact",
    "FieldDifference",
    "MatchKey",
    "MatchResult",
    "ModifiedCircuit",
    "aggregate_cost_impact",
    "compare_circuit_sets",
    "diff_circuits",
    "match_by_id",
    "match_by_revision",
    "match_circuits",
    "values_equal",
]
