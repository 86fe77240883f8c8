"""Ports for the export collaborator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from circuitdiff.domain.reconciliation import ComparisonResult, CostImpact


@runtime_checkable
class ComparisonExporter(Protocol):
    """Write the unfiltered comparison to ``destination`` and return the written path."""

    file_suffix: str

    def __call__(
        self,
        result: ComparisonResult,
        *,
        impact: CostImpact,
        destination: Path,
    ) -> Path: ...


__all__ = ["ComparisonExporter"]
