"""CSV exporter for circuit comparisons."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .rows import EXPORT_HEADERS, export_rows

if TYPE_CHECKING:
    from pathlib import Path

    from circuitdiff.domain.reconciliation import ComparisonResult, CostImpact


@dataclass(frozen=True, slots=True)
class CsvComparisonExporter:
    """Write one CSV row per classified circuit."""

    file_suffix: str = ".csv"

    def __call__(
        self,
        result: ComparisonResult,
        *,
        impact: CostImpact,  # noqa: ARG002
        destination: Path,
    ) -> Path:
        path = destination if destination.suffix else destination.with_suffix(self.file_suffix)
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(EXPORT_HEADERS)
            for row in export_rows(result):
                writer.writerow(row.as_list())
        return path
