"""Excel exporter for circuit comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from circuitdiff.domain.errors import ExportError
from circuitdiff.domain.model import ChangeKind

from .rows import EXPORT_HEADERS, export_rows

if TYPE_CHECKING:
    from pathlib import Path

    from openpyxl.worksheet.worksheet import Worksheet

    from circuitdiff.domain.reconciliation import ComparisonResult, CostImpact

CURRENCY_FORMAT: Final = '"$"#,##0.00'
SUMMARY_SHEET: Final = "Summary"
_MONEY_COLUMNS: Final = (
    EXPORT_HEADERS.index("Monthly Cost") + 1,
    EXPORT_HEADERS.index("Installation Cost") + 1,
)


@dataclass(frozen=True, slots=True)
class ExcelComparisonExporter:
    """Write a workbook with a summary sheet and one sheet per change bucket."""

    file_suffix: str = ".xlsx"
    max_column_width: int = 60

    def __call__(
        self,
        result: ComparisonResult,
        *,
        impact: CostImpact,
        destination: Path,
    ) -> Path:
        path = destination if destination.suffix else destination.with_suffix(self.file_suffix)
        if path.suffix.lower() != self.file_suffix:
            raise ExportError(f"Excel export requires a {self.file_suffix} file, got {path.name}")

        workbook = Workbook()
        summary = workbook.active
        summary.title = SUMMARY_SHEET
        self._write_summary(summary, result, impact)

        sheets = {kind: workbook.create_sheet(kind.value.capitalize()) for kind in ChangeKind}
        for sheet in sheets.values():
            sheet.append(list(EXPORT_HEADERS))
            for cell in sheet[1]:
                cell.font = Font(bold=True)
            sheet.freeze_panes = "A2"

        for row in export_rows(result):
            sheets[row.change].append(row.as_list())

        for sheet in sheets.values():
            for column in _MONEY_COLUMNS:
                for (cell,) in sheet.iter_rows(min_row=2, min_col=column, max_col=column):
                    cell.number_format = CURRENCY_FORMAT
            self._autosize_columns(sheet)

        workbook.save(path)
        return path

    def _write_summary(
        self, sheet: Worksheet, result: ComparisonResult, impact: CostImpact
    ) -> None:
        sheet.append(["Metric", "Value"])
        for cell in sheet[1]:
            cell.font = Font(bold=True)
        sheet.append(["Added circuits", len(result.added)])
        sheet.append(["Removed circuits", len(result.removed)])
        sheet.append(["Modified circuits", len(result.modified)])
        sheet.append(["Monthly impact", impact.monthly_impact])
        sheet.append(["One-time impact", impact.one_time_impact])
        for row in (5, 6):
            sheet.cell(row=row, column=2).number_format = CURRENCY_FORMAT
        self._autosize_columns(sheet)

    def _autosize_columns(self, sheet: Worksheet) -> None:
        for index, cells in enumerate(sheet.columns, start=1):
            width = max(
                (len(str(cell.value)) for cell in cells if cell.value is not None), default=0
            )
            sheet.column_dimensions[get_column_letter(index)].width = min(
                width + 2, self.max_column_width
            )
