"""Comparison export adapters."""

from __future__ import annotations

from .csv_file import CsvComparisonExporter
from .excel import ExcelComparisonExporter
from .rows import EXPORT_HEADERS, ExportRow, export_rows

__all__ = [
    "EXPORT_HEADERS",
    "CsvComparisonExporter",
    "ExcelComparisonExporter",
    "ExportRow",
    "export_rows",
]
