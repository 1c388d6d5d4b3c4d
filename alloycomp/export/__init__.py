"""Export: text/PDF reports and data export (CSV, JSON)."""

from alloycomp.export.csv_export import CsvExporter
from alloycomp.export.json_export import JsonExporter
from alloycomp.export.pdf_report import PdfReportExporter
from alloycomp.export.text_report import (
    ReportRow,
    composition_report,
    format_report,
    log_composition,
)

__all__ = [
    "CsvExporter",
    "JsonExporter",
    "PdfReportExporter",
    "ReportRow",
    "composition_report",
    "format_report",
    "log_composition",
]
