# File: a11y_scout/report/__init__.py
"""a11y_scout.report: сводка результатов, рендеринг HTML-отчёта и запись его на диск."""

from __future__ import annotations

from a11y_scout.report.consolidator import ConsolidatedReportGenerator, ReportConsolidator
from a11y_scout.report.disk_writer import ReportDiskWriter, ReportWriter
from a11y_scout.report.store import RESULTS_DIRNAME, JsonScanResultStore, ScanResultStore
from a11y_scout.report.summary import PageScanResult, ScanSummary

__all__ = [
    "ConsolidatedReportGenerator",
    "JsonScanResultStore",
    "PageScanResult",
    "RESULTS_DIRNAME",
    "ReportConsolidator",
    "ReportDiskWriter",
    "ReportWriter",
    "ScanResultStore",
    "ScanSummary",
]
