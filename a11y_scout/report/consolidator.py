# File: a11y_scout/report/consolidator.py
"""a11y_scout.report.consolidator: сводный HTML-отчёт по результатам сканирования (Jinja2)."""

from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from a11y_scout.logger import logger
from a11y_scout.report.store import ScanResultStore
from a11y_scout.report.summary import ScanSummary

__all__ = ["DEFAULT_TEMPLATE_DIR", "REPORT_TEMPLATE", "ReportConsolidator", "ConsolidatedReportGenerator"]

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
REPORT_TEMPLATE = "index.html.j2"


class ReportConsolidator(Protocol):
    async def generate_report(
        self, url: str, scan_started: datetime, scan_ended: datetime
    ) -> str: ...


class ConsolidatedReportGenerator:
    """Собирает результаты страниц за окно сканирования и рендерит сводный отчёт.

    Args:
        store: источник результатов страниц.
        template_dir: директория с Jinja2-шаблонами (по умолчанию встроенная).

    Пример:
    ```python
    generator = ConsolidatedReportGenerator(JsonScanResultStore("out/scan-results"))
    html = await generator.generate_report("https://example.com", started, ended)
    ```
    """

    def __init__(
        self,
        store: ScanResultStore,
        template_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self.store = store
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
        )

    async def generate_report(self, url: str, scan_started: datetime, scan_ended: datetime) -> str:
        pages = await asyncio.to_thread(self.store.load_results)
        summary = ScanSummary(url=url, started_at=scan_started, ended_at=scan_ended, pages=pages)
        logger.debug(
            "Summary for %s: %d pages, %d failed, %d errors",
            url,
            summary.total,
            summary.failed,
            summary.errored,
        )
        return self.render(summary)

    def render(self, summary: ScanSummary) -> str:
        template = self.env.get_template(REPORT_TEMPLATE)
        return template.render(summary=summary, pages=summary.pages)
