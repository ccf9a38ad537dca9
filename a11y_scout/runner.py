# === FILE: a11y_scout/runner.py ===
"""
Полный цикл одной команды сканирования: проверка состояния → обход → сводный отчёт → запись.
"""
from __future__ import annotations

from pathlib import Path
from typing import Final, Optional

from a11y_scout.config import ScanArguments
from a11y_scout.crawler.orchestrator import CrawlOrchestrator
from a11y_scout.crawler.models import ScanSession
from a11y_scout.guard import ScanStateGuard
from a11y_scout.logger import logger
from a11y_scout.report.consolidator import ReportConsolidator
from a11y_scout.report.disk_writer import ReportWriter

__all__ = ["REPORT_BASE_NAME", "REPORT_EXTENSION", "ScanCommandRunner"]

REPORT_BASE_NAME: Final[str] = "index"
REPORT_EXTENSION: Final[str] = "html"


class ScanCommandRunner:
    """Последовательно выполняет этапы сканирования.

    Ошибки обхода, генерации и записи отчёта не перехватываются.
    """

    def __init__(
        self,
        orchestrator: CrawlOrchestrator,
        report_generator: ReportConsolidator,
        report_writer: ReportWriter,
        state_guard: Optional[ScanStateGuard] = None,
    ) -> None:
        self.orchestrator = orchestrator
        self.report_generator = report_generator
        self.report_writer = report_writer
        self.state_guard = state_guard or ScanStateGuard()

    async def run_command(self, args: ScanArguments) -> Optional[Path]:
        """Запускает сканирование; возвращает путь отчёта или None, если запуск отклонён."""
        if not self.state_guard.can_proceed(args):
            logger.warning(self.state_guard.guidance)
            return None

        logger.info("Starting scanning the website under the URL %s", args.url)
        session = await self.orchestrator.run(args)

        return await self._generate_consolidated_report(args, session)

    async def _generate_consolidated_report(self, args: ScanArguments, session: ScanSession) -> Path:
        logger.info("Generating summary scan report...")
        content = await self.report_generator.generate_report(
            session.url, session.started_at, session.ended_at
        )
        location = await self.report_writer.write_to_directory(
            args.output, REPORT_BASE_NAME, REPORT_EXTENSION, content
        )
        logger.info("Summary report was saved as %s", location)
        return location
