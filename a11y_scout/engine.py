# File: a11y_scout/engine.py
"""a11y_scout.engine: сборка зависимостей и синхронный запуск одного сканирования."""

from __future__ import annotations

import asyncio
from contextlib import nullcontext
from pathlib import Path
from typing import Optional, Union

from a11y_scout.config import ScanArguments, load_config
from a11y_scout.crawler.orchestrator import Crawler, CrawlOrchestrator
from a11y_scout.guard import ScanStateGuard
from a11y_scout.logger import logger, scan_log
from a11y_scout.report.consolidator import ConsolidatedReportGenerator
from a11y_scout.report.disk_writer import ReportDiskWriter
from a11y_scout.report.store import RESULTS_DIRNAME, JsonScanResultStore
from a11y_scout.runner import ScanCommandRunner

__all__ = ["Engine"]


class Engine:
    """Фасад для внешнего кода и тестов: загрузка аргументов, сборка runner'а и запуск."""

    @staticmethod
    def load_arguments(path: Optional[Union[str, Path]]) -> ScanArguments:
        """Загружает аргументы сканирования из YAML/JSON."""
        return load_config(path)

    def __init__(
        self,
        crawler: Crawler,
        *,
        template_dir: Optional[Union[str, Path]] = None,
        write_scan_log: bool = True,
    ) -> None:
        """Инициализирует Engine с внешним краулером.

        При write_scan_log=True журнал запуска дублируется в файл <output>.log.
        """
        self.crawler = crawler
        self.template_dir = template_dir
        self.write_scan_log = write_scan_log

    def create_runner(self, output: Union[str, Path]) -> ScanCommandRunner:
        """Собирает ScanCommandRunner с компонентами по умолчанию для каталога output."""
        store = JsonScanResultStore(Path(output) / RESULTS_DIRNAME)
        return ScanCommandRunner(
            orchestrator=CrawlOrchestrator(self.crawler),
            report_generator=ConsolidatedReportGenerator(store, self.template_dir),
            report_writer=ReportDiskWriter(),
            state_guard=ScanStateGuard(),
        )

    def start_scan(self, args: ScanArguments) -> Optional[Path]:
        """Выполняет сканирование и возвращает путь к сводному отчёту (None, если запуск отклонён)."""
        runner = self.create_runner(args.output)
        with scan_log(args.output) if self.write_scan_log else nullcontext():
            try:
                return asyncio.run(runner.run_command(args))
            except Exception as exc:
                logger.error("Scanning failed: %s", exc)
                raise
