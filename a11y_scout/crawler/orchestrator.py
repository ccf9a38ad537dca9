# === FILE: a11y_scout/crawler/orchestrator.py ===
"""
Запуск внешнего краулера и фиксация временного окна сканирования.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Protocol

from a11y_scout.config import ScanArguments
from a11y_scout.crawler.models import CrawlerRunOptions, ScanSession
from a11y_scout.logger import logger

__all__ = ["Crawler", "CrawlOrchestrator", "utc_now"]


class Crawler(Protocol):
    """Crawl engine contract: walks the site and stores its artifacts under local_output_dir."""

    async def crawl(self, options: CrawlerRunOptions) -> None: ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CrawlOrchestrator:
    """Вызывает краулер с нормализованной конфигурацией и возвращает ScanSession.

    Проверка состояния прошлого сканирования здесь не выполняется:
    это делает вызывающий код. Ошибки краулера пробрасываются как есть,
    без повторов и без очистки каталога результатов.
    """

    def __init__(self, crawler: Crawler, clock: Callable[[], datetime] = utc_now) -> None:
        self.crawler = crawler
        self._clock = clock

    async def run(self, args: ScanArguments) -> ScanSession:
        options = CrawlerRunOptions.from_scan_arguments(args)
        logger.debug("Crawler options: %s", options)

        session = ScanSession(url=args.url, started_at=self._clock())
        await self.crawler.crawl(options)
        session.ended_at = self._clock()

        logger.debug("Crawl of %s finished in %s", session.url, session.duration)
        return session
