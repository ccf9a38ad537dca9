"""a11y_scout.crawler: contract of the external crawl engine and its orchestration."""

from a11y_scout.crawler.models import CrawlerRunOptions, ScanSession
from a11y_scout.crawler.orchestrator import Crawler, CrawlOrchestrator

__all__ = ["Crawler", "CrawlOrchestrator", "CrawlerRunOptions", "ScanSession"]
