# a11y_scout/crawler/models.py
"""
Data models shared by the orchestrator and the crawl engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

from a11y_scout.config import ScanArguments


def _copy(values: Optional[List[str]]) -> Optional[List[str]]:
    return None if values is None else list(values)


@dataclass(frozen=True, slots=True)
class CrawlerRunOptions:
    """Configuration handed to the crawl engine, one field per scan argument."""

    base_url: str
    simulate: bool
    selectors: Optional[List[str]]
    local_output_dir: Path
    max_requests_per_crawl: Optional[int]
    restart_crawl: bool
    snapshot: bool
    memory_mbytes: Optional[int]
    silent_mode: bool
    input_file: Optional[Path]
    existing_urls: Optional[List[str]]
    discovery_patterns: Optional[List[str]]

    @classmethod
    def from_scan_arguments(cls, args: ScanArguments) -> CrawlerRunOptions:
        return cls(
            base_url=args.url,
            simulate=args.simulate,
            selectors=_copy(args.selectors),
            local_output_dir=args.output,
            max_requests_per_crawl=args.max_urls,
            restart_crawl=args.restart,
            snapshot=args.snapshot,
            memory_mbytes=args.memory_mbytes,
            silent_mode=args.silent_mode,
            input_file=args.input_file,
            existing_urls=_copy(args.existing_urls),
            discovery_patterns=_copy(args.discovery_patterns),
        )


@dataclass(slots=True)
class ScanSession:
    """Time window of a single crawl run."""

    url: str
    started_at: datetime
    ended_at: Optional[datetime] = None

    @property
    def duration(self) -> Optional[timedelta]:
        if self.ended_at is None:
            return None
        return self.ended_at - self.started_at
