# File: tests/conftest.py
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

import pytest

from a11y_scout.config import ScanArguments
from a11y_scout.logger import logger


class FakeClock:
    """Returns increasing timestamps and records each read in *events*."""

    def __init__(self, events: List[str]) -> None:
        self.events = events
        self.times: List[datetime] = []
        self._next = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self._next
        self._next += timedelta(seconds=30)
        self.times.append(value)
        self.events.append("clock")
        return value


class FakeCrawler:
    def __init__(self, events: List[str], error: Exception | None = None) -> None:
        self.events = events
        self.error = error
        self.calls = []

    async def crawl(self, options) -> None:
        self.events.append("crawl")
        self.calls.append(options)
        if self.error is not None:
            raise self.error


class FakeReportGenerator:
    def __init__(self, events: List[str], content: str = "<html>report</html>") -> None:
        self.events = events
        self.content = content
        self.calls = []

    async def generate_report(self, url, scan_started, scan_ended) -> str:
        self.events.append("report")
        self.calls.append((url, scan_started, scan_ended))
        return self.content


class FakeReportWriter:
    def __init__(self, events: List[str]) -> None:
        self.events = events
        self.calls = []

    async def write_to_directory(self, output_dir, base_name, extension, content) -> Path:
        self.events.append("write")
        self.calls.append((output_dir, base_name, extension, content))
        return Path(output_dir) / f"{base_name}.{extension}"


@pytest.fixture()
def events() -> List[str]:
    """Shared call log used to check the order of pipeline steps."""
    return []


@pytest.fixture()
def clock(events) -> FakeClock:
    return FakeClock(events)


@pytest.fixture()
def crawler(events) -> FakeCrawler:
    return FakeCrawler(events)


@pytest.fixture()
def report_generator(events) -> FakeReportGenerator:
    return FakeReportGenerator(events)


@pytest.fixture()
def report_writer(events) -> FakeReportWriter:
    return FakeReportWriter(events)


@pytest.fixture()
def scan_args(tmp_path) -> ScanArguments:
    """Arguments pointing at a not yet existing output directory."""
    return ScanArguments(url="https://example.com", output=tmp_path / "run1")


@pytest.fixture()
def propagate_logs(monkeypatch):
    """Let caplog see records of the project logger (it does not propagate by default)."""
    monkeypatch.setattr(logger, "propagate", True)
