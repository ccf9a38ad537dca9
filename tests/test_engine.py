# File: tests/test_engine.py
"""End-to-end run of Engine with a crawler that leaves page results on disk."""
import json

import pytest

from a11y_scout.config import ScanArguments
from a11y_scout.engine import Engine
from a11y_scout.report.store import RESULTS_DIRNAME


class DiskCrawler:
    def __init__(self) -> None:
        self.options = []

    async def crawl(self, options) -> None:
        self.options.append(options)
        results = options.local_output_dir / RESULTS_DIRNAME
        results.mkdir(parents=True, exist_ok=True)
        (results / "page-1.json").write_text(
            json.dumps({"url": options.base_url, "status": "fail", "violations": 4}),
            encoding="utf-8",
        )


def test_start_scan_writes_index(tmp_path):
    crawler = DiskCrawler()
    args = ScanArguments(url="https://example.com", output=tmp_path / "run1")

    location = Engine(crawler).start_scan(args)

    assert location == (tmp_path / "run1" / "index.html").absolute()
    html = location.read_text(encoding="utf-8")
    assert "https://example.com" in html
    assert crawler.options[0].restart_crawl is False


def test_start_scan_rejected_on_existing_output(tmp_path):
    crawler = DiskCrawler()
    (tmp_path / "run1").mkdir()
    args = ScanArguments(url="https://example.com", output=tmp_path / "run1")

    assert Engine(crawler).start_scan(args) is None
    assert crawler.options == []
    assert not (tmp_path / "run1" / "index.html").exists()


def test_continue_resumes_existing_output(tmp_path):
    crawler = DiskCrawler()
    (tmp_path / "run1").mkdir()
    args = ScanArguments(url="https://example.com", output=tmp_path / "run1", continue_scan=True)

    location = Engine(crawler).start_scan(args)

    assert location is not None and location.exists()
    assert crawler.options[0].restart_crawl is False


def test_start_scan_reraises_crawl_error(tmp_path):
    class FailingCrawler:
        async def crawl(self, options) -> None:
            raise ConnectionError("site unreachable")

    args = ScanArguments(url="https://example.com", output=tmp_path / "run1")

    with pytest.raises(ConnectionError):
        Engine(FailingCrawler()).start_scan(args)


def test_load_arguments(tmp_path):
    cfg = tmp_path / "scan.json"
    cfg.write_text(json.dumps({"url": "https://example.com", "output": str(tmp_path / "o")}), encoding="utf-8")

    args = Engine.load_arguments(cfg)

    assert args.output == tmp_path / "o"


def test_start_scan_writes_log_beside_output(tmp_path):
    args = ScanArguments(url="https://example.com", output=tmp_path / "run1")

    location = Engine(DiskCrawler()).start_scan(args)

    log_file = tmp_path / "run1.log"
    text = log_file.read_text(encoding="utf-8")
    assert "Starting scanning the website under the URL https://example.com" in text
    assert f"Summary report was saved as {location}" in text
    assert "run1.log" not in [p.name for p in (tmp_path / "run1").iterdir()]


def test_scan_log_records_guidance_and_failures(tmp_path):
    class FailingCrawler:
        async def crawl(self, options) -> None:
            raise ConnectionError("site unreachable")

    (tmp_path / "old").mkdir()
    Engine(DiskCrawler()).start_scan(ScanArguments(url="https://example.com", output=tmp_path / "old"))
    assert "--restart" in (tmp_path / "old.log").read_text(encoding="utf-8")

    with pytest.raises(ConnectionError):
        Engine(FailingCrawler()).start_scan(
            ScanArguments(url="https://example.com", output=tmp_path / "new")
        )
    assert "Scanning failed: site unreachable" in (tmp_path / "new.log").read_text(encoding="utf-8")


def test_scan_log_can_be_disabled(tmp_path):
    args = ScanArguments(url="https://example.com", output=tmp_path / "run1")

    Engine(DiskCrawler(), write_scan_log=False).start_scan(args)

    assert not (tmp_path / "run1.log").exists()
