# File: a11y_scout/report/summary.py
"""a11y_scout.report.summary: модели результатов страниц и сводка сканирования."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PageScanResult(BaseModel):
    """Результат проверки одной страницы, записанный краулером."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    url: str
    status: Literal["pass", "fail", "error"] = "pass"
    violations: int = Field(0, ge=0)
    error: Optional[str] = None
    scanned_at: Optional[datetime] = Field(None, alias="scannedAt")


@dataclass(slots=True)
class ScanSummary:
    """Сводка по сканированию сайта за временное окно."""

    url: str
    started_at: datetime
    ended_at: datetime
    pages: List[PageScanResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.pages)

    @property
    def passed(self) -> int:
        return sum(1 for p in self.pages if p.status == "pass")

    @property
    def failed(self) -> int:
        return sum(1 for p in self.pages if p.status == "fail")

    @property
    def errored(self) -> int:
        return sum(1 for p in self.pages if p.status == "error")

    @property
    def violations(self) -> int:
        return sum(p.violations for p in self.pages)

    @property
    def duration_seconds(self) -> float:
        return (self.ended_at - self.started_at).total_seconds()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat(),
            "duration_seconds": self.duration_seconds,
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errored": self.errored,
            "violations": self.violations,
            "pages": [p.model_dump(mode="json") for p in self.pages],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление сводки."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)
