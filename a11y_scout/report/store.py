# a11y_scout/report/store.py

"""
Чтение результатов страниц, которые краулер оставил на диске.

Каждый ``*.json`` файл содержит один объект результата или список таких объектов.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Protocol, Union

from a11y_scout.logger import logger
from a11y_scout.report.summary import PageScanResult

__all__ = ["RESULTS_DIRNAME", "ScanResultStore", "JsonScanResultStore"]

RESULTS_DIRNAME = "scan-results"


class ScanResultStore(Protocol):
    def load_results(self) -> List[PageScanResult]: ...


class JsonScanResultStore:
    """Результаты из каталога ``<output>/scan-results``, в порядке имён файлов."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def load_results(self) -> List[PageScanResult]:
        if not self.directory.is_dir():
            logger.warning("Scan results directory not found: %s", self.directory)
            return []

        results: List[PageScanResult] = []
        for path in sorted(self.directory.glob("*.json")):
            for entry in self._read_entries(path):
                if not isinstance(entry, dict):
                    raise TypeError(
                        f"Запись результата в {path} должна быть mapping, получено {type(entry).__name__}"
                    )
                results.append(PageScanResult.model_validate(entry))

        logger.debug("Loaded %d page results from %s", len(results), self.directory)
        return results

    @staticmethod
    def _read_entries(path: Path) -> List[Any]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
        return data if isinstance(data, list) else [data]
