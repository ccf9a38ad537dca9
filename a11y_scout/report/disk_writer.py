# a11y_scout/report/disk_writer.py

"""
Сохранение содержимого отчёта в каталог результатов.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, Union

from a11y_scout.logger import logger

__all__ = ["ReportWriter", "ReportDiskWriter"]


class ReportWriter(Protocol):
    async def write_to_directory(
        self, output_dir: Union[str, Path], base_name: str, extension: str, content: str
    ) -> Path: ...


class ReportDiskWriter:
    """Пишет ``<output_dir>/<base_name>.<extension>`` и возвращает абсолютный путь.

    Повторная запись с теми же аргументами перезаписывает файл.
    """

    async def write_to_directory(
        self, output_dir: Union[str, Path], base_name: str, extension: str, content: str
    ) -> Path:
        target = self.report_path(output_dir, base_name, extension)
        await asyncio.to_thread(self._write, target, content)
        logger.debug("Report written: %s (%d chars)", target, len(content))
        return target

    @staticmethod
    def report_path(output_dir: Union[str, Path], base_name: str, extension: str) -> Path:
        return Path(output_dir).expanduser().absolute() / f"{base_name}.{extension}"

    @staticmethod
    def _write(target: Path, content: str) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
