# File: a11y_scout/guard.py
"""a11y_scout.guard: проверка состояния прошлого сканирования на диске."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Final, Union

from a11y_scout.config import ScanArguments

__all__ = ["GUIDANCE_MESSAGE", "ScanStateGuard"]

GUIDANCE_MESSAGE: Final[str] = (
    "The last scan result was found on a disk. Use --continue option to continue scan "
    "for the last URL provided, or --restart option to delete the last scan result."
)

DirectoryExists = Callable[[Union[str, Path]], bool]


class ScanStateGuard:
    """Разрешает или запрещает новый запуск по наличию каталога результатов.

    Проверяется только существование пути: пустой или посторонний каталог
    тоже считается результатом прошлого сканирования.
    """

    guidance: Final[str] = GUIDANCE_MESSAGE

    def __init__(self, directory_exists: DirectoryExists = os.path.exists) -> None:
        self._directory_exists = directory_exists

    def can_proceed(self, args: ScanArguments) -> bool:
        if self._directory_exists(args.output) and not args.restart and not args.continue_scan:
            return False
        return True
