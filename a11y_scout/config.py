# === FILE: a11y_scout/config.py ===
"""
Модуль для загрузки и валидации аргументов сканирования A11yScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


class ScanArguments(BaseModel):
    """Аргументы одного запуска сканирования (только для чтения)."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    url: str = Field(..., min_length=1, description="Корневой URL сайта.")
    output: Path = Field(..., description="Каталог результатов сканирования.")
    restart: bool = Field(False, description="Удалить результат прошлого сканирования.")
    continue_scan: bool = Field(
        False, alias="continue", description="Продолжить прошлое сканирование."
    )

    # Параметры, передаваемые краулеру без изменений.
    simulate: bool = False
    selectors: Optional[List[str]] = None
    max_urls: Optional[int] = Field(None, alias="maxUrls", ge=1)
    snapshot: bool = False
    memory_mbytes: Optional[int] = Field(None, alias="memoryMBytes", ge=1)
    silent_mode: bool = Field(False, alias="silentMode")
    input_file: Optional[Path] = Field(None, alias="inputFile")
    existing_urls: Optional[List[str]] = Field(None, alias="existingUrls")
    discovery_patterns: Optional[List[str]] = Field(None, alias="discoveryPatterns")

    @field_validator("url", mode="before")
    def _strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def _check_single_mode(self) -> ScanArguments:
        if self.restart and self.continue_scan:
            raise ValueError("Options 'restart' and 'continue' are mutually exclusive")
        return self


_DEFAULT_CFG = Path("configs/scan.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScanArguments:
    """
    Читает YAML или JSON и возвращает проверенный объект ScanArguments.
    При отсутствии файла бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ScanArguments(**data)


__all__ = ["ScanArguments", "ValidationError", "load_config"]
