"""
Модуль для загрузки и валидации конфигурации обхода SiteMapper.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ("CrawlConfig", "DEFAULT_IGNORE_SUFFIXES", "read_config_file", "load_config")

DEFAULT_IGNORE_SUFFIXES: Tuple[str, ...] = ("pdf", "png", "jpeg")


class CrawlConfig(BaseModel):
    """Конфигурация одного запуска обхода. Неизменяема после создания."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., min_length=1, description="Стартовый URL обхода.")
    domain: Optional[str] = Field(None, description="Домен-фильтр; по умолчанию хост base_url.")
    ignore_suffixes: Tuple[str, ...] = Field(
        DEFAULT_IGNORE_SUFFIXES, description="Суффиксы URL, которые не загружаются."
    )
    queue_capacity: int = Field(100, ge=1, description="Ёмкость очереди фронтира.")
    workers: int = Field(8, ge=1, description="Число воркеров, загружающих страницы.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("SiteMapper/0.1", min_length=1, description="Заголовок User-Agent.")

    @field_validator("ignore_suffixes", mode="before")
    def _split_suffixes(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            return tuple(s.strip() for s in v if isinstance(s, str) and s.strip())
        return v

    @field_validator("domain", mode="before")
    def _empty_domain_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


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


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает сырые данные без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlConfig:
    """
    Собирает CrawlConfig из файла (если задан) и переопределений.
    Переопределения со значением None игнорируются.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlConfig(**data)
