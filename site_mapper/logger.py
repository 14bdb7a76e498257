"""Логирование SiteMapper.

Все сообщения идут в логгер ``"SiteMapper"`` и его потомков
(``"SiteMapper.crawler"``, ``"SiteMapper.engine"`` ...). Консольный вывод
пишется в *stderr*, чтобы stdout оставался под напечатанную карту сайта::

    from site_mapper.logger import get_logger
    log = get_logger("crawler")
    log.info("Queued %s", url)

Обработчики ставит только :func:`configure` (CLI вызывает её через
:func:`init_logging`); дочерние логгеры пропускают записи наверх.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteMapper"

#: размер одного лог-файла до ротации и число хранимых архивов
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

LevelT = Union[int, str]


class StderrHandler(logging.StreamHandler):
    """StreamHandler, который берёт ``sys.stderr`` в момент записи.

    Поток не запоминается при создании, поэтому подмена stderr
    (click CliRunner, pytest capsys) не оставляет логгер с закрытым потоком.
    """

    def __init__(self, level: LevelT = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_level(level: LevelT) -> int:
    """``"debug"`` / ``"DEBUG"`` / ``10`` -> ``10``; неизвестное имя даёт ValueError."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def build_handlers(log_file: Union[str, Path, None], log_format: str) -> List[logging.Handler]:
    formatter = logging.Formatter(log_format)
    handlers: List[logging.Handler] = [StderrHandler()]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: LevelT = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Переустановить обработчики корневого логгера проекта и вернуть его.

    Старые обработчики закрываются (в том числе файловые), так что повторный
    вызов не дублирует вывод.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(resolve_level(level))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in build_handlers(log_file, log_format):
        root.addHandler(handler)
    root.propagate = False
    return root


def init_logging(
    level: LevelT = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    return configure(level=level, log_file=log_file, log_format=log_format)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Логгер ``SiteMapper.<name>`` (или сам ``SiteMapper`` без имени)."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger: logging.Logger = init_logging()

__all__ = [
    "DEFAULT_FORMAT",
    "LOGGER_NAME",
    "StderrHandler",
    "configure",
    "get_logger",
    "init_logging",
    "logger",
]
