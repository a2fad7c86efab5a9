"""Настройка логирования для приложения."""
from __future__ import annotations

import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL = logging.INFO


def init_logging(level: int | str = LOG_LEVEL) -> None:
    """Инициализировать логирование сервиса генерации и Uvicorn."""

    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> Logger:
    """Получить настроенный логгер по имени."""

    return logging.getLogger(name)
