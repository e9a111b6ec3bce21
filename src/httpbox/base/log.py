"""
log — подключение логов httpbox.

Модули httpbox пишут в logging.getLogger(__name__) и сами обработчики не ставят.
init_logging() — для скриптов и ноутбуков, где нужно быстро увидеть,
что реально уходит в сеть и что берётся из кэша.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] %(message)s"


def init_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """Ставит StreamHandler на корневой логгер (старые обработчики снимаются)."""
    root_logger = logging.getLogger()

    level_name = str(level).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid logging level: {level}")

    root_logger.setLevel(numeric)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(numeric)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)


__all__ = ["init_logging"]
