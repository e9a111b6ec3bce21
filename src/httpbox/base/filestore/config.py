"""
config — настройки HttpFileStore.

Настройки задаются один раз при создании store и дальше не меняются.
Глобальных значений по умолчанию нет: если session не передана,
HttpFileStore создаёт собственную requests.Session.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

import requests


@dataclass(frozen=True)
class HttpStoreConfig:
    """
    Поля:
    - session: HTTP-клиент (подменяет клиент по умолчанию)
    - cache_dir: корень локального кэша; None — кэш выключен
    - timeout: передаётся в requests как есть; None — без таймаута
    - headers: дополнительные заголовки для каждого запроса
    """

    session: requests.Session | None = None
    cache_dir: str | os.PathLike | None = None
    timeout: float | tuple[float, float] | None = None
    headers: Mapping[str, str] | None = None
