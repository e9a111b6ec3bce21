"""
cache — зеркало скачанных файлов на локальном диске.

Раскладка:
- файл кэша лежит по пути cache_dir / <логический путь>
- каталоги создаются по требованию
- наличие файла и есть весь индекс кэша: ни ETag, ни времени, ни размера
  рядом не хранится, свежесть не проверяется

Кэш бессрочный: если файл однажды попал в кэш, сеть для этого пути больше не используется.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from httpbox.base.filestore.file import StoreFile

logger = logging.getLogger(__name__)

CACHE_DIR_MODE = 0o700


def cache_path(cache_dir: str | os.PathLike, path: str) -> Path:
    """Путь файла кэша для логического пути."""
    return Path(cache_dir) / path


def mirror_to_cache(cache_dir: str | os.PathLike, file: StoreFile) -> StoreFile:
    """
    Копирует поток file в кэш и возвращает новый StoreFile поверх копии на диске.

    Исходный file закрывается (соединение освобождается).
    size/mtime переносятся из file: значения источника важнее stat() копии.

    Ошибки создания каталога/файла и копирования пробрасываются как OSError.
    """
    target = cache_path(cache_dir, file.path)
    target.parent.mkdir(parents=True, exist_ok=True, mode=CACHE_DIR_MODE)

    cached = target.open("w+b")
    try:
        shutil.copyfileobj(file, cached)
        cached.seek(0)
    except Exception:
        cached.close()
        raise

    file.close()
    logger.debug("filestore.cache_written path=%s target=%s", file.path, target)
    return StoreFile(path=file.path, body=cached, size=file.size, mtime=file.mtime)
