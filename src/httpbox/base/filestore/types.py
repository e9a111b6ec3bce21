"""
types — типы для FileStore.

Назначение:
- дать единый переносимый тип метаданных файла
- не привязываться к конкретному backend (http/local)

Принцип:
- поля опциональны: HTTP-источник может не прислать Content-Length или Last-Modified,
  и это не ошибка, а просто отсутствие значения
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePosixPath

# HTTP не знает про права: всё, что отдаёт источник, доступно только на чтение.
READ_ONLY_MODE = 0o444


@dataclass(frozen=True, slots=True)
class FileStat:
    """Метаданные файла.

    path — логический путь (как его передал вызывающий код),
    name — последний сегмент пути.
    """

    path: str
    is_file: bool
    is_dir: bool
    size: int | None = None
    mtime: float | None = None
    atime: float | None = None
    ctime: float | None = None
    mode: int | None = None

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def modified(self) -> datetime | None:
        """mtime в виде datetime (UTC) или None."""
        if self.mtime is None:
            return None
        return datetime.fromtimestamp(self.mtime, tz=timezone.utc)
