"""
FileStore — универсальный интерфейс чтения файлов по логическим путям.

Принцип:
- FileStore отвечает только за "открыть" и "посмотреть метаданные"
- форматы (csv/txt и т.д.) живут выше (в ioapi)
- код, написанный против FileStore, одинаково работает с локальным деревом
  и с удалённым HTTP-источником

Почему интерфейс узкий:
- у HTTP нет каталогов, листинга и записи, поэтому контракт только на чтение.

Важно:
- read_bytes/exists/is_file/is_dir имеют дефолтные реализации поверх open/stat,
  чтобы бэкенды можно было реализовать минимально.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from httpbox.base.filestore.types import FileStat


@runtime_checkable
class FileHandle(Protocol):
    """Открытый файл: поток байтов + метаданные."""

    def stat(self) -> FileStat:
        ...

    def read(self, size: int = -1) -> bytes | None:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> FileHandle:
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...


class FileStore(Protocol):
    """Универсальный транспорт файлов (только чтение)."""

    # --- Базовые операции ---

    def open(self, path: str) -> FileHandle:
        """Открывает файл на чтение."""
        ...

    def stat(self, path: str) -> FileStat:
        """Возвращает метаданные файла."""
        ...

    # --- Дефолтные "удобные" методы ---

    def open_read(self, path: str) -> FileHandle:
        """Синоним open()."""
        return self.open(path)

    def read_bytes(self, path: str) -> bytes:
        """Читает файл целиком (байтами)."""
        with self.open(path) as f:
            return f.read()

    def exists(self, path: str) -> bool:
        """Проверяет существование файла. Другие ошибки пробрасываются."""
        try:
            self.stat(path)
        except FileNotFoundError:
            return False
        return True

    def is_file(self, path: str) -> bool:
        """Проверяет, что путь существует и является файлом."""
        try:
            return self.stat(path).is_file
        except FileNotFoundError:
            return False

    def is_dir(self, path: str) -> bool:
        """Проверяет, что путь существует и является каталогом."""
        try:
            return self.stat(path).is_dir
        except FileNotFoundError:
            return False
