"""
txt — чтение текстовых файлов поверх FileStore.

Примечание:
- кодировка по умолчанию utf-8. Если источник отдаёт cp1251/cp866 — её можно передать явно.
- файл читается потоком через открытый handle, без промежуточной копии тела в bytes
"""

from __future__ import annotations

import io

from httpbox.base.filestore.base import FileStore


def open_text(path: str, store: FileStore, encoding: str = "utf-8") -> io.TextIOWrapper:
    """Открывает файл store как текстовый поток. Закрытие потока закрывает и файл."""
    handle = store.open(path)
    try:
        return io.TextIOWrapper(io.BufferedReader(handle), encoding=encoding, errors="replace")
    except Exception:
        handle.close()
        raise


def read_text(path: str, store: FileStore, encoding: str = "utf-8") -> str:
    """Читает текстовый файл целиком и возвращает строку."""
    with open_text(path, store, encoding=encoding) as f:
        return f.read()
