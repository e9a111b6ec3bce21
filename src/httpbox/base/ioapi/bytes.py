"""
bytes — базовые операции поверх FileStore.

Это "универсальная база": txt/csv и любые кастомные читатели.
"""

from __future__ import annotations

from httpbox.base.filestore.base import FileHandle, FileStore


def open_read(path: str, store: FileStore) -> FileHandle:
    return store.open(path)


def read_bytes(path: str, store: FileStore) -> bytes:
    return store.read_bytes(path)
