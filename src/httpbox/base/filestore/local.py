"""
LocalFileStore — реализация FileStore для локального каталога.

Используется:
- HttpFileStore читает через него свой кэш (корень = cache_dir)
- как локальная замена HttpFileStore для кода, написанного против FileStore

Правила путей те же, что у HttpFileStore:
- только логические пути (см. paths.is_valid_path), иначе InvalidPathError(op="open")
- итоговый путь обязан оставаться внутри root
- метаданные берутся из stat() файла на диске.
"""

from __future__ import annotations

import os
from pathlib import Path

from httpbox.base.filestore.base import FileStore
from httpbox.base.filestore.errors import path_error
from httpbox.base.filestore.file import StoreFile
from httpbox.base.filestore.paths import is_valid_path
from httpbox.base.filestore.types import FileStat

_OP_OPEN = "open"


class LocalFileStore(FileStore):
    """Локальная реализация FileStore."""

    def __init__(self, root: str | os.PathLike | None = None):
        # root — базовый каталог для логических путей; None — текущий каталог
        self._root = Path(root).expanduser().resolve() if root else Path.cwd().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _abs(self, path: str) -> Path:
        if not is_valid_path(path):
            raise path_error(_OP_OPEN, path)
        p = self._root / path
        # симлинки внутри дерева могут вести наружу
        if not p.resolve().is_relative_to(self._root):
            raise path_error(_OP_OPEN, path)
        return p

    def open(self, path: str) -> StoreFile:
        p = self._abs(path)
        fh = p.open("rb")
        try:
            st = os.fstat(fh.fileno())
        except OSError:
            fh.close()
            raise
        return StoreFile(path=path, body=fh, size=int(st.st_size), mtime=float(st.st_mtime))

    def stat(self, path: str) -> FileStat:
        p = self._abs(path)
        st = p.stat()
        return FileStat(
            path=path,
            is_file=p.is_file(),
            is_dir=p.is_dir(),
            size=int(st.st_size),
            mtime=float(st.st_mtime),
            atime=float(st.st_atime),
            ctime=float(st.st_ctime),
            mode=st.st_mode & 0o777,
        )
