"""
httpbox — удалённый HTTP-источник как дерево файлов только для чтения.

Рекомендованный импорт:
    from httpbox import HttpFileStore, HttpStoreConfig
"""

from httpbox.base.filestore import (
    FileStat,
    FileStore,
    HttpFileStore,
    HttpStoreConfig,
    LocalFileStore,
    PathError,
    StatusError,
)

__all__ = [
    "FileStat",
    "FileStore",
    "HttpFileStore",
    "HttpStoreConfig",
    "LocalFileStore",
    "PathError",
    "StatusError",
]
