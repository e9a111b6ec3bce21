from httpbox.base.filestore.base import FileHandle, FileStore
from httpbox.base.filestore.config import HttpStoreConfig
from httpbox.base.filestore.errors import (
    ErrorKind,
    InvalidPathError,
    NotFoundPathError,
    PathError,
    PermissionPathError,
    StatusError,
    as_status_error,
)
from httpbox.base.filestore.file import StoreFile
from httpbox.base.filestore.http import HttpFileStore
from httpbox.base.filestore.local import LocalFileStore
from httpbox.base.filestore.paths import is_valid_path
from httpbox.base.filestore.types import FileStat

__all__ = [
    "FileStore",
    "FileHandle",
    "HttpFileStore",
    "HttpStoreConfig",
    "LocalFileStore",
    "StoreFile",
    "FileStat",
    "ErrorKind",
    "StatusError",
    "PathError",
    "NotFoundPathError",
    "PermissionPathError",
    "InvalidPathError",
    "as_status_error",
    "is_valid_path",
]
