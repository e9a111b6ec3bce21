"""
errors — ошибки FileStore и перевод HTTP-статусов в файловую семантику.

Вызывающему коду важно различать только три случая:
- файла нет (NOT_FOUND)
- доступ запрещён (PERMISSION)
- что-то другое пошло не так (INVALID)

Ошибки на границе store оборачиваются в PathError (операция + путь + причина).
Конкретные подклассы PathError наследуют встроенные исключения,
поэтому работает обычный `except FileNotFoundError` / `except PermissionError`.
"""

from __future__ import annotations

import errno
from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "file does not exist"
    PERMISSION = "permission denied"
    INVALID = "invalid argument"


class StatusError(Exception):
    """HTTP-статус, переведённый в ErrorKind."""

    def __init__(self, status_code: int, status: str, kind: ErrorKind):
        super().__init__(status_code, status, kind)
        self.status_code = status_code
        self.status = status
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.status}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusError):
            return NotImplemented
        return (self.status_code, self.status, self.kind) == (other.status_code, other.status, other.kind)

    def __hash__(self) -> int:
        return hash((self.status_code, self.status, self.kind))


def as_status_error(status_code: int, status: str) -> StatusError | None:
    """
    Переводит HTTP-статус в StatusError.

    2xx -> None, 404 -> NOT_FOUND, 401/403 -> PERMISSION, всё остальное -> INVALID.
    """
    if 200 <= status_code <= 299:
        return None
    if status_code == 404:
        return StatusError(status_code, status, ErrorKind.NOT_FOUND)
    if status_code in (401, 403):
        return StatusError(status_code, status, ErrorKind.PERMISSION)
    return StatusError(status_code, status, ErrorKind.INVALID)


class PathError(OSError):
    """Ошибка операции над логическим путём: op + path + cause."""

    errno_code = errno.EIO

    def __init__(self, op: str, path: str, cause: StatusError | None = None):
        kind = cause.kind if cause is not None else ErrorKind.INVALID
        super().__init__(self.errno_code, kind.value)
        self.op = op
        self.path = path
        self.cause = cause
        self.kind = kind

    def __str__(self) -> str:
        reason = str(self.cause) if self.cause is not None else self.kind.value
        return f"{self.op} {self.path}: {reason}"


class NotFoundPathError(PathError, FileNotFoundError):
    errno_code = errno.ENOENT


class PermissionPathError(PathError, PermissionError):
    errno_code = errno.EACCES


class InvalidPathError(PathError):
    errno_code = errno.EINVAL


_BY_KIND: dict[ErrorKind, type[PathError]] = {
    ErrorKind.NOT_FOUND: NotFoundPathError,
    ErrorKind.PERMISSION: PermissionPathError,
    ErrorKind.INVALID: InvalidPathError,
}


def path_error(op: str, path: str, cause: StatusError | None = None) -> PathError:
    """Собирает PathError нужного подкласса. cause=None означает некорректный путь."""
    kind = cause.kind if cause is not None else ErrorKind.INVALID
    return _BY_KIND[kind](op, path, cause)
