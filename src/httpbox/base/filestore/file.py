"""
file — StoreFile: открытый файл FileStore.

StoreFile оборачивает один из двух источников байтов:
- тело HTTP-ответа (живое соединение)
- открытый файл кэша на диске

Важно:
- поток читается один раз, от начала до конца (без seek)
- close() сначала дочитывает остаток тела, чтобы соединение вернулось в пул,
  и только потом закрывает источник
- size/mtime берутся из заголовков ответа, а не из stat() файла кэша
"""

from __future__ import annotations

import io
from datetime import timezone
from email.utils import parsedate_to_datetime
from typing import BinaryIO

import requests

from httpbox.base.filestore.types import READ_ONLY_MODE, FileStat

_DRAIN_CHUNK = 64 * 1024


class _ResponseBody:
    """Тело requests.Response как простой поток read/close."""

    def __init__(self, response: requests.Response):
        self._response = response
        # при распаковке raw.read(n) может вернуть больше n байт: излишек ждёт здесь
        self._pending = b""

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            data = self._pending + (self._response.raw.read(decode_content=True) or b"")
            self._pending = b""
            return data
        if not self._pending:
            self._pending = self._response.raw.read(size, decode_content=True) or b""
        data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def close(self) -> None:
        self._response.close()


def _parse_size(response: requests.Response) -> int | None:
    # requests/urllib3 сами распаковывают gzip/deflate: Content-Length тогда описывает
    # сжатые байты, а не то, что получит читатель.
    encoding = response.headers.get("Content-Encoding", "").strip().lower()
    if encoding and encoding != "identity":
        return None
    raw = response.headers.get("Content-Length")
    if raw is None:
        return None
    try:
        size = int(raw)
    except ValueError:
        return None
    return size if size >= 0 else None


def _parse_mtime(value: str | None) -> float | None:
    """Last-Modified (RFC 1123) -> POSIX-время. Пустой или кривой заголовок -> None."""
    if not value:
        return None
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if dt is None:
        return None
    # зона "-0000" даёт naive datetime; HTTP-даты всегда в UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


class StoreFile(io.RawIOBase):
    """Открытый файл FileStore (только чтение)."""

    def __init__(
        self,
        path: str,
        body: BinaryIO | _ResponseBody | None,
        size: int | None = None,
        mtime: float | None = None,
    ):
        super().__init__()
        self.path = path
        self._body = body
        self.size = size
        self.mtime = mtime

    @classmethod
    def from_response(cls, path: str, response: requests.Response) -> StoreFile:
        return cls(
            path=path,
            body=_ResponseBody(response),
            size=_parse_size(response),
            mtime=_parse_mtime(response.headers.get("Last-Modified")),
        )

    # --- Метаданные ---

    def stat(self) -> FileStat:
        return FileStat(
            path=self.path,
            is_file=True,
            is_dir=False,
            size=self.size,
            mtime=self.mtime,
            mode=READ_ONLY_MODE,
        )

    # --- Поток ---

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed file")
        if self._body is None:
            raise ValueError(f"no body attached to {self.path}")
        view = memoryview(buffer).cast("B")
        data = self._body.read(len(view))
        n = len(data)
        view[:n] = data
        return n

    def detach_body(self) -> BinaryIO | _ResponseBody | None:
        """Отвязывает источник байтов от файла и возвращает его вызывающему коду."""
        body, self._body = self._body, None
        return body

    def abort(self) -> None:
        """Закрывает файл без дочитывания: после сбоя посреди потока дочитывать нечего."""
        if self.closed:
            return
        body = self.detach_body()
        try:
            if body is not None:
                body.close()
        finally:
            super().close()

    def close(self) -> None:
        if self.closed:
            return
        body = self.detach_body()
        try:
            if body is not None:
                try:
                    while body.read(_DRAIN_CHUNK):
                        pass
                finally:
                    body.close()
        finally:
            super().close()

    def __repr__(self) -> str:
        return f"StoreFile(path={self.path!r}, size={self.size!r})"
