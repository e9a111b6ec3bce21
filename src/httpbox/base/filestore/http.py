"""
HttpFileStore — реализация FileStore поверх удалённого HTTP-источника.

Позволяет читать файлы с сервера, поддерживающего GET/HEAD, как из обычного дерева:
- open(path) -> GET, поток байтов + метаданные
- stat(path) -> HEAD, только метаданные

Ограничения:
- HTTP добавляет задержку на каждый запрос
- у HTTP нет каталогов: is_dir всегда False, листинга нет
- только чтение

Кэш (HttpStoreConfig.cache_dir):
- open() сначала ищет файл в кэше и, если нашёл, в сеть не ходит вовсе
- после скачивания файл записывается в кэш, и вызывающий код читает уже копию на диске
- stat() кэш не использует
"""

from __future__ import annotations

import logging

import requests

from httpbox.base.filestore.base import FileStore
from httpbox.base.filestore.cache import mirror_to_cache
from httpbox.base.filestore.config import HttpStoreConfig
from httpbox.base.filestore.errors import as_status_error, path_error
from httpbox.base.filestore.file import StoreFile
from httpbox.base.filestore.local import LocalFileStore
from httpbox.base.filestore.paths import is_valid_path
from httpbox.base.filestore.types import FileStat
from httpbox.base.net import http as transport
from httpbox.base.net.url import normalize, resolve

logger = logging.getLogger(__name__)

# stat() тоже помечает свои ошибки операцией "open".
_OP_OPEN = "open"


class HttpFileStore(FileStore):
    """FileStore, который разрешает все пути относительно base_url."""

    def __init__(self, base_url: str, config: HttpStoreConfig | None = None):
        config = config or HttpStoreConfig()
        self._base_url = normalize(base_url)
        self._config = config
        self._session = config.session if config.session is not None else requests.Session()
        self._cache = LocalFileStore(root=config.cache_dir) if config.cache_dir else None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> HttpStoreConfig:
        return self._config

    def resolve(self, path: str) -> str:
        """Абсолютный URL для логического пути."""
        return resolve(self._base_url, path)

    # --- FileStore ---

    def open(self, path: str) -> StoreFile:
        if not is_valid_path(path):
            raise path_error(_OP_OPEN, path)

        if self._cache is not None:
            try:
                cached = self._cache.open(path)
            except OSError:
                logger.debug("filestore.cache_miss path=%s", path)
            else:
                logger.debug("filestore.cache_hit path=%s", path)
                return cached

        remote = self._get(path)
        if self._cache is None:
            return remote

        try:
            return mirror_to_cache(self._cache.root, remote)
        except BaseException as e:
            logger.warning("filestore.cache_write_failed path=%s error=%r", path, e)
            remote.abort()
            raise

    def stat(self, path: str) -> FileStat:
        if not is_valid_path(path):
            raise path_error(_OP_OPEN, path)

        response = transport.head(self._session, self.resolve(path), **self._request_kwargs())
        self._check_status(path, response)

        info = StoreFile.from_response(path, response)
        info.close()
        return info.stat()

    # --- Внутреннее ---

    def _request_kwargs(self) -> dict:
        return {"timeout": self._config.timeout, "headers": self._config.headers}

    def _get(self, path: str) -> StoreFile:
        response = transport.get(self._session, self.resolve(path), **self._request_kwargs())
        self._check_status(path, response)
        return StoreFile.from_response(path, response)

    @staticmethod
    def _check_status(path: str, response: requests.Response) -> None:
        status_error = as_status_error(response.status_code, transport.status_text(response))
        if status_error is None:
            return
        response.close()
        logger.debug("filestore.status_error path=%s status=%s", path, status_error.status)
        raise path_error(_OP_OPEN, path, status_error) from status_error

    def __repr__(self) -> str:
        return f"HttpFileStore(base_url={self._base_url!r}, cache_dir={self._config.cache_dir!r})"
