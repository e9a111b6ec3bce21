"""
http — транспорт httpbox: GET/HEAD поверх requests.Session.

Ключевые детали:
- запросы идут с stream=True: тело не читается заранее, его читает StoreFile
- ошибки транспорта (DNS, connect, timeout) пробрасываются как есть,
  повторов и backoff нет
- статус ответа здесь не проверяется — это делает store
"""

from __future__ import annotations

import logging
from typing import Mapping

import requests

logger = logging.getLogger(__name__)


def status_text(response: requests.Response) -> str:
    """Строка статуса в виде "404 Not Found"."""
    reason = (response.reason or "").strip()
    if not reason:
        return str(response.status_code)
    return f"{response.status_code} {reason}"


def send(
    session: requests.Session,
    method: str,
    url: str,
    *,
    timeout: float | tuple[float, float] | None = None,
    headers: Mapping[str, str] | None = None,
) -> requests.Response:
    """Выполняет запрос и возвращает ответ с ещё не прочитанным телом."""
    logger.debug("net.request method=%s url=%s", method, url)
    response = session.request(
        method,
        url,
        headers=dict(headers) if headers else None,
        timeout=timeout,
        stream=True,
        allow_redirects=True,
    )
    logger.debug("net.response method=%s url=%s status=%s", method, url, response.status_code)
    return response


def get(session: requests.Session, url: str, **kwargs) -> requests.Response:
    return send(session, "GET", url, **kwargs)


def head(session: requests.Session, url: str, **kwargs) -> requests.Response:
    return send(session, "HEAD", url, **kwargs)
