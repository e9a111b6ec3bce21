"""
url — нормализация базового URL и разрешение логических путей.

Задача:
- привести базовый URL источника к нормальному виду (один раз, при создании store)
- построить абсолютный URL запроса из базового URL и логического пути

Важно:
- логический путь — это URI-ссылка, а не путь файловой системы:
  склейка идёт по правилам RFC 3986 (urljoin), а не через os.path/posixpath
"""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit, urlunsplit


def normalize(raw: str) -> str:
    """
    Мягкая нормализация базового URL.

    - обрезает пробелы, приводит '\\' к '/'
    - "голые" домены без схемы ("example.org/data") получают https://
    - схлопывает двойные слеши в path (не трогая 'https://')
    """
    if raw is None:
        raise ValueError("Base URL is required")
    s = str(raw).strip()
    if not s:
        raise ValueError("Base URL is required")

    s = s.replace("\\", "/")

    # поддержка "голых" доменов без схемы: "example.org/files/..."
    if not re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*://", s):
        if re.match(r"^[A-Za-z0-9.-]+(\.[A-Za-z]{2,}|:\d+)(/|$)", s):
            s = "https://" + s

    parts = urlsplit(s)
    path = re.sub(r"/{2,}", "/", parts.path or "")
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def resolve(base: str, path: str) -> str:
    """Абсолютный URL запроса: base + path как URI-ссылка."""
    return urljoin(base, path)
