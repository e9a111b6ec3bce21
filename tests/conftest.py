"""
Pytest configuration and fixtures for httpbox tests.

The origin is a real HTTP server on an ephemeral port:
- /files/...  -> tests/testdata/testfs (with Content-Length and Last-Modified)
- /500, /401, /403 -> bare status responses
- /hello.txt -> fixed body and Last-Modified
- /plain -> body without Last-Modified
- /gzip.txt -> gzip Content-Encoding
- /echo -> returns the X-Httpbox-Test request header as the body
"""

from __future__ import annotations

import gzip
import os
import threading
from dataclasses import dataclass, field
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Callable, Generator
from urllib.parse import urlsplit

import pytest

from httpbox.base.filestore import HttpFileStore, HttpStoreConfig, LocalFileStore

TESTFS = Path(__file__).parent / "testdata" / "testfs"

KNOWN_FILES = {
    "files/file1.txt": b"Contents of file 1\n",
    "files/file2.txt": b"Contents of file 2\n",
    "files/subdir/file3.txt": b"Contents of file 3\n",
}

HELLO_BODY = b"Hello world"
HELLO_LAST_MODIFIED = "Wed, 21 Oct 2015 07:28:00 GMT"
GZIP_BODY = b"compressed body, compressed body, compressed body"

STATUS_ROUTES = {"/500": 500, "/401": 401, "/403": 403}


class _OriginHandler(SimpleHTTPRequestHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, directory=str(TESTFS), **kwargs)

    def log_message(self, format, *args):  # noqa: A002
        pass

    def _fixed(self, with_body: bool) -> bool:
        path = urlsplit(self.path).path
        self.server.requests.append((self.command, path))

        if path in STATUS_ROUTES:
            self.send_response(STATUS_ROUTES[path])
            self.send_header("Content-Length", "0")
            self.end_headers()
            return True

        headers: dict[str, str] = {}
        if path == "/hello.txt":
            body = HELLO_BODY
            headers["Last-Modified"] = HELLO_LAST_MODIFIED
        elif path == "/plain":
            body = b"plain"
        elif path == "/gzip.txt":
            body = gzip.compress(GZIP_BODY)
            headers["Content-Encoding"] = "gzip"
        elif path == "/echo":
            body = (self.headers.get("X-Httpbox-Test") or "").encode("utf-8")
        else:
            return False

        self.send_response(200)
        self.send_header("Content-Type", "application/octet-stream")
        self.send_header("Content-Length", str(len(body)))
        for key, value in headers.items():
            self.send_header(key, value)
        self.end_headers()
        if with_body:
            self.wfile.write(body)
        return True

    def do_GET(self):
        if not self._fixed(with_body=True):
            super().do_GET()

    def do_HEAD(self):
        if not self._fixed(with_body=False):
            super().do_HEAD()

    def translate_path(self, path):
        parsed = urlsplit(path).path
        if not parsed.startswith("/files/"):
            return os.path.join(str(TESTFS), "__missing__")
        return super().translate_path(parsed[len("/files"):])


class _OriginServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self):
        super().__init__(("127.0.0.1", 0), _OriginHandler)
        self.requests: list[tuple[str, str]] = []


@dataclass
class Origin:
    url: str
    requests: list[tuple[str, str]]
    _stop: Callable[[], None] = field(repr=False)
    _stopped: bool = False

    def shutdown(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        self._stop()


@pytest.fixture
def origin() -> Generator[Origin, None, None]:
    """Start a local HTTP origin; shut down after the test."""
    server = _OriginServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    def stop() -> None:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)

    o = Origin(url=f"http://127.0.0.1:{server.server_port}", requests=server.requests, _stop=stop)
    yield o
    o.shutdown()


@pytest.fixture
def store(origin: Origin) -> Generator[HttpFileStore, None, None]:
    """HttpFileStore without cache."""
    s = HttpFileStore(origin.url)
    yield s


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def cached_store(origin: Origin, cache_dir: Path) -> HttpFileStore:
    """HttpFileStore with an on-disk mirror under tmp_path."""
    return HttpFileStore(origin.url, HttpStoreConfig(cache_dir=cache_dir))


@pytest.fixture
def local_store() -> LocalFileStore:
    """Local source of truth for the files served under /files/."""
    return LocalFileStore(root=TESTFS)
