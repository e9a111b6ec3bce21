from __future__ import annotations

import pytest

from httpbox.base.net.url import normalize, resolve


@pytest.mark.parametrize(
    ("raw", "want"),
    [
        ("http://127.0.0.1:8080", "http://127.0.0.1:8080"),
        ("  https://example.org/data/ ", "https://example.org/data/"),
        ("example.org/data", "https://example.org/data"),
        ("localhost:8080/files/", "https://localhost:8080/files/"),
        ("http://example.org//a//b/", "http://example.org/a/b/"),
        ("http:\\\\example.org\\a", "http://example.org/a"),
    ],
)
def test_normalize(raw: str, want: str) -> None:
    assert normalize(raw) == want


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_normalize_rejects_empty(raw) -> None:
    with pytest.raises(ValueError):
        normalize(raw)


@pytest.mark.parametrize(
    ("base", "path", "want"),
    [
        ("http://h:1", "files/file1.txt", "http://h:1/files/file1.txt"),
        ("http://h/base/", "a/b.txt", "http://h/base/a/b.txt"),
        # RFC 3986 merge: the last segment of a base without trailing slash is replaced
        ("http://h/base", "a.txt", "http://h/a.txt"),
        ("http://h/base/", "a.txt?x=1", "http://h/base/a.txt?x=1"),
    ],
)
def test_resolve_is_uri_reference_resolution(base: str, path: str, want: str) -> None:
    assert resolve(base, path) == want
