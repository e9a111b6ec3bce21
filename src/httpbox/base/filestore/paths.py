"""
paths — проверка логических путей.

Логический путь:
- непустой, разделитель только '/'
- без ведущего и хвостового '/'
- без пустых сегментов, без '.' и '..'
- без '\\' и NUL: на диске (кэш, LocalFileStore) они дали бы другой путь, чем в URL

Проверка выполняется до любого обращения к сети или диску.
"""

from __future__ import annotations

_FORBIDDEN_CHARS = ("\\", "\x00")


def is_valid_path(path: str) -> bool:
    """Проверяет, что path — корректный относительный логический путь."""
    if not isinstance(path, str) or not path:
        return False
    if any(ch in path for ch in _FORBIDDEN_CHARS):
        return False
    for segment in path.split("/"):
        if segment in ("", ".", ".."):
            return False
    return True
