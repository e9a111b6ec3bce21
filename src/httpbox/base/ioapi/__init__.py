"""
ioapi — единый API чтения форматов поверх FileStore.

Рекомендованный импорт:
    from httpbox.base import ioapi as ia

store передаётся явно: глобального FileStore по умолчанию нет.
"""

from httpbox.base.ioapi import bytes, csv, txt

__all__ = ["bytes", "csv", "txt"]
