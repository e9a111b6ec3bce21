"""
net — сетевые утилиты httpbox.

Назначение:
- дать единую точку для нормализации/разрешения URL
- дать единый транспорт запросов (GET/HEAD) поверх requests
"""
from .http import get, head, status_text  # noqa: F401
from .url import normalize, resolve  # noqa: F401
