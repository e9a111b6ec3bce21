"""
base — нейтральный слой инфраструктуры.

Назначение:
- дать единый транспорт файлов (filestore): локальный каталог или HTTP-источник
- дать единый API чтения форматов (ioapi) поверх любого FileStore
"""
