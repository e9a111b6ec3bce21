"""
csv — чтение CSV в DataFrame поверх FileStore.

pandas читает прямо из текстового потока store: с nrows
не нужно тянуть весь файл в память заранее (остаток дочитается при закрытии).
"""

from __future__ import annotations

import pandas as pd

from httpbox.base.filestore.base import FileStore
from httpbox.base.ioapi.txt import open_text


def read_df(path: str, store: FileStore, encoding: str = "utf-8", **kwargs) -> pd.DataFrame:
    with open_text(path, store, encoding=encoding) as f:
        return pd.read_csv(f, **kwargs)
