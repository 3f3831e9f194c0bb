"""
Paths — сравнение путей

Два пути "те же самые", если совпадают их нормализованные формы
(pathlib убирает лишние разделители и сегменты ".").

Правый операнд может быть другим представлением пути: PurePath того же
flavour, str или любой os.PathLike.

Cross-type сравнение работает только с путём СЛЕВА: is_same(path, "a")
сравнивает пути, а is_same("a", path) — str против PurePath, то есть
разные конкретные типы → not same.
"""

import os
from pathlib import PurePath

from src.core.sameness.protocol import register


@register(PurePath, cross_type=True)
def _same_path(left: PurePath, right: object) -> bool:
    if isinstance(right, PurePath):
        return left == right
    if isinstance(right, (str, os.PathLike)):
        raw = os.fspath(right)
        if isinstance(raw, str):
            return left == type(left)(raw)
    return False
