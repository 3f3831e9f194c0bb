"""
Sequences — сравнение последовательностей и массивов

Growable последовательности (list, deque, Sequence):
- fast-path по идентичности (в is_same)
- разная длина → not same
- поэлементный is_same по порядку, остановка на первом несовпадении

Кортежи любой арности: то же, позиции сравниваются через is_same.

Fixed-size массивы (array.array, numpy.ndarray): тип элемента и форма
должны совпадать, содержимое сравнивается побитово.
"""

import array
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from src.core.sameness.protocol import is_same, register


def _same_elements(left: Iterable[Any], right: Iterable[Any]) -> bool:
    for left_item, right_item in zip(left, right):
        if not is_same(left_item, right_item):
            return False
    return True


@register(list)
@register(tuple)
@register(deque)
@register(Sequence)
def _same_sequence(left: Sequence, right: Sequence) -> bool:
    if len(left) != len(right):
        return False
    return _same_elements(left, right)


@register(array.array)
def _same_array(left: array.array, right: array.array) -> bool:
    if left.typecode != right.typecode:
        return False
    return left.tobytes() == right.tobytes()


@register(np.ndarray)
def _same_ndarray(left: np.ndarray, right: np.ndarray) -> bool:
    if left.dtype != right.dtype or left.shape != right.shape:
        return False
    if left.dtype.hasobject:
        return _same_elements(left.flat, right.flat)
    # tobytes() в C-порядке независимо от layout
    return left.tobytes() == right.tobytes()
