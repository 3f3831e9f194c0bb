"""
Mappings & Sets — сравнение отображений и множеств

Упорядоченные (sortedcontainers, итерация по возрастанию ключа):
- SortedDict: равный размер; пары сопоставляются по позиции, ключи
  сравниваются натуральным == (НЕ is_same), значения — через is_same
- SortedSet / SortedList: равный размер; ключи по позиции через ==

Неупорядоченные (hash-based):
- dict / Mapping: размер сравнивается ПЕРВЫМ — это не только fast-reject,
  но и единственный способ поймать лишние ключи в right. Затем каждый
  ключ left должен присутствовать в right с "тем же" значением.
- set / frozenset / Set: равенство контейнеров
"""

from collections.abc import Mapping, Set
from typing import Any

from sortedcontainers import SortedDict, SortedList, SortedSet

from src.core.sameness.protocol import is_same, register

_MISSING: Any = object()


# =============================================================================
# УПОРЯДОЧЕННЫЕ КОНТЕЙНЕРЫ
# =============================================================================


@register(SortedDict)
def _same_sorted_dict(left: SortedDict, right: SortedDict) -> bool:
    if len(left) != len(right):
        return False
    for (left_key, left_value), (right_key, right_value) in zip(left.items(), right.items()):
        if left_key != right_key:
            return False
        if not is_same(left_value, right_value):
            return False
    return True


@register(SortedSet)
@register(SortedList)
def _same_sorted_keys(left: SortedSet | SortedList, right: SortedSet | SortedList) -> bool:
    if len(left) != len(right):
        return False
    for left_key, right_key in zip(left, right):
        if left_key != right_key:
            return False
    return True


# =============================================================================
# НЕУПОРЯДОЧЕННЫЕ КОНТЕЙНЕРЫ
# =============================================================================


@register(dict)
@register(Mapping)
def _same_mapping(left: Mapping, right: Mapping) -> bool:
    if len(left) != len(right):
        return False
    for key, left_value in left.items():
        right_value = right.get(key, _MISSING)
        if right_value is _MISSING:
            return False
        if not is_same(left_value, right_value):
            return False
    return True


@register(set)
@register(frozenset)
@register(Set)
def _same_set(left: Set, right: Set) -> bool:
    return left == right
