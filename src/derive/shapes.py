"""Aggregate shapes — какие пользовательские типы можно derive.

Поддерживаются:
- NAMED: dataclass / pydantic BaseModel с полями (порядок объявления)
- POSITIONAL: NamedTuple с полями (индексы 0..n-1)
- UNIT: любой из них без полей

Enum (варианты-альтернативы) и прочие классы отклоняются с
UnsupportedShapeError в момент определения класса.
"""

import dataclasses
from enum import Enum
from typing import Union

from pydantic import BaseModel

FieldRef = Union[str, int]


class AggregateShape(str, Enum):
    """Структурный вид агрегата."""

    NAMED = "named"
    POSITIONAL = "positional"
    UNIT = "unit"


class UnsupportedShapeError(TypeError):
    """
    derive_is_same применён к типу, форма которого не поддерживается.

    Ошибка возникает при определении класса (import time) и не даёт
    установить частичную реализацию.
    """

    pass


def _is_namedtuple(cls: type) -> bool:
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def inspect_shape(cls: type) -> tuple[AggregateShape, tuple[FieldRef, ...]]:
    """
    Определение формы агрегата и упорядоченного списка полей.

    Args:
        cls: Класс пользовательского агрегата

    Returns:
        (shape, fields): имена полей для NAMED, индексы для POSITIONAL,
        пустой кортеж для UNIT

    Raises:
        UnsupportedShapeError: Для Enum и классов без известной формы
    """
    if not isinstance(cls, type):
        raise UnsupportedShapeError(f"derive_is_same expects a class, got {cls!r}")

    if issubclass(cls, Enum):
        raise UnsupportedShapeError(
            f"cannot derive is_same for enum {cls.__qualname__!r}: "
            f"types with alternative variants are not supported"
        )

    fields: tuple[FieldRef, ...]
    if dataclasses.is_dataclass(cls):
        fields = tuple(field.name for field in dataclasses.fields(cls))
        shape = AggregateShape.NAMED
    elif issubclass(cls, BaseModel):
        fields = tuple(cls.model_fields)
        shape = AggregateShape.NAMED
    elif _is_namedtuple(cls):
        fields = tuple(range(len(cls._fields)))
        shape = AggregateShape.POSITIONAL
    else:
        raise UnsupportedShapeError(
            f"cannot derive is_same for {cls.__qualname__!r}: expected a dataclass, "
            f"NamedTuple or pydantic model (apply @derive_is_same above @dataclass)"
        )

    if not fields:
        return AggregateShape.UNIT, ()
    return shape, fields
