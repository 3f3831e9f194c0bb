"""
Sameness — протокол change-detection эквивалентности

is_same(left, right) решает, изменилось ли значение настолько, что
зависимые вычисления нужно пересчитать.

Импорт пакета регистрирует handlers для всех поддерживаемых типов.
"""

# Protocol core
from src.core.sameness.protocol import (
    HOOK_ATTR,
    OWNER_ATTR,
    VIEW_ATTR,
    IsSame,
    NotComparableError,
    handler_for,
    is_not_same,
    is_same,
    register,
)

# Handlers (регистрация при импорте)
from src.core.sameness.scalars import (
    C128_STRUCT_FORMAT,
    F64_STRUCT_FORMAT,
    float_bits,
)
from src.core.sameness.handles import Cow, Shared
from src.core.sameness import mappings, paths, sequences  # noqa: F401

__all__ = [
    # Protocol — Operations
    "is_same",
    "is_not_same",
    "register",
    "handler_for",
    # Protocol — Types
    "IsSame",
    # Protocol — Exceptions
    "NotComparableError",
    # Protocol — Constants
    "HOOK_ATTR",
    "OWNER_ATTR",
    "VIEW_ATTR",
    # Scalars
    "C128_STRUCT_FORMAT",
    "F64_STRUCT_FORMAT",
    "float_bits",
    # Handles & Views
    "Cow",
    "Shared",
]
