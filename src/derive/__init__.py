"""
Derive — структурная генерация протокола sameness для агрегатов.

@derive_is_same генерирует __is_same__ как конъюнкцию is_same по полям.
"""

from src.derive.codegen import compare_fields, derive_is_same, render_source
from src.derive.shapes import (
    AggregateShape,
    UnsupportedShapeError,
    inspect_shape,
)

__all__ = [
    # Codegen
    "derive_is_same",
    "render_source",
    "compare_fields",
    # Shapes
    "AggregateShape",
    "inspect_shape",
    # Exceptions
    "UnsupportedShapeError",
]
