"""
Scalars — сравнение скалярных значений

Целые, bool, строки, байты, None: равенство представления.

float / complex / numpy-скаляры: равенство БИТОВОГО ПАТТЕРНА, а не
численное равенство:
- +0.0 и -0.0 имеют разные биты → not same
- NaN с идентичными битами → same (хотя NaN != NaN)
- NaN с разными payload/знаком → not same
- +inf и -inf → not same

Сравнение битов никогда не бросает исключений ни для какого паттерна.
"""

import struct
import sys
from decimal import Decimal
from fractions import Fraction
from typing import Final

import numpy as np

from src.core.sameness.protocol import register

# =============================================================================
# ФОРМАТЫ БИТОВЫХ ПАТТЕРНОВ
# =============================================================================

# IEEE-754 binary64, big-endian (Python float всегда 64-bit)
F64_STRUCT_FORMAT: Final[str] = ">d"

# Два компонента complex
C128_STRUCT_FORMAT: Final[str] = ">dd"


def float_bits(value: float | np.floating) -> int:
    """
    Сырой битовый паттерн float как беззнаковое целое.

    Python float → 64 бита; numpy floating → ширина самого скаляра
    (float16/float32/float64).

    Examples:
        >>> hex(float_bits(1.0))
        '0x3ff0000000000000'
        >>> float_bits(0.0) == float_bits(-0.0)
        False
        >>> hex(float_bits(np.float32(-0.0)))
        '0x80000000'
    """
    if isinstance(value, np.generic):
        return int.from_bytes(value.tobytes(), sys.byteorder)
    return int.from_bytes(struct.pack(F64_STRUCT_FORMAT, value), "big")


# =============================================================================
# HANDLERS
# =============================================================================


@register(float)
def _same_float(left: float, right: float) -> bool:
    return struct.pack(F64_STRUCT_FORMAT, left) == struct.pack(F64_STRUCT_FORMAT, right)


@register(complex)
def _same_complex(left: complex, right: complex) -> bool:
    return struct.pack(C128_STRUCT_FORMAT, left.real, left.imag) == struct.pack(
        C128_STRUCT_FORMAT, right.real, right.imag
    )


@register(np.generic)
def _same_numpy_scalar(left: np.generic, right: np.generic) -> bool:
    # Байты скаляра = биты на его собственной ширине (float32 → 4 байта)
    return left.tobytes() == right.tobytes()


@register(Decimal)
def _same_decimal(left: Decimal, right: Decimal) -> bool:
    # Decimal("1.0") == Decimal("1.00"), но представления различаются
    return left.as_tuple() == right.as_tuple()


@register(type)
def _same_type_token(left: type, right: type) -> bool:
    return left is right


def _same_value(left: object, right: object) -> bool:
    return left == right


for _cls in (int, str, bytes, bytearray, type(None), range, Fraction):
    register(_cls, _same_value)
