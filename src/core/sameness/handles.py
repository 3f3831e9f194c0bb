"""
Handles & Views — разделяемые указатели и view-обёртки

Shared[T]: reference-counted handle на неизменяемые данные. Два handle
"те же самые" тогда и только тогда, когда указывают на одну аллокацию
(control block). Содержимое НИКОГДА не сравнивается: данные за Shared
считаются иммутабельными после публикации, поэтому идентичность аллокации
гарантирует идентичность содержимого, а обратное не требуется.

Cow[T]: borrowed-or-owned view. Сравнение делегируется значению внутри,
состояние владения не влияет на результат. Cow можно сравнивать с
обычным значением внутреннего типа с любой стороны.

memoryview: borrowed view над буфером — fast-path по идентичности,
иначе сравнение формата, формы и байтов.
"""

import copy
from typing import Generic, TypeVar

from src.core.sameness.protocol import register

T = TypeVar("T")


# =============================================================================
# SHARED HANDLE
# =============================================================================


class _ControlBlock(Generic[T]):
    """Аллокация, на которую указывают все клоны одного Shared."""

    __slots__ = ("value", "strong")

    def __init__(self, value: T) -> None:
        self.value = value
        self.strong = 1


class Shared(Generic[T]):
    """
    Разделяемый handle на иммутабельное значение.

    Shared(value) создаёт новую аллокацию; clone() создаёт ещё один
    handle на ту же аллокацию.

    Examples:
        >>> a = Shared((1, 2))
        >>> b = a.clone()
        >>> a.ptr_eq(b)
        True
        >>> a.ptr_eq(Shared((1, 2)))
        False
    """

    __slots__ = ("_block",)

    def __init__(self, value: T) -> None:
        self._block = _ControlBlock(value)

    @classmethod
    def _from_block(cls, block: "_ControlBlock[T]") -> "Shared[T]":
        handle = cls.__new__(cls)
        handle._block = block
        block.strong += 1
        return handle

    def clone(self) -> "Shared[T]":
        """Новый handle на ту же аллокацию."""
        return self._from_block(self._block)

    def get(self) -> T:
        """Значение, на которое указывает handle."""
        return self._block.value

    @property
    def strong_count(self) -> int:
        """Количество handles, созданных для этой аллокации."""
        return self._block.strong

    def ptr_eq(self, other: "Shared[T]") -> bool:
        """True если оба handle указывают на одну аллокацию."""
        return self._block is other._block

    def __copy__(self) -> "Shared[T]":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Shared[T]":
        # Данные иммутабельны — глубокая копия разделяет аллокацию
        return self.clone()

    def __repr__(self) -> str:
        return f"Shared({self._block.value!r})"


@register(Shared)
def _same_shared(left: Shared, right: Shared) -> bool:
    return left.ptr_eq(right)


# =============================================================================
# COPY-ON-WRITE VIEW
# =============================================================================


class Cow(Generic[T]):
    """
    Borrowed-or-owned view.

    Cow.borrowed(value) смотрит на чужое значение; to_mut() при первом
    вызове делает копию и переходит в owned-состояние.
    """

    __slots__ = ("_value", "_owned")

    def __init__(self, value: T, owned: bool = True) -> None:
        self._value = value
        self._owned = owned

    @classmethod
    def borrowed(cls, value: T) -> "Cow[T]":
        return cls(value, owned=False)

    @classmethod
    def owned(cls, value: T) -> "Cow[T]":
        return cls(value, owned=True)

    @property
    def is_borrowed(self) -> bool:
        return not self._owned

    @property
    def is_owned(self) -> bool:
        return self._owned

    def get(self) -> T:
        return self._value

    def to_mut(self) -> T:
        """
        Изменяемое значение; borrowed-view сначала копируется.

        Returns:
            Owned значение (можно модифицировать, исходное не затрагивается)
        """
        if not self._owned:
            self._value = copy.copy(self._value)
            self._owned = True
        return self._value

    def into_owned(self) -> T:
        """Owned копия значения (borrowed копируется, owned возвращается)."""
        if self._owned:
            return self._value
        return copy.copy(self._value)

    def __same_view__(self) -> T:
        return self._value

    def __repr__(self) -> str:
        state = "Owned" if self._owned else "Borrowed"
        return f"Cow.{state}({self._value!r})"


# =============================================================================
# MEMORYVIEW
# =============================================================================


@register(memoryview)
def _same_memoryview(left: memoryview, right: memoryview) -> bool:
    if left.format != right.format or left.shape != right.shape:
        return False
    # tobytes() — битовое сравнение, в т.ч. для float-форматов
    return left.tobytes() == right.tobytes()
