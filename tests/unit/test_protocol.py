"""
Тесты для диспетчеризации протокола sameness

Проверяет:
1. Fast-path по идентичности
2. Несовпадение конкретных типов
3. Hook __is_same__ и runtime-протокол IsSame
4. Регистрацию handlers для сторонних типов
5. NotComparableError для типов без протокола
6. Закон отрицания на всех путях диспетчеризации
"""

from dataclasses import dataclass

import numpy as np
import pytest
from sortedcontainers import SortedDict

from src.core.sameness import (
    Cow,
    IsSame,
    NotComparableError,
    Shared,
    handler_for,
    is_not_same,
    is_same,
    register,
)
from src.derive import derive_is_same


class Unsupported:
    pass


# =============================================================================
# IDENTITY / TYPE GATE
# =============================================================================


class TestDispatch:
    """Тесты для общих правил диспетчеризации"""

    def test_identity_short_circuit(self) -> None:
        """Один и тот же объект — тот же самый без инспекции содержимого"""
        value = Unsupported()
        assert is_same(value, value)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(NotComparableError, match="Unsupported"):
            is_same(Unsupported(), Unsupported())

    def test_not_comparable_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            is_not_same(Unsupported(), Unsupported())

    def test_type_mismatch_not_same(self) -> None:
        assert is_not_same(1, 1.0)
        assert is_not_same("1", 1)
        assert is_not_same([], {})

    def test_handler_lookup(self) -> None:
        assert handler_for(bool) is handler_for(int)


# =============================================================================
# HOOK
# =============================================================================


class Versioned:
    """Ручная реализация протокола: важна только версия"""

    def __init__(self, version: int, payload: object) -> None:
        self.version = version
        self.payload = payload

    def __is_same__(self, other: "Versioned") -> bool:
        return self.version == other.version


class TestHook:
    """Тесты для hook __is_same__"""

    def test_hook_used(self) -> None:
        assert is_same(Versioned(1, object()), Versioned(1, object()))
        assert is_not_same(Versioned(1, "a"), Versioned(2, "a"))

    def test_hook_type_gate(self) -> None:
        class Other(Versioned):
            pass

        assert is_not_same(Versioned(1, None), Other(1, None))

    def test_runtime_protocol(self) -> None:
        assert isinstance(Versioned(1, None), IsSame)
        assert not isinstance(Unsupported(), IsSame)

    def test_hook_inside_containers(self) -> None:
        assert is_same([Versioned(1, "x")], [Versioned(1, "y")])
        assert is_same({"k": Versioned(3, 1)}, {"k": Versioned(3, 2)})


# =============================================================================
# REGISTRATION
# =============================================================================


class Celsius:
    def __init__(self, degrees: float) -> None:
        self.degrees = degrees


@register(Celsius)
def _same_celsius(left: Celsius, right: Celsius) -> bool:
    return is_same(left.degrees, right.degrees)


class TestRegister:
    """Тесты для регистрации handlers"""

    def test_registered_handler(self) -> None:
        assert is_same(Celsius(1.5), Celsius(1.5))
        assert is_not_same(Celsius(0.0), Celsius(-0.0))

    def test_subclass_uses_base_handler(self) -> None:
        class Kelvinish(Celsius):
            pass

        assert is_same(Kelvinish(2.0), Kelvinish(2.0))
        assert is_not_same(Celsius(2.0), Kelvinish(2.0))

    def test_register_without_decorator(self) -> None:
        class Token:
            def __init__(self, name: str) -> None:
                self.name = name

        register(Token, lambda left, right: left.name == right.name)
        assert is_same(Token("a"), Token("a"))
        assert is_not_same(Token("a"), Token("b"))

    def test_cross_type_handler(self) -> None:
        class Meters:
            def __init__(self, value: int) -> None:
                self.value = value

        @register(Meters, cross_type=True)
        def _same_meters(left: Meters, right: object) -> bool:
            if isinstance(right, int):
                return left.value == right
            return isinstance(right, Meters) and left.value == right.value

        assert is_same(Meters(3), 3)
        assert is_not_same(Meters(3), 4)


# =============================================================================
# ЗАКОН ОТРИЦАНИЯ ПО ВСЕМ ПУТЯМ ДИСПЕТЧЕРИЗАЦИИ
# =============================================================================


@derive_is_same
@dataclass
class Pair:
    left: float
    right: str


_HANDLE = Shared((1, 2))


@pytest.mark.parametrize(
    "left,right",
    [
        # Контейнеры
        ([1, 2, 3], [1, 2]),
        ([1, 2, 3], [1, 2, 3]),
        ((0.0, "a"), (-0.0, "a")),
        ({"foo": "bar"}, {"foo": "bar", "baz": "f"}),
        ({"foo": "bar"}, {"foo": "bar"}),
        (SortedDict({"a": 1}), SortedDict({"a": 1})),
        (SortedDict({"a": 1}), SortedDict({"a": 2})),
        ({1, 2}, {2, 1}),
        (np.array([np.nan]), np.array([np.nan])),
        # Shared handles
        (_HANDLE, _HANDLE.clone()),
        (_HANDLE, Shared((1, 2))),
        # Cow views
        (Cow.borrowed("asdf"), Cow.owned("asdf")),
        (Cow.borrowed("asdf"), "qwer"),
        ("asdf", Cow.owned("asdf")),
        # Derived records и hook
        (Pair(0.0, "x"), Pair(0.0, "x")),
        (Pair(0.0, "x"), Pair(-0.0, "x")),
        (Versioned(1, "a"), Versioned(2, "a")),
        # Разные типы
        ([1], (1,)),
    ],
)
def test_is_not_same_is_negation(left, right) -> None:
    """is_not_same всегда равен not is_same, на любом пути диспетчеризации"""
    assert is_not_same(left, right) is (not is_same(left, right))
