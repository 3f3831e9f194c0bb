"""
Derive Codegen — генерация __is_same__ для пользовательских агрегатов

@derive_is_same один раз, при определении класса, генерирует исходный код
метода __is_same__ и компилирует его:

    NAMED:       return (is_same(self.a, other.a) and is_same(self.b, other.b))
    POSITIONAL:  return (is_same(self[0], other[0]) and is_same(self[1], other[1]))
    UNIT:        return True

Цепочка `and` прерывается на первом несовпавшем поле — последующие поля
не вычисляются.

Пример:
    @derive_is_same
    @dataclass(frozen=True)
    class Snapshot:
        count: int
        ch: str
        text: str
"""

import logging
from typing import Any, Callable, Final, TypeVar

from src.core.sameness import HOOK_ATTR, OWNER_ATTR, is_same
from src.derive.shapes import AggregateShape, FieldRef, inspect_shape

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

# Имя, под которым is_same доступен сгенерированному коду
_IS_SAME_NAME: Final[str] = "_is_same"


def _field_access(operand: str, ref: FieldRef) -> str:
    if isinstance(ref, int):
        return f"{operand}[{ref}]"
    return f"{operand}.{ref}"


def _render_body(shape: AggregateShape, fields: tuple[FieldRef, ...]) -> str:
    if shape is AggregateShape.UNIT:
        return "    return True\n"

    terms = [
        f"{_IS_SAME_NAME}({_field_access('self', ref)}, {_field_access('other', ref)})"
        for ref in fields
    ]
    return "    return (\n        " + "\n        and ".join(terms) + "\n    )\n"


def _render_source(shape: AggregateShape, fields: tuple[FieldRef, ...]) -> str:
    return f"def {HOOK_ATTR}(self, other):\n" + _render_body(shape, fields)


def render_source(cls: type) -> str:
    """
    Исходный код __is_same__ для класса.

    Raises:
        UnsupportedShapeError: Если форма класса не поддерживается
    """
    return _render_source(*inspect_shape(cls))


def derive_is_same(cls: C) -> C:
    """
    Декоратор: устанавливает сгенерированный __is_same__ на класс.

    Применяется поверх @dataclass (или к NamedTuple / pydantic модели).

    Args:
        cls: Класс агрегата

    Returns:
        Тот же класс с методом __is_same__

    Raises:
        UnsupportedShapeError: Для Enum и классов без известной формы
    """
    shape, fields = inspect_shape(cls)
    source = _render_source(shape, fields)

    namespace: dict[str, Any] = {_IS_SAME_NAME: is_same}
    code = compile(source, f"<derive_is_same {cls.__module__}.{cls.__qualname__}>", "exec")
    exec(code, namespace)

    method = namespace[HOOK_ATTR]
    method.__qualname__ = f"{cls.__qualname__}.{HOOK_ATTR}"
    method.__module__ = cls.__module__
    setattr(method, OWNER_ATTR, cls)
    setattr(cls, HOOK_ATTR, method)

    logger.debug(
        "derived %s for %s (%s shape, %d fields)",
        HOOK_ATTR,
        cls.__qualname__,
        shape.value,
        len(fields),
    )
    return cls


def compare_fields(left: Any, right: Any, *getters: Callable[[Any], Any]) -> bool:
    """
    Конъюнкция is_same по полям для ручных реализаций __is_same__.

    Для классов, которые derive_is_same не поддерживает:

        def __is_same__(self, other):
            return compare_fields(self, other, attrgetter("a"), attrgetter("b"))

    Args:
        left: Левый операнд
        right: Правый операнд
        getters: Функции доступа к полям, в порядке сравнения

    Returns:
        True если все поля "те же самые"; остановка на первом несовпадении
    """
    for getter in getters:
        if not is_same(getter(left), getter(right)):
            return False
    return True
