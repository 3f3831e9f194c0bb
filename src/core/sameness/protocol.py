"""
Sameness Protocol — ядро протокола is_same / is_not_same

Протокол отвечает на вопрос "изменилось ли значение с прошлого раза?"
и используется для решения, нужно ли пересчитывать зависимые вычисления.

Отличия от обычного ==:
- float сравниваются по битовому представлению (-0.0 != 0.0, NaN == NaN
  при одинаковых битах)
- shared-handles сравниваются по идентичности аллокации, без разыменования

ПОРЯДОК ДИСПЕТЧЕРИЗАЦИИ (is_same):
1. left is right → True (без инспекции содержимого)
2. Развёртка view-обёрток (__same_view__) с обеих сторон
3. Hook __is_same__ у типа left (derived типы) — приоритетнее реестра.
   Сгенерированный hook действует только для класса, для которого он
   сгенерирован: подкласс с новыми полями должен быть derived заново
4. Handler из реестра по конкретному типу left (singledispatch, MRO/ABC)
5. Разные конкретные типы → False, если handler не cross-type
"""

import functools
import logging
from typing import Any, Callable, Final, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# =============================================================================
# ИМЕНА АТРИБУТОВ ПРОТОКОЛА
# =============================================================================

# Метод, который derive_is_same устанавливает на класс
HOOK_ATTR: Final[str] = "__is_same__"

# Метод view-обёрток (Cow): возвращает значение, на которое смотрит view
VIEW_ATTR: Final[str] = "__same_view__"

# Класс, для которого сгенерирован hook (атрибут функции __is_same__)
OWNER_ATTR: Final[str] = "__is_same_owner__"


Handler = Callable[[Any, Any], bool]


class NotComparableError(TypeError):
    """
    Тип не реализует протокол sameness.

    Аналог отсутствия capability: для типа нет ни handler в реестре,
    ни метода __is_same__. Это ошибка использования, а не результат
    сравнения.
    """

    pass


@runtime_checkable
class IsSame(Protocol):
    """Типы, реализующие протокол через метод __is_same__."""

    def __is_same__(self, other: Any) -> bool: ...


# =============================================================================
# РЕЕСТР HANDLERS
# =============================================================================


def _not_comparable(left: Any, right: Any) -> bool:
    raise NotComparableError(
        f"type {type(left).__qualname__!r} does not implement the sameness protocol "
        f"(register a handler or apply @derive_is_same)"
    )


_dispatch = functools.singledispatch(_not_comparable)

# Handlers, принимающие right другого конкретного типа
_CROSS_TYPE_HANDLERS: set[Handler] = set()


def register(
    cls: type,
    func: Handler | None = None,
    *,
    cross_type: bool = False,
) -> Any:
    """
    Регистрация handler для конкретного типа (или ABC).

    Можно использовать как декоратор:

        @register(MyType)
        def _same_my_type(left, right) -> bool: ...

    Args:
        cls: Тип левого операнда
        func: Handler (left, right) -> bool; если None — возвращается декоратор
        cross_type: Handler принимает right другого конкретного типа
            (например, PurePath против str)

    Returns:
        Handler (или декоратор)
    """

    def decorator(handler: Handler) -> Handler:
        _dispatch.register(cls, handler)
        if cross_type:
            _CROSS_TYPE_HANDLERS.add(handler)
        logger.debug("sameness handler registered for %s", cls.__qualname__)
        return handler

    if func is not None:
        return decorator(func)
    return decorator


def handler_for(cls: type) -> Handler:
    """Handler, который будет выбран для левого операнда типа cls."""
    return _dispatch.dispatch(cls)


# =============================================================================
# ОПЕРАЦИИ ПРОТОКОЛА
# =============================================================================


def _unwrap_view(value: Any) -> Any:
    view = getattr(type(value), VIEW_ATTR, None)
    while view is not None:
        value = view(value)
        view = getattr(type(value), VIEW_ATTR, None)
    return value


def is_same(left: Any, right: Any) -> bool:
    """
    Проверка, что right наблюдаемо идентичен left.

    Операция чистая: операнды не модифицируются, для поддерживаемых типов
    исключений нет.

    Args:
        left: Предыдущее значение
        right: Новое значение

    Returns:
        True если значения "те же самые" в смысле протокола

    Raises:
        NotComparableError: Если для типа left протокол не реализован

    Examples:
        >>> is_same(0.0, -0.0)
        False
        >>> is_same(float("nan"), float("nan"))
        True
        >>> is_same([1, 2, 3], [1, 2])
        False
    """
    if left is right:
        return True

    left = _unwrap_view(left)
    right = _unwrap_view(right)
    if left is right:
        return True

    left_type = type(left)

    hook = getattr(left_type, HOOK_ATTR, None)
    if hook is not None and getattr(hook, OWNER_ATTR, left_type) is not left_type:
        # Унаследованный сгенерированный hook не видит полей подкласса
        hook = None
    if hook is not None:
        if type(right) is not left_type:
            return False
        return bool(hook(left, right))

    handler = _dispatch.dispatch(left_type)
    if handler is _not_comparable:
        return _not_comparable(left, right)

    if type(right) is not left_type and handler not in _CROSS_TYPE_HANDLERS:
        return False

    return handler(left, right)


def is_not_same(left: Any, right: Any) -> bool:
    """Эквивалентно `not is_same(left, right)`."""
    return not is_same(left, right)
