"""
Missing — маркер пропущенного значения

Пропуск (NA) представлен как None: числовой элемент последовательности —
это tagged optional (present value | missing), тип MaybeFloat.

ИНВАРИАНТЫ:
1. Пропуск определяется только через is_missing(), никогда через сравнения
2. Арифметика с пропуском даёт пропуск (propagate)
3. float('nan') трактуется как пропуск
"""

import math
from typing import Callable, Final

# Tagged optional numeric: float | NA
MaybeFloat = float | None

# Маркер пропущенного значения
NA: Final[None] = None


def is_missing(value: object) -> bool:
    """
    Проверка, является ли значение пропуском.

    Args:
        value: Проверяемое значение

    Returns:
        True для NA (None) и для NaN

    Examples:
        >>> is_missing(None)
        True
        >>> is_missing(float('nan'))
        True
        >>> is_missing(0.0)
        False
    """
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def normalize_missing(value: MaybeFloat) -> MaybeFloat:
    """NaN → NA, остальные значения без изменений."""
    if is_missing(value):
        return NA
    return value


def propagate(
    op: Callable[[float, float], float],
    left: MaybeFloat,
    right: MaybeFloat,
) -> MaybeFloat:
    """
    Бинарная арифметика с распространением пропусков.

    Если хотя бы один операнд пропущен — результат NA.
    NaN, полученный в самой операции (например, inf - inf), тоже становится NA.

    Args:
        op: Бинарная операция (operator.add, operator.mul, ...)
        left: Левый операнд
        right: Правый операнд

    Returns:
        op(left, right) или NA

    Examples:
        >>> import operator
        >>> propagate(operator.add, 1.0, 2.0)
        3.0
        >>> propagate(operator.add, 1.0, None) is None
        True
    """
    if is_missing(left) or is_missing(right):
        return NA
    return normalize_missing(op(left, right))
