"""
Cumulative — накопительные редьюсеры

Накопительные произведение, минимум, максимум и сумма.

Каждый редьюсер — явный fold по индексам: аккумулятор out[i-1]
передаётся вперёд, других состояний нет.

    out[0] = x[0]
    out[i] = f(out[i-1], x[i]),  i >= 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(out) == len(x), out[0] == x[0]
2. Пустой вход → InvalidInput
3. Пропуск в аккумуляторе распространяется на все последующие элементы
"""

import operator
from enum import Enum
from typing import Callable

from src.core.domain.missing import NA, MaybeFloat, is_missing, propagate
from src.core.math.numerical_safeguards import (
    InvalidInput,
    SequenceLike,
    as_numeric_sequence,
    validate_non_empty,
    warn_missing,
)


# =============================================================================
# ENUMS
# =============================================================================


class ExtremumDirection(str, Enum):
    """Направление накопительного экстремума"""

    MIN = "min"
    MAX = "max"


# =============================================================================
# GENERIC FOLD
# =============================================================================


def _accumulate(
    x: SequenceLike,
    step: Callable[[MaybeFloat, MaybeFloat], MaybeFloat],
) -> list[MaybeFloat]:
    values = as_numeric_sequence(x)
    validate_non_empty(values)

    acc = values[0]
    out = [acc]
    for value in values.values[1:]:
        acc = step(acc, value)
        out.append(acc)
    return out


# =============================================================================
# CUMULATIVE PRODUCT
# =============================================================================


def cumulative_product(x: SequenceLike) -> list[MaybeFloat]:
    """
    Накопительное произведение.

    out[i] = out[i-1] * x[i]. Пропуски распространяются без предупреждений.

    Args:
        x: Числовая последовательность, len(x) >= 1

    Returns:
        Новый список длины len(x)

    Raises:
        InvalidInput: если x пустая

    Examples:
        >>> cumulative_product([1, 2, 3, 4])
        [1.0, 2.0, 6.0, 24.0]
    """
    return _accumulate(x, lambda acc, value: propagate(operator.mul, acc, value))


# =============================================================================
# CUMULATIVE MIN / MAX
# =============================================================================


def running_extremum(x: SequenceLike, direction: ExtremumDirection) -> list[MaybeFloat]:
    """
    Накопительный экстремум (общая реализация cummin/cummax).

    Сравнения с пропуском не выполняются: если out[i-1] или x[i] — NA,
    результат NA (и далее NA до конца).

    Args:
        x: Числовая последовательность, len(x) >= 1
        direction: ExtremumDirection.MIN или ExtremumDirection.MAX

    Returns:
        Новый список длины len(x)

    Raises:
        InvalidInput: если x пустая или direction не min/max
    """
    try:
        direction = ExtremumDirection(direction)
    except ValueError as exc:
        raise InvalidInput(f"direction must be 'min' or 'max', got {direction!r}") from exc

    pick = min if direction is ExtremumDirection.MIN else max

    def step(acc: MaybeFloat, value: MaybeFloat) -> MaybeFloat:
        if is_missing(acc) or is_missing(value):
            return NA
        return pick(acc, value)

    return _accumulate(x, step)


def cumulative_min(x: SequenceLike) -> list[MaybeFloat]:
    """
    Накопительный минимум.

    Examples:
        >>> cumulative_min([3, 1, 4, 1, 5])
        [3.0, 1.0, 1.0, 1.0, 1.0]
    """
    return running_extremum(x, ExtremumDirection.MIN)


def cumulative_max(x: SequenceLike) -> list[MaybeFloat]:
    """
    Накопительный максимум.

    Examples:
        >>> cumulative_max([3, 1, 4, 1, 5])
        [3.0, 3.0, 4.0, 4.0, 5.0]
    """
    return running_extremum(x, ExtremumDirection.MAX)


# =============================================================================
# CUMULATIVE SUM
# =============================================================================


def cumulative_sum(x: SequenceLike, na_rm: bool = False) -> list[MaybeFloat]:
    """
    Накопительная сумма с распространением пропусков.

    out[0] = x[0] (без проверки). Для i >= 1:
    - na_rm=True и x[i] пропущен → out[i] = NA + MissingValueWarning
    - иначе → out[i] = out[i-1] + x[i]

    После первого NA все последующие элементы тоже NA (каскад):
    сложение с пропущенным аккумулятором даёт пропуск.

    Args:
        x: Числовая последовательность, len(x) >= 1
        na_rm: Проверять пропуски и предупреждать о них

    Returns:
        Новый список длины len(x)

    Raises:
        InvalidInput: если x пустая

    Examples:
        >>> cumulative_sum([1, 2, 3])
        [1.0, 3.0, 6.0]
        >>> cumulative_sum([1, None, 3])
        [1.0, None, None]
    """
    values = as_numeric_sequence(x)
    validate_non_empty(values)

    acc = values[0]
    out = [acc]
    for i in range(1, len(values)):
        value = values[i]
        if na_rm and is_missing(value):
            acc = NA
            warn_missing("cumulative_sum", f"position {i}")
        else:
            acc = propagate(operator.add, acc, value)
        out.append(acc)
    return out
