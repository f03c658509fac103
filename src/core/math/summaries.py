"""
Summaries — редьюсеры последовательности в скаляр

- value_range: (min, max) одним линейным проходом
- variance: выборочная дисперсия двухпроходным алгоритмом
- total / mean: сумма и среднее
- all_true: логическая редукция

Пропуски:
- na_rm=False → пропуск распространяется в результат (NA), без предупреждений
- na_rm=True → пропуски отбрасываются, одно MissingValueWarning на вызов

ФОРМУЛЫ:
    mean = (Σ x_i) / n
    var  = Σ (x_i - mean)² / (n - 1),  n >= 2
"""

from typing import Iterable, NamedTuple

from src.core.domain.missing import NA, MaybeFloat, normalize_missing
from src.core.domain.sequence import NumericSequence
from src.core.math.numerical_safeguards import (
    MIN_VARIANCE_OBSERVATIONS,
    InvalidInput,
    SequenceLike,
    as_numeric_sequence,
    validate_non_empty,
    warn_missing,
)


# =============================================================================
# TYPES
# =============================================================================


class RangeResult(NamedTuple):
    """Результат value_range: всегда два элемента."""

    min: MaybeFloat
    max: MaybeFloat


def _present_or_none(
    values: NumericSequence, na_rm: bool, operation: str
) -> list[float] | None:
    """
    Присутствующие значения либо None, если пропуск должен распространиться.

    При na_rm=True и наличии пропусков выдаётся одно предупреждение.
    """
    missing_count = values.missing_count
    if missing_count == 0:
        return list(values.values)

    if not na_rm:
        return None

    warn_missing(operation, f"{missing_count} skipped", stacklevel=4)
    return values.present_values()


# =============================================================================
# RANGE
# =============================================================================


def value_range(x: SequenceLike, na_rm: bool = False) -> RangeResult:
    """
    Минимум и максимум последовательности.

    Линейный проход, бегущие экстремумы инициализируются первым значением.

    Args:
        x: Непустая числовая последовательность
        na_rm: Пропускать NA (с предупреждением) вместо возврата (NA, NA)

    Returns:
        RangeResult(min, max); (NA, NA) если есть пропуски и na_rm=False
        или если все значения пропущены

    Raises:
        InvalidInput: если x пустая

    Examples:
        >>> value_range([3, 1, 4, 1, 5, 9, 2, 6])
        RangeResult(min=1.0, max=9.0)
    """
    values = as_numeric_sequence(x)
    validate_non_empty(values)

    present = _present_or_none(values, na_rm, "value_range")
    if not present:
        return RangeResult(NA, NA)

    omin = omax = present[0]
    for value in present[1:]:
        omin = min(value, omin)
        omax = max(value, omax)

    return RangeResult(omin, omax)


# =============================================================================
# TOTAL / MEAN
# =============================================================================


def total(x: SequenceLike, na_rm: bool = False) -> MaybeFloat:
    """
    Сумма элементов одним циклом.

    Пустая последовательность → 0.0.

    Examples:
        >>> total([1, 2, 3.5])
        6.5
        >>> total([])
        0.0
    """
    values = as_numeric_sequence(x)
    present = _present_or_none(values, na_rm, "total")
    if present is None:
        return NA

    acc = 0.0
    for value in present:
        acc += value
    # inf + -inf → NaN → NA
    return normalize_missing(acc)


def mean(x: SequenceLike, na_rm: bool = False) -> MaybeFloat:
    """
    Арифметическое среднее.

    Raises:
        InvalidInput: если x пустая

    Returns:
        Среднее, NA при распространении пропуска или если все значения отброшены
    """
    values = as_numeric_sequence(x)
    validate_non_empty(values)

    present = _present_or_none(values, na_rm, "mean")
    if not present:
        return NA

    acc = 0.0
    for value in present:
        acc += value
    return normalize_missing(acc / len(present))


# =============================================================================
# VARIANCE
# =============================================================================


def variance(x: SequenceLike, na_rm: bool = False) -> MaybeFloat:
    """
    Выборочная дисперсия (двухпроходный алгоритм).

    1-й проход: mean = running_sum / n
    2-й проход: Σ (x_i - mean)² / (n - 1)

    Тотальная функция: при n < 2 возвращает NA, а не исключение.

    Args:
        x: Числовая последовательность
        na_rm: Отбросить пропуски (с предупреждением) перед расчётом

    Returns:
        Дисперсия или NA

    Examples:
        >>> variance([2, 2, 2, 2])
        0.0
        >>> variance([1, 2, 3, 4])
        1.6666666666666667
        >>> variance([5]) is None
        True
    """
    values = as_numeric_sequence(x)
    present = _present_or_none(values, na_rm, "variance")
    if present is None:
        return NA

    n = len(present)
    if n < MIN_VARIANCE_OBSERVATIONS:
        return NA

    running_sum = 0.0
    for value in present:
        running_sum += value
    mx = running_sum / n

    squares = 0.0
    for value in present:
        squares += (value - mx) ** 2

    return normalize_missing(squares / (n - 1))


# =============================================================================
# LOGICAL
# =============================================================================


def all_true(flags: Iterable[bool | None]) -> bool | None:
    """
    Логическое "все истинны" с трёхзначной логикой.

    - хотя бы один False → False
    - иначе хотя бы один NA → NA
    - иначе → True (в том числе для пустого входа)

    Raises:
        InvalidInput: если элемент не bool и не NA

    Examples:
        >>> all_true([True, True])
        True
        >>> all_true([True, None, False])
        False
        >>> all_true([True, None]) is None
        True
    """
    saw_missing = False
    for flag in flags:
        if flag is None:
            saw_missing = True
        elif not isinstance(flag, bool):
            raise InvalidInput(f"expected bool or NA, got {flag!r}")
        elif not flag:
            return False
    return NA if saw_missing else True
