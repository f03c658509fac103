"""
Elementwise — поэлементные операции и построчные суммы

pointwise_distance, sign, missing_mask, row_sums.
"""

import math
import operator

from src.core.domain.missing import NA, MaybeFloat, is_missing, normalize_missing, propagate
from src.core.math.numerical_safeguards import (
    InvalidInput,
    MatrixLike,
    SequenceLike,
    as_numeric_matrix,
    as_numeric_sequence,
    warn_missing,
)


def pointwise_distance(x: float, ys: SequenceLike) -> list[MaybeFloat]:
    """
    Евклидово расстояние от скаляра x до каждого элемента ys.

    out[i] = sqrt((ys[i] - x)²) = |ys[i] - x|

    Examples:
        >>> pointwise_distance(0.5, [0.0, 1.0, 2.5])
        [0.5, 0.5, 2.0]
    """
    values = as_numeric_sequence(ys)
    out: list[MaybeFloat] = []
    for value in values:
        diff = propagate(operator.sub, value, x)
        out.append(NA if diff is None else normalize_missing(math.sqrt(diff**2)))
    return out


def sign(x: MaybeFloat) -> int | None:
    """
    Знак числа: 1, 0 или -1; NA для пропуска.

    Raises:
        InvalidInput: если x не число (bool тоже отвергается)

    Examples:
        >>> sign(-3.2), sign(0), sign(7)
        (-1, 0, 1)
    """
    if is_missing(x):
        return NA
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise InvalidInput(f"expected a number or NA, got {x!r}")
    if x > 0:
        return 1
    if x == 0:
        return 0
    return -1


def missing_mask(x: SequenceLike) -> list[bool]:
    """Поэлементный признак пропуска."""
    return [is_missing(value) for value in as_numeric_sequence(x)]


def row_sums(matrix: MatrixLike, na_rm: bool = False) -> list[MaybeFloat]:
    """
    Суммы по строкам матрицы.

    Args:
        matrix: NumericMatrix или список строк одинаковой ширины
        na_rm: Пропускать NA внутри строки (одно предупреждение на строку)

    Returns:
        Список длины nrow; NA для строк с пропуском при na_rm=False

    Raises:
        InvalidInput: если строки разной ширины

    Examples:
        >>> row_sums([[1, 2], [3, 4]])
        [3.0, 7.0]
    """
    m = as_numeric_matrix(matrix)
    out: list[MaybeFloat] = []
    for i, row in enumerate(m.rows):
        acc: MaybeFloat = 0.0
        skipped = 0
        for value in row:
            if na_rm and is_missing(value):
                skipped += 1
                continue
            acc = propagate(operator.add, acc, value)
        if skipped:
            warn_missing("row_sums", f"row {i}: {skipped} skipped")
        out.append(acc)
    return out
