"""
Differences — разности со сдвигом

    out[i] = x[i + lag] - x[i],  i = 0 .. n - lag - 1

При na_rm=True проверяется только правый операнд x[i + lag]: каждый
пропущенный элемент входа даёт ровно одно предупреждение. Пропуск в левом
операнде распространяется в результат как NA без предупреждения.
"""

import operator

from src.core.domain.missing import NA, MaybeFloat, is_missing, propagate
from src.core.math.numerical_safeguards import (
    DEFAULT_LAG,
    SequenceLike,
    as_numeric_sequence,
    validate_lag,
    warn_missing,
)


def lagged_difference(
    x: SequenceLike,
    lag: int = DEFAULT_LAG,
    na_rm: bool = False,
) -> list[MaybeFloat]:
    """
    Разность со сдвигом lag.

    Args:
        x: Числовая последовательность
        lag: Сдвиг, 1 <= lag < len(x)
        na_rm: Предупреждать о пропусках в правом операнде

    Returns:
        Новый список длины len(x) - lag

    Raises:
        InvalidInput: если lag >= len(x), lag < 1 или lag не целое

    Examples:
        >>> lagged_difference([2, 4, 1, 8])
        [2.0, -3.0, 7.0]
        >>> lagged_difference([1, 2, 4, 8], lag=2)
        [3.0, 6.0]
    """
    values = as_numeric_sequence(x)
    validate_lag(lag, len(values))

    out: list[MaybeFloat] = []
    for i in range(lag, len(values)):
        right = values[i]
        if na_rm and is_missing(right):
            out.append(NA)
            warn_missing("lagged_difference", f"position {i}")
        else:
            out.append(propagate(operator.sub, right, values[i - lag]))
    return out
