"""
Numerical Safeguards — предусловия и сигналы редьюсеров

Модуль объединяет общие для всех редьюсеров механизмы:
- Конфигурационные константы (lag по умолчанию, минимум наблюдений)
- Исключение InvalidInput для нарушенных предусловий (фатально)
- Предупреждение MissingValueWarning для пропусков (не фатально)
- Приведение входа к NumericSequence / NumericMatrix

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение предусловия → InvalidInput немедленно, без retry/recovery
2. Обнаруженный пропуск никогда не прерывает вычисление
3. Вход никогда не мутируется
"""

import logging
import warnings
from typing import Final, Iterable

from pydantic import ValidationError

from src.core.domain.missing import MaybeFloat
from src.core.domain.sequence import NumericMatrix, NumericSequence

logger = logging.getLogger(__name__)

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Сдвиг по умолчанию для lagged_difference
DEFAULT_LAG: Final[int] = 1

# Выборочная дисперсия определена начиная с двух наблюдений
MIN_VARIANCE_OBSERVATIONS: Final[int] = 2

# Текст предупреждения о пропусках
MISSING_VALUES_MESSAGE: Final[str] = "Contains missing values."


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidInput(ValueError):
    """
    Нарушение предусловия редьюсера.

    Примеры: пустая последовательность, lag >= длины, нечисловые элементы.
    Всегда фатально и сразу передаётся вызывающему коду.
    """
    pass


class MissingValueWarning(UserWarning):
    """
    Не фатальное предупреждение: при na_rm=True встречен пропуск.

    Вычисление продолжается, соответствующий элемент результата — NA.
    """
    pass


# =============================================================================
# ПРИВЕДЕНИЕ ВХОДА
# =============================================================================


SequenceLike = NumericSequence | Iterable[MaybeFloat]
MatrixLike = NumericMatrix | Iterable[Iterable[MaybeFloat]]


def as_numeric_sequence(x: SequenceLike) -> NumericSequence:
    """
    Приведение входа к NumericSequence.

    Args:
        x: NumericSequence или любой iterable чисел / NA

    Returns:
        NumericSequence (тот же объект, если уже провалидирован)

    Raises:
        InvalidInput: если x — строка или элементы не являются числами или NA
            (bool и числовые строки тоже отвергаются)

    Examples:
        >>> as_numeric_sequence([1, None, 3.5]).values
        (1.0, None, 3.5)
    """
    if isinstance(x, NumericSequence):
        return x

    # tuple("3149") разбил бы строку на символы
    if isinstance(x, (str, bytes)):
        raise InvalidInput(f"expected a sequence of numbers or NA, got {type(x).__name__}")

    try:
        return NumericSequence(values=tuple(x))
    except (ValidationError, TypeError) as exc:
        raise InvalidInput(f"expected a sequence of numbers or NA: {exc}") from exc


def as_numeric_matrix(x: MatrixLike) -> NumericMatrix:
    """
    Приведение входа к NumericMatrix.

    Raises:
        InvalidInput: если строки разной ширины или элементы не числа
    """
    if isinstance(x, NumericMatrix):
        return x

    if isinstance(x, (str, bytes)):
        raise InvalidInput(f"expected a matrix of numbers or NA, got {type(x).__name__}")

    try:
        return NumericMatrix(rows=tuple(tuple(row) for row in x))
    except (ValidationError, TypeError) as exc:
        raise InvalidInput(f"expected a rectangular matrix of numbers or NA: {exc}") from exc


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_empty(x: NumericSequence, name: str = "x") -> None:
    """
    Валидация, что последовательность не пустая.

    Raises:
        InvalidInput: если len(x) == 0
    """
    if len(x) == 0:
        raise InvalidInput(f"`length({name})` must be greater than 0.")


def validate_lag(lag: int, n: int) -> None:
    """
    Валидация сдвига для lagged_difference.

    Args:
        lag: Сдвиг (целое >= 1)
        n: Длина последовательности

    Raises:
        InvalidInput: если lag не целое, lag < 1 или lag >= n
    """
    if isinstance(lag, bool) or not isinstance(lag, int):
        raise InvalidInput(f"`lag` must be an integer, got {lag!r}")

    if lag < 1:
        raise InvalidInput(f"`lag` must be at least 1, got {lag}")

    if lag >= n:
        raise InvalidInput("`lag` must be less than `length(x)`.")


# =============================================================================
# ПРЕДУПРЕЖДЕНИЯ
# =============================================================================


def warn_missing(operation: str, detail: str, stacklevel: int = 3) -> None:
    """
    Выдать MissingValueWarning вызывающему коду.

    stacklevel=3 указывает на строку, вызвавшую редьюсер.

    Args:
        operation: Имя редьюсера (для лога)
        detail: Позиция или количество пропусков
        stacklevel: Глубина стека для warnings.warn
    """
    logger.debug("%s: missing value skipped (%s)", operation, detail)
    warnings.warn(
        f"{operation}: {MISSING_VALUES_MESSAGE} ({detail})",
        MissingValueWarning,
        stacklevel=stacklevel,
    )
