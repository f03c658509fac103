"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Приведение входа (as_numeric_sequence / as_numeric_matrix)
2. Валидацию предусловий (validate_non_empty / validate_lag)
3. Выдачу и логирование MissingValueWarning
"""

import logging

import pytest

from src.core.domain import NA, NumericSequence
from src.core.math.numerical_safeguards import (
    MISSING_VALUES_MESSAGE,
    InvalidInput,
    MissingValueWarning,
    as_numeric_matrix,
    as_numeric_sequence,
    validate_lag,
    validate_non_empty,
    warn_missing,
)


# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ ВХОДА
# =============================================================================


class TestAsNumericSequence:
    """Тесты для as_numeric_sequence"""

    def test_list_converted(self):
        seq = as_numeric_sequence([1, NA, 2.5])
        assert seq.values == (1.0, NA, 2.5)

    def test_generator_converted(self):
        seq = as_numeric_sequence(float(i) for i in range(3))
        assert seq.values == (0.0, 1.0, 2.0)

    def test_model_passed_through(self):
        """Уже провалидированная модель возвращается как есть"""
        seq = NumericSequence(values=(1.0,))
        assert as_numeric_sequence(seq) is seq

    def test_invalid_elements_rejected(self):
        with pytest.raises(InvalidInput):
            as_numeric_sequence(["x"])

    def test_non_iterable_rejected(self):
        with pytest.raises(InvalidInput):
            as_numeric_sequence(42)

    def test_string_rejected(self):
        """Строка не разбивается на символы-числа"""
        with pytest.raises(InvalidInput):
            as_numeric_sequence("3149")
        with pytest.raises(InvalidInput):
            as_numeric_sequence(b"12")

    def test_numeric_strings_rejected(self):
        with pytest.raises(InvalidInput):
            as_numeric_sequence(["1", "2"])

    def test_bools_rejected(self):
        with pytest.raises(InvalidInput):
            as_numeric_sequence([True, False])

    def test_ints_accepted(self):
        assert as_numeric_sequence([1, 2]).values == (1.0, 2.0)

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInput, ValueError)


class TestAsNumericMatrix:
    """Тесты для as_numeric_matrix"""

    def test_rows_converted(self):
        matrix = as_numeric_matrix([[1, 2], [3, NA]])
        assert matrix.nrow == 2
        assert matrix.ncol == 2
        assert matrix.rows[1] == (3.0, NA)

    def test_ragged_rejected(self):
        with pytest.raises(InvalidInput):
            as_numeric_matrix([[1, 2, 3], [1]])

    def test_string_cells_rejected(self):
        with pytest.raises(InvalidInput):
            as_numeric_matrix(["12", "34"])
        with pytest.raises(InvalidInput):
            as_numeric_matrix([[True, 1.0]])


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_non_empty / validate_lag"""

    def test_non_empty_ok(self):
        validate_non_empty(NumericSequence(values=(1.0,)))

    def test_empty_rejected(self):
        with pytest.raises(InvalidInput, match="greater than 0"):
            validate_non_empty(NumericSequence())

    @pytest.mark.parametrize("lag,n", [(1, 2), (3, 4), (1, 100)])
    def test_valid_lag(self, lag, n):
        validate_lag(lag, n)

    @pytest.mark.parametrize("lag,n", [(2, 2), (5, 3), (0, 3), (-1, 3), (1, 0)])
    def test_invalid_lag(self, lag, n):
        with pytest.raises(InvalidInput):
            validate_lag(lag, n)

    def test_bool_lag_rejected(self):
        with pytest.raises(InvalidInput, match="integer"):
            validate_lag(True, 3)


# =============================================================================
# ТЕСТЫ ПРЕДУПРЕЖДЕНИЙ
# =============================================================================


class TestWarnMissing:
    """Тесты для warn_missing"""

    def test_warning_emitted(self):
        with pytest.warns(MissingValueWarning, match=MISSING_VALUES_MESSAGE):
            warn_missing("cumulative_sum", "position 1")

    def test_warning_is_not_error(self):
        """Предупреждение не является исключением ValueError"""
        assert issubclass(MissingValueWarning, UserWarning)
        assert not issubclass(MissingValueWarning, ValueError)

    def test_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="src.core.math.numerical_safeguards")
        with pytest.warns(MissingValueWarning):
            warn_missing("lagged_difference", "position 3")
        assert "lagged_difference" in caplog.text
        assert "position 3" in caplog.text
