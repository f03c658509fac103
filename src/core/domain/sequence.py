"""
NumericSequence / NumericMatrix — входные данные редьюсеров

Immutable Pydantic модели числовой последовательности и матрицы.
Элементы — MaybeFloat (число или NA). NaN нормализуется в NA при валидации.

Редьюсеры никогда не изменяют вход: каждый вызов создаёт новый результат.
"""

from typing import Iterator

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.missing import MaybeFloat, is_missing, normalize_missing


# =============================================================================
# NUMERIC SEQUENCE
# =============================================================================


class NumericSequence(BaseModel):
    """
    Упорядоченная конечная последовательность чисел с возможными пропусками.

    Immutable модель (frozen=True). Может быть пустой — проверка на
    непустоту выполняется в конкретном редьюсере.
    """

    values: tuple[MaybeFloat, ...] = Field(
        default=(), description="Элементы последовательности (float или NA)"
    )

    model_config = {"frozen": True, "strict": True}  # Immutable, без lax-приведения

    @field_validator("values")
    @classmethod
    def normalize_nan(cls, v: tuple[MaybeFloat, ...]) -> tuple[MaybeFloat, ...]:
        """NaN → NA"""
        return tuple(normalize_missing(item) for item in v)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[MaybeFloat]:  # type: ignore[override]
        return iter(self.values)

    def __getitem__(self, index: int) -> MaybeFloat:
        return self.values[index]

    @property
    def has_missing(self) -> bool:
        """True если хотя бы один элемент пропущен"""
        return any(is_missing(item) for item in self.values)

    @property
    def missing_count(self) -> int:
        """Количество пропущенных элементов"""
        return sum(1 for item in self.values if is_missing(item))

    def present_values(self) -> list[float]:
        """Только присутствующие значения, порядок сохраняется"""
        return [item for item in self.values if not is_missing(item)]


# =============================================================================
# NUMERIC MATRIX
# =============================================================================


class NumericMatrix(BaseModel):
    """
    Прямоугольная матрица чисел с возможными пропусками (построчно).
    """

    rows: tuple[tuple[MaybeFloat, ...], ...] = Field(
        default=(), description="Строки матрицы одинаковой ширины"
    )

    model_config = {"frozen": True, "strict": True}  # Immutable, без lax-приведения

    @field_validator("rows")
    @classmethod
    def normalize_nan(
        cls, v: tuple[tuple[MaybeFloat, ...], ...]
    ) -> tuple[tuple[MaybeFloat, ...], ...]:
        return tuple(tuple(normalize_missing(item) for item in row) for row in v)

    @model_validator(mode="after")
    def validate_rectangular(self) -> "NumericMatrix":
        """Все строки должны иметь одинаковую ширину"""
        widths = {len(row) for row in self.rows}
        if len(widths) > 1:
            raise ValueError(f"matrix rows must have equal width, got widths {sorted(widths)}")
        return self

    @property
    def nrow(self) -> int:
        return len(self.rows)

    @property
    def ncol(self) -> int:
        if not self.rows:
            return 0
        return len(self.rows[0])
