"""
Core math modules

Потоковые числовые редьюсеры над последовательностями с пропусками.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Configuration constants
    DEFAULT_LAG,
    MIN_VARIANCE_OBSERVATIONS,
    MISSING_VALUES_MESSAGE,
    # Exceptions / warnings
    InvalidInput,
    MissingValueWarning,
    # Coercion
    as_numeric_matrix,
    as_numeric_sequence,
    # Validation
    validate_lag,
    validate_non_empty,
)

# Cumulative
from src.core.math.cumulative import (
    ExtremumDirection,
    cumulative_max,
    cumulative_min,
    cumulative_product,
    cumulative_sum,
    running_extremum,
)

# Differences
from src.core.math.differences import lagged_difference

# Summaries
from src.core.math.summaries import (
    RangeResult,
    all_true,
    mean,
    total,
    value_range,
    variance,
)

# Elementwise
from src.core.math.elementwise import (
    missing_mask,
    pointwise_distance,
    row_sums,
    sign,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_LAG",
    "MIN_VARIANCE_OBSERVATIONS",
    "MISSING_VALUES_MESSAGE",
    # Numerical Safeguards — Exceptions
    "InvalidInput",
    "MissingValueWarning",
    # Numerical Safeguards — Coercion
    "as_numeric_matrix",
    "as_numeric_sequence",
    # Numerical Safeguards — Validation
    "validate_lag",
    "validate_non_empty",
    # Cumulative — Types
    "ExtremumDirection",
    # Cumulative — Functions
    "cumulative_max",
    "cumulative_min",
    "cumulative_product",
    "cumulative_sum",
    "running_extremum",
    # Differences
    "lagged_difference",
    # Summaries — Types
    "RangeResult",
    # Summaries — Functions
    "all_true",
    "mean",
    "total",
    "value_range",
    "variance",
    # Elementwise
    "missing_mask",
    "pointwise_distance",
    "row_sums",
    "sign",
]
