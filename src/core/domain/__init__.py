"""
Domain models and value objects.

Contains the missing-value marker and the numeric sequence/matrix models.
"""

from src.core.domain.missing import (
    NA,
    MaybeFloat,
    is_missing,
    normalize_missing,
    propagate,
)
from src.core.domain.sequence import NumericMatrix, NumericSequence

__all__ = [
    # Missing marker
    "NA",
    "MaybeFloat",
    "is_missing",
    "normalize_missing",
    "propagate",
    # Models
    "NumericSequence",
    "NumericMatrix",
]
