"""
Core math modules для decimal big integer

Алгоритмы "в столбик" над десятичными модулями чисел.
"""

# Digits (schoolbook magnitude arithmetic)
from src.core.math.digits import (
    # Constants
    BASE,
    DIGIT_CHARS,
    SIGN_NEGATIVE,
    SIGN_POSITIVE,
    # Normalization & comparison
    compare_magnitudes,
    is_zero_magnitude,
    trim_leading_zeros,
    # Arithmetic
    add_magnitudes,
    divide_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)

__all__ = [
    # Digits — Constants
    "BASE",
    "DIGIT_CHARS",
    "SIGN_NEGATIVE",
    "SIGN_POSITIVE",
    # Digits — Normalization & comparison
    "compare_magnitudes",
    "is_zero_magnitude",
    "trim_leading_zeros",
    # Digits — Arithmetic
    "add_magnitudes",
    "divide_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
]
