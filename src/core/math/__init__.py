"""
Core math modules

Беззнаковая арифметика над little-endian буферами десятичных цифр.
"""

# Magnitude (digit-buffer algorithms)
from src.core.math.magnitude import (
    # Constants
    DECIMAL_BASE,
    DIGIT_MAX,
    DIGIT_MIN,
    INT_CHUNK_DIGITS,
    # Types
    Digits,
    # Significant digits
    is_zero_digits,
    real_length,
    # Comparison
    compare_magnitudes,
    # Addition / subtraction
    add_magnitudes,
    subtract_magnitudes,
    # Multiplication
    multiply_magnitudes,
    # Conversion
    digits_from_int,
    # Rendering
    render_magnitude,
)

__all__ = [
    # Magnitude — Constants
    "DECIMAL_BASE",
    "DIGIT_MAX",
    "DIGIT_MIN",
    "INT_CHUNK_DIGITS",
    # Magnitude — Types
    "Digits",
    # Magnitude — Significant digits
    "is_zero_digits",
    "real_length",
    # Magnitude — Comparison
    "compare_magnitudes",
    # Magnitude — Addition / subtraction
    "add_magnitudes",
    "subtract_magnitudes",
    # Magnitude — Multiplication
    "multiply_magnitudes",
    # Magnitude — Conversion
    "digits_from_int",
    # Magnitude — Rendering
    "render_magnitude",
]
