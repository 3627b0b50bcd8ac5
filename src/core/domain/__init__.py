"""
Domain models and value objects.

Contains the immutable BigInteger value type and its construction errors.
"""

from src.core.domain.big_integer import (
    DIGIT_CHARS,
    ONE,
    ZERO,
    BigInteger,
    BigIntegerError,
    EmptyInputError,
    FormatError,
    UnsupportedTypeError,
)

__all__ = [
    # Constants
    "DIGIT_CHARS",
    "ZERO",
    "ONE",
    # Model
    "BigInteger",
    # Exceptions
    "BigIntegerError",
    "EmptyInputError",
    "FormatError",
    "UnsupportedTypeError",
]
