"""
Core arithmetic primitives and the BigInteger value type.

This module contains pure, side-effect free building blocks: digit-buffer
algorithms (math) and the immutable signed integer built on them (domain).
"""
