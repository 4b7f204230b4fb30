"""
Domain models and value objects.

Contains the signed arbitrary-precision Int value type.
"""

from src.core.domain.integer import (
    DECIMAL_DIGITS,
    DECIMAL_RADIX,
    INT32_MIN_MAGNITUDE,
    Int,
)

__all__ = [
    # Constants
    "DECIMAL_DIGITS",
    "DECIMAL_RADIX",
    "INT32_MIN_MAGNITUDE",
    # Int model
    "Int",
]
