"""
Core math modules

Примитивы арифметики произвольной точности: операции над одним словом
и над модулями (беззнаковыми последовательностями цифр).
"""

# Digit words
from src.core.math.digit_words import (
    DIGIT_BASE,
    DIGIT_MAX,
    INT32_MAX,
    INT32_MIN,
    WORD_BITS,
    add_with_carry,
    divide_double_word,
    is_valid_word,
    multiply_with_carry,
    subtract_with_borrow,
    sum_is_safe,
    validate_word,
)

# Errors
from src.core.math.errors import (
    ContractViolation,
    DivisionByZero,
    IntegerArithmeticError,
    MagnitudeUnderflow,
    ModulusDomainViolation,
    ParseError,
)

# Magnitude
from src.core.math.magnitude import (
    Magnitude,
    less_in_magnitude,
)

__all__ = [
    # Digit words — Constants
    "DIGIT_BASE",
    "DIGIT_MAX",
    "INT32_MAX",
    "INT32_MIN",
    "WORD_BITS",
    # Digit words — Functions
    "add_with_carry",
    "divide_double_word",
    "is_valid_word",
    "multiply_with_carry",
    "subtract_with_borrow",
    "sum_is_safe",
    "validate_word",
    # Errors
    "ContractViolation",
    "DivisionByZero",
    "IntegerArithmeticError",
    "MagnitudeUnderflow",
    "ModulusDomainViolation",
    "ParseError",
    # Magnitude — Types
    "Magnitude",
    # Magnitude — Functions (остальные через src.core.math.magnitude)
    "less_in_magnitude",
]
