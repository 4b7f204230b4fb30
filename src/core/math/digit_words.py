"""
Digit Words — арифметика над одним машинным словом

Модуль содержит примитивы, на которых построена вся арифметика
произвольной точности:
- Сложение с переносом (add-with-carry)
- Вычитание с заёмом (subtract-with-borrow)
- Умножение с переносом через double-width промежуточный результат
- Деление двойного слова на одно слово (для десятичной печати)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра лежит в [0, DIGIT_BASE)
2. Переполнение никогда не теряется: перенос хранит ровно «лишнюю» часть
3. Результат всегда нормализован до ширины слова (low WORD_BITS бит)
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ СЛОВА
# =============================================================================

# Ширина одной цифры в битах
WORD_BITS: Final[int] = 32

# Основание позиционной системы: 2^WORD_BITS
DIGIT_BASE: Final[int] = 1 << WORD_BITS

# Максимальное значение одной цифры
DIGIT_MAX: Final[int] = DIGIT_BASE - 1

# Границы знакового 32-битного машинного целого
INT32_MIN: Final[int] = -(1 << 31)
INT32_MAX: Final[int] = (1 << 31) - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_word(value: int) -> bool:
    """
    Проверка, что значение помещается в одну цифру.

    Args:
        value: Проверяемое значение

    Returns:
        True если 0 <= value <= DIGIT_MAX
    """
    return 0 <= value <= DIGIT_MAX


def validate_word(value: int, name: str) -> None:
    """
    Валидация, что значение является корректной цифрой.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value вне [0, DIGIT_MAX]
    """
    if not is_valid_word(value):
        raise ValueError(f"{name} must be in [0, {DIGIT_MAX}], got {value}")


def _validate_bit(value: int, name: str) -> None:
    if value not in (0, 1):
        raise ValueError(f"{name} must be 0 or 1, got {value}")


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def sum_is_safe(x: int, y: int) -> bool:
    """
    Проверка, что x + y не переполняет слово.

    Сравнение выполняется без вычисления самой суммы:
    y <= DIGIT_MAX - x.

    Examples:
        >>> sum_is_safe(1, 2)
        True
        >>> sum_is_safe(DIGIT_MAX, 1)
        False
    """
    return y <= DIGIT_MAX - x


def add_with_carry(x: int, y: int, carry: int) -> tuple[int, int]:
    """
    Сложение двух цифр с входящим переносом.

    Args:
        x: Первая цифра
        y: Вторая цифра
        carry: Входящий перенос (0 или 1)

    Returns:
        (sum, carry_out):
            - sum: младшие WORD_BITS бит x + y + carry
            - carry_out: 1 если сумма переполнила слово, иначе 0

    Raises:
        ValueError: Если x/y не являются цифрами или carry не 0/1

    Examples:
        >>> add_with_carry(1, 1, 1)
        (3, 0)
        >>> add_with_carry(DIGIT_MAX, 0, 1)
        (0, 1)
    """
    validate_word(x, "x")
    validate_word(y, "y")
    _validate_bit(carry, "carry")

    partial = (x + y) & DIGIT_MAX
    overflows = not sum_is_safe(x, y) or not sum_is_safe(partial, carry)
    return ((partial + carry) & DIGIT_MAX, 1 if overflows else 0)


def subtract_with_borrow(x: int, y: int, borrow: int) -> tuple[int, int]:
    """
    Вычитание цифр с входящим заёмом: x - y - borrow по модулю DIGIT_BASE.

    Returns:
        (difference, borrow_out): borrow_out == 1 если потребовался
        заём из следующего разряда
    """
    validate_word(x, "x")
    validate_word(y, "y")
    _validate_bit(borrow, "borrow")

    raw = x - y - borrow
    if raw < 0:
        return (raw + DIGIT_BASE, 1)
    return (raw, 0)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def multiply_with_carry(x: int, y: int, carry: int) -> tuple[int, int]:
    """
    Умножение двух цифр с входящим переносом.

    Промежуточный результат x * y + carry занимает не более двух слов:
    (B - 1)^2 + (B - 1) < B^2, поэтому старшее слово всегда цифра.

    Args:
        x: Первая цифра
        y: Вторая цифра
        carry: Входящий перенос (любая цифра)

    Returns:
        (product, carry_out): младшее и старшее слово результата

    Examples:
        >>> multiply_with_carry(DIGIT_MAX, DIGIT_MAX, DIGIT_MAX)
        (0, 4294967295)
    """
    validate_word(x, "x")
    validate_word(y, "y")
    validate_word(carry, "carry")

    wide = x * y + carry
    return (wide & DIGIT_MAX, wide >> WORD_BITS)


def divide_double_word(high: int, low: int, divisor: int) -> tuple[int, int]:
    """
    Деление двойного слова (high:low) на одну цифру.

    Требование high < divisor гарантирует, что частное помещается
    в одно слово.

    Returns:
        (quotient, remainder)

    Raises:
        ValueError: Если divisor == 0 или high >= divisor
    """
    validate_word(high, "high")
    validate_word(low, "low")
    validate_word(divisor, "divisor")
    if divisor == 0:
        raise ValueError("divisor must be nonzero")
    if high >= divisor:
        raise ValueError(f"high word {high} must be less than divisor {divisor}")

    wide = (high << WORD_BITS) | low
    return (wide // divisor, wide % divisor)
