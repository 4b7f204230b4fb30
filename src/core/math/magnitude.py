"""
Magnitude — беззнаковые числа произвольной длины

Модуль реализует арифметику над модулями (абсолютными значениями) целых
чисел, хранимых как кортеж цифр в основании 2^32:
- Нормализация (удаление старших нулевых цифр)
- Сложение с переносом и вычитание с каскадным заёмом
- Умножение на цифру и школьное умножение O(n·m)
- Сдвиг на k цифр (умножение на base^k) и деление пополам
- Деление бинарным поиском по частному
- Короткое деление на одну цифру (для десятичной печати)

Представление: digits[0] — младшая цифра.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Кортеж никогда не пуст
2. Старшая цифра ненулевая, кроме единственного представления нуля (0,)
3. Каждая функция возвращает канонический кортеж
4. Входные последовательности никогда не изменяются
"""

import logging
from collections.abc import Sequence
from typing import Final

from src.core.math.digit_words import (
    DIGIT_MAX,
    WORD_BITS,
    add_with_carry,
    divide_double_word,
    is_valid_word,
    multiply_with_carry,
    subtract_with_borrow,
    validate_word,
)
from src.core.math.errors import DivisionByZero, MagnitudeUnderflow

logger = logging.getLogger(__name__)

Magnitude = tuple[int, ...]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Magnitude] = (0,)
ONE: Final[Magnitude] = (1,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(digits: Sequence[int]) -> Magnitude:
    """
    Приведение последовательности цифр к каноническому виду.

    Удаляет старшие нулевые цифры; пустой результат сворачивается в (0,).

    Examples:
        >>> normalize([5, 0, 0])
        (5,)
        >>> normalize([0, 0])
        (0,)
    """
    result = list(digits)
    while result and result[-1] == 0:
        result.pop()
    if not result:
        return ZERO
    return tuple(result)


def is_canonical(digits: Sequence[int]) -> bool:
    """
    Проверка канонической формы.

    Returns:
        True если последовательность непуста, все элементы — цифры и
        старшая цифра ненулевая (кроме самого нуля)
    """
    if len(digits) == 0:
        return False
    if not all(is_valid_word(d) for d in digits):
        return False
    return digits[-1] != 0 or len(digits) == 1


def is_zero(digits: Magnitude) -> bool:
    return len(digits) == 1 and digits[0] == 0


def from_int(value: int) -> Magnitude:
    """Разложение неотрицательного int по основанию 2^32."""
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")
    digits = []
    while value:
        digits.append(value & DIGIT_MAX)
        value >>= WORD_BITS
    return normalize(digits)


def to_int(digits: Magnitude) -> int:
    """Свёртка цифр в int (диагностика и тесты)."""
    value = 0
    for digit in reversed(digits):
        value = (value << WORD_BITS) | digit
    return value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def less_in_magnitude(lhs: Magnitude, rhs: Magnitude) -> bool:
    """
    Строгое сравнение модулей.

    Более короткий канонический кортеж меньше; при равной длине решает
    первая различающаяся цифра, начиная со старшей.
    """
    if len(lhs) != len(rhs):
        return len(lhs) < len(rhs)
    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return lhs[i] < rhs[i]
    return False


def compare(lhs: Magnitude, rhs: Magnitude) -> int:
    """
    Трёхзначное сравнение модулей.

    Returns:
        -1 если lhs < rhs, 0 если равны, +1 если lhs > rhs
    """
    if less_in_magnitude(lhs, rhs):
        return -1
    if less_in_magnitude(rhs, lhs):
        return 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(lhs: Magnitude, rhs: Magnitude) -> Magnitude:
    """
    Поразрядное сложение с переносом.

    Финальный перенос добавляет новую старшую цифру.
    """
    result = []
    carry = 0
    for i in range(max(len(lhs), len(rhs))):
        x = lhs[i] if i < len(lhs) else 0
        y = rhs[i] if i < len(rhs) else 0
        digit, carry = add_with_carry(x, y, carry)
        result.append(digit)
    if carry:
        result.append(carry)
    return normalize(result)


def _borrow_from_neighbour(digits: list[int], neighbour: int) -> None:
    # Нулевые соседи превращаются в DIGIT_MAX, заём идёт дальше вверх
    while digits[neighbour] == 0:
        digits[neighbour] = DIGIT_MAX
        neighbour += 1
    digits[neighbour] -= 1


def subtract(minuend: Magnitude, subtrahend: Magnitude) -> Magnitude:
    """
    Поразрядное вычитание с каскадным заёмом.

    Args:
        minuend: Уменьшаемое
        subtrahend: Вычитаемое (не больше уменьшаемого)

    Returns:
        minuend - subtrahend в канонической форме

    Raises:
        MagnitudeUnderflow: Если minuend < subtrahend
    """
    if less_in_magnitude(minuend, subtrahend):
        raise MagnitudeUnderflow(
            f"cannot subtract larger magnitude ({len(subtrahend)} digits) "
            f"from smaller ({len(minuend)} digits)"
        )

    result = list(minuend)
    for i in range(len(result)):
        y = subtrahend[i] if i < len(subtrahend) else 0
        digit, borrowed = subtract_with_borrow(result[i], y, 0)
        if borrowed:
            _borrow_from_neighbour(result, i + 1)
        result[i] = digit
    return normalize(result)


# =============================================================================
# УМНОЖЕНИЕ И СДВИГИ
# =============================================================================


def multiply_digit(digits: Magnitude, scalar: int) -> Magnitude:
    """
    Умножение модуля на одну цифру с цепочкой переносов.

    Raises:
        ValueError: Если scalar не является цифрой
    """
    validate_word(scalar, "scalar")
    if scalar == 0:
        return ZERO

    result = []
    carry = 0
    for digit in digits:
        low, carry = multiply_with_carry(digit, scalar, carry)
        result.append(low)
    if carry:
        result.append(carry)
    return normalize(result)


def shift_digits(digits: Magnitude, places: int) -> Magnitude:
    """
    Умножение на base^places: places нулевых цифр в младшие разряды.

    Ноль остаётся нулём.
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if is_zero(digits):
        return ZERO
    return (0,) * places + tuple(digits)


def multiply(lhs: Magnitude, rhs: Magnitude) -> Magnitude:
    """
    Школьное умножение.

    Для каждой цифры rhs[i] частичное произведение lhs * rhs[i]
    сдвигается на i позиций и накапливается сложением. O(n·m).
    """
    total = ZERO
    for position, digit in enumerate(rhs):
        if digit == 0:
            continue
        partial = shift_digits(multiply_digit(lhs, digit), position)
        total = add(total, partial)
    return total


def halve(digits: Magnitude) -> Magnitude:
    """
    Деление на 2 с отбрасыванием остатка.

    Младший бит каждой цифры переносится в старший бит соседней
    младшей цифры.
    """
    high_bit = WORD_BITS - 1
    result = [0] * len(digits)
    carry = 0
    for i in range(len(digits) - 1, -1, -1):
        result[i] = (digits[i] >> 1) | (carry << high_bit)
        carry = digits[i] & 1
    return normalize(result)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(dividend: Magnitude, divisor: Magnitude) -> Magnitude:
    """
    Частное модулей бинарным поиском.

    Поиск ведётся на отрезке [0, base^(n - m + 1) - 1], где n и m — длины
    делимого и делителя. Граница корректна: dividend < base^n и
    divisor >= base^(m - 1), значит частное < base^(n - m + 1).

    Инвариант цикла: истинное частное лежит в [lo, hi] либо уже
    записано в best (наибольший mid с mid * divisor <= dividend).

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)

    Returns:
        floor(dividend / divisor)

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if is_zero(divisor):
        raise DivisionByZero("division by zero magnitude")
    if less_in_magnitude(dividend, divisor):
        return ZERO

    lo = ZERO
    hi = subtract(shift_digits(ONE, len(dividend) - len(divisor) + 1), ONE)
    best = ZERO
    iterations = 0

    while not less_in_magnitude(hi, lo):
        iterations += 1
        mid = halve(add(lo, hi))
        order = compare(dividend, multiply(mid, divisor))
        if order == 0:
            best = mid
            break
        if order < 0:
            # mid * divisor > dividend >= 0, поэтому mid >= 1
            hi = subtract(mid, ONE)
        else:
            best = mid
            lo = add(mid, ONE)

    logger.debug(
        "binary search division: dividend_digits=%d divisor_digits=%d iterations=%d",
        len(dividend),
        len(divisor),
        iterations,
    )
    return best


def divide_with_remainder(
    dividend: Magnitude, divisor: Magnitude
) -> tuple[Magnitude, Magnitude]:
    """
    Частное и остаток: dividend = quotient * divisor + remainder.

    Returns:
        (quotient, remainder), 0 <= remainder < divisor
    """
    quotient = divide(dividend, divisor)
    remainder = subtract(dividend, multiply(quotient, divisor))
    return (quotient, remainder)


def divmod_digit(digits: Magnitude, divisor: int) -> tuple[Magnitude, int]:
    """
    Короткое деление на одну цифру, от старшего разряда к младшему.

    Результат совпадает с divide(digits, (divisor,)), но стоит O(n).

    Raises:
        DivisionByZero: Если divisor == 0
        ValueError: Если divisor не является цифрой
    """
    validate_word(divisor, "divisor")
    if divisor == 0:
        raise DivisionByZero("division by zero digit")

    quotient = [0] * len(digits)
    remainder = 0
    for i in range(len(digits) - 1, -1, -1):
        quotient[i], remainder = divide_double_word(remainder, digits[i], divisor)
    return (normalize(quotient), remainder)
