"""
Int — знаковое целое произвольной точности

Immutable Pydantic модель: флаг знака + модуль в основании 2^32.
Каждая операция создаёт новый экземпляр; составное присваивание
(a += b) перепривязывает имя к полностью построенному результату.

Операторы:
- +, -, * и унарный минус
- // — деление с усечением к нулю (как Decimal)
- % — остаток с усечением (знак совпадает со знаком делимого)
- <, <=, >, >=, ==, != — полный порядок

Смешивание с int не поддерживается: используйте Int.from_int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits всегда в канонической форме
2. Ноль никогда не бывает отрицательным
3. Ни одна операция не теряет точность
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math import magnitude
from src.core.math.digit_words import INT32_MAX, INT32_MIN
from src.core.math.errors import DivisionByZero, ModulusDomainViolation, ParseError

# =============================================================================
# ПАРАМЕТРЫ ДЕСЯТИЧНОГО ПРЕДСТАВЛЕНИЯ
# =============================================================================

DECIMAL_RADIX: Final[int] = 10

DECIMAL_DIGITS: Final[str] = "0123456789"

# Модуль INT32_MIN не помещается в int32: строится напрямую из битов
INT32_MIN_MAGNITUDE: Final[int] = 0x80000000


# =============================================================================
# INT MODEL
# =============================================================================


class Int(BaseModel):
    """
    Знаковое целое произвольной точности.

    Значение = (-1 if is_negative else 1) * Σ digits[i] * 2^(32·i)
    """

    is_negative: bool = Field(False, description="True если число строго меньше нуля")
    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Цифры модуля в основании 2^32, младшая первой"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Каноническая форма модуля и запрет отрицательного нуля"""
        if not magnitude.is_canonical(v):
            raise ValueError(f"digits {list(v)} are not a canonical base-2^32 magnitude")
        if info.data.get("is_negative") and magnitude.is_zero(v):
            raise ValueError("zero must not be negative")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_magnitude(cls, digits: magnitude.Magnitude, is_negative: bool = False) -> "Int":
        # Канонический ноль всегда неотрицателен
        return cls(is_negative=is_negative and not magnitude.is_zero(digits), digits=digits)

    @classmethod
    def zero(cls) -> "Int":
        return cls(digits=magnitude.ZERO)

    @classmethod
    def one(cls) -> "Int":
        return cls(digits=magnitude.ONE)

    @classmethod
    def from_int(cls, value: int) -> "Int":
        """
        Построение из знакового 32-битного машинного целого.

        Args:
            value: Целое в диапазоне [INT32_MIN, INT32_MAX]

        Returns:
            Int с одной цифрой модуля

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
            ValueError: Если value вне диапазона int32

        Examples:
            >>> Int.from_int(-100).debug_string()
            '-[100]'
            >>> Int.from_int(INT32_MIN).debug_string()
            '-[2147483648]'
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        if value < INT32_MIN or value > INT32_MAX:
            raise ValueError(f"value must be in [{INT32_MIN}, {INT32_MAX}], got {value}")

        if value == INT32_MIN:
            return cls(is_negative=True, digits=(INT32_MIN_MAGNITUDE,))

        is_negative = value < 0
        return cls(is_negative=is_negative, digits=(-value if is_negative else value,))

    @classmethod
    def from_str(cls, text: str) -> "Int":
        """
        Разбор десятичной строки: необязательный '-' и хотя бы одна цифра.

        Значение накапливается как value = value * 10 + digit, знак
        применяется в конце. Стоимость O(digits²).

        Raises:
            ParseError: Если строка пуста или содержит недопустимый символ

        Examples:
            >>> Int.from_str("4294967296").debug_string()
            '+[0, 1]'
            >>> Int.from_str("-0") == Int.zero()
            True
        """
        if not text:
            raise ParseError("string must be nonempty", text)
        if text == "-0":
            return cls.zero()

        start = 1 if text[0] == "-" else 0
        if start == len(text):
            raise ParseError("string must contain at least one digit", text, position=start)

        value = magnitude.ZERO
        for position in range(start, len(text)):
            char = text[position]
            if char not in DECIMAL_DIGITS:
                raise ParseError(
                    f"string must be numeric: invalid character {char!r} at position {position}",
                    text,
                    position=position,
                )
            value = magnitude.add(
                magnitude.multiply_digit(value, DECIMAL_RADIX),
                (DECIMAL_DIGITS.index(char),),
            )

        return cls.from_magnitude(value, start == 1)

    # -------------------------------------------------------------------------
    # Знак и сравнение
    # -------------------------------------------------------------------------

    def sign(self) -> int:
        """-1 для отрицательных, 1 иначе (включая ноль)"""
        return -1 if self.is_negative else 1

    def is_zero(self) -> bool:
        return magnitude.is_zero(self.digits)

    def compare(self, other: "Int") -> int:
        """
        Трёхзначное сравнение.

        Сначала знак; при двух отрицательных направление сравнения
        модулей инвертируется.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.is_negative != other.is_negative:
            return -1 if self.is_negative else 1
        order = magnitude.compare(self.digits, other.digits)
        return -order if self.is_negative else order

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Int):
            return NotImplemented
        return self.is_negative == other.is_negative and self.digits == other.digits

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Int):
            return NotImplemented
        return not self.__eq__(other)

    def __lt__(self, other: "Int") -> bool:
        if not isinstance(other, Int):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Int") -> bool:
        if not isinstance(other, Int):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Int") -> bool:
        if not isinstance(other, Int):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Int") -> bool:
        if not isinstance(other, Int):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.is_negative, self.digits))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Int":
        """Смена знака; ноль остаётся неотрицательным"""
        if self.is_zero():
            return self
        return Int(is_negative=not self.is_negative, digits=self.digits)

    def absolute(self) -> "Int":
        if not self.is_negative:
            return self
        return Int(digits=self.digits)

    def add(self, other: "Int") -> "Int":
        """
        Сложение со знаком.

        Одинаковые знаки: модули складываются, знак сохраняется.
        Разные знаки: из большего модуля вычитается меньший, знак берётся
        у операнда с большим (или равным) модулем.
        """
        if self.is_negative == other.is_negative:
            return Int.from_magnitude(magnitude.add(self.digits, other.digits), self.is_negative)

        if not magnitude.less_in_magnitude(self.digits, other.digits):
            return Int.from_magnitude(
                magnitude.subtract(self.digits, other.digits), self.is_negative
            )
        return Int.from_magnitude(magnitude.subtract(other.digits, self.digits), other.is_negative)

    def subtract(self, other: "Int") -> "Int":
        """a - b = a + (-b)"""
        return self.add(other.negate())

    def multiply(self, other: "Int") -> "Int":
        """Школьное умножение модулей, знак = XOR знаков"""
        return Int.from_magnitude(
            magnitude.multiply(self.digits, other.digits),
            self.is_negative != other.is_negative,
        )

    def divide(self, other: "Int") -> "Int":
        """
        Деление с усечением к нулю.

        Модули делятся бинарным поиском, знак частного = XOR знаков.

        Raises:
            DivisionByZero: Если other == 0

        Examples:
            >>> Int.from_int(-11).divide(Int.from_int(3)) == Int.from_int(-3)
            True
        """
        if other.is_zero():
            raise DivisionByZero("integer division by zero")
        return Int.from_magnitude(
            magnitude.divide(self.digits, other.digits),
            self.is_negative != other.is_negative,
        )

    def remainder(self, other: "Int") -> "Int":
        """
        Остаток усечённого деления: a - b * (a / b).

        Знак остатка совпадает со знаком делимого, |остаток| < |b|.

        Raises:
            DivisionByZero: Если other == 0
        """
        return self.subtract(other.multiply(self.divide(other)))

    def mod(self, modulus: "Int") -> "Int":
        """
        Неотрицательный (евклидов) остаток по положительному модулю.

        Returns:
            r из [0, modulus), такое что self - r кратно modulus

        Raises:
            DivisionByZero: Если modulus == 0
            ModulusDomainViolation: Если modulus < 0

        Examples:
            >>> Int.from_int(-7).mod(Int.from_int(3)) == Int.from_int(2)
            True
        """
        if modulus.is_zero():
            raise DivisionByZero("modulus must be nonzero")
        if modulus.is_negative:
            raise ModulusDomainViolation(
                f"modulus must be positive, got {modulus.to_decimal_string()}"
            )

        result = self.remainder(modulus)
        if result.is_negative:
            result = result.add(modulus)
        return result

    def __neg__(self) -> "Int":
        return self.negate()

    def __abs__(self) -> "Int":
        return self.absolute()

    def __add__(self, other: "Int") -> "Int":
        if not isinstance(other, Int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Int") -> "Int":
        if not isinstance(other, Int):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Int") -> "Int":
        if not isinstance(other, Int):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: "Int") -> "Int":
        if not isinstance(other, Int):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: "Int") -> "Int":
        if not isinstance(other, Int):
            return NotImplemented
        return self.remainder(other)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_decimal_string(self) -> str:
        """
        Каноническая десятичная запись.

        Повторное деление модуля на 10; остатки дают цифры от младшей
        к старшей. Без ведущих нулей, '-' только для отрицательных.
        """
        if self.is_zero():
            return "0"

        chars = []
        current = self.digits
        while not magnitude.is_zero(current):
            current, digit = magnitude.divmod_digit(current, DECIMAL_RADIX)
            chars.append(DECIMAL_DIGITS[digit])

        if self.is_negative:
            chars.append("-")
        return "".join(reversed(chars))

    def debug_string(self) -> str:
        """Знак и сырые цифры, например '+[0, 1]'. Не для обратного разбора."""
        sign = "-" if self.is_negative else "+"
        return f"{sign}[{', '.join(str(d) for d in self.digits)}]"

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"Int({self.debug_string()})"
