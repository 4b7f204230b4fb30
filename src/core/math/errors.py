"""
Исключения арифметики произвольной точности.

Два класса ошибок:
- ParseError — восстановимая ошибка разбора десятичной строки
- ContractViolation — дефект вызывающего кода (деление на ноль,
  неположительный модуль, нарушение предусловия вычитания модулей)

ContractViolation никогда не подменяется fallback-значением: операция
без определённого результата обязана прерваться.
"""


class IntegerArithmeticError(ArithmeticError):
    """Базовый класс ошибок модуля."""

    pass


class ParseError(IntegerArithmeticError, ValueError):
    """
    Некорректная десятичная строка.

    Attributes:
        text: Исходная строка
        position: Индекс первого недопустимого символа (None для пустой строки)
    """

    def __init__(self, message: str, text: str, position: int | None = None):
        super().__init__(message)
        self.text = text
        self.position = position


class ContractViolation(IntegerArithmeticError):
    """
    Нарушение предусловия операции.

    Сигнализирует об ошибке программиста, а не о данных: вызывающий код
    должен исключать такие входы заранее.
    """

    pass


class DivisionByZero(ContractViolation, ZeroDivisionError):
    """Деление (или взятие остатка) на ноль."""

    pass


class ModulusDomainViolation(ContractViolation):
    """Отрицательный модуль в mod(): результат определён только для b > 0."""

    pass


class MagnitudeUnderflow(ContractViolation):
    """Вычитание модулей, где уменьшаемое меньше вычитаемого."""

    pass
