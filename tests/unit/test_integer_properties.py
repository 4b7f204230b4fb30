"""
Property-based тесты для Int

Проверяет алгебраические законы на случайных значениях; эталон — встроенный
int Python, с которым Int сверяется через десятичную строку.

Проверяет:
1. Обратимость: a + (-a) == 0, -(-a) == a, (a + b) - b == a
2. Ассоциативность сложения и дистрибутивность умножения
3. Восстановление делимого: a == b * (a // b) + (a % b)
4. Диапазон mod: 0 <= a.mod(b) < b для b > 0
5. Согласованность порядка с вычитанием
6. Обратимость десятичной печати
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from src.core.domain import Int

BOUND = 1 << 160

native_ints = st.integers(min_value=-BOUND, max_value=BOUND)
nonzero_ints = native_ints.filter(lambda n: n != 0)
positive_ints = st.integers(min_value=1, max_value=BOUND)

PROPERTY_SETTINGS = settings(max_examples=60, deadline=None)


def to_int(value: int) -> Int:
    return Int.from_str(str(value))


def truncating_quotient(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class TestAdditiveLaws:
    """Законы сложения и вычитания"""

    @PROPERTY_SETTINGS
    @given(native_ints)
    def test_inverse(self, a: int) -> None:
        value = to_int(a)
        assert value + -value == Int.zero()
        assert -(-value) == value

    @PROPERTY_SETTINGS
    @given(native_ints, native_ints)
    def test_subtraction_undoes_addition(self, a: int, b: int) -> None:
        x, y = to_int(a), to_int(b)
        assert (x + y) - y == x
        assert (x - y) + y == x

    @PROPERTY_SETTINGS
    @given(native_ints, native_ints, native_ints)
    def test_associativity(self, a: int, b: int, c: int) -> None:
        x, y, z = to_int(a), to_int(b), to_int(c)
        assert (x + y) + z == x + (y + z)

    @PROPERTY_SETTINGS
    @given(native_ints, native_ints)
    def test_matches_native(self, a: int, b: int) -> None:
        assert str(to_int(a) + to_int(b)) == str(a + b)
        assert str(to_int(a) - to_int(b)) == str(a - b)


class TestMultiplicativeLaws:
    """Законы умножения"""

    @PROPERTY_SETTINGS
    @given(native_ints, native_ints, native_ints)
    def test_distributivity(self, a: int, b: int, c: int) -> None:
        x, y, z = to_int(a), to_int(b), to_int(c)
        assert x * (y + z) == x * y + x * z

    @PROPERTY_SETTINGS
    @given(native_ints, native_ints)
    def test_matches_native(self, a: int, b: int) -> None:
        product = to_int(a) * to_int(b)
        assert str(product) == str(a * b)
        if a * b == 0:
            assert product.sign() == 1


class TestDivisionLaws:
    """Законы деления с усечением"""

    @PROPERTY_SETTINGS
    @given(native_ints, nonzero_ints)
    def test_reconstructs_dividend(self, a: int, b: int) -> None:
        x, y = to_int(a), to_int(b)
        assert y * (x // y) + (x % y) == x
        assert abs(x % y) < abs(y)

    @PROPERTY_SETTINGS
    @given(native_ints, nonzero_ints)
    def test_matches_native_truncation(self, a: int, b: int) -> None:
        assert str(to_int(a) // to_int(b)) == str(truncating_quotient(a, b))

    @PROPERTY_SETTINGS
    @given(native_ints, positive_ints)
    def test_mod_range(self, a: int, b: int) -> None:
        result = to_int(a).mod(to_int(b))
        assert Int.zero() <= result < to_int(b)
        assert str(result) == str(a % b)


class TestOrderingAndPrinting:
    """Порядок и десятичное представление"""

    @PROPERTY_SETTINGS
    @given(native_ints, native_ints)
    def test_order_consistent_with_subtraction(self, a: int, b: int) -> None:
        x, y = to_int(a), to_int(b)
        assert (x < y) == (x - y).is_negative
        assert (x < y) == (a < b)
        assert (x == y) == (a == b)

    @PROPERTY_SETTINGS
    @given(native_ints)
    def test_round_trip(self, a: int) -> None:
        value = to_int(a)
        assert Int.from_str(value.to_decimal_string()) == value
        assert value.to_decimal_string() == str(a)

    @given(st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1))
    def test_from_int_agrees_with_from_str(self, a: int) -> None:
        assert Int.from_int(a) == Int.from_str(str(a))
