"""
Тесты для модуля Magnitude (беззнаковая арифметика digit-буферов)

Проверяет:
1. Значащие разряды и детекцию нуля
2. Сравнение модулей (в т.ч. с незначащими старшими нулями)
3. Сложение с переносом
4. Вычитание с заёмом
5. Schoolbook умножение
6. Рендеринг
"""

import pytest

from src.core.math.magnitude import (
    DECIMAL_BASE,
    DIGIT_MAX,
    DIGIT_MIN,
    INT_CHUNK_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    digits_from_int,
    is_zero_digits,
    multiply_magnitudes,
    real_length,
    render_magnitude,
    subtract_magnitudes,
)


def digits_of(value: int) -> tuple[int, ...]:
    """Little-endian буфер для неотрицательного int (хелпер тестов)."""
    return tuple(int(char) for char in reversed(str(value)))


# =============================================================================
# ТЕСТЫ: Константы
# =============================================================================


class TestConstants:
    """Параметры десятичной системы"""

    def test_decimal_base(self) -> None:
        """Основание 10, цифры 0..9"""
        assert DECIMAL_BASE == 10
        assert DIGIT_MIN == 0
        assert DIGIT_MAX == 9


# =============================================================================
# ТЕСТЫ: Значащие разряды
# =============================================================================


class TestRealLength:
    """Тесты real_length и is_zero_digits"""

    def test_without_padding(self) -> None:
        """Буфер без старших нулей"""
        assert real_length((3, 2, 1)) == 3
        assert real_length((7,)) == 1

    def test_with_padding(self) -> None:
        """Старшие нули не считаются значащими"""
        assert real_length((3, 2, 1, 0, 0)) == 3
        assert real_length((0, 1, 0)) == 2

    def test_zero_has_one_digit(self) -> None:
        """Нулевой буфер любой длины имеет один значащий разряд"""
        assert real_length((0,)) == 1
        assert real_length((0, 0, 0, 0)) == 1

    def test_is_zero_digits(self) -> None:
        """Ноль определяется по всему буферу"""
        assert is_zero_digits((0,))
        assert is_zero_digits((0, 0, 0))
        assert not is_zero_digits((0, 0, 1))
        assert not is_zero_digits((5,))


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestCompareMagnitudes:
    """Тесты compare_magnitudes: > 0 означает |a| < |b|"""

    def test_equal(self) -> None:
        """Равные модули → 0"""
        assert compare_magnitudes((1, 2, 3), (1, 2, 3)) == 0
        assert compare_magnitudes((0,), (0, 0, 0)) == 0

    def test_equal_with_padding(self) -> None:
        """Старшие нули не влияют на сравнение"""
        assert compare_magnitudes((1, 2, 0, 0), (1, 2)) == 0

    def test_shorter_is_smaller(self) -> None:
        """Больше значащих разрядов → больший модуль"""
        assert compare_magnitudes((9,), (0, 1)) > 0
        assert compare_magnitudes((0, 1), (9,)) < 0

    def test_padding_does_not_count_as_length(self) -> None:
        """Длинный буфер с нулями не больше короткого значащего"""
        assert compare_magnitudes((5, 0, 0, 0), (0, 1)) > 0

    def test_same_length_most_significant_decides(self) -> None:
        """При равной длине решает старший различающийся разряд"""
        assert compare_magnitudes(digits_of(123), digits_of(129)) > 0
        assert compare_magnitudes(digits_of(923), digits_of(129)) < 0

    @pytest.mark.parametrize(
        "a, b",
        [
            (0, 0),
            (1, 0),
            (10, 9),
            (12345, 12354),
            (999, 1000),
            (40, 40),
        ],
    )
    def test_antisymmetric(self, a: int, b: int) -> None:
        """compare(a, b) и compare(b, a) противоположны по знаку"""
        forward = compare_magnitudes(digits_of(a), digits_of(b))
        backward = compare_magnitudes(digits_of(b), digits_of(a))
        assert (forward > 0) == (backward < 0)
        assert (forward == 0) == (backward == 0)


# =============================================================================
# ТЕСТЫ: Сложение
# =============================================================================


class TestAddMagnitudes:
    """Тесты add_magnitudes"""

    def test_result_length(self) -> None:
        """Длина результата max(len1, len2) + 1"""
        assert len(add_magnitudes((1, 2, 3), (4,))) == 4
        assert len(add_magnitudes((1,), (1,))) == 2

    def test_no_carry(self) -> None:
        """Без переноса старший разряд остаётся нулём"""
        assert add_magnitudes((1, 2), (3, 4)) == (4, 6, 0)

    def test_carry_through_all_positions(self) -> None:
        """99 + 1 = 100: перенос проходит через все разряды"""
        assert add_magnitudes((9, 9), (1,)) == (0, 0, 1)

    def test_final_carry_in_top_slot(self) -> None:
        """Финальный перенос записывается в выделенный старший разряд"""
        assert add_magnitudes((5,), (5,)) == (0, 1)

    def test_inputs_unchanged(self) -> None:
        """Входные буферы не изменяются"""
        a = (9, 9)
        b = (1,)
        add_magnitudes(a, b)
        assert a == (9, 9)
        assert b == (1,)

    @pytest.mark.parametrize(
        "a, b",
        [(0, 0), (7, 8), (123, 877), (99999, 1), (4567, 5433210)],
    )
    def test_matches_int_sum(self, a: int, b: int) -> None:
        """Результат совпадает с суммой Python int"""
        result = add_magnitudes(digits_of(a), digits_of(b))
        assert render_magnitude(result) == str(a + b)


# =============================================================================
# ТЕСТЫ: Вычитание
# =============================================================================


class TestSubtractMagnitudes:
    """Тесты subtract_magnitudes (bigger - smaller)"""

    def test_result_length(self) -> None:
        """Длина результата max(len1, len2)"""
        assert len(subtract_magnitudes((0, 0, 1), (1,))) == 3

    def test_borrow_through_all_positions(self) -> None:
        """100 - 1 = 99: заём проходит через все разряды"""
        assert subtract_magnitudes((0, 0, 1), (1,)) == (9, 9, 0)

    def test_equal_gives_zero(self) -> None:
        """a - a = 0"""
        result = subtract_magnitudes((4, 3, 2), (4, 3, 2))
        assert is_zero_digits(result)

    def test_padded_smaller(self) -> None:
        """Вычитаемое со старшими нулями длиннее уменьшаемого"""
        assert subtract_magnitudes((5, 1), (3, 0, 0)) == (2, 1, 0)

    @pytest.mark.parametrize(
        "a, b",
        [(0, 0), (10, 1), (1000, 999), (5000, 4999), (123456, 98765)],
    )
    def test_matches_int_difference(self, a: int, b: int) -> None:
        """Результат совпадает с разностью Python int"""
        result = subtract_magnitudes(digits_of(a), digits_of(b))
        assert render_magnitude(result) == str(a - b)


# =============================================================================
# ТЕСТЫ: Умножение
# =============================================================================


class TestMultiplyMagnitudes:
    """Тесты multiply_magnitudes"""

    def test_carry_heavy(self) -> None:
        """999 × 999 = 998001"""
        assert multiply_magnitudes((9, 9, 9), (9, 9, 9)) == (1, 0, 0, 8, 9, 9)

    def test_result_length_uses_real_length(self) -> None:
        """Длина результата real_length(a) + real_length(b), паддинг игнорируется"""
        result = multiply_magnitudes((2, 1, 0, 0, 0), (3, 0))
        assert len(result) == 3
        assert render_magnitude(result) == "36"

    def test_single_digits(self) -> None:
        """2 × 3 = 6 со старшим нулём"""
        assert multiply_magnitudes((2,), (3,)) == (6, 0)

    def test_multiply_by_one(self) -> None:
        """x × 1 = x"""
        assert render_magnitude(multiply_magnitudes(digits_of(98765), (1,))) == "98765"

    @pytest.mark.parametrize(
        "a, b",
        [
            (12, 34),
            (99, 99),
            (123456789, 987654321),
            (10**20 + 7, 10**15 - 1),
            (5, 100000),
        ],
    )
    def test_matches_int_product(self, a: int, b: int) -> None:
        """Результат совпадает с произведением Python int"""
        result = multiply_magnitudes(digits_of(a), digits_of(b))
        assert render_magnitude(result) == str(a * b)

    def test_commutative(self) -> None:
        """a × b == b × a"""
        a = digits_of(31415926)
        b = digits_of(2718)
        assert render_magnitude(multiply_magnitudes(a, b)) == render_magnitude(
            multiply_magnitudes(b, a)
        )


# =============================================================================
# ТЕСТЫ: Конверсия из int
# =============================================================================


class TestDigitsFromInt:
    """Тесты digits_from_int"""

    def test_zero(self) -> None:
        """0 → (0,)"""
        assert digits_from_int(0) == (0,)

    def test_no_padding(self) -> None:
        """Старшие нули последнего блока отбрасываются"""
        assert digits_from_int(4096) == (6, 9, 0, 4)

    @pytest.mark.parametrize(
        "value",
        [
            1,
            10**INT_CHUNK_DIGITS - 1,
            10**INT_CHUNK_DIGITS,
            10**INT_CHUNK_DIGITS + 1,
            123456789012345678901234567890,
        ],
    )
    def test_chunk_boundaries(self, value: int) -> None:
        """Значения на границах блоков совпадают с посимвольным разбором"""
        assert digits_from_int(value) == digits_of(value)

    def test_beyond_str_conversion_limit(self) -> None:
        """10**5000 + 1 разбирается без str()"""
        result = digits_from_int(10**5000 + 1)
        assert len(result) == 5001
        assert result[0] == 1
        assert result[-1] == 1
        assert sum(result) == 2

    def test_negative_rejected(self) -> None:
        """Отрицательное значение не является модулем"""
        with pytest.raises(ValueError, match="must be non-negative"):
            digits_from_int(-1)


# =============================================================================
# ТЕСТЫ: Рендеринг
# =============================================================================


class TestRenderMagnitude:
    """Тесты render_magnitude"""

    def test_most_significant_first(self) -> None:
        """Цифры выводятся от старшей к младшей"""
        assert render_magnitude((3, 2, 1)) == "123"

    def test_padding_stripped(self) -> None:
        """Старшие нули отбрасываются"""
        assert render_magnitude((0, 0, 1, 0, 0)) == "100"

    def test_zero(self) -> None:
        """Ноль рендерится как "0" """
        assert render_magnitude((0, 0, 0)) == "0"
