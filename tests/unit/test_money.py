"""
Тесты для модуля Money

Проверяет:
1. Квантование до 2 знаков (ROUND_HALF_UP)
2. Конверсию float через str() без двоичного дрейфа
3. Отклонение bool, NaN/Inf и нечисловых строк
4. Точное вычитание и фиксированный формат
"""

from decimal import Decimal

import pytest

from src.core.math.money import (
    MONEY_QUANTUM,
    ZERO_MONEY,
    format_money,
    subtract_money,
    to_money,
)

# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestToMoney:
    """Тесты для to_money"""

    def test_int_quantized(self) -> None:
        """Целые числа получают 2 знака"""
        assert to_money(100) == Decimal("100.00")
        assert to_money(100).as_tuple().exponent == -2

    def test_string_parsed(self) -> None:
        assert to_money("100.5") == Decimal("100.50")
        assert to_money(" 7 ") == Decimal("7.00")

    def test_float_goes_through_str(self) -> None:
        """0.1 не превращается в 0.1000000000000000055..."""
        assert to_money(0.1) == Decimal("0.10")
        assert to_money(0.1 + 0.2) == Decimal("0.30")

    def test_round_half_up(self) -> None:
        """Половина округляется вверх"""
        assert to_money("2.345") == Decimal("2.35")
        assert to_money("2.344") == Decimal("2.34")
        assert to_money(Decimal("0.005")) == Decimal("0.01")

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError, match="Boolean"):
            to_money(True)

    @pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", float("nan"), float("inf")])
    def test_non_finite_rejected(self, value) -> None:
        """NaN/Inf никогда не становятся деньгами"""
        with pytest.raises(ValueError):
            to_money(value)

    def test_garbage_string_rejected(self) -> None:
        with pytest.raises(ValueError, match="Not a monetary amount"):
            to_money("cien")

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported monetary type"):
            to_money([100])

    def test_quantum(self) -> None:
        assert MONEY_QUANTUM == Decimal("0.01")

    @pytest.mark.parametrize("value", ["1e30", "1" + "0" * 29, Decimal("1E+27")])
    def test_out_of_range_rejected(self, value) -> None:
        """Суммы вне точности контекста — ValueError, а не InvalidOperation"""
        with pytest.raises(ValueError, match="out of range"):
            to_money(value)

    def test_largest_representable_amount(self) -> None:
        """26 целых разрядов + 2 дробных помещаются в 28 значащих цифр"""
        amount = "9" * 26
        assert to_money(amount) == Decimal(amount + ".00")

    @pytest.mark.parametrize("value", ["-0", "-0.00", Decimal("-0"), -0.0, "-0.001"])
    def test_negative_zero_normalized(self, value) -> None:
        """Ноль всегда без знака"""
        result = to_money(value)
        assert result == ZERO_MONEY
        assert not result.is_signed()
        assert format_money(result) == "0.00"


# =============================================================================
# ТЕСТЫ ФОРМАТА И АРИФМЕТИКИ
# =============================================================================


class TestFormatMoney:
    """Тесты для format_money"""

    def test_two_decimals(self) -> None:
        assert format_money(Decimal("100")) == "100.00"
        assert format_money(Decimal("10.5")) == "10.50"

    def test_zero(self) -> None:
        assert format_money(ZERO_MONEY) == "0.00"

    def test_no_exponent_notation(self) -> None:
        """Большие значения печатаются без экспоненты"""
        assert format_money(Decimal("1E+6")) == "1000000.00"


class TestSubtractMoney:
    """Тесты для subtract_money"""

    def test_exact_subtraction(self) -> None:
        """100.10 - 0.20 == 99.90 без дрейфа float"""
        assert subtract_money("100.10", "0.20") == Decimal("99.90")
        assert subtract_money(0.3, 0.1) == Decimal("0.20")

    def test_result_quantized(self) -> None:
        assert subtract_money(100, 10).as_tuple().exponent == -2

