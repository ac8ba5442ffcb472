"""
Money — Денежные примитивы на Decimal

Модуль обеспечивает точную денежную арифметику для всех моделей продаж:
- Квантование до 2 знаков (0.01) с ROUND_HALF_UP
- Конверсия float через str(), без двоичного дрейфа
- Фиксированный формат отображения (100.00)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Денежные значения никогда не хранятся как float
2. NaN/Inf, bool и суммы вне точности контекста никогда не становятся
   деньгами (ValueError)
3. Ноль всегда без знака (0.00, не -0.00)
4. Вычитание выполняется в Decimal и повторно квантуется
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Union

MoneyInput = Union[Decimal, int, float, str]


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Шаг квантования (2 знака после запятой)
MONEY_QUANTUM: Final[Decimal] = Decimal("0.01")

# Режим округления для денежных значений
MONEY_ROUNDING: Final[str] = ROUND_HALF_UP

ZERO_MONEY: Final[Decimal] = Decimal("0.00")


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_money(value: MoneyInput) -> Decimal:
    """
    Конверсия входного значения в денежный Decimal.

    Args:
        value: Decimal, int, float или строка ("100.5")

    Returns:
        Decimal, квантованный до MONEY_QUANTUM

    Raises:
        ValueError: bool, NaN/Inf, нечисловая строка или неподдерживаемый тип

    Examples:
        >>> to_money("100.5")
        Decimal('100.50')
        >>> to_money(0.1)
        Decimal('0.10')
    """
    # bool является подклассом int, но деньгами не является
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a monetary amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a monetary amount: {value!r}")
    else:
        raise ValueError(f"Unsupported monetary type: {type(value).__name__}")

    if not amount.is_finite():
        raise ValueError(f"Monetary amount must be finite: {value!r}")

    try:
        result = amount.quantize(MONEY_QUANTUM, rounding=MONEY_ROUNDING)
    except InvalidOperation:
        # Результат не помещается в точность текущего decimal-контекста
        raise ValueError(f"Monetary amount out of range: {value!r}")

    # -0.00 отображается и сериализуется как 0.00
    if result.is_zero():
        return result.copy_abs()
    return result


def format_money(value: Decimal) -> str:
    """
    Отображение суммы в фиксированном формате с двумя знаками.

    Examples:
        >>> format_money(Decimal("100"))
        '100.00'
    """
    return f"{to_money(value):.2f}"


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def subtract_money(minuend: MoneyInput, subtrahend: MoneyInput) -> Decimal:
    """
    Точное вычитание денежных сумм (subtotal = total - tax).

    Returns:
        Разность, квантованная до MONEY_QUANTUM
    """
    return to_money(to_money(minuend) - to_money(subtrahend))

