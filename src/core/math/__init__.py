"""
Core math modules

Денежные примитивы на Decimal с фиксированной точностью.
"""

# Money
from src.core.math.money import (
    # Constants
    MONEY_QUANTUM,
    MONEY_ROUNDING,
    ZERO_MONEY,
    # Types
    MoneyInput,
    # Functions
    format_money,
    subtract_money,
    to_money,
)

__all__ = [
    # Money — Constants
    "MONEY_QUANTUM",
    "MONEY_ROUNDING",
    "ZERO_MONEY",
    # Money — Types
    "MoneyInput",
    # Money — Functions
    "format_money",
    "subtract_money",
    "to_money",
]
