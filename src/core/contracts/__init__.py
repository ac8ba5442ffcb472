"""
Contract Validation Module

Модуль для валидации JSON контрактов продаж.
"""

from .validators import (
    ChannelSaleValidator,
    ContractValidator,
    SaleValidator,
    SchemaLoader,
    validate_channel_sale,
    validate_sale,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SaleValidator",
    "ChannelSaleValidator",
    # Functions
    "validate_sale",
    "validate_channel_sale",
]
