"""
Domain models and value objects.

Contains the bounded collection and the sale value objects
(Sale, SaleWithTax, ChannelSale).
"""

from src.core.domain.bounded_list import DEFAULT_SEPARATOR, BoundedList
from src.core.domain.channel_sale import ChannelSale, ReportMode, SaleChannel
from src.core.domain.sale import (
    AnySale,
    Sale,
    SaleBase,
    SaleWithTax,
    TaxedSaleBase,
    describe_sale,
    make_sale,
    parse_sale,
)

__all__ = [
    # Bounded collection
    "BoundedList",
    "DEFAULT_SEPARATOR",
    # Sale variants
    "AnySale",
    "Sale",
    "SaleBase",
    "SaleWithTax",
    "TaxedSaleBase",
    "describe_sale",
    "make_sale",
    "parse_sale",
    # Channel sale
    "ChannelSale",
    "ReportMode",
    "SaleChannel",
]
