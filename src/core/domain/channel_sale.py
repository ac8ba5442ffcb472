"""
ChannelSale — Продажа с каналом (online / on-site)

Единая модель для продаж через интернет и в точке продаж:
общие поля (total, tax), единый расчёт subtotal = total - tax.

Отчёт поддерживает два режима:
- CORRECTED: Subtotal = subtotal, Total = total для обоих каналов
- LEGACY:    побайтно воспроизводит прежние отчёты
             (OnSite печатает total вместо subtotal, OnLine меняет местами
             Subtotal и Total)
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, Tuple

from pydantic import Field

from src.core.domain.sale import SaleWithTax, TaxedSaleBase
from src.core.math.money import format_money


# =============================================================================
# ENUMS
# =============================================================================


class SaleChannel(str, Enum):
    """Канал продажи"""

    ONLINE = "online"
    ON_SITE = "on_site"


class ReportMode(str, Enum):
    """Режим формирования отчёта"""

    CORRECTED = "corrected"
    LEGACY = "legacy"


_CHANNEL_LABELS: Dict[SaleChannel, str] = {
    SaleChannel.ONLINE: "OnLine",
    SaleChannel.ON_SITE: "OnSite",
}


# =============================================================================
# CHANNEL SALE MODEL
# =============================================================================


class ChannelSale(TaxedSaleBase):
    """
    Продажа с указанием канала.

    Immutable модель (frozen=True), как и остальные варианты продаж.
    """

    channel: SaleChannel = Field(..., description="Канал продажи (online/on_site)")

    @property
    def label(self) -> str:
        return _CHANNEL_LABELS[self.channel]

    def report(self, mode: ReportMode = ReportMode.CORRECTED) -> str:
        """
        Многострочный отчёт о продаже.

        Формат (каждая строка начинается с перевода строки):
            \\nVenta OnLine:\\nSubtotal: 90.00\\nTax:10.00\\nTotal: 100.00

        Args:
            mode: CORRECTED (по умолчанию) или LEGACY

        Returns:
            Текст отчёта
        """
        subtotal_shown, total_shown = self._reported_amounts(mode)
        return (
            f"\nVenta {self.label}:"
            f"\nSubtotal: {format_money(subtotal_shown)}"
            f"\nTax:{format_money(self.tax)}"
            f"\nTotal: {format_money(total_shown)}"
        )

    def _reported_amounts(self, mode: ReportMode) -> Tuple[Decimal, Decimal]:
        """Пара (значение строки Subtotal, значение строки Total)."""
        if mode == ReportMode.CORRECTED:
            return self.subtotal, self.total

        if mode == ReportMode.LEGACY:
            if self.channel == SaleChannel.ONLINE:
                return self.total, self.subtotal
            return self.total, self.total

        raise ValueError(f"Unknown report mode: {mode!r}")

    def as_sale_with_tax(self) -> SaleWithTax:
        """Конверсия в SaleWithTax (канал отбрасывается)."""
        return SaleWithTax(total=self.total, tax=self.tax)
