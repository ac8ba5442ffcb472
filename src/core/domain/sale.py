"""
Sale — Денежные значения продажи

Immutable Pydantic модели продажи в виде tagged variant:
- Sale:        { kind="sale", total }
- SaleWithTax: { kind="sale_with_tax", total, tax }

Сводка строится одной функцией describe_sale() с исчерпывающим
разбором вариантов. Все суммы — Decimal с 2 знаками (src.core.math.money).
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationInfo, field_validator

from src.core.math.money import MoneyInput, format_money, subtract_money, to_money


# =============================================================================
# BASE MODEL
# =============================================================================


class SaleBase(BaseModel):
    """
    Общие поля и валидация денежных сумм.

    Immutable модель (frozen=True): изменение требует нового экземпляра.
    """

    total: Decimal = Field(..., ge=0, description="Итоговая сумма продажи")

    model_config = {"frozen": True}

    @field_validator("total", mode="before")
    @classmethod
    def quantize_total(cls, v: Any) -> Decimal:
        """Квантование до 2 знаков, float через str()."""
        return to_money(v)

    def to_payload(self) -> Dict[str, Any]:
        """Сериализация в JSON-совместимый dict (суммы как строки "100.00")."""
        return self.model_dump(mode="json")


class TaxedSaleBase(SaleBase):
    """
    Продажа с выделенным налогом: общая часть SaleWithTax и ChannelSale.

    Инвариант: 0 <= tax <= total.
    """

    tax: Decimal = Field(..., ge=0, description="Сумма налога (<= total)")

    @field_validator("tax", mode="before")
    @classmethod
    def quantize_tax(cls, v: Any) -> Decimal:
        return to_money(v)

    @field_validator("tax")
    @classmethod
    def validate_tax_within_total(cls, v: Decimal, info: ValidationInfo) -> Decimal:
        """Налог не может превышать итоговую сумму."""
        if "total" in info.data and v > info.data["total"]:
            raise ValueError(
                f"tax {format_money(v)} exceeds total {format_money(info.data['total'])}"
            )
        return v

    @property
    def subtotal(self) -> Decimal:
        """Сумма до налога (total - tax)."""
        return subtract_money(self.total, self.tax)


# =============================================================================
# VARIANTS
# =============================================================================


class Sale(SaleBase):
    """Продажа без разбивки на налог."""

    kind: Literal["sale"] = "sale"

    def describe(self) -> str:
        return describe_sale(self)


class SaleWithTax(TaxedSaleBase):
    """Продажа с выделенным налогом."""

    kind: Literal["sale_with_tax"] = "sale_with_tax"

    def describe(self) -> str:
        return describe_sale(self)


AnySale = Annotated[Union[Sale, SaleWithTax], Field(discriminator="kind")]

_SALE_ADAPTER: TypeAdapter = TypeAdapter(AnySale)


# =============================================================================
# FUNCTIONS
# =============================================================================


def make_sale(total: MoneyInput, tax: Optional[MoneyInput] = None) -> Union[Sale, SaleWithTax]:
    """
    Создание варианта продажи по наличию налога.

    Args:
        total: Итоговая сумма
        tax: Сумма налога; None → Sale без налога

    Raises:
        pydantic.ValidationError: Отрицательные суммы или tax > total
    """
    if tax is None:
        return Sale(total=total)
    return SaleWithTax(total=total, tax=tax)


def describe_sale(sale: Union[Sale, SaleWithTax]) -> str:
    """
    Человекочитаемая сводка продажи.

    - Sale:        "El total es: 100.00"
    - SaleWithTax: "El total es: 100.00, el impuesto es: 10.00"

    Raises:
        TypeError: Если передан не вариант продажи
    """
    if isinstance(sale, SaleWithTax):
        return (
            f"El total es: {format_money(sale.total)}, "
            f"el impuesto es: {format_money(sale.tax)}"
        )
    if isinstance(sale, Sale):
        return f"El total es: {format_money(sale.total)}"
    raise TypeError(f"Unsupported sale variant: {type(sale).__name__}")


def parse_sale(payload: Dict[str, Any]) -> Union[Sale, SaleWithTax]:
    """
    Построение варианта продажи из dict по полю `kind`.

    Raises:
        pydantic.ValidationError: Неизвестный kind или невалидные суммы
    """
    return _SALE_ADAPTER.validate_python(payload)
