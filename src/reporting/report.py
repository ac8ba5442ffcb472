"""Сборка строк отчёта из коллекции и продаж."""

import logging
from typing import List, Optional, Union

from src.core.domain.bounded_list import BoundedList
from src.core.domain.channel_sale import ChannelSale
from src.core.domain.sale import Sale, SaleWithTax, describe_sale
from src.reporting.config import ReportConfig

LOGGER = logging.getLogger(__name__)


def build_report_lines(
    collection: BoundedList,
    sale: Union[Sale, SaleWithTax],
    channel_sale: Optional[ChannelSale] = None,
    config: ReportConfig = ReportConfig(),
) -> List[str]:
    """Строки отчёта в порядке печати.

    1. Содержимое коллекции (render)
    2. Сводка продажи (describe_sale)
    3. Отчёт по каналу, если передан channel_sale
    """
    lines = [
        collection.render(config.separator),
        describe_sale(sale),
    ]
    if channel_sale is not None:
        lines.append(channel_sale.report(config.report_mode))

    LOGGER.debug(
        "Report built: %d lines, mode=%s", len(lines), config.report_mode.value
    )
    return lines
