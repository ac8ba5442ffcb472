"""Конфигурация отчётов."""

from dataclasses import dataclass

from src.core.domain.bounded_list import DEFAULT_SEPARATOR
from src.core.domain.channel_sale import ReportMode


@dataclass(frozen=True)
class ReportConfig:
    """Конфигурация печати отчёта.

    separator: разделитель элементов в render()
    report_mode: CORRECTED или LEGACY для отчётов по каналам
    """

    separator: str = DEFAULT_SEPARATOR
    report_mode: ReportMode = ReportMode.CORRECTED
