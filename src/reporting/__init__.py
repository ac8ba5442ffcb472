"""Reporting — печать содержимого коллекции и сводок продаж."""

from src.reporting.config import ReportConfig
from src.reporting.report import build_report_lines

__all__ = [
    "ReportConfig",
    "build_report_lines",
]
