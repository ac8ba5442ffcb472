"""
CLI entrypoint: печать коллекции и сводок продаж.

Usage:
    ventas-demo a b c d --capacity 3 --total 100 --tax 10
    ventas-demo --total 100 --tax 10 --channel on_site --report-mode legacy

Returns:
    0: отчёт напечатан
    2: невалидные аргументы (отрицательная ёмкость, суммы и т.п.)
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.core.domain.bounded_list import DEFAULT_SEPARATOR, BoundedList
from src.core.domain.channel_sale import ChannelSale, ReportMode, SaleChannel
from src.core.domain.sale import make_sale
from src.reporting.config import ReportConfig
from src.reporting.report import build_report_lines

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ventas-demo",
        description="Bounded collection and sale summaries",
    )
    parser.add_argument("items", nargs="*", help="Items to append to the collection")
    parser.add_argument(
        "--capacity",
        type=int,
        default=3,
        help="Maximum number of items kept (default: 3)",
    )
    parser.add_argument("--total", default="0", help="Sale total (default: 0)")
    parser.add_argument("--tax", default=None, help="Sale tax; omit for a sale without tax")
    parser.add_argument(
        "--channel",
        choices=[c.value for c in SaleChannel],
        default=None,
        help="Also print a channel report for this sale",
    )
    parser.add_argument(
        "--report-mode",
        choices=[m.value for m in ReportMode],
        default=ReportMode.CORRECTED.value,
        help="Channel report mode (default: corrected)",
    )
    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Separator used when rendering the collection",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ReportConfig(
        separator=args.separator,
        report_mode=ReportMode(args.report_mode),
    )

    # pydantic.ValidationError является подклассом ValueError
    try:
        collection: BoundedList[str] = BoundedList(args.capacity)
        sale = make_sale(args.total, args.tax)
        channel_sale = None
        if args.channel is not None:
            channel_sale = ChannelSale(
                channel=SaleChannel(args.channel),
                total=args.total,
                tax=args.tax if args.tax is not None else "0",
            )
    except ValueError as e:
        parser.error(str(e))

    accepted = collection.try_extend(args.items)
    if accepted < len(args.items):
        LOGGER.info(
            "%d of %d items rejected (capacity %d)",
            len(args.items) - accepted,
            len(args.items),
            collection.capacity,
        )

    for line in build_report_lines(collection, sale, channel_sale, config):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
