"""Command-line entry point for POS sales analytics.

Examples:
    $ python -m pos_insights.cli --file coffee_sales.csv
    $ python -m pos_insights.cli --file coffee_sales.csv --hourly-policy dense
    $ python -m pos_insights.cli --file coffee_sales.csv --export-dir out/ --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from pos_insights.analytics import export_frames, run_analytics
from pos_insights.config import HOURLY_POLICIES, AnalyticsConfig
from pos_insights.exceptions import EmptyInputError, PosInsightsError
from pos_insights.formatters import format_insights_for_console, sanitize_for_console
from pos_insights.ingest import load_records

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Analyze POS sales exports.")
    p.add_argument(
        "--file",
        required=True,
        help="Path to the sales CSV export.",
    )
    p.add_argument(
        "--sep",
        default=",",
        help="Field delimiter of the CSV file (default: ',').",
    )
    p.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the CSV file (default: 'utf-8').",
    )
    p.add_argument(
        "--hourly-policy",
        choices=HOURLY_POLICIES,
        default=None,
        help="Emit only active hours (sparse) or all 24 hours (dense). "
        "Defaults to POS_INSIGHTS_HOURLY_POLICY or 'sparse'.",
    )
    p.add_argument(
        "--anonymous-customer",
        default="anonymous",
        help="Customer id assigned to sales without a card (default: 'anonymous').",
    )
    p.add_argument(
        "--export-dir",
        default=None,
        help="Optional directory to write each aggregate view as CSV.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = AnalyticsConfig.from_env()
        if args.hourly_policy:
            config = replace(config, hourly_policy=args.hourly_policy)

        records, _ = load_records(
            args.file,
            anonymous_customer=args.anonymous_customer,
            sep=args.sep,
            encoding=args.encoding,
        )
        result = run_analytics(records, config)

        print(sanitize_for_console(format_insights_for_console(result)))

        if args.export_dir:
            export_frames(result, Path(args.export_dir))
        return 0
    except EmptyInputError:
        print(f"ERROR: No valid sales records found in {args.file}", file=sys.stderr)
        return 1
    except PosInsightsError as e:
        logger.debug("Analytics run failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
