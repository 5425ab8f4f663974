"""Tabular export of an AnalyticsResult.

Presentation collaborators (charts, spreadsheets, BI tools) work with
DataFrames, so every view can be exported with snake_case columns in
the same row order the engine produced.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

import pandas as pd

from pos_insights.analytics.types import (
    AnalyticsResult,
    FrequencyBucket,
    HourlyAggregate,
    PaymentAggregate,
    PriceVolumePoint,
    ProductAggregate,
)

logger = logging.getLogger(__name__)

VIEW_TYPES = {
    "products": ProductAggregate,
    "hourly": HourlyAggregate,
    "payments": PaymentAggregate,
    "frequency": FrequencyBucket,
    "price_volume": PriceVolumePoint,
}


def _view_frame(rows: tuple, row_type: type) -> pd.DataFrame:
    columns = [f.name for f in fields(row_type)]
    return pd.DataFrame([asdict(row) for row in rows], columns=columns)


def to_frames(result: AnalyticsResult) -> dict[str, pd.DataFrame]:
    """Convert every view of a result into a DataFrame.

    Returns:
        Mapping of view name ("products", "hourly", "payments",
        "frequency", "price_volume") to its DataFrame.
    """
    return {
        name: _view_frame(getattr(result, name), row_type)
        for name, row_type in VIEW_TYPES.items()
    }


def summary_dict(result: AnalyticsResult) -> dict[str, Any]:
    """Headline metrics of a result as a flat dictionary."""
    return {
        "total_revenue": result.total_revenue,
        "total_orders": result.total_orders,
        "average_order_value": result.average_order_value,
        "unique_customer_count": result.unique_customer_count,
    }


def export_frames(result: AnalyticsResult, output_dir: Path) -> list[Path]:
    """Write each view, plus a one-row summary, to CSV files.

    Args:
        result: Result to export.
        output_dir: Directory to write into; created if missing.

    Returns:
        Paths of the written files.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    frames = to_frames(result)
    frames["summary"] = pd.DataFrame([summary_dict(result)])
    for name, df in frames.items():
        path = output_dir / f"{name}.csv"
        df.to_csv(path, index=False)
        written.append(path)
        logger.debug("Wrote %s (%d rows)", path, len(df))

    logger.info("Exported %d views to %s", len(written), output_dir)
    return written
