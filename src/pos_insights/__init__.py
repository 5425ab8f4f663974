"""POS Insights - aggregate views over point-of-sale transactions.

This package turns a collection of validated sales records into the
aggregate views behind a sales dashboard:

- Revenue, order count and average price per product
- Hourly order and revenue series
- Payment method shares
- Customer visit frequency buckets
- Price versus volume points
- Headline insights (top product, peak hour, orders per customer)

Module Structure:
    pos_insights.analytics: Aggregation engine, insights and tabular export
    pos_insights.ingest: CSV loading and cleaning of POS exports
    pos_insights.formatters: Console summaries
    pos_insights.config: AnalyticsConfig policies

Quick Start:
    >>> from pos_insights.ingest import load_records
    >>> from pos_insights.analytics import run_analytics, extract_insights
    >>>
    >>> records, report = load_records("data/coffee_sales.csv")
    >>> result = run_analytics(records)
    >>> extract_insights(result).peak_hour.label
    '10:00'
"""

__version__ = "0.1.0"

from pos_insights.config import AnalyticsConfig
from pos_insights.exceptions import (
    AnalyticsError,
    ConfigError,
    DataQualityError,
    EmptyInputError,
    InvalidRecordError,
    PosInsightsError,
)
from pos_insights.records import SalesRecord

__all__ = [
    "AnalyticsConfig",
    "AnalyticsError",
    "ConfigError",
    "DataQualityError",
    "EmptyInputError",
    "InvalidRecordError",
    "PosInsightsError",
    "SalesRecord",
    "__version__",
]
