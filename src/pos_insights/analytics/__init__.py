"""Sales analytics domain module.

This module computes derived aggregate views over point-of-sale records:

- **products**: revenue, order count and average price per product
- **hourly**: orders and revenue per wall-clock hour
- **payments**: orders, revenue and share per payment method
- **frequency**: distinct customers per order-count bucket
- **price_volume**: average price against order count per product

Example:
    >>> from pos_insights.analytics import run_analytics, extract_insights
    >>>
    >>> result = run_analytics(records)
    >>> insights = extract_insights(result)
    >>> insights.top_product.name
    'Latte'
"""

from pos_insights.analytics.api import run_analytics
from pos_insights.analytics.frames import export_frames, summary_dict, to_frames
from pos_insights.analytics.insights import (
    Insights,
    extract_insights,
    orders_per_customer,
    peak_hour,
    top_product,
)
from pos_insights.analytics.types import (
    AnalyticsResult,
    FrequencyBucket,
    HourlyAggregate,
    PaymentAggregate,
    PriceVolumePoint,
    ProductAggregate,
)

__all__ = [
    "AnalyticsResult",
    "FrequencyBucket",
    "HourlyAggregate",
    "Insights",
    "PaymentAggregate",
    "PriceVolumePoint",
    "ProductAggregate",
    "export_frames",
    "extract_insights",
    "orders_per_customer",
    "peak_hour",
    "run_analytics",
    "summary_dict",
    "to_frames",
    "top_product",
]
