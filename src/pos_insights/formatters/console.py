"""Console output formatting utilities."""

from __future__ import annotations

import re

from pos_insights.analytics.insights import Insights, extract_insights
from pos_insights.analytics.types import AnalyticsResult


def sanitize_for_console(text: str) -> str:
    """Sanitize text for console output by removing non-ASCII characters and HTML tags.

    This prevents UnicodeEncodeError on consoles with a legacy code page.

    Args:
        text: Text that may contain emojis and HTML tags

    Returns:
        Sanitized text safe for console output
    """
    text = re.sub(r"[^\x00-\x7F]+", "", text)
    text = re.sub(r"<[^>]+>", "", text)
    return text


def format_insights_for_console(
    result: AnalyticsResult,
    insights: Insights | None = None,
) -> str:
    """Build a human-readable summary of an analytics run.

    Args:
        result: AnalyticsResult to summarize
        insights: Precomputed insights; extracted from ``result`` when omitted

    Returns:
        Human-readable text string for console output
    """
    insights = insights or extract_insights(result)

    lines = []
    lines.append("Sales Analytics Summary")
    lines.append("=" * 60)
    lines.append(f"Total Revenue     : ${result.total_revenue:,.2f}")
    lines.append(f"Total Orders      : {result.total_orders:,}")
    lines.append(f"Avg Order Value   : ${result.average_order_value:,.2f}")
    lines.append(f"Unique Customers  : {result.unique_customer_count:,}")
    lines.append("")

    lines.append("Key Insights:")
    lines.append("-" * 60)
    top = insights.top_product
    lines.append(
        f"Top Performing Product: {top.name} generates the highest revenue "
        f"with ${top.total_revenue:,.2f} total"
    )
    peak = insights.peak_hour
    lines.append(f"Peak Hour: {peak.label} is your busiest hour with {peak.order_count} orders")
    lines.append(
        f"Customer Loyalty: {result.unique_customer_count} unique customers with "
        f"{result.total_orders} total orders "
        f"({insights.orders_per_customer:.1f} orders per customer)"
    )
    lines.append(
        f"Average Transaction: ${insights.average_order_value:,.2f} per order "
        f"across all products"
    )
    lines.append("")

    lines.append("Payment Methods:")
    for payment in result.payments:
        lines.append(
            f"  {payment.method}: {payment.order_count} orders "
            f"({payment.share_percent}%), ${payment.total_revenue:,.2f}"
        )

    lines.append("Customer Frequency:")
    for bucket in result.frequency:
        lines.append(f"  {bucket.label}: {bucket.customer_count} customers")

    return "\n".join(lines)
