"""Simple example: Analyze a coffee shop sales export.

This demonstrates loading records, running the analytics engine and
reading the insight facts and tabular views.
"""

from pathlib import Path

from pos_insights import AnalyticsConfig
from pos_insights.analytics import extract_insights, run_analytics, to_frames
from pos_insights.ingest import load_records

records, report = load_records(Path("data/coffee_sales.csv"))
print(f"Loaded {report.rows_kept} of {report.rows_read} rows\n")

# Example 1: Default run (sparse hourly series)
print("Example 1: Headline metrics")
print("-" * 60)
result = run_analytics(records)
print(f"Revenue: ${result.total_revenue:,.2f}")
print(f"Orders: {result.total_orders}")
print(f"Customers: {result.unique_customer_count}\n")

# Example 2: Insights
print("Example 2: Insights")
print("-" * 60)
insights = extract_insights(result)
print(f"Top product: {insights.top_product.name}")
print(f"Peak hour: {insights.peak_hour.label}")
print(f"Orders per customer: {insights.orders_per_customer:.1f}\n")

# Example 3: Dense hourly series for a calendar-complete chart
print("Example 3: Dense hourly series")
print("-" * 60)
dense = run_analytics(records, AnalyticsConfig(hourly_policy="dense"))
print(to_frames(dense)["hourly"].to_string(index=False))
