"""Tests for the analytics engine (run_analytics)."""

import math

import pytest

from pos_insights.analytics import run_analytics
from pos_insights.analytics.types import (
    FrequencyBucket,
    HourlyAggregate,
    PaymentAggregate,
    PriceVolumePoint,
    ProductAggregate,
)
from pos_insights.config import AnalyticsConfig
from pos_insights.exceptions import EmptyInputError, InvalidRecordError

from conftest import make_record


class TestScenarioA:
    """Worked example with two products, two methods and two customers."""

    def test_headline_metrics(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        assert result.total_revenue == pytest.approx(8.00)
        assert result.total_orders == 3
        assert result.average_order_value == pytest.approx(2.6667, abs=1e-4)
        assert result.unique_customer_count == 2

    def test_products_in_first_seen_order(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        assert result.products == (
            ProductAggregate(name="Latte", order_count=2, total_revenue=6.00, average_price=3.00),
            ProductAggregate(name="Espresso", order_count=1, total_revenue=2.00, average_price=2.00),
        )

    def test_hourly(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        assert result.hourly == (
            HourlyAggregate(hour=8, order_count=2, total_revenue=6.00),
            HourlyAggregate(hour=9, order_count=1, total_revenue=2.00),
        )

    def test_payments(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        assert result.payments == (
            PaymentAggregate(method="cash", order_count=2, total_revenue=5.00, share_percent="66.7"),
            PaymentAggregate(method="card", order_count=1, total_revenue=3.00, share_percent="33.3"),
        )

    def test_frequency_buckets(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        # c1 has 2 orders and is seen first, c2 has 1
        assert result.frequency == (
            FrequencyBucket(label="2-3 orders", customer_count=1),
            FrequencyBucket(label="1 order", customer_count=1),
        )

    def test_price_volume_mirrors_products(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        assert result.price_volume == (
            PriceVolumePoint(product_name="Latte", average_price=3.00, order_count=2),
            PriceVolumePoint(product_name="Espresso", average_price=2.00, order_count=1),
        )


class TestConservation:
    """Totals agree across every view of the same dataset."""

    def test_revenue_conservation(self, mixed_records) -> None:
        result = run_analytics(mixed_records)

        assert sum(p.total_revenue for p in result.products) == pytest.approx(result.total_revenue)
        assert sum(p.total_revenue for p in result.payments) == pytest.approx(result.total_revenue)
        assert sum(h.total_revenue for h in result.hourly) == pytest.approx(result.total_revenue)

    def test_order_conservation(self, mixed_records) -> None:
        result = run_analytics(mixed_records)

        assert sum(p.order_count for p in result.products) == result.total_orders
        assert sum(p.order_count for p in result.payments) == result.total_orders
        assert sum(h.order_count for h in result.hourly) == result.total_orders

    def test_share_percent_closes_to_100(self, mixed_records) -> None:
        result = run_analytics(mixed_records)

        total_share = sum(float(p.share_percent) for p in result.payments)
        assert total_share == pytest.approx(100.0, abs=0.1)

    def test_three_way_split_closes_within_tolerance(self) -> None:
        records = [
            make_record("Latte", 3.0, method="cash"),
            make_record("Latte", 3.0, method="card"),
            make_record("Latte", 3.0, method="voucher"),
        ]
        result = run_analytics(records)

        assert [p.share_percent for p in result.payments] == ["33.3", "33.3", "33.3"]
        assert sum(float(p.share_percent) for p in result.payments) == pytest.approx(100.0, abs=0.1)

    def test_customer_bucket_closure(self, mixed_records) -> None:
        result = run_analytics(mixed_records)

        assert sum(b.customer_count for b in result.frequency) == result.unique_customer_count


    def test_single_product_and_method_match_total_exactly(self) -> None:
        records = [make_record("Latte", 0.1, method="card", hour=8) for _ in range(10)]
        result = run_analytics(records)

        assert result.products[0].total_revenue == result.total_revenue
        assert result.payments[0].total_revenue == result.total_revenue
        assert result.hourly[0].total_revenue == result.total_revenue


class TestOrdering:
    def test_hourly_sorted_regardless_of_input_order(self, mixed_records) -> None:
        result = run_analytics(mixed_records)

        hours = [h.hour for h in result.hourly]
        assert hours == sorted(hours)
        assert hours == [7, 8, 10, 12, 13, 15, 18, 19, 22]

    def test_products_not_sorted_alphabetically(self) -> None:
        records = [
            make_record("Mocha", 4.0),
            make_record("Americano", 2.5),
            make_record("Mocha", 4.0),
        ]
        result = run_analytics(records)

        assert [p.name for p in result.products] == ["Mocha", "Americano"]

    def test_payments_in_first_seen_order(self, mixed_records) -> None:
        result = run_analytics(mixed_records)

        assert [p.method for p in result.payments] == ["card", "cash"]

    def test_empty_hours_omitted_by_default(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records)

        assert all(h.order_count > 0 for h in result.hourly)
        assert len(result.hourly) == 2

    def test_dense_hourly_policy(self, scenario_a_records) -> None:
        result = run_analytics(scenario_a_records, AnalyticsConfig(hourly_policy="dense"))

        assert [h.hour for h in result.hourly] == list(range(24))
        assert result.hourly[8] == HourlyAggregate(hour=8, order_count=2, total_revenue=6.00)
        assert result.hourly[0] == HourlyAggregate(hour=0, order_count=0, total_revenue=0.0)
        assert sum(h.order_count for h in result.hourly) == result.total_orders


class TestFrequency:
    def test_bucket_thresholds(self) -> None:
        records = []
        # customer "cN" places N orders
        for n in (1, 2, 3, 4, 5, 6, 9):
            records.extend(make_record("Latte", 3.0, customer=f"c{n}") for _ in range(n))
        result = run_analytics(records)

        assert result.frequency == (
            FrequencyBucket(label="1 order", customer_count=1),
            FrequencyBucket(label="2-3 orders", customer_count=2),
            FrequencyBucket(label="4-5 orders", customer_count=2),
            FrequencyBucket(label="6+ orders", customer_count=2),
        )

    def test_unused_buckets_not_synthesized(self) -> None:
        records = [make_record("Latte", 3.0, customer="only") for _ in range(7)]
        result = run_analytics(records)

        assert result.frequency == (FrequencyBucket(label="6+ orders", customer_count=1),)

    def test_customer_ids_are_not_normalized(self) -> None:
        # Known limitation: case and whitespace variants count as different customers
        records = [
            make_record("Latte", 3.0, customer="ANON-1"),
            make_record("Latte", 3.0, customer="anon-1"),
            make_record("Latte", 3.0, customer="ANON-1 "),
        ]
        result = run_analytics(records)

        assert result.unique_customer_count == 3


class TestRounding:
    def test_average_price_rounded_after_accumulation(self) -> None:
        records = [make_record("Latte", 1.0), make_record("Latte", 1.0), make_record("Latte", 2.0)]
        result = run_analytics(records)

        product = result.products[0]
        assert product.total_revenue == pytest.approx(4.0)
        assert product.average_price == 1.33

    def test_custom_decimals(self) -> None:
        records = [make_record("Latte", 1.0, method="cash"), make_record("Latte", 2.0, method="card"),
                   make_record("Latte", 2.0, method="card")]
        config = AnalyticsConfig(price_decimals=3, share_decimals=2)
        result = run_analytics(records, config)

        assert result.products[0].average_price == 1.667
        assert [p.share_percent for p in result.payments] == ["33.33", "66.67"]


class TestErrors:
    def test_empty_input_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            run_analytics([])

    def test_empty_generator_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            run_analytics(r for r in [])

    @pytest.mark.parametrize("amount", [0.0, -3.5, math.nan, math.inf])
    def test_invalid_amount_rejected(self, amount: float) -> None:
        records = [make_record("Latte", 3.0), make_record("Latte", amount)]

        with pytest.raises(InvalidRecordError) as exc_info:
            run_analytics(records)
        assert exc_info.value.index == 1

    def test_empty_product_rejected(self) -> None:
        with pytest.raises(InvalidRecordError, match="product_name"):
            run_analytics([make_record("", 3.0)])

    def test_empty_customer_rejected(self) -> None:
        with pytest.raises(InvalidRecordError, match="customer_id"):
            run_analytics([make_record("Latte", 3.0, customer="")])

    def test_validation_can_be_disabled(self) -> None:
        records = [make_record("Latte", 3.0), make_record("Latte", 0.0)]
        result = run_analytics(records, AnalyticsConfig(validate_records=False))

        assert result.total_orders == 2
        assert result.total_revenue == pytest.approx(3.0)


def test_idempotent(mixed_records) -> None:
    assert run_analytics(mixed_records) == run_analytics(mixed_records)


def test_input_is_not_mutated(scenario_a_records) -> None:
    snapshot = list(scenario_a_records)
    run_analytics(scenario_a_records)

    assert scenario_a_records == snapshot


def test_result_is_immutable(scenario_a_records) -> None:
    result = run_analytics(scenario_a_records)

    with pytest.raises(AttributeError):
        result.total_orders = 10  # type: ignore[misc]
    assert isinstance(result.products, tuple)
