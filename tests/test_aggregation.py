from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

from conftest import make_district_stat

from app.analytics.aggregate import (
    aggregate_by_district,
    aggregate_market,
    aggregate_regional,
    group_by,
    group_by_commodity,
    summarize,
)
from app.config import MissingValuePolicy
from app.models.enums import TrendEnum


def test_regional_aggregates_are_none_for_empty_set() -> None:
    assert aggregate_regional([]) is None
    assert aggregate_by_district([]) == {}


def test_missing_yield_counts_as_zero_by_default() -> None:
    records = [
        make_district_stat(yield_mt_per_ha=Decimal("10")),
        make_district_stat(id=2, yield_mt_per_ha=None),
    ]
    aggregates = aggregate_regional(records)
    assert aggregates is not None
    assert aggregates.avg_yield == 5.0
    assert aggregates.record_count == 2


def test_present_only_policy_skips_missing_values() -> None:
    records = [
        make_district_stat(yield_mt_per_ha=Decimal("10")),
        make_district_stat(id=2, yield_mt_per_ha=None),
    ]
    aggregates = aggregate_regional(records, MissingValuePolicy.present_only)
    assert aggregates is not None
    assert aggregates.avg_yield == 10.0
    assert aggregates.avg_rainfall is None


def test_all_null_measures_do_not_raise() -> None:
    aggregates = aggregate_regional([make_district_stat(), make_district_stat(id=2)])
    assert aggregates is not None
    assert aggregates.total_area == 0
    assert aggregates.total_production == 0
    assert aggregates.avg_yield == 0.0


def test_regional_totals_and_averages() -> None:
    records = [
        make_district_stat(
            area_ha=Decimal("1200.5"),
            production_mt=Decimal("3000"),
            rainfall_mm=Decimal("700"),
            irrigation_coverage_percent=Decimal("40"),
        ),
        make_district_stat(
            id=2,
            district="Nashik",
            area_ha=Decimal("799.5"),
            production_mt=Decimal("1000"),
            rainfall_mm=Decimal("500"),
            irrigation_coverage_percent=Decimal("60"),
        ),
    ]
    aggregates = aggregate_regional(records)
    assert aggregates is not None
    assert aggregates.total_area == 2000.0
    assert aggregates.total_production == 4000.0
    assert aggregates.avg_rainfall == 600.0
    assert aggregates.avg_irrigation_coverage == 50.0

    by_district = aggregate_by_district(records)
    assert list(by_district) == ["Pune", "Nashik"]
    assert by_district["Nashik"].total_area == 799.5


def test_group_by_keeps_first_seen_order() -> None:
    groups = group_by(["bb", "a", "cc", "d"], len)
    assert list(groups) == [2, 1]
    assert groups[2] == ["bb", "cc"]


def test_summarize_empty() -> None:
    stats = summarize([])
    assert stats.count == 0
    assert stats.mean is None


def _annotated(commodity: str, trend: TrendEnum, price: float) -> SimpleNamespace:
    return SimpleNamespace(commodity=commodity, trend=trend, price_per_unit=price)


def test_market_aggregates_for_empty_set_are_zero() -> None:
    stats = aggregate_market([])
    assert stats.total_crops == 0
    assert stats.price_increases == 0
    assert stats.price_decreases == 0
    assert stats.avg_price == 0
    assert stats.highest_price == 0.0
    assert stats.lowest_price == 0.0
    assert group_by_commodity([]) == {}


def test_market_aggregates() -> None:
    items = [
        _annotated("Onion", TrendEnum.up, 2200),
        _annotated("Tomato", TrendEnum.down, 1001),
        _annotated("Onion", TrendEnum.stable, 2000),
        _annotated("Potato", TrendEnum.up, 900),
    ]
    stats = aggregate_market(items)
    assert stats.total_crops == 3
    assert stats.price_increases == 2
    assert stats.price_decreases == 1
    assert stats.avg_price == 1525
    assert stats.highest_price == 2200
    assert stats.lowest_price == 900

    grouped = group_by_commodity(items)
    assert list(grouped) == ["Onion", "Tomato", "Potato"]
    assert [item.price_per_unit for item in grouped["Onion"]] == [2200, 2000]
