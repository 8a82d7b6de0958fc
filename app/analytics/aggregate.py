"""Grouping and summary statistics over filtered record sets.

Nothing here raises on empty input: an empty set yields ``None`` regional
aggregates, zero-valued market aggregates and empty groupings.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, assert_never

from app.analytics.trend import round_half_up
from app.config import MissingValuePolicy
from app.models.enums import TrendEnum

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


# ── Generic helpers ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SummaryStats:
	count: int
	total: float
	mean: float | None
	minimum: float | None
	maximum: float | None


def summarize(values: Iterable[float]) -> SummaryStats:
	items = [float(value) for value in values]
	if not items:
		return SummaryStats(count=0, total=0.0, mean=None, minimum=None, maximum=None)
	total = sum(items)
	return SummaryStats(
		count=len(items),
		total=total,
		mean=total / len(items),
		minimum=min(items),
		maximum=max(items),
	)


def group_by(records: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
	"""Group preserving first-seen key order and in-group record order."""
	groups: dict[K, list[T]] = {}
	for record in records:
		groups.setdefault(key(record), []).append(record)
	return groups


# ── District / crop mode ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RegionalAggregates:
	total_area: float
	total_production: float
	avg_yield: float | None
	avg_rainfall: float | None
	avg_irrigation_coverage: float | None
	record_count: int


def _measure(record: Any, field: str) -> float | None:
	value = getattr(record, field, None)
	if value is None:
		return None
	return float(value)


def _average(values: list[float | None], policy: MissingValuePolicy) -> float | None:
	present = [value for value in values if value is not None]
	match policy:
		case MissingValuePolicy.zero:
			return sum(present) / len(values) if values else None
		case MissingValuePolicy.present_only:
			return sum(present) / len(present) if present else None
		case _:
			assert_never(policy)


def aggregate_regional(
	records: Sequence[Any],
	policy: MissingValuePolicy = MissingValuePolicy.zero,
) -> RegionalAggregates | None:
	"""Totals and averages over district statistics; ``None`` when no records matched."""
	if not records:
		return None

	def column(field: str) -> list[float | None]:
		return [_measure(record, field) for record in records]

	return RegionalAggregates(
		total_area=sum(value for value in column("area_ha") if value is not None),
		total_production=sum(value for value in column("production_mt") if value is not None),
		avg_yield=_average(column("yield_mt_per_ha"), policy),
		avg_rainfall=_average(column("rainfall_mm"), policy),
		avg_irrigation_coverage=_average(column("irrigation_coverage_percent"), policy),
		record_count=len(records),
	)


def aggregate_by_district(
	records: Sequence[Any],
	policy: MissingValuePolicy = MissingValuePolicy.zero,
) -> dict[str, RegionalAggregates]:
	groups = group_by(records, lambda record: record.district)
	result: dict[str, RegionalAggregates] = {}
	for district, members in groups.items():
		aggregates = aggregate_regional(members, policy)
		if aggregates is not None:
			result[district] = aggregates
	return result


# ── Market mode ─────────────────────────────────────────────────────────────


class TrendAnnotated(Protocol):
	commodity: str
	trend: TrendEnum
	price_per_unit: float


@dataclass(frozen=True, slots=True)
class MarketAggregates:
	total_crops: int
	price_increases: int
	price_decreases: int
	avg_price: int
	highest_price: float
	lowest_price: float


def group_by_commodity(items: Sequence[TrendAnnotated]) -> dict[str, list[TrendAnnotated]]:
	return group_by(items, lambda item: item.commodity)


def aggregate_market(items: Sequence[TrendAnnotated]) -> MarketAggregates:
	increases = 0
	decreases = 0
	for item in items:
		match item.trend:
			case TrendEnum.up:
				increases += 1
			case TrendEnum.down:
				decreases += 1
			case TrendEnum.stable:
				pass
			case _:
				assert_never(item.trend)

	prices = summarize(item.price_per_unit for item in items)
	return MarketAggregates(
		total_crops=len(group_by_commodity(items)),
		price_increases=increases,
		price_decreases=decreases,
		avg_price=round_half_up(prices.mean) if prices.mean is not None else 0,
		highest_price=prices.maximum if prices.maximum is not None else 0.0,
		lowest_price=prices.minimum if prices.minimum is not None else 0.0,
	)
