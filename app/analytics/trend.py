"""Two-point price trend classification.

Each observation is compared with the nearest *later* position in the
supplied sequence that belongs to the same series (same commodity name, or
same alternate commodity code).  The caller must pass observations ordered
most-recent-first; the classifier never sorts.

The nearest same-series position is found through per-key indexes built in
a single reverse pass, so annotating ``n`` observations is O(n).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from app.models.enums import TrendEnum

TREND_THRESHOLD_PERCENT = 2.0

PriceValue = Decimal | float | int | None


class PriceObservation(Protocol):
	commodity: str
	commodity_code: str | None
	modal_price: PriceValue
	max_price: PriceValue
	min_price: PriceValue


@dataclass(frozen=True, slots=True)
class TrendResult:
	trend: TrendEnum
	change_percent: float
	change_amount: int


STABLE = TrendResult(trend=TrendEnum.stable, change_percent=0.0, change_amount=0)


def reference_price(observation: PriceObservation) -> float:
	"""Modal price, else max, else min, else 0."""
	for value in (observation.modal_price, observation.max_price, observation.min_price):
		if value:
			return float(value)
	return 0.0


def round_half_up(value: float) -> int:
	return math.floor(value + 0.5)


def classify_percent(change_percent: float) -> TrendEnum:
	if change_percent > TREND_THRESHOLD_PERCENT:
		return TrendEnum.up
	if change_percent < -TREND_THRESHOLD_PERCENT:
		return TrendEnum.down
	return TrendEnum.stable


def classify_change(current: float, previous: float) -> TrendResult:
	"""Compare two reference prices; a non-positive previous price is always stable."""
	if previous <= 0:
		return STABLE

	raw_percent = (current - previous) / previous * 100
	# + 0.0 folds -0.0 into 0.0
	change_percent = round(raw_percent, 1) + 0.0
	return TrendResult(
		trend=classify_percent(change_percent),
		change_percent=change_percent,
		change_amount=round_half_up(current * raw_percent / 100),
	)


def _series_code(observation: PriceObservation) -> str | None:
	code = observation.commodity_code
	return code if code else None


def annotate_trends(observations: Sequence[PriceObservation]) -> list[TrendResult]:
	"""Trend of every observation against its nearest older same-series record."""
	results: list[TrendResult] = [STABLE] * len(observations)
	next_by_name: dict[str, int] = {}
	next_by_code: dict[str, int] = {}

	for index in range(len(observations) - 1, -1, -1):
		observation = observations[index]
		code = _series_code(observation)

		candidates = [next_by_name.get(observation.commodity)]
		if code is not None:
			candidates.append(next_by_code.get(code))
		positions = [position for position in candidates if position is not None]

		if positions:
			previous = observations[min(positions)]
			results[index] = classify_change(reference_price(observation), reference_price(previous))

		next_by_name[observation.commodity] = index
		if code is not None:
			next_by_code[code] = index

	return results
