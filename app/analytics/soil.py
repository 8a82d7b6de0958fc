"""Composite soil health score.

    pH (40 or 10) + weakest nutrient (20 or 10) + organic matter (20 / 15 / 5)

The nutrient part is the minimum of the N, P and K sub-scores so that one
deficient nutrient cannot be hidden by two good ones.  Totals range 25–80.
"""

from __future__ import annotations

from dataclasses import dataclass

PH_OPTIMAL = (6.0, 7.5)
NITROGEN_OPTIMAL = (200.0, 400.0)
PHOSPHORUS_OPTIMAL = (20.0, 60.0)
POTASSIUM_OPTIMAL = (150.0, 300.0)

SCORE_MIN = 25
SCORE_MAX = 80


@dataclass(frozen=True, slots=True)
class SoilScore:
	ph_score: int
	nutrient_score: int
	organic_score: int

	@property
	def total(self) -> int:
		return self.ph_score + self.nutrient_score + self.organic_score


def _within(value: float, bounds: tuple[float, float]) -> bool:
	low, high = bounds
	return low <= value <= high


def _nutrient_score(value: float, bounds: tuple[float, float]) -> int:
	return 20 if _within(value, bounds) else 10


def _organic_score(organic_matter: float | None) -> int:
	if organic_matter is None:
		return 5
	if organic_matter >= 2.0:
		return 20
	if organic_matter >= 1.0:
		return 15
	return 5


def score_components(
	ph: float,
	nitrogen: float,
	phosphorus: float,
	potassium: float,
	organic_matter: float | None = None,
) -> SoilScore:
	return SoilScore(
		ph_score=40 if _within(ph, PH_OPTIMAL) else 10,
		nutrient_score=min(
			_nutrient_score(nitrogen, NITROGEN_OPTIMAL),
			_nutrient_score(phosphorus, PHOSPHORUS_OPTIMAL),
			_nutrient_score(potassium, POTASSIUM_OPTIMAL),
		),
		organic_score=_organic_score(organic_matter),
	)


def soil_health_score(
	ph: float,
	nitrogen: float,
	phosphorus: float,
	potassium: float,
	organic_matter: float | None = None,
) -> int:
	"""Score a soil sample; an absent organic-matter reading scores the minimum."""
	return score_components(ph, nitrogen, phosphorus, potassium, organic_matter).total
