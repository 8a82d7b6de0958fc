"""Pydantic schemas for district statistics and the regional query."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import SeasonEnum
from app.schemas.types import (
	LargeMeasure,
	NonEmptyText,
	Percentage,
	RainfallMillimetres,
	RecordedYear,
	YieldRate,
)


class DistrictStatisticIn(BaseModel):
	model_config = ConfigDict(extra="forbid")

	state: NonEmptyText
	district: NonEmptyText
	taluka: str | None = Field(default=None, max_length=100)
	crop: str | None = Field(default=None, max_length=120)
	season: SeasonEnum | None = None
	recorded_year: RecordedYear | None = None
	area_ha: LargeMeasure | None = None
	production_mt: LargeMeasure | None = None
	yield_mt_per_ha: YieldRate | None = None
	rainfall_mm: RainfallMillimetres | None = None
	irrigation_coverage_percent: Percentage | None = None
	horticulture_area_ha: LargeMeasure | None = None
	medicinal_plants_area_ha: LargeMeasure | None = None
	source: str | None = Field(default=None, max_length=200)


class DistrictStatisticRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	state: str
	district: str
	taluka: str | None = None
	crop: str | None = None
	season: SeasonEnum | None = None
	recorded_year: int | None = None
	area_ha: float | None = None
	production_mt: float | None = None
	yield_mt_per_ha: float | None = None
	rainfall_mm: float | None = None
	irrigation_coverage_percent: float | None = None
	horticulture_area_ha: float | None = None
	medicinal_plants_area_ha: float | None = None
	source: str | None = None


class RegionalAggregatesRead(BaseModel):
	total_area: float
	total_production: float
	avg_yield: float | None = None
	avg_rainfall: float | None = None
	avg_irrigation_coverage: float | None = None
	record_count: int


class RegionalFiltersEcho(BaseModel):
	state: str | None = None
	district: str | None = None
	taluka: str | None = None
	crop: str | None = None
	year: int | None = None
	limit: int


class RegionalStatsResponse(BaseModel):
	success: bool = True
	stats: list[DistrictStatisticRead] = Field(default_factory=list)
	aggregates: RegionalAggregatesRead | None = None
	by_district: dict[str, RegionalAggregatesRead] = Field(default_factory=dict)
	count: int = 0
	filters: RegionalFiltersEcho
