"""Translate HTTP query parameters into repository ``QuerySpec`` objects.

Absent or blank parameters impose no constraint.  Text parameters match as
case-insensitive substrings; ``year`` and ``season`` match exactly.  The
effective limit is the caller's limit, else the per-mode default, clamped
to the configured ceiling.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, Field, field_validator

from app.config import Settings, get_settings
from app.models.enums import SeasonEnum
from app.services.repository import QuerySpec, SortDirection

logger = structlog.get_logger("agrismart.query")


def effective_limit(requested: int | None, default: int, settings: Settings | None = None) -> int:
	settings = settings or get_settings()
	if requested is None:
		return min(default, settings.query_limit_ceiling)
	if requested > settings.query_limit_ceiling:
		logger.warning(
			"query_limit_clamped",
			requested=requested,
			ceiling=settings.query_limit_ceiling,
		)
		return settings.query_limit_ceiling
	return requested


def _blank_to_none(value: str | None) -> str | None:
	if value is None:
		return None
	stripped = value.strip()
	return stripped or None


class RegionalStatsFilters(BaseModel):
	state: str | None = None
	district: str | None = None
	taluka: str | None = None
	crop: str | None = None
	year: int | None = Field(default=None, ge=1000, le=9999)
	limit: int | None = Field(default=None, ge=1)

	@field_validator("state", "district", "taluka", "crop", mode="before")
	@classmethod
	def _strip(cls, value: str | None) -> str | None:
		return _blank_to_none(value)

	def resolved_limit(self, settings: Settings | None = None) -> int:
		settings = settings or get_settings()
		return effective_limit(self.limit, settings.regional_default_limit, settings)

	def to_query_spec(self, settings: Settings | None = None) -> QuerySpec:
		text_filters = {
			name: value
			for name, value in (
				("state", self.state),
				("district", self.district),
				("taluka", self.taluka),
				("crop", self.crop),
			)
			if value is not None
		}
		exact_filters = {"recorded_year": self.year} if self.year is not None else {}
		return QuerySpec(
			text_filters=text_filters,
			exact_filters=exact_filters,
			order_by=(
				("recorded_year", SortDirection.desc),
				("district", SortDirection.asc),
				("id", SortDirection.asc),
			),
			limit=self.resolved_limit(settings),
		)


class MarketPriceFilters(BaseModel):
	commodity: str | None = None
	state: str | None = None
	district: str | None = None
	limit: int | None = Field(default=None, ge=1)

	@field_validator("commodity", "state", "district", mode="before")
	@classmethod
	def _strip(cls, value: str | None) -> str | None:
		return _blank_to_none(value)

	def resolved_limit(self, settings: Settings | None = None) -> int:
		settings = settings or get_settings()
		return effective_limit(self.limit, settings.market_default_limit, settings)

	def to_query_spec(self, settings: Settings | None = None) -> QuerySpec:
		text_filters = {
			name: value
			for name, value in (
				("commodity", self.commodity),
				("state", self.state),
				("district", self.district),
			)
			if value is not None
		}
		# most-recent-first; trend annotation depends on this order
		return QuerySpec(
			text_filters=text_filters,
			order_by=(
				("arrival_date", SortDirection.desc),
				("id", SortDirection.desc),
			),
			limit=self.resolved_limit(settings),
		)


class EncyclopediaFilters(BaseModel):
	crop: str | None = None
	season: SeasonEnum | None = None
	limit: int | None = Field(default=None, ge=1)

	@field_validator("crop", mode="before")
	@classmethod
	def _strip(cls, value: str | None) -> str | None:
		return _blank_to_none(value)

	def resolved_limit(self, settings: Settings | None = None) -> int:
		settings = settings or get_settings()
		return effective_limit(self.limit, settings.encyclopedia_default_limit, settings)

	def to_query_spec(self, settings: Settings | None = None) -> QuerySpec:
		return QuerySpec(
			text_filters={"crop_name": self.crop} if self.crop is not None else {},
			exact_filters={"planting_season": self.season} if self.season is not None else {},
			order_by=(("crop_name", SortDirection.asc),),
			limit=self.resolved_limit(settings),
		)
