"""Pydantic schemas for market price records and the market price query."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import TrendEnum
from app.schemas.types import NonEmptyText, PriceAmount


class MarketPriceIn(BaseModel):
	model_config = ConfigDict(extra="forbid")

	commodity: NonEmptyText
	commodity_code: str | None = Field(default=None, max_length=64)
	variety: str | None = Field(default=None, max_length=120)
	grade: str | None = Field(default=None, max_length=64)
	market_name: NonEmptyText
	state: NonEmptyText
	district: str | None = Field(default=None, max_length=100)
	arrival_date: date
	min_price: PriceAmount | None = None
	max_price: PriceAmount | None = None
	modal_price: PriceAmount | None = None
	unit: str = Field(default="quintal", min_length=1, max_length=32)
	source: str | None = Field(default=None, max_length=200)


class MarketPriceRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	commodity: str
	commodity_code: str | None = None
	variety: str | None = None
	grade: str | None = None
	market_name: str
	state: str
	district: str | None = None
	arrival_date: date
	min_price: float | None = None
	max_price: float | None = None
	modal_price: float | None = None
	unit: str
	source: str | None = None


class AnnotatedMarketPrice(MarketPriceRead):
	"""A price record plus its comparison with the previous same-series record."""

	price_per_unit: float
	trend: TrendEnum
	change_percent: float
	change_amount: int


class MarketStats(BaseModel):
	total_crops: int = 0
	price_increases: int = 0
	price_decreases: int = 0
	avg_price: int = 0
	highest_price: float = 0.0
	lowest_price: float = 0.0


class MarketPriceFiltersEcho(BaseModel):
	commodity: str | None = None
	state: str | None = None
	district: str | None = None
	limit: int


class MarketPriceResponse(BaseModel):
	success: bool = True
	prices: list[AnnotatedMarketPrice] = Field(default_factory=list)
	grouped_prices: dict[str, list[AnnotatedMarketPrice]] = Field(default_factory=dict)
	market_stats: MarketStats
	filters: MarketPriceFiltersEcho
	source: str = "database"
	last_updated: datetime
