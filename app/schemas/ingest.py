"""Pydantic schemas for batch ingestion payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.market import MarketPriceIn
from app.schemas.regional import DistrictStatisticIn
from app.schemas.weather import WeatherRecordIn


class IngestReceipt(BaseModel):
	dataset: str
	status: str
	inserted_count: int = 0
	record_ids: list[int] = Field(default_factory=list)
	ingested_at: datetime


class MarketPriceIngestRequest(BaseModel):
	records: list[MarketPriceIn] = Field(min_length=1)


class DistrictStatisticIngestRequest(BaseModel):
	records: list[DistrictStatisticIn] = Field(min_length=1)


class WeatherIngestRequest(BaseModel):
	records: list[WeatherRecordIn] = Field(min_length=1)
