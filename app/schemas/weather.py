"""Pydantic schemas for weather records."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import WeatherConditionEnum
from app.schemas.types import NonEmptyText


class WeatherRecordIn(BaseModel):
	model_config = ConfigDict(extra="forbid")

	location: NonEmptyText
	observed_on: date
	temperature: float | None = Field(default=None, ge=-90, le=60)
	humidity: float | None = Field(default=None, ge=0, le=100)
	rainfall_mm: float | None = Field(default=None, ge=0)
	wind_speed: float | None = Field(default=None, ge=0)
	weather_condition: WeatherConditionEnum | None = None
