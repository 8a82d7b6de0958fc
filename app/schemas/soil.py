"""Pydantic schemas for soil health scoring."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SoilSampleIn(BaseModel):
	"""Lab or field-kit soil readings (N/P/K in kg/ha, organic matter in %)."""

	model_config = ConfigDict(extra="forbid")

	ph: float = Field(ge=0, le=14)
	nitrogen: float = Field(ge=0)
	phosphorus: float = Field(ge=0)
	potassium: float = Field(ge=0)
	organic_matter: float | None = Field(default=None, ge=0, le=100)


class SoilScoreResponse(BaseModel):
	score: int = Field(ge=25, le=80)
	ph_score: int
	nutrient_score: int
	organic_score: int
