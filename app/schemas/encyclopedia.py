"""Pydantic schemas for the crop encyclopedia."""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import SeasonEnum


class EncyclopediaEntryRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	crop_name: str
	description: str | None = None
	planting_season: SeasonEnum | None = None
	fertilizer_needs: dict[str, Any] | None = None


class EncyclopediaFiltersEcho(BaseModel):
	crop: str | None = None
	season: SeasonEnum | None = None
	limit: int


class EncyclopediaResponse(BaseModel):
	success: bool = True
	entries: list[EncyclopediaEntryRead] = Field(default_factory=list)
	count: int = 0
	filters: EncyclopediaFiltersEcho
