"""Crop encyclopedia lookup."""

from __future__ import annotations

import structlog

from app.config import Settings, get_settings
from app.models.encyclopedia import EncyclopediaEntry
from app.schemas.encyclopedia import EncyclopediaEntryRead, EncyclopediaFiltersEcho, EncyclopediaResponse
from app.services.query_filters import EncyclopediaFilters
from app.services.repository import Repository

logger = structlog.get_logger("agrismart.encyclopedia")


class EncyclopediaService:
	def __init__(self, repository: Repository, settings: Settings | None = None):
		self.repository = repository
		self.settings = settings or get_settings()

	async def query(self, filters: EncyclopediaFilters) -> EncyclopediaResponse:
		spec = filters.to_query_spec(self.settings)
		entries = await self.repository.query(EncyclopediaEntry, spec)

		logger.info(
			"encyclopedia_query",
			crop=filters.crop,
			season=filters.season,
			limit=spec.limit,
			count=len(entries),
		)

		return EncyclopediaResponse(
			entries=[EncyclopediaEntryRead.model_validate(entry) for entry in entries],
			count=len(entries),
			filters=EncyclopediaFiltersEcho(crop=filters.crop, season=filters.season, limit=spec.limit),
		)
