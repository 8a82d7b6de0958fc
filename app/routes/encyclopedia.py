"""Crop encyclopedia routes (public, read-only)."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.errors import RepositoryError
from app.models.enums import SeasonEnum
from app.schemas.encyclopedia import EncyclopediaResponse
from app.services.encyclopedia_service import EncyclopediaService
from app.services.query_filters import EncyclopediaFilters
from app.services.repository import Repository, get_repository

router = APIRouter(prefix="/encyclopedia", tags=["encyclopedia"])

logger = structlog.get_logger("agrismart.routes.encyclopedia")


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, RepositoryError):
		return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
	logger.exception("encyclopedia_failed")
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="encyclopedia failure")


@router.get("", response_model=EncyclopediaResponse)
async def get_encyclopedia(
	crop: str | None = Query(default=None, max_length=120),
	season: SeasonEnum | None = Query(default=None),
	limit: int | None = Query(default=None, ge=1),
	repository: Repository = Depends(get_repository),
) -> EncyclopediaResponse:
	filters = EncyclopediaFilters(crop=crop, season=season, limit=limit)
	try:
		return await EncyclopediaService(repository).query(filters)
	except Exception as exc:
		raise _map_error(exc) from exc
