"""District / crop statistics routes (public, read-only)."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.errors import RepositoryError
from app.schemas.regional import RegionalStatsResponse
from app.services.query_filters import RegionalStatsFilters
from app.services.regional_service import RegionalStatsService
from app.services.repository import Repository, get_repository

router = APIRouter(prefix="/district-stats", tags=["regional"])

logger = structlog.get_logger("agrismart.routes.regional")


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, RepositoryError):
		return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	logger.exception("district_stats_failed")
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="district stats failure")


@router.get("", response_model=RegionalStatsResponse)
async def get_district_stats(
	state: str | None = Query(default=None, max_length=100),
	district: str | None = Query(default=None, max_length=100),
	taluka: str | None = Query(default=None, max_length=100),
	crop: str | None = Query(default=None, max_length=120),
	year: int | None = Query(default=None, ge=1000, le=9999),
	limit: int | None = Query(default=None, ge=1),
	repository: Repository = Depends(get_repository),
) -> RegionalStatsResponse:
	filters = RegionalStatsFilters(
		state=state,
		district=district,
		taluka=taluka,
		crop=crop,
		year=year,
		limit=limit,
	)
	try:
		return await RegionalStatsService(repository).query(filters)
	except Exception as exc:
		raise _map_error(exc) from exc
