"""Batch ingestion routes (admin only)."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import Identity, require_role
from app.database import get_db
from app.errors import RecordValidationError, RepositoryError
from app.models.enums import UserRoleEnum
from app.schemas.ingest import (
	DistrictStatisticIngestRequest,
	IngestReceipt,
	MarketPriceIngestRequest,
	WeatherIngestRequest,
)
from app.services.ingest_service import IngestService

router = APIRouter(prefix="/ingest", tags=["ingest"])

logger = structlog.get_logger("agrismart.routes.ingest")


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, RecordValidationError):
		return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors)
	if isinstance(exc, RepositoryError):
		return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	logger.exception("ingest_request_failed")
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="ingest failure")


@router.post("/market-prices", response_model=IngestReceipt, status_code=status.HTTP_201_CREATED)
async def ingest_market_prices(
	payload: MarketPriceIngestRequest,
	db: AsyncSession = Depends(get_db),
	_identity: Identity = Depends(require_role(UserRoleEnum.admin)),
) -> IngestReceipt:
	try:
		return await IngestService(db).ingest_market_prices(payload.records)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/district-stats", response_model=IngestReceipt, status_code=status.HTTP_201_CREATED)
async def ingest_district_stats(
	payload: DistrictStatisticIngestRequest,
	db: AsyncSession = Depends(get_db),
	_identity: Identity = Depends(require_role(UserRoleEnum.admin)),
) -> IngestReceipt:
	try:
		return await IngestService(db).ingest_district_stats(payload.records)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/weather", response_model=IngestReceipt, status_code=status.HTTP_201_CREATED)
async def ingest_weather(
	payload: WeatherIngestRequest,
	db: AsyncSession = Depends(get_db),
	_identity: Identity = Depends(require_role(UserRoleEnum.admin)),
) -> IngestReceipt:
	try:
		return await IngestService(db).ingest_weather(payload.records)
	except Exception as exc:
		raise _map_error(exc) from exc
