"""Market price routes (public, read-only)."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.errors import RepositoryError
from app.schemas.market import MarketPriceResponse
from app.services.market_service import MarketPriceService
from app.services.query_filters import MarketPriceFilters
from app.services.repository import Repository, get_repository

router = APIRouter(prefix="/market-prices", tags=["market"])

logger = structlog.get_logger("agrismart.routes.market")


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, RepositoryError):
		return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	logger.exception("market_prices_failed")
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="market prices failure")


@router.get("", response_model=MarketPriceResponse)
async def get_market_prices(
	commodity: str | None = Query(default=None, max_length=200),
	state: str | None = Query(default=None, max_length=100),
	district: str | None = Query(default=None, max_length=100),
	limit: int | None = Query(default=None, ge=1),
	repository: Repository = Depends(get_repository),
) -> MarketPriceResponse:
	filters = MarketPriceFilters(commodity=commodity, state=state, district=district, limit=limit)
	try:
		return await MarketPriceService(repository).query(filters)
	except Exception as exc:
		raise _map_error(exc) from exc
