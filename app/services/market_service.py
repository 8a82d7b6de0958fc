"""Market price query: filter, annotate trends, group and summarize."""

from __future__ import annotations

from datetime import UTC, datetime

import structlog

from app.analytics.aggregate import aggregate_market, group_by_commodity
from app.analytics.trend import annotate_trends, reference_price
from app.config import Settings, get_settings
from app.models.market import MarketPrice
from app.schemas.market import (
	AnnotatedMarketPrice,
	MarketPriceFiltersEcho,
	MarketPriceRead,
	MarketPriceResponse,
	MarketStats,
)
from app.services.query_filters import MarketPriceFilters
from app.services.repository import Repository

logger = structlog.get_logger("agrismart.market")


class MarketPriceService:
	def __init__(self, repository: Repository, settings: Settings | None = None):
		self.repository = repository
		self.settings = settings or get_settings()

	async def query(self, filters: MarketPriceFilters) -> MarketPriceResponse:
		spec = filters.to_query_spec(self.settings)
		records = await self.repository.query(MarketPrice, spec)

		prices = [
			AnnotatedMarketPrice(
				**MarketPriceRead.model_validate(record).model_dump(),
				price_per_unit=reference_price(record),
				trend=result.trend,
				change_percent=result.change_percent,
				change_amount=result.change_amount,
			)
			for record, result in zip(records, annotate_trends(records), strict=True)
		]
		stats = aggregate_market(prices)

		logger.info(
			"market_price_query",
			filters=dict(spec.text_filters),
			limit=spec.limit,
			count=len(prices),
			increases=stats.price_increases,
			decreases=stats.price_decreases,
		)

		return MarketPriceResponse(
			prices=prices,
			grouped_prices=group_by_commodity(prices),
			market_stats=MarketStats(
				total_crops=stats.total_crops,
				price_increases=stats.price_increases,
				price_decreases=stats.price_decreases,
				avg_price=stats.avg_price,
				highest_price=stats.highest_price,
				lowest_price=stats.lowest_price,
			),
			filters=MarketPriceFiltersEcho(
				commodity=filters.commodity,
				state=filters.state,
				district=filters.district,
				limit=spec.limit,
			),
			last_updated=datetime.now(UTC),
		)
