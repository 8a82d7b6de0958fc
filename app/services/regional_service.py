"""District / crop statistics query: filter, then aggregate in memory."""

from __future__ import annotations

import structlog

from app.analytics.aggregate import RegionalAggregates, aggregate_by_district, aggregate_regional
from app.config import Settings, get_settings
from app.models.regional import DistrictStatistic
from app.schemas.regional import (
	DistrictStatisticRead,
	RegionalAggregatesRead,
	RegionalFiltersEcho,
	RegionalStatsResponse,
)
from app.services.query_filters import RegionalStatsFilters
from app.services.repository import Repository

logger = structlog.get_logger("agrismart.regional")


def _to_read(aggregates: RegionalAggregates) -> RegionalAggregatesRead:
	return RegionalAggregatesRead(
		total_area=aggregates.total_area,
		total_production=aggregates.total_production,
		avg_yield=aggregates.avg_yield,
		avg_rainfall=aggregates.avg_rainfall,
		avg_irrigation_coverage=aggregates.avg_irrigation_coverage,
		record_count=aggregates.record_count,
	)


class RegionalStatsService:
	def __init__(self, repository: Repository, settings: Settings | None = None):
		self.repository = repository
		self.settings = settings or get_settings()

	async def query(self, filters: RegionalStatsFilters) -> RegionalStatsResponse:
		spec = filters.to_query_spec(self.settings)
		records = await self.repository.query(DistrictStatistic, spec)

		policy = self.settings.regional_missing_value_policy
		aggregates = aggregate_regional(records, policy)
		by_district = aggregate_by_district(records, policy)

		logger.info(
			"regional_stats_query",
			filters=dict(spec.text_filters),
			year=filters.year,
			limit=spec.limit,
			count=len(records),
		)

		return RegionalStatsResponse(
			stats=[DistrictStatisticRead.model_validate(record) for record in records],
			aggregates=_to_read(aggregates) if aggregates is not None else None,
			by_district={district: _to_read(value) for district, value in by_district.items()},
			count=len(records),
			filters=RegionalFiltersEcho(
				state=filters.state,
				district=filters.district,
				taluka=filters.taluka,
				crop=filters.crop,
				year=filters.year,
				limit=spec.limit,
			),
		)
