"""Batch ingestion of market prices, district statistics and weather records.

A batch is validated in full before anything is written; one invalid
record rejects the whole batch.  Valid batches are inserted inside the
caller's transaction, so a failed flush leaves nothing behind.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import RecordValidationError, RepositoryError
from app.models.base import Base
from app.models.market import MarketPrice
from app.models.regional import DistrictStatistic
from app.models.weather import WeatherRecord
from app.schemas.ingest import IngestReceipt
from app.schemas.market import MarketPriceIn
from app.schemas.regional import DistrictStatisticIn
from app.schemas.weather import WeatherRecordIn

SchemaT = TypeVar("SchemaT", bound=BaseModel)

logger = structlog.get_logger("agrismart.ingest")


def validate_batch(
	schema: type[SchemaT],
	records: Sequence[SchemaT | Mapping[str, Any]],
) -> list[SchemaT]:
	"""Validate every record, reporting all violations keyed by batch index."""
	if not records:
		raise RecordValidationError(
			[{"field": "records", "constraint": "too_short", "message": "batch must not be empty"}]
		)

	validated: list[SchemaT] = []
	errors: list[dict[str, Any]] = []
	for index, record in enumerate(records):
		if isinstance(record, schema):
			validated.append(record)
			continue
		try:
			validated.append(schema.model_validate(record))
		except ValidationError as exc:
			errors.extend(RecordValidationError.from_pydantic(exc, prefix=("records", index)).errors)

	if errors:
		raise RecordValidationError(errors)
	return validated


class IngestService:
	def __init__(self, db: AsyncSession):
		self.db = db

	async def ingest_market_prices(
		self, records: Sequence[MarketPriceIn | Mapping[str, Any]]
	) -> IngestReceipt:
		items = validate_batch(MarketPriceIn, records)
		rows = [MarketPrice(**item.model_dump()) for item in items]
		return await self._persist("market_prices", rows)

	async def ingest_district_stats(
		self, records: Sequence[DistrictStatisticIn | Mapping[str, Any]]
	) -> IngestReceipt:
		items = validate_batch(DistrictStatisticIn, records)
		rows = [DistrictStatistic(**item.model_dump()) for item in items]
		return await self._persist("district_statistics", rows)

	async def ingest_weather(
		self, records: Sequence[WeatherRecordIn | Mapping[str, Any]]
	) -> IngestReceipt:
		items = validate_batch(WeatherRecordIn, records)
		rows = [WeatherRecord(**item.model_dump()) for item in items]
		return await self._persist("weather_records", rows)

	async def _persist(self, dataset: str, rows: list[Base]) -> IngestReceipt:
		try:
			self.db.add_all(rows)
			await self.db.flush()
		except SQLAlchemyError as exc:
			logger.error("ingest_failed", dataset=dataset, batch_size=len(rows), error=str(exc))
			raise RepositoryError(f"failed to store {dataset} batch") from exc

		record_ids = [row.id for row in rows]
		logger.info("ingest_batch_stored", dataset=dataset, inserted_count=len(rows))
		return IngestReceipt(
			dataset=dataset,
			status="ok",
			inserted_count=len(rows),
			record_ids=record_ids,
			ingested_at=datetime.now(UTC),
		)
