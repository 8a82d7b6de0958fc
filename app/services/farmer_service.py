"""Farmer profile, field and crop-cycle service scoped to one identity."""

from __future__ import annotations

import uuid
from typing import Any

import structlog
from sqlalchemy import Result, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import RepositoryError
from app.models.base import Base
from app.models.farmer import CropCycle, FarmerProfile, FarmField
from app.schemas.farmer import CropCycleCreate, CropCycleUpdate, FarmerProfileUpsert, FieldCreate

logger = structlog.get_logger("agrismart.farmer")


class FarmerService:
	"""Every lookup joins back to ``FarmerProfile.user_id == user_id``.

	Records owned by another identity are reported as not found.  Storage
	failures surface as ``RepositoryError``.
	"""

	def __init__(self, db: AsyncSession, user_id: str):
		self.db = db
		self.user_id = user_id

	# ── Profile ─────────────────────────────────────────────────────────

	async def get_profile(self) -> FarmerProfile:
		profile = await self._find_profile()
		if profile is None:
			raise LookupError("Farmer profile not found")
		return profile

	async def upsert_profile(self, payload: FarmerProfileUpsert) -> FarmerProfile:
		profile = await self._find_profile()
		values = payload.model_dump()
		if profile is None:
			profile = FarmerProfile(user_id=self.user_id, **values)
			self.db.add(profile)
			logger.info("farmer_profile_created", user_id=self.user_id)
		else:
			for name, value in values.items():
				setattr(profile, name, value)
			logger.info("farmer_profile_updated", user_id=self.user_id)
		await self._write(profile, "farmer_profiles")
		return profile

	# ── Fields ──────────────────────────────────────────────────────────

	async def list_fields(self) -> list[FarmField]:
		stmt = (
			select(FarmField)
			.join(FarmerProfile, FarmField.farmer_id == FarmerProfile.id)
			.where(FarmerProfile.user_id == self.user_id)
			.order_by(FarmField.created_at.asc())
		)
		rows = await self._read(stmt, "fields")
		return list(rows.scalars().all())

	async def create_field(self, payload: FieldCreate) -> FarmField:
		profile = await self.get_profile()
		field = FarmField(farmer_id=profile.id, **payload.model_dump())
		self.db.add(field)
		await self._write(field, "fields")
		return field

	async def get_field(self, field_id: uuid.UUID) -> FarmField:
		stmt = (
			select(FarmField)
			.join(FarmerProfile, FarmField.farmer_id == FarmerProfile.id)
			.where(FarmField.id == field_id, FarmerProfile.user_id == self.user_id)
		)
		row = await self._read(stmt, "fields")
		field = row.scalar_one_or_none()
		if field is None:
			raise LookupError(f"Field {field_id} not found")
		return field

	# ── Crop cycles ─────────────────────────────────────────────────────

	async def list_crop_cycles(self, field_id: uuid.UUID) -> list[CropCycle]:
		field = await self.get_field(field_id)
		stmt = (
			select(CropCycle)
			.where(CropCycle.field_id == field.id)
			.order_by(CropCycle.planting_date.desc())
		)
		rows = await self._read(stmt, "crop_cycles")
		return list(rows.scalars().all())

	async def create_crop_cycle(self, field_id: uuid.UUID, payload: CropCycleCreate) -> CropCycle:
		field = await self.get_field(field_id)
		cycle = CropCycle(field_id=field.id, **payload.model_dump())
		self.db.add(cycle)
		# refresh pulls back the generated harvest date
		await self._write(cycle, "crop_cycles")
		return cycle

	async def update_crop_cycle(self, cycle_id: uuid.UUID, payload: CropCycleUpdate) -> CropCycle:
		cycle = await self._get_crop_cycle(cycle_id)
		changes = payload.model_dump(exclude_unset=True)
		if any(value is None for name, value in changes.items() if name in {"planting_date", "status"}):
			raise ValueError("planting_date and status cannot be cleared")
		for name, value in changes.items():
			setattr(cycle, name, value)
		await self._write(cycle, "crop_cycles")
		return cycle

	async def _get_crop_cycle(self, cycle_id: uuid.UUID) -> CropCycle:
		stmt = (
			select(CropCycle)
			.join(FarmField, CropCycle.field_id == FarmField.id)
			.join(FarmerProfile, FarmField.farmer_id == FarmerProfile.id)
			.where(CropCycle.id == cycle_id, FarmerProfile.user_id == self.user_id)
		)
		row = await self._read(stmt, "crop_cycles")
		cycle = row.scalar_one_or_none()
		if cycle is None:
			raise LookupError(f"Crop cycle {cycle_id} not found")
		return cycle

	async def _find_profile(self) -> FarmerProfile | None:
		stmt = select(FarmerProfile).where(FarmerProfile.user_id == self.user_id)
		row = await self._read(stmt, "farmer_profiles")
		return row.scalar_one_or_none()

	# ── Storage ─────────────────────────────────────────────────────────

	async def _read(self, stmt: Any, table: str) -> Result[Any]:
		try:
			return await self.db.execute(stmt)
		except SQLAlchemyError as exc:
			logger.error("farmer_read_failed", table=table, user_id=self.user_id, error=str(exc))
			raise RepositoryError(f"failed to read {table}") from exc

	async def _write(self, instance: Base, table: str) -> None:
		try:
			await self.db.flush()
			await self.db.refresh(instance)
		except SQLAlchemyError as exc:
			logger.error("farmer_write_failed", table=table, user_id=self.user_id, error=str(exc))
			raise RepositoryError(f"failed to write {table}") from exc
