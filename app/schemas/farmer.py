"""Pydantic request/response schemas for farmer-owned objects."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.models.enums import CropStatusEnum, IrrigationMethodEnum, SeasonEnum, SoilTypeEnum
from app.models.farmer import expected_harvest_date
from app.schemas.types import (
	EmailAddress,
	LandSizeHectares,
	Latitude,
	Longitude,
	NonEmptyText,
	PhoneNumber,
)


class FarmerProfileUpsert(BaseModel):
	model_config = ConfigDict(extra="forbid")

	full_name: NonEmptyText
	phone: PhoneNumber | None = None
	email: EmailAddress | None = None
	state: str | None = Field(default=None, max_length=100)
	district: str | None = Field(default=None, max_length=100)
	land_area_ha: LandSizeHectares | None = None
	primary_crop: str | None = Field(default=None, max_length=120)
	irrigation_method: IrrigationMethodEnum | None = None
	experience_years: int | None = Field(default=None, ge=0, le=100)
	preferred_language: str | None = Field(default=None, max_length=16)


class FarmerProfileRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	user_id: str
	full_name: str
	phone: str | None = None
	email: str | None = None
	state: str | None = None
	district: str | None = None
	land_area_ha: float | None = None
	primary_crop: str | None = None
	irrigation_method: IrrigationMethodEnum | None = None
	experience_years: int | None = None
	preferred_language: str | None = None
	created_at: datetime
	updated_at: datetime


class FieldCreate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	field_name: NonEmptyText
	area_hectares: LandSizeHectares | None = None
	soil_type: SoilTypeEnum | None = None
	irrigation_method: IrrigationMethodEnum | None = None
	latitude: Latitude | None = None
	longitude: Longitude | None = None


class FieldRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	farmer_id: uuid.UUID
	field_name: str
	area_hectares: float | None = None
	soil_type: SoilTypeEnum | None = None
	irrigation_method: IrrigationMethodEnum | None = None
	latitude: float | None = None
	longitude: float | None = None
	created_at: datetime
	updated_at: datetime


class CropCycleCreate(BaseModel):
	"""There is deliberately no harvest date here; it is always derived."""

	model_config = ConfigDict(extra="forbid")

	crop_name: NonEmptyText
	planting_date: date
	status: CropStatusEnum = CropStatusEnum.planning
	season: SeasonEnum | None = None


class CropCycleUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	planting_date: date | None = None
	status: CropStatusEnum | None = None
	season: SeasonEnum | None = None


class CropCycleRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	field_id: uuid.UUID
	crop_name: str
	planting_date: date
	status: CropStatusEnum
	season: SeasonEnum | None = None
	created_at: datetime
	updated_at: datetime

	@computed_field  # type: ignore[prop-decorator]
	@property
	def expected_harvest_date(self) -> date:
		return expected_harvest_date(self.planting_date)


class FieldListRead(BaseModel):
	items: list[FieldRead]


class CropCycleListRead(BaseModel):
	items: list[CropCycleRead]
