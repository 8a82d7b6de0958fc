"""Farmer-owned profile, field and crop-cycle routes."""

from __future__ import annotations

import uuid

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import Identity, get_current_identity
from app.database import get_db
from app.errors import RepositoryError
from app.schemas.farmer import (
	CropCycleCreate,
	CropCycleListRead,
	CropCycleRead,
	CropCycleUpdate,
	FarmerProfileRead,
	FarmerProfileUpsert,
	FieldCreate,
	FieldListRead,
	FieldRead,
)
from app.services.farmer_service import FarmerService

router = APIRouter(tags=["farmers"])

logger = structlog.get_logger("agrismart.routes.farmers")


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, RepositoryError):
		return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	logger.exception("farmer_request_failed")
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="farmer data failure")


def get_farmer_service(
	db: AsyncSession = Depends(get_db),
	identity: Identity = Depends(get_current_identity),
) -> FarmerService:
	return FarmerService(db, identity.subject)


# ── Profile ─────────────────────────────────────────────────────────────────


@router.get("/profile", response_model=FarmerProfileRead)
async def get_profile(service: FarmerService = Depends(get_farmer_service)) -> FarmerProfileRead:
	try:
		profile = await service.get_profile()
	except Exception as exc:
		raise _map_error(exc) from exc
	return FarmerProfileRead.model_validate(profile)


@router.put("/profile", response_model=FarmerProfileRead)
async def upsert_profile(
	payload: FarmerProfileUpsert,
	service: FarmerService = Depends(get_farmer_service),
) -> FarmerProfileRead:
	try:
		profile = await service.upsert_profile(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return FarmerProfileRead.model_validate(profile)


# ── Fields ──────────────────────────────────────────────────────────────────


@router.get("/fields", response_model=FieldListRead)
async def list_fields(service: FarmerService = Depends(get_farmer_service)) -> FieldListRead:
	try:
		fields = await service.list_fields()
	except Exception as exc:
		raise _map_error(exc) from exc
	return FieldListRead(items=[FieldRead.model_validate(field) for field in fields])


@router.post("/fields", response_model=FieldRead, status_code=status.HTTP_201_CREATED)
async def create_field(
	payload: FieldCreate,
	service: FarmerService = Depends(get_farmer_service),
) -> FieldRead:
	try:
		field = await service.create_field(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return FieldRead.model_validate(field)


# ── Crop cycles ─────────────────────────────────────────────────────────────


@router.get("/fields/{field_id}/crop-cycles", response_model=CropCycleListRead)
async def list_crop_cycles(
	field_id: uuid.UUID,
	service: FarmerService = Depends(get_farmer_service),
) -> CropCycleListRead:
	try:
		cycles = await service.list_crop_cycles(field_id)
	except Exception as exc:
		raise _map_error(exc) from exc
	return CropCycleListRead(items=[CropCycleRead.model_validate(cycle) for cycle in cycles])


@router.post(
	"/fields/{field_id}/crop-cycles",
	response_model=CropCycleRead,
	status_code=status.HTTP_201_CREATED,
)
async def create_crop_cycle(
	field_id: uuid.UUID,
	payload: CropCycleCreate,
	service: FarmerService = Depends(get_farmer_service),
) -> CropCycleRead:
	try:
		cycle = await service.create_crop_cycle(field_id, payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return CropCycleRead.model_validate(cycle)


@router.patch("/crop-cycles/{cycle_id}", response_model=CropCycleRead)
async def update_crop_cycle(
	cycle_id: uuid.UUID,
	payload: CropCycleUpdate,
	service: FarmerService = Depends(get_farmer_service),
) -> CropCycleRead:
	try:
		cycle = await service.update_crop_cycle(cycle_id, payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return CropCycleRead.model_validate(cycle)
