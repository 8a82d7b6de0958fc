"""Farmer-owned data: profile, fields and crop cycles.

Ownership flows profile → field → crop cycle; every read and write of these
tables is scoped to the identity in ``FarmerProfile.user_id``.

``CropCycle.expected_harvest_date`` is a STORED generated column
(``planting_date + 120``).  The application never assigns it; Python code
that needs the value without a round-trip uses ``expected_harvest_date()``.
"""

from __future__ import annotations

import uuid
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import CheckConstraint, Computed, Date, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, pg_enum
from app.models.enums import (
    CropStatusEnum,
    IrrigationMethodEnum,
    SeasonEnum,
    SoilTypeEnum,
)

HARVEST_OFFSET_DAYS = 120

_PHONE_CHECK = r"phone ~ '^[+]?[0-9\s\-\(\)]{10,20}$'"
_EMAIL_CHECK = r"email ~ '^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$'"


def expected_harvest_date(planting_date: date) -> date:
    """Harvest date derived from a planting date."""
    return planting_date + timedelta(days=HARVEST_OFFSET_DAYS)


# ═══════════════════════════════════════════════════════════════════════════
# FarmerProfile
# ═══════════════════════════════════════════════════════════════════════════


class FarmerProfile(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """One profile per external identity (``user_id`` is the token subject)."""

    __tablename__ = "farmer_profiles"
    __table_args__ = (
        CheckConstraint(f"phone IS NULL OR {_PHONE_CHECK}", name="ck_farmer_profiles_phone"),
        CheckConstraint(f"email IS NULL OR {_EMAIL_CHECK}", name="ck_farmer_profiles_email"),
        CheckConstraint(
            "land_area_ha IS NULL OR (land_area_ha >= 0.01 AND land_area_ha <= 10000)",
            name="ck_farmer_profiles_land_area",
        ),
        CheckConstraint(
            "experience_years IS NULL OR (experience_years >= 0 AND experience_years <= 100)",
            name="ck_farmer_profiles_experience",
        ),
    )

    user_id: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    land_area_ha: Mapped[Decimal | None] = mapped_column(Numeric(8, 2), nullable=True)
    primary_crop: Mapped[str | None] = mapped_column(String(120), nullable=True)
    irrigation_method: Mapped[IrrigationMethodEnum | None] = mapped_column(
        pg_enum(IrrigationMethodEnum, "irrigation_method"), nullable=True
    )
    experience_years: Mapped[int | None] = mapped_column(Integer, nullable=True)
    preferred_language: Mapped[str | None] = mapped_column(String(16), nullable=True)

    # ── Relationships ────────────────────────────────────────────────────
    fields: Mapped[list[FarmField]] = relationship(
        back_populates="farmer",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<FarmerProfile id={self.id} user={self.user_id!r}>"


# ═══════════════════════════════════════════════════════════════════════════
# FarmField
# ═══════════════════════════════════════════════════════════════════════════


class FarmField(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A cultivated plot belonging to a farmer."""

    __tablename__ = "fields"
    __table_args__ = (
        CheckConstraint(
            "area_hectares IS NULL OR (area_hectares >= 0.01 AND area_hectares <= 10000)",
            name="ck_fields_area",
        ),
        Index("ix_fields_farmer_id", "farmer_id"),
        Index("ix_fields_soil_type", "soil_type"),
    )

    farmer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("farmer_profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    field_name: Mapped[str] = mapped_column(String(200), nullable=False)
    area_hectares: Mapped[Decimal | None] = mapped_column(Numeric(8, 2), nullable=True)
    soil_type: Mapped[SoilTypeEnum | None] = mapped_column(
        pg_enum(SoilTypeEnum, "soil_type"), nullable=True
    )
    irrigation_method: Mapped[IrrigationMethodEnum | None] = mapped_column(
        pg_enum(IrrigationMethodEnum, "irrigation_method"), nullable=True
    )
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 8), nullable=True)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(11, 8), nullable=True)

    # ── Relationships ────────────────────────────────────────────────────
    farmer: Mapped[FarmerProfile] = relationship(back_populates="fields")
    crop_cycles: Mapped[list[CropCycle]] = relationship(
        back_populates="field",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<FarmField id={self.id} name={self.field_name!r} farmer={self.farmer_id}>"


# ═══════════════════════════════════════════════════════════════════════════
# CropCycle
# ═══════════════════════════════════════════════════════════════════════════


class CropCycle(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """One planting of a crop on a field, from planning to harvest."""

    __tablename__ = "crop_cycles"
    __table_args__ = (
        Index("ix_crop_cycles_field_id", "field_id"),
        Index("ix_crop_cycles_status", "status"),
        Index("ix_crop_cycles_planting_date", "planting_date"),
    )

    field_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("fields.id", ondelete="CASCADE"),
        nullable=False,
    )
    crop_name: Mapped[str] = mapped_column(String(120), nullable=False)
    planting_date: Mapped[date] = mapped_column(Date, nullable=False)
    expected_harvest_date: Mapped[date] = mapped_column(
        Date,
        Computed(f"planting_date + {HARVEST_OFFSET_DAYS}", persisted=True),
    )
    status: Mapped[CropStatusEnum] = mapped_column(
        pg_enum(CropStatusEnum, "crop_status"),
        nullable=False,
        default=CropStatusEnum.planning,
        server_default=CropStatusEnum.planning.value,
    )
    season: Mapped[SeasonEnum | None] = mapped_column(
        pg_enum(SeasonEnum, "season"), nullable=True
    )

    # ── Relationships ────────────────────────────────────────────────────
    field: Mapped[FarmField] = relationship(back_populates="crop_cycles")

    def __repr__(self) -> str:
        return (
            f"<CropCycle id={self.id} crop={self.crop_name!r} "
            f"planted={self.planting_date} status={self.status}>"
        )
