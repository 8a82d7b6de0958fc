"""initial_schema

Revision ID: 3c1f9a7e2b44
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the six AgriSmart tables, their PostgreSQL enum types, check
constraints and indexes.  ``crop_cycles.expected_harvest_date`` is a STORED
generated column so it can never disagree with ``planting_date``.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3c1f9a7e2b44"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# ── Enum type names (PostgreSQL CREATE TYPE) ────────────────────────────────
ENUM_CROP_STATUS = postgresql.ENUM(
    "planning", "planted", "growing", "harvested", "failed",
    name="crop_status",
    create_type=False,
)
ENUM_SOIL_TYPE = postgresql.ENUM(
    "clay", "sandy", "loamy", "silt", "peaty", "chalky", "black", "red", "alluvial",
    name="soil_type",
    create_type=False,
)
ENUM_IRRIGATION_METHOD = postgresql.ENUM(
    "drip", "sprinkler", "flood", "center_pivot", "manual", "rainfed",
    name="irrigation_method",
    create_type=False,
)
ENUM_SEASON = postgresql.ENUM(
    "kharif", "rabi", "zaid", "summer", "winter", "monsoon",
    name="season",
    create_type=False,
)
ENUM_WEATHER_CONDITION = postgresql.ENUM(
    "clear", "partly-cloudy", "cloudy", "fog", "rain", "snow", "thunderstorm",
    name="weather_condition",
    create_type=False,
)

PHONE_CHECK = r"phone ~ '^[+]?[0-9\s\-\(\)]{10,20}$'"
EMAIL_CHECK = r"email ~ '^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$'"


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def _append_only() -> list[sa.Column]:
    return [
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("ingested_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ── 1. Create enum types ────────────────────────────────────────────
    ENUM_CROP_STATUS.create(op.get_bind(), checkfirst=True)
    ENUM_SOIL_TYPE.create(op.get_bind(), checkfirst=True)
    ENUM_IRRIGATION_METHOD.create(op.get_bind(), checkfirst=True)
    ENUM_SEASON.create(op.get_bind(), checkfirst=True)
    ENUM_WEATHER_CONDITION.create(op.get_bind(), checkfirst=True)

    # ── 2. Farmer-owned tables ──────────────────────────────────────────

    # farmer_profiles
    op.create_table(
        "farmer_profiles",
        _uuid_pk(),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("land_area_ha", sa.Numeric(8, 2), nullable=True),
        sa.Column("primary_crop", sa.String(120), nullable=True),
        sa.Column("irrigation_method", ENUM_IRRIGATION_METHOD, nullable=True),
        sa.Column("experience_years", sa.Integer(), nullable=True),
        sa.Column("preferred_language", sa.String(16), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(f"phone IS NULL OR {PHONE_CHECK}", name="ck_farmer_profiles_phone"),
        sa.CheckConstraint(f"email IS NULL OR {EMAIL_CHECK}", name="ck_farmer_profiles_email"),
        sa.CheckConstraint(
            "land_area_ha IS NULL OR (land_area_ha >= 0.01 AND land_area_ha <= 10000)",
            name="ck_farmer_profiles_land_area",
        ),
        sa.CheckConstraint(
            "experience_years IS NULL OR (experience_years >= 0 AND experience_years <= 100)",
            name="ck_farmer_profiles_experience",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_farmer_profiles_user_id", "farmer_profiles", ["user_id"], unique=True)

    # fields
    op.create_table(
        "fields",
        _uuid_pk(),
        sa.Column("farmer_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("field_name", sa.String(200), nullable=False),
        sa.Column("area_hectares", sa.Numeric(8, 2), nullable=True),
        sa.Column("soil_type", ENUM_SOIL_TYPE, nullable=True),
        sa.Column("irrigation_method", ENUM_IRRIGATION_METHOD, nullable=True),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=True),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "area_hectares IS NULL OR (area_hectares >= 0.01 AND area_hectares <= 10000)",
            name="ck_fields_area",
        ),
        sa.ForeignKeyConstraint(["farmer_id"], ["farmer_profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_fields_farmer_id", "fields", ["farmer_id"])
    op.create_index("ix_fields_soil_type", "fields", ["soil_type"])

    # crop_cycles
    op.create_table(
        "crop_cycles",
        _uuid_pk(),
        sa.Column("field_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("crop_name", sa.String(120), nullable=False),
        sa.Column("planting_date", sa.Date(), nullable=False),
        sa.Column(
            "expected_harvest_date",
            sa.Date(),
            sa.Computed("planting_date + 120", persisted=True),
        ),
        sa.Column(
            "status",
            ENUM_CROP_STATUS,
            server_default=sa.text("'planning'"),
            nullable=False,
        ),
        sa.Column("season", ENUM_SEASON, nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["field_id"], ["fields.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_crop_cycles_field_id", "crop_cycles", ["field_id"])
    op.create_index("ix_crop_cycles_status", "crop_cycles", ["status"])
    op.create_index("ix_crop_cycles_planting_date", "crop_cycles", ["planting_date"])

    # ── 3. Ingested reference tables ────────────────────────────────────

    # market_prices
    op.create_table(
        "market_prices",
        *_append_only(),
        sa.Column("commodity", sa.String(120), nullable=False),
        sa.Column("commodity_code", sa.String(64), nullable=True),
        sa.Column("variety", sa.String(120), nullable=True),
        sa.Column("grade", sa.String(64), nullable=True),
        sa.Column("market_name", sa.String(200), nullable=False),
        sa.Column("state", sa.String(100), nullable=False),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("arrival_date", sa.Date(), nullable=False),
        sa.Column("min_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("max_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("modal_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("unit", sa.String(32), server_default=sa.text("'quintal'"), nullable=False),
        sa.Column("source", sa.String(200), nullable=True),
        sa.CheckConstraint("min_price IS NULL OR min_price > 0", name="ck_market_prices_min_positive"),
        sa.CheckConstraint("max_price IS NULL OR max_price > 0", name="ck_market_prices_max_positive"),
        sa.CheckConstraint("modal_price IS NULL OR modal_price > 0", name="ck_market_prices_modal_positive"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_market_prices_commodity_state_date",
        "market_prices",
        ["commodity", "state", "arrival_date"],
    )
    op.create_index("ix_market_prices_arrival_date", "market_prices", ["arrival_date"])

    # district_statistics
    op.create_table(
        "district_statistics",
        *_append_only(),
        sa.Column("state", sa.String(100), nullable=False),
        sa.Column("district", sa.String(100), nullable=False),
        sa.Column("taluka", sa.String(100), nullable=True),
        sa.Column("crop", sa.String(120), nullable=True),
        sa.Column("season", ENUM_SEASON, nullable=True),
        sa.Column("recorded_year", sa.Integer(), nullable=True),
        sa.Column("area_ha", sa.Numeric(14, 2), nullable=True),
        sa.Column("production_mt", sa.Numeric(14, 2), nullable=True),
        sa.Column("yield_mt_per_ha", sa.Numeric(10, 3), nullable=True),
        sa.Column("rainfall_mm", sa.Numeric(10, 2), nullable=True),
        sa.Column("irrigation_coverage_percent", sa.Numeric(5, 2), nullable=True),
        sa.Column("horticulture_area_ha", sa.Numeric(14, 2), nullable=True),
        sa.Column("medicinal_plants_area_ha", sa.Numeric(14, 2), nullable=True),
        sa.Column("source", sa.String(200), nullable=True),
        sa.CheckConstraint(
            "irrigation_coverage_percent IS NULL "
            "OR (irrigation_coverage_percent >= 0 AND irrigation_coverage_percent <= 100)",
            name="ck_district_statistics_irrigation_pct",
        ),
        sa.CheckConstraint(
            "recorded_year IS NULL OR (recorded_year >= 1000 AND recorded_year <= 9999)",
            name="ck_district_statistics_year",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_district_statistics_district", "district_statistics", ["district"])
    op.create_index("ix_district_statistics_crop", "district_statistics", ["crop"])
    op.create_index(
        "ix_district_statistics_year_district",
        "district_statistics",
        ["recorded_year", "district"],
    )

    # weather_records
    op.create_table(
        "weather_records",
        *_append_only(),
        sa.Column("location", sa.String(200), nullable=False),
        sa.Column("observed_on", sa.Date(), nullable=False),
        sa.Column("temperature", sa.Float(), nullable=True),
        sa.Column("humidity", sa.Float(), nullable=True),
        sa.Column("rainfall_mm", sa.Float(), nullable=True),
        sa.Column("wind_speed", sa.Float(), nullable=True),
        sa.Column("weather_condition", ENUM_WEATHER_CONDITION, nullable=True),
        sa.CheckConstraint(
            "humidity IS NULL OR (humidity >= 0 AND humidity <= 100)",
            name="ck_weather_records_humidity",
        ),
        sa.CheckConstraint("rainfall_mm IS NULL OR rainfall_mm >= 0", name="ck_weather_records_rainfall"),
        sa.CheckConstraint("wind_speed IS NULL OR wind_speed >= 0", name="ck_weather_records_wind"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_weather_records_location_date",
        "weather_records",
        ["location", "observed_on"],
    )


def downgrade() -> None:
    # ── Drop tables in reverse dependency order ─────────────────────────
    op.drop_table("weather_records")
    op.drop_table("district_statistics")
    op.drop_table("market_prices")
    op.drop_table("crop_cycles")
    op.drop_table("fields")
    op.drop_table("farmer_profiles")

    # ── Drop enum types ─────────────────────────────────────────────────
    ENUM_WEATHER_CONDITION.drop(op.get_bind(), checkfirst=True)
    ENUM_SEASON.drop(op.get_bind(), checkfirst=True)
    ENUM_IRRIGATION_METHOD.drop(op.get_bind(), checkfirst=True)
    ENUM_SOIL_TYPE.drop(op.get_bind(), checkfirst=True)
    ENUM_CROP_STATUS.drop(op.get_bind(), checkfirst=True)
