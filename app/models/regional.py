"""District / taluka crop statistics.

Every measure is independently optional; rows come from published district
reports where a column is frequently blank.  Aggregation decides how a
blank measure counts (see ``MissingValuePolicy``), the table only stores
what was reported.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import AppendOnlyMixin, Base, pg_enum
from app.models.enums import SeasonEnum


class DistrictStatistic(Base, AppendOnlyMixin):
    """Area / production / yield / rainfall figures for a district (and crop)."""

    __tablename__ = "district_statistics"
    __table_args__ = (
        CheckConstraint(
            "irrigation_coverage_percent IS NULL "
            "OR (irrigation_coverage_percent >= 0 AND irrigation_coverage_percent <= 100)",
            name="ck_district_statistics_irrigation_pct",
        ),
        CheckConstraint(
            "recorded_year IS NULL OR (recorded_year >= 1000 AND recorded_year <= 9999)",
            name="ck_district_statistics_year",
        ),
        Index("ix_district_statistics_district", "district"),
        Index("ix_district_statistics_crop", "crop"),
        Index("ix_district_statistics_year_district", "recorded_year", "district"),
    )

    state: Mapped[str] = mapped_column(String(100), nullable=False)
    district: Mapped[str] = mapped_column(String(100), nullable=False)
    taluka: Mapped[str | None] = mapped_column(String(100), nullable=True)
    crop: Mapped[str | None] = mapped_column(String(120), nullable=True)
    season: Mapped[SeasonEnum | None] = mapped_column(
        pg_enum(SeasonEnum, "season"), nullable=True
    )
    recorded_year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    area_ha: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    production_mt: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    yield_mt_per_ha: Mapped[Decimal | None] = mapped_column(Numeric(10, 3), nullable=True)
    rainfall_mm: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    irrigation_coverage_percent: Mapped[Decimal | None] = mapped_column(
        Numeric(5, 2), nullable=True
    )
    horticulture_area_ha: Mapped[Decimal | None] = mapped_column(
        Numeric(14, 2), nullable=True
    )
    medicinal_plants_area_ha: Mapped[Decimal | None] = mapped_column(
        Numeric(14, 2), nullable=True
    )
    source: Mapped[str | None] = mapped_column(String(200), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<DistrictStatistic id={self.id} district={self.district!r} "
            f"crop={self.crop!r} year={self.recorded_year}>"
        )
