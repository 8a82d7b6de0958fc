"""Public crop encyclopedia: one reference entry per crop."""

from __future__ import annotations

from typing import Any

from sqlalchemy import String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, pg_enum
from app.models.enums import SeasonEnum


class EncyclopediaEntry(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Description, planting season and fertilizer needs of a crop.

    ``fertilizer_needs`` is free-form JSON (for example N/P/K in kg/ha).
    """

    __tablename__ = "encyclopedia"

    crop_name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    planting_season: Mapped[SeasonEnum | None] = mapped_column(
        pg_enum(SeasonEnum, "season"), nullable=True
    )
    fertilizer_needs: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)

    def __repr__(self) -> str:
        return f"<EncyclopediaEntry crop={self.crop_name!r} season={self.planting_season}>"
