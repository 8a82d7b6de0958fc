"""Daily weather observations for a named location."""

from __future__ import annotations

from datetime import date

from sqlalchemy import CheckConstraint, Date, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import AppendOnlyMixin, Base, pg_enum
from app.models.enums import WeatherConditionEnum


class WeatherRecord(Base, AppendOnlyMixin):
    """Temperature, humidity, rainfall, wind and sky condition for one day."""

    __tablename__ = "weather_records"
    __table_args__ = (
        CheckConstraint(
            "humidity IS NULL OR (humidity >= 0 AND humidity <= 100)",
            name="ck_weather_records_humidity",
        ),
        CheckConstraint("rainfall_mm IS NULL OR rainfall_mm >= 0", name="ck_weather_records_rainfall"),
        CheckConstraint("wind_speed IS NULL OR wind_speed >= 0", name="ck_weather_records_wind"),
        Index("ix_weather_records_location_date", "location", "observed_on"),
    )

    location: Mapped[str] = mapped_column(String(200), nullable=False)
    observed_on: Mapped[date] = mapped_column(Date, nullable=False)
    temperature: Mapped[float | None] = mapped_column(Float, nullable=True)
    humidity: Mapped[float | None] = mapped_column(Float, nullable=True)
    rainfall_mm: Mapped[float | None] = mapped_column(Float, nullable=True)
    wind_speed: Mapped[float | None] = mapped_column(Float, nullable=True)
    weather_condition: Mapped[WeatherConditionEnum | None] = mapped_column(
        pg_enum(WeatherConditionEnum, "weather_condition"), nullable=True
    )

    def __repr__(self) -> str:
        return (
            f"<WeatherRecord id={self.id} location={self.location!r} "
            f"date={self.observed_on} condition={self.weather_condition}>"
        )
