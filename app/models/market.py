"""Market price observations, one row per commodity, market and arrival date.

Rows are appended by ingestion and never edited; the trend classifier
compares each row with the nearest older row of the same commodity series,
so reads always come back ordered by ``arrival_date`` descending.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import AppendOnlyMixin, Base


class MarketPrice(Base, AppendOnlyMixin):
    """Mandi price report for a commodity (prices per ``unit``)."""

    __tablename__ = "market_prices"
    __table_args__ = (
        CheckConstraint("min_price IS NULL OR min_price > 0", name="ck_market_prices_min_positive"),
        CheckConstraint("max_price IS NULL OR max_price > 0", name="ck_market_prices_max_positive"),
        CheckConstraint("modal_price IS NULL OR modal_price > 0", name="ck_market_prices_modal_positive"),
        Index("ix_market_prices_commodity_state_date", "commodity", "state", "arrival_date"),
        Index("ix_market_prices_arrival_date", "arrival_date"),
    )

    commodity: Mapped[str] = mapped_column(String(120), nullable=False)
    commodity_code: Mapped[str | None] = mapped_column(String(64), nullable=True)
    variety: Mapped[str | None] = mapped_column(String(120), nullable=True)
    grade: Mapped[str | None] = mapped_column(String(64), nullable=True)
    market_name: Mapped[str] = mapped_column(String(200), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    arrival_date: Mapped[date] = mapped_column(Date, nullable=False)
    min_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    max_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    modal_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    unit: Mapped[str] = mapped_column(
        String(32), nullable=False, default="quintal", server_default="quintal"
    )
    source: Mapped[str | None] = mapped_column(String(200), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<MarketPrice id={self.id} commodity={self.commodity!r} "
            f"market={self.market_name!r} date={self.arrival_date}>"
        )
