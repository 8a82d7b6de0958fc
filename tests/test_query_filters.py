from __future__ import annotations

from sqlalchemy.dialects import postgresql

from app.config import Settings
from app.models.market import MarketPrice
from app.models.regional import DistrictStatistic
from app.services.query_filters import MarketPriceFilters, RegionalStatsFilters, effective_limit
from app.services.repository import QuerySpec, SortDirection, build_select, escape_like


def _sql(entity, spec: QuerySpec) -> str:
    return str(build_select(entity, spec).compile(dialect=postgresql.dialect()))


def test_blank_filters_impose_no_constraint() -> None:
    spec = RegionalStatsFilters(state="  ", district="", crop=None).to_query_spec(Settings())
    assert spec.text_filters == {}
    assert spec.exact_filters == {}
    assert spec.limit == 100


def test_regional_filters_build_query_spec() -> None:
    spec = RegionalStatsFilters(district=" pune ", crop="wheat", year=2023).to_query_spec(Settings())
    assert spec.text_filters == {"district": "pune", "crop": "wheat"}
    assert spec.exact_filters == {"recorded_year": 2023}
    assert spec.order_by[0] == ("recorded_year", SortDirection.desc)
    assert spec.order_by[1] == ("district", SortDirection.asc)


def test_market_default_limit_and_order() -> None:
    spec = MarketPriceFilters(commodity="onion").to_query_spec(Settings())
    assert spec.limit == 50
    assert spec.order_by == (("arrival_date", SortDirection.desc), ("id", SortDirection.desc))


def test_limit_is_clamped_to_ceiling() -> None:
    settings = Settings(query_limit_ceiling=500)
    assert effective_limit(10_000, 100, settings) == 500
    assert effective_limit(20, 100, settings) == 20
    assert effective_limit(None, 100, settings) == 100
    assert MarketPriceFilters(limit=5000).to_query_spec(settings).limit == 500


def test_escape_like_makes_wildcards_literal() -> None:
    assert escape_like("50%_off") == "50\\%\\_off"
    assert escape_like("a\\b") == "a\\\\b"


def test_regional_select_uses_ilike_exact_year_and_ordering() -> None:
    spec = RegionalStatsFilters(district="pune", year=2023, limit=10).to_query_spec(Settings())
    sql = _sql(DistrictStatistic, spec)
    assert "district_statistics.district ILIKE" in sql
    assert "district_statistics.recorded_year = " in sql
    assert "ORDER BY district_statistics.recorded_year DESC NULLS LAST, district_statistics.district ASC NULLS LAST" in sql
    assert "LIMIT" in sql


def test_market_select_orders_most_recent_first() -> None:
    spec = MarketPriceFilters(state="maha").to_query_spec(Settings())
    sql = _sql(MarketPrice, spec)
    assert "market_prices.state ILIKE" in sql
    assert "ORDER BY market_prices.arrival_date DESC NULLS LAST, market_prices.id DESC NULLS LAST" in sql


def test_ilike_parameter_is_wrapped_and_escaped() -> None:
    spec = MarketPriceFilters(commodity="50%").to_query_spec(Settings())
    compiled = build_select(MarketPrice, spec).compile(dialect=postgresql.dialect())
    assert "%50\\%%" in compiled.params.values()
