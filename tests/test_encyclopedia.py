from __future__ import annotations

import uuid
from types import SimpleNamespace
from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy.dialects import postgresql

from conftest import FakeRepository

from app.config import Settings
from app.errors import RepositoryError
from app.models.encyclopedia import EncyclopediaEntry
from app.models.enums import SeasonEnum
from app.services.query_filters import EncyclopediaFilters
from app.services.repository import SortDirection, build_select


def _entry(**overrides: Any) -> SimpleNamespace:
    values: dict[str, Any] = {
        "id": uuid.uuid4(),
        "crop_name": "Wheat",
        "description": "A major cereal crop.",
        "planting_season": SeasonEnum.rabi,
        "fertilizer_needs": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.mark.asyncio
async def test_encyclopedia_endpoint(client: AsyncClient, fake_repository: FakeRepository) -> None:
    fake_repository.rows = [
        _entry(crop_name="Rice", planting_season=SeasonEnum.kharif, fertilizer_needs={"n_kg_ha": 120}),
        _entry(),
    ]

    response = await client.get("/api/v1/encyclopedia", params={"crop": " ri ", "season": "kharif"})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert body["entries"][0]["crop_name"] == "Rice"
    assert body["entries"][0]["planting_season"] == "kharif"
    assert body["entries"][0]["fertilizer_needs"] == {"n_kg_ha": 120}
    assert body["filters"] == {"crop": "ri", "season": "kharif", "limit": 100}

    entity, spec = fake_repository.calls[0]
    assert entity is EncyclopediaEntry
    assert spec.text_filters == {"crop_name": "ri"}
    assert spec.exact_filters == {"planting_season": SeasonEnum.kharif}
    assert spec.order_by == (("crop_name", SortDirection.asc),)


@pytest.mark.asyncio
async def test_encyclopedia_is_public(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/encyclopedia", params={"crop": "saffron"})

    assert response.status_code == 200
    assert response.json()["entries"] == []


@pytest.mark.asyncio
async def test_encyclopedia_rejects_unknown_season(client: AsyncClient) -> None:
    response = await client.get("/api/v1/encyclopedia", params={"season": "spring"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_encyclopedia_store_failure_maps_to_503(
    client: AsyncClient,
    fake_repository: FakeRepository,
) -> None:
    fake_repository.error = RepositoryError("failed to read encyclopedia")

    response = await client.get("/api/v1/encyclopedia")

    assert response.status_code == 503


def test_encyclopedia_filters_blank_crop_and_clamped_limit() -> None:
    settings = Settings(query_limit_ceiling=10)
    spec = EncyclopediaFilters(crop="   ", limit=500).to_query_spec(settings)

    assert spec.text_filters == {}
    assert spec.exact_filters == {}
    assert spec.limit == 10


def test_encyclopedia_crop_filter_escapes_wildcards() -> None:
    spec = EncyclopediaFilters(crop="100%").to_query_spec(Settings())
    compiled = build_select(EncyclopediaEntry, spec).compile(dialect=postgresql.dialect())

    assert "%100\\%%" in compiled.params.values()
