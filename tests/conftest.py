"""Shared pytest fixtures: async test client, fake session, fake repository."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import date
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.auth.dependencies import Identity, get_current_identity
from app.auth.jwt import create_access_token
from app.database import get_db
from app.main import app
from app.models.base import Base
from app.models.enums import UserRoleEnum
from app.services.repository import QuerySpec, get_repository


class FakeAsyncSession:
    """Records added rows and hands out sequential ids on flush."""

    def __init__(self) -> None:
        self.added: list[Any] = []
        self._next_id = 1
        self.commit = AsyncMock()
        self.rollback = AsyncMock()
        self.close = AsyncMock()
        self.execute = AsyncMock()
        self.refresh = AsyncMock()
        self.add = MagicMock(side_effect=self.added.append)
        self.add_all = MagicMock(side_effect=self.added.extend)
        self.flush = AsyncMock(side_effect=self._flush)

    async def _flush(self) -> None:
        for row in self.added:
            if getattr(row, "id", None) is None:
                row.id = self._next_id
                self._next_id += 1


class FakeRepository:
    """In-memory repository returning canned rows and recording each query."""

    def __init__(self, rows: list[Any] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[type[Base], QuerySpec]] = []

    async def query(self, entity: type[Base], spec: QuerySpec) -> list[Any]:
        self.calls.append((entity, spec))
        if self.error is not None:
            raise self.error
        return list(self.rows)


class FakeRedis:
    def __init__(self) -> None:
        self._counter: dict[str, int] = {}
        self.incr = AsyncMock(side_effect=self._incr)
        self.expire = AsyncMock(return_value=True)
        self.ping = AsyncMock(return_value=True)

    async def _incr(self, key: str) -> int:
        value = self._counter.get(key, 0) + 1
        self._counter[key] = value
        return value


def make_price(**overrides: Any) -> SimpleNamespace:
    values: dict[str, Any] = {
        "id": 1,
        "commodity": "Onion",
        "commodity_code": None,
        "variety": None,
        "grade": None,
        "market_name": "Lasalgaon",
        "state": "Maharashtra",
        "district": "Nashik",
        "arrival_date": date(2024, 3, 1),
        "min_price": None,
        "max_price": None,
        "modal_price": None,
        "unit": "quintal",
        "source": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def make_district_stat(**overrides: Any) -> SimpleNamespace:
    values: dict[str, Any] = {
        "id": 1,
        "state": "Maharashtra",
        "district": "Pune",
        "taluka": None,
        "crop": "Wheat",
        "season": None,
        "recorded_year": 2023,
        "area_ha": None,
        "production_mt": None,
        "yield_mt_per_ha": None,
        "rainfall_mm": None,
        "irrigation_coverage_percent": None,
        "horticulture_area_ha": None,
        "medicinal_plants_area_ha": None,
        "source": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@asynccontextmanager
async def _noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
    yield


@asynccontextmanager
async def _test_client() -> AsyncGenerator[AsyncClient, None]:
    original_lifespan = app.router.lifespan_context
    app.router.lifespan_context = _noop_lifespan
    app.state.redis = None

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.router.lifespan_context = original_lifespan
        app.dependency_overrides.clear()


@pytest.fixture
def fake_db_session() -> FakeAsyncSession:
    """A lightweight async-session stub for dependency overrides in API tests."""
    return FakeAsyncSession()


@pytest.fixture
def fake_repository() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def identity() -> Identity:
    return Identity(subject="user_admin_1", role=UserRoleEnum.admin)


@pytest.fixture
async def client(
    fake_db_session: FakeAsyncSession,
    fake_repository: FakeRepository,
    identity: Identity,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async client with lifespan disabled and DB, repository and identity mocked."""

    async def override_get_db() -> AsyncGenerator[Any, None]:
        yield fake_db_session

    async def override_repository() -> FakeRepository:
        return fake_repository

    async def override_identity() -> Identity:
        return identity

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_repository] = override_repository
    app.dependency_overrides[get_current_identity] = override_identity

    async with _test_client() as test_client:
        yield test_client


@pytest.fixture
async def auth_client(fake_db_session: FakeAsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async client with DB override only (real auth dependencies active)."""

    async def override_get_db() -> AsyncGenerator[Any, None]:
        yield fake_db_session

    app.dependency_overrides[get_db] = override_get_db

    async with _test_client() as test_client:
        yield test_client


@pytest.fixture
def access_token() -> str:
    return create_access_token("user_farmer_1", expires_minutes=30)


@pytest.fixture
def admin_token() -> str:
    return create_access_token("user_admin_1", role=UserRoleEnum.admin, expires_minutes=30)
