from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient
from jose import jwt

from conftest import FakeRedis

from app.auth.dependencies import identity_from_token
from app.auth.jwt import NotAuthenticated, create_access_token, decode_token
from app.config import get_settings
from app.main import app
from app.models.enums import UserRoleEnum
from app.services.farmer_service import FarmerService


def _signed(claims: dict[str, object]) -> str:
    settings = get_settings()
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def test_jwt_create_decode_roundtrip() -> None:
    token = create_access_token("user_2abc", role=UserRoleEnum.admin, expires_minutes=5)
    payload = decode_token(token)
    assert payload["sub"] == "user_2abc"
    assert payload["role"] == "admin"
    assert payload["typ"] == "access"


def test_identity_defaults_to_farmer_role() -> None:
    now = datetime.now(UTC)
    token = _signed({"sub": "user_2abc", "exp": int((now + timedelta(minutes=5)).timestamp())})
    identity = identity_from_token(token)
    assert identity.subject == "user_2abc"
    assert identity.role is UserRoleEnum.farmer


def test_decode_invalid_token_raises() -> None:
    with pytest.raises(NotAuthenticated) as exc_info:
        decode_token("invalid.token.payload")
    assert exc_info.value.code == "token_invalid"


def test_expired_token_rejected() -> None:
    now = datetime.now(UTC)
    token = _signed({"sub": "user_2abc", "exp": int((now - timedelta(minutes=1)).timestamp())})
    with pytest.raises(NotAuthenticated):
        decode_token(token)


def test_unknown_role_rejected() -> None:
    now = datetime.now(UTC)
    token = _signed(
        {"sub": "user_2abc", "role": "superuser", "exp": int((now + timedelta(minutes=5)).timestamp())}
    )
    with pytest.raises(NotAuthenticated) as exc_info:
        identity_from_token(token)
    assert exc_info.value.code == "role_invalid"


@pytest.mark.asyncio
async def test_missing_token_rejected_on_profile(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/profile")
    assert response.status_code == 401
    assert response.json()["detail"]["error"] == "auth_required"


@pytest.mark.asyncio
async def test_garbage_token_rejected_on_profile(auth_client: AsyncClient) -> None:
    response = await auth_client.get("/api/v1/profile", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401
    assert response.json()["detail"]["error"] == "token_invalid"


@pytest.mark.asyncio
async def test_valid_token_reaches_service_with_subject(
    auth_client: AsyncClient,
    access_token: str,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen: list[str] = []

    async def fake_get_profile(self: FarmerService) -> object:
        seen.append(self.user_id)
        raise LookupError("Farmer profile not found")

    monkeypatch.setattr(FarmerService, "get_profile", fake_get_profile)

    response = await auth_client.get("/api/v1/profile", headers={"Authorization": f"Bearer {access_token}"})

    assert response.status_code == 404
    assert seen == ["user_farmer_1"]


@pytest.mark.asyncio
async def test_public_analytics_need_no_token(auth_client: AsyncClient) -> None:
    response = await auth_client.post(
        "/api/v1/soil/score",
        json={"ph": 6.5, "nitrogen": 300, "phosphorus": 40, "potassium": 200},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_rate_limit_per_identity(
    fake_redis: FakeRedis,
    client: AsyncClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    @dataclass
    class _SettingsStub:
        rate_limit_per_minute: int = 1

    monkeypatch.setattr("app.middleware.rate_limit.get_settings", lambda: _SettingsStub())
    app.state.redis = fake_redis

    payload = {"ph": 6.5, "nitrogen": 300, "phosphorus": 40, "potassium": 200}
    first = await client.post("/api/v1/soil/score", json=payload)
    second = await client.post("/api/v1/soil/score", json=payload)
    health = await client.get("/health")

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json()["detail"]["error"] == "rate_limited"
    assert health.status_code == 200
    fake_redis.expire.assert_awaited_once()
