"""FastAPI application entrypoint: lifespan, routers, middleware."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.asyncio import Redis
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.database import engine
from app.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from app.middleware.rate_limit import RateLimitMiddleware
from app.routes import encyclopedia, farmers, ingest, market, regional, soil

SERVICE_NAME = "agrismart"
SERVICE_VERSION = "0.1.0"

logger = structlog.get_logger("agrismart")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Verify the database answers
      3. Connect to Redis (rate limiting runs without it)

    Shutdown:
      1. Close Redis connection pool
      2. Dispose SQLAlchemy engine
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "agrismart_starting",
        log_level=settings.log_level,
        missing_value_policy=settings.regional_missing_value_policy.value,
        query_limit_ceiling=settings.query_limit_ceiling,
    )

    async with engine.connect() as connection:
        await connection.execute(text("SELECT 1"))

    redis: Redis | None = Redis.from_url(settings.redis_url, decode_responses=True)
    try:
        await redis.ping()
    except RedisError as exc:
        logger.warning("redis_unavailable", error=str(exc))
        await redis.aclose()
        redis = None
    app.state.redis = redis

    yield

    logger.info("agrismart_shutting_down")
    if redis is not None:
        await redis.aclose()
    await engine.dispose()


async def _run_readiness_checks(app: FastAPI) -> dict[str, dict[str, Any]]:
    checks: dict[str, dict[str, Any]] = {}

    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
        checks["database"] = {"ok": True, "message": "ok"}
    except SQLAlchemyError as exc:
        checks["database"] = {"ok": False, "message": str(exc)}

    redis = getattr(app.state, "redis", None)
    if redis is None:
        checks["redis"] = {"ok": False, "message": "not connected"}
    else:
        try:
            await redis.ping()
            checks["redis"] = {"ok": True, "message": "ok"}
        except RedisError as exc:
            checks["redis"] = {"ok": False, "message": str(exc)}

    return checks


app = FastAPI(
    title="AgriSmart API",
    description=(
        "Agricultural statistics API: district crop statistics with regional "
        "aggregates, mandi market prices with trend classification, soil health "
        "scoring, a crop encyclopedia, and farmer-owned field and crop-cycle records."
    ),
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check: verifies the API process is alive."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@app.get("/health/ready", tags=["system"])
async def readiness_check() -> JSONResponse:
    """Readiness: database and Redis reachability."""
    checks = await _run_readiness_checks(app)
    ready = all(check["ok"] for check in checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"status": "ok" if ready else "degraded", "checks": checks},
    )


# ── Router registration ────────────────────────────────────────────────────
app.include_router(regional.router, prefix="/api/v1")
app.include_router(market.router, prefix="/api/v1")
app.include_router(soil.router, prefix="/api/v1")
app.include_router(encyclopedia.router, prefix="/api/v1")
app.include_router(ingest.router, prefix="/api/v1")
app.include_router(farmers.router, prefix="/api/v1")
