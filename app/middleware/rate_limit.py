"""Redis fixed-window rate limiting for the versioned API."""

from __future__ import annotations

from datetime import UTC, datetime

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from starlette.middleware.base import BaseHTTPMiddleware

from app.auth.dependencies import extract_identity_hint
from app.config import get_settings

API_PREFIX = "/api/v1"
WINDOW_TTL_SECONDS = 65

logger = structlog.get_logger("agrismart.rate_limit")


class RateLimitMiddleware(BaseHTTPMiddleware):
	"""Per-identity, per-minute request quota; inactive without Redis."""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		if not request.url.path.startswith(API_PREFIX):
			return await call_next(request)

		redis_client = getattr(request.app.state, "redis", None)
		if redis_client is None:
			return await call_next(request)

		quota = get_settings().rate_limit_per_minute
		identity = extract_identity_hint(request)
		minute_bucket = datetime.now(UTC).strftime("%Y%m%d%H%M")
		key = f"ratelimit:{identity}:{minute_bucket}"

		try:
			current = await redis_client.incr(key)
			if current == 1:
				await redis_client.expire(key, WINDOW_TTL_SECONDS)
		except RedisError as exc:
			logger.warning("rate_limit_unavailable", error=str(exc))
			return await call_next(request)

		if current > quota:
			logger.info("rate_limited", identity=identity, quota=quota)
			return JSONResponse(
				status_code=429,
				content={
					"detail": {
						"error": "rate_limited",
						"message": "Request quota exceeded",
						"quota": quota,
					}
				},
				headers={"Retry-After": "60"},
			)

		return await call_next(request)
