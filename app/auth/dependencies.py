"""Authentication dependencies: get_current_identity, require_role."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer

from app.auth.jwt import NotAuthenticated, decode_token
from app.models.enums import UserRoleEnum

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True)
class Identity:
	subject: str
	role: UserRoleEnum = UserRoleEnum.farmer


def _raise_auth(exc: NotAuthenticated) -> HTTPException:
	return HTTPException(
		status_code=exc.status_code,
		detail={"error": exc.code, "message": exc.detail},
		headers={"WWW-Authenticate": "Bearer"},
	)


def identity_from_token(token: str) -> Identity:
	payload = decode_token(token)
	try:
		role = UserRoleEnum(payload.get("role", UserRoleEnum.farmer.value))
	except ValueError as exc:
		raise NotAuthenticated(code="role_invalid", detail="Token role is not recognised") from exc
	return Identity(subject=payload["sub"], role=role)


def extract_identity_hint(request: Request) -> str:
	"""Rate-limit key: token subject when decodable, else the client host."""
	auth_header = request.headers.get("authorization", "")
	if auth_header.lower().startswith("bearer "):
		try:
			return f"sub:{identity_from_token(auth_header[7:].strip()).subject}"
		except NotAuthenticated:
			pass
	host = request.client.host if request.client is not None else "unknown"
	return f"ip:{host}"


async def get_current_identity(request: Request) -> Identity:
	credentials = await bearer_scheme(request)
	if credentials is None or credentials.scheme.lower() != "bearer":
		raise _raise_auth(NotAuthenticated(code="auth_required", detail="Bearer token is required"))
	try:
		return identity_from_token(credentials.credentials)
	except NotAuthenticated as exc:
		raise _raise_auth(exc) from exc


def require_role(*allowed: UserRoleEnum) -> Callable[[Identity], Identity]:
	allowed_set = set(allowed)

	async def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
		if identity.role not in allowed_set:
			raise HTTPException(
				status_code=status.HTTP_403_FORBIDDEN,
				detail={"error": "forbidden", "message": "Insufficient role"},
			)
		return identity

	return dependency
