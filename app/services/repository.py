"""Read-side repository contract over the relational store.

Services describe *what* to read with a ``QuerySpec``; the repository turns
it into one SELECT.  Any driver or SQL failure surfaces as
``RepositoryError`` and is never retried here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

import structlog
from fastapi import Depends
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.errors import RepositoryError
from app.models.base import Base

logger = structlog.get_logger("agrismart.repository")


class SortDirection(StrEnum):
	asc = "asc"
	desc = "desc"


@dataclass(frozen=True, slots=True)
class QuerySpec:
	text_filters: Mapping[str, str] = field(default_factory=dict)
	exact_filters: Mapping[str, Any] = field(default_factory=dict)
	order_by: Sequence[tuple[str, SortDirection]] = ()
	limit: int | None = None


class Repository(Protocol):
	async def query(self, entity: type[Base], spec: QuerySpec) -> list[Any]: ...


def escape_like(value: str) -> str:
	"""Escape LIKE wildcards so user text matches literally."""
	return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_select(entity: type[Base], spec: QuerySpec) -> Select[Any]:
	stmt = select(entity)

	for name, value in spec.text_filters.items():
		column = getattr(entity, name)
		stmt = stmt.where(column.ilike(f"%{escape_like(value)}%", escape="\\"))

	for name, value in spec.exact_filters.items():
		stmt = stmt.where(getattr(entity, name) == value)

	for name, direction in spec.order_by:
		column = getattr(entity, name)
		if direction == SortDirection.desc:
			stmt = stmt.order_by(column.desc().nulls_last())
		else:
			stmt = stmt.order_by(column.asc().nulls_last())

	if spec.limit is not None:
		stmt = stmt.limit(spec.limit)
	return stmt


class SqlAlchemyRepository:
	"""``Repository`` backed by the request's ``AsyncSession``."""

	def __init__(self, db: AsyncSession):
		self.db = db

	async def query(self, entity: type[Base], spec: QuerySpec) -> list[Any]:
		stmt = build_select(entity, spec)
		try:
			rows = await self.db.execute(stmt)
		except SQLAlchemyError as exc:
			logger.error("repository_query_failed", entity=entity.__tablename__, error=str(exc))
			raise RepositoryError(f"failed to read {entity.__tablename__}") from exc
		return list(rows.scalars().all())


async def get_repository(db: AsyncSession = Depends(get_db)) -> Repository:
	return SqlAlchemyRepository(db)
