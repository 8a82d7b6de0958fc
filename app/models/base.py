"""ORM base class and mixins: all models inherit from Base."""

import uuid
from datetime import datetime
from enum import StrEnum

from sqlalchemy import BigInteger, DateTime, Enum, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base: shared MetaData registry for all models."""

    pass


class TimestampMixin:
    """Adds created_at / updated_at audit columns for mutable, owned rows."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class UUIDPrimaryKeyMixin:
    """Adds a UUID primary key with both Python and server-side defaults."""

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=func.uuid_generate_v4(),
    )


class AppendOnlyMixin:
    """BIGSERIAL PK + ingestion timestamp for ingested reference tables.

    Price, regional and weather records are written by ingestion and never
    updated in place (a correction is a new row), so there is no
    ``updated_at``.  The BIGSERIAL id doubles as ingestion order and breaks
    ties between records reported for the same date.
    """

    id: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=True,
    )
    ingested_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )


def pg_enum(enum_cls: type[StrEnum], name: str) -> Enum:
    """Native PostgreSQL enum column type persisting member *values*.

    SQLAlchemy stores member names by default; values are used so that
    labels such as ``partly-cloudy`` round-trip unchanged.
    """
    return Enum(
        enum_cls,
        name=name,
        create_constraint=False,
        native_enum=True,
        values_callable=lambda members: [member.value for member in members],
    )
