"""crop_encyclopedia

Revision ID: 8e5d2c4a7f10
Revises: 3c1f9a7e2b44
Create Date: 2026-10-19 00:00:00.000000

Adds the public ``encyclopedia`` table and seeds the two base entries.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "8e5d2c4a7f10"
down_revision: str | None = "3c1f9a7e2b44"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_SEASON = postgresql.ENUM(
    "kharif", "rabi", "zaid", "summer", "winter", "monsoon",
    name="season",
    create_type=False,
)


def upgrade() -> None:
    encyclopedia = op.create_table(
        "encyclopedia",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("crop_name", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("planting_season", ENUM_SEASON, nullable=True),
        sa.Column("fertilizer_needs", postgresql.JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("crop_name", name="uq_encyclopedia_crop_name"),
    )

    op.bulk_insert(
        encyclopedia,
        [
            {"crop_name": "Wheat", "description": "A major cereal crop.", "planting_season": "rabi"},
            {
                "crop_name": "Rice",
                "description": "A staple food for a large part of the world's human population.",
                "planting_season": "kharif",
            },
        ],
    )


def downgrade() -> None:
    op.drop_table("encyclopedia")
