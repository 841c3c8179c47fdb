"""Create police_stations and legal_drafts tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Adds the police station directory and the legal drafts library.
Rollback: downgrade() drops both tables (directory data and download counts
          are lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "police_stations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("station_name", sa.String(255), nullable=False),
        sa.Column("district", sa.String(100), nullable=False),
        sa.Column("region", sa.String(100), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("jurisdictional_court", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_police_stations_region_name",
        "police_stations",
        ["region", "station_name"],
    )

    op.create_table(
        "legal_drafts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("file_type", sa.String(20), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False, server_default=sa.text("0")),
        sa.Column("downloads_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("downloads_count >= 0", name="ck_legal_drafts_downloads"),
    )
    op.create_index("idx_legal_drafts_title", "legal_drafts", ["title"])
    op.create_index("idx_legal_drafts_category", "legal_drafts", ["category"])


def downgrade() -> None:
    op.drop_index("idx_legal_drafts_category", table_name="legal_drafts")
    op.drop_index("idx_legal_drafts_title", table_name="legal_drafts")
    op.drop_table("legal_drafts")
    op.drop_index("idx_police_stations_region_name", table_name="police_stations")
    op.drop_table("police_stations")
