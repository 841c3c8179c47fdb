"""Create fee_schedule and court_vc_links tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the two read-only reference tables the public Tools pages show.
Rollback: downgrade() drops both tables (reference data is lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "fee_schedule",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("case_type", sa.String(50), nullable=False),
        sa.Column("court_type", sa.String(50), nullable=False),
        sa.Column("min_value", sa.Numeric(14, 2), nullable=False, server_default=sa.text("0")),
        # NULL: no upper bound
        sa.Column("max_value", sa.Numeric(14, 2), nullable=True),
        sa.Column("fixed_fee", sa.Numeric(12, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("percentage_fee", sa.Numeric(6, 3), nullable=False, server_default=sa.text("0")),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "max_value IS NULL OR max_value >= min_value",
            name="ck_fee_schedule_range",
        ),
    )
    op.create_index(
        "idx_fee_schedule_lookup",
        "fee_schedule",
        ["case_type", "court_type", "min_value"],
    )

    op.create_table(
        "court_vc_links",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("court_name", sa.String(255), nullable=False),
        sa.Column("judge_name", sa.String(255), nullable=False),
        sa.Column("court_type", sa.String(50), nullable=False),
        sa.Column("state", sa.String(100), nullable=False),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("vc_link", sa.Text(), nullable=False),
        sa.Column("additional_info", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_court_vc_links_judge_name",
        "court_vc_links",
        ["judge_name"],
    )


def downgrade() -> None:
    op.drop_index("idx_court_vc_links_judge_name", table_name="court_vc_links")
    op.drop_table("court_vc_links")
    op.drop_index("idx_fee_schedule_lookup", table_name="fee_schedule")
    op.drop_table("fee_schedule")
