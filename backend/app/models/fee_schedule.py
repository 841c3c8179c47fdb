"""
LexSite Backend: Fee Schedule Reference Model
===============================================

What:  ORM model for the `fee_schedule` table: published fee rows shown in
       the reference table beside the court-fee calculator.
Who:   Read by ReferenceService; maintained by the firm's staff directly in
       the database. The API never writes to it.

These rows are display data only. The calculator's numbers come from the
slab table in app/services/fee_engine.py, never from this table.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Index, Numeric, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class FeeScheduleRow(Base):
    """
    One published fee rule for a case type in a court type.

    Range semantics: min_value <= claim value <= max_value, where a NULL
    max_value means "and above".
    """

    __tablename__ = "fee_schedule"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # e.g. "plaint", "appeal", "possession"
    case_type: Mapped[str] = mapped_column(String(50), nullable=False)

    # e.g. "district-court", "high-court"
    court_type: Mapped[str] = mapped_column(String(50), nullable=False)

    min_value: Mapped[Decimal] = mapped_column(
        Numeric(14, 2),
        nullable=False,
        default=Decimal("0"),
        server_default=text("0"),
    )
    max_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    fixed_fee: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        default=Decimal("0"),
        server_default=text("0"),
    )
    # Percent of the claim value, e.g. 7.50 for 7.5%
    percentage_fee: Mapped[Decimal] = mapped_column(
        Numeric(6, 3),
        nullable=False,
        default=Decimal("0"),
        server_default=text("0"),
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_fee_schedule_lookup", "case_type", "court_type", "min_value"),
    )

    def __repr__(self) -> str:
        return (
            f"<FeeScheduleRow(case_type='{self.case_type}', court_type='{self.court_type}', "
            f"range={self.min_value}..{self.max_value})>"
        )
