"""
LexSite Backend: Court VC Link Model
======================================

What:  ORM model for the `court_vc_links` table: the public directory of
       video-conference links for courtrooms, searchable by judge or court.
Who:   Read by ReferenceService for GET /api/courts/vc-links.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

COURT_TYPES = (
    "supreme-court",
    "high-court",
    "district-court",
    "sessions-court",
    "magistrate-court",
    "tribunal",
)


class CourtVCLink(Base):
    """A courtroom's video-conference link. Inactive rows are hidden from the API."""

    __tablename__ = "court_vc_links"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    court_name: Mapped[str] = mapped_column(String(255), nullable=False)
    judge_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # One of COURT_TYPES
    court_type: Mapped[str] = mapped_column(String(50), nullable=False)

    state: Mapped[str] = mapped_column(String(100), nullable=False)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    vc_link: Mapped[str] = mapped_column(Text, nullable=False)
    additional_info: Mapped[str | None] = mapped_column(Text, nullable=True)

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
        Index("idx_court_vc_links_judge_name", "judge_name"),
    )

    def __repr__(self) -> str:
        return f"<CourtVCLink(court='{self.court_name}', judge='{self.judge_name}')>"
