"""
LexSite Backend: Legal Draft Model
====================================

What:  ORM model for the `legal_drafts` table: downloadable templates
       (bail applications, agreements, notices, ...) listed in the drafts
       library.
Who:   Read by ReferenceService; downloads_count is the only column the API
       writes.

The files themselves live in external storage; file_url points there.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, Boolean, DateTime, Index, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

DRAFT_CATEGORIES = (
    "bail",
    "agreements",
    "petitions",
    "notices",
    "affidavits",
    "contracts",
    "other",
)


class LegalDraft(Base):
    """A downloadable legal template. Inactive drafts are hidden from the API."""

    __tablename__ = "legal_drafts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    # One of DRAFT_CATEGORIES
    category: Mapped[str] = mapped_column(String(50), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    file_url: Mapped[str] = mapped_column(Text, nullable=False)

    # e.g. "pdf", "docx"
    file_type: Mapped[str] = mapped_column(String(20), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0, server_default=text("0"))

    downloads_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )
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
        Index("idx_legal_drafts_title", "title"),
        Index("idx_legal_drafts_category", "category"),
    )

    def __repr__(self) -> str:
        return f"<LegalDraft(title='{self.title}', category='{self.category}')>"
