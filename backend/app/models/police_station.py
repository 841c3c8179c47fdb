"""
LexSite Backend: Police Station Model
=======================================

What:  ORM model for the `police_stations` table: police stations with the
       district and jurisdictional court a filing has to go to.
Who:   Read by ReferenceService for GET /api/police-stations.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class PoliceStation(Base):
    """A police station; region is the state or union territory it reports to."""

    __tablename__ = "police_stations"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    station_name: Mapped[str] = mapped_column(String(255), nullable=False)
    district: Mapped[str] = mapped_column(String(100), nullable=False)

    # e.g. "Delhi"
    region: Mapped[str] = mapped_column(String(100), nullable=False)

    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    jurisdictional_court: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_police_stations_region_name", "region", "station_name"),
    )

    def __repr__(self) -> str:
        return f"<PoliceStation(name='{self.station_name}', region='{self.region}')>"
