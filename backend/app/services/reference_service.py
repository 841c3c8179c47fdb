"""
LexSite Backend: Reference Data Service
=========================================

What:  Queries behind the Tools pages: fee schedule reference table, court
       video-conference directory, police station search, and the legal
       drafts library (the one write is the draft download counter).
How:   Builds SQLAlchemy select() statements from optional filters, runs them
       on the request's AsyncSession, and maps rows to response schemas.
Who:   Called by the routes in routes/reference.py.

Error Handling:
    ValidationError (bad filter values) and NotFoundError (unknown draft)
    propagate unchanged. Any other failure while querying is logged and
    wrapped in DatabaseError so the client gets a generic 500.
"""

import logging
import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import DatabaseError, LexSiteError, NotFoundError, ValidationError
from app.models.court_link import COURT_TYPES, CourtVCLink
from app.models.fee_schedule import FeeScheduleRow
from app.models.legal_draft import DRAFT_CATEGORIES, LegalDraft
from app.models.police_station import PoliceStation
from app.schemas.reference import (
    CourtVCLinkListResponse,
    CourtVCLinkResponse,
    FeeScheduleListResponse,
    FeeScheduleRowResponse,
    LegalDraftDownloadResponse,
    LegalDraftListResponse,
    LegalDraftResponse,
    PoliceStationListResponse,
    PoliceStationResponse,
)

logger = logging.getLogger(__name__)

# Filter value the site's drop-downs send for "no filter"
ALL = "all"

# Police station type-ahead: shorter queries return no suggestions
MIN_STATION_QUERY_LENGTH = 2
STATION_SUGGESTION_LIMIT = 10


def _filter_value(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == ALL:
        return None
    return value


class ReferenceService:
    """Queries over the reference tables. Stateless."""

    async def list_fee_schedule(
        self,
        db: AsyncSession,
        case_type: Optional[str] = None,
        court_type: Optional[str] = None,
        claim_value: Optional[Decimal] = None,
    ) -> FeeScheduleListResponse:
        """
        Active fee schedule rows, ordered by case type, court type, min value.

        Args:
            db: Async database session
            case_type: Exact case type filter ("all" or None for any)
            court_type: Exact court type filter ("all" or None for any)
            claim_value: Keep only rows whose range contains this value

        Raises:
            ValidationError: claim_value is negative
            DatabaseError: query execution failed
        """
        if claim_value is not None and claim_value < 0:
            raise ValidationError(
                message="Claim value must not be negative",
                field="claim_value",
                context={"value": str(claim_value)},
            )

        try:
            query = select(FeeScheduleRow).where(FeeScheduleRow.is_active.is_(True))

            case_type = _filter_value(case_type)
            if case_type:
                query = query.where(FeeScheduleRow.case_type == case_type)

            court_type = _filter_value(court_type)
            if court_type:
                query = query.where(FeeScheduleRow.court_type == court_type)

            if claim_value is not None:
                query = query.where(FeeScheduleRow.min_value <= claim_value).where(
                    or_(
                        FeeScheduleRow.max_value.is_(None),
                        FeeScheduleRow.max_value >= claim_value,
                    )
                )

            query = query.order_by(
                FeeScheduleRow.case_type,
                FeeScheduleRow.court_type,
                FeeScheduleRow.min_value,
            )

            result = await db.execute(query)
            rows = list(result.scalars().all())

            return FeeScheduleListResponse(
                rows=[FeeScheduleRowResponse.model_validate(row) for row in rows],
                total_count=len(rows),
            )

        except LexSiteError:
            raise
        except Exception as e:
            logger.error("Database error listing fee schedule: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the fee schedule. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def list_court_links(
        self,
        db: AsyncSession,
        search: Optional[str] = None,
        court_type: Optional[str] = None,
        state: Optional[str] = None,
    ) -> CourtVCLinkListResponse:
        """
        Active court VC links ordered by judge name.

        Args:
            db: Async database session
            search: Case-insensitive substring of judge or court name
            court_type: One of COURT_TYPES ("all" or None for any)
            state: Exact state name ("all" or None for any)

        Raises:
            ValidationError: unknown court type
            DatabaseError: query execution failed
        """
        court_type = _filter_value(court_type)
        if court_type and court_type not in COURT_TYPES:
            raise ValidationError(
                message=f"Unknown court type '{court_type}'",
                field="court_type",
                context={"allowed": list(COURT_TYPES)},
            )

        try:
            query = select(CourtVCLink).where(CourtVCLink.is_active.is_(True))

            search = (search or "").strip()
            if search:
                pattern = f"%{search.lower()}%"
                query = query.where(
                    or_(
                        func.lower(CourtVCLink.judge_name).like(pattern),
                        func.lower(CourtVCLink.court_name).like(pattern),
                    )
                )

            if court_type:
                query = query.where(CourtVCLink.court_type == court_type)

            state = _filter_value(state)
            if state:
                query = query.where(CourtVCLink.state == state)

            query = query.order_by(CourtVCLink.judge_name.asc())

            result = await db.execute(query)
            links = list(result.scalars().all())

            return CourtVCLinkListResponse(
                links=[CourtVCLinkResponse.model_validate(link) for link in links],
                total_count=len(links),
                states=sorted({link.state for link in links}),
            )

        except LexSiteError:
            raise
        except Exception as e:
            logger.error("Database error listing court links: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the court directory. Please try again.",
                context={"error_type": type(e).__name__},
            )


    async def search_police_stations(
        self,
        db: AsyncSession,
        query: Optional[str],
        region: Optional[str] = None,
    ) -> PoliceStationListResponse:
        """
        Type-ahead search over station names within one region.

        Args:
            db: Async database session
            query: Case-insensitive substring of the station name
            region: Region to search (settings.police_default_region if None)

        Returns:
            At most STATION_SUGGESTION_LIMIT stations ordered by name; empty,
            without touching the database, when the query is shorter than
            MIN_STATION_QUERY_LENGTH.

        Raises:
            DatabaseError: query execution failed
        """
        region = (region or "").strip() or settings.police_default_region
        query = (query or "").strip()
        if len(query) < MIN_STATION_QUERY_LENGTH:
            return PoliceStationListResponse(stations=[], total_count=0, region=region)

        try:
            statement = (
                select(PoliceStation)
                .where(PoliceStation.region == region)
                .where(func.lower(PoliceStation.station_name).like(f"%{query.lower()}%"))
                .order_by(PoliceStation.station_name.asc())
                .limit(STATION_SUGGESTION_LIMIT)
            )
            result = await db.execute(statement)
            stations = list(result.scalars().all())

            return PoliceStationListResponse(
                stations=[PoliceStationResponse.model_validate(s) for s in stations],
                total_count=len(stations),
                region=region,
            )

        except LexSiteError:
            raise
        except Exception as e:
            logger.error("Database error searching police stations: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not search police stations. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def list_legal_drafts(
        self,
        db: AsyncSession,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> LegalDraftListResponse:
        """
        Active legal drafts ordered by title.

        Args:
            db: Async database session
            search: Case-insensitive substring of title or description
            category: One of DRAFT_CATEGORIES ("all" or None for any)

        Raises:
            ValidationError: unknown category
            DatabaseError: query execution failed
        """
        category = _filter_value(category)
        if category and category not in DRAFT_CATEGORIES:
            raise ValidationError(
                message=f"Unknown draft category '{category}'",
                field="category",
                context={"allowed": list(DRAFT_CATEGORIES)},
            )

        try:
            statement = select(LegalDraft).where(LegalDraft.is_active.is_(True))

            search = (search or "").strip()
            if search:
                pattern = f"%{search.lower()}%"
                statement = statement.where(
                    or_(
                        func.lower(LegalDraft.title).like(pattern),
                        func.lower(LegalDraft.description).like(pattern),
                    )
                )

            if category:
                statement = statement.where(LegalDraft.category == category)

            statement = statement.order_by(LegalDraft.title.asc())

            result = await db.execute(statement)
            drafts = list(result.scalars().all())

            return LegalDraftListResponse(
                drafts=[LegalDraftResponse.model_validate(d) for d in drafts],
                total_count=len(drafts),
            )

        except LexSiteError:
            raise
        except Exception as e:
            logger.error("Database error listing legal drafts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the drafts library. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def record_draft_download(
        self,
        db: AsyncSession,
        draft_id: uuid.UUID,
    ) -> LegalDraftDownloadResponse:
        """
        Count one download of an active draft and return where to fetch it.

        The increment is applied in SQL (downloads_count + 1), never from a
        value read back first.

        Raises:
            NotFoundError: no active draft with that ID
            DatabaseError: query execution failed
        """
        try:
            result = await db.execute(
                update(LegalDraft)
                .where(LegalDraft.id == draft_id, LegalDraft.is_active.is_(True))
                .values(downloads_count=LegalDraft.downloads_count + 1)
            )
            if result.rowcount == 0:
                raise NotFoundError(resource="legal draft", resource_id=str(draft_id))

            row = (
                await db.execute(
                    select(LegalDraft.file_url, LegalDraft.downloads_count).where(
                        LegalDraft.id == draft_id
                    )
                )
            ).one()

            logger.info("Draft %s downloaded (count=%d)", draft_id, row.downloads_count)
            return LegalDraftDownloadResponse(
                id=draft_id,
                file_url=row.file_url,
                downloads_count=row.downloads_count,
            )

        except LexSiteError:
            raise
        except Exception as e:
            logger.error("Database error recording draft download: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not record the download. Please try again.",
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
reference_service = ReferenceService()
