"""
LexSite Backend: Reference Data Route Handlers
================================================

What:  Tools-page datasets: fee schedule, court VC links, police stations,
       legal drafts (plus the draft download counter).
How:   Extracts query filters, delegates to ReferenceService.
Who:   Fee reference table under the calculator; Court VC Links, Police
       Stations and Legal Drafts pages.

The GET datasets change rarely and carry no user data, so responses get a
short public cache. The download counter is a write and is never cached.
"""

import logging
import uuid
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.reference import (
    CourtVCLinkListResponse,
    FeeScheduleListResponse,
    LegalDraftDownloadResponse,
    LegalDraftListResponse,
    PoliceStationListResponse,
)
from app.services.reference_service import reference_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Reference"])

REFERENCE_CACHE_CONTROL = "public, max-age=300"


@router.get(
    "/fee-schedule",
    response_model=FeeScheduleListResponse,
    responses={
        400: {"description": "Invalid filter", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List fee schedule reference rows",
)
async def list_fee_schedule(
    response: Response,
    case_type: Optional[str] = Query(default=None, description="Case type, or 'all'"),
    court_type: Optional[str] = Query(default=None, description="Court type, or 'all'"),
    claim_value: Optional[Decimal] = Query(
        default=None,
        description="Only rows whose claim range contains this value",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> FeeScheduleListResponse:
    result = await reference_service.list_fee_schedule(
        db=db,
        case_type=case_type,
        court_type=court_type,
        claim_value=claim_value,
    )
    response.headers["Cache-Control"] = REFERENCE_CACHE_CONTROL
    response.headers["X-Total-Count"] = str(result.total_count)
    return result


@router.get(
    "/courts/vc-links",
    response_model=CourtVCLinkListResponse,
    responses={
        400: {"description": "Unknown court type", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Search the court video-conference directory",
)
async def list_court_links(
    response: Response,
    search: Optional[str] = Query(
        default=None,
        max_length=100,
        description="Matches judge or court name, case-insensitive",
    ),
    court_type: Optional[str] = Query(default=None, description="e.g. high-court, or 'all'"),
    state: Optional[str] = Query(default=None, description="State name, or 'all'"),
    db: AsyncSession = Depends(get_db_session),
) -> CourtVCLinkListResponse:
    result = await reference_service.list_court_links(
        db=db,
        search=search,
        court_type=court_type,
        state=state,
    )
    response.headers["Cache-Control"] = REFERENCE_CACHE_CONTROL
    response.headers["X-Total-Count"] = str(result.total_count)
    return result


@router.get(
    "/police-stations",
    response_model=PoliceStationListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Type-ahead search for police stations in a region",
)
async def search_police_stations(
    response: Response,
    q: Optional[str] = Query(
        default=None,
        max_length=100,
        description="Part of the station name; fewer than 2 characters returns nothing",
    ),
    region: Optional[str] = Query(
        default=None,
        max_length=100,
        description="Region to search; defaults to the configured region",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> PoliceStationListResponse:
    result = await reference_service.search_police_stations(db=db, query=q, region=region)
    response.headers["Cache-Control"] = REFERENCE_CACHE_CONTROL
    return result


@router.get(
    "/legal-drafts",
    response_model=LegalDraftListResponse,
    responses={
        400: {"description": "Unknown category", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List the legal drafts library",
)
async def list_legal_drafts(
    response: Response,
    search: Optional[str] = Query(
        default=None,
        max_length=100,
        description="Matches title or description, case-insensitive",
    ),
    category: Optional[str] = Query(default=None, description="e.g. bail, or 'all'"),
    db: AsyncSession = Depends(get_db_session),
) -> LegalDraftListResponse:
    result = await reference_service.list_legal_drafts(db=db, search=search, category=category)
    response.headers["Cache-Control"] = REFERENCE_CACHE_CONTROL
    response.headers["X-Total-Count"] = str(result.total_count)
    return result


@router.post(
    "/legal-drafts/{draft_id}/download",
    response_model=LegalDraftDownloadResponse,
    responses={
        404: {"description": "Draft not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Record a draft download and return its file URL",
)
async def download_legal_draft(
    draft_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> LegalDraftDownloadResponse:
    return await reference_service.record_draft_download(db=db, draft_id=draft_id)
