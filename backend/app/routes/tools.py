"""
LexSite Backend: Legal Tools Route Handlers
=============================================

What:  Court-fee calculator endpoints behind the site's Tools pages.
How:   Thin handlers; FeeService does the parsing, calculation, and shaping.
Who:   Called by the CourtFeeCalculator page and the amount-in-words widget.

Route Inventory:
    POST /api/tools/court-fee              calculate a fee
    GET  /api/tools/court-fee/slabs        published slab table
    GET  /api/tools/court-fee/slabs/{n}    one slab
    GET  /api/tools/court-fee/case-types   case types and their fee rule
    GET  /api/tools/amount-in-words        spell out an amount

The schedule is fixed in code, so the slab and case-type GETs are cacheable.
"""

import logging

from fastapi import APIRouter, Query, Response

from app.schemas.common import ErrorResponse
from app.schemas.fee import (
    AmountInWordsResponse,
    CaseTypeListResponse,
    CourtFeeRequest,
    FeeCalculationResponse,
    SlabListResponse,
    SlabResponse,
)
from app.services.fee_service import fee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tools", tags=["Tools"])

STATIC_CACHE_CONTROL = "public, max-age=86400"


@router.post(
    "/court-fee",
    response_model=FeeCalculationResponse,
    responses={
        200: {"description": "Calculated court fee", "model": FeeCalculationResponse},
        400: {"description": "Invalid claim amount or case type", "model": ErrorResponse},
        429: {"description": "Rate limit exceeded", "model": ErrorResponse},
    },
    summary="Calculate the court fee for a claim",
    description=(
        "Computes the ad valorem court fee for the value of the subject matter, "
        "applies the case-type adjustment (half fee for possession suits and "
        "reviews filed before 90 days), and returns the fee in words and in "
        "en-IN display format."
    ),
)
async def calculate_court_fee(payload: CourtFeeRequest) -> FeeCalculationResponse:
    """
    Calculate a court fee.

    Example:
        POST /api/tools/court-fee
        {"claim_value": "55,000", "case_type": "plaint"}
        → {"fee": "2880.80", "fee_display": "₹2,880.8", ...}
    """
    return fee_service.calculate_court_fee(
        claim_value=payload.claim_value,
        case_type=payload.case_type,
    )


@router.get(
    "/court-fee/slabs",
    response_model=SlabListResponse,
    summary="List the ad valorem slab schedule",
)
async def list_slabs(response: Response) -> SlabListResponse:
    response.headers["Cache-Control"] = STATIC_CACHE_CONTROL
    return fee_service.list_slabs()


@router.get(
    "/court-fee/slabs/{number}",
    response_model=SlabResponse,
    responses={404: {"description": "No slab with that number", "model": ErrorResponse}},
    summary="Get one slab of the schedule",
)
async def get_slab(number: int, response: Response) -> SlabResponse:
    response.headers["Cache-Control"] = STATIC_CACHE_CONTROL
    return fee_service.get_slab(number)


@router.get(
    "/court-fee/case-types",
    response_model=CaseTypeListResponse,
    summary="List supported case types",
)
async def list_case_types(response: Response) -> CaseTypeListResponse:
    response.headers["Cache-Control"] = STATIC_CACHE_CONTROL
    return fee_service.list_case_types()


@router.get(
    "/amount-in-words",
    response_model=AmountInWordsResponse,
    responses={
        400: {"description": "Amount is not a non-negative number", "model": ErrorResponse},
    },
    summary="Spell out a rupee amount",
    description="Indian numbering (lakh, crore) with a paise clause when needed.",
)
async def amount_in_words(
    amount: str = Query(..., description="Amount in rupees, e.g. 100000 or 100.50"),
) -> AmountInWordsResponse:
    return fee_service.amount_in_words(amount)
