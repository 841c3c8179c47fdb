"""
LexSite Backend: Court Fee Tool Schemas
=========================================

What:  Pydantic models for the calculator endpoints under /api/tools.
How:   Money fields are Decimal and serialize as strings ("76.50"), so the
       frontend never sees a binary float for a rupee amount.
"""

from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from app.services.fee_engine import CaseType


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CourtFeeRequest(BaseModel):
    """
    Body of POST /api/tools/court-fee.

    claim_value accepts the raw text of the form field ("1,00,000", "₹ 501")
    as well as a JSON number. Parsing and range checks happen in FeeService
    so the error message matches the one the site shows. Types are strict:
    a JSON boolean is a schema error, not the number 1.
    """
    claim_value: Union[StrictStr, StrictInt, StrictFloat] = Field(
        description="Value of the subject matter of the claim, in rupees",
        examples=["50000", 501],
    )
    case_type: CaseType = Field(
        default=CaseType.PLAINT,
        description="Kind of filing; possession suits and early reviews pay half",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class SlabResponse(BaseModel):
    """One row of the published ad valorem schedule."""
    number: int = Field(description="1-based slab position")
    lower: Decimal = Field(description="Exclusive lower bound of the claim range")
    upper: Optional[Decimal] = Field(
        default=None,
        description="Inclusive upper bound; null for the open-ended last slab",
    )
    unit: Decimal = Field(description="Size of one chargeable increment")
    amount: Decimal = Field(description="Fee per increment")
    base: Optional[Decimal] = Field(
        default=None,
        description="Fee carried in from lower slabs; null when the whole value is charged",
    )
    rule: str = Field(description="Human-readable formula for this slab")


class FeeCalculationResponse(BaseModel):
    """
    Result of a court-fee calculation.

    schedule_fee is the raw slab fee; fee is what the filer pays after the
    case-type adjustment. fee_in_words and fee_display are both derived
    from fee.
    """
    claim_value: Decimal = Field(description="Parsed claim value")
    case_type: CaseType
    schedule_fee: Decimal = Field(description="Fee from the slab schedule")
    fee: Decimal = Field(description="Payable fee after the case-type adjustment")
    fee_in_words: str = Field(description="Payable fee spelled out (Indian numbering)")
    fee_display: str = Field(description="Payable fee with en-IN digit grouping")
    slab: Optional[SlabResponse] = Field(
        default=None,
        description="Slab that produced schedule_fee; null when the fee is zero",
    )


class SlabListResponse(BaseModel):
    slabs: List[SlabResponse]


class CaseTypeResponse(BaseModel):
    value: CaseType
    label: str
    fee_rule: str = Field(description="'full' or 'half (rounded up to the rupee)'")


class CaseTypeListResponse(BaseModel):
    case_types: List[CaseTypeResponse]


class AmountInWordsResponse(BaseModel):
    amount: Decimal
    words: str
    display: str
