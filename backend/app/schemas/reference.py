"""
LexSite Backend: Reference Data Schemas
=========================================

What:  Response models for the reference datasets behind the Tools pages:
       fee schedule table, court video-conference directory, police station
       directory, and legal drafts library.
How:   `from_attributes` lets services build these straight from ORM rows.
"""

import uuid
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class FeeScheduleRowResponse(BaseModel):
    id: uuid.UUID
    case_type: str
    court_type: str
    min_value: Decimal
    max_value: Optional[Decimal] = Field(default=None, description="Null means no upper bound")
    fixed_fee: Decimal
    percentage_fee: Decimal
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class FeeScheduleListResponse(BaseModel):
    rows: List[FeeScheduleRowResponse]
    total_count: int


class CourtVCLinkResponse(BaseModel):
    id: uuid.UUID
    court_name: str
    judge_name: str
    court_type: str
    state: str
    district: Optional[str] = None
    vc_link: str
    additional_info: Optional[str] = None

    model_config = {"from_attributes": True}


class CourtVCLinkListResponse(BaseModel):
    """
    Directory listing.

    states lists the distinct states among the returned links, sorted,
    so the page can build its state filter from the same response.
    """
    links: List[CourtVCLinkResponse]
    total_count: int
    states: List[str]


class PoliceStationResponse(BaseModel):
    id: uuid.UUID
    station_name: str
    district: str
    region: str
    address: Optional[str] = None
    phone: Optional[str] = None
    jurisdictional_court: Optional[str] = None

    model_config = {"from_attributes": True}


class PoliceStationListResponse(BaseModel):
    """
    Type-ahead suggestions for one region.

    Empty when the query is shorter than the minimum search length.
    """
    stations: List[PoliceStationResponse]
    total_count: int
    region: str


class LegalDraftResponse(BaseModel):
    id: uuid.UUID
    title: str
    category: str
    description: str
    file_url: str
    file_type: str
    file_size: int = Field(description="Size in bytes")
    downloads_count: int

    model_config = {"from_attributes": True}


class LegalDraftListResponse(BaseModel):
    drafts: List[LegalDraftResponse]
    total_count: int


class LegalDraftDownloadResponse(BaseModel):
    """Result of recording a download: where to fetch the file, and the new count."""
    id: uuid.UUID
    file_url: str
    downloads_count: int
