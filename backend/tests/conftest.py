"""
LexSite Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set at the top of this module, before any
       `app` import, so the settings singleton and the engine pick them up.

Fixtures:
    ├── mock_db_session: AsyncMock session (no database)
    ├── db_session:      Real in-memory SQLite session with the schema created
    ├── seeded_session:  db_session with reference rows, stations and drafts
    └── test_client:     HTTPX AsyncClient over the ASGI app
"""

import os
import tempfile
import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup (must run before importing app modules)
# ══════════════════════════════════════════════════════════════════════════

_test_dir = tempfile.mkdtemp(prefix="lexsite_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "development"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"
os.environ["REJECT_NON_POSITIVE_CLAIMS"] = "true"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.models.court_link import CourtVCLink  # noqa: E402
from app.models.fee_schedule import FeeScheduleRow  # noqa: E402
from app.models.legal_draft import LegalDraft  # noqa: E402
from app.models.police_station import PoliceStation  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    AsyncMock standing in for an AsyncSession.

    Usage:
        mock_db_session.execute.side_effect = RuntimeError("connection lost")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_session():
    """Fresh in-memory SQLite database per test, schema from Base.metadata."""
    engine = create_async_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


def make_fee_row(**overrides) -> FeeScheduleRow:
    values = {
        "id": uuid.uuid4(),
        "case_type": "plaint",
        "court_type": "district-court",
        "min_value": Decimal("0"),
        "max_value": None,
        "fixed_fee": Decimal("0"),
        "percentage_fee": Decimal("0"),
        "description": None,
        "is_active": True,
    }
    values.update(overrides)
    return FeeScheduleRow(**values)


def make_court_link(**overrides) -> CourtVCLink:
    values = {
        "id": uuid.uuid4(),
        "court_name": "Court of Civil Judge (Senior Division)",
        "judge_name": "Judge",
        "court_type": "district-court",
        "state": "Himachal Pradesh",
        "district": "Shimla",
        "vc_link": "https://vc.example.org/room",
        "additional_info": None,
        "is_active": True,
    }
    values.update(overrides)
    return CourtVCLink(**values)


def make_police_station(**overrides) -> PoliceStation:
    values = {
        "id": uuid.uuid4(),
        "station_name": "Police Station",
        "district": "New Delhi",
        "region": "Delhi",
        "address": None,
        "phone": None,
        "jurisdictional_court": None,
    }
    values.update(overrides)
    return PoliceStation(**values)


def make_legal_draft(**overrides) -> LegalDraft:
    values = {
        "id": uuid.uuid4(),
        "title": "Draft",
        "category": "other",
        "description": "",
        "file_url": "https://files.example.org/drafts/draft.pdf",
        "file_type": "pdf",
        "file_size": 24576,
        "downloads_count": 0,
        "is_active": True,
    }
    values.update(overrides)
    return LegalDraft(**values)


@pytest_asyncio.fixture
async def seeded_session(db_session):
    """db_session with a small, known reference dataset."""
    db_session.add_all([
        make_fee_row(
            case_type="plaint", court_type="district-court",
            min_value=Decimal("0"), max_value=Decimal("1000"),
            fixed_fee=Decimal("0"), percentage_fee=Decimal("7.5"),
            description="Ad valorem, small claims",
        ),
        make_fee_row(
            case_type="plaint", court_type="district-court",
            min_value=Decimal("1000.01"), max_value=None,
            fixed_fee=Decimal("150"), percentage_fee=Decimal("5"),
            description="Ad valorem, above one thousand",
        ),
        make_fee_row(
            case_type="appeal", court_type="high-court",
            min_value=Decimal("0"), max_value=None,
            fixed_fee=Decimal("500"),
        ),
        make_fee_row(
            case_type="plaint", court_type="high-court",
            min_value=Decimal("0"), max_value=None,
            is_active=False,
        ),
    ])
    db_session.add_all([
        make_court_link(
            judge_name="Justice Meera Sharma", court_name="High Court of Himachal Pradesh",
            court_type="high-court", state="Himachal Pradesh", district="Shimla",
        ),
        make_court_link(
            judge_name="Arvind Rana", court_name="District Court Mandi",
            court_type="district-court", state="Himachal Pradesh", district="Mandi",
        ),
        make_court_link(
            judge_name="Baldev Singh", court_name="Sessions Court Ludhiana",
            court_type="sessions-court", state="Punjab", district="Ludhiana",
        ),
        make_court_link(
            judge_name="Retired Bench", court_name="District Court Kullu",
            court_type="district-court", state="Himachal Pradesh", is_active=False,
        ),
    ])
    db_session.add_all([
        make_police_station(
            station_name="Connaught Place", district="New Delhi",
            address="Baba Kharak Singh Marg, New Delhi", phone="011-23747135",
            jurisdictional_court="Patiala House Courts",
        ),
        make_police_station(station_name="Chanakyapuri", district="New Delhi"),
        make_police_station(
            station_name="Civil Lines", district="North",
            jurisdictional_court="Tis Hazari Courts",
        ),
        make_police_station(
            station_name="Civil Lines Gurugram", district="Gurugram", region="Haryana",
        ),
    ])
    db_session.add_all([
        make_legal_draft(
            title="Regular Bail Application", category="bail",
            description="Application for regular bail under Section 439 CrPC",
            file_url="https://files.example.org/drafts/regular-bail.docx",
            file_type="docx", downloads_count=5,
        ),
        make_legal_draft(
            title="Rent Agreement", category="agreements",
            description="Eleven month residential lease",
        ),
        make_legal_draft(
            title="Legal Notice for Recovery", category="notices",
            description="Demand notice before a money suit",
        ),
        make_legal_draft(
            title="Old Affidavit", category="affidavits",
            is_active=False,
        ),
    ])
    await db_session.commit()
    return db_session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight to the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded_client(seeded_session):
    """test_client whose database dependency yields the seeded session."""
    from app.main import app

    async def override_session():
        yield seeded_session

    app.dependency_overrides[get_db_session] = override_session
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_db_session, None)
