"""
LexSite Backend: API Route Tests
==================================

What:  End-to-end HTTP tests through the full middleware stack.
How:   HTTPX AsyncClient over ASGITransport; reference routes use the
       seeded SQLite session via dependency override.
"""

import uuid

import pytest

from app.database import get_db_session


class TestCourtFeeEndpoint:

    @pytest.mark.asyncio
    async def test_calculate(self, test_client):
        response = await test_client.post(
            "/api/tools/court-fee", json={"claim_value": "55,000"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["claim_value"] == "55000"
        assert data["case_type"] == "plaint"
        assert data["fee"] == "2880.80"
        assert data["schedule_fee"] == "2880.80"
        assert data["fee_display"] == "₹2,880.8"
        assert data["fee_in_words"] == "two thousand eight hundred eighty Rupees and eighty Paise"
        assert data["slab"]["number"] == 9

    @pytest.mark.asyncio
    async def test_numeric_claim_value(self, test_client):
        response = await test_client.post("/api/tools/court-fee", json={"claim_value": 501})
        assert response.status_code == 200
        assert response.json()["fee"] == "76.50"

    @pytest.mark.asyncio
    async def test_half_fee_case_type(self, test_client):
        response = await test_client.post(
            "/api/tools/court-fee",
            json={"claim_value": "501", "case_type": "possession"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["schedule_fee"] == "76.50"
        assert data["fee"] == "39.00"
        assert data["fee_display"] == "₹39"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("claim_value", ["abc", "", "-5", "0"])
    async def test_invalid_claim_value(self, test_client, claim_value):
        response = await test_client.post(
            "/api/tools/court-fee", json={"claim_value": claim_value}
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["message"] == "Please enter a valid claim amount"
        assert data["details"]["field"] == "claim_value"
        assert data["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_huge_claim_is_400_not_500(self, test_client):
        response = await test_client.post("/api/tools/court-fee", json={"claim_value": "1e30"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["message"] == "Amount exceeds the largest supported value"
        assert data["details"]["field"] == "claim_value"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("claim_value", [True, False, None, [501], {"v": 501}])
    async def test_non_numeric_json_types_rejected(self, test_client, claim_value):
        response = await test_client.post(
            "/api/tools/court-fee", json={"claim_value": claim_value}
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_float_claim_value(self, test_client):
        response = await test_client.post("/api/tools/court-fee", json={"claim_value": 100.5})
        assert response.status_code == 200
        assert response.json()["fee"] == "11.00"

    @pytest.mark.asyncio
    async def test_unknown_case_type_is_schema_error(self, test_client):
        response = await test_client.post(
            "/api/tools/court-fee",
            json={"claim_value": "1000", "case_type": "bail"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_claim_value(self, test_client):
        response = await test_client.post("/api/tools/court-fee", json={})
        assert response.status_code == 422


class TestToolListings:

    @pytest.mark.asyncio
    async def test_slabs(self, test_client):
        response = await test_client.get("/api/tools/court-fee/slabs")
        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, max-age=86400"
        slabs = response.json()["slabs"]
        assert len(slabs) == 9
        assert slabs[0]["upper"] == "100"
        assert slabs[-1]["upper"] is None
        assert slabs[3]["base"] == "150"

    @pytest.mark.asyncio
    async def test_single_slab(self, test_client):
        response = await test_client.get("/api/tools/court-fee/slabs/9")
        assert response.status_code == 200
        data = response.json()
        assert data["upper"] is None
        assert data["base"] == "2832"

    @pytest.mark.asyncio
    async def test_single_slab_not_found(self, test_client):
        response = await test_client.get("/api/tools/court-fee/slabs/10")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_case_types(self, test_client):
        response = await test_client.get("/api/tools/court-fee/case-types")
        assert response.status_code == 200
        values = [c["value"] for c in response.json()["case_types"]]
        assert values == [
            "plaint", "appeal", "possession", "review_before_90", "review_after_90",
        ]

    @pytest.mark.asyncio
    async def test_amount_in_words(self, test_client):
        response = await test_client.get(
            "/api/tools/amount-in-words", params={"amount": "100.50"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["amount"] == "100.50"
        assert data["words"] == "one hundred Rupees and fifty Paise"
        assert data["display"] == "₹100.5"

    @pytest.mark.asyncio
    async def test_amount_in_words_negative(self, test_client):
        response = await test_client.get("/api/tools/amount-in-words", params={"amount": "-3"})
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "amount"

    @pytest.mark.asyncio
    async def test_amount_in_words_huge_amount(self, test_client):
        response = await test_client.get("/api/tools/amount-in-words", params={"amount": "1e27"})
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "amount"

    @pytest.mark.asyncio
    async def test_amount_in_words_requires_amount(self, test_client):
        response = await test_client.get("/api/tools/amount-in-words")
        assert response.status_code == 422


class TestReferenceEndpoints:

    @pytest.mark.asyncio
    async def test_fee_schedule(self, seeded_client):
        response = await seeded_client.get("/api/fee-schedule")
        assert response.status_code == 200
        assert response.headers["X-Total-Count"] == "3"
        assert response.headers["Cache-Control"] == "public, max-age=300"
        assert response.json()["total_count"] == 3

    @pytest.mark.asyncio
    async def test_fee_schedule_filters(self, seeded_client):
        response = await seeded_client.get(
            "/api/fee-schedule",
            params={"case_type": "plaint", "court_type": "all", "claim_value": "500"},
        )
        assert response.status_code == 200
        rows = response.json()["rows"]
        assert len(rows) == 1
        assert rows[0]["court_type"] == "district-court"

    @pytest.mark.asyncio
    async def test_fee_schedule_negative_claim(self, seeded_client):
        response = await seeded_client.get("/api/fee-schedule", params={"claim_value": "-1"})
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_fee_schedule_non_numeric_claim(self, seeded_client):
        response = await seeded_client.get("/api/fee-schedule", params={"claim_value": "lots"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_court_links(self, seeded_client):
        response = await seeded_client.get("/api/courts/vc-links", params={"search": "rana"})
        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 1
        assert data["links"][0]["judge_name"] == "Arvind Rana"
        assert data["states"] == ["Himachal Pradesh"]
        assert response.headers["X-Total-Count"] == "1"

    @pytest.mark.asyncio
    async def test_court_links_unknown_court_type(self, seeded_client):
        response = await seeded_client.get(
            "/api/courts/vc-links", params={"court_type": "family-court"}
        )
        assert response.status_code == 400
        assert "high-court" in response.json()["details"]["allowed"]

    @pytest.mark.asyncio
    async def test_court_links_search_too_long(self, seeded_client):
        response = await seeded_client.get("/api/courts/vc-links", params={"search": "x" * 101})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_database_failure_is_generic_500(self, test_client, mock_db_session):
        from app.main import app

        mock_db_session.execute.side_effect = RuntimeError("relation does not exist")

        async def failing_session():
            yield mock_db_session

        app.dependency_overrides[get_db_session] = failing_session
        try:
            response = await test_client.get("/api/courts/vc-links")
        finally:
            app.dependency_overrides.pop(get_db_session, None)

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "server_error"
        assert "relation" not in data["message"]
        assert "details" not in data


class TestDirectoryEndpoints:

    @pytest.mark.asyncio
    async def test_police_station_search(self, seeded_client):
        response = await seeded_client.get("/api/police-stations", params={"q": "connaught"})
        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, max-age=300"
        data = response.json()
        assert data["region"] == "Delhi"
        assert data["total_count"] == 1
        station = data["stations"][0]
        assert station["district"] == "New Delhi"
        assert station["address"] == "Baba Kharak Singh Marg, New Delhi"
        assert station["phone"] == "011-23747135"
        assert station["jurisdictional_court"] == "Patiala House Courts"

    @pytest.mark.asyncio
    async def test_police_station_search_by_region(self, seeded_client):
        response = await seeded_client.get(
            "/api/police-stations", params={"q": "civil", "region": "Haryana"}
        )
        assert response.status_code == 200
        names = [s["station_name"] for s in response.json()["stations"]]
        assert names == ["Civil Lines Gurugram"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{}, {"q": "c"}])
    async def test_police_station_short_query_is_empty(self, seeded_client, params):
        response = await seeded_client.get("/api/police-stations", params=params)
        assert response.status_code == 200
        assert response.json()["stations"] == []

    @pytest.mark.asyncio
    async def test_police_station_query_too_long(self, seeded_client):
        response = await seeded_client.get("/api/police-stations", params={"q": "x" * 101})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_legal_drafts(self, seeded_client):
        response = await seeded_client.get("/api/legal-drafts")
        assert response.status_code == 200
        assert response.headers["X-Total-Count"] == "3"
        assert response.headers["Cache-Control"] == "public, max-age=300"
        titles = [d["title"] for d in response.json()["drafts"]]
        assert titles == ["Legal Notice for Recovery", "Regular Bail Application", "Rent Agreement"]

    @pytest.mark.asyncio
    async def test_legal_drafts_filters(self, seeded_client):
        response = await seeded_client.get(
            "/api/legal-drafts", params={"search": "bail", "category": "all"}
        )
        assert response.status_code == 200
        drafts = response.json()["drafts"]
        assert len(drafts) == 1
        assert drafts[0]["category"] == "bail"
        assert drafts[0]["file_size"] == 24576

    @pytest.mark.asyncio
    async def test_legal_drafts_unknown_category(self, seeded_client):
        response = await seeded_client.get("/api/legal-drafts", params={"category": "wills"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert "notices" in data["details"]["allowed"]

    @pytest.mark.asyncio
    async def test_download_counts(self, seeded_client):
        listing = await seeded_client.get("/api/legal-drafts", params={"category": "bail"})
        draft = listing.json()["drafts"][0]

        response = await seeded_client.post(f"/api/legal-drafts/{draft['id']}/download")
        assert response.status_code == 200
        assert "Cache-Control" not in response.headers
        data = response.json()
        assert data["id"] == draft["id"]
        assert data["file_url"] == draft["file_url"]
        assert data["downloads_count"] == draft["downloads_count"] + 1

    @pytest.mark.asyncio
    async def test_download_unknown_draft(self, seeded_client):
        response = await seeded_client.post(f"/api/legal-drafts/{uuid.uuid4()}/download")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_download_malformed_id(self, seeded_client):
        response = await seeded_client.post("/api/legal-drafts/not-a-uuid/download")
        assert response.status_code == 422


class TestHealthAndHeaders:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"] == "1.0.0"
        assert data["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/tools/court-fee/case-types")
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get(
            "/api/tools/court-fee/slabs", headers={"X-Request-ID": "trace-42"}
        )
        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_malformed_request_id_replaced(self, test_client):
        response = await test_client.get(
            "/api/tools/court-fee/slabs", headers={"X-Request-ID": "bad id with spaces!"}
        )
        assert response.headers["X-Request-ID"] != "bad id with spaces!"
