"""Tests for the chart-of-accounts search responder."""
import pytest
from fastapi.testclient import TestClient

from hub_mock.config import Settings
from hub_mock.handlers.coas import CASH_ACCOUNT, build_search_payload
from hub_mock.modes import Mode
from hub_mock.server import create_app


class TestBuildSearchPayload:
    """Canned search envelopes."""

    def test_default_returns_one_record(self):
        payload = build_search_payload(Mode.OK)
        assert payload["status"] == "Success"
        assert payload["message"] == "COA data search completed"
        assert payload["recordCount"] == 1
        assert payload["coas"] == [dict(CASH_ACCOUNT)]
        assert "errorMessage" not in payload

    def test_partial_behaves_like_default(self):
        assert build_search_payload(Mode.PARTIAL)["recordCount"] == 1

    def test_records_are_copies(self):
        payload = build_search_payload(Mode.OK)
        payload["coas"][0]["description"] = "changed"
        assert CASH_ACCOUNT["description"] == "Cash Account"

    @pytest.mark.parametrize("mode", list(Mode))
    def test_record_count_matches_list(self, mode):
        payload = build_search_payload(mode)
        assert payload["recordCount"] == len(payload["coas"])


class TestCoaSearchEndpoint:
    """GET /api/v1/coas/search."""

    def setup_method(self):
        self.client = TestClient(create_app(Settings()))

    def test_default(self):
        response = self.client.get("/api/v1/coas/search")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Success"
        assert data["recordCount"] == 1
        record = data["coas"][0]
        assert record["accountNumber"] == "100100"
        assert record["description"] == "Cash Account"
        assert record["lastUpdateDatetime"] == "2025-11-04 23:23:23.000"
        assert record["errorMessage"] is None
        assert data["timestamp"]

    def test_empty(self):
        data = self.client.get("/api/v1/coas/search?mode=empty").json()
        assert data["status"] == "Success"
        assert data["recordCount"] == 0
        assert data["coas"] == []

    def test_error_is_http_200(self):
        response = self.client.get("/api/v1/coas/search?mode=Error")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Failure"
        assert data["message"] == "COA data search failed"
        assert data["recordCount"] == 0
        assert data["coas"] == []
        assert data["errorMessage"] == "Simulated error for testing"

    def test_unknown_mode_returns_record(self):
        data = self.client.get("/api/v1/coas/search?mode=whatever").json()
        assert data["recordCount"] == 1
