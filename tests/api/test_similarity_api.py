"""Tests for similarity API endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.similarity import router


@pytest.fixture
def test_client():
    """Create test client with the similarity router."""
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


class TestCompareEndpoint:
    """Tests for POST /similarity/compare endpoint."""

    def test_exact_email_match(self, test_client):
        """Should normalize emails and report an exact match."""
        response = test_client.post(
            "/similarity/compare",
            json={
                "value1": "Jane@Example.com",
                "value2": "jane@example.com ",
                "type": "email",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"] == {"type": "email", "score": 1.0, "is_exact": True}
        assert data["meets_threshold"] is True
        assert data["label"] == "Same email"

    def test_fuzzy_name_below_threshold(self, test_client):
        """Should return the score even when it doesn't meet the threshold."""
        response = test_client.post(
            "/similarity/compare",
            json={"value1": "Jon", "value2": "John", "type": "name"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["score"] == pytest.approx(0.525)
        assert data["result"]["is_exact"] is False
        assert data["meets_threshold"] is False
        assert data["label"].startswith("Name similarity ")

    def test_missing_value_not_comparable(self, test_client):
        """Should return a null result instead of a 0% match."""
        response = test_client.post(
            "/similarity/compare",
            json={"value2": "Jane", "type": "name"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"] is None
        assert data["meets_threshold"] is False
        assert data["label"] is None

    def test_unknown_type_rejected(self, test_client):
        """Should reject field types outside email/phone/name/venue."""
        response = test_client.post(
            "/similarity/compare",
            json={"value1": "a", "value2": "b", "type": "address"},
        )

        assert response.status_code == 422
