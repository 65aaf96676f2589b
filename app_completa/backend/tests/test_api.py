"""
Tests for the HTTP request layer.
"""

import pytest
from fastapi.testclient import TestClient

from expense_recon.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def payload():
    return {
        "userId": "user-123",
        "receipts": [
            {
                "id": "r1",
                "merchant": "Shoprite Lekki",
                "amount": 15000,
                "date": "2024-03-01",
                "category": "Food",
                "items": ["Rice"],
            },
        ],
        "transactions": [
            {
                "id": "t1",
                "description": "SHOPRITE LEKKI PHASE 1",
                "amount": -15000,
                "date": "2024-03-01",
                "category": "Food",
                "transaction_type": "debit",
            },
        ],
    }


class TestMatchTransactionsEndpoint:
    """POST /api/match-transactions."""

    def test_returns_matches_and_summary(self, client, payload):
        response = client.post("/api/match-transactions", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert len(body["matches"]) == 1

        match = body["matches"][0]
        assert match["receipt_id"] == "r1"
        assert match["transaction_id"] == "t1"
        assert match["confidence_score"] == pytest.approx(0.4 + 0.3 + 0.3 * 14 / 22)
        assert match["matching_factors"] == ["amount_exact", "date_exact", "merchant_medium"]
        assert match["receipt"]["merchant"] == "Shoprite Lekki"
        assert match["transaction"]["transaction_type"] == "debit"

        assert body["summary"] == {
            "total_receipts": 1,
            "total_transactions": 1,
            "matched_count": 1,
            "unmatched_receipts": 0,
        }

    def test_empty_lists(self, client):
        response = client.post(
            "/api/match-transactions",
            json={"receipts": [], "transactions": []},
        )

        assert response.status_code == 200
        assert response.json()["matches"] == []

    def test_missing_receipts(self, client, payload):
        del payload["receipts"]

        response = client.post("/api/match-transactions", json=payload)

        assert response.status_code == 400
        assert "receipts" in response.json()["detail"]

    def test_null_transactions(self, client, payload):
        payload["transactions"] = None

        response = client.post("/api/match-transactions", json=payload)

        assert response.status_code == 400
        assert "transactions" in response.json()["detail"]

    def test_non_record_item(self, client):
        response = client.post(
            "/api/match-transactions",
            json={"receipts": ["x"], "transactions": []},
        )

        assert response.status_code == 400
        assert "receipts[0]" in response.json()["detail"]


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_lifespan_startup(self):
        """Entering the client runs the lifespan, which configures logging."""
        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
