"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, patch

from api.main import app
from leadgauge.services.audits import AuditReport, build_report_data
from leadgauge.services.leads import EmailVerificationBatch


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuditEndpoint:

    def test_create_audit(self, client, sample_audit):
        report = AuditReport(
            audit=sample_audit,
            enhanced=None,
            report_data=build_report_data(sample_audit, None),
            credits_used=10,
        )
        with patch("api.audits.run_audit", new_callable=AsyncMock, return_value=report) as mock_run:
            response = client.post("/api/audits", json={"business_url": "acme.test"})

        assert response.status_code == 200
        body = response.json()
        assert body["total_score"] == sample_audit.total_score
        assert body["credits_used"] == 10
        assert body["enhanced"] is False
        assert set(body["parameter_scores"]) == {
            "digitalPresence", "marketVisibility", "businessOperations",
            "competitivePositioning", "dataInsight", "compliance",
        }
        mock_run.assert_awaited_once()

    def test_blank_url(self, client):
        response = client.post("/api/audits", json={"business_url": "   "})
        assert response.status_code == 400


class TestLeadsEndpoint:

    def test_create_leads(self, client, sample_audit):
        response = client.post("/api/leads", json={
            "audit": sample_audit.to_dict(),
            "target_count": 3,
            "job_titles": ["CEO"],
        })
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 3
        assert body["credits_used"] == 6
        assert all(lead["title"] == "CEO" for lead in body["leads"])

    def test_target_count_out_of_range(self, client, sample_audit):
        response = client.post("/api/leads", json={
            "audit": sample_audit.to_dict(),
            "target_count": 1001,
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Target count must be between 1 and 1000"

    def test_invalid_snapshot(self, client):
        response = client.post("/api/leads", json={"audit": {}, "target_count": 3})
        assert response.status_code == 400

    @pytest.mark.parametrize("section,value", [
        ("businessInfo", ["not", "a", "dict"]),
        ("parameters", ["not", "a", "dict"]),
        ("parameters", "digitalPresence"),
    ])
    def test_snapshot_section_not_an_object(self, client, sample_audit, section, value):
        snapshot = sample_audit.to_dict()
        snapshot[section] = value
        response = client.post("/api/leads", json={"audit": snapshot, "target_count": 3})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid audit snapshot"

    def test_snapshot_parameter_not_an_object(self, client, sample_audit):
        snapshot = sample_audit.to_dict()
        snapshot["parameters"]["compliance"] = 90
        response = client.post("/api/leads", json={"audit": snapshot, "target_count": 3})
        assert response.status_code == 400


class TestEmailVerificationEndpoint:

    def test_too_many_emails(self, client):
        emails = [f"u{i}@acme.com" for i in range(101)]
        response = client.post("/api/email-verification", json={"emails": emails})
        assert response.status_code == 400

    def test_no_emails(self, client):
        response = client.post("/api/email-verification", json={"emails": []})
        assert response.status_code == 400

    def test_verify(self, client):
        batch = EmailVerificationBatch(results=[], leads=[], credits_used=0)
        with patch(
            "api.email_verification.leads_from_emails",
            new_callable=AsyncMock,
            return_value=batch,
        ):
            response = client.post(
                "/api/email-verification", json={"emails": ["jane@acme.com"]}
            )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Email verification completed"
