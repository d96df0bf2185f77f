"""
Tests for the HTTP surface.
"""
from claimgenie.api.deps import get_intake_machine

from conftest import COMPLETE_EXTRACTION


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestChat:
    """POST /api/chat."""

    def test_full_conversation(self, client, scripted_llm):
        response = client.post("/api/chat", json={"message": "POL2"})
        assert response.status_code == 200
        body = response.json()
        session_id = body["sessionId"]
        assert body["state"] == "confirm_new_claim"
        assert "Maria Lopez" in body["reply"]

        body = client.post("/api/chat", json={"message": "yes", "sessionId": session_id}).json()
        assert body["state"] == "awaiting_claim_details"

        scripted_llm.queue(COMPLETE_EXTRACTION)
        body = client.post("/api/chat", json={"message": "details", "sessionId": session_id}).json()
        assert body["sessionId"] == session_id
        assert body["state"] == "done"
        assert "Your Claim ID is: CLM-1000" in body["reply"]

    def test_missing_message_is_rejected(self, client):
        response = client.post("/api/chat", json={"sessionId": "x"})
        assert response.status_code == 422

    def test_unexpected_failure_returns_500(self, client):
        class BrokenMachine:
            def handle_message(self, session_id, message):
                raise RuntimeError("boom")

        client.app.dependency_overrides[get_intake_machine] = lambda: BrokenMachine()
        response = client.post("/api/chat", json={"message": "hi"})
        assert response.status_code == 500
        assert response.json() == {"reply": "Internal server error"}


class TestClaims:
    """GET /claims."""

    def test_list_and_filter(self, client, claim_store):
        claim_store.create_claim({"policy_number": "POL2"})
        claim_store.create_claim({"policy_number": "POL9"})

        assert len(client.get("/claims").json()) == 2
        filtered = client.get("/claims", params={"policy_number": "pol9"}).json()
        assert [c["claimId"] for c in filtered] == ["CLM-1001"]

    def test_get_by_id(self, client, claim_store):
        claim_store.create_claim({"policy_number": "POL2"})

        response = client.get("/claims/clm-1000")
        assert response.status_code == 200
        assert response.json()["claimId"] == "CLM-1000"

        assert client.get("/claims/CLM-5000").status_code == 404


class TestPolicies:
    """GET /policies."""

    def test_active_policy(self, client):
        body = client.get("/policies/pol2").json()
        assert body["policyNumber"] == "POL2"
        assert body["name"] == "Maria Lopez"
        assert body["expired"] is False

    def test_expired_policy(self, client):
        assert client.get("/policies/POL3").json()["expired"] is True

    def test_unknown_policy(self, client):
        assert client.get("/policies/POL404").status_code == 404
