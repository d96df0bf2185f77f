"""
Tests for the claim store, policy directory and session store.
"""
import json
from datetime import date

import pytest

from claimgenie.orchestration.intake.state import INITIAL_STATE, IntakeState
from claimgenie.services.claim_store import ClaimStore, ClaimStoreError
from claimgenie.services.policy_directory import (
    PolicyDirectory,
    is_policy_expired,
    normalize_policy_number,
)
from claimgenie.services.session_store import InMemorySessionStore


class TestClaimStore:
    """JSON-file claim store."""

    def test_missing_file_reads_empty(self, claim_store):
        assert claim_store.load() == []
        assert claim_store.next_claim_id() == "CLM-1000"

    def test_ids_follow_collection_size(self, claim_store):
        first = claim_store.create_claim({"policy_number": "POL2"})
        second = claim_store.create_claim({"policy_number": "POL2"})

        assert first["claimId"] == "CLM-1000"
        assert second["claimId"] == "CLM-1001"
        assert claim_store.next_claim_id() == "CLM-1002"

    def test_record_shape_on_disk(self, claim_store, claims_file):
        record = claim_store.create_claim({"policy_number": "POL2", "claim_amount": 10.0})

        data = json.loads(claims_file.read_text(encoding="utf-8"))
        assert data == {"claims": [record]}
        assert record["createdAt"].endswith("Z")
        assert list(record)[0] == "claimId"

    def test_corrupt_file_reads_empty(self, claim_store, claims_file):
        claims_file.write_text("{not json", encoding="utf-8")
        assert claim_store.load() == []

    def test_append_preserves_existing(self, claim_store):
        claim_store.append({"claimId": "CLM-1000"})
        claim_store.append({"claimId": "CLM-1001"})
        assert [c["claimId"] for c in claim_store.load()] == ["CLM-1000", "CLM-1001"]

    def test_find_by_id_is_case_insensitive(self, claim_store):
        claim_store.create_claim({"policy_number": "POL2"})
        assert claim_store.find_by_id("clm-1000")["claimId"] == "CLM-1000"
        assert claim_store.find_by_id("CLM-9999") is None

    def test_find_by_policy_number(self, claim_store):
        claim_store.create_claim({"policy_number": "POL2"})
        claim_store.create_claim({"policy_number": "POL9"})
        claim_store.create_claim({"policy_number": "pol2"})

        found = claim_store.find_by_policy_number("POL2")
        assert [c["claimId"] for c in found] == ["CLM-1000", "CLM-1002"]

    def test_unwritable_path_raises(self, tmp_path):
        store = ClaimStore(str(tmp_path))
        with pytest.raises(ClaimStoreError):
            store.create_claim({"policy_number": "POL2"})


class TestPolicyDirectory:
    """Policy lookup and expiry."""

    def test_lookup_is_case_insensitive(self, policy_directory):
        assert policy_directory.get(" pol2 ")["name"] == "Maria Lopez"
        assert policy_directory.get("POL404") is None

    def test_missing_file_is_empty_directory(self, tmp_path):
        assert PolicyDirectory(str(tmp_path / "nope.json")).load() == {}

    def test_edits_are_picked_up_without_reload(self, policy_directory, policies_file):
        policies_file.write_text(json.dumps({"POL7": {"name": "New"}}), encoding="utf-8")
        assert policy_directory.get("POL7") == {"name": "New"}
        assert policy_directory.get("POL2") is None

    def test_normalize_policy_number(self):
        assert normalize_policy_number("  pol-12 ") == "POL-12"
        assert normalize_policy_number(None) == ""

    @pytest.mark.parametrize("valid_till,expected", [
        ("2025-06-14", True),
        ("2025-06-15", False),
        ("2025-06-15T00:00:00Z", False),
        ("2026-01-01", False),
        (None, False),
        ("", False),
        ("whenever", False),
    ])
    def test_is_policy_expired(self, valid_till, expected):
        assert is_policy_expired(valid_till, date(2025, 6, 15)) is expected


class TestInMemorySessionStore:
    """Session repository."""

    def test_create_mints_id_and_stores(self, session_store):
        session = session_store.create()
        assert session["session_id"]
        assert session["state"] == INITIAL_STATE
        assert session_store.exists(session["session_id"])

    def test_create_with_given_handle(self, session_store):
        session = session_store.create("abc")
        assert session["session_id"] == "abc"
        assert session_store.get("abc") is session

    def test_reset_keeps_handle_and_clears_progress(self, session_store):
        session = session_store.create("abc")
        session["state"] = IntakeState.DONE.value
        session["policy_number"] = "POL2"

        reset = session_store.reset("abc")
        assert reset["session_id"] == "abc"
        assert reset["state"] == INITIAL_STATE
        assert reset["policy_number"] is None

    def test_delete(self, session_store):
        session_store.create("abc")
        assert session_store.delete("abc") is True
        assert session_store.delete("abc") is False
        assert session_store.count() == 0
