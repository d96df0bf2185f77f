"""
Test configuration and fixtures for ClaimGenie tests.
"""
import json
from datetime import date
from pathlib import Path
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from claimgenie.orchestration.intake.machine import ClaimIntakeMachine
from claimgenie.orchestration.intake.states.base import IntakeServices
from claimgenie.services.claim_store import ClaimStore
from claimgenie.services.llm.extraction_service import ExtractionService
from claimgenie.services.policy_directory import PolicyDirectory
from claimgenie.services.session_store import InMemorySessionStore


FIXED_TODAY = date(2025, 6, 15)

SAMPLE_POLICIES = {
    "POL2": {
        "name": "Maria Lopez",
        "policyType": "Auto",
        "validTill": "2099-12-31",
        "coverage": "Comprehensive",
    },
    "POL3": {
        "name": "Lena Fischer",
        "policyType": "Travel",
        "validTill": "2020-01-31",
    },
    "POL4": {
        "name": "Sam Lee",
        "policyType": "Home",
        "validTill": FIXED_TODAY.isoformat(),
    },
}

COMPLETE_EXTRACTION = {
    "claimant_name": "Someone Else",
    "policy_number": "WRONG-NUMBER",
    "claim_type": "Auto collision",
    "incident_date": "2025-06-01",
    "incident_location": "Main St, Springfield",
    "claim_amount": "$1,250.50",
    "service_provider": "Springfield Auto Body",
    "description_of_loss": "Rear bumper crushed at a stop light",
}


class ScriptedLLM:
    """
    Stands in for a chat model: answers ``invoke`` from a queue.

    Queue dicts (sent as JSON), raw strings, or exceptions to raise.
    """

    def __init__(self):
        self.responses: List = []
        self.calls: List = []

    def queue(self, *payloads) -> None:
        for payload in payloads:
            if isinstance(payload, dict):
                payload = json.dumps(payload)
            self.responses.append(payload)

    def invoke(self, messages):
        self.calls.append(messages)
        if not self.responses:
            raise RuntimeError("No scripted LLM response left")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return AIMessage(content=item)


@pytest.fixture
def policies_file(tmp_path: Path) -> Path:
    path = tmp_path / "policies.json"
    path.write_text(json.dumps(SAMPLE_POLICIES), encoding="utf-8")
    return path


@pytest.fixture
def claims_file(tmp_path: Path) -> Path:
    return tmp_path / "claims.json"


@pytest.fixture
def policy_directory(policies_file: Path) -> PolicyDirectory:
    return PolicyDirectory(str(policies_file))


@pytest.fixture
def claim_store(claims_file: Path) -> ClaimStore:
    return ClaimStore(str(claims_file))


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def scripted_llm() -> ScriptedLLM:
    return ScriptedLLM()


@pytest.fixture
def services(policy_directory, claim_store, scripted_llm) -> IntakeServices:
    return IntakeServices(
        policy_directory=policy_directory,
        claim_store=claim_store,
        extraction_service=ExtractionService(llm=scripted_llm),
        today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def machine(session_store, services) -> ClaimIntakeMachine:
    return ClaimIntakeMachine(session_store, services)


@pytest.fixture
def start_claim(machine):
    """Drive a new session up to awaiting_claim_details on POL2."""
    def _start(session_id: str = None) -> str:
        session_id, _ = machine.handle_message(session_id, "POL2")
        machine.handle_message(session_id, "yes")
        return session_id
    return _start


@pytest.fixture
def client(machine, claim_store, policy_directory) -> Generator[TestClient, None, None]:
    """Create a test client wired to the test stores."""
    from main import app
    from claimgenie.api.deps import get_claim_store, get_intake_machine, get_policy_directory

    app.dependency_overrides[get_intake_machine] = lambda: machine
    app.dependency_overrides[get_claim_store] = lambda: claim_store
    app.dependency_overrides[get_policy_directory] = lambda: policy_directory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
