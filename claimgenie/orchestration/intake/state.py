"""
Intake Session State Definition

Defines the per-conversation state carried between turns of the claim
intake flow and the set of states the machine can be in.
"""
from typing import TypedDict, List, Optional, Dict, Any
from datetime import datetime
from enum import Enum
import uuid

from claimgenie.orchestration.intake.schema import empty_draft


class IntakeState(str, Enum):
    """States of the claim intake flow."""
    AWAITING_POLICY_NUMBER = "awaiting_policy_number"
    CONFIRM_NEW_CLAIM = "confirm_new_claim"
    AWAITING_CLAIM_DETAILS = "awaiting_claim_details"
    AWAITING_MISSING = "awaiting_missing"
    AWAITING_CLAIM_ID = "awaiting_claim_id"
    DONE = "done"
    DONE_NO_CLAIM = "done_no_claim"


INITIAL_STATE = IntakeState.AWAITING_POLICY_NUMBER.value

TERMINAL_STATES = {
    IntakeState.DONE.value,
    IntakeState.DONE_NO_CLAIM.value,
}


class IntakeSession(TypedDict, total=False):
    """State for a single intake conversation."""
    # Identity
    session_id: str
    created_at: str
    updated_at: str

    # Flow position
    state: str

    # Verified policy
    policy_number: Optional[str]
    policy_snapshot: Optional[Dict[str, Any]]

    # Claim being collected
    claim_draft: Dict[str, Any]
    missing_fields: List[str]
    last_claim_id: Optional[str]

    # Current turn
    current_input: str
    reply: Optional[str]

    # Audit trail
    history: List[dict]


def create_initial_session(session_id: Optional[str] = None) -> IntakeSession:
    """
    Create a fresh intake session.

    Args:
        session_id: Handle to use; a new one is minted when omitted

    Returns:
        Session in the initial state
    """
    now = datetime.utcnow().isoformat()
    return IntakeSession(
        session_id=session_id or uuid.uuid4().hex,
        created_at=now,
        updated_at=now,
        state=INITIAL_STATE,
        policy_number=None,
        policy_snapshot=None,
        claim_draft=empty_draft(),
        missing_fields=[],
        last_claim_id=None,
        current_input="",
        reply=None,
        history=[],
    )


def reset_session(session: IntakeSession) -> IntakeSession:
    """Reinitialize a session in place, keeping only its handle."""
    fresh = create_initial_session(session["session_id"])
    session.clear()
    session.update(fresh)
    return session
