"""
AWAITING_CLAIM_ID State Handler

Read-only claim lookup. Stays in this state so several IDs can be
queried in a row.
"""
from claimgenie.orchestration.intake.state import IntakeSession
from claimgenie.orchestration.intake.states.base import (
    IntakeServices,
    format_claim_detail,
    set_response,
)


def claim_lookup_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the AWAITING_CLAIM_ID state."""
    claim_id = session.get("current_input", "").strip().upper()
    claim = services.claim_store.find_by_id(claim_id)

    if not claim:
        return set_response(
            session,
            f"I could not find any claim with ID {claim_id}.\n"
            "Please check the ID and try again, or type 'restart' to file a new claim.",
        )

    return set_response(
        session,
        f"Here are the details for Claim ID {claim_id}:\n\n"
        + format_claim_detail(claim)
        + "\n\nYou can enter another Claim ID or type 'restart' to start over.",
    )
