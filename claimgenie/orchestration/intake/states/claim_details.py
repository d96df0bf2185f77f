"""
AWAITING_CLAIM_DETAILS State Handler

First extraction pass over the user's description. The claimant name and
policy number come from the verified policy and override whatever the
model reads from the text.
"""
from claimgenie.orchestration.intake.state import IntakeSession
from claimgenie.orchestration.intake.states.base import IntakeServices, resolve_draft


def claim_details_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the AWAITING_CLAIM_DETAILS state."""
    snapshot = session.get("policy_snapshot") or {}
    defaults = {
        "claimant_name": snapshot.get("name"),
        "policy_number": session.get("policy_number"),
    }

    draft = services.extraction_service.extract(session.get("current_input", ""), defaults)
    return resolve_draft(session, draft, services, first_pass=True)
