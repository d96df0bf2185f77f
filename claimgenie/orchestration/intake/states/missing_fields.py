"""
AWAITING_MISSING State Handler

Gap-fill loop: each message may only add values to the draft. The session
stays here until the draft validates, then the claim is filed.
"""
from claimgenie.orchestration.intake.state import IntakeSession
from claimgenie.orchestration.intake.states.base import IntakeServices, resolve_draft


def missing_fields_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the AWAITING_MISSING state."""
    draft = services.extraction_service.fill_missing(
        session.get("claim_draft") or {},
        list(session.get("missing_fields") or []),
        session.get("current_input", ""),
    )
    return resolve_draft(session, draft, services, first_pass=False)
