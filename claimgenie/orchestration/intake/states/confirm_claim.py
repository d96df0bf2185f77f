"""
CONFIRM_NEW_CLAIM State Handler

Yes/no gate between policy verification and claim collection.
"""
from claimgenie.orchestration.intake.commands import Command, classify_confirmation
from claimgenie.orchestration.intake.state import IntakeSession, IntakeState
from claimgenie.orchestration.intake.states.base import (
    CLAIM_DETAILS_INSTRUCTIONS,
    IntakeServices,
    set_response,
    transition_state,
)


def confirm_claim_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the CONFIRM_NEW_CLAIM state."""
    command = classify_confirmation(session.get("current_input", ""))

    if command == Command.CONFIRM_YES:
        transition_state(session, IntakeState.AWAITING_CLAIM_DETAILS)
        return set_response(session, CLAIM_DETAILS_INSTRUCTIONS)

    if command == Command.CONFIRM_NO:
        transition_state(session, IntakeState.DONE_NO_CLAIM)
        return set_response(
            session,
            "Okay, we will not file a new claim right now.\n"
            "You can type 'restart' to start again, then 'retrieve claim' to look up an existing claim.",
        )

    return set_response(session, "Please answer 'yes' or 'no'.")
