"""
DONE / DONE_NO_CLAIM State Handlers

Terminal for claim collection: ordinary input gets a canned reply and
never touches the draft or the claim store. Two read-mostly shortcuts are
honored here: listing the policy's claims and starting another claim.
"""
from claimgenie.orchestration.intake.commands import Command, classify_command
from claimgenie.orchestration.intake.schema import empty_draft
from claimgenie.orchestration.intake.state import IntakeSession, IntakeState, reset_session
from claimgenie.orchestration.intake.states.base import (
    CLAIM_DETAILS_INSTRUCTIONS,
    IntakeServices,
    add_audit_event,
    format_claim_list,
    set_response,
    transition_state,
)
from claimgenie.services.policy_directory import is_policy_expired


def done_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the DONE state."""
    shortcut = _handle_shortcut(session, services)
    if shortcut is not None:
        return shortcut

    claim_id = session.get("last_claim_id")
    return set_response(
        session,
        "Your claim has already been recorded.\n"
        + (f"Your Claim ID is {claim_id}.\n" if claim_id else "")
        + "You can type 'my claims' to see claims on your policy, 'new claim' to file another one, "
        "or 'restart' to start over.",
    )


def done_no_claim_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the DONE_NO_CLAIM state."""
    shortcut = _handle_shortcut(session, services)
    if shortcut is not None:
        return shortcut

    return set_response(
        session,
        "We are not filing a claim right now.\n"
        "You can type 'restart' to start again, then 'retrieve claim' to look up an existing claim.",
    )


def _handle_shortcut(session: IntakeSession, services: IntakeServices):
    command = classify_command(session.get("current_input", ""))
    if command == Command.VIEW_CLAIMS:
        return _list_policy_claims(session, services)
    if command == Command.NEW_CLAIM:
        return _start_new_claim(session, services)
    return None


def _list_policy_claims(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    policy_number = session.get("policy_number")
    if not policy_number:
        return set_response(
            session,
            "I don't have a verified policy for this conversation.\n"
            "Type 'restart' and enter your policy number first.",
        )

    claims = services.claim_store.find_by_policy_number(policy_number)
    if not claims:
        return set_response(session, f"There are no claims on file for policy {policy_number}.")

    return set_response(
        session,
        f"Claims on file for policy {policy_number}:\n"
        + format_claim_list(claims)
        + "\n\nType 'restart' and then 'retrieve claim' to see the full details of one.",
    )


def _start_new_claim(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    snapshot = session.get("policy_snapshot")
    can_reuse_policy = (
        session.get("policy_number")
        and snapshot is not None
        and not is_policy_expired(snapshot.get("validTill"), services.today())
    )

    if not can_reuse_policy:
        reset_session(session)
        return set_response(
            session,
            "Let's start a new claim.\n"
            "Please enter your policy number.",
        )

    session["claim_draft"] = empty_draft()
    session["missing_fields"] = []
    add_audit_event(session, action="new_claim_started", field_changed="claim_draft")
    transition_state(session, IntakeState.AWAITING_CLAIM_DETAILS)
    return set_response(session, CLAIM_DETAILS_INSTRUCTIONS)
