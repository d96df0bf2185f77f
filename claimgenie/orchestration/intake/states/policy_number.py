"""
AWAITING_POLICY_NUMBER State Handler

Verifies the policy the claim will be filed against. Unknown numbers keep
the session here; expired policies end the conversation without a claim;
active policies are snapshotted and the user is asked to confirm.
"""
from claimgenie.orchestration.intake.state import IntakeSession, IntakeState
from claimgenie.orchestration.intake.states.base import (
    IntakeServices,
    add_audit_event,
    format_policy_details,
    set_response,
    transition_state,
)
from claimgenie.services.policy_directory import is_policy_expired, normalize_policy_number


def policy_number_node(session: IntakeSession, services: IntakeServices) -> IntakeSession:
    """Process the AWAITING_POLICY_NUMBER state."""
    policy_number = normalize_policy_number(session.get("current_input", ""))
    policy = services.policy_directory.get(policy_number) if policy_number else None

    if not policy:
        return set_response(
            session,
            f'The policy number "{policy_number}" was not found.\n'
            "Please enter a valid policy number or type 'retrieve claim' to look up an existing claim.",
        )

    session["policy_number"] = policy_number
    session["policy_snapshot"] = dict(policy)
    add_audit_event(session, action="policy_found", field_changed="policy_number", data_after=policy_number)

    if is_policy_expired(policy.get("validTill"), services.today()):
        transition_state(session, IntakeState.DONE_NO_CLAIM)
        return set_response(
            session,
            f"Policy Number: {policy_number}\n"
            f"This policy has expired (Valid Till: {policy.get('validTill')}).\n"
            "New claims cannot be filed on an expired policy.\n"
            "If you think this is an error, please contact support.",
        )

    transition_state(session, IntakeState.CONFIRM_NEW_CLAIM)
    return set_response(
        session,
        format_policy_details(policy_number, policy)
        + "\n\nWould you like to file a new claim? (yes/no)",
    )
