"""
Base utilities for intake state handlers.

Provides common functions for:
- Updating state and recording audit events
- Rendering policies, claims and missing-field prompts
- Resolving a draft into reject / still-missing / filed
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional
import re

from claimgenie.core.logging import log_audit_event, logger
from claimgenie.orchestration.intake.schema import FIELD_LABELS, REQUIRED_FIELDS
from claimgenie.orchestration.intake.state import IntakeSession, IntakeState
from claimgenie.orchestration.intake.validator import validate_claim
from claimgenie.services.claim_store import ClaimStore
from claimgenie.services.policy_directory import PolicyDirectory


@dataclass
class IntakeServices:
    """Collaborators the state handlers call out to."""
    policy_directory: PolicyDirectory
    claim_store: ClaimStore
    extraction_service: Any
    strict_dates: bool = False
    today: Callable[[], date] = field(default=date.today)


CLAIM_DETAILS_INSTRUCTIONS = (
    "Great! Please provide your claim details in one message.\n\n"
    "You can either:\n"
    "• Describe the incident in a paragraph, OR\n"
    "• Provide labeled fields like:\n\n"
    "Claimant Name: \n"
    "Incident Date: \n"
    "Incident Location: \n"
    "Claim Type: \n"
    "Claim Amount: \n"
    "Service Provider: \n"
    "Description of Loss: \n\n"
    "I will extract the required details automatically."
)


def add_audit_event(
    session: IntakeSession,
    action: str,
    field_changed: Optional[str] = None,
    data_before: Any = None,
    data_after: Any = None,
) -> IntakeSession:
    """
    Add an audit event to the session history.

    Args:
        session: Current session
        action: Description of what happened
        field_changed: Which field was changed
        data_before: Previous value
        data_after: New value

    Returns:
        Updated session
    """
    event = {
        "timestamp": datetime.utcnow().isoformat(),
        "state": session.get("state"),
        "action": action,
        "field_changed": field_changed,
        "data_before": data_before,
        "data_after": data_after,
    }
    session["history"] = session.get("history", []) + [event]
    return session


def transition_state(session: IntakeSession, new_state: IntakeState) -> IntakeSession:
    """Move the session to a new state and record the transition."""
    old_state = session.get("state")
    session["state"] = new_state.value

    logger.debug(f"Session {session.get('session_id')}: {old_state} -> {new_state.value}")
    return add_audit_event(
        session,
        action=f"transition_to_{new_state.value}",
        field_changed="state",
        data_before=old_state,
        data_after=new_state.value,
    )


def set_response(session: IntakeSession, response: str) -> IntakeSession:
    """Set the reply for this turn."""
    session["reply"] = response
    return session


def humanize_key(key: str) -> str:
    """``validTill`` -> ``Valid Till``, ``policy_type`` -> ``Policy type``."""
    label = re.sub(r"([A-Z])", r" \1", key).replace("_", " ").strip()
    return label[:1].upper() + label[1:]


def format_value(value: Any) -> str:
    if value is None:
        return "Not Provided"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_field_list(fields: List[str]) -> str:
    return ", ".join(FIELD_LABELS[f] for f in fields)


def format_summary(data: Dict[str, Any]) -> str:
    """One "Label: value" line per required field, in order."""
    return "\n".join(
        f"{FIELD_LABELS[f]}: {format_value(data.get(f))}" for f in REQUIRED_FIELDS
    )


def format_policy_details(policy_number: str, policy: Dict[str, Any]) -> str:
    lines = ["Thank you! Here are your policy details:"]
    for key, value in policy.items():
        lines.append(f"{humanize_key(key)}: {format_value(value)}")
    lines.append(f"Policy Number: {policy_number}")
    return "\n".join(lines)


def format_claim_detail(claim: Dict[str, Any]) -> str:
    lines = [f"Claim ID: {claim.get('claimId')}"]
    for f in REQUIRED_FIELDS:
        lines.append(f"{FIELD_LABELS[f]}: {format_value(claim.get(f))}")
    lines.append(f"Created At: {claim.get('createdAt') or 'N/A'}")
    return "\n".join(lines)


def format_claim_list(claims: List[Dict[str, Any]]) -> str:
    return "\n".join(
        f"• {c.get('claimId')} | {format_value(c.get('claim_type'))} | "
        f"{format_value(c.get('incident_date'))} | {format_value(c.get('claim_amount'))}"
        for c in claims
    )


def resolve_draft(
    session: IntakeSession,
    draft: Dict[str, Any],
    services: IntakeServices,
    first_pass: bool,
) -> IntakeSession:
    """
    Validate a draft and branch: hard rejection, still missing, or file it.

    Rejections and missing fields leave the session in ``awaiting_missing``.
    A complete draft is stored exactly once and the session moves to
    ``done``.

    Args:
        session: Current session
        draft: Draft produced by this turn's extraction
        services: Collaborators
        first_pass: True when the draft came from the initial extraction

    Returns:
        Updated session with the reply set
    """
    result = validate_claim(
        draft,
        today=services.today(),
        strict_dates=services.strict_dates,
    )
    session["claim_draft"] = draft
    session["missing_fields"] = result.missing

    if result.rejection is not None:
        others = [f for f in result.missing if f != result.rejection.field]
        response = result.rejection.reason
        if others:
            response += f"\n\nI also still need: {format_field_list(others)}"
        if session.get("state") != IntakeState.AWAITING_MISSING.value:
            transition_state(session, IntakeState.AWAITING_MISSING)
        return set_response(session, response)

    if result.missing:
        if first_pass:
            response = (
                "Thank you! I captured most of your details.\n\n"
                "However, I still need:\n"
                f"{format_field_list(result.missing)}\n\n"
                "Please provide these missing details in one message. For example:\n"
                + "\n".join(f"{FIELD_LABELS[f]}: <value>" for f in result.missing)
            )
        else:
            response = (
                "Thanks! I still don't have complete information.\n\n"
                "Still missing:\n"
                f"{format_field_list(result.missing)}\n\n"
                "Please provide only these remaining details in your next message."
            )
        if session.get("state") != IntakeState.AWAITING_MISSING.value:
            transition_state(session, IntakeState.AWAITING_MISSING)
        return set_response(session, response)

    record = services.claim_store.create_claim(result.cleaned)
    claim_id = record["claimId"]

    session["claim_draft"] = result.cleaned
    session["last_claim_id"] = claim_id
    add_audit_event(session, action="claim_created", field_changed="last_claim_id", data_after=claim_id)
    log_audit_event(
        "claim_created",
        actor_id=session.get("session_id", ""),
        actor_type="session",
        details={"claim_id": claim_id},
    )
    transition_state(session, IntakeState.DONE)

    return set_response(
        session,
        format_summary(result.cleaned)
        + f"\n\nYour Claim ID is: {claim_id}\n"
        "Thank you! Your claim has been recorded. Please wait for further communication.",
    )
