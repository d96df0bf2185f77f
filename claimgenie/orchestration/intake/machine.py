"""
Claim Intake State Machine

Drives one conversation through policy verification, claim-detail
extraction, missing-field remediation and filing. Global commands
(restart, lookup) are checked before the current state's handler runs.
Each turn runs exactly one handler.
"""
from datetime import datetime
from typing import Optional, Tuple

from langgraph.graph import StateGraph, START, END

from claimgenie.core.logging import logger
from claimgenie.orchestration.intake.commands import Command, classify_command
from claimgenie.orchestration.intake.state import (
    INITIAL_STATE,
    IntakeSession,
    IntakeState,
    reset_session,
)
from claimgenie.orchestration.intake.states.base import (
    IntakeServices,
    set_response,
    transition_state,
)
from claimgenie.services.claim_store import ClaimStoreError


RESTART_REPLY = (
    "Conversation restarted.\n"
    "Please enter your policy number.\n"
    "You can also type 'retrieve claim' to look up an existing claim by Claim ID."
)

LOOKUP_REPLY = "Please enter your Claim ID (e.g., CLM-1001)."

FALLBACK_REPLY = "I'm not sure what to do. Please type 'restart' to start over."

SAVE_FAILED_REPLY = (
    "Sorry, I couldn't save your claim just now. "
    "Please send your last message again in a moment."
)


class ClaimIntakeMachine:
    """
    Claim intake state machine controller.

    Owns the mapping from state to handler and is the only place where a
    session's state advances. Sessions are loaded from and saved to the
    session store around each turn.
    """

    def __init__(self, session_store, services: IntakeServices):
        from claimgenie.orchestration.intake.states import (
            policy_number_node,
            confirm_claim_node,
            claim_details_node,
            missing_fields_node,
            claim_lookup_node,
            done_node,
            done_no_claim_node,
        )

        self.session_store = session_store
        self.services = services
        self.node_map = {
            IntakeState.AWAITING_POLICY_NUMBER.value: policy_number_node,
            IntakeState.CONFIRM_NEW_CLAIM.value: confirm_claim_node,
            IntakeState.AWAITING_CLAIM_DETAILS.value: claim_details_node,
            IntakeState.AWAITING_MISSING.value: missing_fields_node,
            IntakeState.AWAITING_CLAIM_ID.value: claim_lookup_node,
            IntakeState.DONE.value: done_node,
            IntakeState.DONE_NO_CLAIM.value: done_no_claim_node,
        }

    def handle_message(self, session_id: Optional[str], message: str) -> Tuple[str, str]:
        """
        Process one inbound message.

        Args:
            session_id: Handle from a previous turn; a new session is created
                when it is missing or unknown
            message: The user's text

        Returns:
            Tuple of (session_id, reply)
        """
        session = self.session_store.get(session_id) if session_id else None
        if session is None:
            session = self.session_store.create(session_id)

        session = self.process_message(session, message)
        self.session_store.save(session)

        return session["session_id"], session.get("reply") or FALLBACK_REPLY

    def process_message(self, session: IntakeSession, message: str) -> IntakeSession:
        """
        Run one turn against an already-loaded session.

        Never raises: handler failures are logged and answered with a
        generic reply, leaving the session where it was.
        """
        text = (message or "").strip()
        session["current_input"] = text
        session["updated_at"] = datetime.utcnow().isoformat()
        session["reply"] = None

        command = classify_command(text)

        if command == Command.RESTART:
            reset_session(session)
            return set_response(session, RESTART_REPLY)

        if command == Command.LOOKUP and session.get("state") == INITIAL_STATE:
            transition_state(session, IntakeState.AWAITING_CLAIM_ID)
            return set_response(session, LOOKUP_REPLY)

        node_fn = self.node_map.get(session.get("state"))
        if node_fn is None:
            logger.warning(
                f"Session {session.get('session_id')} in unknown state {session.get('state')!r}"
            )
            return set_response(session, FALLBACK_REPLY)

        try:
            session = node_fn(session, self.services)
        except ClaimStoreError as e:
            logger.error(f"Claim could not be stored for session {session.get('session_id')}: {e}")
            set_response(session, SAVE_FAILED_REPLY)
        except Exception:
            logger.exception(
                f"Handler for state {session.get('state')!r} failed in session {session.get('session_id')}"
            )
            set_response(session, FALLBACK_REPLY)

        return session


def build_intake_graph(services: IntakeServices) -> StateGraph:
    """
    Build the intake flow as a LangGraph graph.

    One turn is one hop: START routes on the session's current state to
    that state's handler, which then ends the run. Useful for rendering
    the flow (``build_intake_graph(...).compile().get_graph()``).

    Returns:
        Configured StateGraph
    """
    machine = ClaimIntakeMachine(session_store=None, services=services)
    workflow = StateGraph(IntakeSession)

    for state_name, node_fn in machine.node_map.items():
        workflow.add_node(state_name, lambda session, fn=node_fn: fn(session, services))
        workflow.add_edge(state_name, END)

    def route_by_state(session: IntakeSession) -> str:
        return session.get("state") or INITIAL_STATE

    workflow.add_conditional_edges(
        START,
        route_by_state,
        {name: name for name in machine.node_map},
    )

    return workflow


# Singleton instance
_intake_machine: Optional[ClaimIntakeMachine] = None


def get_intake_machine() -> ClaimIntakeMachine:
    """Get or create the intake machine singleton."""
    global _intake_machine
    if _intake_machine is None:
        from claimgenie.core.config import settings
        from claimgenie.services.claim_store import get_claim_store
        from claimgenie.services.llm.extraction_service import get_extraction_service
        from claimgenie.services.policy_directory import get_policy_directory
        from claimgenie.services.session_store import get_session_store

        services = IntakeServices(
            policy_directory=get_policy_directory(),
            claim_store=get_claim_store(),
            extraction_service=get_extraction_service(),
            strict_dates=settings.STRICT_DATE_MODE,
        )
        _intake_machine = ClaimIntakeMachine(get_session_store(), services)
    return _intake_machine
