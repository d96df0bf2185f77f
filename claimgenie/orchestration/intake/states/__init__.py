"""
Intake state handlers.

Each handler takes the session and the collaborators, reads
``session["current_input"]``, and returns the session with
``session["reply"]`` set.
"""
from claimgenie.orchestration.intake.states.policy_number import policy_number_node
from claimgenie.orchestration.intake.states.confirm_claim import confirm_claim_node
from claimgenie.orchestration.intake.states.claim_details import claim_details_node
from claimgenie.orchestration.intake.states.missing_fields import missing_fields_node
from claimgenie.orchestration.intake.states.claim_lookup import claim_lookup_node
from claimgenie.orchestration.intake.states.terminal import done_node, done_no_claim_node

__all__ = [
    "policy_number_node",
    "confirm_claim_node",
    "claim_details_node",
    "missing_fields_node",
    "claim_lookup_node",
    "done_node",
    "done_no_claim_node",
]
