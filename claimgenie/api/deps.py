"""
API dependencies
"""
from claimgenie.orchestration.intake.machine import get_intake_machine
from claimgenie.services.claim_store import get_claim_store
from claimgenie.services.policy_directory import get_policy_directory

__all__ = [
    "get_intake_machine",
    "get_claim_store",
    "get_policy_directory",
]
