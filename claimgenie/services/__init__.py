"""
Services package
"""
from claimgenie.services.claim_store import ClaimStore, ClaimStoreError, get_claim_store
from claimgenie.services.policy_directory import PolicyDirectory, get_policy_directory, is_policy_expired

__all__ = [
    "ClaimStore",
    "ClaimStoreError",
    "get_claim_store",
    "PolicyDirectory",
    "get_policy_directory",
    "is_policy_expired",
]
