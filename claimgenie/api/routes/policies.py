"""
Policies API routes
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from claimgenie.api.deps import get_policy_directory
from claimgenie.services.policy_directory import (
    PolicyDirectory,
    is_policy_expired,
    normalize_policy_number,
)

router = APIRouter()


@router.get("/{policy_number}", response_model=Dict[str, Any])
async def get_policy(
    policy_number: str,
    directory: PolicyDirectory = Depends(get_policy_directory),
):
    """Look up a policy by number."""
    policy = directory.get(policy_number)
    if not policy:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Policy not found",
        )

    return {
        "policyNumber": normalize_policy_number(policy_number),
        **policy,
        "expired": is_policy_expired(policy.get("validTill")),
    }
