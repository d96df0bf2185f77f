"""
Claims API routes (read-only)
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from claimgenie.api.deps import get_claim_store
from claimgenie.services.claim_store import ClaimStore

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_claims(
    policy_number: Optional[str] = Query(default=None),
    store: ClaimStore = Depends(get_claim_store),
):
    """List filed claims, optionally only those under one policy."""
    if policy_number:
        return store.find_by_policy_number(policy_number)
    return store.load()


@router.get("/{claim_id}", response_model=Dict[str, Any])
async def get_claim(
    claim_id: str,
    store: ClaimStore = Depends(get_claim_store),
):
    """Get a claim by ID (case-insensitive)."""
    claim = store.find_by_id(claim_id)
    if not claim:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Claim {claim_id.upper()} not found",
        )
    return claim
