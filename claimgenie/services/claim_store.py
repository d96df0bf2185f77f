"""
Claim Store Service

Append-only collection of filed claims kept in a JSON file shaped
``{"claims": [...]}``.

Every write loads the whole collection, appends, and writes it back.
A process-local lock serializes ID generation and append, so two
sessions in one process never share an ID. Separate processes writing
the same file can still collide on an ID or lose an append.
"""
import json
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from claimgenie.core.config import settings
from claimgenie.core.logging import logger


CLAIM_ID_BASE = 1000


class ClaimStoreError(Exception):
    """Raised when the claim collection cannot be written."""


class ClaimStore:
    """JSON-file claim store."""

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> List[Dict[str, Any]]:
        """Read all claims in filing order. Missing or corrupt files read as empty."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read claims from {self.path}, starting empty: {e}")
            return []

        claims = data.get("claims") if isinstance(data, dict) else None
        if not isinstance(claims, list):
            return []
        return claims

    def save(self, claims: List[Dict[str, Any]]) -> None:
        """Write the whole collection."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"claims": claims}, f, indent=2, default=str)
        except OSError as e:
            logger.error(f"Failed to write claims to {self.path}: {e}")
            raise ClaimStoreError(str(e)) from e

    def append(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Append a claim record and persist the collection."""
        with self._lock:
            claims = self.load()
            claims.append(record)
            self.save(claims)
        return record

    def next_claim_id(self) -> str:
        """Claim ID derived from the current count: CLM-<1000 + count>."""
        return f"CLM-{CLAIM_ID_BASE + len(self.load())}"

    def create_claim(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Generate an ID and file a claim in one locked step.

        Args:
            fields: The complete, validated claim fields

        Returns:
            The persisted record, including ``claimId`` and ``createdAt``
        """
        with self._lock:
            claims = self.load()
            record = {
                "claimId": f"CLM-{CLAIM_ID_BASE + len(claims)}",
                **fields,
                "createdAt": datetime.utcnow().isoformat() + "Z",
            }
            claims.append(record)
            self.save(claims)

        logger.info(f"Claim {record['claimId']} stored ({len(claims)} on file)")
        return record

    def find_by_id(self, claim_id: str) -> Optional[Dict[str, Any]]:
        """Find a claim by ID, case-insensitively."""
        wanted = (claim_id or "").strip().lower()
        for claim in self.load():
            if str(claim.get("claimId", "")).lower() == wanted:
                return claim
        return None

    def find_by_policy_number(self, policy_number: str) -> List[Dict[str, Any]]:
        """All claims filed under a policy, case-insensitively."""
        wanted = (policy_number or "").strip().upper()
        return [
            claim for claim in self.load()
            if str(claim.get("policy_number", "")).strip().upper() == wanted
        ]


# Singleton instance
_claim_store: Optional[ClaimStore] = None


def get_claim_store() -> ClaimStore:
    """Get or create the claim store singleton."""
    global _claim_store
    if _claim_store is None:
        _claim_store = ClaimStore(settings.CLAIMS_FILE)
    return _claim_store
