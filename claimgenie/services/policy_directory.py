"""
Policy Directory Service
Looks up policies by number from the JSON policy file.
"""
import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

from claimgenie.core.config import settings
from claimgenie.core.logging import logger


def normalize_policy_number(policy_number: str) -> str:
    """Policy numbers are keyed upper-case without surrounding whitespace."""
    return (policy_number or "").strip().upper()


def is_policy_expired(valid_till: Any, today: Optional[date] = None) -> bool:
    """
    Check whether a policy's validity window has ended.

    A policy is expired when ``valid_till`` is strictly earlier than today.
    A missing or unreadable ``valid_till`` is treated as not expired.
    """
    if not valid_till:
        return False

    today = today or date.today()
    try:
        end = date.fromisoformat(str(valid_till)[:10])
    except ValueError:
        logger.warning(f"Unreadable validTill value on policy: {valid_till!r}")
        return False
    return end < today


class PolicyDirectory:
    """Keyed policy lookup backed by a JSON object of policy number -> attributes."""

    def __init__(self, path: str):
        self.path = Path(path)

    def load(self) -> Dict[str, Dict[str, Any]]:
        """
        Read every policy.

        The file is read on each call so edits are picked up without a
        restart. A missing or corrupt file yields an empty directory.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read policies from {self.path}, using empty directory: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Policy file {self.path} is not a JSON object, using empty directory")
            return {}
        return {normalize_policy_number(k): v for k, v in data.items()}

    def get(self, policy_number: str) -> Optional[Dict[str, Any]]:
        """Look up a policy by (case-insensitive) number."""
        return self.load().get(normalize_policy_number(policy_number))


# Singleton instance
_policy_directory: Optional[PolicyDirectory] = None


def get_policy_directory() -> PolicyDirectory:
    """Get or create the policy directory singleton."""
    global _policy_directory
    if _policy_directory is None:
        _policy_directory = PolicyDirectory(settings.POLICIES_FILE)
    return _policy_directory
