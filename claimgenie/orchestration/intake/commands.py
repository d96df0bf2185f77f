"""
Command Classification

Maps raw user text to a closed set of command tags. Pattern based and
pure so it can be tested apart from the state machine.

Tags:
- restart: start the conversation over
- lookup: switch to read-only claim lookup
- view_claims: list claims filed under the session's policy
- new_claim: file another claim from a finished conversation
- confirm_yes / confirm_no: answer to a yes/no prompt
- continue: anything else (policy numbers, claim details, claim IDs)
"""
from enum import Enum
from typing import List
import re


class Command(str, Enum):
    """Command tags recognized at the text level."""
    RESTART = "restart"
    LOOKUP = "lookup"
    VIEW_CLAIMS = "view_claims"
    NEW_CLAIM = "new_claim"
    CONFIRM_YES = "confirm_yes"
    CONFIRM_NO = "confirm_no"
    CONTINUE = "continue"


RESTART_PATTERNS = [
    r"^(restart|reset)$",
]

LOOKUP_PATTERNS = [
    r"\bretrieve\b",
    r"^look\s*up\s+(a\s+|my\s+)?claim\b",
]

VIEW_CLAIMS_PATTERNS = [
    r"^(view|show|list)\s+(my\s+)?claims$",
    r"^my\s+claims$",
]

NEW_CLAIM_PATTERNS = [
    r"^(file\s+)?(a\s+)?new\s+claim$",
]


def _matches_patterns(text: str, patterns: List[str]) -> bool:
    for pattern in patterns:
        if re.search(pattern, text, re.IGNORECASE):
            return True
    return False


def classify_command(text: str) -> Command:
    """
    Classify user text into a command tag.

    Multi-word commands are checked before the yes/no prefixes so that
    "new claim" is never read as a "no".
    """
    text_lower = (text or "").strip().lower()
    text_lower = re.sub(r"[.!?]+$", "", text_lower).strip()

    if not text_lower:
        return Command.CONTINUE

    if _matches_patterns(text_lower, RESTART_PATTERNS):
        return Command.RESTART

    if _matches_patterns(text_lower, LOOKUP_PATTERNS):
        return Command.LOOKUP

    if _matches_patterns(text_lower, VIEW_CLAIMS_PATTERNS):
        return Command.VIEW_CLAIMS

    if _matches_patterns(text_lower, NEW_CLAIM_PATTERNS):
        return Command.NEW_CLAIM

    return classify_confirmation(text_lower)


def classify_confirmation(text: str) -> Command:
    """
    Read an answer to a yes/no prompt by its leading letter only.

    Unlike ``classify_command`` no multi-word command takes precedence, so
    "new claim" answers "no" here.
    """
    text_lower = (text or "").strip().lower()

    if text_lower.startswith("y"):
        return Command.CONFIRM_YES

    if text_lower.startswith("n"):
        return Command.CONFIRM_NO

    return Command.CONTINUE
