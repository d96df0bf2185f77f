"""
Claim Intake Orchestration Module

A deterministic state machine for conversational claim intake, with the
language model bounded to schema-constrained field extraction.
"""
from claimgenie.orchestration.intake.schema import FIELD_LABELS, REQUIRED_FIELDS, ExtractedClaim
from claimgenie.orchestration.intake.state import (
    IntakeSession,
    IntakeState,
    create_initial_session,
    reset_session,
)
from claimgenie.orchestration.intake.commands import Command, classify_command
from claimgenie.orchestration.intake.validator import ValidationResult, validate_claim
from claimgenie.orchestration.intake.merge import merge_gap_fill, merge_initial

__all__ = [
    "FIELD_LABELS",
    "REQUIRED_FIELDS",
    "ExtractedClaim",
    "IntakeSession",
    "IntakeState",
    "create_initial_session",
    "reset_session",
    "Command",
    "classify_command",
    "ValidationResult",
    "validate_claim",
    "merge_gap_fill",
    "merge_initial",
]
