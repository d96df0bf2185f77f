"""
Extraction merge policy.

Reconciles oracle output with what the session already knows. Initial
extraction lets caller defaults win over the model; gap-fill never clears
or blanks a value that is already set.
"""
from typing import Any, Dict, Optional

from claimgenie.orchestration.intake.schema import REQUIRED_FIELDS, coerce_extraction, empty_draft


def merge_initial(
    oracle_output: Optional[Dict[str, Any]],
    defaults: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the first draft: null baseline, then oracle output, then defaults.

    Only non-null defaults for required fields are applied.
    """
    merged = empty_draft()
    if oracle_output is not None:
        merged.update(coerce_extraction(oracle_output))

    for key, value in (defaults or {}).items():
        if key in merged and value is not None:
            merged[key] = value
    return merged


def merge_gap_fill(
    current: Dict[str, Any],
    oracle_output: Optional[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Absorb a gap-fill extraction into the current draft.

    A field takes the oracle's value only when that value is non-null;
    otherwise the prior value is kept.
    """
    updated = {f: current.get(f) for f in REQUIRED_FIELDS}
    if oracle_output is None:
        return updated

    extracted = coerce_extraction(oracle_output)
    for f in REQUIRED_FIELDS:
        if extracted[f] is not None:
            updated[f] = extracted[f]
    return updated
