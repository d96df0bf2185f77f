"""
Claim Field Schema

The fixed, ordered set of fields a claim needs before it can be filed,
and the strict shape every extraction result is coerced into.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from claimgenie.orchestration.utils import parse_monetary_value


FIELD_LABELS: Dict[str, str] = {
    "claimant_name": "Claimant Name",
    "policy_number": "Policy Number",
    "claim_type": "Claim Type",
    "incident_date": "Incident Date",
    "incident_location": "Incident Location",
    "claim_amount": "Claim Amount",
    "service_provider": "Service Provider",
    "description_of_loss": "Description of Loss",
}

REQUIRED_FIELDS: List[str] = list(FIELD_LABELS)


def empty_draft() -> Dict[str, Any]:
    """A claim draft with every required field unset."""
    return {field: None for field in REQUIRED_FIELDS}


class ExtractedClaim(BaseModel):
    """
    Boundary schema for extraction output.

    All eight keys are always present after validation. Unknown keys are
    dropped, blank strings become None, scalar values for text fields are
    stringified and the claim amount is coerced to a number (None when it
    cannot be read as one).
    """
    model_config = ConfigDict(extra="ignore")

    claimant_name: Optional[str] = None
    policy_number: Optional[str] = None
    claim_type: Optional[str] = None
    incident_date: Optional[str] = None
    incident_location: Optional[str] = None
    claim_amount: Optional[float] = None
    service_provider: Optional[str] = None
    description_of_loss: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_values(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}

        normalized = {}
        for field in REQUIRED_FIELDS:
            value = data.get(field)
            if field == "claim_amount":
                normalized[field] = parse_monetary_value(value)
            else:
                normalized[field] = _normalize_text(value)
        return normalized


def _normalize_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped or stripped.lower() in ("null", "none", "unknown", "n/a"):
            return None
        return stripped
    # Lists, nested objects and anything else the model invents
    return None


def coerce_extraction(raw: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Validate raw oracle output into a full eight-key record."""
    return ExtractedClaim.model_validate(raw or {}).model_dump()
