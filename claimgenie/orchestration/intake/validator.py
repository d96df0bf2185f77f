"""
Claim Field Validator

Decides, for a claim draft, which required fields are still missing and
whether a present value fails semantic validation. Pure: no I/O, "today"
is passed in.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional
import re

from claimgenie.orchestration.intake.schema import REQUIRED_FIELDS
from claimgenie.orchestration.utils import parse_monetary_value


SUGGESTED_DATE_FORMAT = "YYYY-MM-DD"

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# All-numeric day/month/year shapes; these never fall through as free text
NUMERIC_DATE_PATTERN = re.compile(r"^\d{1,4}[-/.]\d{1,2}[-/.]\d{1,4}$")

# Tried in order; slashed dates are month-first unless that cannot parse
DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%d.%m.%Y",
    "%m-%d-%Y",
    "%m/%d/%y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d-%b-%Y",
]


@dataclass
class FieldRejection:
    """A present value that fails semantic validation."""
    field: str
    reason: str


@dataclass
class ValidationResult:
    """Outcome of validating a claim draft."""
    missing: List[str]
    cleaned: Dict[str, Any]
    rejection: Optional[FieldRejection] = None
    parsed_dates: Dict[str, date] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return not self.missing and self.rejection is None


def is_unset(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def compute_missing(draft: Dict[str, Any]) -> List[str]:
    """Required fields whose value is unset, in required-field order."""
    return [f for f in REQUIRED_FIELDS if is_unset(draft.get(f))]


def parse_incident_date(value: Any) -> Optional[date]:
    """
    Parse an incident date from the formats people commonly type.

    Time-of-day components are ignored. Returns None when the value
    matches none of the known formats.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = _strip_time(value)
    # "1st", "22nd", "3rd", "4th"
    text = re.sub(r"(\d)(st|nd|rd|th)\b", r"\1", text, flags=re.IGNORECASE)

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _strip_time(text: str) -> str:
    # "2024-03-02T10:15:00", "2024-03-02 10:15"
    return re.split(r"[T ](?=\d{1,2}:\d{2})", text.strip(), maxsplit=1)[0].strip()


def validate_claim(
    draft: Dict[str, Any],
    today: Optional[date] = None,
    strict_dates: bool = False,
) -> ValidationResult:
    """
    Validate a claim draft.

    Rules:
    - A field is missing when its value is None or an empty string.
    - ``claim_amount`` is coerced to a number; a value that cannot be
      coerced is treated as unset rather than invalid.
    - ``incident_date`` later than ``today`` is a hard rejection. In strict
      mode a date not written as YYYY-MM-DD is also rejected, and in either
      mode so is an all-numeric date that is not on the calendar. A
      rejected field is always reported as missing.

    Args:
        draft: Claim field mapping
        today: Reference date for the future-date rule
        strict_dates: Require ISO dates

    Returns:
        ValidationResult with ordered missing fields and cleaned values
    """
    today = today or date.today()
    cleaned: Dict[str, Any] = {}

    for f in REQUIRED_FIELDS:
        value = draft.get(f)
        if f == "claim_amount":
            value = parse_monetary_value(value)
        elif isinstance(value, str):
            value = value.strip() or None
        cleaned[f] = value

    missing = compute_missing(cleaned)
    rejection = None
    parsed_dates: Dict[str, date] = {}

    raw_date = cleaned.get("incident_date")
    if not is_unset(raw_date):
        rejection, parsed = _check_incident_date(raw_date, today, strict_dates)
        if parsed is not None:
            parsed_dates["incident_date"] = parsed

    if rejection is not None and rejection.field not in missing:
        missing = [f for f in REQUIRED_FIELDS if f in missing or f == rejection.field]

    return ValidationResult(
        missing=missing,
        cleaned=cleaned,
        rejection=rejection,
        parsed_dates=parsed_dates,
    )


def _check_incident_date(value: Any, today: date, strict: bool):
    parsed = parse_incident_date(value)
    is_iso = isinstance(value, str) and ISO_DATE_PATTERN.match(value.strip()) is not None

    if strict and (not is_iso or parsed is None):
        return FieldRejection(
            field="incident_date",
            reason=(
                f"I couldn't read the incident date \"{value}\" unambiguously. "
                f"Please provide it in {SUGGESTED_DATE_FORMAT} format "
                f"(for example {today.isoformat()})."
            ),
        ), None

    if parsed is None:
        if isinstance(value, str) and NUMERIC_DATE_PATTERN.match(_strip_time(value)):
            return FieldRejection(
                field="incident_date",
                reason=(
                    f"The incident date \"{value}\" is not a valid calendar date. "
                    f"Please provide it in {SUGGESTED_DATE_FORMAT} format "
                    f"(for example {today.isoformat()})."
                ),
            ), None
        # Lenient mode keeps free-form dates such as "last Tuesday"
        return None, None

    if parsed > today:
        return FieldRejection(
            field="incident_date",
            reason=(
                f"The incident date {parsed.isoformat()} is in the future. "
                "Please provide the date the incident actually happened "
                f"in {SUGGESTED_DATE_FORMAT} format (for example {today.isoformat()})."
            ),
        ), parsed

    return None, parsed
