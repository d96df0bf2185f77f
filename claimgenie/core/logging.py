"""
Logging configuration with masking of personal claim data
"""
import logging
import re
from typing import Any, List, Tuple

from claimgenie.core.config import settings


# Fields whose values never reach the log output
MASKED_FIELDS = {
    "email": "***@***",
    "policy_number": "***",
    "policyNumber": "***",
    "claimant_name": "***",
    "name": "***",
}


def _build_mask_patterns() -> List[Tuple[re.Pattern, str]]:
    # Both JSON ("key": "v") and Python repr ('key': 'v') fragments
    patterns = []
    for field_name, mask in MASKED_FIELDS.items():
        for quote in ('"', "'"):
            pattern = re.compile(
                rf"{quote}{field_name}{quote}:\s*{quote}[^{quote}]*{quote}",
                re.IGNORECASE,
            )
            patterns.append((pattern, f"{quote}{field_name}{quote}: {quote}{mask}{quote}"))
    return patterns


MASK_PATTERNS = _build_mask_patterns()


class MaskingFormatter(logging.Formatter):
    """Formatter that redacts claimant and policy identifiers."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for pattern, replacement in MASK_PATTERNS:
            message = pattern.sub(replacement, message)
        return message


def setup_logging() -> logging.Logger:
    """Configure the ``claimgenie`` logger once per process."""
    level = logging.DEBUG if settings.DEBUG else logging.INFO
    app_logger = logging.getLogger("claimgenie")
    app_logger.setLevel(level)

    if app_logger.handlers:
        return app_logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(MaskingFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    app_logger.addHandler(handler)

    return app_logger


# Global logger instance
logger = setup_logging()


def log_audit_event(
    event_type: str,
    actor_id: str,
    actor_type: str,
    details: dict[str, Any],
) -> None:
    """Log an audit event for a session or claim."""
    logger.info(
        f"AUDIT: {event_type} | actor={actor_id} ({actor_type}) | details={details}"
    )
