"""
Core module exports
"""
from claimgenie.core.config import settings, get_settings, Settings
from claimgenie.core.logging import logger, log_audit_event

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "logger",
    "log_audit_event",
]
