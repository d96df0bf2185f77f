"""
API routes package
"""
from claimgenie.api.routes import chat, claims, policies

__all__ = [
    "chat",
    "claims",
    "policies",
]
