"""
Bounded LLM Services

The language model is used for one constrained task: reading the eight
claim fields out of free text into a fixed JSON schema. It never writes
replies to the user and never decides when a claim is filed.
"""
from claimgenie.services.llm.extraction_service import ExtractionService, get_extraction_service

__all__ = [
    "ExtractionService",
    "get_extraction_service",
]
