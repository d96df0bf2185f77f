"""
Claim Extraction Service

Uses the configured LLM as an extraction oracle for the eight required
claim fields. This is a bounded AI task: the model only ever produces a
JSON record, which is validated and merged here before the state machine
sees it.

Two modes:
- extract: first pass over free text, with caller defaults that always win
- fill_missing: follow-up pass that may only add values, never clear them

Any failure (transport error, timeout, unparseable output) degrades to a
no-op: the defaults-only skeleton for extract, the unchanged draft for
fill_missing.
"""
import json
from typing import Any, Dict, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from claimgenie.core.logging import logger
from claimgenie.orchestration.intake.merge import merge_gap_fill, merge_initial
from claimgenie.orchestration.utils import extract_json_from_llm_response


EXTRACTION_PROMPT = """You extract claim fields from flexible user input.
The user may describe an incident in a paragraph, or use labels like
"Claimant Name: ", "Incident Date - ", etc.

Return ONLY JSON with:

{
  "claimant_name": string | null,
  "policy_number": string | null,
  "claim_type": string | null,
  "incident_date": string | null,
  "incident_location": string | null,
  "claim_amount": number | null,
  "service_provider": string | null,
  "description_of_loss": string | null
}

Infer values where possible. Use null if unknown.
Write incident_date as YYYY-MM-DD when the date is clear."""


FILL_MISSING_PROMPT = """You fill ONLY missing fields of a claim JSON using the user's follow-up message.

Rules:
- Only update fields listed in "missingFields".
- Never clear or overwrite existing non-null fields.
- Return FULL JSON with the same 8 keys.
- Write incident_date as YYYY-MM-DD when the date is clear."""


FILL_MISSING_REQUEST = """Current JSON:
{current}

Missing fields:
{missing}

User message:
"{text}"

Update only the clearly provided missing fields. Return ONLY the full JSON object."""


class ExtractionService:
    """
    Extraction oracle adapter around a LangChain chat model.

    The chat model is created lazily from settings unless one is injected.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None):
        self._llm = llm

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            from claimgenie.orchestration.routing import get_llm
            self._llm = get_llm()
        return self._llm

    def extract(self, text: str, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Extract a full claim record from free text.

        Args:
            text: The user's message
            defaults: Values known from the session; they override the model

        Returns:
            Eight-key record, value-or-None per field
        """
        parsed = self._complete(EXTRACTION_PROMPT, text)
        return merge_initial(parsed, defaults)

    def fill_missing(
        self,
        current: Dict[str, Any],
        missing: List[str],
        text: str,
    ) -> Dict[str, Any]:
        """
        Fill the missing fields of a draft from a follow-up message.

        Args:
            current: The draft as it stands
            missing: Field names still needed
            text: The user's message

        Returns:
            Updated eight-key record; no previously set value is cleared
        """
        request = FILL_MISSING_REQUEST.format(
            current=json.dumps(current, indent=2, default=str),
            missing=json.dumps(missing),
            text=text,
        )
        parsed = self._complete(FILL_MISSING_PROMPT, request)
        return merge_gap_fill(current, parsed)

    def _complete(self, system_prompt: str, user_content: str) -> Optional[Dict[str, Any]]:
        """Call the model and parse its JSON answer; None on any failure."""
        try:
            response = self.llm.invoke([
                SystemMessage(content=system_prompt),
                HumanMessage(content=user_content),
            ])
        except Exception as e:
            logger.error(f"Extraction LLM call failed: {e}")
            return None

        content = response.content if isinstance(response.content, str) else str(response.content)
        parsed = extract_json_from_llm_response(content)
        if parsed is None:
            logger.warning("Extraction response was not valid JSON, treating as no new information")
        return parsed


# Singleton instance
_extraction_service: Optional[ExtractionService] = None


def get_extraction_service() -> ExtractionService:
    """Get or create extraction service singleton."""
    global _extraction_service
    if _extraction_service is None:
        _extraction_service = ExtractionService()
    return _extraction_service
