"""
Chat API routes
"""
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from claimgenie.api.deps import get_intake_machine
from claimgenie.core import logger
from claimgenie.orchestration.intake.machine import ClaimIntakeMachine

router = APIRouter()


# Request/Response schemas
class ChatRequest(BaseModel):
    message: str
    sessionId: Optional[str] = None


class ChatResponse(BaseModel):
    sessionId: str
    reply: str
    state: Optional[str] = None


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    machine: ClaimIntakeMachine = Depends(get_intake_machine),
):
    """
    Send one message to the intake assistant.

    Omit ``sessionId`` on the first turn; the response carries the handle
    to send with every following turn.
    """
    try:
        session_id, reply = machine.handle_message(request.sessionId, request.message)
    except Exception:
        logger.exception("Chat request failed")
        return JSONResponse(status_code=500, content={"reply": "Internal server error"})

    session = machine.session_store.get(session_id)
    return ChatResponse(
        sessionId=session_id,
        reply=reply,
        state=session.get("state") if session else None,
    )
