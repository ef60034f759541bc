"""Chat completion endpoint.

Forwards one user message to the completion dispatcher and returns the reply.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from gemini_chat.agent.dispatcher import CompletionDispatcher, DispatchError, get_dispatcher
from gemini_chat.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def provide_dispatcher() -> CompletionDispatcher:
    """Resolve the process-wide dispatcher.

    Raises:
        HTTPException: 503 if the model is not configured.
    """
    try:
        return get_dispatcher()
    except ValidationError as e:
        logger.error(f"Completion service is not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Completion service is not configured",
        ) from e


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    dispatcher: CompletionDispatcher = Depends(provide_dispatcher),
) -> ChatResponse:
    """Request a completion for one user message.

    Args:
        request: The chat request with the user's message.
        dispatcher: Injected completion dispatcher.

    Returns:
        ChatResponse with the model's reply, passed through verbatim.

    Raises:
        422: Missing or blank message.
        502: The completion could not be obtained.
        503: No model configured.
    """
    try:
        reply = await dispatcher.request_completion(request.message)
    except DispatchError as e:
        logger.error(f"Completion request failed: {e}", exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Completion request failed",
        ) from e

    return ChatResponse(reply=reply)
