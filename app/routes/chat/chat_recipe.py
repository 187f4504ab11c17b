import logging

from fastapi import APIRouter, Depends, Response
from openai import APIStatusError

from app.config import AI_TEXT_MODEL, get_ai_client
from app.dependencies.auth import verify_token
from app.exceptions import GatewayError, MissingOutputError, UpstreamError
from app.models.chat.chat_models import ChatRequest, ChatResponse
from app.models.error_models import ErrorResponse
from app.utils.gateway import complete, extract_text

router = APIRouter()


@router.options("/chat-recipe", include_in_schema=False)
async def chat_recipe_preflight():
    return Response(status_code=200)


@router.post("/chat-recipe", tags=["Chat"], response_model=ChatResponse,
             dependencies=[Depends(verify_token)],
             responses={500: {"model": ErrorResponse}})
def chat_recipe(request: ChatRequest):
    """
    Forwards a single chat message to the AI gateway and returns the reply verbatim.
    No history is kept here; the caller owns the conversation.
    """
    try:
        with get_ai_client() as client:
            try:
                chat_response = complete(client, AI_TEXT_MODEL, request.message)
            except APIStatusError as e:
                logging.error(f"AI gateway error: {e.status_code} {e.response.text}")
                raise UpstreamError()

        reply = extract_text(chat_response)
        if not reply:
            raise MissingOutputError("No reply generated")

        return ChatResponse(reply=reply)

    except GatewayError:
        raise
    except Exception as e:
        logging.error(f"Chat error: {e}", exc_info=True)
        raise GatewayError(str(e))
