# suggest.py - RLS policy suggestion router
import json
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from api.dependencies import get_chat_provider, get_settings
from config import Settings
from schemas.schema_suggest import SuggestRequest
from services.openai_service import OpenAIChatProvider
from services.prompt_service import build_messages, completion_options

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_KEY_ERROR = "No OPENAI_KEY set. Create this environment variable to use AI features."
GENERATION_ERROR = "There was an error processing your request"


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def missing_key_response(settings: Settings) -> Optional[JSONResponse]:
    if not settings.openai_key:
        return error_response(500, MISSING_KEY_ERROR)
    return None


@router.post("/suggest")
async def suggest(
    request: Request,
    settings: Settings = Depends(get_settings),
    provider: OpenAIChatProvider = Depends(get_chat_provider),
):
    response = missing_key_response(settings)
    if response is not None:
        return response
    return await handle_post(request, provider)


async def reject_method(request: Request):
    """Answers every verb other than POST; mounted without a method list."""
    response = missing_key_response(get_settings(request))
    if response is None:
        response = error_response(405, f"Method {request.method} Not Allowed")
        response.headers["Allow"] = "POST"
    return response


async def handle_post(request: Request, provider: OpenAIChatProvider):
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw.strip() else {}
    except ValueError as e:
        logger.info("Rejected non-JSON suggestion request: %s", e)
        return error_response(400, "Invalid request body", detail=str(e))

    try:
        data = SuggestRequest.model_validate(payload)
    except ValidationError as e:
        logger.info("Rejected suggestion request body: %s", e)
        return error_response(400, "Invalid request body", detail=e.errors(include_url=False))

    messages = build_messages(data)

    try:
        fragments = await provider.stream_chat(messages, **completion_options())
    except Exception:
        logger.exception("Suggestion request to OpenAI failed")
        return error_response(500, GENERATION_ERROR)

    return StreamingResponse(fragments, media_type="text/plain; charset=utf-8")
