from typing import AsyncGenerator
import json
import logging

from fastapi import APIRouter, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse, StreamingResponse

from career_agent.core.errors import ProfileSerializationError
from career_agent.core.rate_limit import chat_rate_limit
from career_agent.core.security import check_api_key
from career_agent.routing.locales import Intent
from career_agent.schemas.chat import ChatRequest
from career_agent.services.chat_service import answer_task, complete_chat, route_request, stream_chat

router = APIRouter()
logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def _too_large(exc: ProfileSerializationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail={"code": exc.code, "message": str(exc)},
    )


async def _until_disconnect(request: Request, events: AsyncGenerator[str, None]) -> AsyncGenerator[str, None]:
    try:
        async for event in events:
            if await request.is_disconnected():
                logger.info("chat_stream_client_disconnected")
                break
            yield event
    finally:
        await events.aclose()


@router.post("/chat/stream")
@chat_rate_limit()
async def chat_stream(
    request: Request,
    payload: ChatRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key, payload.language_preference)
    intent = route_request(payload)

    if intent is not Intent.OPEN_CHAT:
        try:
            reply = await answer_task(payload, intent)
        except ProfileSerializationError as exc:
            raise _too_large(exc) from exc
        return JSONResponse(reply.to_wire())

    return StreamingResponse(
        _until_disconnect(request, stream_chat(payload)),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post("/chat")
@chat_rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key, payload.language_preference)
    if not payload.message.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message is required")

    intent = route_request(payload)
    try:
        if intent is Intent.OPEN_CHAT:
            reply = await complete_chat(payload)
        else:
            reply = await answer_task(payload, intent)
    except ProfileSerializationError as exc:
        raise _too_large(exc) from exc
    except Exception as exc:
        logger.exception(json.dumps({"event": "chat_reply_failed", "intent": intent.value, "error": str(exc)}))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "response": f"I encountered an error processing your request: {exc}",
                "cvUpdates": {},
                "error": str(exc),
            },
        )
    return JSONResponse(reply.to_wire())
