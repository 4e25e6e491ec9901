from typing import Any, AsyncGenerator
from dataclasses import dataclass, field
import hashlib
import json
import logging
import time

from career_agent.utils.sse import sse
from career_agent.core import events
from career_agent.core.config import settings

from career_agent.ai.config import load_ai_config
from career_agent.ai.factory import get_ai_client
from career_agent.ai.types import AIClient
from career_agent.letters.drafting import draft_letter
from career_agent.letters.templates import reply_message
from career_agent.parsing.json_payload import NoStructuredPayload, extract_structured_payload
from career_agent.routing.intent import classify_intent
from career_agent.routing.locales import Intent
from career_agent.schemas.chat import ChatReply, ChatRequest, JobSearchReply, LetterReply
from career_agent.services.job_search_service import run_job_search
from career_agent.streaming.chunker import iter_word_tokens, paced
from career_agent.streaming.prompt import build_chat_messages
from career_agent.streaming.updates import normalize_cv_updates, parse_structured_cv_message

logger = logging.getLogger("career_agent.chat")

STRUCTURED_CV_RESPONSE = (
    "I've successfully parsed your CV data! Your information has been added to your CV. "
    "You can now view it in the preview or make any adjustments you'd like."
)


@dataclass(frozen=True)
class ParsedReply:
    response: str
    updates: dict[str, Any] = field(default_factory=dict)


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _optional_ai_client() -> AIClient | None:
    try:
        return get_ai_client()
    except (RuntimeError, ValueError) as exc:
        logger.warning("ai_client_unavailable: %s", exc)
        return None


def parse_model_reply(raw: str) -> ParsedReply:
    """Split a model reply into plain text and normalized document updates.

    Replies without a ``response`` field are used verbatim.
    """
    payload = extract_structured_payload(raw)
    if isinstance(payload, NoStructuredPayload) or payload.get("response") is None:
        return ParsedReply(response=raw)

    updates = payload.get("cvUpdates")
    if not updates:
        updates = payload.get("updates")
    return ParsedReply(response=str(payload["response"]), updates=normalize_cv_updates(updates))


async def _generate_reply(payload: ChatRequest, ai_client: AIClient | None) -> ParsedReply:
    structured = parse_structured_cv_message(payload.message)
    if structured is not None:
        logger.info(json.dumps({"event": "chat_structured_document", "fields": sorted(structured)}))
        return ParsedReply(response=STRUCTURED_CV_RESPONSE, updates=structured)

    messages = build_chat_messages(
        payload.message.strip(),
        payload.candidate_profile,
        payload.conversation_history,
        payload.language_preference,
    )
    logger.info(
        json.dumps(
            {
                "event": "chat_request",
                "lang": payload.language_preference,
                "history_turns": len(payload.conversation_history),
                "has_profile": bool(payload.candidate_profile),
                "message_len": len(payload.message),
                "message_hash": _short_hash(payload.message),
            }
        )
    )

    ai = ai_client or get_ai_client()
    raw = ""
    async for fragment in ai.stream(messages, temperature=load_ai_config().writing_temperature):
        raw += fragment
    return parse_model_reply(raw)


async def stream_chat(
    payload: ChatRequest,
    *,
    ai_client: AIClient | None = None,
    token_delay_s: float | None = None,
) -> AsyncGenerator[str, None]:
    """Event sequence for the open chat path; always ends in done or error."""
    started_at = time.perf_counter()
    delay = settings.stream_token_delay_ms / 1000 if token_delay_s is None else token_delay_s
    try:
        if not payload.message.strip():
            raise ValueError("Message is required")

        reply = await _generate_reply(payload, ai_client)
        if reply.updates:
            yield sse(events.CV_UPDATE, updates=reply.updates)

        async for token in paced(iter_word_tokens(reply.response), delay):
            yield sse(events.TOKEN, content=token)

        yield sse(events.DONE, response=reply.response)

    except Exception as ex:
        logger.exception(
            json.dumps(
                {
                    "event": "chat_error",
                    "error": str(ex),
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )
        yield sse(events.ERROR, message=str(ex) or "Failed to process request")
    else:
        logger.info(
            json.dumps(
                {
                    "event": "chat_complete",
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )


async def complete_chat(payload: ChatRequest, *, ai_client: AIClient | None = None) -> ChatReply:
    reply = await _generate_reply(payload, ai_client)
    return ChatReply(response=reply.response, cv_updates=reply.updates)


async def answer_task(
    payload: ChatRequest,
    intent: Intent,
    *,
    ai_client: AIClient | None = None,
) -> JobSearchReply | LetterReply:
    """Job search and letter requests are answered with one complete reply."""
    client = ai_client or _optional_ai_client()
    if intent is Intent.JOB_SEARCH:
        return await run_job_search(payload.message, payload.candidate_profile, ai_client=client)
    if intent is Intent.COVER_LETTER:
        draft = await draft_letter(
            payload.message,
            payload.candidate_profile,
            ai_client=client,
            language=payload.language_preference,
        )
        return LetterReply(response=reply_message(draft), letter_updates=draft)
    raise ValueError(f"No complete reply for intent '{intent.value}'")


def route_request(payload: ChatRequest) -> Intent:
    """A message that is itself a CV document always stays on the chat path."""
    structured = parse_structured_cv_message(payload.message) is not None
    intent = Intent.OPEN_CHAT if structured else classify_intent(payload.message)
    logger.info(json.dumps({"event": "chat_routed", "intent": intent.value, "structured_document": structured}))
    return intent
