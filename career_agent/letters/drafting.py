from __future__ import annotations

import json
import logging
from typing import Any

from career_agent.ai.config import load_ai_config
from career_agent.ai.types import AIClient, ChatMessage
from career_agent.letters.prompts import build_letter_prompt
from career_agent.letters.templates import SIGNATURE_PLACEHOLDERS, fallback_draft
from career_agent.parsing.json_payload import NoStructuredPayload, extract_structured_payload
from career_agent.profile.facts import full_name
from career_agent.profile.sanitize import sanitize_profile, serialize_profile
from career_agent.routing.intent import detect_language
from career_agent.routing.locales import BASE_LANGUAGE
from career_agent.schemas.letter import LetterDraft

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("opening", "body", "closing")
_OPTIONAL_FIELDS = {
    "recipientName": "recipient_name",
    "recipientTitle": "recipient_title",
    "companyName": "company_name",
    "companyAddress": "company_address",
    "jobTitle": "job_title",
}


def resolve_language(message: str, preferred: str | None = None) -> str:
    """Language cue in the message first, then the caller's preference."""
    detected = detect_language(message)
    if detected != BASE_LANGUAGE:
        return detected
    return preferred or BASE_LANGUAGE


def _field(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _is_placeholder_signature(value: str) -> bool:
    stripped = value.strip()
    return stripped.lower() in SIGNATURE_PLACEHOLDERS or (stripped.startswith("[") and stripped.endswith("]"))


def merge_letter_payload(payload: dict[str, Any], fallback: LetterDraft, name: str) -> LetterDraft:
    """Parsed values win; missing text fields come from the fallback draft."""
    values: dict[str, Any] = {
        field: _field(payload, field) or getattr(fallback, field) for field in _TEXT_FIELDS
    }
    for wire_key, attribute in _OPTIONAL_FIELDS.items():
        values[attribute] = _field(payload, wire_key)

    signature = _field(payload, "signature")
    if not signature or (name and _is_placeholder_signature(signature)):
        signature = name or fallback.signature
    values["signature"] = signature
    values["detected_language"] = fallback.detected_language
    return LetterDraft(**values)


async def draft_letter(
    message: str,
    profile: dict[str, Any] | None = None,
    *,
    ai_client: AIClient | None = None,
    language: str | None = None,
) -> LetterDraft:
    """Draft a cover letter in the language of the request.

    The candidate's name is read from the raw profile for the signature only;
    the model sees the sanitized profile. Generation failures and unparseable
    replies fall back to the static draft for the detected language.
    """
    code = resolve_language(message, language)
    name = full_name(profile)
    fallback = fallback_draft(code, profile, name)

    profile_text = serialize_profile(sanitize_profile(profile))
    if ai_client is None:
        logger.info("letter_fallback reason=no_client language=%s", code)
        return fallback

    prompt = build_letter_prompt(message, profile_text, code)
    try:
        raw = await ai_client.complete(
            [ChatMessage(role="user", content=prompt)],
            temperature=load_ai_config().writing_temperature,
        )
    except Exception as exc:  # noqa: BLE001 - static draft replaces any generation failure
        logger.warning("letter_generation_failed language=%s: %s", code, exc)
        return fallback

    payload = extract_structured_payload(raw)
    if isinstance(payload, NoStructuredPayload):
        logger.warning("letter_fallback reason=%s language=%s", payload.reason, code)
        return fallback

    draft = merge_letter_payload(payload, fallback, name)
    logger.info(json.dumps({"event": "letter_drafted", "language": code, "company": draft.company_name}))
    return draft
