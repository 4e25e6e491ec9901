from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any

from career_agent.ai.config import load_ai_config
from career_agent.ai.types import AIClient, ChatMessage
from career_agent.parsing.json_payload import NoStructuredPayload, extract_structured_payload
from career_agent.profile.facts import (
    extract_skills,
    general_location,
    has_meaningful_profile,
    professional_info,
    role_title,
)
from career_agent.profile.sanitize import serialize_profile
from career_agent.schemas.jobs import SearchParameters

logger = logging.getLogger(__name__)

REASONING_SYSTEM_PROMPT = "You are a job search expert. Always respond with valid JSON only."

_CITY = r"[A-ZÀ-Þ][A-Za-zÀ-ÿ'-]+(?:\s+[A-ZÀ-Þ][A-Za-zÀ-ÿ'-]+)*(?:\s*,\s*[A-ZÀ-Þ][A-Za-zÀ-ÿ'-]+)?"
_LOCATION_PATTERNS = (
    re.compile(rf"\b(?:in|near|at|around|for)\s+({_CITY})"),
    re.compile(rf"(?:location|region|area|city|country):\s*({_CITY})", re.IGNORECASE),
)
_LOCATION_PREFIX = re.compile(
    r"^(?:in|near|at|around|for|location|region|area|city|country):?\s*", re.IGNORECASE
)

_ROLE_STOP = r"(?:\s+in\s+[A-Z]|\s+job|\s+position|\s+role|$)"
_ROLE_PATTERNS = (
    re.compile(
        rf"(?:find|search|looking for|want|need)\s+(?:jobs?\s+for\s+(?:a|an)?\s*)?([a-z\s]+?){_ROLE_STOP}",
        re.IGNORECASE,
    ),
    re.compile(rf"(?:find|search|looking for|want|need)\s+(?:a|an)?\s*([a-z\s]+?){_ROLE_STOP}", re.IGNORECASE),
    re.compile(r"(?:as|role|position|job|title):\s*([a-z\s]+)", re.IGNORECASE),
)
_ROLE_FILLER = re.compile(r"\b(?:jobs?|for|a|an|the|in|at|near)\b", re.IGNORECASE)
_ROLE_NOUNS = re.compile(
    r"\b(?:developer|engineer|manager|specialist|analyst|designer|consultant|director|"
    r"coordinator|assistant|executive|officer|representative|technician|administrator|"
    r"supervisor|lead|senior|junior|entry)\b",
    re.IGNORECASE,
)
_SKILLS_PATTERN = re.compile(r"(?:skills|technologies|using|with|know):?\s*([a-z0-9.+#,\s]+)", re.IGNORECASE)
_SKILLS_TAIL = re.compile(r"\s+(?:in|near|at|around)\s+.*$", re.IGNORECASE)
_SKILLS_SPLIT = re.compile(r",|\band\b", re.IGNORECASE)

GENERIC_ROLE_TERM = "job"


@dataclass
class SearchHints:
    query: str | None = None
    location: str | None = None
    skills: list[str] = field(default_factory=list)


def extract_location(message: str) -> str | None:
    """Location cue in the message; later mentions override earlier ones."""
    for pattern in _LOCATION_PATTERNS:
        matches = list(pattern.finditer(message or ""))
        if not matches:
            continue
        location = _LOCATION_PREFIX.sub("", matches[-1].group(1).strip()).strip()
        if location:
            return location
    return None


def extract_role(message: str) -> str | None:
    for pattern in _ROLE_PATTERNS:
        match = pattern.search(message or "")
        if not match or not match.group(1):
            continue
        query = " ".join(_ROLE_FILLER.sub(" ", match.group(1)).split())
        if len(query) > 2:
            return query
    return None


def extract_message_skills(message: str) -> list[str]:
    match = _SKILLS_PATTERN.search(message or "")
    if not match:
        return []
    raw = _SKILLS_TAIL.sub("", match.group(1))
    return [part.strip() for part in _SKILLS_SPLIT.split(raw) if part.strip()]


def extract_search_hints(message: str) -> SearchHints:
    hints = SearchHints(
        query=extract_role(message),
        location=extract_location(message),
        skills=extract_message_skills(message),
    )
    if hints.location and hints.query and hints.location.casefold() in hints.query.casefold():
        # "looking for Senior Developer" reads the capitalized role as a place
        hints.location = None
    if hints.location and not hints.query:
        noun = _ROLE_NOUNS.search(message or "")
        hints.query = noun.group(0).lower() if noun else GENERIC_ROLE_TERM
    logger.debug("search_hints_extracted query=%s location=%s skills=%s", hints.query, hints.location, hints.skills)
    return hints


def build_reasoning_messages(message: str, profile: dict[str, Any] | None) -> list[ChatMessage]:
    info = professional_info(profile)
    profile_text = serialize_profile(info, indent=None) if info else "None"
    prompt = f"""You are an intelligent job search assistant. Analyze the user's request and extract relevant information for job searching.

USER REQUEST: "{message}"

CANDIDATE PROFILE AVAILABLE: {profile_text}

TASK: Extract and reason about the job search parameters. Consider:
1. What job title/role is the user looking for?
2. What location (city, region, country)?
3. What skills or requirements are mentioned?
4. If a candidate profile exists, what relevant information can be used?
5. Generate optimal search queries (primary and alternatives)

Respond with JSON only:
{{
  "jobTitle": "extracted or inferred job title",
  "location": "extracted location or null",
  "skills": ["skill1", "skill2"],
  "searchQueries": [
    "primary search query",
    "alternative query 1 (broader)",
    "alternative query 2 (more specific)"
  ],
  "reasoning": "brief explanation of your reasoning",
  "useCandidateProfile": true,
  "hasEnoughInfo": true
}}"""
    return [
        ChatMessage(role="system", content=REASONING_SYSTEM_PROMPT),
        ChatMessage(role="user", content=prompt),
    ]


def _text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    if not text or text.lower() in {"null", "none"}:
        return None
    return text


def _text_list(value: Any) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [item for item in (_text(entry) for entry in value) if item]


def parse_reasoning_reply(raw: str) -> SearchParameters | None:
    """Parameters from a reasoning reply, or None when it carries no usable signal."""
    payload = extract_structured_payload(raw)
    if isinstance(payload, NoStructuredPayload):
        logger.warning("search_reasoning_unparseable reason=%s", payload.reason)
        return None

    params = SearchParameters(
        job_title=_text(payload.get("jobTitle")),
        location=_text(payload.get("location")),
        skills=_text_list(payload.get("skills")),
        search_queries=_text_list(payload.get("searchQueries")),
        reasoning=_text(payload.get("reasoning")),
        use_candidate_profile=bool(payload.get("useCandidateProfile", payload.get("useCVData", False))),
        has_enough_info=bool(payload.get("hasEnoughInfo", False)),
    )
    if not params.job_title and not params.skills:
        logger.info("search_reasoning_without_signal")
        return None
    return params


def params_from_hints(hints: SearchHints, *, location: str | None = None) -> SearchParameters:
    resolved_location = hints.location or location
    return SearchParameters(
        job_title=hints.query,
        location=resolved_location,
        skills=hints.skills,
        search_queries=[hints.query] if hints.query else [],
        has_enough_info=bool(hints.query or resolved_location),
    )


def apply_profile_fallback(params: SearchParameters, profile: dict[str, Any] | None) -> SearchParameters:
    if params.usable_queries or not has_meaningful_profile(profile):
        return params

    title = role_title(profile)
    skills = extract_skills(profile)
    if not title and not skills:
        return params

    return params.model_copy(
        update={
            "job_title": title or " ".join(skills[:2]),
            "location": params.location or general_location(profile) or None,
            "search_queries": [title or " ".join(skills[:3])],
            "use_candidate_profile": True,
            "has_enough_info": True,
        }
    )


def finalize_parameters(params: SearchParameters) -> SearchParameters:
    if params.usable_queries:
        return params.model_copy(update={"search_queries": params.usable_queries})
    if params.has_enough_info:
        return params.model_copy(update={"search_queries": [params.job_title or GENERIC_ROLE_TERM]})
    return params


async def extract_search_parameters(
    message: str,
    profile: dict[str, Any] | None = None,
    *,
    ai_client: AIClient | None = None,
) -> SearchParameters:
    """Resolve search parameters for one request.

    The reasoning call is tried first; any failure falls back to the regex
    hints and then to the candidate profile. A result without usable queries
    means there is not enough information to search.
    """
    messages = build_reasoning_messages(message, profile)

    params: SearchParameters | None = None
    if ai_client is not None:
        try:
            raw = await ai_client.complete(messages, temperature=load_ai_config().reasoning_temperature)
            params = parse_reasoning_reply(raw)
        except Exception as exc:  # noqa: BLE001 - regex fallback is expected
            logger.warning("search_reasoning_failed: %s", exc)

    if params is None:
        params = params_from_hints(extract_search_hints(message), location=None)
    else:
        logger.info(
            json.dumps(
                {
                    "event": "search_reasoning",
                    "job_title": params.job_title,
                    "location": params.location,
                    "queries": params.search_queries,
                }
            )
        )

    if not params.has_enough_info and not params.usable_queries:
        params = apply_profile_fallback(params, profile)

    return finalize_parameters(params)
