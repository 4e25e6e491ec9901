"""Privacy filter and serialization of candidate profiles for model prompts.

Personal identifiers (name, contact details, social links, photos, pronouns,
work authorization, availability) never leave the service. Professional
content (headline, skills, experience, education, projects) is kept.
"""
from __future__ import annotations

import copy
import json
import logging
from typing import Any

from career_agent.core.config import settings
from career_agent.core.errors import ProfileSerializationError

logger = logging.getLogger(__name__)

PERSONAL_FIELDS = (
    "fullName",
    "preferredName",
    "pronouns",
    "contact",
    "social",
    "photos",
    "photo",
    "photoUrl",
    "personalInfo",
    "workAuthorization",
    "availability",
)

TRUNCATION_MARKER = "\n... (truncated)"


def sanitize_profile(profile: dict[str, Any] | None) -> dict[str, Any] | None:
    if not profile:
        return None

    sanitized = copy.deepcopy(profile)
    for field_name in PERSONAL_FIELDS:
        sanitized.pop(field_name, None)

    experience = sanitized.get("experience")
    if isinstance(experience, list):
        sanitized["experience"] = [
            {key: value for key, value in entry.items() if key != "location"}
            if isinstance(entry, dict)
            else entry
            for entry in experience
        ]

    education = sanitized.get("education")
    if isinstance(education, list):
        sanitized["education"] = [
            {
                "institution": entry.get("institution") or entry.get("school"),
                "degree": entry.get("degree"),
                "field": entry.get("field"),
                "year": entry.get("year") or entry.get("graduationYear"),
            }
            if isinstance(entry, dict)
            else entry
            for entry in education
        ]
    return sanitized


def serialize_profile(profile: dict[str, Any] | None, *, indent: int | None = 2) -> str:
    """Serialize a profile for an outbound request.

    Raises ProfileSerializationError before any external call when the profile
    cannot be encoded or exceeds PROFILE_MAX_CHARS.
    """
    if not profile:
        return ""
    try:
        encoded = json.dumps(profile, ensure_ascii=False, indent=indent, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ProfileSerializationError(f"Candidate profile is not serializable: {exc}") from exc

    if len(encoded) > settings.profile_max_chars:
        raise ProfileSerializationError(
            f"Candidate profile is too large ({len(encoded)} characters, "
            f"limit {settings.profile_max_chars}).",
            code="profile_too_large",
        )
    return encoded


def cap_context(text: str, max_chars: int | None = None) -> str:
    limit = settings.profile_context_max_chars if max_chars is None else max_chars
    if len(text) <= limit:
        return text
    logger.info("profile_context_truncated chars=%s limit=%s", len(text), limit)
    return text[:limit] + TRUNCATION_MARKER
