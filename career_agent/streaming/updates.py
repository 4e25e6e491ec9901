"""Normalization of document field updates proposed by the model.

The editor has stored the same concepts under several names over time
(``position`` vs ``title``, ``achievements`` vs ``content``, skill objects vs
plain strings). Everything is coerced into one canonical shape; fields that
are absent or empty are omitted rather than defaulted.
"""
from __future__ import annotations

import json
import re
from typing import Any

_SCALAR_FIELDS = ("fullName", "professionalHeadline", "title", "summary")
_CONTACT_FIELDS = ("email", "phone", "location")
_SOCIAL_FIELDS = ("linkedin", "github", "website", "portfolio")
_STRUCTURED_CV_KEYS = ("personalInfo", "experience", "education", "skills", "fullName", "summary")
_SENTENCE_SPLIT = re.compile(r"\.\s+")


def _text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def _first_text(entry: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        text = _text(entry.get(key))
        if text:
            return text
    return None


def _compact(mapping: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in mapping.items() if value not in (None, "", [], {})}


def _named(item: Any, *keys: str) -> str | None:
    if isinstance(item, dict):
        return _first_text(item, *keys)
    return _text(item)


def _text_items(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [text for text in (_text(item) for item in value) if text]


def _normalize_experience(entry: dict[str, Any]) -> dict[str, Any]:
    content = entry.get("achievements") if isinstance(entry.get("achievements"), list) else entry.get("content")
    return _compact(
        {
            "title": _first_text(entry, "title", "position"),
            "company": _first_text(entry, "company", "organization"),
            "location": _text(entry.get("location")),
            "dates": _text(entry.get("dates")),
            "current": entry.get("current") if isinstance(entry.get("current"), bool) else None,
            "content": _text_items(content),
        }
    )


def _normalize_education(entry: dict[str, Any]) -> dict[str, Any]:
    return _compact(
        {
            "degree": _first_text(entry, "degree", "title"),
            "field": _text(entry.get("field")),
            "institution": _first_text(entry, "institution", "school", "university"),
            "location": _text(entry.get("location")),
            "dates": _text(entry.get("dates")),
            "content": _text_items(entry.get("content")),
        }
    )


def _normalize_language(item: Any) -> str | None:
    if isinstance(item, dict):
        name = _first_text(item, "language", "name")
        level = _first_text(item, "proficiency", "level")
        if name and level:
            return f"{name} ({level})"
        return name
    return _text(item)


def _entries(value: Any, normalize) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [entry for entry in (normalize(item) for item in value if isinstance(item, dict)) if entry]


def normalize_cv_updates(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        return {}

    result: dict[str, Any] = {}
    for key in _SCALAR_FIELDS:
        text = _text(data.get(key))
        if text:
            result[key] = text

    for key, fields in (("contact", _CONTACT_FIELDS), ("social", _SOCIAL_FIELDS)):
        group = data.get(key)
        if isinstance(group, dict):
            compacted = _compact({name: _text(group.get(name)) for name in fields})
            if compacted:
                result[key] = compacted

    experience = _entries(data.get("experience"), _normalize_experience)
    if experience:
        result["experience"] = experience

    education = _entries(data.get("education"), _normalize_education)
    if education:
        result["education"] = education

    for key, convert in (
        ("skills", lambda item: _named(item, "name", "skill")),
        ("languages", _normalize_language),
        ("hobbies", lambda item: _named(item, "name")),
    ):
        values = data.get(key)
        if isinstance(values, list):
            items = [text for text in (convert(item) for item in values) if text]
            if items:
                result[key] = items

    technical = _text(data.get("technicalSkills"))
    if technical:
        result["technicalSkills"] = technical

    for key in ("template", "layout"):
        if data.get(key) not in (None, "", {}):
            result[key] = data[key]
    return result


def _date_range(entry: dict[str, Any], *, allow_current: bool) -> str | None:
    start = _text(entry.get("startDate"))
    end = _text(entry.get("endDate"))
    if start and end:
        return f"{start} - {end}"
    if start and allow_current and entry.get("current"):
        return f"{start} - Present"
    return start or _text(entry.get("dates"))


def _description_points(description: str) -> list[str]:
    if ". " in description and len(description) > 100:
        return [f"{part.strip().rstrip('.')}." for part in _SENTENCE_SPLIT.split(description) if part.strip()]
    return [description]


def _reshape_structured_experience(entry: dict[str, Any]) -> dict[str, Any]:
    reshaped = dict(entry)
    reshaped["dates"] = _date_range(entry, allow_current=True)
    description = _text(entry.get("description"))
    if description:
        reshaped["content"] = _description_points(description)
        reshaped.pop("achievements", None)
    return reshaped


def _reshape_structured_education(entry: dict[str, Any]) -> dict[str, Any]:
    reshaped = dict(entry)
    reshaped["dates"] = _date_range(entry, allow_current=False)
    content = [f"GPA: {entry['gpa']}"] if _text(entry.get("gpa")) else []
    reshaped["content"] = content + _text_items(entry.get("content"))
    return reshaped


def parse_structured_cv_message(message: str) -> dict[str, Any] | None:
    """Updates for a message that is itself a CV document in JSON, else None."""
    text = (message or "").strip()
    if not text.startswith("{"):
        return None
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, dict) or not any(parsed.get(key) for key in _STRUCTURED_CV_KEYS):
        return None

    document = dict(parsed)
    personal = parsed.get("personalInfo")
    if isinstance(personal, dict):
        name = " ".join(
            part for part in (_text(personal.get("firstName")), _text(personal.get("lastName"))) if part
        )
        document.setdefault("fullName", name or _text(personal.get("name")))
        document.setdefault("contact", {key: personal.get(key) for key in _CONTACT_FIELDS})
        document.setdefault("social", {key: personal.get(key) for key in _SOCIAL_FIELDS})

    if isinstance(parsed.get("experience"), list):
        document["experience"] = [
            _reshape_structured_experience(entry) if isinstance(entry, dict) else entry
            for entry in parsed["experience"]
        ]
    if isinstance(parsed.get("education"), list):
        document["education"] = [
            _reshape_structured_education(entry) if isinstance(entry, dict) else entry
            for entry in parsed["education"]
        ]
    return normalize_cv_updates(document)
