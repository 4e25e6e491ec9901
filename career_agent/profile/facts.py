from __future__ import annotations

from typing import Any

Profile = dict[str, Any]


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        key = item.casefold()
        if item and key not in seen:
            seen.add(key)
            out.append(item)
    return out


def _skill_name(skill: Any) -> str:
    if isinstance(skill, dict):
        return _clean(skill.get("name") or skill.get("skill"))
    return _clean(skill)


def extract_skills(profile: Profile | None) -> list[str]:
    """Collect skills from every shape the editor has stored them in."""
    if not profile:
        return []

    skills: list[str] = []
    technical = profile.get("technicalSkills")
    if isinstance(technical, str):
        skills.extend(part.strip() for part in technical.split(","))

    raw_skills = profile.get("skills")
    if isinstance(raw_skills, list):
        skills.extend(_skill_name(skill) for skill in raw_skills)
    elif isinstance(raw_skills, dict):
        for group in ("technical", "tools"):
            values = raw_skills.get(group)
            if isinstance(values, list):
                skills.extend(_skill_name(skill) for skill in values)
    elif isinstance(raw_skills, str):
        skills.extend(part.strip() for part in raw_skills.split(","))

    return _dedupe(skills)


def experience_entries(profile: Profile | None) -> list[dict[str, Any]]:
    if not profile:
        return []
    entries = profile.get("experience")
    if not isinstance(entries, list):
        return []
    return [entry for entry in entries if isinstance(entry, dict)]


def latest_role_title(profile: Profile | None) -> str:
    entries = experience_entries(profile)
    if entries:
        title = _clean(entries[0].get("title") or entries[0].get("position"))
        if title:
            return title
    return ""


def headline(profile: Profile | None) -> str:
    if not profile:
        return ""
    return _clean(profile.get("title") or profile.get("professionalHeadline"))


def role_title(profile: Profile | None) -> str:
    return latest_role_title(profile) or headline(profile)


def full_name(profile: Profile | None) -> str:
    if not profile:
        return ""
    name = _clean(profile.get("fullName"))
    if name:
        return name
    personal = profile.get("personalInfo")
    if isinstance(personal, dict):
        parts = [_clean(personal.get("firstName")), _clean(personal.get("lastName"))]
        return " ".join(part for part in parts if part) or _clean(personal.get("name"))
    return ""


def general_location(profile: Profile | None) -> str:
    """City or region only, never a full address."""
    if not profile:
        return ""
    contact = profile.get("contact")
    location = _clean(contact.get("location")) if isinstance(contact, dict) else ""
    if location:
        return location.split(",")[0].strip()
    return _clean(profile.get("targetRegion"))


def has_meaningful_profile(profile: Profile | None) -> bool:
    if not profile:
        return False
    return bool(role_title(profile) or extract_skills(profile) or experience_entries(profile))


def professional_info(profile: Profile | None) -> dict[str, Any]:
    if not profile:
        return {}
    return {
        "title": headline(profile) or None,
        "experience": [
            {"title": _clean(entry.get("title") or entry.get("position")), "company": _clean(entry.get("company"))}
            for entry in experience_entries(profile)[:3]
        ],
        "skills": extract_skills(profile),
        "location": general_location(profile) or None,
    }
