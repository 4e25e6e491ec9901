from __future__ import annotations

from typing import Any

from career_agent.core.scoring import get_ranking_weights
from career_agent.profile.facts import extract_skills, has_meaningful_profile, latest_role_title
from career_agent.schemas.jobs import JobListing, RankedJobListing

NO_PROFILE_REASON = "Based on your search criteria"
GENERIC_REASON = "Based on common industry requirements"


def match_reason(matched_skills: list[str], role: str) -> str:
    preview_size = get_ranking_weights().reason_skill_preview
    if matched_skills:
        preview = ", ".join(matched_skills[:preview_size])
        ellipsis = "..." if len(matched_skills) > preview_size else ""
        return f"Matches {len(matched_skills)} of your skills: {preview}{ellipsis}"
    if role:
        return f"Related to your experience as {role}"
    return GENERIC_REASON


def score_listing(listing: JobListing, skills: list[str], role: str) -> RankedJobListing:
    text = f"{listing.title} {listing.description}".lower()
    matched = [skill for skill in skills if skill.lower() in text]

    weights = get_ranking_weights()
    score = weights.base_score + weights.skill_bonus * len(matched)
    if role and role.lower() in text:
        score += weights.title_bonus
    score = weights.clamp(score)

    return RankedJobListing(
        **listing.model_dump(),
        match_score=score,
        match_reason=match_reason(matched, role),
        keyword_matches=matched[: weights.max_keyword_matches],
    )


def rank_listings(listings: list[JobListing], profile: dict[str, Any] | None) -> list[RankedJobListing]:
    """Score listings against the profile, highest first; ties keep input order."""
    if not has_meaningful_profile(profile):
        neutral = get_ranking_weights().neutral_score
        return [
            RankedJobListing(**listing.model_dump(), match_score=neutral, match_reason=NO_PROFILE_REASON)
            for listing in listings
        ]

    skills = extract_skills(profile)
    role = latest_role_title(profile)
    ranked = [score_listing(listing, skills, role) for listing in listings]
    return sorted(ranked, key=lambda item: item.match_score, reverse=True)
