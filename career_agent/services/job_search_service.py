from __future__ import annotations

import json
import logging
import time
from typing import Any

from career_agent.ai.types import AIClient
from career_agent.jobs.adzuna import JobSearchClient
from career_agent.jobs.params import extract_search_parameters
from career_agent.jobs.ranking import rank_listings
from career_agent.jobs.search import ListingSearcher, build_strategies, run_strategies
from career_agent.profile.facts import has_meaningful_profile
from career_agent.profile.sanitize import sanitize_profile, serialize_profile
from career_agent.schemas.chat import JobSearchReply
from career_agent.schemas.jobs import RankedJobListing, SearchOutcome, SearchParameters

logger = logging.getLogger("career_agent.jobs")

INSUFFICIENT_INFO_MESSAGE = (
    "I need more information to search for jobs. Please either:\n\n"
    "1. **Share your CV** with your skills and job title, or\n"
    "2. **Tell me what you're looking for**, for example:\n"
    '   - "Find software developer jobs in Amsterdam"\n'
    '   - "Search for marketing manager positions in London"\n'
    '   - "Find jobs using Python and React in Berlin"\n\n'
    "What type of job are you looking for, and in what location?"
)


def success_message(jobs: list[RankedJobListing], params: SearchParameters, with_profile: bool) -> str:
    location_info = f" in {params.location}" if params.location else ""
    skill_info = f" based on your {len(params.skills)} skills" if with_profile and params.skills else ""
    lines = [f"Great news! I found **{len(jobs)} job opportunities**{location_info}{skill_info}!"]
    if with_profile and jobs:
        lines.append(
            "I've analyzed each position and ranked them by relevance. "
            f"The top match has a **{jobs[0].match_score}% compatibility score**."
        )
    lines.append(
        "**How to use the job board:**\n"
        "- Save the jobs you like\n"
        "- Skip the ones that don't fit\n"
        "- Open the link to view the full job listing\n"
        "- Use Quick Apply to start your application"
    )
    lines.append("Take your time reviewing each opportunity!")
    return "\n\n".join(lines)


def no_results_message(params: SearchParameters, outcome: SearchOutcome) -> str:
    suggestions = []
    if params.location:
        suggestions.append("- Try searching in nearby cities or regions")
        suggestions.append("- Consider remote or hybrid positions")
    title_words = (params.job_title or "").split()
    if len(title_words) > 2:
        suggestions.append(f'- Try a more general job title (e.g., "{title_words[0]}")')
    suggestions.append("- Share your CV so I can search based on your actual skills and experience")

    searched = params.job_title or (outcome.attempted[0].query if outcome.attempted else "jobs")
    location_info = f" in {params.location}" if params.location else ""
    return (
        f'I searched for "{searched}"{location_info} but couldn\'t find any matches right now.\n\n'
        f"**Suggestions:**\n" + "\n".join(suggestions) + "\n\n"
        "Would you like to try a different search, or share your CV for a more personalized job search?"
    )


async def run_job_search(
    message: str,
    profile: dict[str, Any] | None = None,
    *,
    ai_client: AIClient | None = None,
    search_client: ListingSearcher | None = None,
) -> JobSearchReply:
    """Extract parameters, run the search waterfall and rank what it finds."""
    started_at = time.perf_counter()
    serialize_profile(sanitize_profile(profile))
    params = await extract_search_parameters(message, profile, ai_client=ai_client)
    if not params.usable_queries:
        logger.info(json.dumps({"event": "job_search_insufficient_info"}))
        return JobSearchReply(response=INSUFFICIENT_INFO_MESSAGE, jobs=[])

    strategies = build_strategies(params)
    outcome = await run_strategies(strategies, search_client or JobSearchClient())

    with_profile = has_meaningful_profile(profile)
    jobs = rank_listings(outcome.listings, profile)
    logger.info(
        json.dumps(
            {
                "event": "job_search_complete",
                "queries": params.usable_queries,
                "location": params.location,
                "strategy": outcome.strategy.label if outcome.strategy else None,
                "attempts": len(outcome.attempted),
                "found": len(jobs),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )

    if not jobs:
        return JobSearchReply(response=no_results_message(params, outcome), jobs=[])
    return JobSearchReply(response=success_message(jobs, params, with_profile), jobs=jobs)
