from __future__ import annotations

import logging
from typing import Protocol

from career_agent.schemas.jobs import JobListing, SearchOutcome, SearchParameters, SearchStrategy

logger = logging.getLogger(__name__)

_INSIGNIFICANT_WORDS = {
    "senior",
    "junior",
    "medior",
    "lead",
    "principal",
    "staff",
    "head",
    "chief",
    "entry",
    "level",
    "intern",
    "trainee",
    "jobs",
    "job",
    "role",
    "position",
    "with",
    "and",
    "for",
    "the",
}


class ListingSearcher(Protocol):
    async def search(
        self, query: str, location: str | None = None, *, fallback_permitted: bool = False
    ) -> list[JobListing]: ...


def most_significant_word(role: str | None) -> str | None:
    """Longest word of a role term once seniority and filler words are removed."""
    words = [
        word.strip(".,;:()/")
        for word in (role or "").split()
    ]
    candidates = [word for word in words if len(word) > 3 and word.lower() not in _INSIGNIFICANT_WORDS]
    if not candidates:
        return None
    return max(candidates, key=len)


def build_strategies(params: SearchParameters) -> list[SearchStrategy]:
    """Ordered waterfall of search attempts for one set of parameters."""
    queries = params.usable_queries
    location = params.location or None
    strategies = [
        SearchStrategy(query=query, location=location, label=f"query-{index + 1}")
        for index, query in enumerate(queries)
    ]

    role = params.job_title or (queries[0] if queries else None)
    broadened = most_significant_word(role)
    if broadened:
        strategies.append(
            SearchStrategy(query=broadened, location=location, fallback_permitted=True, label="broadened")
        )

    if location:
        strategies.extend(
            SearchStrategy(query=query, location=None, fallback_permitted=True, label="without-location")
            for query in queries[:2]
        )
    return strategies


async def run_strategies(strategies: list[SearchStrategy], client: ListingSearcher) -> SearchOutcome:
    attempted: list[SearchStrategy] = []
    for strategy in strategies:
        attempted.append(strategy)
        listings = await client.search(
            strategy.query,
            strategy.location,
            fallback_permitted=strategy.fallback_permitted,
        )
        logger.info(
            "search_strategy label=%s query=%s location=%s found=%s",
            strategy.label,
            strategy.query,
            strategy.location,
            len(listings),
        )
        if listings:
            return SearchOutcome(listings=listings, strategy=strategy, attempted=attempted)
    return SearchOutcome(listings=[], strategy=None, attempted=attempted)
