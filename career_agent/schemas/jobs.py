from __future__ import annotations

from typing import Literal

from pydantic import Field

from career_agent.schemas.base import WireModel

ListingSource = Literal["adzuna", "demo"]


class SearchParameters(WireModel):
    job_title: str | None = None
    location: str | None = None
    skills: list[str] = Field(default_factory=list)
    search_queries: list[str] = Field(default_factory=list)
    reasoning: str | None = None
    use_candidate_profile: bool = False
    has_enough_info: bool = False

    @property
    def usable_queries(self) -> list[str]:
        return [query.strip() for query in self.search_queries if query and query.strip()]


class JobListing(WireModel):
    id: str
    title: str
    company: str
    location: str
    description: str = ""
    url: str = ""
    salary: str | None = None
    remote: bool = False
    posted_date: str | None = None
    source: ListingSource = "adzuna"


class RankedJobListing(JobListing):
    match_score: int = Field(ge=0, le=100)
    match_reason: str
    keyword_matches: list[str] = Field(default_factory=list, max_length=8)


class SearchStrategy(WireModel):
    query: str
    location: str | None = None
    fallback_permitted: bool = False
    label: str = "primary"


class SearchOutcome(WireModel):
    listings: list[JobListing] = Field(default_factory=list)
    strategy: SearchStrategy | None = None
    attempted: list[SearchStrategy] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.listings)
