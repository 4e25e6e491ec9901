from __future__ import annotations

from career_agent.schemas.jobs import JobListing

_DEMO_URL = "https://www.adzuna.com"


def _topic(query: str) -> str:
    words = [word for word in (query or "").split() if len(word) > 2]
    return " ".join(word.capitalize() for word in words) or "Software"


def placeholder_listings(query: str, location: str | None = None) -> list[JobListing]:
    """Clearly labelled demo listings, only used when demo mode is switched on."""
    topic = _topic(query)
    return [
        JobListing(
            id="demo-1",
            title=f"Senior {topic} Developer",
            company="TechCorp International",
            location="Remote / Hybrid",
            description=(
                f"We are looking for an experienced {topic} developer to join our growing team. "
                "Work on modern products with a distributed team. Remote work available."
            ),
            url=_DEMO_URL,
            salary="$120k - $160k",
            remote=True,
            posted_date="2 days ago",
            source="demo",
        ),
        JobListing(
            id="demo-2",
            title=f"{topic} Engineer",
            company="Innovation Labs",
            location=location or "Amsterdam, Netherlands",
            description=(
                f"Join our engineering team as a {topic} engineer. "
                "You will design, build and maintain services used by thousands of customers."
            ),
            url=_DEMO_URL,
            salary="€80k - €100k",
            remote=False,
            posted_date="1 week ago",
            source="demo",
        ),
        JobListing(
            id="demo-3",
            title=f"Lead {topic} Architect",
            company="Digital Solutions Inc",
            location="London, UK",
            description=(
                f"Lead the {topic} architecture of our platform and mentor a team of engineers. "
                "Hybrid setup with work from home days."
            ),
            url=_DEMO_URL,
            salary="£90k - £120k",
            remote=True,
            posted_date="3 days ago",
            source="demo",
        ),
    ]
