"""Async client for the Adzuna job search API.

Every failure mode (missing credentials, transport errors, non-success status,
unexpected payloads) degrades to an empty result. Demo listings are returned
instead only when the caller's strategy permits it and demo mode is enabled.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from career_agent.core.config import settings
from career_agent.jobs.placeholders import placeholder_listings
from career_agent.schemas.jobs import JobListing

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "us"

COUNTRY_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("nl", ("netherlands", "the netherlands", "holland", "nederland")),
    ("de", ("germany", "deutschland")),
    ("gb", ("uk", "united kingdom", "england", "scotland", "wales", "great britain")),
    ("fr", ("france",)),
    ("be", ("belgium", "belgië", "belgique")),
    ("es", ("spain", "españa")),
    ("it", ("italy", "italia")),
    ("ca", ("canada",)),
    ("au", ("australia",)),
    ("in", ("india",)),
    ("us", ("usa", "united states", "america")),
)

CITY_COUNTRIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("nl", ("amsterdam", "rotterdam", "utrecht", "the hague", "den haag", "eindhoven", "breda", "groningen", "tilburg")),
    ("de", ("berlin", "munich", "münchen", "hamburg", "frankfurt", "cologne", "köln", "stuttgart", "düsseldorf")),
    ("gb", ("london", "manchester", "birmingham", "edinburgh", "glasgow", "bristol", "leeds")),
    ("fr", ("paris", "lyon", "marseille", "toulouse", "lille")),
    ("be", ("brussels", "bruxelles", "antwerp", "antwerpen", "ghent", "gent")),
    ("es", ("madrid", "barcelona", "valencia", "seville", "sevilla")),
    ("it", ("rome", "roma", "milan", "milano", "turin")),
    ("ca", ("toronto", "vancouver", "montreal", "ottawa", "calgary")),
    ("au", ("sydney", "melbourne", "brisbane", "perth")),
    ("in", ("bangalore", "bengaluru", "mumbai", "delhi", "hyderabad", "pune")),
    ("us", ("new york", "san francisco", "seattle", "chicago", "boston", "austin")),
)

_REMOTE_PATTERN = re.compile(r"remote|work from home|wfh", re.IGNORECASE)


def _mentions(text: str, term: str) -> bool:
    return re.search(rf"(?<!\w){re.escape(term)}(?!\w)", text) is not None


def country_code_for(location: str | None) -> str:
    """Adzuna country code for a free-text location; country names win over cities."""
    text = (location or "").strip().lower()
    if not text:
        return DEFAULT_COUNTRY
    for table in (COUNTRY_ALIASES, CITY_COUNTRIES):
        for code, names in table:
            if any(_mentions(text, name) for name in names):
                return code
    return DEFAULT_COUNTRY


def narrow_location(location: str | None) -> str | None:
    if not location:
        return None
    narrowed = location.split(",")[0].strip()
    return narrowed or None


def _salary_amount(value: float) -> str:
    if value >= 1000:
        return f"${int(value / 1000 + 0.5)}k"
    return f"${int(value + 0.5)}"


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    return None


def format_salary(salary_min: Any, salary_max: Any) -> str | None:
    low = _as_number(salary_min)
    high = _as_number(salary_max)
    if low and high:
        return f"{_salary_amount(low)} - {_salary_amount(high)}"
    if low:
        return f"From {_salary_amount(low)}"
    return None


def _parse_created(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_posted_date(created: Any, now: datetime | None = None) -> str | None:
    posted = _parse_created(created)
    if posted is None:
        return None
    current = now or datetime.now(timezone.utc)
    days = max((current - posted).days, 0)
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return _plural(days, "day")
    if days < 30:
        return _plural(days // 7, "week")
    return _plural(days // 30, "month")


def _display_name(value: Any) -> str:
    if isinstance(value, dict):
        return str(value.get("display_name") or "").strip()
    return ""


def normalize_listing(raw: dict[str, Any], now: datetime | None = None) -> JobListing | None:
    raw_id = raw.get("id")
    title = str(raw.get("title") or "").strip()
    if raw_id in (None, "") or not title:
        return None

    description = str(raw.get("description") or "").strip()
    return JobListing(
        id=f"adzuna-{raw_id}",
        title=title,
        company=_display_name(raw.get("company")) or "Company",
        location=_display_name(raw.get("location")) or "Remote",
        description=description,
        url=str(raw.get("redirect_url") or ""),
        salary=format_salary(raw.get("salary_min"), raw.get("salary_max")),
        remote=bool(_REMOTE_PATTERN.search(description)),
        posted_date=format_posted_date(raw.get("created"), now),
        source="adzuna",
    )


def _redacted_url(url: str, params: dict[str, str]) -> str:
    safe = {key: ("***" if key == "app_key" else value) for key, value in params.items()}
    return str(httpx.URL(url, params=safe))


class JobSearchClient:
    def __init__(
        self,
        *,
        app_id: str | None = None,
        app_key: str | None = None,
        base_url: str | None = None,
        results_per_page: int | None = None,
        timeout_s: float | None = None,
        max_attempts: int | None = None,
        retry_wait_s: float = 0.5,
        demo_enabled: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        board = settings.job_board
        self._app_id = app_id if app_id is not None else board.app_id
        self._app_key = app_key if app_key is not None else board.api_key
        self._base_url = (base_url or board.base_url).rstrip("/")
        self._results_per_page = results_per_page or board.results_per_page
        self._timeout_s = timeout_s or board.timeout_s
        self._max_attempts = max(1, max_attempts or board.max_attempts)
        self._retry_wait_s = retry_wait_s
        self._demo_enabled = board.demo_listings if demo_enabled is None else demo_enabled
        self._transport = transport
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def configured(self) -> bool:
        return bool(self._app_id and self._app_key)

    def _degrade(self, query: str, location: str | None, fallback_permitted: bool) -> list[JobListing]:
        if fallback_permitted and self._demo_enabled:
            logger.info("adzuna_demo_listings query=%s", query)
            return placeholder_listings(query, location)
        return []

    async def _get_json(self, url: str, params: dict[str, str]) -> Any:
        async with httpx.AsyncClient(
            timeout=self._timeout_s,
            transport=self._transport,
            headers={"Accept": "application/json"},
        ) as client:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=self._retry_wait_s, max=4),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()

    async def search(
        self,
        query: str,
        location: str | None = None,
        *,
        fallback_permitted: bool = False,
    ) -> list[JobListing]:
        if not self.configured:
            logger.warning("adzuna_credentials_missing")
            return self._degrade(query, location, fallback_permitted)

        country = country_code_for(location)
        url = f"{self._base_url}/{country}/search/1"
        params = {
            "app_id": self._app_id or "",
            "app_key": self._app_key or "",
            "results_per_page": str(self._results_per_page),
            "what": query,
            "content_type": "application/json",
        }
        where = narrow_location(location)
        if where:
            params["where"] = where

        logger.info("adzuna_request url=%s", _redacted_url(url, params))
        try:
            payload = await self._get_json(url, params)
        except httpx.HTTPStatusError as exc:
            logger.warning("adzuna_bad_status status=%s", exc.response.status_code)
            return self._degrade(query, location, fallback_permitted)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("adzuna_request_failed: %s", exc)
            return self._degrade(query, location, fallback_permitted)

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list) or not results:
            logger.info("adzuna_no_results query=%s country=%s", query, country)
            return self._degrade(query, location, fallback_permitted)

        now = self._clock()
        listings = [
            listing
            for listing in (normalize_listing(raw, now) for raw in results if isinstance(raw, dict))
            if listing is not None
        ]
        logger.info("adzuna_results query=%s country=%s count=%s", query, country, len(listings))
        if not listings:
            return self._degrade(query, location, fallback_permitted)
        return listings
