from __future__ import annotations

import logging

from career_agent.routing.locales import (
    BASE_LANGUAGE,
    LANGUAGE_DETECTION_ORDER,
    Intent,
    LocaleKeywords,
    match_locale_cues,
)

logger = logging.getLogger(__name__)

# First matching intent wins.
INTENT_PRIORITY: tuple[Intent, ...] = (Intent.JOB_SEARCH, Intent.COVER_LETTER)


def _is_job_search_follow_up(message: str) -> bool:
    """A reply to an earlier "try searching nearby" suggestion."""
    if match_locale_cues(message, lambda locale: locale.retry_cues) is None:
        return False
    return match_locale_cues(message, lambda locale: locale.search_cues) is not None


def classify_intent(message: str) -> Intent:
    text = (message or "").strip()
    if not text:
        return Intent.OPEN_CHAT

    for intent in INTENT_PRIORITY:
        locale = match_locale_cues(text, _intent_selector(intent), whole_words=False)
        if locale is not None:
            logger.debug("intent_classified intent=%s locale=%s", intent.value, locale)
            return intent
        if intent is Intent.JOB_SEARCH and _is_job_search_follow_up(text):
            logger.debug("intent_classified intent=%s follow_up=true", intent.value)
            return intent
    return Intent.OPEN_CHAT


def _intent_selector(intent: Intent):
    def select(locale: LocaleKeywords) -> tuple[str, ...]:
        return locale.intents.get(intent, ())

    return select


def detect_language(message: str) -> str:
    code = match_locale_cues(
        message or "",
        lambda locale: locale.language_cues,
        order=LANGUAGE_DETECTION_ORDER,
    )
    return code or BASE_LANGUAGE
