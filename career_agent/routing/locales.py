"""Per-locale keyword tables for intent routing and language detection.

Every supported locale lives in one entry of ``LOCALES`` so that adding a
language touches a single place. Both the intent router and the letter
language detector go through :func:`match_locale_cues`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Callable, Iterable


class Intent(str, Enum):
    JOB_SEARCH = "job_search"
    COVER_LETTER = "cover_letter"
    OPEN_CHAT = "open_chat"


BASE_LANGUAGE = "en"


@dataclass(frozen=True)
class LocaleKeywords:
    code: str
    name: str
    intents: dict[Intent, tuple[str, ...]] = field(default_factory=dict)
    language_cues: tuple[str, ...] = ()
    retry_cues: tuple[str, ...] = ()
    search_cues: tuple[str, ...] = ()


LOCALES: dict[str, LocaleKeywords] = {
    "nl": LocaleKeywords(
        code="nl",
        name="Dutch",
        intents={
            Intent.JOB_SEARCH: (
                "vacature", "zoek werk", "zoek een baan", "vind banen", "banen in",
                "werk zoeken", "baan zoeken", "functies in",
            ),
            Intent.COVER_LETTER: (
                "motivatiebrief", "sollicitatiebrief", "begeleidende brief",
            ),
        },
        language_cues=(
            "motivatiebrief", "sollicitatiebrief", "sollicitatie", "schrijf",
            "vacature", "voor mij", "mijn", "graag",
        ),
        retry_cues=("probeer",),
        search_cues=("zoek", "stad", "regio"),
    ),
    "de": LocaleKeywords(
        code="de",
        name="German",
        intents={
            Intent.JOB_SEARCH: (
                "stellenangebot", "jobsuche", "stellensuche", "stellen in",
                "arbeit finden", "job finden", "stelle finden",
            ),
            Intent.COVER_LETTER: (
                "anschreiben", "bewerbungsschreiben", "motivationsschreiben",
            ),
        },
        language_cues=(
            "anschreiben", "bewerbungsschreiben", "motivationsschreiben", "bewerbung",
            "schreibe", "schreib", "für mich", "meine", "bitte",
        ),
        retry_cues=("versuch", "versuche"),
        search_cues=("such", "suche", "stadt", "region"),
    ),
    "fr": LocaleKeywords(
        code="fr",
        name="French",
        intents={
            Intent.JOB_SEARCH: (
                "offres d'emploi", "offre d'emploi", "trouver un emploi",
                "chercher un emploi", "recherche d'emploi", "emplois à", "postes à",
            ),
            Intent.COVER_LETTER: (
                "lettre de motivation", "lettre de candidature",
            ),
        },
        language_cues=(
            "lettre de motivation", "lettre", "candidature", "écris", "écrire",
            "rédige", "pour moi", "s'il vous plaît",
        ),
        retry_cues=("essaie", "essayez"),
        search_cues=("cherche", "recherche", "ville", "région"),
    ),
    "es": LocaleKeywords(
        code="es",
        name="Spanish",
        intents={
            Intent.JOB_SEARCH: (
                "ofertas de trabajo", "ofertas de empleo", "buscar trabajo",
                "busca trabajo", "empleos en", "trabajos en",
            ),
            Intent.COVER_LETTER: (
                "carta de presentación", "carta de presentacion", "carta de motivación",
            ),
        },
        language_cues=(
            "carta de presentación", "carta de presentacion", "carta de motivación",
            "carta", "escribe", "escribir", "redacta", "para mí", "por favor",
        ),
        retry_cues=("intenta", "prueba"),
        search_cues=("busca", "buscar", "ciudad", "región"),
    ),
    "en": LocaleKeywords(
        code="en",
        name="English",
        intents={
            Intent.JOB_SEARCH: (
                "find job", "search job", "job search", "find me a job", "look for job",
                "find work", "job match", "matching job", "find jobs", "search for job",
                "job opportunities", "find positions", "job openings", "find vacancies",
                "match my skills", "jobs that match", "career opportunities",
                "looking for a job", "help me find work", "find employment",
                "search for positions", "find opportunities", "job listings",
                "search positions", "look for positions", "look for work",
                "try searching", "nearby cities", "nearby regions", "remote positions",
                "hybrid positions", "job in", "jobs in", "positions in",
            ),
            Intent.COVER_LETTER: (
                "cover letter", "covering letter", "motivation letter", "motivational letter",
                "write a letter", "draft a letter", "create a letter", "generate a letter",
                "application letter", "letter of motivation", "letter of interest",
                "write cover", "draft cover", "create cover", "help me write a letter",
                "need a letter", "need a cover", "compose a letter", "letter for",
            ),
        },
        retry_cues=("try",),
        search_cues=("search", "city", "region"),
    ),
}

# Order in which languages are tried when detecting the language of a message.
LANGUAGE_DETECTION_ORDER: tuple[str, ...] = ("nl", "de", "fr", "es")


@lru_cache(maxsize=512)
def _cue_pattern(cue: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(cue)}(?!\w)", re.IGNORECASE)


def contains_cue(text: str, cues: Iterable[str], *, whole_words: bool = True) -> bool:
    if not text:
        return False
    if whole_words:
        return any(_cue_pattern(cue).search(text) for cue in cues)
    lowered = text.lower()
    return any(cue in lowered for cue in cues)


def match_locale_cues(
    text: str,
    select: Callable[[LocaleKeywords], Iterable[str]],
    *,
    order: Iterable[str] | None = None,
    whole_words: bool = True,
) -> str | None:
    """Return the code of the first locale whose selected cues occur in ``text``."""
    for code in order or LOCALES.keys():
        locale = LOCALES.get(code)
        if locale is None:
            continue
        if contains_cue(text, select(locale), whole_words=whole_words):
            return code
    return None


def language_name(code: str | None) -> str:
    locale = LOCALES.get(code or BASE_LANGUAGE) or LOCALES[BASE_LANGUAGE]
    return locale.name
