from __future__ import annotations

import secrets

from fastapi import HTTPException, status

from career_agent.core.config import settings

_AUTH_ERROR_MESSAGES = {
    "en": "Please provide a valid API key to use the career assistant.",
    "nl": "Geef een geldige API-sleutel op om de loopbaanassistent te gebruiken.",
    "de": "Bitte gib einen gültigen API-Schlüssel an, um den Karriereassistenten zu nutzen.",
    "fr": "Veuillez fournir une clé API valide pour utiliser l'assistant carrière.",
    "es": "Por favor, proporciona una clave API válida para usar el asistente de carrera.",
}


def _auth_error_message(lang: str | None) -> str:
    key = (lang or "en").split(",")[0].split("-")[0].strip().lower()
    return _AUTH_ERROR_MESSAGES.get(key, _AUTH_ERROR_MESSAGES["en"])


def api_key_required() -> bool:
    return settings.chat_auth_mode == "protected" or bool(settings.api_key)


def check_api_key(x_api_key: str | None, lang: str | None = None) -> None:
    """Reject the request unless the X-API-Key header matches API_KEY."""
    if not api_key_required():
        return
    expected = settings.api_key or ""
    if not x_api_key or not secrets.compare_digest(x_api_key, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_auth_error_message(lang),
        )
