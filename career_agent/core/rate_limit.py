from __future__ import annotations

import hashlib

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from career_agent.core.config import settings


def client_key(request: Request) -> str:
    """Callers with an API key share one bucket per key, others are limited per address."""
    api_key = (request.headers.get("X-API-Key") or "").strip()
    if api_key:
        return "key:" + hashlib.sha256(api_key.encode("utf-8")).hexdigest()[:16]
    return get_remote_address(request)


limiter = Limiter(key_func=client_key, enabled=settings.rate_limit_enabled)


def chat_rate_limit():
    if settings.rate_limit_enabled:
        return limiter.limit(settings.rate_limit)

    def passthrough(func):
        return func

    return passthrough
