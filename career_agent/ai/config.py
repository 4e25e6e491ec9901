import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    # Parameter extraction wants stable output; letters and chat read better with some variety.
    reasoning_temperature: float
    writing_temperature: float
    max_tokens: int


def _number(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def load_ai_config() -> AIConfig:
    return AIConfig(
        provider=(os.getenv("AI_PROVIDER") or "openai").strip().lower(),
        model=(os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip(),
        reasoning_temperature=_number("AI_REASONING_TEMPERATURE", 0.3),
        writing_temperature=_number("AI_WRITING_TEMPERATURE", 0.7),
        max_tokens=int(_number("AI_MAX_TOKENS", 2000)),
    )
