from career_agent.ai.config import load_ai_config
from career_agent.ai.types import AIClient

from career_agent.ai.providers.openai_provider import OpenAIProvider


def get_ai_client() -> AIClient:
    """Client for the configured provider; raises RuntimeError when its key is missing."""
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            temperature=cfg.reasoning_temperature,
            max_tokens=cfg.max_tokens,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
