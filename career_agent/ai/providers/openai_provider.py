from __future__ import annotations

import logging
import os
from typing import Any, AsyncGenerator, Optional, Sequence

from openai import AsyncOpenAI

from career_agent.ai.types import ChatMessage

logger = logging.getLogger(__name__)


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ):
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is not configured")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s))),
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )

    def _create_kwargs(
        self, messages: Sequence[ChatMessage], temperature: float | None
    ) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": self._temperature if temperature is None else temperature,
            "max_tokens": self._max_tokens,
        }

    async def stream(
        self, messages: Sequence[ChatMessage], *, temperature: float | None = None
    ) -> AsyncGenerator[str, None]:
        create_kwargs = self._create_kwargs(messages, temperature)
        create_kwargs["stream"] = True

        stream = await self._client.chat.completions.create(**create_kwargs)

        async for chunk in stream:
            if not chunk.choices:
                continue
            text = getattr(chunk.choices[0].delta, "content", None)
            if text:
                yield text

    async def complete(
        self, messages: Sequence[ChatMessage], *, temperature: float | None = None
    ) -> str:
        response = await self._client.chat.completions.create(
            **self._create_kwargs(messages, temperature)
        )
        content = response.choices[0].message.content if response.choices else ""
        if not content:
            logger.warning("openai_empty_completion model=%s", self._model)
        return content or ""
