from __future__ import annotations

import asyncio
from typing import AsyncIterable, AsyncIterator


def split_words(text: str) -> list[str]:
    """Split on single spaces; every word except the last keeps its trailing space.

    Joining the result reproduces ``text`` exactly.
    """
    parts = (text or "").split(" ")
    tokens = [f"{part} " for part in parts[:-1]]
    if parts[-1]:
        tokens.append(parts[-1])
    return tokens


async def _as_fragments(source: str | AsyncIterable[str]) -> AsyncIterator[str]:
    if isinstance(source, str):
        yield source
        return
    async for fragment in source:
        yield fragment


async def iter_word_tokens(source: str | AsyncIterable[str]) -> AsyncIterator[str]:
    """Re-segment a complete string or incremental fragments into word tokens."""
    pending = ""
    async for fragment in _as_fragments(source):
        pending += fragment
        cut = pending.rfind(" ")
        if cut == -1:
            continue
        for token in split_words(pending[: cut + 1]):
            yield token
        pending = pending[cut + 1 :]
    if pending:
        yield pending


async def paced(tokens: AsyncIterable[str], delay_s: float) -> AsyncIterator[str]:
    first = True
    async for token in tokens:
        if not first and delay_s > 0:
            await asyncio.sleep(delay_s)
        first = False
        yield token
