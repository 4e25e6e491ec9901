from __future__ import annotations

import json
from typing import Any


def sse(event_type: str, **fields: Any) -> str:
    """Frame one event as a single `data:` line followed by a blank line."""
    payload = {"type": event_type, **fields}
    return f"data: {json.dumps(payload, ensure_ascii=False, separators=(',', ':'))}\n\n"
