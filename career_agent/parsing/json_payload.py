"""Tolerant extraction of one JSON object from free-form model output.

Model replies often mix prose with a structured object ("Sure! {...}") or wrap
the object in markdown fences. ``extract_structured_payload`` scans for the
first ``{``, tracks brace depth outside of string literals, and parses the
region that closes at depth zero. Failure is returned as a value, not raised.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```\s*$")


@dataclass(frozen=True)
class NoStructuredPayload:
    reason: str

    def __bool__(self) -> bool:
        return False


StructuredPayload = dict[str, Any]


def strip_code_fences(text: str) -> str:
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        cleaned = _LEADING_FENCE.sub("", cleaned)
        cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def find_balanced_object(text: str) -> str | None:
    """Return the first ``{...}`` region whose braces balance, or None."""
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def extract_structured_payload(text: str) -> StructuredPayload | NoStructuredPayload:
    if not text or not text.strip():
        return NoStructuredPayload("empty")

    region = find_balanced_object(strip_code_fences(text))
    if region is None:
        return NoStructuredPayload("no_object")

    try:
        parsed = json.loads(region)
    except json.JSONDecodeError as exc:
        return NoStructuredPayload(f"invalid_json: {exc.msg}")
    return parsed
