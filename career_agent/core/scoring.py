"""Ranking weights read from the repo-level config/scoring.yaml."""
from __future__ import annotations

from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "scoring.yaml"


@dataclass(frozen=True)
class RankingWeights:
    base_score: int = 50
    skill_bonus: int = 5
    title_bonus: int = 15
    min_score: int = 0
    max_score: int = 100
    max_keyword_matches: int = 8
    reason_skill_preview: int = 3
    neutral_score: int = 50

    def clamp(self, score: int) -> int:
        return max(self.min_score, min(self.max_score, score))


def read_scoring_config(path: Path = SCORING_CONFIG_PATH) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def parse_ranking_weights(config: dict[str, Any]) -> RankingWeights:
    """Weights from the ``ranking`` section; missing keys keep their defaults."""
    section = config.get("ranking") or {}
    if not isinstance(section, dict):
        raise RuntimeError("Invalid scoring config: 'ranking' must be a mapping.")

    values: dict[str, int] = {}
    for weight in fields(RankingWeights):
        if weight.name not in section:
            continue
        value = section[weight.name]
        if isinstance(value, bool) or not isinstance(value, int):
            raise RuntimeError(f"Invalid scoring config: ranking.{weight.name} must be an integer, got {value!r}.")
        values[weight.name] = value

    weights = RankingWeights(**values)
    if weights.min_score > weights.max_score:
        raise RuntimeError("Invalid scoring config: ranking.min_score is above ranking.max_score.")
    return weights


@lru_cache(maxsize=1)
def get_ranking_weights() -> RankingWeights:
    return parse_ranking_weights(read_scoring_config())
