import tempfile
import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from career_agent.core.scoring import RankingWeights, get_ranking_weights, parse_ranking_weights, read_scoring_config


class ScoringConfigTests(unittest.TestCase):
    def test_repo_config_loads(self):
        weights = get_ranking_weights()
        self.assertEqual(weights.skill_bonus, 5)
        self.assertEqual(weights.title_bonus, 15)
        self.assertEqual(weights.clamp(140), 100)
        self.assertEqual(weights.clamp(-3), 0)

    def test_missing_keys_keep_defaults(self):
        weights = parse_ranking_weights({"ranking": {"skill_bonus": 10}})
        self.assertEqual(weights.skill_bonus, 10)
        self.assertEqual(weights.base_score, RankingWeights().base_score)
        self.assertEqual(parse_ranking_weights({}), RankingWeights())

    def test_invalid_values_are_rejected(self):
        with self.assertRaises(RuntimeError):
            parse_ranking_weights({"ranking": {"skill_bonus": "five"}})
        with self.assertRaises(RuntimeError):
            parse_ranking_weights({"ranking": {"min_score": 90, "max_score": 10}})
        with self.assertRaises(RuntimeError):
            parse_ranking_weights({"ranking": ["base_score"]})

    def test_unreadable_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "scoring.yaml"
            with self.assertRaises(RuntimeError):
                read_scoring_config(missing)
            missing.write_text("- just\n- a list\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                read_scoring_config(missing)


if __name__ == "__main__":
    unittest.main()
