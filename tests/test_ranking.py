import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from career_agent.jobs.ranking import GENERIC_REASON, NO_PROFILE_REASON, rank_listings
from career_agent.schemas.jobs import JobListing


def _listing(index, title, description=""):
    return JobListing(id=f"job-{index}", title=title, company="Acme", location="Utrecht", description=description)


class RankingTests(unittest.TestCase):
    def setUp(self):
        self.profile = {
            "skills": ["React", "Node.js"],
            "experience": [{"title": "Software Engineer", "company": "Acme"}],
        }

    def test_skill_and_title_match(self):
        listing = _listing(1, "Software Engineer", "We use React and Node.js every day.")
        ranked = rank_listings([listing], self.profile)[0]
        self.assertEqual(ranked.match_score, 75)
        self.assertEqual(ranked.keyword_matches, ["React", "Node.js"])
        self.assertEqual(ranked.match_reason, "Matches 2 of your skills: React, Node.js")

    def test_score_formula_and_clamp(self):
        skills = [f"skill{n}" for n in range(12)]
        profile = {"skills": skills, "experience": [{"title": "Engineer"}]}
        description = " ".join(skills)
        ranked = rank_listings(
            [
                _listing(1, "Engineer", description),
                _listing(2, "Analyst", " ".join(skills[:3])),
            ],
            profile,
        )
        self.assertEqual(ranked[0].match_score, 100)
        self.assertEqual(len(ranked[0].keyword_matches), 8)
        self.assertTrue(ranked[0].match_reason.endswith("..."))
        self.assertEqual(ranked[1].match_score, 65)

    def test_skills_differing_only_in_case_count_once(self):
        profile = {"skills": ["React", "react", "REACT"]}
        ranked = rank_listings([_listing(1, "Frontend developer", "React hooks")], profile)[0]
        self.assertEqual(ranked.match_score, 55)
        self.assertEqual(ranked.keyword_matches, ["React"])

    def test_reason_falls_back_to_role_then_generic(self):
        ranked = rank_listings([_listing(1, "Barista", "Coffee")], self.profile)[0]
        self.assertEqual(ranked.match_score, 50)
        self.assertEqual(ranked.match_reason, "Related to your experience as Software Engineer")

        skills_only = rank_listings([_listing(1, "Barista", "Coffee")], {"skills": ["Go"]})[0]
        self.assertEqual(skills_only.match_reason, GENERIC_REASON)

    def test_sorted_descending_and_stable(self):
        listings = [
            _listing(1, "Cook"),
            _listing(2, "React developer"),
            _listing(3, "Cleaner"),
            _listing(4, "Node.js developer"),
        ]
        ranked = rank_listings(listings, self.profile)
        self.assertEqual([item.id for item in ranked], ["job-2", "job-4", "job-1", "job-3"])

    def test_without_profile_everything_is_neutral(self):
        listings = [_listing(1, "React developer"), _listing(2, "Cook")]
        for profile in (None, {}, {"fullName": "Jan Jansen"}):
            ranked = rank_listings(listings, profile)
            self.assertEqual([item.id for item in ranked], ["job-1", "job-2"])
            for item in ranked:
                self.assertEqual(item.match_score, 50)
                self.assertEqual(item.match_reason, NO_PROFILE_REASON)
                self.assertEqual(item.keyword_matches, [])


if __name__ == "__main__":
    unittest.main()
