import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from career_agent.jobs.params import (
    build_reasoning_messages,
    extract_location,
    extract_message_skills,
    extract_role,
    extract_search_hints,
    extract_search_parameters,
    parse_reasoning_reply,
)


class ScriptedAIClient:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, messages, *, temperature=None):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply

    async def stream(self, messages, *, temperature=None):
        yield self.reply


class RegexHintTests(unittest.TestCase):
    def test_last_location_cue_wins(self):
        self.assertEqual(extract_location("developer in Rotterdam, near Amsterdam"), "Amsterdam")

    def test_location_with_country(self):
        self.assertEqual(extract_location("Find nurse jobs in Breda, Netherlands"), "Breda, Netherlands")

    def test_explicit_location_field(self):
        self.assertEqual(extract_location("role: designer location: amsterdam"), "amsterdam")

    def test_role_patterns(self):
        self.assertEqual(extract_role("Find software developer jobs in Amsterdam"), "software developer")
        self.assertEqual(extract_role("Search for nurse jobs in Breda"), "nurse")
        self.assertEqual(extract_role("title: product manager"), "product manager")
        self.assertIsNone(extract_role("Find jobs in Amsterdam"))

    def test_skills(self):
        self.assertEqual(extract_message_skills("Find jobs using Python and React in Berlin"), ["Python", "React"])
        self.assertEqual(extract_message_skills("skills: sql, excel"), ["sql", "excel"])
        self.assertEqual(extract_message_skills("Find nurse jobs"), [])

    def test_location_without_role_uses_role_noun_or_generic_term(self):
        self.assertEqual(extract_search_hints("Any analyst openings in Rotterdam?").query, "analyst")
        hints = extract_search_hints("Any openings in Rotterdam?")
        self.assertEqual(hints.query, "job")
        self.assertEqual(hints.location, "Rotterdam")

    def test_capitalized_role_is_not_a_location(self):
        hints = extract_search_hints("Looking for Senior Developer jobs")
        self.assertEqual(hints.query, "Senior Developer")
        self.assertIsNone(hints.location)
        hints = extract_search_hints("Looking for Senior Developer jobs in Utrecht")
        self.assertEqual(hints.location, "Utrecht")


class ReasoningReplyTests(unittest.TestCase):
    def test_prose_with_embedded_json(self):
        raw = 'Sure! {"jobTitle":"nurse","location":"Breda","skills":[],"searchQueries":["nurse"],"hasEnoughInfo":true}'
        params = parse_reasoning_reply(raw)
        self.assertEqual(params.job_title, "nurse")
        self.assertEqual(params.location, "Breda")
        self.assertEqual(params.search_queries, ["nurse"])
        self.assertTrue(params.has_enough_info)

    def test_reply_without_title_or_skills_is_rejected(self):
        self.assertIsNone(parse_reasoning_reply('{"jobTitle": null, "location": "Breda", "skills": []}'))
        self.assertIsNone(parse_reasoning_reply("I could not work that out."))

    def test_legacy_profile_flag(self):
        params = parse_reasoning_reply('{"jobTitle": "chef", "useCVData": true}')
        self.assertTrue(params.use_candidate_profile)

    def test_reasoning_prompt_carries_no_personal_details(self):
        profile = {
            "fullName": "Jan Jansen",
            "contact": {"email": "jan@example.com", "phone": "+31 6 1234", "location": "Utrecht, Netherlands"},
            "experience": [{"title": "Data Analyst", "company": "Acme", "location": "Utrecht"}],
            "skills": ["SQL"],
        }
        prompt = build_reasoning_messages("Find jobs", profile)[1].content
        self.assertIn("Data Analyst", prompt)
        self.assertIn("Utrecht", prompt)
        self.assertNotIn("Jan Jansen", prompt)
        self.assertNotIn("jan@example.com", prompt)
        self.assertNotIn("+31 6 1234", prompt)


class ExtractSearchParametersTests(unittest.IsolatedAsyncioTestCase):
    async def test_reasoning_result_is_used(self):
        client = ScriptedAIClient(
            reply='Here you go: {"jobTitle": "nurse", "location": "Breda", "skills": ["care"], '
            '"searchQueries": ["nurse", "registered nurse", ""], "hasEnoughInfo": true}'
        )
        params = await extract_search_parameters("I want to work as a nurse in Breda", ai_client=client)
        self.assertEqual(len(client.calls), 1)
        self.assertEqual(params.search_queries, ["nurse", "registered nurse"])
        self.assertEqual(params.location, "Breda")

    async def test_reasoning_without_queries_falls_back_to_title(self):
        client = ScriptedAIClient(reply='{"jobTitle": "nurse", "hasEnoughInfo": true}')
        params = await extract_search_parameters("nurse work please", ai_client=client)
        self.assertEqual(params.usable_queries, ["nurse"])

    async def test_transport_failure_uses_regex_fallback(self):
        client = ScriptedAIClient(error=ConnectionError("boom"))
        params = await extract_search_parameters("Find software developer jobs in Amsterdam", ai_client=client)
        self.assertEqual(params.usable_queries, ["software developer"])
        self.assertEqual(params.location, "Amsterdam")

    async def test_profile_fallback(self):
        profile = {
            "experience": [{"title": "Data Analyst", "company": "Acme"}],
            "skills": ["SQL", "Python"],
            "contact": {"location": "Utrecht, Netherlands"},
        }
        params = await extract_search_parameters("What can you do for me?", profile)
        self.assertEqual(params.usable_queries, ["Data Analyst"])
        self.assertEqual(params.location, "Utrecht")
        self.assertTrue(params.use_candidate_profile)

    async def test_insufficient_information(self):
        params = await extract_search_parameters("What can you do for me?")
        self.assertEqual(params.usable_queries, [])
        self.assertFalse(params.has_enough_info)


if __name__ == "__main__":
    unittest.main()
