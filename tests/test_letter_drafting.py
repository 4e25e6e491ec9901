import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from career_agent.core.errors import ProfileSerializationError
from career_agent.letters.drafting import draft_letter, resolve_language
from career_agent.letters.prompts import LETTER_INSTRUCTIONS, build_letter_prompt
from career_agent.letters.templates import LETTER_TEMPLATES, fallback_draft, reply_message


class LetterAIClient:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def complete(self, messages, *, temperature=None):
        self.prompts.append(messages[-1].content)
        if self.error is not None:
            raise self.error
        return self.reply

    async def stream(self, messages, *, temperature=None):
        yield self.reply


PROFILE = {
    "fullName": "Jan Jansen",
    "title": "Frontend Developer",
    "contact": {"email": "jan@example.com", "location": "Utrecht, Netherlands"},
    "experience": [{"title": "UI Engineer", "company": "Acme", "location": "Utrecht"}],
    "skills": ["React"],
}


class FallbackTemplateTests(unittest.TestCase):
    def test_every_language_has_complete_fallback(self):
        self.assertEqual(set(LETTER_TEMPLATES), {"en", "nl", "de", "fr", "es"})
        for code in LETTER_TEMPLATES:
            for profile in (None, PROFILE):
                draft = fallback_draft(code, profile)
                for field in ("opening", "body", "closing", "signature"):
                    self.assertTrue(getattr(draft, field).strip(), f"{code}.{field}")
                self.assertEqual(draft.detected_language, code)
                self.assertNotIn("{", draft.body)

    def test_fallback_interpolates_profile(self):
        draft = fallback_draft("en", PROFILE)
        self.assertIn("Frontend Developer", draft.body)
        self.assertIn("UI Engineer", draft.body)
        self.assertEqual(draft.signature, "Your Name")
        self.assertEqual(fallback_draft("en", PROFILE, "Jan Jansen").signature, "Jan Jansen")

    def test_every_language_has_instructions(self):
        self.assertEqual(set(LETTER_INSTRUCTIONS), set(LETTER_TEMPLATES))
        prompt = build_letter_prompt("Schrijf een motivatiebrief", '{"title": "Chef"}', "nl")
        self.assertIn("Nederlands", prompt)
        self.assertIn('"signature"', prompt)
        self.assertIn("300-400", prompt)

    def test_reply_message_is_localized(self):
        draft = fallback_draft("de", None)
        self.assertIn("Sehr geehrte Damen und Herren,", reply_message(draft))
        self.assertIn("Anschreiben", reply_message(draft))


class DraftLetterTests(unittest.IsolatedAsyncioTestCase):
    async def test_dutch_request_without_generation(self):
        draft = await draft_letter("Schrijf een motivatiebrief voor mij", {"fullName": "Jan Jansen"})
        self.assertEqual(draft.detected_language, "nl")
        self.assertEqual(draft.signature, "Jan Jansen")
        for field in ("opening", "body", "closing", "signature"):
            self.assertTrue(getattr(draft, field))

    async def test_generation_error_uses_fallback(self):
        client = LetterAIClient(error=RuntimeError("OPENAI_API_KEY is not configured"))
        draft = await draft_letter("Écris une lettre de motivation", PROFILE, ai_client=client)
        self.assertEqual(draft.detected_language, "fr")
        self.assertEqual(draft.opening, LETTER_TEMPLATES["fr"].opening)
        self.assertEqual(draft.signature, "Jan Jansen")

    async def test_unparseable_reply_uses_fallback(self):
        client = LetterAIClient(reply="Sorry, I cannot help with that.")
        draft = await draft_letter("Write a cover letter for Acme", PROFILE, ai_client=client)
        self.assertEqual(draft.opening, "Dear Hiring Manager,")
        self.assertEqual(draft.signature, "Jan Jansen")

    async def test_parsed_draft_fills_gaps(self):
        client = LetterAIClient(
            reply='Here it is:\n{"companyName": "Acme", "jobTitle": "Frontend Lead", '
            '"opening": "Dear Ms. Vries,", "body": "Para one.\\n\\nPara two.", "closing": "", '
            '"signature": "[Your Name]"}'
        )
        draft = await draft_letter("Write a cover letter for Acme", PROFILE, ai_client=client)
        self.assertEqual(draft.company_name, "Acme")
        self.assertEqual(draft.opening, "Dear Ms. Vries,")
        self.assertEqual(draft.closing, LETTER_TEMPLATES["en"].closing)
        self.assertEqual(draft.signature, "Jan Jansen")

    async def test_parsed_signature_wins(self):
        client = LetterAIClient(
            reply='{"opening": "Hi,", "body": "Body.", "closing": "Thanks.", "signature": "J. Jansen"}'
        )
        draft = await draft_letter("Write a cover letter", PROFILE, ai_client=client)
        self.assertEqual(draft.signature, "J. Jansen")

    async def test_placeholder_signature_without_name(self):
        draft = await draft_letter("Escribe una carta de presentación", None)
        self.assertEqual(draft.signature, LETTER_TEMPLATES["es"].signature_placeholder)

    async def test_prompt_never_contains_personal_details(self):
        client = LetterAIClient(reply="{}")
        await draft_letter("Write a cover letter", PROFILE, ai_client=client)
        prompt = client.prompts[0]
        self.assertIn("UI Engineer", prompt)
        self.assertNotIn("Jan Jansen", prompt)
        self.assertNotIn("jan@example.com", prompt)

    async def test_oversized_profile_fails_before_generation(self):
        client = LetterAIClient(reply="{}")
        profile = {"summary": "x" * 600000}
        with self.assertRaises(ProfileSerializationError):
            await draft_letter("Write a cover letter", profile, ai_client=client)
        self.assertEqual(client.prompts, [])

    def test_language_preference_applies_without_cues(self):
        self.assertEqual(resolve_language("Write a cover letter", "de"), "de")
        self.assertEqual(resolve_language("Schrijf een motivatiebrief", "de"), "nl")
        self.assertEqual(resolve_language("Write a cover letter"), "en")


if __name__ == "__main__":
    unittest.main()
