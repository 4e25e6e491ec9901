import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from career_agent.parsing.json_payload import (
    NoStructuredPayload,
    extract_structured_payload,
    find_balanced_object,
    strip_code_fences,
)


class StructuredPayloadTests(unittest.TestCase):
    def test_prose_with_embedded_object(self):
        raw = 'Sure! {"jobTitle":"nurse","location":"Breda","skills":[]} Let me know if that helps.'
        payload = extract_structured_payload(raw)
        self.assertEqual(payload["jobTitle"], "nurse")
        self.assertEqual(payload["location"], "Breda")

    def test_fenced_object(self):
        raw = '```json\n{"response": "Done", "cvUpdates": {}}\n```'
        self.assertEqual(strip_code_fences(raw), '{"response": "Done", "cvUpdates": {}}')
        self.assertEqual(extract_structured_payload(raw)["response"], "Done")

    def test_braces_inside_strings_do_not_close_the_object(self):
        raw = 'prefix {"text": "a } tricky {value", "nested": {"escaped": "quote \\" }"}} trailing }'
        region = find_balanced_object(raw)
        self.assertTrue(region.startswith('{"text"'))
        self.assertTrue(region.endswith('"}}'))
        payload = extract_structured_payload(raw)
        self.assertEqual(payload["text"], "a } tricky {value")
        self.assertEqual(payload["nested"]["escaped"], 'quote " }')

    def test_only_first_object_is_taken(self):
        payload = extract_structured_payload('{"a": 1} and {"b": 2}')
        self.assertEqual(payload, {"a": 1})

    def test_failures_are_values(self):
        for raw, reason in (("", "empty"), ("   ", "empty"), ("no json here", "no_object"), ('{"open": 1', "no_object")):
            outcome = extract_structured_payload(raw)
            self.assertIsInstance(outcome, NoStructuredPayload)
            self.assertEqual(outcome.reason, reason)
            self.assertFalse(outcome)

        invalid = extract_structured_payload("{not: valid}")
        self.assertIsInstance(invalid, NoStructuredPayload)
        self.assertTrue(invalid.reason.startswith("invalid_json"))


if __name__ == "__main__":
    unittest.main()
