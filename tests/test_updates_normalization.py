import json
import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from career_agent.streaming.updates import normalize_cv_updates, parse_structured_cv_message


class NormalizeUpdatesTests(unittest.TestCase):
    def test_historical_field_names(self):
        updates = normalize_cv_updates(
            {
                "experience": [
                    {"position": "Analyst", "organization": "Bank", "achievements": ["Cut costs 10%"]},
                    {"title": "Intern", "company": "Shop", "content": ["Sold things"], "dates": "2019"},
                ],
                "education": [{"title": "BSc", "university": "TU Delft"}, {"degree": "MSc", "school": "UvA"}],
                "skills": ["SQL", {"name": "Python"}, {"level": "expert"}],
                "languages": ["Dutch (Native)", {"language": "English", "proficiency": "Fluent"}, {"name": "German"}],
                "hobbies": [{"name": "Chess"}, "Running"],
            }
        )
        self.assertEqual(
            updates["experience"],
            [
                {"title": "Analyst", "company": "Bank", "content": ["Cut costs 10%"]},
                {"title": "Intern", "company": "Shop", "dates": "2019", "content": ["Sold things"]},
            ],
        )
        self.assertEqual(
            updates["education"],
            [{"degree": "BSc", "institution": "TU Delft"}, {"degree": "MSc", "institution": "UvA"}],
        )
        self.assertEqual(updates["skills"], ["SQL", "Python"])
        self.assertEqual(updates["languages"], ["Dutch (Native)", "English (Fluent)", "German"])
        self.assertEqual(updates["hobbies"], ["Chess", "Running"])

    def test_absent_fields_are_omitted(self):
        updates = normalize_cv_updates(
            {
                "fullName": "  ",
                "summary": "Seasoned engineer.",
                "contact": {"email": "a@b.c", "phone": None},
                "social": {"github": ""},
                "experience": [],
                "unknownField": "kept out",
            }
        )
        self.assertEqual(updates, {"summary": "Seasoned engineer.", "contact": {"email": "a@b.c"}})

    def test_styling_fields_pass_through(self):
        updates = normalize_cv_updates({"template": "minimal", "layout": {"accentColor": "#111111"}})
        self.assertEqual(updates, {"template": "minimal", "layout": {"accentColor": "#111111"}})

    def test_non_mapping_input(self):
        self.assertEqual(normalize_cv_updates(None), {})
        self.assertEqual(normalize_cv_updates(["a"]), {})


class StructuredDocumentTests(unittest.TestCase):
    def test_document_is_reshaped(self):
        document = {
            "personalInfo": {"firstName": "Ana", "lastName": "Lopez", "email": "ana@example.com", "linkedin": "in/ana"},
            "experience": [
                {
                    "position": "Sous Chef",
                    "company": "Casa",
                    "startDate": "2020",
                    "current": True,
                    "description": "Ran the kitchen on busy nights for a team of twelve cooks. "
                    "Designed a seasonal menu that raised revenue by a fifth. Trained new staff.",
                },
                {"title": "Cook", "company": "Bar", "startDate": "2018", "endDate": "2020"},
            ],
            "education": [{"degree": "Culinary Arts", "school": "CIA", "startDate": "2016", "endDate": "2018", "gpa": "3.8"}],
            "skills": ["Pastry"],
        }
        updates = parse_structured_cv_message(json.dumps(document))
        self.assertEqual(updates["fullName"], "Ana Lopez")
        self.assertEqual(updates["contact"], {"email": "ana@example.com"})
        self.assertEqual(updates["social"], {"linkedin": "in/ana"})
        first, second = updates["experience"]
        self.assertEqual(first["title"], "Sous Chef")
        self.assertEqual(first["dates"], "2020 - Present")
        self.assertTrue(first["current"])
        self.assertEqual(len(first["content"]), 3)
        self.assertTrue(all(point.endswith(".") and not point.endswith("..") for point in first["content"]))
        self.assertEqual(second["dates"], "2018 - 2020")
        self.assertEqual(
            updates["education"],
            [{"degree": "Culinary Arts", "institution": "CIA", "dates": "2016 - 2018", "content": ["GPA: 3.8"]}],
        )
        self.assertEqual(updates["skills"], ["Pastry"])

    def test_other_messages_are_not_documents(self):
        self.assertIsNone(parse_structured_cv_message("Please improve my summary"))
        self.assertIsNone(parse_structured_cv_message('{"question": "what now?"}'))
        self.assertIsNone(parse_structured_cv_message("{broken"))
        self.assertIsNone(parse_structured_cv_message('{"skills": []}'))


if __name__ == "__main__":
    unittest.main()
