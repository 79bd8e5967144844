"""
Unit tests for JSON drafts.

Storage contract:
- missing / invalid file -> None
- loaded records are always complete (missing fields -> "")
- missing or duplicate ids are replaced by fresh ones
- JSON schema: {"student": {...}, "courses": [{..., "meetings": [...]}]}
"""

import json
import tempfile
import unittest
from pathlib import Path

from coursesheet.model import Course, Meeting, Student, TranscriptData, new_transcript
from coursesheet.storage import load_transcript, save_transcript, transcript_from_dict, transcript_to_dict


class TestStorage(unittest.TestCase):
    def test_load_missing_file_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            self.assertIsNone(load_transcript(Path(d) / "missing.json"))

    def test_load_broken_json_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "broken.json"
            p.write_text("{not json", encoding="utf-8")
            with self.assertLogs("coursesheet.storage", level="WARNING"):
                self.assertIsNone(load_transcript(p))

    def test_save_and_load_roundtrip(self) -> None:
        data = new_transcript()
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "draft.json"
            save_transcript(data, p)
            self.assertEqual(load_transcript(p), data)

            raw = json.loads(p.read_text(encoding="utf-8"))
            self.assertIn("student", raw)
            self.assertIsInstance(raw["courses"], list)
            self.assertIsInstance(raw["courses"][0]["meetings"], list)

    def test_non_ascii_kept_readable(self) -> None:
        data = TranscriptData(student=Student(name="Zoë Müller"), courses=())
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "draft.json"
            save_transcript(data, p)
            self.assertIn("Zoë Müller", p.read_text(encoding="utf-8"))


class TestFromDict(unittest.TestCase):
    def test_missing_fields_become_empty_strings(self) -> None:
        data = transcript_from_dict({"student": {"name": "Ann"}, "courses": [{"course_id": "c1"}]})
        self.assertEqual(data.student.name, "Ann")
        self.assertEqual(data.student.note, "")
        self.assertEqual(data.courses[0].title, "")
        self.assertEqual(data.courses[0].meetings, ())

    def test_numbers_are_stringified_and_junk_dropped(self) -> None:
        data = transcript_from_dict(
            {"courses": [{"course_id": "c1", "credits": 3, "crn": None, "meetings": [{"meeting_id": "m"}, "junk"]}]}
        )
        self.assertEqual(data.courses[0].credits, "3")
        self.assertEqual(data.courses[0].crn, "")
        self.assertEqual(len(data.courses[0].meetings), 1)

    def test_missing_and_duplicate_ids_are_reissued(self) -> None:
        data = transcript_from_dict({"courses": [{"course_id": "c1"}, {"course_id": "c1"}, {}]})
        ids = [c.course_id for c in data.courses]
        self.assertEqual(ids[0], "c1")
        self.assertEqual(len(set(ids)), 3)
        self.assertTrue(all(ids))

    def test_meeting_ids_are_scoped_per_course(self) -> None:
        data = transcript_from_dict(
            {"courses": [{"course_id": "a", "meetings": [{"meeting_id": "m"}]}, {"course_id": "b", "meetings": [{"meeting_id": "m"}]}]}
        )
        self.assertEqual(data.courses[0].meetings[0].meeting_id, "m")
        self.assertEqual(data.courses[1].meetings[0].meeting_id, "m")

    def test_garbage_root(self) -> None:
        data = transcript_from_dict(["not", "a", "dict"])
        self.assertEqual(data, TranscriptData(student=Student(), courses=()))

    def test_to_dict_shape(self) -> None:
        data = TranscriptData(
            student=Student(student_id="A1"),
            courses=(Course(course_id="c", meetings=(Meeting(meeting_id="m", days="MWF"),)),),
        )
        out = transcript_to_dict(data)
        self.assertEqual(out["student"]["student_id"], "A1")
        self.assertEqual(out["courses"][0]["meetings"][0]["days"], "MWF")
        self.assertEqual(transcript_from_dict(out), data)


if __name__ == "__main__":
    unittest.main()
