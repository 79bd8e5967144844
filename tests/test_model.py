"""
Unit tests for the data model edit operations.

Contract:
- every operation returns a new value and never raises
- unknown ids / field names leave the input unchanged
- order of courses and meetings is insertion order
"""

import unittest
from datetime import datetime

from coursesheet.model import (
    Course,
    Meeting,
    Student,
    add_course,
    add_meeting,
    new_course,
    new_student,
    new_transcript,
    remove_course,
    remove_meeting,
    set_course_field,
    set_meeting_field,
    set_student_field,
    total_credits,
)


def _courses() -> tuple:
    m1 = Meeting(meeting_id="m1", type="Class", time="8:30 am - 11:20 am", days="MWF")
    m2 = Meeting(meeting_id="m2", type="Lab")
    return (
        Course(course_id="c1", title="Intro to Systems - COMP1234 - 0", meetings=(m1, m2)),
        Course(course_id="c2", title="Databases", meetings=(Meeting(meeting_id="m1"),)),
    )


class TestFactories(unittest.TestCase):
    def test_new_course_has_one_default_meeting(self) -> None:
        c = new_course()
        self.assertEqual(len(c.meetings), 1)
        self.assertEqual(c.meetings[0].type, "Class")
        self.assertEqual(c.title, "")
        self.assertTrue(c.course_id)

    def test_new_ids_are_unique(self) -> None:
        ids = {new_course().course_id for _ in range(50)}
        self.assertEqual(len(ids), 50)

    def test_new_student_defaults(self) -> None:
        s = new_student(datetime(2025, 11, 3, 19, 26))
        self.assertEqual(s.term, "Fall 2025")
        self.assertEqual(s.total_credits, "0.000")
        self.assertEqual(s.generated_on, "Nov 03, 2025 07:26 pm")
        self.assertTrue(s.note)

    def test_new_transcript_has_one_course(self) -> None:
        data = new_transcript()
        self.assertEqual(len(data.courses), 1)


class TestStudentEdits(unittest.TestCase):
    def test_set_student_field(self) -> None:
        s = Student(name="Ann")
        s2 = set_student_field(s, "student_id", "A01234567")
        self.assertEqual(s2.student_id, "A01234567")
        self.assertEqual(s2.name, "Ann")
        # original untouched
        self.assertEqual(s.student_id, "")

    def test_unknown_student_field_is_noop(self) -> None:
        s = Student(name="Ann")
        self.assertEqual(set_student_field(s, "nope", "x"), s)


class TestCourseEdits(unittest.TestCase):
    def test_set_course_field_changes_only_match(self) -> None:
        courses = _courses()
        out = set_course_field(courses, "c2", "crn", "12345")
        self.assertEqual(out[1].crn, "12345")
        self.assertEqual(out[0], courses[0])
        self.assertEqual(courses[1].crn, "")

    def test_set_course_field_missing_id_is_noop(self) -> None:
        courses = _courses()
        self.assertEqual(set_course_field(courses, "missing-id", "title", "X"), courses)

    def test_identity_and_meetings_not_editable(self) -> None:
        courses = _courses()
        self.assertEqual(set_course_field(courses, "c1", "course_id", "zzz"), courses)
        self.assertEqual(set_course_field(courses, "c1", "meetings", "zzz"), courses)

    def test_add_course_appends(self) -> None:
        courses = _courses()
        out = add_course(courses)
        self.assertEqual(len(out), 3)
        self.assertEqual(out[:2], courses)
        self.assertEqual(len(out[-1].meetings), 1)
        self.assertNotIn(out[-1].course_id, {"c1", "c2"})

    def test_add_then_remove_restores_original(self) -> None:
        courses = _courses()
        added = add_course(courses)
        restored = remove_course(added, added[-1].course_id)
        self.assertEqual(restored, courses)

    def test_remove_course_missing_is_noop(self) -> None:
        courses = _courses()
        self.assertEqual(remove_course(courses, "nope"), courses)

    def test_remove_last_course_allowed(self) -> None:
        courses = (new_course(),)
        self.assertEqual(remove_course(courses, courses[0].course_id), ())


class TestMeetingEdits(unittest.TestCase):
    def test_set_meeting_field_needs_both_ids(self) -> None:
        courses = _courses()
        out = set_meeting_field(courses, "c1", "m2", "days", "TR")
        self.assertEqual(out[0].meetings[1].days, "TR")
        self.assertEqual(out[0].meetings[0], courses[0].meetings[0])
        # same meeting id in another course stays as is
        self.assertEqual(out[1], courses[1])

    def test_set_meeting_field_mismatch_is_noop(self) -> None:
        courses = _courses()
        self.assertEqual(set_meeting_field(courses, "c2", "m2", "days", "TR"), courses)
        self.assertEqual(set_meeting_field(courses, "c9", "m1", "days", "TR"), courses)
        self.assertEqual(set_meeting_field(courses, "c1", "m1", "meeting_id", "x"), courses)

    def test_add_meeting_appends_to_match(self) -> None:
        courses = _courses()
        out = add_meeting(courses, "c2")
        self.assertEqual(len(out[1].meetings), 2)
        self.assertEqual(out[1].meetings[0], courses[1].meetings[0])
        self.assertEqual(out[0], courses[0])

    def test_add_meeting_missing_course_is_noop(self) -> None:
        courses = _courses()
        self.assertEqual(add_meeting(courses, "nope"), courses)

    def test_remove_meeting(self) -> None:
        courses = _courses()
        out = remove_meeting(courses, "c1", "m1")
        self.assertEqual([m.meeting_id for m in out[0].meetings], ["m2"])
        self.assertEqual(out[1], courses[1])

    def test_remove_all_meetings_allowed(self) -> None:
        courses = _courses()
        out = remove_meeting(courses, "c2", "m1")
        self.assertEqual(out[1].meetings, ())

    def test_remove_meeting_missing_is_noop(self) -> None:
        courses = _courses()
        self.assertEqual(remove_meeting(courses, "c1", "m9"), courses)


class TestTotalCredits(unittest.TestCase):
    def test_sum_with_three_decimals(self) -> None:
        courses = (
            Course(course_id="a", credits="3.000"),
            Course(course_id="b", credits=" 4.5 "),
            Course(course_id="c", credits="n/a"),
            Course(course_id="d", credits=""),
        )
        self.assertEqual(total_credits(courses), "7.500")

    def test_empty(self) -> None:
        self.assertEqual(total_credits(()), "0.000")


if __name__ == "__main__":
    unittest.main()
