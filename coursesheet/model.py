"""
Central data model definitions used across the project.

This module defines the canonical structure of Student, Course and Meeting
records so that:
- the renderer, storage and CLI share the same field names
- every record is always complete (empty strings, never missing fields)
- edits never mutate a record in place

Every edit operation returns a new value. If the identity or field name
does not match anything, the input is returned unchanged.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple

from coursesheet import config


@dataclass(frozen=True)
class Meeting:
    """
    One scheduled meeting slot of a course (one row of the meetings table).
    """

    meeting_id: str
    type: str = ""
    time: str = ""
    days: str = ""
    location: str = ""
    date_range: str = ""
    schedule_type: str = ""
    instructors: str = ""


@dataclass(frozen=True)
class Course:
    """
    One registered course with its meeting slots in display order.
    """

    course_id: str
    title: str = ""
    associated_term: str = ""
    crn: str = ""
    status: str = ""
    assigned_instructor: str = ""
    grade_mode: str = ""
    credits: str = ""
    level: str = ""
    campus: str = ""
    meetings: Tuple[Meeting, ...] = ()


@dataclass(frozen=True)
class Student:
    name: str = ""
    student_id: str = ""
    term: str = ""
    generated_on: str = ""
    total_credits: str = ""
    note: str = ""


@dataclass(frozen=True)
class TranscriptData:
    """
    Aggregate root: the only input the renderer needs.
    """

    student: Student = field(default_factory=Student)
    courses: Tuple[Course, ...] = ()


Courses = Tuple[Course, ...]

STUDENT_FIELDS = ("name", "student_id", "term", "generated_on", "total_credits", "note")
COURSE_FIELDS = (
    "title",
    "associated_term",
    "crn",
    "status",
    "assigned_instructor",
    "grade_mode",
    "credits",
    "level",
    "campus",
)
MEETING_FIELDS = ("type", "time", "days", "location", "date_range", "schedule_type", "instructors")


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def new_id() -> str:
    return uuid.uuid4().hex


def new_meeting() -> Meeting:
    return Meeting(meeting_id=new_id(), type=config.DEFAULT_MEETING_TYPE)


def new_course() -> Course:
    """
    A blank course always starts with one blank meeting.
    """
    return Course(course_id=new_id(), meetings=(new_meeting(),))


def format_generated_on(now: datetime) -> str:
    # "Nov 03, 2025 07:26 PM" -> "Nov 03, 2025 07:26 pm"
    text = now.strftime(config.GENERATED_ON_FORMAT)
    return text[:-2] + text[-2:].lower()


def new_student(now: Optional[datetime] = None) -> Student:
    return Student(
        term=config.DEFAULT_TERM,
        generated_on=format_generated_on(now or datetime.now()),
        total_credits=config.DEFAULT_TOTAL_CREDITS,
        note=config.DEFAULT_NOTE,
    )


def new_transcript(now: Optional[datetime] = None) -> TranscriptData:
    return TranscriptData(student=new_student(now), courses=(new_course(),))


# ---------------------------------------------------------------------------
# Edit operations
# ---------------------------------------------------------------------------


def set_student_field(student: Student, field_name: str, value: str) -> Student:
    if field_name not in STUDENT_FIELDS:
        return student
    return replace(student, **{field_name: value})


def set_course_field(courses: Courses, course_id: str, field_name: str, value: str) -> Courses:
    if field_name not in COURSE_FIELDS or not any(c.course_id == course_id for c in courses):
        return courses
    return tuple(replace(c, **{field_name: value}) if c.course_id == course_id else c for c in courses)


def _has_meeting(courses: Courses, course_id: str, meeting_id: str) -> bool:
    for c in courses:
        if c.course_id == course_id:
            return any(m.meeting_id == meeting_id for m in c.meetings)
    return False


def set_meeting_field(courses: Courses, course_id: str, meeting_id: str, field_name: str, value: str) -> Courses:
    if field_name not in MEETING_FIELDS or not _has_meeting(courses, course_id, meeting_id):
        return courses

    out = []
    for c in courses:
        if c.course_id == course_id:
            meetings = tuple(
                replace(m, **{field_name: value}) if m.meeting_id == meeting_id else m for m in c.meetings
            )
            c = replace(c, meetings=meetings)
        out.append(c)
    return tuple(out)


def add_course(courses: Courses) -> Courses:
    """
    Append a blank course. The new course is always the last element.
    """
    return tuple(courses) + (new_course(),)


def remove_course(courses: Courses, course_id: str) -> Courses:
    # No minimum is enforced here; hosts decide whether the last course may go.
    if not any(c.course_id == course_id for c in courses):
        return courses
    return tuple(c for c in courses if c.course_id != course_id)


def add_meeting(courses: Courses, course_id: str) -> Courses:
    """
    Append a blank meeting to the matching course (last element of its meetings).
    """
    if not any(c.course_id == course_id for c in courses):
        return courses
    return tuple(
        replace(c, meetings=c.meetings + (new_meeting(),)) if c.course_id == course_id else c for c in courses
    )


def remove_meeting(courses: Courses, course_id: str, meeting_id: str) -> Courses:
    if not _has_meeting(courses, course_id, meeting_id):
        return courses
    return tuple(
        replace(c, meetings=tuple(m for m in c.meetings if m.meeting_id != meeting_id))
        if c.course_id == course_id
        else c
        for c in courses
    )


def set_student(data: TranscriptData, student: Student) -> TranscriptData:
    return replace(data, student=student)


def set_courses(data: TranscriptData, courses: Courses) -> TranscriptData:
    return replace(data, courses=tuple(courses))


def find_course(courses: Courses, course_id: str) -> Optional[Course]:
    for c in courses:
        if c.course_id == course_id:
            return c
    return None


def _credits_value(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def total_credits(courses: Courses) -> str:
    """
    Sum of all course credits, formatted with three decimals ("14.500").

    Credits that do not parse as a finite number count as 0.
    """
    total = sum(_credits_value(c.credits) for c in courses)
    return f"{total:.3f}"
