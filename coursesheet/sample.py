"""
Sample course data.

Fills a transcript with a handful of plausible courses so the rendered
page can be previewed without typing everything in. Pass a seeded
random.Random to get the same courses again (only the ids differ).
"""

from __future__ import annotations

import random
from datetime import date
from typing import Optional

from coursesheet.model import (
    Course,
    Meeting,
    TranscriptData,
    new_id,
    set_courses,
    set_student,
    set_student_field,
    total_credits,
)

CURRENT_YEAR = 2025

DAYS = "MTWRF"
TERMS = ("Fall", "Winter", "Spring", "Summer")
TERM_START_MONTH = {"Fall": 9, "Winter": 1, "Spring": 5, "Summer": 7}
LOCATIONS = ("DTC", "SE", "NE", "SW")
SCHEDULE_TYPES = ("Lecture/Lab Combo", "Lecture", "Lab", "Online")
CAMPUSES = ("Downtown", "Burnaby", "Distance / Online")
REGISTERED_MONTHS = ("Jul", "Aug", "Sep")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# (code, title, credits or None, instructors)
CATALOG = (
    ("COMP1510", "Programming Methods", 7.0, ("Chris Thompson", "Maryam Rahimi")),
    ("COMP1537", "Web Development 1", 4.0, ("Chris Thompson", "Jeff Parker")),
    ("COMP1712", "Business Analysis and System Design", 3.0, ("Dana Whitfield",)),
    ("COMP1113", "Applied Mathematics", 3.0, ("Samuel Ortiz", "Linh Tran")),
    ("COMP2510", "Procedural Programming", 5.0, ("Maryam Rahimi",)),
    ("COMP2522", "Object Oriented Programming 1", 5.0, ("Jeff Parker", "Priya Nair")),
    ("COMP2714", "Relational Database Systems", 4.0, ("Dana Whitfield", "Linh Tran")),
    ("COMP2721", "Computer Organization/Architecture", 4.0, ("Samuel Ortiz",)),
    ("COMP3522", "Object Oriented Programming 2", 4.0, ("Priya Nair",)),
    ("COMP3717", "Mobile Application Development", 4.0, ("Jeff Parker",)),
    ("COMP3760", "Algorithm Analysis and Design", 4.0, ("Samuel Ortiz", "Maryam Rahimi")),
    ("COMP4537", "Internet Software Architecture", 4.0, ("Chris Thompson",)),
    ("COMM1116", "Business Communications 1", 3.0, ("Helen Brooks",)),
    ("LIBS7001", "Critical Reading and Writing", None, ("Helen Brooks", "Omar Haddad")),
)


def _format_time(hour: int, minute: int) -> str:
    period = "pm" if hour >= 12 else "am"
    display_hour = hour - 12 if hour > 12 else (12 if hour == 0 else hour)
    return f"{display_hour}:{minute:02d} {period}"


def _format_date(d: date) -> str:
    return f"{MONTHS[d.month - 1]} {d.day:02d}, {d.year}"


def _random_meeting(rng: random.Random, min_hours: int = 3) -> Meeting:
    start_hour = rng.randint(8, 17 - min_hours)
    start_minute = rng.randint(0, 1) * 30

    duration_minutes = min_hours * 60 + (30 if rng.random() < 0.3 else 0)
    end_total = start_hour * 60 + start_minute + duration_minutes
    end_hour, end_minute = divmod(end_total, 60)

    # 1-3 days, always listed in week order
    days = "".join(sorted(rng.sample(DAYS, rng.randint(1, 3)), key=DAYS.index))

    term = rng.choice(TERMS)
    start_month = TERM_START_MONTH[term]
    start = date(CURRENT_YEAR, start_month, rng.randint(1, 7))
    end = date(CURRENT_YEAR, start_month + 3, rng.randint(8, 20))

    return Meeting(
        meeting_id=new_id(),
        type="Class",
        time=f"{_format_time(start_hour, start_minute)} - {_format_time(end_hour, end_minute)}",
        days=days,
        location=f"{rng.choice(LOCATIONS)} - {rng.randint(100, 999)}",
        date_range=f"{_format_date(start)} - {_format_date(end)}",
        schedule_type=rng.choice(SCHEDULE_TYPES),
        instructors="",
    )


def generate_random_courses(rng: Optional[random.Random] = None) -> tuple[Course, ...]:
    """
    Pick 3-5 catalog courses for one term, each with one meeting.
    """
    rng = rng or random.Random()
    picked = rng.sample(CATALOG, rng.randint(3, 5))
    term = f"{rng.choice(TERMS)} {CURRENT_YEAR}"

    courses = []
    for code, title, credits, staff in picked:
        courses.append(
            Course(
                course_id=new_id(),
                title=f"{title} - {code} - 0",
                associated_term=term,
                crn=str(rng.randint(10000, 99999)),
                status=f"**Registered** on {rng.choice(REGISTERED_MONTHS)} {rng.randint(1, 30)}, {CURRENT_YEAR}",
                assigned_instructor=rng.choice(staff),
                grade_mode="60% Pass Grade Required",
                credits=f"{credits:.3f}" if credits else "3.000",
                level="BCIT Student",
                campus=rng.choice(CAMPUSES),
                meetings=(_random_meeting(rng),),
            )
        )
    return tuple(courses)


def apply_random_courses(data: TranscriptData, rng: Optional[random.Random] = None) -> TranscriptData:
    """
    Replace all courses with sample ones and update the student's total credits.
    """
    courses = generate_random_courses(rng)
    student = set_student_field(data.student, "total_credits", total_credits(courses))
    return set_student(set_courses(data, courses), student)
