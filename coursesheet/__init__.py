"""
coursesheet: build a printable course schedule page from student and course data.
"""

from pathlib import Path

from coursesheet.model import (
    Course,
    Meeting,
    Student,
    TranscriptData,
    add_course,
    add_meeting,
    new_course,
    new_meeting,
    new_student,
    new_transcript,
    remove_course,
    remove_meeting,
    set_course_field,
    set_meeting_field,
    set_student_field,
)
from coursesheet.render import escape_html, render_transcript_html, transcript_file_name

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
