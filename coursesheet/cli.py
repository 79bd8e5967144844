"""
CLI (Command Line Interface).

All commands work on a JSON draft file that holds the student details and
courses being edited, e.g.:

    coursesheet new draft.json
    coursesheet set-student draft.json student_id A01234567
    coursesheet add-course draft.json
    coursesheet set-course draft.json <course_id> title "Intro to Systems - COMP1234 - 0"
    coursesheet show draft.json
    coursesheet render draft.json --out-dir out/

Every edit loads the draft, applies one model operation and saves the
result. Editing an id that does not exist changes nothing.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from coursesheet import config
from coursesheet.export_html import export_transcript_html
from coursesheet.model import (
    COURSE_FIELDS,
    MEETING_FIELDS,
    STUDENT_FIELDS,
    TranscriptData,
    add_course,
    add_meeting,
    find_course,
    new_transcript,
    remove_course,
    remove_meeting,
    set_course_field,
    set_courses,
    set_meeting_field,
    set_student,
    set_student_field,
)
from coursesheet.render import render_transcript_html, transcript_file_name
from coursesheet.sample import apply_random_courses
from coursesheet.storage import load_transcript, save_transcript

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """
    A user-facing problem; the message is printed and the command exits with 1.
    """


def _load(path: str) -> TranscriptData:
    data = load_transcript(path)
    if data is None:
        raise CommandError(f"Could not read draft: {path}")
    return data


def _check_field(field_name: str, allowed: tuple[str, ...]) -> None:
    if field_name not in allowed:
        raise CommandError(f"Unknown field '{field_name}'. Choose from: {', '.join(allowed)}")


def _save_if_changed(before: TranscriptData, after: TranscriptData, path: str, what: str) -> bool:
    if after == before:
        print(f"Nothing changed for {what}.")
        return False
    save_transcript(after, path)
    return True


def _cmd_new(args: argparse.Namespace) -> int:
    path = Path(args.draft)
    if path.exists() and not args.force:
        raise CommandError(f"{path} already exists (use --force to overwrite).")
    save_transcript(new_transcript(), path)
    print(f"Created: {path}")
    return 0


def _cmd_sample(args: argparse.Namespace) -> int:
    path = Path(args.draft)
    data = load_transcript(path) if path.exists() else new_transcript()
    if data is None:
        raise CommandError(f"Could not read draft: {path}")

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    data = apply_random_courses(data, rng)
    save_transcript(data, path)
    print(f"Sample courses: {len(data.courses)} (total credits {data.student.total_credits})")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """
    Print student details and one table row per meeting.
    """
    data = _load(args.draft)
    s = data.student
    console = Console(highlight=False)

    header = " | ".join(escape(v or "-") for v in (s.name, s.term, s.generated_on))
    console.print(f"[bold]{escape(s.student_id or '-')}[/bold] {header}")
    console.print(f"Total credit hours: {escape(s.total_credits or '-')}")

    table = Table(box=box.SIMPLE, show_lines=False)
    table.add_column("Course ID", style="dim", no_wrap=True)
    table.add_column("Title")
    table.add_column("CRN")
    table.add_column("Credits", justify="right")
    table.add_column("Meeting ID", style="dim", no_wrap=True)
    table.add_column("Time")
    table.add_column("Days")
    table.add_column("Where")

    for c in data.courses:
        title = c.title or "Untitled Course"
        if not c.meetings:
            table.add_row(escape(c.course_id), escape(title), escape(c.crn), escape(c.credits), "-", "", "", "")
            continue
        for i, m in enumerate(c.meetings):
            if i == 0:
                table.add_row(
                    escape(c.course_id), escape(title), escape(c.crn), escape(c.credits),
                    escape(m.meeting_id), escape(m.time), escape(m.days), escape(m.location),
                )
            else:
                table.add_row("", "", "", "", escape(m.meeting_id), escape(m.time), escape(m.days), escape(m.location))

    console.print(table)
    console.print(f"Courses: {len(data.courses)}")
    return 0


def _cmd_set_student(args: argparse.Namespace) -> int:
    _check_field(args.field, STUDENT_FIELDS)
    data = _load(args.draft)
    data = set_student(data, set_student_field(data.student, args.field, args.value))
    save_transcript(data, args.draft)
    print(f"Updated student {args.field}.")
    return 0


def _cmd_add_course(args: argparse.Namespace) -> int:
    data = _load(args.draft)
    data = set_courses(data, add_course(data.courses))
    save_transcript(data, args.draft)
    print(data.courses[-1].course_id)
    return 0


def _cmd_remove_course(args: argparse.Namespace) -> int:
    data = _load(args.draft)
    # Mirror the editor: the last remaining course cannot be removed.
    if len(data.courses) == 1 and data.courses[0].course_id == args.course_id:
        raise CommandError("Cannot remove the only course.")

    after = set_courses(data, remove_course(data.courses, args.course_id))
    if _save_if_changed(data, after, args.draft, f"course {args.course_id}"):
        print(f"Removed course {args.course_id} (courses: {len(after.courses)})")
    return 0


def _cmd_set_course(args: argparse.Namespace) -> int:
    _check_field(args.field, COURSE_FIELDS)
    data = _load(args.draft)
    after = set_courses(data, set_course_field(data.courses, args.course_id, args.field, args.value))
    if _save_if_changed(data, after, args.draft, f"course {args.course_id}"):
        print(f"Updated course {args.field}.")
    return 0


def _cmd_add_meeting(args: argparse.Namespace) -> int:
    data = _load(args.draft)
    after = set_courses(data, add_meeting(data.courses, args.course_id))
    _save_if_changed(data, after, args.draft, f"course {args.course_id}")

    course = find_course(after.courses, args.course_id)
    if course is not None:
        print(course.meetings[-1].meeting_id)
    return 0


def _cmd_remove_meeting(args: argparse.Namespace) -> int:
    data = _load(args.draft)
    after = set_courses(data, remove_meeting(data.courses, args.course_id, args.meeting_id))
    if _save_if_changed(data, after, args.draft, f"meeting {args.meeting_id} of course {args.course_id}"):
        print(f"Removed meeting {args.meeting_id}")
    return 0


def _cmd_set_meeting(args: argparse.Namespace) -> int:
    _check_field(args.field, MEETING_FIELDS)
    data = _load(args.draft)
    after = set_courses(
        data, set_meeting_field(data.courses, args.course_id, args.meeting_id, args.field, args.value)
    )
    if _save_if_changed(data, after, args.draft, f"meeting {args.meeting_id} of course {args.course_id}"):
        print(f"Updated meeting {args.field}.")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    data = _load(args.draft)
    if args.stdout:
        sys.stdout.write(render_transcript_html(data))
        return 0

    out = export_transcript_html(data, out_path=args.out, out_dir=args.out_dir)
    print(f"Exported {len(data.courses)} courses to: {out}")
    return 0


def _cmd_filename(args: argparse.Namespace) -> int:
    print(transcript_file_name(_load(args.draft)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="coursesheet", description="Course schedule page builder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_new = sub.add_parser("new", help="Create a blank draft")
    p_new.add_argument("draft", type=str, help="Draft JSON path")
    p_new.add_argument("--force", action="store_true", help="Overwrite an existing draft")

    p_sample = sub.add_parser("sample", help="Fill the draft with random sample courses")
    p_sample.add_argument("draft", type=str, help="Draft JSON path (created if missing)")
    p_sample.add_argument("--seed", type=int, default=None, help="Random seed for reproducible samples")

    p_show = sub.add_parser("show", help="Show the draft as a table")
    p_show.add_argument("draft", type=str)

    p_student = sub.add_parser("set-student", help="Edit a student field")
    p_student.add_argument("draft", type=str)
    p_student.add_argument("field", type=str, help=", ".join(STUDENT_FIELDS))
    p_student.add_argument("value", type=str)

    p_add_course = sub.add_parser("add-course", help="Append a blank course and print its id")
    p_add_course.add_argument("draft", type=str)

    p_rm_course = sub.add_parser("remove-course", help="Remove a course")
    p_rm_course.add_argument("draft", type=str)
    p_rm_course.add_argument("course_id", type=str)

    p_course = sub.add_parser("set-course", help="Edit a course field")
    p_course.add_argument("draft", type=str)
    p_course.add_argument("course_id", type=str)
    p_course.add_argument("field", type=str, help=", ".join(COURSE_FIELDS))
    p_course.add_argument("value", type=str)

    p_add_meeting = sub.add_parser("add-meeting", help="Append a blank meeting and print its id")
    p_add_meeting.add_argument("draft", type=str)
    p_add_meeting.add_argument("course_id", type=str)

    p_rm_meeting = sub.add_parser("remove-meeting", help="Remove a meeting")
    p_rm_meeting.add_argument("draft", type=str)
    p_rm_meeting.add_argument("course_id", type=str)
    p_rm_meeting.add_argument("meeting_id", type=str)

    p_meeting = sub.add_parser("set-meeting", help="Edit a meeting field")
    p_meeting.add_argument("draft", type=str)
    p_meeting.add_argument("course_id", type=str)
    p_meeting.add_argument("meeting_id", type=str)
    p_meeting.add_argument("field", type=str, help=", ".join(MEETING_FIELDS))
    p_meeting.add_argument("value", type=str)

    p_render = sub.add_parser("render", help="Export the schedule page as HTML")
    p_render.add_argument("draft", type=str)
    p_render.add_argument("-o", "--out", type=str, default=None, help="Output .html path")
    p_render.add_argument("--out-dir", type=str, default=None, help="Directory for the suggested file name")
    p_render.add_argument("--stdout", action="store_true", help="Write HTML to stdout instead of a file")

    p_filename = sub.add_parser("filename", help="Print the suggested file name")
    p_filename.add_argument("draft", type=str)

    return parser


COMMANDS = {
    "new": _cmd_new,
    "sample": _cmd_sample,
    "show": _cmd_show,
    "set-student": _cmd_set_student,
    "add-course": _cmd_add_course,
    "remove-course": _cmd_remove_course,
    "set-course": _cmd_set_course,
    "add-meeting": _cmd_add_meeting,
    "remove-meeting": _cmd_remove_meeting,
    "set-meeting": _cmd_set_meeting,
    "render": _cmd_render,
    "filename": _cmd_filename,
}


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=config.LOG_FORMAT,
    )
    logger.debug("Command: %s", args.command)

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args))
    except CommandError as exc:
        print(str(exc))
        raise SystemExit(1)
