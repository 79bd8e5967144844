"""
HTML rendering of a course schedule page.

render_transcript_html() turns a TranscriptData value into one
self-contained HTML 4.01 document (inline styles, no external resources)
that looks like a registrar's "View Course Schedule" page.

Rendering is deterministic: the output depends only on the strings stored
in the data (no clock, no randomness), so the same input always yields the
same bytes.
"""

from __future__ import annotations

import re

from coursesheet import config
from coursesheet.model import Course, Meeting, TranscriptData


_STYLE = """  <style>
    .rightaligntext { text-align: right; font-size: 90%; }
    .captiontext {
      color: #1E2B83;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: bold;
      font-size: 100%;
      font-style: italic;
      text-align: left;
      margin-top: 1em;
    }
    .infotext {
      color: #666;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: normal;
      font-size: 90%;
      font-style: normal;
      text-align: left;
    }
    BODY {
      background-color: #fff;
      color: #000;
      font-family: verdana, helvetica, arial, sans-serif;
      font-style: normal;
      text-align: left;
      margin-top: 0px;
      margin-left: 2%;
      background-repeat: no-repeat;
    }
    DIV.pagetitlediv { text-align: left; }
    DIV.infotextdiv { text-align: left; }
    DIV.pagebodydiv { text-align: left; }
    DIV.staticheaders { text-align: right; font-size: 90%; }
    H1 {
      color: #27b;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: bold;
      font-style: normal;
      font-size: 90%;
      margin-top: 0px;
      padding-top: 0px;
      padding-bottom: 3px;
      border-bottom: 1px dotted #aaa;
    }
    H2 {
      color: #247;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: normal;
      font-size: 120%;
      font-style: normal;
    }
    TABLE.datadisplaytable {
      border-bottom: 0px solid;
      border-left: 0px solid;
      border-right: 0px solid;
      border-top: 0px solid;
    }
    TABLE.plaintable {
      border-bottom: 0px solid;
      border-left: 0px solid;
      border-right: 0px solid;
      border-top: 0px solid;
    }
    TABLE TD {
      vertical-align: top;
      color: #666;
    }
    TABLE TH.ddheader {
      background-color: #EEEEEE;
      color: #222;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: bold;
      font-size: 90%;
      font-style: normal;
      text-align: left;
      vertical-align: top;
    }
    TABLE TH.ddlabel {
      background-color: #EEEEEE;
      color: #222;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: bold;
      font-size: 90%;
      font-style: normal;
      text-align: left;
      vertical-align: top;
    }
    TABLE TD.dddefault {
      color: #222;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: normal;
      font-size: 90%;
      font-style: normal;
      text-align: left;
      vertical-align: top;
    }
    TABLE TD.pldefault {
      font-weight: normal;
      font-size: 90%;
    }
    TABLE TD.indefault {
      color: #222;
      font-family: verdana, helvetica, arial, sans-serif;
      font-weight: normal;
      font-size: 90%;
      font-style: normal;
      text-align: left;
    }
  </style>"""

# (label html, Course attribute) in display order
_COURSE_ROWS = (
    ("Associated Term", "associated_term"),
    ('<acronym title="Course Reference Number">CRN</acronym>', "crn"),
    ("Status", "status"),
    ("Assigned Instructor", "assigned_instructor"),
    ("Grade Mode", "grade_mode"),
    ("Credits", "credits"),
    ("Level", "level"),
    ("Campus", "campus"),
)

_MEETING_COLUMNS = (
    ("Type", "type"),
    ("Time", "time"),
    ("Days", "days"),
    ("Where", "location"),
    ("Date Range", "date_range"),
    ("Schedule Type", "schedule_type"),
    ("Instructors", "instructors"),
)

_NON_TOKEN_RE = re.compile(r"[^a-z0-9]+")
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def escape_html(text: str) -> str:
    """
    Escape the five markup-significant characters. '&' goes first so the
    entities produced for the others are not escaped again.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _cell(value: str) -> str:
    """
    Trimmed + escaped value, or a non-breaking space when empty.
    """
    trimmed = value.strip()
    return escape_html(trimmed) if trimmed else config.EMPTY_CELL


def _multiline(value: str) -> str:
    # escape first, then insert the break tags
    return _NEWLINE_RE.sub(config.NOTE_LINE_BREAK, escape_html(value.strip()))


def _fallback_meeting() -> Meeting:
    return Meeting(meeting_id="placeholder", **config.FALLBACK_MEETING)


def _render_meeting_row(meeting: Meeting) -> str:
    lines = ["<tr>"]
    for _, attr in _MEETING_COLUMNS:
        lines.append(f'  <td class="dddefault">{_cell(getattr(meeting, attr))}</td>')
    lines.append("</tr>")
    return "\n".join(lines)


def _render_course_section(course: Course) -> str:
    meetings = course.meetings or (_fallback_meeting(),)
    meeting_rows = "\n".join(_render_meeting_row(m) for m in meetings)

    detail_rows = "\n".join(
        "    <tr>\n"
        f'      <th colspan="2" class="ddlabel" scope="row">{label}:</th>\n'
        f'      <td class="dddefault">{_cell(getattr(course, attr))}</td>\n'
        "    </tr>"
        for label, attr in _COURSE_ROWS
    )
    header_cells = "\n".join(
        f'      <th class="ddheader" scope="col">{label}</th>' for label, _ in _MEETING_COLUMNS
    )

    return f"""<table class="datadisplaytable" summary="This layout table is used to present the schedule course detail">
  <caption class="captiontext">{_cell(course.title)}</caption>
  <tbody>
{detail_rows}
  </tbody>
</table>
<table class="datadisplaytable" summary="This table lists the scheduled meeting times and assigned instructors for this class..">
  <caption class="captiontext">Scheduled Meeting Times</caption>
  <tbody>
    <tr>
{header_cells}
    </tr>
    {meeting_rows}
  </tbody>
</table>
<br>"""


def render_transcript_html(data: TranscriptData) -> str:
    """
    Render the complete schedule document for one student.

    Every user-supplied value is escaped; empty values become &nbsp;
    except the note, whose newlines become <br /> tags. A course without
    meetings gets a single "Class / TBA" row so its table is never empty.
    """
    student = data.student
    course_sections = "\n".join(_render_course_section(c) for c in data.courses)

    return f"""<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" "http://www.w3.org/TR/html4/transitional.dtd">
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta http-equiv="Pragma" name="Cache-Control" content="no-cache">
  <meta http-equiv="Cache-Control" name="Cache-Control" content="no-cache">
  <title>View Course Schedule</title>
  <meta http-equiv="Content-Script-Type" name="Default_Script_Language" content="text/javascript">
{_STYLE}
</head>
<body>
<div class="pagetitlediv">
  <table class="plaintable" summary="This table displays title and static header displays." width="100%">
    <tbody>
      <tr>
        <td class="pldefault">
          <h2>View Course Schedule</h2>
        </td>
        <td class="pldefault">&nbsp;</td>
        <td class="pldefault">
          <p class="rightaligntext">
            <div class="staticheaders">
              {_cell(student.student_id)} {_cell(student.name)}<br>
              {_cell(student.term)}<br>
              {_cell(student.generated_on)}<br>
            </div>
          </p>
        </td>
      </tr>
    </tbody>
  </table>
</div>
<div class="pagebodydiv">
  <div class="infotextdiv">
    <table class="infotexttable" summary="This layout table contains information that may be helpful in understanding the content and functionality of this page.">
      <tbody>
        <tr>
          <td class="indefault">
            <span class="infotext">
              <p>{_multiline(student.note)}</p>
            </span>
          </td>
        </tr>
      </tbody>
    </table>
    <p></p>
  </div>
  Total Credit Hours: {_cell(student.total_credits)}
  <br><br>
  {course_sections}
</div>
</body>
</html>"""


def _token(text: str) -> str:
    return _NON_TOKEN_RE.sub("-", text.lower()).strip("-")


def transcript_file_name(data: TranscriptData) -> str:
    """
    Suggested download name, e.g. "a01234567-course-schedule-fall-2025.html".

    Falls back to "transcript-course-schedule.html" when the student id
    and term have no letters or digits.
    """
    id_token = _token(data.student.student_id)
    term_token = _token(data.student.term)

    prefix = id_token if id_token else config.FILE_NAME_PREFIX
    name = f"{prefix}-{config.FILE_NAME_STEM}"
    if term_token:
        name += f"-{term_token}"
    return name + config.FILE_NAME_SUFFIX
