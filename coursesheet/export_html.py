"""
HTML file export.

Writes the rendered schedule page to disk so it can be opened in any
browser or printed. The rendered string is written unchanged as UTF-8.
"""

from __future__ import annotations

import logging
from pathlib import Path

from coursesheet.model import TranscriptData
from coursesheet.render import render_transcript_html, transcript_file_name

logger = logging.getLogger(__name__)


def export_transcript_html(
    data: TranscriptData, out_path: str | Path | None = None, out_dir: str | Path | None = None
) -> Path:
    """
    Export the schedule page. Returns the written path.

    Without out_path the suggested file name is used inside out_dir
    (default: current directory).
    """
    if out_path is not None:
        out = Path(out_path)
    else:
        out = Path(out_dir if out_dir is not None else ".") / transcript_file_name(data)
    out.parent.mkdir(parents=True, exist_ok=True)

    html = render_transcript_html(data)
    # write_bytes: no newline translation on any platform
    out.write_bytes(html.encode("utf-8"))

    logger.info("Exported %d courses to %s", len(data.courses), out)
    return out
