"""Conversion of WebVTT caption files to plain transcript text."""

from __future__ import annotations

import re

WEBVTT_HEADER = "WEBVTT"
CUE_TIMING_ARROW = "-->"
_CUE_NUMBER = re.compile(r"^\d+$")


def _is_caption_text(line: str) -> bool:
    if CUE_TIMING_ARROW in line or not line.strip():
        return False
    if _CUE_NUMBER.match(line.rstrip("\r")) or line.startswith(WEBVTT_HEADER):
        return False
    return True


def parse_vtt_to_text(vtt_content: str) -> str:
    """Flatten a WebVTT payload into a single line of prose.

    The header, cue numbers, timing lines and blank separators are
    dropped.  Every remaining line is stripped and the lines are joined
    with single spaces in file order.  Repeated cue text is kept as is.

    Args:
        vtt_content: Raw caption file contents.

    Returns:
        The transcript text, or an empty string for an empty payload.
    """
    transcript = ""
    for line in vtt_content.split("\n"):
        if not _is_caption_text(line):
            continue
        transcript += line.strip() + " "
    return transcript.strip()
