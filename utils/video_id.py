"""Helpers for pulling a Loom video ID out of a share URL."""

from __future__ import annotations

import re
from typing import Optional

# The ID is the path segment right after ``/share/``.
SHARE_URL_PATTERN = re.compile(r"/share/([^/?]+)")

VIDEO_URL_DESCRIPTION = "The Loom video URL (e.g., https://www.loom.com/share/123456)"


def extract_video_id(url: str) -> Optional[str]:
    """Extract the Loom video ID from a share URL.

    Args:
        url: A Loom share URL such as
            ``https://www.loom.com/share/abc123?sid=xyz``.

    Returns:
        The video ID if found, otherwise ``None``.  Malformed input
        (including non-string values) also yields ``None``.

    Examples::

        >>> extract_video_id("https://www.loom.com/share/abc123")
        'abc123'
        >>> extract_video_id("https://www.loom.com/share/abc123/?t=5")
        'abc123'
        >>> extract_video_id("https://www.loom.com/looms/videos") is None
        True
    """
    if not isinstance(url, str):
        return None
    match = SHARE_URL_PATTERN.search(url)
    if match:
        return match.group(1)
    return None
