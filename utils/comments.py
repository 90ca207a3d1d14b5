"""Build the comment dump returned by the ``getLoomComments`` tool."""

from __future__ import annotations

import asyncio
import logging

from models.loom import dump_comments
from models.results import ToolResult
from utils.loom_api import LoomClient
from utils.transcripts import INVALID_URL_MESSAGE
from utils.video_id import extract_video_id

_logger = logging.getLogger(__name__)

NO_COMMENTS_MESSAGE = "Could not fetch comments for this video."


async def get_comments(video_url: str, client: LoomClient) -> ToolResult:
    """Fetch the full comment tree of a Loom video as JSON text.

    Comments and their replies are passed through in upstream order,
    with no filtering.  A video with no comments yields ``[]``.
    """
    _logger.info("Processing video URL for comments: %s", video_url)
    video_id = extract_video_id(video_url)
    if not video_id:
        return ToolResult.error(INVALID_URL_MESSAGE)

    comments = await asyncio.to_thread(client.fetch_comments, video_id)
    if comments is None:
        return ToolResult.error(NO_COMMENTS_MESSAGE)
    _logger.info("Fetched %d top-level comments for %s", len(comments), video_id)
    return ToolResult.ok(dump_comments(comments))
