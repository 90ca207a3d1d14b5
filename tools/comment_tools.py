"""MCP tool for retrieving Loom video comments.

``getLoomComments`` returns the video's comment tree as indented JSON.
Each top-level comment carries its replies in ``children_comments``;
replies do not nest further.  Deleted comments are included and can be
recognised by a non-null ``deletedAt``.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import Field

from models.results import ToolResult
from server import mcp  # Shared FastMCP instance
from utils.comments import get_comments
from utils.loom_api import LoomClient
from utils.video_id import VIDEO_URL_DESCRIPTION

_logger = logging.getLogger(__name__)


@mcp.tool(name="getLoomComments", description="Get comments from a Loom video URL")
async def get_loom_comments(
    videoUrl: Annotated[str, Field(description=VIDEO_URL_DESCRIPTION)],  # noqa: N803
) -> str:
    """Retrieve the comment tree of a Loom video as JSON.

    Args:
        videoUrl: The Loom share URL.

    Returns:
        Indented JSON listing top-level comments with their replies, or
        an ``Error:`` message.
    """
    try:
        with LoomClient() as client:
            result = await get_comments(videoUrl, client)
    except Exception as exc:
        _logger.exception("Error in comments handler")
        result = ToolResult.error(str(exc))
    return result.render()
