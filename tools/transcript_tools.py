"""MCP tool for retrieving Loom transcripts.

This module exposes a single tool, ``getLoomTranscript``, that accepts
a Loom share URL and returns the video's transcript as plain text.  It
uses ``utils.transcripts`` to resolve the video ID, look up the caption
file and flatten it.  When Loom exposes the video's title and
description, they are placed above the transcript as a Markdown
heading::

    # Weekly sync

    **Description:** Notes for the team

    ---

    ## Transcript

    Hi everyone, quick update on ...

Example call:

.. code-block:: json

    {
      "videoUrl": "https://www.loom.com/share/0123456789abcdef"
    }

Failures are reported as a text result starting with ``Error:``.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import Field

from models.results import ToolResult
from server import mcp  # Shared FastMCP instance
from utils.loom_api import LoomClient
from utils.transcripts import get_transcript
from utils.video_id import VIDEO_URL_DESCRIPTION

_logger = logging.getLogger(__name__)


@mcp.tool(
    name="getLoomTranscript",
    description="Get transcript text, title, and description from a Loom video URL",
)
async def get_loom_transcript(
    videoUrl: Annotated[str, Field(description=VIDEO_URL_DESCRIPTION)],  # noqa: N803
) -> str:
    """Retrieve the transcript, title and description of a Loom video.

    Args:
        videoUrl: The Loom share URL.

    Returns:
        The transcript text, optionally preceded by a heading with the
        title and description, or an ``Error:`` message.
    """
    try:
        with LoomClient() as client:
            result = await get_transcript(videoUrl, client)
    except Exception as exc:
        _logger.exception("Error in transcript handler")
        result = ToolResult.error(str(exc))
    return result.render()
