"""Build the transcript text returned by the ``getLoomTranscript`` tool.

The pipeline is: share URL -> video ID -> (metadata, transcript
descriptor) fetched concurrently -> caption file -> plain text, with an
optional title/description heading on top.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Tuple

from models.loom import TranscriptDetails, VideoMetadata
from models.results import ToolResult
from utils.captions import parse_vtt_to_text
from utils.loom_api import FetchError, LoomClient
from utils.video_id import extract_video_id

_logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Could not extract video ID from the provided URL."
NO_TRANSCRIPT_MESSAGE = "Could not fetch transcript for this video."
EMPTY_TRANSCRIPT_MESSAGE = "The transcript for this video is empty."


def format_transcript(transcript_text: str, metadata: Optional[VideoMetadata]) -> str:
    """Prepend a Markdown heading built from ``metadata`` to the transcript.

    Without metadata the transcript is returned unchanged.

    Example::

        >>> format_transcript("Hello world", VideoMetadata(title="Demo"))
        '# Demo\\n\\n---\\n\\n## Transcript\\n\\nHello world'
    """
    response_text = ""
    if metadata is not None:
        response_text += f"# {metadata.title}\n\n"
        if metadata.description:
            response_text += f"**Description:** {metadata.description}\n\n"
        response_text += "---\n\n## Transcript\n\n"
    return response_text + transcript_text


async def _fetch_video_details(
    client: LoomClient, video_id: str
) -> Tuple[Optional[VideoMetadata], Optional[TranscriptDetails]]:
    """Run the metadata and transcript lookups side by side.

    Neither lookup waits on the other, and an exception in one is
    treated as "absent" without affecting the other.
    """
    metadata, descriptor = await asyncio.gather(
        asyncio.to_thread(client.fetch_metadata, video_id),
        asyncio.to_thread(client.fetch_transcript_descriptor, video_id),
        return_exceptions=True,
    )
    if isinstance(metadata, Exception):
        _logger.warning("Metadata lookup for %s raised: %s", video_id, metadata)
        metadata = None
    if isinstance(descriptor, Exception):
        _logger.warning("Transcript lookup for %s raised: %s", video_id, descriptor)
        descriptor = None
    return metadata, descriptor


async def get_transcript(video_url: str, client: LoomClient) -> ToolResult:
    """Fetch a Loom transcript and format it with the video's metadata.

    Args:
        video_url: A Loom share URL.
        client: Client used for every upstream request.

    Returns:
        The formatted transcript, or an error result describing which
        step failed.  This coroutine does not raise for expected
        failures.
    """
    _logger.info("Processing video URL: %s", video_url)
    video_id = extract_video_id(video_url)
    if not video_id:
        return ToolResult.error(INVALID_URL_MESSAGE)

    metadata, descriptor = await _fetch_video_details(client, video_id)
    _logger.debug("Metadata for %s: %s", video_id, metadata)
    captions_url = descriptor.captions_source_url if isinstance(descriptor, TranscriptDetails) else None
    if not captions_url:
        return ToolResult.error(NO_TRANSCRIPT_MESSAGE)

    try:
        vtt_content = await asyncio.to_thread(client.fetch_caption_payload, captions_url)
    except FetchError as exc:
        _logger.warning("Error fetching VTT content for %s: %s", video_id, exc)
        return ToolResult.error(f"Failed to fetch transcript: {exc}")

    transcript_text = parse_vtt_to_text(vtt_content)
    _logger.info("Transcript length for %s: %d", video_id, len(transcript_text))
    response_text = format_transcript(transcript_text, metadata)
    if not response_text:
        return ToolResult.error(EMPTY_TRANSCRIPT_MESSAGE)
    return ToolResult.ok(response_text)
