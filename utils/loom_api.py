"""Client for the Loom GraphQL API and caption files.

Three GraphQL lookups are supported: the transcript descriptor (which
holds the caption file URL), basic video metadata and the comment tree.
Each lookup catches its own transport, JSON and validation failures and
returns ``None``, so callers can tell "not available for this video"
apart from a crash.  Downloading the caption file is the exception: it
raises :class:`FetchError` because the caller reports the reason.

The client is synchronous and built on ``requests``.  Async callers run
its methods in worker threads (see ``utils.transcripts``).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from config import Settings, get_settings
from models.loom import (
    Comment,
    CommentedVideo,
    TranscriptDetails,
    VideoMetadata,
    comments_video_adapter,
    transcript_result_adapter,
    video_result_adapter,
)
from utils import queries

_logger = logging.getLogger(__name__)

# Failures that mean "upstream unavailable" for a GraphQL lookup.
UPSTREAM_ERRORS = (requests.RequestException, ValueError, ValidationError, TypeError)


class FetchError(Exception):
    """Raised when a caption file cannot be downloaded.

    Attributes:
        status: The HTTP status code, or ``None`` when the request never
            got a response.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class LoomClient:
    """Thin wrapper around the Loom GraphQL endpoint.

    Args:
        settings: Endpoint, user agent and timeout.  Defaults to the
            process settings.
        session: HTTP session to send requests with.  A fresh
            ``requests.Session`` is created when omitted.
        logger: Logger for request outcomes.  Defaults to this module's
            logger.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session if session is not None else requests.Session()
        self.logger = logger or _logger

    def __enter__(self) -> "LoomClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }

    def _post_graphql(
        self, operation_name: str, variables: Dict[str, Any], query: str
    ) -> Dict[str, Any]:
        """POST a GraphQL operation and return the ``data`` object.

        Raises:
            requests.RequestException: On transport errors or a non-2xx
                status.
            ValueError: If the body or its ``data`` field is not a JSON
                object.
        """
        body = {
            "operationName": operation_name,
            "variables": variables,
            "query": query,
        }
        resp = self.session.post(
            self.settings.graphql_url,
            json=body,
            headers=self.headers,
            timeout=self.settings.request_timeout,
        )
        resp.raise_for_status()
        payload = resp.json()
        self.logger.debug("%s response: %s", operation_name, json.dumps(payload, indent=2))
        if not isinstance(payload, dict):
            raise ValueError(f"{operation_name} returned a non-object body")
        if payload.get("errors"):
            self.logger.warning("%s returned GraphQL errors: %s", operation_name, payload["errors"])
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise ValueError(f"{operation_name} returned a non-object data field")
        return data

    def fetch_transcript_descriptor(self, video_id: str) -> Optional[TranscriptDetails]:
        """Look up the transcript details for a video.

        Returns:
            The ``VideoTranscriptDetails`` variant, or ``None`` if the
            request failed, Loom answered with ``GenericError``, or no
            caption source URL is present.
        """
        try:
            data = self._post_graphql(
                queries.FETCH_VIDEO_TRANSCRIPT_OPERATION,
                {"videoId": video_id, "password": None},
                queries.FETCH_VIDEO_TRANSCRIPT_QUERY,
            )
            node = data.get("fetchVideoTranscript")
            if node is None:
                self.logger.info("No transcript returned for video %s", video_id)
                return None
            result = transcript_result_adapter.validate_python(node)
        except UPSTREAM_ERRORS as exc:
            self.logger.warning("Error fetching transcript URL for %s: %s", video_id, exc)
            return None
        if not isinstance(result, TranscriptDetails):
            self.logger.info("Transcript lookup for %s failed: %s", video_id, result.message)
            return None
        if not result.captions_source_url:
            self.logger.info("Transcript for %s has no caption source URL", video_id)
            return None
        return result

    def fetch_metadata(self, video_id: str) -> Optional[VideoMetadata]:
        """Fetch the title and description of a video.

        Returns:
            The metadata, or ``None`` for private videos and on any
            failure.
        """
        try:
            data = self._post_graphql(
                queries.GET_VIDEO_INFO_OPERATION,
                {"id": video_id, "password": None},
                queries.GET_VIDEO_INFO_QUERY,
            )
            node = data.get("getVideo")
            if node is None:
                return None
            return VideoMetadata.from_video(video_result_adapter.validate_python(node))
        except UPSTREAM_ERRORS as exc:
            self.logger.warning("Error fetching video metadata for %s: %s", video_id, exc)
            return None

    def fetch_comments(self, video_id: str) -> Optional[List[Comment]]:
        """Fetch the comment tree of a video, deleted comments included.

        Returns:
            Top-level comments in upstream order (possibly empty), or
            ``None`` when the video exposes no comment collection or the
            request failed.
        """
        try:
            data = self._post_graphql(
                queries.FETCH_VIDEO_COMMENTS_OPERATION,
                {"id": video_id, "password": None},
                queries.FETCH_VIDEO_COMMENTS_QUERY,
            )
            node = data.get("video")
            if node is None:
                return None
            video = comments_video_adapter.validate_python(node)
        except UPSTREAM_ERRORS as exc:
            self.logger.warning("Error fetching video comments for %s: %s", video_id, exc)
            return None
        if not isinstance(video, CommentedVideo) or video.video_comments is None:
            self.logger.info("No comment collection for video %s", video_id)
            return None
        return list(video.video_comments)

    def fetch_caption_payload(self, url: str) -> str:
        """Download a caption (WebVTT) file.

        Raises:
            FetchError: If the request fails or the response status is
                not successful.
        """
        self.logger.debug("Fetching VTT from URL: %s", url)
        try:
            resp = self.session.get(url, timeout=self.settings.request_timeout)
        except requests.RequestException as exc:
            raise FetchError(str(exc)) from exc
        self.logger.debug("VTT response status: %s", resp.status_code)
        if not resp.ok:
            raise FetchError(f"HTTP error! status: {resp.status_code}", status=resp.status_code)
        return resp.text
