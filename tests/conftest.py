from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from config import Settings


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text if text is not None else json.dumps(json_data)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


class FakeSession:
    """Stands in for ``requests.Session``.

    ``handler`` receives the method, URL and keyword arguments of each
    request and returns a ``FakeResponse`` (or raises).
    """

    def __init__(self, handler: Callable[..., FakeResponse]):
        self.handler = handler
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def _request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        call = {"method": method, "url": url, **kwargs}
        if "json" in kwargs:
            call["body"] = kwargs["json"]
        self.calls.append(call)
        return self.handler(method, url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._request("POST", url, **kwargs)

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._request("GET", url, **kwargs)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        graphql_url="https://loom.test/graphql",
        user_agent="loom-transcript-mcp/1.0.0",
        request_timeout=5.0,
    )


def graphql_handler(data: Dict[str, Any]) -> Callable[..., FakeResponse]:
    def handler(method: str, url: str, **kwargs: Any) -> FakeResponse:
        return FakeResponse(json_data={"data": data})

    return handler


SAMPLE_VTT = (
    "WEBVTT\n\n"
    "1\n00:00:00.000 --> 00:00:02.000\nHello world\n\n"
    "2\n00:00:02.000 --> 00:00:04.000\nGoodbye\n"
)


SAMPLE_COMMENT = {
    "id": "c1",
    "content": "Nice work @[Sam](u2)",
    "plainContent": "Nice work @Sam",
    "time_stamp": 12,
    "user_name": "Alex",
    "avatar": {
        "name": "Alex",
        "thumb": "https://cdn.loom.test/alex.png",
        "isAtlassianMastered": False,
        "__typename": "Avatar",
    },
    "edited": False,
    "createdAt": "2024-05-01T10:00:00.000Z",
    "isChatMessage": False,
    "user_id": "u1",
    "anon_user_id": None,
    "deletedAt": None,
    "children_comments": [
        {
            "id": "r1",
            "content": "Thanks!",
            "plainContent": "Thanks!",
            "time_stamp": None,
            "user_name": "Sam",
            "avatar": None,
            "edited": True,
            "user_id": "u2",
            "anon_user_id": None,
            "createdAt": "2024-05-01T11:00:00.000Z",
            "isChatMessage": False,
            "comment_post_id": "c1",
            "extended_reaction": None,
            "__typename": "PublicVideoComment",
        }
    ],
    "__typename": "PublicVideoComment",
}
