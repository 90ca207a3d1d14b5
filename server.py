"""
Configure the FastMCP server instance.

This module creates a shared `FastMCP` server named ``loom-transcript``
and imports tool modules so that their decorated functions are
registered.  It also adds a plaintext status page that answers any GET
request the HTTP transports do not route to ``/sse``, ``/messages/`` or
``/mcp``.

You typically do not run this module directly. Instead, use
``python main.py`` which imports the server and calls ``mcp.run()``.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from config import get_settings

STATUS_TEXT = "Loom Transcript MCP Server - Use /sse or /mcp endpoints"

_settings = get_settings()

# Create the shared MCP server instance.
mcp = FastMCP("loom-transcript", host=_settings.host, port=_settings.port)


# Custom routes are appended after the transport routes, so this only
# catches paths the transport did not claim.
@mcp.custom_route("/{path:path}", methods=["GET"])
async def status(request: Request) -> PlainTextResponse:
    return PlainTextResponse(STATUS_TEXT)


# Import tools so that their decorators and prompts register functions
# with the server.  Use absolute imports rather than package-relative
# ones so that the code works when run from the project root.
# pylint: disable=unused-import
from tools import transcript_tools  # noqa: E402,F401
from tools import comment_tools  # noqa: E402,F401
from tools import prompts  # noqa: E402,F401
