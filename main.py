"""
Entry point for running the Loom transcript MCP server.

To start the server, run this module directly (or the
``loom-transcript-mcp`` console script).  It imports the shared server
instance from ``server.py`` and calls its ``run()`` method.  When
running via Claude for Desktop, your configuration should specify
something akin to::

    "command": "python",
    "args": ["main.py"]

For the HTTP transports pass ``--transport sse`` (served at ``/sse``)
or ``--transport streamable-http`` (served at ``/mcp``).  The server
blocks until it is terminated by the client.
"""

from __future__ import annotations

import argparse

from config import get_settings
from utils.logger import setup_logging


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Serve Loom transcripts and comments over MCP.")
    ap.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default=settings.transport,
        help="MCP transport to serve (default: %(default)s).",
    )
    ap.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s).",
    )
    args = ap.parse_args()

    logger = setup_logging(args.log_level)
    # FastMCP installs its own log handler on construction unless one exists.
    from server import mcp

    logger.info("Starting Loom transcript MCP server (%s)", args.transport)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
