"""
Reusable prompts to guide the language model when using the Loom tools.

They are registered with FastMCP via the ``@mcp.prompt()`` decorator.
When queried, the model can consult this guidance before calling
``getLoomTranscript`` or ``getLoomComments``.
"""

from __future__ import annotations

# Absolute import so that this works when the server is started from
# the project root.
from server import mcp  # type: ignore


@mcp.prompt()
def loom_transcript_guidance() -> str:
    """
    Guidance on using the Loom transcript and comment tools.

    - Both tools take a single ``videoUrl`` argument: a Loom share link
      of the form ``https://www.loom.com/share/<video id>``.  Query
      strings such as ``?sid=...`` are allowed.  Links without a
      ``/share/`` segment cannot be resolved.

    - ``getLoomTranscript`` returns plain text.  If the video's title is
      available, the text starts with ``# <title>``, optionally followed
      by a ``**Description:**`` line, then ``---`` and a
      ``## Transcript`` heading.  Private videos return the transcript
      body only.  The body is one paragraph without timestamps;
      repeated phrases come from overlapping captions.

    - ``getLoomComments`` returns a JSON list.  Useful fields are
      ``plainContent`` (comment text without mention markup),
      ``user_name``, ``time_stamp`` (seconds into the video the comment
      refers to, may be null), ``createdAt``, ``deletedAt`` (non-null for
      deleted comments) and ``children_comments`` (replies).

    - Any result starting with ``Error:`` means the request failed.
      Report the message to the user rather than retrying with the same
      URL.

    When summarising a transcript, lead with the title and the main
    points, then list action items and decisions.  Quote comment text
    from ``plainContent`` and attribute it by ``user_name``.
    """
    return (
        "Call `getLoomTranscript` or `getLoomComments` with a `videoUrl` of the form "
        "https://www.loom.com/share/<video id>. The transcript tool returns plain text, headed by "
        "'# <title>', an optional '**Description:**' line and a '## Transcript' section when the "
        "title is available. The comments tool returns a JSON list; read `plainContent` for the "
        "text, `user_name` for the author, `time_stamp` for the video position, `deletedAt` for "
        "deleted comments and `children_comments` for replies. A result starting with 'Error:' "
        "means the request failed; report it instead of retrying with the same URL. When "
        "summarising, lead with the title and main points, then list decisions and action items."
    )
