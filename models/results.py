"""Result type returned by the tool orchestrators."""

from __future__ import annotations

from dataclasses import dataclass

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: either success text or a failure message.

    Orchestrators never raise for expected failures (bad URL, upstream
    unavailable).  They return ``ToolResult.error(...)`` and the tool
    surface renders both cases the same way, as a single text block.
    """

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)

    def render(self) -> str:
        if self.is_error:
            return f"{ERROR_PREFIX}{self.text or 'Unknown error'}"
        return self.text
