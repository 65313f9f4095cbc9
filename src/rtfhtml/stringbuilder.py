"""Line-oriented string accumulation for list markup.

List containers are rendered in one go when a list terminates, one tag per
line. Lines are collected in a list and joined once.
"""

from __future__ import annotations


class StringBuilder:
    """Collects newline-terminated lines.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append_line().append_line("<ul>").append_line("</ul>")
            >>> sb.build()
            '\\n<ul>\\n</ul>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_line(self, s: str = "") -> StringBuilder:
        """Append s followed by a newline (just the newline when s is empty)."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        return "".join(self._parts)
