"""HTML emitter for extracted RTF blocks.

Renders spans, indentation entities, list markup and paragraph containers.
The parser owns the accumulated result string; the emitter only produces
fragments and the string rewrites needed when a list or paragraph closes.

Thread Safety:
HtmlEmitter holds only immutable settings. A single instance may be shared
across threads; every method is a pure function of its arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtfhtml.markers import DEFAULT_MARKERS
from rtfhtml.stringbuilder import StringBuilder
from rtfhtml.utils.logger import get_logger
from rtfhtml.utils.text import escape_html

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rtfhtml.markers import MarkerTable, WrapperKind
    from rtfhtml.nodes import ListNode

logger = get_logger(__name__)

WIDE_SPACE = "&emsp;"
NARROW_SPACE = "&nbsp;"
LINE_BREAK = "<br>"
BLOCK_OPEN = "<div>"
BLOCK_CLOSE = "</div>"

# Whitespace characters per wide-space entity
INDENT_WIDTH = 4


def render_indent(whitespace: str) -> str:
    """Convert hanging indentation to HTML space entities.

    Every 4 characters become one wide space; the remaining 0-3 become
    narrow spaces.

    Examples:
        >>> render_indent("     ")
        '&emsp;&nbsp;'
    """
    wide, narrow = divmod(len(whitespace), INDENT_WIDTH)
    return WIDE_SPACE * wide + NARROW_SPACE * narrow


def render_span(text: str, classes: Iterable[str] = ()) -> str:
    """Wrap text in a span carrying the space-joined class list."""
    class_string = " ".join(classes)
    if class_string:
        return f'<span class="{class_string}">{text}</span>'
    return f"<span>{text}</span>"


def wrap_block(content: str) -> str:
    """Wrap content in a paragraph container."""
    return f"{BLOCK_OPEN}\n{content}\n{BLOCK_CLOSE}"


class HtmlEmitter:
    """Render extracted blocks to HTML fragments.

    Usage:
        >>> emitter = HtmlEmitter()
        >>> emitter.render_text(" Hello\\\\tab World", indent="    ")
        '&emsp; Hello&emsp; World'

    """

    __slots__ = ("_markers", "_escape")

    def __init__(self, markers: MarkerTable = DEFAULT_MARKERS, *, escape: bool = False) -> None:
        self._markers = markers
        self._escape = escape

    def render_text(self, raw: str, indent: str = "") -> str:
        """Prepare payload text: escape, prefix indentation, expand tabs."""
        text = escape_html(raw) if self._escape else raw
        text = render_indent(indent) + text
        return text.replace(self._markers.tab, WIDE_SPACE)

    def render_inline(self, text: str, classes: Iterable[str], *, line_break: bool) -> str:
        """Render a plain-text span, preceded by a line break when predicted."""
        prefix = f"{LINE_BREAK}\n" if line_break else ""
        return prefix + render_span(text, classes)

    def render_list(self, wrapper: WrapperKind, items: list[ListNode]) -> str:
        """Render a list container with its items.

        Nested items are rendered as a container of the same kind directly
        after their parent item.
        """
        sb = StringBuilder()
        sb.append_line()
        self._render_items(sb, wrapper, items)
        return sb.build()

    def _render_items(self, sb: StringBuilder, wrapper: WrapperKind, items: list[ListNode]) -> None:
        sb.append_line(f"<{wrapper.tag}>")
        for node in items:
            sb.append_line(f"<li>{node.text}</li>")
            if node.children:
                self._render_items(sb, wrapper, node.children)
        sb.append_line(f"</{wrapper.tag}>")

    def close_list(self, result: str, wrapper: WrapperKind, items: list[ListNode]) -> str:
        """Append list markup to result, dropping one trailing line break."""
        return strip_trailing_break(result) + self.render_list(wrapper, items)

    def close_paragraph(self, result: str) -> str:
        """Wrap everything after the last closed container in a new one.

        When no container has been closed yet, the entire result is wrapped.
        """
        last_close = result.rfind(BLOCK_CLOSE)
        if last_close < 0:
            return wrap_block(result)

        split = last_close + len(BLOCK_CLOSE)
        logger.debug("Wrapping %d trailing characters in a paragraph", len(result) - split)
        return result[:split] + "\n" + wrap_block(result[split:])


def strip_trailing_break(result: str) -> str:
    """Remove a line break token found within the last five characters."""
    if LINE_BREAK in result[-5:]:
        return result[: result.rfind(LINE_BREAK)]
    return result


__all__ = [
    "BLOCK_CLOSE",
    "BLOCK_OPEN",
    "LINE_BREAK",
    "NARROW_SPACE",
    "WIDE_SPACE",
    "HtmlEmitter",
    "render_indent",
    "render_span",
    "strip_trailing_break",
    "wrap_block",
]
