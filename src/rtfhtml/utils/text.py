"""Text processing utilities for rtfhtml.

Example:
    >>> from rtfhtml.utils.text import escape_html
    >>> escape_html("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape payload text so it renders literally inside a span.

    Quotes are escaped too, so the text is also safe in attribute values.

    Examples:
        >>> escape_html("<b>'x'</b>")
        '&lt;b&gt;&#x27;x&#x27;&lt;/b&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def is_blank(text: str) -> bool:
    """Return True when text is empty or whitespace only."""
    return not text.strip()


def find_or_none(haystack: str, needle: str, start: int = 0) -> int | None:
    """Find needle in haystack, returning None instead of -1 when absent."""
    pos = haystack.find(needle, start)
    return None if pos < 0 else pos
