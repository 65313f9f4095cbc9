"""Utility modules for rtfhtml.

Provides:
- text: escape_html, is_blank, find_or_none for text processing
- logger: get_logger, preview for logging
"""

from rtfhtml.utils.logger import get_logger, preview
from rtfhtml.utils.text import escape_html, find_or_none, is_blank

__all__ = [
    "escape_html",
    "find_or_none",
    "get_logger",
    "is_blank",
    "preview",
]
