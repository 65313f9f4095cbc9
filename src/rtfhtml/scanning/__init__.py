"""Chunk scanning: begin-marker detection and payload extraction.

Both steps are pure functions over the residual chunk string.
"""

from rtfhtml.scanning.boundary import content_begin_offset, find_content_begin
from rtfhtml.scanning.extract import extract_block, symbol_run

__all__ = [
    "content_begin_offset",
    "extract_block",
    "find_content_begin",
    "symbol_run",
]
