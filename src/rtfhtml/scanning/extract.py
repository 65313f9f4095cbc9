"""Payload extraction between a begin marker and the content-end marker.

Pure functions of their inputs: nothing here mutates parser state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtfhtml.errors import MalformedContentError
from rtfhtml.nodes import BeginMatch, ExtractedBlock

if TYPE_CHECKING:
    from rtfhtml.markers import MarkerTable


def symbol_run(chunk: str, content_start: int, markers: MarkerTable) -> str:
    """Control text preceding a payload.

    The run starts at the first symbol-control marker of the chunk. When the
    chunk has no such marker before content_start (first paragraph of a
    document, or a continuation inside one paragraph), it starts at the
    beginning of the chunk.

    Args:
        chunk: Residual chunk text
        content_start: Offset of the payload
        markers: Marker table

    Returns:
        chunk[run_start:content_start]

    """
    run_start = chunk.find(markers.symbol_control)
    if run_start < 0 or run_start > content_start:
        run_start = 0
    return chunk[run_start:content_start]


def extract_block(
    chunk: str,
    match: BeginMatch,
    markers: MarkerTable,
    source_file: str | None = None,
) -> ExtractedBlock:
    """Slice the payload that follows a begin marker.

    Args:
        chunk: Residual chunk text the match was found in
        match: Result of find_content_begin on chunk
        markers: Marker table
        source_file: Optional source path for error messages

    Returns:
        ExtractedBlock with payload text, symbol run and residual chunk

    Raises:
        MalformedContentError: No content-end marker follows the payload

    """
    start = match.content_start
    end = chunk.find(markers.content_end, start)
    if end < 0:
        raise MalformedContentError(
            f"content-end marker {markers.content_end!r} not found after begin marker",
            offset=start,
            source_file=source_file,
        )

    return ExtractedBlock(
        text=chunk[start:end],
        symbol_run=symbol_run(chunk, start, markers),
        content_start=start,
        remainder=chunk[end:],
        residual=chunk[end + len(markers.content_end) :],
    )
