"""Line-break prediction and paragraph boundaries.

The raw document wraps lines freely, so a line separator between two
payloads is only a real break when it comes before the next begin marker.
When the next begin marker comes first, the separator belongs to an
intervening formatting group (a false break) and the formatting found in
that gap is carried over to the next block.

Blank payloads mark paragraph boundaries. Their whitespace, when it stays
on one line, is hanging indentation for the next non-blank payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtfhtml.nodes import PredictedBlock
from rtfhtml.parsing.formatting import resolve_classes
from rtfhtml.scanning.boundary import content_begin_offset
from rtfhtml.utils.text import find_or_none

if TYPE_CHECKING:
    from rtfhtml.markers import MarkerTable


def predict_next(remainder: str, markers: MarkerTable) -> PredictedBlock:
    """Predict break and formatting state for the block after this one.

    Args:
        remainder: Chunk text from the consumed content-end marker onwards
        markers: Marker table

    Returns:
        PredictedBlock without indentation (indentation is set by the caller)

    """
    separator = find_or_none(remainder, markers.line_separator)
    next_begin = content_begin_offset(remainder, markers)

    if separator is not None and (next_begin is None or separator < next_begin):
        return PredictedBlock(forces_line_break=True)

    # Offset 1: the remainder itself opens with the consumed end marker
    gap_end = remainder.find(markers.content_end, 1)
    gap = remainder[:gap_end] if gap_end >= 0 else ""
    return PredictedBlock(
        forces_line_break=False,
        pending_classes=tuple(resolve_classes(gap, markers)),
    )


def hanging_indent(text: str, markers: MarkerTable) -> str:
    """Indentation carried by a blank payload.

    The first character ends the begin marker and is skipped: a line
    terminator (CRLF as a whole), or the space delimiting the control word.
    The rest is indentation when it holds no further line separator.
    """
    crlf = "\r" + markers.line_separator
    rest = text[len(crlf) :] if text.startswith(crlf) else text[1:]
    if markers.line_separator in rest:
        return ""
    return rest
