"""Content-begin marker scanner.

Begin markers form a specificity chain: each variant extends the previous one
textually. The scanner starts from the least specific variant and climbs the
chain while the more specific variant starts at the same offset. The first
variant that is absent or starts elsewhere ends the climb, and the last
coinciding variant is reported.

Example:
    >>> from rtfhtml.markers import DEFAULT_MARKERS
    >>> match = find_content_begin("{\\\\rtlch \\\\ltrch\\\\loch Hi}", DEFAULT_MARKERS)
    >>> match.marker.priority, match.position
    (2, 1)

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtfhtml.nodes import BeginMatch

if TYPE_CHECKING:
    from rtfhtml.markers import MarkerTable


def find_content_begin(chunk: str, markers: MarkerTable, offset: int = 0) -> BeginMatch | None:
    """Locate the earliest, most specific content-begin marker.

    Args:
        chunk: Residual chunk text
        markers: Marker table (begin variants least specific first)
        offset: Offset to start searching from

    Returns:
        BeginMatch, or None when no begin marker occurs at or after offset

    """
    variants = markers.begin
    if not variants:
        return None

    position = chunk.find(variants[0].pattern, offset)
    if position < 0:
        return None

    chosen = variants[0]
    for variant in variants[1:]:
        if chunk.find(variant.pattern, offset) != position:
            break
        chosen = variant

    return BeginMatch(marker=chosen, position=position)


def content_begin_offset(chunk: str, markers: MarkerTable, offset: int = 0) -> int | None:
    """Offset of the next content-begin marker, or None."""
    match = find_content_begin(chunk, markers, offset)
    return None if match is None else match.position
