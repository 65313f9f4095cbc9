"""Formatting resolution from symbol runs.

Every formatting marker is tested against the run in priority order, and
every match contributes its class string. Matching never stops early and
never excludes overlapping markers: a bold+italic+underline run also
contains the single-style patterns, so all of them are reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rtfhtml.markers import MarkerTable


def resolve_classes(run: str, markers: MarkerTable, pending: Iterable[str] = ()) -> list[str]:
    """Resolve CSS classes for a symbol run.

    Args:
        run: Symbol run (control text preceding a payload)
        markers: Marker table (formatting markers most specific first)
        pending: Classes already known for the block, kept in front

    Returns:
        Class strings in resolution order, duplicates included

    Example:
        >>> from rtfhtml.markers import DEFAULT_MARKERS
        >>> resolve_classes("\\\\b\\\\ab\\\\rtlch \\\\ltrch", DEFAULT_MARKERS)
        ['rtf-bold']

    """
    classes = list(pending)
    for marker in markers.formatting:
        if marker.pattern in run:
            classes.append(marker.css_class)
    return classes
