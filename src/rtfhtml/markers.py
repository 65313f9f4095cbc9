"""Marker tables recognized by the RTF scanner.

All markers are literal control-sequence fragments. Each family is an
explicit tuple ordered by an integer priority rather than by declaration
order, so reordering the source never changes scanning behavior.

Families:
- Begin markers: content-begin variants, priority 1 is the LEAST specific.
  Later variants are textual extensions of earlier ones.
- Formatting markers: priority 1 is the MOST specific style combination.
- List start markers: decide the wrapper kind of a new list.

Thread Safety:
MarkerTable and every marker are frozen dataclasses. A single table is built
once and shared by reference across all parser components.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class WrapperKind(Enum):
    """HTML list container kind."""

    ORDERED = "ol"
    UNORDERED = "ul"

    @property
    def tag(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class MarkerDefinition:
    """A literal pattern with an explicit priority."""

    pattern: str
    priority: int


@dataclass(frozen=True, slots=True)
class BeginMarker(MarkerDefinition):
    """Content-begin variant. Higher priority means more specific."""


@dataclass(frozen=True, slots=True)
class FormattingMarker(MarkerDefinition):
    """Style pattern mapped to one or more space-separated CSS classes."""

    css_class: str


@dataclass(frozen=True, slots=True)
class ListStartMarker(MarkerDefinition):
    """First-item pattern that selects the list wrapper kind."""

    wrapper: WrapperKind


@dataclass(frozen=True, slots=True)
class ListMarkerSpec:
    """List detection patterns.

    Attributes:
        pattern: Marker present in the symbol run of every list item
        level_template: Format string producing the marker for a nesting level
        starts: Wrapper-kind markers, tested in priority order
        default_wrapper: Wrapper used when no start marker matches

    """

    pattern: str = "\\listtext"
    level_template: str = "\\ilvl{level}"
    starts: tuple[ListStartMarker, ...] = (
        ListStartMarker("1.\\tab", 1, WrapperKind.ORDERED),
        ListStartMarker("'3f\\tab", 2, WrapperKind.UNORDERED),
    )
    default_wrapper: WrapperKind = WrapperKind.UNORDERED

    def level_marker(self, level: int) -> str:
        return self.level_template.format(level=level)


DEFAULT_BEGIN_MARKERS: tuple[BeginMarker, ...] = (
    BeginMarker("\\rtlch \\ltrch", 1),
    BeginMarker("\\rtlch \\ltrch\\loch", 2),
)

DEFAULT_FORMATTING_MARKERS: tuple[FormattingMarker, ...] = (
    FormattingMarker("\\i\\ul\\ulc0\\b\\ai\\ab\\rtlch", 1, "rtf-bold rtf-italic rtf-underline"),
    FormattingMarker("\\i\\b\\ai\\ab\\rtlch", 2, "rtf-bold rtf-italic"),
    FormattingMarker("\\ul\\ulc0\\b\\ab\\rtlch", 3, "rtf-bold rtf-underline"),
    FormattingMarker("\\i\\ul\\ulc0\\ai\\rtlch", 4, "rtf-italic rtf-underline"),
    FormattingMarker("\\b\\ab\\rtlch", 5, "rtf-bold"),
    FormattingMarker("\\i\\ai\\rtlch", 6, "rtf-italic"),
    FormattingMarker("\\ul\\ulc0\\rtlch", 7, "rtf-underline"),
)


@dataclass(frozen=True, slots=True)
class MarkerTable:
    """Immutable configuration table shared by all parser components.

    Families are sorted by priority on construction, so callers may pass
    markers in any order.

    Attributes:
        begin: Content-begin variants, least specific first
        formatting: Formatting markers, most specific first
        lists: List detection patterns
        symbol_control: Literal that opens the control run of a paragraph
        content_end: Literal closing a textual payload
        tab: Literal tab control word inside payload text
        line_separator: Literal line separator of the raw document

    """

    begin: tuple[BeginMarker, ...] = DEFAULT_BEGIN_MARKERS
    formatting: tuple[FormattingMarker, ...] = DEFAULT_FORMATTING_MARKERS
    lists: ListMarkerSpec = field(default_factory=ListMarkerSpec)
    symbol_control: str = "\\par \\pard\\plain"
    content_end: str = "}"
    tab: str = "\\tab"
    line_separator: str = "\n"

    def __post_init__(self) -> None:
        # Frozen: write through object.__setattr__ to normalize ordering
        object.__setattr__(self, "begin", tuple(sorted(self.begin, key=_priority)))
        object.__setattr__(self, "formatting", tuple(sorted(self.formatting, key=_priority)))
        object.__setattr__(
            self,
            "lists",
            ListMarkerSpec(
                pattern=self.lists.pattern,
                level_template=self.lists.level_template,
                starts=tuple(sorted(self.lists.starts, key=_priority)),
                default_wrapper=self.lists.default_wrapper,
            ),
        )


def _priority(marker: MarkerDefinition) -> int:
    return marker.priority


DEFAULT_MARKERS: MarkerTable = MarkerTable()


__all__ = [
    "DEFAULT_BEGIN_MARKERS",
    "DEFAULT_FORMATTING_MARKERS",
    "DEFAULT_MARKERS",
    "BeginMarker",
    "FormattingMarker",
    "ListMarkerSpec",
    "ListStartMarker",
    "MarkerDefinition",
    "MarkerTable",
    "WrapperKind",
]
