"""Parse-state value types for rtfhtml.

Scan results (BeginMatch, ExtractedBlock) and the lookahead prediction are
frozen dataclasses, created fresh for every block. List structure is mutable
because items grow in place while a list is open.

Node Hierarchy:
ListState
└── ListNode (depth 0)
    └── ListNode (depth 1)
        └── ... (up to ConverterConfig.max_list_depth)

"""

from dataclasses import dataclass, field

from rtfhtml.markers import BeginMarker, WrapperKind


@dataclass(frozen=True, slots=True)
class BeginMatch:
    """Earliest, most specific content-begin marker found in a chunk."""

    marker: BeginMarker
    position: int

    @property
    def content_start(self) -> int:
        """Offset of the first payload character."""
        return self.position + len(self.marker.pattern)


@dataclass(frozen=True, slots=True)
class ExtractedBlock:
    """One textual payload sliced out of a chunk.

    Attributes:
        text: Raw payload between the begin marker and the content-end marker
        symbol_run: Control sequence preceding the payload, used for style cues
        content_start: Offset of the payload within the scanned chunk
        remainder: Chunk text from the content-end marker onwards (end marker
            included), used for lookahead
        residual: Chunk text strictly after the content-end marker

    """

    text: str
    symbol_run: str
    content_start: int
    remainder: str
    residual: str


@dataclass(frozen=True, slots=True)
class PredictedBlock:
    """Lookahead state for the next block.

    Attributes:
        forces_line_break: A real line separator precedes the next block
        pending_classes: Classes pre-resolved from a false break
        pending_indent: Hanging indentation captured from a blank block

    """

    forces_line_break: bool = False
    pending_classes: tuple[str, ...] = ()
    pending_indent: str = ""

    def with_indent(self, indent: str) -> "PredictedBlock":
        return PredictedBlock(self.forces_line_break, self.pending_classes, indent)


# Initial prediction for the first block of a chunk
NO_PREDICTION: PredictedBlock = PredictedBlock()


@dataclass(slots=True)
class ListNode:
    """A list item with its nested items.

    Attributes:
        text: Rendered item text (may grow with formatting continuations)
        depth: Nesting level, 0 for top-level items
        children: Nested items, each one level deeper

    """

    text: str
    depth: int = 0
    children: list["ListNode"] = field(default_factory=list)

    def last_at_depth(self, depth: int) -> "ListNode":
        """Follow the last-child chain down to depth, or as deep as it goes."""
        node = self
        while node.depth < depth and node.children:
            node = node.children[-1]
        return node


@dataclass(slots=True)
class ListState:
    """An open list being accumulated within one chunk."""

    wrapper: WrapperKind = WrapperKind.UNORDERED
    items: list[ListNode] = field(default_factory=list)

    @property
    def active(self) -> bool:
        return bool(self.items)


__all__ = [
    "NO_PREDICTION",
    "BeginMatch",
    "ExtractedBlock",
    "ListNode",
    "ListState",
    "PredictedBlock",
]
