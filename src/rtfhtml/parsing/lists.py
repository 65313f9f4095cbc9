"""List accumulation across consecutive list-item blocks.

States:
    Inactive: no items collected
    Active: items collected, markup not yet emitted

Transitions (one per non-blank block):
    list item, Inactive  -> Active, wrapper kind chosen from the run
    list item, Active    -> new top-level item, or nested item for \\ilvlN
    plain text, Active, hard break    -> terminate, then plain text path
    plain text, Active, no hard break -> span appended to the last item

Nesting is a depth-tagged tree bounded by ConverterConfig.max_list_depth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtfhtml.nodes import ListNode, ListState
from rtfhtml.utils.logger import get_logger

if TYPE_CHECKING:
    from rtfhtml.markers import MarkerTable, WrapperKind
    from rtfhtml.renderers.html import HtmlEmitter

logger = get_logger(__name__)


def is_list_item(run: str, markers: MarkerTable) -> bool:
    """Check whether a symbol run belongs to a list item."""
    return markers.lists.pattern in run


def detect_wrapper(run: str, markers: MarkerTable) -> WrapperKind:
    """Choose the wrapper kind from the first item's run.

    Start markers are tested in priority order (numeric before bullet);
    the default wrapper is used when none matches.
    """
    for start in markers.lists.starts:
        if start.pattern in run:
            return start.wrapper
    return markers.lists.default_wrapper


def detect_level(run: str, markers: MarkerTable, max_depth: int) -> int:
    """Deepest recognized nesting level marker in the run (0 when none)."""
    for level in range(max_depth, 0, -1):
        if markers.lists.level_marker(level) in run:
            return level
    return 0


class ListAccumulator:
    """Collects list items until the list terminates.

    Usage:
        >>> acc = ListAccumulator(DEFAULT_MARKERS, emitter)
        >>> acc.add_item("One", "{\\\\listtext 1.\\\\tab}")
        >>> acc.active
        True
        >>> acc.terminate("")
        '\\n<ol>\\n<li>One</li>\\n</ol>\\n'

    Thread Safety:
        Instances are local to one Parser; not thread-safe.

    """

    __slots__ = ("_markers", "_emitter", "_max_depth", "_state", "lists_emitted")

    def __init__(self, markers: MarkerTable, emitter: HtmlEmitter, max_depth: int = 1) -> None:
        self._markers = markers
        self._emitter = emitter
        self._max_depth = max_depth
        self._state = ListState()
        self.lists_emitted = 0

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def state(self) -> ListState:
        return self._state

    def accepts(self, run: str) -> bool:
        return is_list_item(run, self._markers)

    def add_item(self, text: str, run: str) -> None:
        """Add a list-item block, opening the list if needed."""
        state = self._state
        if not state.active:
            state.wrapper = detect_wrapper(run, self._markers)
            state.items.append(ListNode(text))
            logger.debug("List started (%s)", state.wrapper.tag)
            return

        level = detect_level(run, self._markers, self._max_depth)
        if level == 0:
            state.items.append(ListNode(text))
            return

        parent = state.items[-1].last_at_depth(level - 1)
        parent.children.append(ListNode(text, depth=parent.depth + 1))

    def append_continuation(self, fragment: str) -> None:
        """Append a rendered fragment to the last top-level item."""
        self._state.items[-1].text += fragment

    def terminate(self, result: str) -> str:
        """Emit the list into result and reset to Inactive.

        Returns result unchanged when no list is active.
        """
        state = self._state
        if not state.active:
            return result

        result = self._emitter.close_list(result, state.wrapper, state.items)
        logger.debug("List terminated with %d items", len(state.items))
        self._state = ListState()
        self.lists_emitted += 1
        return result
