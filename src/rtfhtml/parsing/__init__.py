"""Block-level parsing components.

- formatting: symbol run -> CSS classes
- lists: ListAccumulator state machine
- linebreaks: one-block lookahead and paragraph boundaries
"""

from rtfhtml.parsing.formatting import resolve_classes
from rtfhtml.parsing.linebreaks import hanging_indent, predict_next
from rtfhtml.parsing.lists import ListAccumulator, detect_level, detect_wrapper, is_list_item

__all__ = [
    "ListAccumulator",
    "detect_level",
    "detect_wrapper",
    "hanging_indent",
    "is_list_item",
    "predict_next",
    "resolve_classes",
]
