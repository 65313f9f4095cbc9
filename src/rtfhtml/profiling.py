"""rtfhtml ConvertAccumulator: opt-in profiling for RTF conversion.

This module provides accumulated metrics during conversion:
- Total conversion time
- Chunks converted and their source length
- Payload blocks extracted and lists emitted

Zero overhead when disabled (get_convert_accumulator() returns None).

Example:
    from rtfhtml import convert
    from rtfhtml.profiling import profiled_convert

    with profiled_convert() as metrics:
        convert([chunk])

    print(metrics.summary())
    # {"total_ms": 0.4, "chunks": 1, "source_length": 812, "blocks": 9, "lists": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ConvertAccumulator:
    """Accumulated metrics during RTF conversion.

    Attributes:
        start_time: Profiling start timestamp.
        chunks: Number of chunks converted.
        source_length: Total length of converted chunks.
        blocks: Number of payload blocks extracted.
        lists: Number of list containers emitted.

    """

    start_time: float = field(default_factory=perf_counter)
    chunks: int = 0
    source_length: int = 0
    blocks: int = 0
    lists: int = 0

    def record_chunk(self, source_length: int, blocks: int, lists: int) -> None:
        """Record one converted chunk."""
        self.chunks += 1
        self.source_length += source_length
        self.blocks += blocks
        self.lists += lists

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of conversion metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "chunks": self.chunks,
            "source_length": self.source_length,
            "blocks": self.blocks,
            "lists": self.lists,
        }


_accumulator: ContextVar[ConvertAccumulator | None] = ContextVar(
    "convert_accumulator",
    default=None,
)


def get_convert_accumulator() -> ConvertAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_convert() -> Iterator[ConvertAccumulator]:
    """Context manager for profiled conversion.

    Creates a ConvertAccumulator and makes it available via
    get_convert_accumulator() for the duration of the with block.

    Yields:
        ConvertAccumulator that will be populated during convert calls.

    """
    acc = ConvertAccumulator()
    token: Token[ConvertAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
