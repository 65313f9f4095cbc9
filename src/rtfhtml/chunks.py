"""Chunk source: split raw RTF input into independently parsed chunks.

A document may hold several sections separated by delimiter lines (for
example when each section is stored separately). Lines are processed one
at a time, line terminators kept:

- the first line containing the delimiter opens a region;
- every later delimiter line closes the current region, emits its lines as
  a chunk, and opens the next region;
- lines before the first delimiter and after the last one are dropped.

Without a delimiter the whole input is a single chunk.

Example:
    >>> split_chunks("A\\n----\\nB\\n----\\nC\\n----\\nD", "----")
    ['B\\n', 'C\\n']

"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rtfhtml.errors import MissingInputError
from rtfhtml.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = get_logger(__name__)


def iter_chunks(lines: Iterable[str], delimiter: str) -> Iterator[str]:
    """Yield chunks enclosed by delimiter lines.

    Args:
        lines: Input lines, terminators included
        delimiter: Literal marking a section boundary

    Yields:
        Text between consecutive delimiter lines

    """
    opened = False
    parts: list[str] = []
    for line in lines:
        if delimiter in line:
            if opened:
                yield "".join(parts)
                parts = []
            opened = True
        elif opened:
            parts.append(line)

    if parts:
        logger.debug("Dropping %d lines after the last delimiter", len(parts))


def split_chunks(source: str, delimiter: str | None = None) -> list[str]:
    """Split in-memory source into chunks.

    Args:
        source: Raw RTF text
        delimiter: Section delimiter, or None for a single chunk

    Returns:
        List of chunk strings

    Raises:
        MissingInputError: source is None

    """
    if source is None:
        raise MissingInputError("No source text provided")
    if delimiter is None:
        return [source]
    return list(iter_chunks(source.splitlines(keepends=True), delimiter))


def read_chunks(
    path: str | Path,
    delimiter: str | None = None,
    encoding: str = "utf-8",
) -> list[str]:
    """Read a file and split it into chunks.

    Line terminators are kept as written (CRLF stays CRLF). With a delimiter
    the file is streamed line by line; otherwise it is read whole.

    Args:
        path: File to read
        delimiter: Section delimiter, or None for a single chunk
        encoding: File encoding

    Returns:
        List of chunk strings

    Raises:
        MissingInputError: path is empty or None
        OSError: The file cannot be read

    """
    if not path:
        raise MissingInputError("Null/empty file path passed")

    with Path(path).open(encoding=encoding, newline="") as handle:
        if delimiter is None:
            return [handle.read()]
        return list(iter_chunks(handle, delimiter))


__all__ = ["iter_chunks", "read_chunks", "split_chunks"]
