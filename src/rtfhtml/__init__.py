"""
rtfhtml: RTF to HTML fragment converter

Converts the textual subset of RTF documents (as written by common word
processors) to semantic HTML: bold/italic/underline spans, ordered and
bulleted lists with one nested level, tab and space indentation, and
paragraph containers. Pictures, stylesheets, fonts and tables are ignored.

Quick Start:
    >>> from rtfhtml import convert
    >>> convert(["{\\\\b\\\\ab\\\\rtlch \\\\ltrch\\\\loch Hello}"])
    ['<span class="rtf-bold"> Hello</span>']

    >>> # Sectioned documents
    >>> from rtfhtml import RtfConverter
    >>> converter = RtfConverter(section_delimiter="----")
    >>> fragments = converter.convert_file("notes.rtf")

Supported:
    Numeric and bulleted lists (one extra indentation level by default;
    a list item is one continuous block)
    Bold, underline, italic text
    Tab and space indentation

Not supported:
    Multiple font sizes or families
    Deeper indented text
    Non-textual content (pictures, stylesheets, ...)
"""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

from rtfhtml.chunks import iter_chunks, read_chunks, split_chunks
from rtfhtml.config import (
    ConverterConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from rtfhtml.errors import ConfigError, MalformedContentError, MissingInputError, RtfHtmlError
from rtfhtml.markers import (
    DEFAULT_MARKERS,
    BeginMarker,
    FormattingMarker,
    ListMarkerSpec,
    ListStartMarker,
    MarkerTable,
    WrapperKind,
)
from rtfhtml.nodes import ListNode, ListState, PredictedBlock
from rtfhtml.parser import Parser
from rtfhtml.profiling import ConvertAccumulator, get_convert_accumulator, profiled_convert
from rtfhtml.renderers.html import HtmlEmitter

__version__ = "0.1.0"


def _convert_chunks(chunks: Sequence[str], source_file: str | None = None) -> list[str]:
    # Runs under whichever config is active in the current context
    acc = get_convert_accumulator()
    fragments: list[str] = []
    for chunk in chunks:
        parser = Parser(chunk, source_file=source_file)
        fragments.append(parser.parse())
        if acc is not None:
            acc.record_chunk(
                source_length=len(chunk),
                blocks=parser.block_count,
                lists=parser.lists_emitted,
            )
    return fragments


def convert(chunks: Sequence[str] | None) -> list[str]:
    """Convert RTF chunks to HTML fragments.

    Args:
        chunks: Chunk texts, each parsed independently

    Returns:
        One HTML fragment per chunk, in input order

    Raises:
        MissingInputError: chunks is None

    Example:
        >>> convert(["no markers here"])
        ['']
    """
    if chunks is None:
        raise MissingInputError("No source chunks provided")
    if isinstance(chunks, str):
        chunks = [chunks]
    return _convert_chunks(chunks)


def convert_text(source: str | None) -> list[str]:
    """Split source with the active section delimiter and convert each chunk.

    Raises:
        MissingInputError: source is None or empty
    """
    if not source:
        raise MissingInputError("No source text provided")
    return _convert_chunks(split_chunks(source, get_convert_config().section_delimiter))


def convert_file(path: str | Path | None) -> list[str]:
    """Read an RTF file, split it and convert each chunk.

    Raises:
        MissingInputError: path is None or empty
        OSError: The file cannot be read
    """
    if not path:
        raise MissingInputError("Null/empty file path passed")
    config = get_convert_config()
    chunks = read_chunks(path, config.section_delimiter, encoding=config.encoding)
    return _convert_chunks(chunks, source_file=str(path))


def configure(options: Mapping[str, Any] | None = None) -> ConverterConfig:
    """Install configuration for the current context.

    Args:
        options: Option dictionary (see ConverterConfig.from_dict). None
            restores defaults.

    Returns:
        The installed ConverterConfig

    Example:
        >>> configure({"sectionDelimiter": "----"}).section_delimiter
        '----'
    """
    if options is None:
        reset_convert_config()
        return get_convert_config()
    config = ConverterConfig.from_dict(options)
    set_convert_config(config)
    return config


class RtfConverter:
    """High-level converter owning its own configuration.

    Usage:
        >>> converter = RtfConverter(section_delimiter="----")
        >>> fragments = converter(raw_text)

        >>> converter.configure({"escape_html": True})
        >>> fragments = converter.convert(["{\\\\rtlch \\\\ltrch a < b}"])

    Thread Safety:
        Config is installed via ContextVar for the duration of each call
        and restored afterwards. Safe to use several converters
        concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        section_delimiter: str | None = None,
        escape_html: bool = False,
        flush_open_lists: bool = True,
        max_list_depth: int = 1,
        strict: bool = False,
        markers: MarkerTable = DEFAULT_MARKERS,
    ) -> None:
        # Build immutable config once (reused across calls)
        self._config = ConverterConfig(
            section_delimiter=section_delimiter,
            escape_html=escape_html,
            flush_open_lists=flush_open_lists,
            max_list_depth=max_list_depth,
            strict=strict,
            markers=markers,
        )

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def configure(self, options: Mapping[str, Any]) -> "RtfConverter":
        """Update configuration from an option dictionary.

        Keys not present in options keep their current values.

        Returns:
            self for method chaining
        """
        updates = ConverterConfig.from_dict(options)
        changed = {
            name: getattr(updates, name)
            for name in ConverterConfig.__dataclass_fields__
            if _option_given(name, options)
        }
        self._config = replace(self._config, **changed)
        return self

    def __call__(self, source: str) -> list[str]:
        """Split and convert raw text in one call."""
        return self.convert_text(source)

    def convert(self, chunks: Sequence[str] | None) -> list[str]:
        with convert_config_context(self._config):
            return convert(chunks)

    def convert_text(self, source: str | None) -> list[str]:
        with convert_config_context(self._config):
            return convert_text(source)

    def convert_file(self, path: str | Path | None) -> list[str]:
        with convert_config_context(self._config):
            return convert_file(path)


def _option_given(name: str, options: Mapping[str, Any]) -> bool:
    if name in options:
        return True
    legacy = options.get("sectionSeparation")
    if name == "section_delimiter" and isinstance(legacy, Mapping) and "separator" in legacy:
        return True
    camel = "".join(part.title() if i else part for i, part in enumerate(name.split("_")))
    return camel in options


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "convert",
    "convert_text",
    "convert_file",
    "configure",
    "RtfConverter",
    # Chunk source
    "iter_chunks",
    "read_chunks",
    "split_chunks",
    # Configuration (ContextVar-based)
    "ConverterConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
    # Marker tables
    "DEFAULT_MARKERS",
    "BeginMarker",
    "FormattingMarker",
    "ListMarkerSpec",
    "ListStartMarker",
    "MarkerTable",
    "WrapperKind",
    # Parser components
    "Parser",
    "HtmlEmitter",
    "ListNode",
    "ListState",
    "PredictedBlock",
    # Errors
    "RtfHtmlError",
    "MissingInputError",
    "MalformedContentError",
    "ConfigError",
    # Profiling
    "ConvertAccumulator",
    "get_convert_accumulator",
    "profiled_convert",
]
