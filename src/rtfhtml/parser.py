"""Streaming pattern-matching parser for one RTF chunk.

Repeatedly scans the residual chunk for the next content-begin marker,
slices its payload and commits HTML to the result string until no begin
marker remains.

Architecture:
- `scanning.find_content_begin`: next begin marker and its variant
- `scanning.extract_block`: payload, symbol run and residual chunk
- `parsing.resolve_classes`: CSS classes from the symbol run
- `parsing.ListAccumulator`: list items and list termination
- `parsing.predict_next`: one-block lookahead (PredictedBlock)
- `renderers.HtmlEmitter`: spans, indentation, list and paragraph markup

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per chunk.
Configuration is read from ContextVar (thread-local).

"""

from __future__ import annotations

from rtfhtml.config import ConverterConfig, get_convert_config
from rtfhtml.errors import MalformedContentError
from rtfhtml.nodes import NO_PREDICTION, ExtractedBlock, PredictedBlock
from rtfhtml.parsing.formatting import resolve_classes
from rtfhtml.parsing.linebreaks import hanging_indent, predict_next
from rtfhtml.parsing.lists import ListAccumulator
from rtfhtml.renderers.html import HtmlEmitter, render_span
from rtfhtml.scanning import extract_block, find_content_begin
from rtfhtml.utils.logger import get_logger, preview
from rtfhtml.utils.text import is_blank

logger = get_logger(__name__)


class Parser:
    """Convert one RTF chunk to an HTML fragment.

    Usage:
            >>> parser = Parser("{\\\\rtlch \\\\ltrch\\\\loch Hello}")
            >>> parser.parse()
            '<span> Hello</span>'

    Configuration:
        Reads ConverterConfig from ContextVar on construction. Use
        set_convert_config() or convert_config_context() beforehand for
        non-default behavior.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_markers",
        "_emitter",
        "_lists",
        "block_count",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with chunk text.

        Args:
            source: RTF chunk text
            source_file: Optional source file path for error messages

        """
        config: ConverterConfig = get_convert_config()
        self._source = source
        self._source_file = source_file
        self._config = config
        self._markers = config.markers
        self._emitter = HtmlEmitter(config.markers, escape=config.escape_html)
        self._lists = ListAccumulator(config.markers, self._emitter, config.max_list_depth)
        self.block_count = 0

    @property
    def lists_emitted(self) -> int:
        return self._lists.lists_emitted

    def parse(self) -> str:
        """Parse the chunk and return its HTML fragment.

        Returns:
            HTML string (empty when the chunk holds no begin marker)

        Raises:
            MalformedContentError: Unterminated payload with strict=True

        """
        chunk = self._source
        result = ""
        prediction = NO_PREDICTION

        while chunk:
            match = find_content_begin(chunk, self._markers)
            if match is None:
                break

            try:
                block = extract_block(chunk, match, self._markers, self._source_file)
            except MalformedContentError as e:
                if self._config.strict:
                    raise
                logger.warning(
                    "Stopping chunk parse: %s near %s", e, preview(chunk[match.position :])
                )
                break

            self.block_count += 1
            if is_blank(block.text):
                result, prediction = self._paragraph_break(result, block)
            else:
                result = self._commit_text(result, block, prediction)
                prediction = predict_next(block.remainder, self._markers)

            chunk = block.residual

        if self._lists.active:
            if self._config.flush_open_lists:
                result = self._lists.terminate(result)
            else:
                logger.debug("Dropping list still open at end of chunk")

        return result

    def _commit_text(self, result: str, block: ExtractedBlock, prediction: PredictedBlock) -> str:
        run = block.symbol_run
        text = self._emitter.render_text(block.text, prediction.pending_indent)
        classes = resolve_classes(run, self._markers, prediction.pending_classes)

        if self._lists.accepts(run):
            self._lists.add_item(text, run)
            return result

        if self._lists.active and prediction.forces_line_break:
            result = self._lists.terminate(result)

        if self._lists.active:
            # Formatting-only continuation of the current item
            self._lists.append_continuation(render_span(text, classes))
            return result

        return result + self._emitter.render_inline(
            text, classes, line_break=prediction.forces_line_break
        )

    def _paragraph_break(self, result: str, block: ExtractedBlock) -> tuple[str, PredictedBlock]:
        indent = hanging_indent(block.text, self._markers)
        result = self._lists.terminate(result)
        result = self._emitter.close_paragraph(result)
        prediction = predict_next(block.remainder, self._markers).with_indent(indent)
        return result, prediction
