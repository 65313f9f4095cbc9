"""Tests for begin-marker scanning and payload extraction."""

import pytest
from rtf_builders import BEGIN, PARA, run

from rtfhtml.errors import MalformedContentError
from rtfhtml.markers import DEFAULT_MARKERS, BeginMarker, MarkerTable
from rtfhtml.scanning import content_begin_offset, extract_block, find_content_begin, symbol_run


class TestFindContentBegin:
    """Specificity chain resolution."""

    def test_no_marker_returns_none(self) -> None:
        assert find_content_begin("plain text {\\b bold}", DEFAULT_MARKERS) is None

    def test_empty_chunk(self) -> None:
        assert find_content_begin("", DEFAULT_MARKERS) is None

    def test_most_specific_variant_at_same_position(self) -> None:
        match = find_content_begin("{\\rtlch \\ltrch\\loch Hi}", DEFAULT_MARKERS)
        assert match is not None
        assert match.marker.priority == 2
        assert match.position == 1
        assert match.content_start == 1 + len(BEGIN)

    def test_less_specific_when_extension_absent(self) -> None:
        match = find_content_begin("{\\rtlch \\ltrch Hi}", DEFAULT_MARKERS)
        assert match is not None
        assert match.marker.priority == 1
        assert match.position == 1

    def test_earlier_less_specific_match_wins(self) -> None:
        """A more specific variant found later does not move the match."""
        chunk = "{\\rtlch \\ltrch a}{\\rtlch \\ltrch\\loch b}"
        match = find_content_begin(chunk, DEFAULT_MARKERS)
        assert match is not None
        assert match.position == 1
        assert match.marker.pattern == "\\rtlch \\ltrch"

    def test_offset_skips_earlier_matches(self) -> None:
        chunk = "{\\rtlch \\ltrch a}{\\rtlch \\ltrch\\loch b}"
        match = find_content_begin(chunk, DEFAULT_MARKERS, offset=2)
        assert match is not None
        assert match.position == chunk.index("{", 1) + 1
        assert match.marker.priority == 2

    def test_three_variant_chain(self) -> None:
        table = MarkerTable(
            begin=(
                BeginMarker("\\a\\b\\c", 3),
                BeginMarker("\\a", 1),
                BeginMarker("\\a\\b", 2),
            )
        )
        assert find_content_begin("x\\a\\b\\c y", table).marker.priority == 3
        assert find_content_begin("x\\a\\b y", table).marker.priority == 2
        assert find_content_begin("x\\a y \\a\\b\\c", table).marker.priority == 1

    def test_content_begin_offset(self) -> None:
        assert content_begin_offset("abc", DEFAULT_MARKERS) is None
        assert content_begin_offset("ab" + run("x"), DEFAULT_MARKERS) == 3


class TestSymbolRun:
    """Control text preceding a payload."""

    def test_starts_at_symbol_control(self) -> None:
        chunk = "junk" + PARA + "\\b\\ab" + run("x")
        start = find_content_begin(chunk, DEFAULT_MARKERS).content_start
        result = symbol_run(chunk, start, DEFAULT_MARKERS)
        assert result.startswith(PARA)
        assert result.endswith(BEGIN)
        assert "junk" not in result

    def test_falls_back_to_chunk_start(self) -> None:
        chunk = run("x", "\\b\\ab")
        start = find_content_begin(chunk, DEFAULT_MARKERS).content_start
        assert symbol_run(chunk, start, DEFAULT_MARKERS) == chunk[:start]

    def test_symbol_control_after_content_is_ignored(self) -> None:
        chunk = run("x") + PARA + run("y")
        start = find_content_begin(chunk, DEFAULT_MARKERS).content_start
        assert symbol_run(chunk, start, DEFAULT_MARKERS) == "{" + BEGIN


class TestExtractBlock:
    """Payload slicing and residual computation."""

    def test_slices_payload_and_residual(self) -> None:
        chunk = run("Hello") + "\n" + run("World")
        match = find_content_begin(chunk, DEFAULT_MARKERS)
        block = extract_block(chunk, match, DEFAULT_MARKERS)
        assert block.text == " Hello"
        assert block.residual == "\n" + run("World")
        assert block.remainder == "}" + block.residual

    def test_missing_end_marker_raises(self) -> None:
        chunk = "{" + BEGIN + " never closed"
        match = find_content_begin(chunk, DEFAULT_MARKERS)
        with pytest.raises(MalformedContentError) as exc_info:
            extract_block(chunk, match, DEFAULT_MARKERS, source_file="doc.rtf")
        assert exc_info.value.offset == match.content_start
        assert "doc.rtf" in str(exc_info.value)

    def test_empty_payload(self) -> None:
        chunk = "{" + BEGIN + "}"
        block = extract_block(chunk, find_content_begin(chunk, DEFAULT_MARKERS), DEFAULT_MARKERS)
        assert block.text == ""
        assert block.residual == ""
