"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for input outside the supported RTF subset.
"""

import pytest
from rtf_builders import BEGIN, run

from rtfhtml import convert
from rtfhtml.errors import ConfigError, MalformedContentError, MissingInputError, RtfHtmlError

# =========================================================================
# MalformedContentError construction and formatting
# =========================================================================


class TestMalformedContentErrorFormatting:
    def test_message_only(self) -> None:
        err = MalformedContentError("missing end marker")
        assert str(err) == "missing end marker"
        assert err.offset is None
        assert err.source_file is None

    def test_with_offset(self) -> None:
        err = MalformedContentError("missing end marker", offset=42)
        assert str(err) == "42 missing end marker"

    def test_with_source_file(self) -> None:
        err = MalformedContentError("missing end marker", offset=7, source_file="doc.rtf")
        assert str(err) == "doc.rtf:7 missing end marker"


# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            MissingInputError("x"),
            MalformedContentError("x"),
            ConfigError("opt", "bad"),
        ],
    )
    def test_is_rtfhtml_error(self, err: Exception) -> None:
        assert isinstance(err, RtfHtmlError)

    def test_config_error_names_option(self) -> None:
        err = ConfigError("max_list_depth", "must be >= 0")
        assert err.option == "max_list_depth"
        assert "max_list_depth" in str(err)


# =========================================================================
# Graceful degradation
# =========================================================================


class TestGracefulDegradation:
    def test_unterminated_first_block_yields_empty_fragment(self) -> None:
        assert convert(["{" + BEGIN + " no end"]) == [""]

    def test_malformed_chunk_does_not_affect_others(self) -> None:
        fragments = convert(["{" + BEGIN + " no end", run("ok")])
        assert fragments == ["", "<span> ok</span>"]

    def test_unbalanced_braces_outside_payload(self) -> None:
        assert convert(["}}}" + run("a") + "{{{"]) == ["<span> a</span>"]

    def test_nested_group_inside_payload_is_truncated(self) -> None:
        """Payload ends at the first closing brace."""
        assert convert([run("a{\\b b} c")]) == ["<span> a{\\b b</span>"]
