"""Tests for the public conversion API."""

from pathlib import Path

import pytest
from rtf_builders import BOLD, PARA, blank, list_item, run

from rtfhtml import (
    ConverterConfig,
    MissingInputError,
    RtfConverter,
    configure,
    convert,
    convert_file,
    convert_text,
    get_convert_config,
    reset_convert_config,
)

SECTIONED = (
    "{\\rtf1 header}\n"
    "----\n"
    + run("First")
    + "\n"
    + "----\n"
    + PARA
    + run("Second", BOLD)
    + "\n"
    + "----\n"
    + "trailing"
)


class TestConvert:
    def teardown_method(self) -> None:
        reset_convert_config()

    def test_one_fragment_per_chunk(self) -> None:
        fragments = convert([run("a"), "no markers", run("b")])
        assert fragments == ["<span> a</span>", "", "<span> b</span>"]

    def test_empty_sequence(self) -> None:
        assert convert([]) == []

    def test_none_raises(self) -> None:
        with pytest.raises(MissingInputError):
            convert(None)

    def test_single_string_is_one_chunk(self) -> None:
        assert convert(run("a")) == ["<span> a</span>"]

    def test_chunks_are_independent(self) -> None:
        """An open list in one chunk never leaks into the next."""
        fragments = convert([list_item("One"), run("Plain")])
        assert fragments[0] == "\n<ol>\n<li> One</li>\n</ol>\n"
        assert fragments[1] == "<span> Plain</span>"


class TestConvertText:
    def teardown_method(self) -> None:
        reset_convert_config()

    def test_whole_text_without_delimiter(self) -> None:
        assert convert_text(run("a") + blank()) == ["<div>\n<span> a</span>\n</div>"]

    def test_sections_with_configured_delimiter(self) -> None:
        configure({"sectionDelimiter": "----"})
        fragments = convert_text(SECTIONED)
        assert fragments == [
            "<span> First</span>",
            '<span class="rtf-bold"> Second</span>',
        ]

    @pytest.mark.parametrize("source", [None, ""])
    def test_missing_source_raises(self, source: str | None) -> None:
        with pytest.raises(MissingInputError):
            convert_text(source)


class TestConvertFile:
    def teardown_method(self) -> None:
        reset_convert_config()

    def test_reads_whole_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.rtf"
        path.write_text(run("Hello"), encoding="utf-8")
        assert convert_file(path) == ["<span> Hello</span>"]

    def test_reads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.rtf"
        path.write_text(SECTIONED, encoding="utf-8")
        configure({"sectionSeparation": {"separator": "----"}})
        assert len(convert_file(str(path))) == 2

    @pytest.mark.parametrize("path", [None, ""])
    def test_missing_path_raises(self, path: str | None) -> None:
        with pytest.raises(MissingInputError):
            convert_file(path)

    def test_nonexistent_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            convert_file(tmp_path / "missing.rtf")


class TestConfigure:
    def teardown_method(self) -> None:
        reset_convert_config()

    def test_installs_config(self) -> None:
        config = configure({"section_delimiter": "====", "escape_html": True})
        assert get_convert_config() is config
        assert config.section_delimiter == "===="
        assert config.escape_html is True

    def test_none_restores_defaults(self) -> None:
        configure({"escape_html": True})
        assert configure(None) == ConverterConfig()


class TestRtfConverter:
    def test_call_splits_and_converts(self) -> None:
        converter = RtfConverter(section_delimiter="----")
        assert len(converter(SECTIONED)) == 2

    def test_does_not_leak_config(self) -> None:
        converter = RtfConverter(escape_html=True)
        assert converter.convert([run("<b>")]) == ["<span> &lt;b&gt;</span>"]
        assert get_convert_config().escape_html is False
        assert convert([run("<b>")]) == ["<span> <b></span>"]

    def test_configure_keeps_unspecified_options(self) -> None:
        converter = RtfConverter(section_delimiter="----", max_list_depth=2)
        converter.configure({"escapeHtml": True})
        assert converter.config.section_delimiter == "----"
        assert converter.config.max_list_depth == 2
        assert converter.config.escape_html is True

    def test_configure_legacy_separator(self) -> None:
        converter = RtfConverter().configure({"sectionSeparation": {"separator": "##"}})
        assert converter.config.section_delimiter == "##"

    def test_convert_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.rtf"
        path.write_text(SECTIONED, encoding="utf-8")
        converter = RtfConverter(section_delimiter="----")
        assert converter.convert_file(path) == [
            "<span> First</span>",
            '<span class="rtf-bold"> Second</span>',
        ]
