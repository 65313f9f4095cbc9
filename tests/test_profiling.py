"""Tests for rtfhtml.profiling: conversion profiling API."""

from rtf_builders import blank, list_item, run

from rtfhtml import convert
from rtfhtml.profiling import (
    ConvertAccumulator,
    get_convert_accumulator,
    profiled_convert,
)


class TestGetConvertAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_convert_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_convert():
            pass
        assert get_convert_accumulator() is None


class TestProfiledConvert:
    def test_yields_accumulator(self) -> None:
        with profiled_convert() as acc:
            assert isinstance(acc, ConvertAccumulator)
            assert get_convert_accumulator() is acc

    def test_records_chunks(self) -> None:
        chunks = [run("a") + blank(), list_item("One") + list_item("Two")]
        with profiled_convert() as acc:
            convert(chunks)
        assert acc.chunks == 2
        assert acc.source_length == sum(len(chunk) for chunk in chunks)
        assert acc.blocks == 4
        assert acc.lists == 1

    def test_total_duration_non_negative(self) -> None:
        with profiled_convert() as acc:
            convert([run("a")])
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ConvertAccumulator().summary()
        assert summary["chunks"] == 0
        assert summary["blocks"] == 0
        assert summary["lists"] == 0
        assert "total_ms" in summary

    def test_record_chunk(self) -> None:
        acc = ConvertAccumulator()
        acc.record_chunk(source_length=10, blocks=3, lists=1)
        acc.record_chunk(source_length=5, blocks=1, lists=0)
        assert acc.summary()["source_length"] == 15
        assert acc.blocks == 4
        assert acc.lists == 1
