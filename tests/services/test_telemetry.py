"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from weblinker.services.result import ServiceResult
from weblinker.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_with_annotations(self) -> None:
        span = Span(name="dfs")
        span.annotate("visited", 3)
        assert span.to_dict()["annotations"] == {"visited": 3}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_no_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


class _Worker:
    @traced
    def work(self) -> ServiceResult:
        with trace_span("inner") as span:
            if span:
                span.annotate("k", "v")
        return ServiceResult(ok=True, op="work")

    @traced
    def fail(self) -> ServiceResult:
        raise RuntimeError("boom")


class TestTraced:
    def test_disabled_returns_result_untouched(self) -> None:
        assert _Worker().work().meta is None

    def test_enabled_injects_meta(self) -> None:
        enable_telemetry()
        result = _Worker().work()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Worker.work"
        assert tree["children"][0]["annotations"] == {"k": "v"}

    def test_exception_propagates_and_resets_span(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            _Worker().fail()
        assert _current_span.get() is None
