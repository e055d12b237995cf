"""Tests for telemetry primitives: Span and @traced."""

from __future__ import annotations

import time

import pytest

from pkgsort.services.result import ServiceResult
from pkgsort.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict(self) -> None:
        span = Span(name="root")
        span.end()
        assert set(span.to_dict()) == {"name", "duration_ms"}


class TestTraced:
    def test_disabled_is_passthrough(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_enabled_injects_meta(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op", meta={"count": 1})

        enable_telemetry()
        meta = op().meta
        assert meta is not None
        assert meta["count"] == 1
        assert "telemetry" in meta

    def test_non_result_return_untouched(self) -> None:
        @traced
        def op() -> int:
            return 7

        enable_telemetry()
        assert op() == 7

    def test_exception_propagates(self) -> None:
        @traced
        def op() -> ServiceResult:
            raise RuntimeError("boom")

        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            op()

    def test_disable_stops_injection(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        enable_telemetry()
        disable_telemetry()
        assert op().meta is None
