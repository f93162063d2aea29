"""Tests for observability hooks and timing helpers."""

import logging

import pytest

from minds_mcp.observability import (
    ObservabilityHooks,
    get_hooks,
    measure_duration,
    reset_observability,
    set_hooks,
    track_error,
)


class TestHooks:
    """Test the process-wide hook set."""

    def test_defaults_are_empty(self):
        hooks = get_hooks()
        assert hooks.on_mind_load is None
        assert hooks.on_error is None

    def test_set_hooks_merges(self):
        """Setting one hook keeps the others already registered."""
        load, error = [], []
        set_hooks(ObservabilityHooks(on_mind_load=lambda *a: load.append(a)))
        set_hooks(ObservabilityHooks(on_error=lambda *a: error.append(a)))

        hooks = get_hooks()
        hooks.fire("on_mind_load", "a", 1.0, False)
        hooks.fire("on_error", ValueError("x"), None)

        assert load == [("a", 1.0, False)]
        assert len(error) == 1

    def test_reset(self):
        set_hooks(ObservabilityHooks(on_tool_call=lambda *a: None))
        reset_observability()
        assert get_hooks().on_tool_call is None

    def test_fire_without_callback(self):
        ObservabilityHooks().fire("on_tool_call", "load-mind", {})

    def test_fire_swallows_hook_errors(self, caplog):
        def explode(*args):
            raise RuntimeError("nope")

        with caplog.at_level(logging.WARNING):
            ObservabilityHooks(on_tool_call=explode).fire("on_tool_call", "x", {})
        assert "on_tool_call raised: nope" in caplog.text

    def test_track_error(self):
        seen = []
        set_hooks(ObservabilityHooks(on_error=lambda error, context: seen.append((error, context))))

        error = ValueError("bad")
        track_error(error, {"tool": "load-mind"})

        assert seen == [(error, {"tool": "load-mind"})]


@pytest.mark.asyncio
class TestMeasureDuration:
    """Test measure_duration."""

    async def test_logs_completion(self, caplog):
        log = logging.getLogger("test.measure")
        with caplog.at_level(logging.DEBUG, logger="test.measure"):
            async with measure_duration("work", log):
                pass
        assert "Completed: work in" in caplog.text

    async def test_logs_and_reraises_failure(self, caplog):
        log = logging.getLogger("test.measure")
        with caplog.at_level(logging.DEBUG, logger="test.measure"):
            with pytest.raises(ValueError):
                async with measure_duration("work", log):
                    raise ValueError("boom")
        assert "Failed: work after" in caplog.text
