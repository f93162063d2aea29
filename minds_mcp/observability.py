"""
Observability

Optional callbacks for tracking mind loads, tool calls and script runs,
plus timing helpers. Hooks are process-wide unless a registry is given its own.
"""

import logging
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, AsyncIterator, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObservabilityHooks:
    """Callbacks fired by the registry and tool layer. Any may be None."""
    on_mind_load: Optional[Callable[[str, float, bool], None]] = None  # name, duration_ms, cached
    on_tool_call: Optional[Callable[[str, dict[str, Any]], None]] = None
    on_script_execute: Optional[Callable[[str, str, bool, float], None]] = None  # mind, script, success, duration_ms
    on_error: Optional[Callable[[BaseException, Optional[dict[str, Any]]], None]] = None

    def merged(self, other: "ObservabilityHooks") -> "ObservabilityHooks":
        """Copy with every callback set on other taking precedence."""
        updates = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **updates)

    def fire(self, hook: str, *args: Any) -> None:
        callback = getattr(self, hook)
        if callback is None:
            return
        try:
            callback(*args)
        except Exception as e:
            logger.warning(f"Observability hook {hook} raised: {e}")


_global_hooks = ObservabilityHooks()


def set_hooks(hooks: ObservabilityHooks) -> None:
    """Merge hooks into the process-wide set."""
    global _global_hooks
    _global_hooks = _global_hooks.merged(hooks)


def get_hooks() -> ObservabilityHooks:
    return _global_hooks


def reset_observability() -> None:
    global _global_hooks
    _global_hooks = ObservabilityHooks()


def elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@asynccontextmanager
async def measure_duration(operation: str, log: Optional[logging.Logger] = None) -> AsyncIterator[None]:
    """Log start, completion and failure of an operation with its duration."""
    log = log or logger
    start = time.perf_counter()
    log.debug(f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        log.error(f"Failed: {operation} after {elapsed_ms(start):.2f}ms: {e}")
        raise
    log.debug(f"Completed: {operation} in {elapsed_ms(start):.2f}ms")


def track_error(error: BaseException, context: Optional[dict[str, Any]] = None) -> None:
    """Report an error to the on_error hook and the log."""
    _global_hooks.fire("on_error", error, context)
    suffix = f" {context}" if context else ""
    logger.error(f"{error}{suffix}")
