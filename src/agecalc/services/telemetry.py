"""Step timings for AgeService calls, shown under ``--verbose``.

``@traced`` opens a span around a service method and ``trace_span(name)``
times one stage inside it (``validate``, ``calculate``). Stages do not
nest. The finished tree lands in ``ServiceResult.meta["telemetry"]``.
When telemetry is off, both cost a single ContextVar read.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from agecalc.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("agecalc_telemetry", default=False)
_open_span: ContextVar[Span | None] = ContextVar("agecalc_open_span", default=None)

_log = structlog.get_logger("agecalc.telemetry")


@dataclass
class Span:
    name: str
    started: float = field(default_factory=time.perf_counter)
    duration_ms: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    steps: list[Span] = field(default_factory=list)

    def close(self) -> None:
        self.duration_ms = round((time.perf_counter() - self.started) * 1000, 2)

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Tree shape read by the verbose renderer."""
        out: dict[str, Any] = {"name": self.name, "duration_ms": self.duration_ms or 0.0}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.steps:
            out["children"] = [step.to_dict() for step in self.steps]
        return out


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time one stage of the running service call.

    Yields None when telemetry is off or no traced call is running.
    """
    parent = _open_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    step = Span(name=name)
    parent.steps.append(step)
    try:
        yield step
    finally:
        step.close()


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the returned result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _open_span.set(span)
        try:
            result = func(*args, **kwargs)
        finally:
            span.close()
            _open_span.reset(token)

        if not isinstance(result, ServiceResult):
            return result
        _log.debug(
            "service.timed",
            op=result.op,
            ok=result.ok,
            duration_ms=span.duration_ms,
            steps=[step.name for step in span.steps],
        )
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn on span collection (AppContext does this for ``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
