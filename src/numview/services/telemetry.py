"""Verbose-mode timing for service calls.

``@traced`` opens a root span around a service call and ``trace_span`` opens
children under it. Both are inert until :func:`enable_telemetry` runs, which
AppContext does for ``--verbose``. The finished tree is attached as
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec

import structlog

from numview.services.result import ServiceResult

log = structlog.get_logger("numview.telemetry")

_enabled: ContextVar[bool] = ContextVar("numview_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("numview_active_span", default=None)


@dataclass
class Span:
    """One timed step. ``duration_ms`` stays None while the step is open."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    duration_ms: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms or 0.0, 3),
        }
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def _timed(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.duration_ms = (time.perf_counter() - span.started) * 1000
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a step inside a running ``@traced`` call; yields None otherwise."""
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name)
    parent.children.append(child)
    with _timed(child):
        yield child


_P = ParamSpec("_P")


def traced(func: Callable[_P, ServiceResult]) -> Callable[_P, ServiceResult]:
    """Attach the span tree of *func* to the ServiceResult it returns."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return func(*args, **kwargs)
        with _timed(Span(func.__qualname__)) as root:
            result = func(*args, **kwargs)
        log.debug(
            "span.complete",
            span_name=root.name,
            duration_ms=round(root.duration_ms or 0.0, 3),
            ok=result.ok,
            steps=[child.name for child in root.children],
        )
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
