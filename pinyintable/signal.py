"""A single-slot callable signal."""

from __future__ import annotations

from typing import Any, Callable


class Signal:
    """Holds one connected callable; calling the signal calls it."""

    def __init__(self) -> None:
        self._func: Callable[..., Any] | None = None

    def connect(self, func: Callable[..., Any]) -> None:
        """Connect ``func``, replacing any previously connected callable."""
        if not callable(func):
            raise TypeError("signal handler must be callable")
        self._func = func

    def __call__(self, *args: Any) -> Any:
        if self._func is None:
            raise RuntimeError("signal has no connected handler")
        return self._func(*args)