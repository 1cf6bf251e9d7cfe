"""Application invocation – InvocationLogger."""
from __future__ import annotations

import asyncio
import functools
import inspect
from typing import Any, Callable, TypeVar

from dispatch_gateway.observability.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])


class InvocationLogger:
    """Decorator that logs ENTER/EXIT around a handler call.

    ``controller.invocation.enter`` is logged before the handler runs and
    ``controller.invocation.exit`` after it finishes.  The exit line is
    emitted on every path: ``outcome="ok"`` at INFO after a normal return,
    ``outcome="error"`` at ERROR when the handler raises and
    ``outcome="cancelled"`` at WARNING when its task is cancelled.  The
    exception always propagates unchanged.  The handler's return value is passed
    through untouched.

    Works for plain and ``async`` callables and keeps the wrapped
    signature, so FastAPI still sees the original parameters::

        logged = InvocationLogger()

        @router.get("/api/test")
        @logged
        async def test(message: str) -> str: ...
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger or get_logger(__name__)

    def __call__(self, func: F) -> F:
        method = func.__name__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                self._enter(method)
                try:
                    result = await func(*args, **kwargs)
                except BaseException as exc:
                    self._exit_error(method, exc)
                    raise
                self._exit_ok(method)
                return result

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self._enter(method)
            try:
                result = func(*args, **kwargs)
            except BaseException as exc:
                self._exit_error(method, exc)
                raise
            self._exit_ok(method)
            return result

        return wrapper  # type: ignore[return-value]

    def _enter(self, method: str) -> None:
        self._logger.info("controller.invocation.enter", method=method)

    def _exit_ok(self, method: str) -> None:
        self._logger.info("controller.invocation.exit", method=method, outcome="ok")

    def _exit_error(self, method: str, exc: BaseException) -> None:
        if isinstance(exc, asyncio.CancelledError):
            self._logger.warning("controller.invocation.exit", method=method, outcome="cancelled")
            return
        self._logger.error(
            "controller.invocation.exit",
            method=method,
            outcome="error",
            error=type(exc).__name__,
        )


__all__ = ["InvocationLogger"]
