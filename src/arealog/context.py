"""Request-scoped logger propagation.

A logger can be bound to the current ``contextvars`` context for the duration
of a request. ``logger_from_context()`` returns ``None`` when nothing is
bound; there is no fallback logger, so callers must check for ``None``.

Python copies the context into new tasks, but not into executor threads or
callbacks scheduled elsewhere. The helpers below copy it explicitly.

Example:
    >>> async def handle(service):
    ...     with bind_logger(service.get_logger("api")):
    ...         await create_task_with_context(background_work())
    ...
    >>> async def background_work():
    ...     log = logger_from_context()
    ...     if log is not None:
    ...         log.info("background task")
"""

from __future__ import annotations

import asyncio
import contextvars
import functools
from concurrent.futures import Executor
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Coroutine, Iterator, TypeVar

if TYPE_CHECKING:
    from .core.logger import Logger

__all__ = [
    "bind_logger",
    "create_task_with_context",
    "logger_from_context",
    "reset_context_logger",
    "run_in_executor_with_context",
    "set_context_logger",
]

T = TypeVar("T")

_context_logger: contextvars.ContextVar[Logger | None] = contextvars.ContextVar(
    "arealog_logger", default=None
)


def logger_from_context() -> Logger | None:
    """Return the logger bound to the current context, or ``None``."""
    return _context_logger.get()


def set_context_logger(logger: Logger | None) -> contextvars.Token[Logger | None]:
    return _context_logger.set(logger)


def reset_context_logger(token: contextvars.Token[Logger | None]) -> None:
    _context_logger.reset(token)


@contextmanager
def bind_logger(logger: Logger) -> Iterator[Logger]:
    """Bind ``logger`` to the current context until the block exits."""
    token = _context_logger.set(logger)
    try:
        yield logger
    finally:
        _context_logger.reset(token)


def create_task_with_context(
    coro: Coroutine[Any, Any, T],
    *,
    name: str | None = None,
) -> asyncio.Task[T]:
    """Create an asyncio task that inherits the current context.

    The logger bound with ``bind_logger`` is snapshotted when this is called,
    so the task keeps logging to the request's logger after the caller leaves
    the ``bind_logger`` block or rebinds another logger.

    Args:
        coro: The coroutine to run.
        name: Optional task name for debugging.

    Returns:
        Task with copied context.
    """
    ctx = contextvars.copy_context()

    async def _run_in_context() -> T:
        return await coro

    return ctx.run(asyncio.create_task, _run_in_context(), name=name)


async def run_in_executor_with_context(
    executor: Executor | None,
    func: Callable[..., T],
    *args: Any,
) -> T:
    """Run a sync function in an executor with the current context.

    Executor threads do not inherit ``contextvars``, so without the copy
    ``logger_from_context()`` returns ``None`` inside ``func``. With it the
    request's bound logger is visible there as well.
    """
    ctx = contextvars.copy_context()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        executor,
        functools.partial(ctx.run, func, *args),
    )
