"""Deadline enforcement for request handlers.

``race_deadline`` runs an operation against a timer. Whichever finishes first
decides the outcome. A timed-out operation is not cancelled unless the caller
asks for it: it keeps running in the background and whatever it eventually
returns or raises is discarded (failures are logged, never re-raised).
"""

import asyncio
import math
from typing import Awaitable, Callable, TypeVar

import logfire

from dealort.util.timeouts import get_timeout_for_route

T = TypeVar("T")

# Operations that outlived their deadline. Held here so the event loop does
# not garbage-collect them before they finish.
_abandoned: set[asyncio.Future] = set()


class RequestTimeoutError(Exception):
    """Raised when an operation does not settle before its deadline."""

    def __init__(self, timeout_ms: int, route_key: str | None = None):
        self.timeout_ms = timeout_ms
        self.route_key = route_key
        super().__init__(timeout_message(timeout_ms))

    @property
    def message(self) -> str:
        return str(self)


def timeout_message(timeout_ms: int) -> str:
    """Render the user-facing timeout message.

    Args:
        timeout_ms: Deadline in milliseconds

    Returns:
        Message stating the deadline in whole seconds (half rounds up)
    """
    seconds = math.floor(timeout_ms / 1000 + 0.5)
    return (
        f"Request timeout: The operation took longer than {seconds} seconds "
        "to complete. Please try again or contact support if the problem persists."
    )


def _discard_outcome(task: asyncio.Future) -> None:
    """Done-callback for abandoned operations."""
    _abandoned.discard(task)
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logfire.warn(
            "Abandoned operation failed after timeout",
            error=str(error),
            error_type=type(error).__name__,
        )


def _abandoned_count() -> int:
    """Number of timed-out operations still running in the background."""
    return len(_abandoned)


async def race_deadline(
    operation: Callable[[], Awaitable[T]],
    timeout_ms: int,
    *,
    route_key: str | None = None,
    cancel_on_timeout: bool = False,
) -> T:
    """Race an operation against a deadline.

    Args:
        operation: Zero-argument callable returning an awaitable
        timeout_ms: Deadline in milliseconds
        route_key: Route key, used for logging and on the raised error
        cancel_on_timeout: Cancel the operation when the deadline fires

    Returns:
        The operation's result

    Raises:
        RequestTimeoutError: If the deadline fires first
        Exception: Whatever the operation raises, unchanged
    """
    task = asyncio.ensure_future(operation())

    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    except asyncio.CancelledError:
        task.cancel()
        raise

    if task in done:
        return task.result()

    if cancel_on_timeout:
        task.cancel()
    else:
        _abandoned.add(task)
        task.add_done_callback(_discard_outcome)

    logfire.warn(
        "Operation timed out",
        route_key=route_key,
        timeout_ms=timeout_ms,
        cancelled=cancel_on_timeout,
    )
    raise RequestTimeoutError(timeout_ms, route_key)


async def with_timeout(
    operation: Callable[[], Awaitable[T]],
    route_key: str,
    *,
    cancel_on_timeout: bool = False,
) -> T:
    """Run an operation under the deadline configured for ``route_key``.

    Args:
        operation: Zero-argument callable returning an awaitable
        route_key: Dot-separated route key (e.g. ``"comments.list"``)
        cancel_on_timeout: Cancel the operation when the deadline fires

    Returns:
        The operation's result

    Raises:
        RequestTimeoutError: If the route's deadline fires first
    """
    return await race_deadline(
        operation,
        get_timeout_for_route(route_key),
        route_key=route_key,
        cancel_on_timeout=cancel_on_timeout,
    )
