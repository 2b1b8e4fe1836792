"""Trailing-edge debounce on the running event loop."""

import asyncio
import inspect
from typing import Any, Callable, Optional

from ..utils.logging import get_logger

logger = get_logger("console.debounce")


class Debouncer:
    """Delays a callback until ``delay_ms`` passes without a new schedule().

    Only the arguments of the last schedule() reach the callback. The
    callback may be a plain function or a coroutine function.
    """

    def __init__(self, callback: Callable[..., Any], delay_ms: int = 500):
        if delay_ms <= 0:
            raise ValueError("delay_ms must be positive")
        self._callback = callback
        self._delay = delay_ms / 1000.0
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: tuple = ()
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, *args: Any) -> None:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._args = args
        self._handle = loop.call_later(self._delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            self._args = ()

    async def flush(self) -> None:
        """Run a pending call now instead of waiting out the delay."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        args, self._args = self._args, ()
        result = self._callback(*args)
        if inspect.isawaitable(result):
            await result

    async def wait(self) -> None:
        """Wait for callbacks already fired to finish."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _fire(self) -> None:
        self._handle = None
        args, self._args = self._args, ()
        try:
            result = self._callback(*args)
        except Exception as e:
            logger.error("debounced_callback_failed", error=str(e), exc_info=True)
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            exc = task.exception()
            logger.error("debounced_callback_failed", error=str(exc))
