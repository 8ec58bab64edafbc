"""Debounced execution keyed on a caller-owned timer cell.

A :class:`TimerRef` holds at most one pending run. While it is occupied,
further :func:`debounce_run` calls are dropped, never queued. The slot is
emptied once the scheduled callback finishes, including awaiting it when it
is a coroutine function.

Scheduling uses the running asyncio loop, so everything happens on one
thread and no locking is involved. Callers must not share one cell between
unrelated debounce streams.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from utilkit.config.models import DEFAULT_DEBOUNCE_WAIT_MS
from utilkit.domain.callables import is_async_fn

if TYPE_CHECKING:
    from utilkit.config.settings import UtilkitSettings

logger = logging.getLogger(__name__)


@dataclass
class TimerRef:
    """Single-slot cell for one pending debounced run.

    Attributes:
        current: The ``asyncio.TimerHandle`` while waiting, the ``asyncio.Task``
            while an async callback runs, or None when idle.
    """

    current: asyncio.TimerHandle | asyncio.Task[Any] | None = None

    @property
    def pending(self) -> bool:
        return self.current is not None

    def cancel(self) -> None:
        """Cancel whatever the slot holds and leave it empty."""
        if self.current is not None:
            self.current.cancel()
            self.current = None


def debounce_run(
    ref: TimerRef,
    fn: Callable[[], Any],
    wait: float | None = None,
) -> bool:
    """Schedule *fn* after *wait* milliseconds unless *ref* is already pending.

    Must be called with a running event loop.

    Returns:
        True if *fn* was scheduled, False if the call was dropped.

    Raises:
        RuntimeError: If no event loop is running.
    """
    if ref.current is not None:
        logger.debug("debounce: run already pending, dropping call")
        return False

    loop = asyncio.get_running_loop()
    delay = (DEFAULT_DEBOUNCE_WAIT_MS if wait is None else wait) / 1000
    ref.current = loop.call_later(delay, _fire, ref, fn)
    logger.debug("debounce: scheduled run in %.3fs", delay)
    return True


class Debouncer:
    """:func:`debounce_run` with its default wait taken from settings.

    ``[debounce] wait_ms`` in utilkit.toml (or ``UTILKIT_DEBOUNCE__WAIT_MS``)
    replaces the built-in 10 ms default; an explicit *wait* still wins.
    """

    def __init__(self, settings: UtilkitSettings | None = None) -> None:
        if settings is None:
            self.default_wait: float = DEFAULT_DEBOUNCE_WAIT_MS
        else:
            self.default_wait = settings.debounce.wait_ms

    def run(self, ref: TimerRef, fn: Callable[[], Any], wait: float | None = None) -> bool:
        return debounce_run(ref, fn, self.default_wait if wait is None else wait)


def _fire(ref: TimerRef, fn: Callable[[], Any]) -> None:
    if is_async_fn(fn):
        task = asyncio.ensure_future(fn())
        ref.current = task
        task.add_done_callback(lambda _t: _release(ref, task))
        return
    try:
        fn()
    finally:
        _release(ref, None)


def _release(ref: TimerRef, task: asyncio.Task[Any] | None) -> None:
    # A cancel() followed by a fresh schedule must not be cleared by a
    # late completion of the old task.
    if task is None or ref.current is task:
        ref.current = None
