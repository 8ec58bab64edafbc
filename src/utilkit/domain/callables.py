"""Classify callables by declared execution kind."""

from __future__ import annotations

import inspect
from typing import Any


def is_async_fn(callback: Any) -> bool:
    """Return True if calling *callback* yields a coroutine.

    Decided from the declaration only; *callback* is never invoked.
    Recognizes ``async def`` functions and methods, ``functools.partial``
    objects wrapping them, and instances whose ``__call__`` is ``async def``.
    A plain function that happens to return an awaitable is not async.
    """
    if inspect.iscoroutinefunction(callback):
        return True
    if inspect.isroutine(callback) or isinstance(callback, type):
        return False
    call = getattr(callback, "__call__", None)  # noqa: B004
    return call is not None and inspect.iscoroutinefunction(call)
