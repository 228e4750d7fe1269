"""Caller-side helpers for dispatching outside the store's call stack.

The store itself never suspends.  Listeners that want to react with another
dispatch, or worker threads producing actions, hand the dispatch to an
asyncio event loop with these helpers; it then runs as a fresh, top-level
dispatch on a later loop iteration.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import Any

from unidux.exceptions import ReentrantDispatchError
from unidux.store import Store

_logger = logging.getLogger(__name__)


def _run_dispatch(store: Store, action: Any, future: asyncio.Future[Any]) -> None:
    if future.cancelled():
        _logger.debug("Deferred dispatch cancelled before it ran")
        return
    try:
        result = store.dispatch(action)
    except Exception as exc:
        future.set_exception(exc)
    else:
        future.set_result(result)


def dispatch_soon(
    store: Store,
    action: Any,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[Any]:
    """Schedule ``store.dispatch(action)`` on the next loop iteration.

    The returned future resolves to the dispatched action, or carries the
    exception raised by the dispatch.  Cancelling it before it runs skips
    the dispatch.
    """
    loop = loop or asyncio.get_running_loop()
    future: asyncio.Future[Any] = loop.create_future()
    loop.call_soon(_run_dispatch, store, action, future)
    return future


def dispatch_threadsafe(
    store: Store,
    action: Any,
    *,
    loop: asyncio.AbstractEventLoop,
) -> concurrent.futures.Future[Any]:
    """Hand a dispatch from a non-loop thread over to *loop*."""

    async def _dispatch() -> Any:
        return await dispatch_soon(store, action, loop=loop)

    return asyncio.run_coroutine_threadsafe(_dispatch(), loop)


def dispatch_safe(
    store: Store,
    action: Any,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> Any:
    """Dispatch now when the store is idle, otherwise defer with :func:`dispatch_soon`.

    Returns the action for an immediate dispatch, or the pending future.
    Deferring needs an event loop: pass *loop* when calling from code that
    does not run inside one.

    Raises
    ------
    ReentrantDispatchError
        If the store is busy and there is neither *loop* nor a running loop
        to defer to.
    """
    if store.is_dispatching:
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise ReentrantDispatchError(
                    "Store is busy and no event loop is running to defer the dispatch; pass loop=",
                ) from exc
        _logger.debug("Store busy; deferring dispatch")
        return dispatch_soon(store, action, loop=loop)
    return store.dispatch(action)
