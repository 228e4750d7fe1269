"""Single mutable state container.

The store owns the current state reference and replaces it only from
:meth:`Store.dispatch`.  Everything else reads it through
:meth:`Store.get_state` and treats the result as read-only; mutating the
returned value in place is undefined behavior and is not detected.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from unidux._logfmt import summarize_for_log
from unidux.actions import INIT_ACTION_TYPE, Action, coerce_action
from unidux.config import UniduxConfig
from unidux.exceptions import InvalidReducerError, ReentrantDispatchError

_logger = logging.getLogger(__name__)

State = Any
Reducer = Callable[[Any, Action], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]

A = TypeVar("A")

_UNSET: Any = object()


def _callable_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _action_type(action: Any) -> str:
    if isinstance(action, Action):
        return action.type
    if isinstance(action, Mapping):
        value = action.get("type")
        if isinstance(value, str):
            return value
    return ""


class Store:
    """State container updated only through a root reducer.

    Usage::

        store = create_store(todo_app)
        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch({"type": "ADD_TODO", "id": 0, "text": "Buy milk"})
        unsubscribe()

    Dispatch runs to completion (reduction and listener notification)
    before returning.  A dispatch started from inside a reducer or a
    listener of the same store raises :class:`ReentrantDispatchError`.
    """

    def __init__(
        self,
        reducer: Reducer,
        initial_state: State = _UNSET,
        *,
        config: UniduxConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if not callable(reducer):
            raise InvalidReducerError(f"Root reducer must be callable, got {type(reducer).__name__}")
        self._reducer = reducer
        self._config = config or UniduxConfig()
        self._logger = logger or _logger
        # Insertion-ordered registry; one key per subscribe() call.
        self._listeners: dict[int, Listener] = {}
        self._listener_keys = itertools.count()
        self._is_dispatching = False

        if initial_state is _UNSET:
            initial_state = reducer(None, Action(type=INIT_ACTION_TYPE))
        self._state = initial_state
        self._logger.debug("Store created reducer=%s", _callable_name(reducer))

    @property
    def is_dispatching(self) -> bool:
        """Whether a dispatch (reduction or notification) is in progress."""
        return self._is_dispatching

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def get_state(self) -> State:
        """Return the current state reference (read-only by contract)."""
        return self._state

    def dispatch(self, action: A) -> A:
        """Reduce *action* into a new state and notify listeners.

        Returns the action object that was passed in.

        Raises
        ------
        InvalidActionError
            If *action* is not an action record.  State is unchanged.
        ReentrantDispatchError
            If another dispatch is in progress on this store.  Checked
            before *action* is validated.
        """
        if self._is_dispatching:
            action_type = _action_type(action)
            raise ReentrantDispatchError(
                f"Cannot dispatch {action_type!r} while a dispatch is in progress",
                action_type=action_type,
            )
        normalized = coerce_action(action)

        if self._config.log_actions:
            self._logger.debug(
                "Dispatching action=%s",
                summarize_for_log(normalized, max_string=self._config.log_max_string),
            )
        else:
            self._logger.debug("Dispatching type=%s", normalized.type)

        self._is_dispatching = True
        try:
            # A raising reducer leaves the previous state installed.
            next_state = self._reducer(self._state, normalized)
            changed = next_state is not self._state
            self._state = next_state
            self._notify()
        finally:
            self._is_dispatching = False

        if not changed:
            self._logger.debug("State unchanged type=%s", normalized.type)
        return action

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register *listener* to be called after every dispatch.

        Returns a zero-argument function removing exactly this
        registration.  Calling it more than once is a no-op.
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")
        key = next(self._listener_keys)
        self._listeners[key] = listener
        name = _callable_name(listener)
        self._logger.debug("Listener added %s total=%d", name, len(self._listeners))

        def unsubscribe() -> None:
            if self._listeners.pop(key, None) is not None:
                self._logger.debug("Listener removed %s total=%d", name, len(self._listeners))

        return unsubscribe

    def _notify(self) -> None:
        # Listeners added during this cycle are not in the snapshot; listeners
        # removed during this cycle are skipped.
        for key, listener in list(self._listeners.items()):
            if key not in self._listeners:
                continue
            listener()


def create_store(
    reducer: Reducer,
    initial_state: State = _UNSET,
    *,
    config: UniduxConfig | None = None,
    logger: logging.Logger | None = None,
) -> Store:
    """Create a :class:`Store`.

    When *initial_state* is omitted the reducer is called once with ``None``
    and an ``@@unidux/INIT`` action to obtain the defaults.
    """
    return Store(reducer, initial_state, config=config, logger=logger)
