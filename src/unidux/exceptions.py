"""Custom exception hierarchy for unidux."""

from __future__ import annotations

from typing import Any


class UniduxError(Exception):
    """Base exception for all unidux errors."""


class InvalidActionError(UniduxError):
    """Dispatched value is not an action record.

    Raised when the value is neither a mapping nor an :class:`~unidux.actions.Action`,
    or when it has no usable ``type`` discriminant.  Typed reducers also
    raise it for a payload that does not match the action kind.  The store
    state is left unchanged either way.
    """

    def __init__(self, message: str, *, action: Any = None) -> None:
        self.action = action
        super().__init__(message)


class ReentrantDispatchError(UniduxError):
    """A dispatch was attempted while another one is still in progress.

    Covers dispatching from inside a reducer and from inside a listener
    notified by the same store.  The in-progress dispatch is not affected.
    """

    def __init__(self, message: str, *, action_type: str = "") -> None:
        self.action_type = action_type
        super().__init__(message)


class InvalidReducerError(UniduxError):
    """A reducer (or a slice reducer handed to the composer) is not callable."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)
