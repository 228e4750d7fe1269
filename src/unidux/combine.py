"""Reducer composition.

Combines slice reducers, each owning one key of the state mapping, into a
single root reducer.  The root reducer returns its input state unchanged
(same reference) when no slice changed, which is how the store and the
connectors detect "nothing happened" without comparing values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from unidux.actions import Action
from unidux.config import UniduxConfig
from unidux.exceptions import InvalidReducerError
from unidux.store import Reducer

_logger = logging.getLogger(__name__)


def combine_reducers(
    reducers: Mapping[str, Reducer],
    *,
    config: UniduxConfig | None = None,
    logger: logging.Logger | None = None,
) -> Reducer:
    """Build a root reducer from a mapping of slice reducers.

    Parameters
    ----------
    reducers
        Slice key to slice reducer.  The mapping is copied, so later
        changes to the caller's dict have no effect.
    config
        ``config.debug`` enables warnings for state keys no reducer owns.
    logger
        Logger for those warnings.  Defaults to the module logger.

    Raises
    ------
    InvalidReducerError
        If any value in *reducers* is not callable.
    """
    config = config or UniduxConfig()
    log = logger or _logger

    final_reducers: dict[str, Reducer] = {}
    for key, reducer in reducers.items():
        if not callable(reducer):
            raise InvalidReducerError(
                f"Reducer for key {key!r} must be callable, got {type(reducer).__name__}",
                key=key,
            )
        final_reducers[key] = reducer

    if config.debug and not final_reducers:
        log.warning("combine_reducers() received no reducers; the root state will always be empty")

    # Each unexpected key is reported once per composed reducer.
    warned_keys: set[str] = set()
    warned_shape = False

    def _check_shape(state: Any, action: Action) -> None:
        nonlocal warned_shape
        if not isinstance(state, Mapping):
            if not warned_shape:
                warned_shape = True
                log.warning(
                    "Root state has unexpected type %s; expected a mapping with keys %s",
                    type(state).__name__,
                    sorted(final_reducers),
                )
            return
        unexpected = [key for key in state if key not in final_reducers and key not in warned_keys]
        if unexpected:
            warned_keys.update(unexpected)
            log.warning(
                "Unexpected state keys %s while handling %s; expected one of %s. They will be kept as-is.",
                unexpected,
                action.type,
                sorted(final_reducers),
            )

    def combination(state: Mapping[str, Any] | None, action: Action) -> Mapping[str, Any]:
        if config.debug and state is not None:
            _check_shape(state, action)

        previous: Mapping[str, Any] = state if isinstance(state, Mapping) else {}
        has_changed = not isinstance(state, Mapping)
        next_slices: dict[str, Any] = {}
        for key, reducer in final_reducers.items():
            prev_slice = previous.get(key)
            next_slice = reducer(prev_slice, action)
            next_slices[key] = next_slice
            has_changed = has_changed or next_slice is not prev_slice

        if not has_changed:
            return previous

        next_state = dict(previous)
        next_state.update(next_slices)
        return next_state

    return combination
