"""Reducers for the todo list.

Every reducer returns its input reference unchanged for actions it does not
handle, so the composed root reducer can report "nothing changed" by
identity alone.
"""

from __future__ import annotations

import logging
from typing import Any

from unidux.actions import Action
from unidux.combine import combine_reducers
from unidux.config import UniduxConfig
from unidux.store import Store
from unidux.todos.actions import AddTodo, SetVisibilityFilter, TodoActionType, ToggleTodo, typed_action
from unidux.todos.models import Todo, VisibilityFilter

_UNSET: Any = object()


def todo(state: Todo | None, action: Action) -> Todo | None:
    """Reducer for a single item of the ``todos`` slice."""
    if action.type == TodoActionType.ADD_TODO:
        added = typed_action(AddTodo, action)
        return Todo(id=added.id, text=added.text)
    if action.type == TodoActionType.TOGGLE_TODO:
        toggled = typed_action(ToggleTodo, action)
        if state is None or state.id != toggled.id:
            return state
        return state.model_copy(update={"completed": not state.completed})
    return state


def todos(state: tuple[Todo, ...] | None, action: Action) -> tuple[Todo, ...]:
    if state is None:
        state = ()
    if action.type == TodoActionType.ADD_TODO:
        return (*state, todo(None, typed_action(AddTodo, action)))
    if action.type == TodoActionType.TOGGLE_TODO:
        toggle = typed_action(ToggleTodo, action)
        toggled = tuple(todo(item, toggle) for item in state)
        if all(new is old for new, old in zip(toggled, state)):
            return state
        return toggled
    return state


def visibility_filter(state: VisibilityFilter | None, action: Action) -> VisibilityFilter:
    if state is None:
        state = VisibilityFilter.SHOW_ALL
    if action.type == TodoActionType.SET_VISIBILITY_FILTER:
        return typed_action(SetVisibilityFilter, action).filter
    return state


SLICE_REDUCERS = {
    "todos": todos,
    "visibility_filter": visibility_filter,
}

todo_app = combine_reducers(SLICE_REDUCERS)


def create_todo_store(
    initial_state: Any = _UNSET,
    *,
    config: UniduxConfig | None = None,
    logger: logging.Logger | None = None,
) -> Store:
    """Create a store running the todo reducers.

    Without *initial_state* the store starts from
    ``{"todos": (), "visibility_filter": "SHOW_ALL"}``.
    """
    reducer = combine_reducers(SLICE_REDUCERS, config=config, logger=logger)
    if initial_state is _UNSET:
        return Store(reducer, config=config, logger=logger)
    return Store(reducer, initial_state, config=config, logger=logger)
