"""Read-only projections of the todo state.

Besides :func:`visible_todos`, this module holds the ``map_*_to_props``
selectors used by the bound containers in :mod:`unidux.todos.containers`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from unidux.connect import Dispatch, MapDispatchToProps, Props
from unidux.todos.actions import IdSequence, add_todo, set_visibility_filter, toggle_todo
from unidux.todos.models import Todo, VisibilityFilter


def visible_todos(items: Sequence[Todo], filter: VisibilityFilter | str) -> Sequence[Todo]:  # noqa: A002
    """Select the items shown under *filter*.

    ``SHOW_ALL`` returns *items* itself; the other filters return a new
    tuple.

    Raises
    ------
    ValueError
        If *filter* is not a known visibility filter.
    """
    if filter == VisibilityFilter.SHOW_ALL:
        return items
    if filter == VisibilityFilter.SHOW_ACTIVE:
        return tuple(item for item in items if not item.completed)
    if filter == VisibilityFilter.SHOW_COMPLETED:
        return tuple(item for item in items if item.completed)
    raise ValueError(f"Unknown visibility filter: {filter!r}")


def todo_list_state(state: Mapping[str, Any], own_props: Props) -> Props:
    return {"todos": visible_todos(state["todos"], state["visibility_filter"])}


def todo_list_dispatch(dispatch: Dispatch, own_props: Props) -> Props:
    def on_todo_click(todo_id: int) -> Any:
        return dispatch(toggle_todo(todo_id))

    return {"on_todo_click": on_todo_click}


def filter_link_state(state: Mapping[str, Any], own_props: Props) -> Props:
    return {"active": own_props["filter"] == state["visibility_filter"]}


def filter_link_dispatch(dispatch: Dispatch, own_props: Props) -> Props:
    def on_click() -> Any:
        return dispatch(set_visibility_filter(own_props["filter"]))

    return {"on_click": on_click}


def add_todo_dispatch(ids: IdSequence) -> MapDispatchToProps:
    """Build the dispatch selector of the add-todo form around *ids*."""

    def map_dispatch_to_props(dispatch: Dispatch, own_props: Props) -> Props:
        def on_add(text: str) -> Any:
            return dispatch(add_todo(text, ids=ids))

        return {"on_add": on_add}

    return map_dispatch_to_props
