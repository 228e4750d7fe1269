"""Headless presentation consumers and their bound containers.

The presentation functions return plain view records instead of drawing
anything; a view layer turns them into widgets and wires ``on_click`` /
``on_add`` to user gestures.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from unidux.connect import BoundComponent, Props, connect
from unidux.store import Store
from unidux.todos.actions import IdSequence
from unidux.todos.models import VisibilityFilter
from unidux.todos.selectors import (
    add_todo_dispatch,
    filter_link_dispatch,
    filter_link_state,
    todo_list_dispatch,
    todo_list_state,
)

_logger = logging.getLogger(__name__)

FILTER_LABELS: dict[VisibilityFilter, str] = {
    VisibilityFilter.SHOW_ALL: "All",
    VisibilityFilter.SHOW_ACTIVE: "Active",
    VisibilityFilter.SHOW_COMPLETED: "Completed",
}


@dataclass(frozen=True)
class TodoRow:
    id: int
    text: str
    completed: bool
    on_click: Callable[[], Any]


@dataclass(frozen=True)
class LinkView:
    """A filter link; ``on_click`` is ``None`` for the active filter."""

    label: str
    active: bool
    on_click: Callable[[], Any] | None


@dataclass(frozen=True)
class AddTodoForm:
    on_add: Callable[[str], Any]


def todo_list(props: Props) -> tuple[TodoRow, ...]:
    on_todo_click = props["on_todo_click"]
    return tuple(
        TodoRow(
            id=item.id,
            text=item.text,
            completed=item.completed,
            on_click=functools.partial(on_todo_click, item.id),
        )
        for item in props["todos"]
    )


def filter_link(props: Props) -> LinkView:
    label = props.get("label") or FILTER_LABELS.get(props["filter"], str(props["filter"]))
    if props["active"]:
        return LinkView(label=label, active=True, on_click=None)
    return LinkView(label=label, active=False, on_click=props["on_click"])


def add_todo_form(props: Props) -> AddTodoForm:
    return AddTodoForm(on_add=props["on_add"])


VisibleTodoList = connect(todo_list_state, todo_list_dispatch)(todo_list)

FilterLink = connect(filter_link_state, filter_link_dispatch)(filter_link)


def make_add_todo(ids: IdSequence) -> type[BoundComponent]:
    """Bind the add-todo form to a caller-owned identifier sequence.

    The form only dispatches, so it does not subscribe to the store.
    """
    return connect(None, add_todo_dispatch(ids))(add_todo_form)


@dataclass(frozen=True)
class Footer:
    """The row of filter links, one per :class:`VisibilityFilter`."""

    links: tuple[BoundComponent, ...]

    @property
    def rendered(self) -> tuple[LinkView, ...]:
        return tuple(link.rendered for link in self.links)

    def activate(self) -> tuple[LinkView, ...]:
        try:
            for link in self.links:
                link.activate()
        except Exception:
            self.deactivate()
            raise
        return self.rendered

    def deactivate(self) -> None:
        for link in self.links:
            link.deactivate()


def footer(store: Store, *, on_update: Callable[[BoundComponent], None] | None = None) -> Footer:
    return Footer(tuple(FilterLink(store, {"filter": f}, on_update=on_update) for f in VisibilityFilter))


class TodoApp:
    """The whole todo application bound to one store.

    Usage::

        with TodoApp(create_todo_store()) as app:
            app.form.rendered.on_add("Buy milk")
            rows = app.todo_list.rendered
    """

    def __init__(
        self,
        store: Store,
        *,
        ids: IdSequence | None = None,
        on_update: Callable[[BoundComponent], None] | None = None,
    ) -> None:
        self.store = store
        self.ids = ids if ids is not None else IdSequence()
        self.form = make_add_todo(self.ids)(store, on_update=on_update)
        self.todo_list = VisibleTodoList(store, on_update=on_update)
        self.footer = footer(store, on_update=on_update)

    def __enter__(self) -> TodoApp:
        self.activate()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.deactivate()

    def activate(self) -> TodoApp:
        try:
            self.form.activate()
            self.todo_list.activate()
            self.footer.activate()
        except Exception:
            self.deactivate()
            raise
        _logger.debug("Activated todo app")
        return self

    def deactivate(self) -> None:
        self.form.deactivate()
        self.todo_list.deactivate()
        self.footer.deactivate()
