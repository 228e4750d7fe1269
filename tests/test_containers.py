"""Bound todo containers driven end to end through a store."""

from __future__ import annotations

import pytest

from unidux.store import Store
from unidux.todos import (
    FilterLink,
    IdSequence,
    TodoApp,
    VisibilityFilter,
    VisibleTodoList,
    create_todo_store,
    footer,
    make_add_todo,
)
from unidux.todos.containers import AddTodoForm, LinkView, TodoRow


@pytest.fixture
def store() -> Store:
    return create_todo_store()


def test_add_form_list_and_toggle_round_trip(store: Store) -> None:
    ids = IdSequence()
    form = make_add_todo(ids)(store)
    todo_list = VisibleTodoList(store)
    form.activate()
    todo_list.activate()

    assert isinstance(form.rendered, AddTodoForm)
    assert todo_list.rendered == ()

    form.rendered.on_add("Buy milk")
    form.rendered.on_add("Walk dog")

    rows = todo_list.rendered
    assert [row.text for row in rows] == ["Buy milk", "Walk dog"]
    assert all(isinstance(row, TodoRow) for row in rows)

    rows[0].on_click()

    assert [(row.id, row.completed) for row in todo_list.rendered] == [(0, True), (1, False)]
    # The form never subscribes, so it rendered only once.
    assert form.render_count == 1
    assert store.listener_count == 1


def test_filter_links_drive_visible_list(store: Store) -> None:
    ids = IdSequence()
    form = make_add_todo(ids)(store)
    form.activate()
    form.rendered.on_add("Buy milk")
    form.rendered.on_add("Walk dog")
    store.dispatch({"type": "TOGGLE_TODO", "id": 0})

    links = {f: FilterLink(store, {"filter": f}) for f in VisibilityFilter}
    for link in links.values():
        link.activate()
    todo_list = VisibleTodoList(store)
    todo_list.activate()

    all_link = links[VisibilityFilter.SHOW_ALL].rendered
    assert isinstance(all_link, LinkView)
    assert all_link.active is True
    assert all_link.on_click is None
    assert all_link.label == "All"

    active_link = links[VisibilityFilter.SHOW_ACTIVE].rendered
    assert active_link.active is False
    active_link.on_click()

    assert store.get_state()["visibility_filter"] == VisibilityFilter.SHOW_ACTIVE
    assert links[VisibilityFilter.SHOW_ACTIVE].rendered.active is True
    assert links[VisibilityFilter.SHOW_ALL].rendered.active is False
    assert [row.id for row in todo_list.rendered] == [1]


def test_filter_link_label_from_own_props(store: Store) -> None:
    link = FilterLink(store, {"filter": VisibilityFilter.SHOW_COMPLETED, "label": "Done"})
    assert link.activate().label == "Done"


def test_deactivated_containers_stop_tracking(store: Store) -> None:
    todo_list = VisibleTodoList(store)
    todo_list.activate()
    todo_list.deactivate()

    store.dispatch({"type": "ADD_TODO", "id": 0, "text": "Buy milk"})

    assert todo_list.rendered == ()
    assert store.listener_count == 0


def test_footer_links_follow_filter_order(store: Store) -> None:
    row = footer(store)
    links = row.activate()

    assert [link.label for link in links] == ["All", "Active", "Completed"]
    assert [link.active for link in links] == [True, False, False]
    assert store.listener_count == 3

    links[2].on_click()

    assert [link.active for link in row.rendered] == [False, False, True]

    row.deactivate()
    assert store.listener_count == 0


def test_todo_app_wires_form_list_and_footer(store: Store) -> None:
    with TodoApp(store) as app:
        app.form.rendered.on_add("Buy milk")
        app.form.rendered.on_add("Walk dog")
        app.todo_list.rendered[0].on_click()
        app.footer.rendered[1].on_click()

        assert [row.text for row in app.todo_list.rendered] == ["Walk dog"]
        assert [link.active for link in app.footer.rendered] == [False, True, False]
        assert app.ids.peek == 2

    assert store.listener_count == 0


def test_todo_app_rolls_back_failed_activation() -> None:
    store = create_todo_store({"todos": (), "visibility_filter": "SHOW_SOME"})
    app = TodoApp(store, ids=IdSequence(start=5))

    with pytest.raises(ValueError):
        app.activate()

    assert store.listener_count == 0
    assert not app.form.active
    assert not app.todo_list.active
