"""Todo list state machine built on the unidux core."""

from unidux.todos.actions import (
    AddTodo,
    IdSequence,
    SetVisibilityFilter,
    TodoActionType,
    ToggleTodo,
    add_todo,
    set_visibility_filter,
    toggle_todo,
    typed_action,
)
from unidux.todos.containers import FilterLink, Footer, TodoApp, VisibleTodoList, footer, make_add_todo
from unidux.todos.models import Todo, VisibilityFilter
from unidux.todos.reducers import create_todo_store, todo, todo_app, todos, visibility_filter
from unidux.todos.selectors import visible_todos

__all__ = [
    "AddTodo",
    "FilterLink",
    "Footer",
    "IdSequence",
    "SetVisibilityFilter",
    "Todo",
    "TodoActionType",
    "TodoApp",
    "ToggleTodo",
    "VisibilityFilter",
    "VisibleTodoList",
    "add_todo",
    "create_todo_store",
    "footer",
    "make_add_todo",
    "set_visibility_filter",
    "todo",
    "todo_app",
    "todos",
    "toggle_todo",
    "typed_action",
    "visibility_filter",
    "visible_todos",
]
