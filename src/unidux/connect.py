"""Binding layer between a store and presentation consumers.

A presentation consumer is any callable taking a props mapping and
returning its rendered output; the core never looks at that output.
Binding happens in two explicit stages::

    binding = connect(todo_list_state, todo_list_dispatch)   # reusable binding
    VisibleTodoList = binding.bind(todo_list)                # bound consumer type

    view = VisibleTodoList(store, {"title": "Todos"})
    view.activate()      # subscribe + first render
    ...
    view.deactivate()    # unsubscribe

The store is always handed to the bound consumer's constructor; there is
no ambient lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar

from unidux.store import Store, Unsubscribe

_logger = logging.getLogger(__name__)

Props = Mapping[str, Any]
Dispatch = Callable[[Any], Any]
MapStateToProps = Callable[[Any, Props], Props]
MapDispatchToProps = Callable[[Dispatch, Props], Props]
Component = Callable[[Props], Any]


def shallow_equal(left: Props, right: Props) -> bool:
    """Field-by-field comparison: same keys, each value identical or equal."""
    if left is right:
        return True
    if left.keys() != right.keys():
        return False
    for key, value in left.items():
        other = right[key]
        if value is not other and value != other:
            return False
    return True


def _component_class_name(component: Component) -> str:
    name = getattr(component, "__name__", None) or type(component).__name__
    return "Connected" + "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def _require_mapping(value: Any, producer: str) -> Props:
    if not isinstance(value, Mapping):
        raise TypeError(f"{producer} must return a mapping, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Binding:
    """Reusable binding configuration produced by :func:`connect`."""

    map_state_to_props: MapStateToProps | None = None
    map_dispatch_to_props: MapDispatchToProps | None = None
    skip_equal_props: bool = False

    def __post_init__(self) -> None:
        for name in ("map_state_to_props", "map_dispatch_to_props"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise TypeError(f"{name} must be callable or None, got {type(value).__name__}")

    def bind(self, component: Component) -> type[BoundComponent]:
        """Create a bound consumer type wrapping *component*."""
        if not callable(component):
            raise TypeError(f"component must be callable, got {type(component).__name__}")
        name = _component_class_name(component)
        return type(
            name,
            (BoundComponent,),
            {
                "binding": self,
                "component": staticmethod(component),
                "__doc__": f"{getattr(component, '__name__', name)} bound to store state.",
            },
        )

    def __call__(self, component: Component) -> type[BoundComponent]:
        return self.bind(component)


def connect(
    map_state_to_props: MapStateToProps | None = None,
    map_dispatch_to_props: MapDispatchToProps | None = None,
    *,
    skip_equal_props: bool = False,
) -> Binding:
    """Configure a binding.

    Parameters
    ----------
    map_state_to_props
        ``(state, own_props) -> mapping``.  When omitted the bound consumer
        does not subscribe to the store.
    map_dispatch_to_props
        ``(dispatch, own_props) -> mapping`` of handlers.  When omitted the
        consumer receives ``dispatch`` itself.
    skip_equal_props
        Skip re-rendering on a store change when the freshly selected state
        props are shallowly equal to the previous ones.
    """
    return Binding(map_state_to_props, map_dispatch_to_props, skip_equal_props)


class BoundComponent:
    """A presentation consumer kept in sync with a store.

    Subclasses are created by :meth:`Binding.bind`; instantiate those with
    the store and the parent-supplied ``own_props``.
    """

    binding: ClassVar[Binding]
    component: ClassVar[Component]

    def __init__(
        self,
        store: Store,
        own_props: Props | None = None,
        *,
        on_update: Callable[[BoundComponent], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if not hasattr(type(self), "binding"):
            raise TypeError("BoundComponent cannot be used directly; build one with connect(...).bind(component)")
        self._store = store
        self._own_props: Props = MappingProxyType(dict(own_props or {}))
        self._on_update = on_update
        self._logger = logger or _logger
        self._unsubscribe: Unsubscribe | None = None
        self._active = False
        self._state_props: Props | None = None
        self._props: Props | None = None
        self._rendered: Any = None
        self._render_count = 0

    def __enter__(self) -> BoundComponent:
        self.activate()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.deactivate()

    @property
    def store(self) -> Store:
        return self._store

    @property
    def own_props(self) -> Props:
        return self._own_props

    @property
    def props(self) -> Props | None:
        """Derived props used by the last render."""
        return self._props

    @property
    def rendered(self) -> Any:
        """Output of the last render."""
        return self._rendered

    @property
    def render_count(self) -> int:
        return self._render_count

    @property
    def active(self) -> bool:
        return self._active

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> Any:
        """Subscribe (when selecting state) and render for the first time.

        Later calls are no-ops returning the current output.
        """
        if self._active:
            return self._rendered
        if self.binding.map_state_to_props is not None:
            self._unsubscribe = self._store.subscribe(self.on_store_change)
        self._active = True
        self._logger.debug("Activated %s", type(self).__name__)
        try:
            self._state_props, self._props = self._derive()
            return self.render()
        except Exception:
            self.deactivate()
            raise

    def deactivate(self) -> None:
        """Release the store subscription; safe to call at any time."""
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        was_active, self._active = self._active, False
        if unsubscribe is not None:
            unsubscribe()
        if was_active:
            self._logger.debug("Deactivated %s", type(self).__name__)

    def on_store_change(self) -> None:
        """Store listener: recompute derived props and re-render."""
        if not self._active:
            return
        state_props, props = self._derive()
        if (
            self.binding.skip_equal_props
            and self._state_props is not None
            and shallow_equal(self._state_props, state_props)
        ):
            self._logger.debug("Skipped re-render of %s; selected props unchanged", type(self).__name__)
            return
        self._state_props, self._props = state_props, props
        self.render()

    def set_own_props(self, own_props: Props) -> None:
        """Replace the parent-supplied props; re-renders when active."""
        self._own_props = MappingProxyType(dict(own_props))
        if self._active:
            self._state_props, self._props = self._derive()
            self.render()

    # ------------------------------------------------------------------
    # Derivation and rendering
    # ------------------------------------------------------------------

    def compute_props(self) -> Props:
        """Merge own props, selected state props and dispatch props."""
        return self._derive()[1]

    def render(self) -> Any:
        """Call the presentation consumer with the current derived props."""
        if self._props is None:
            self._state_props, self._props = self._derive()
        self._rendered = type(self).component(self._props)
        self._render_count += 1
        if self._on_update is not None:
            self._on_update(self)
        return self._rendered

    def _derive(self) -> tuple[Props, Props]:
        binding = self.binding
        own_props = self._own_props

        state_props: Props = {}
        if binding.map_state_to_props is not None:
            state_props = _require_mapping(
                binding.map_state_to_props(self._store.get_state(), own_props),
                "map_state_to_props",
            )

        dispatch_props: Props
        if binding.map_dispatch_to_props is not None:
            dispatch_props = _require_mapping(
                binding.map_dispatch_to_props(self._store.dispatch, own_props),
                "map_dispatch_to_props",
            )
        else:
            dispatch_props = {"dispatch": self._store.dispatch}

        return state_props, {**own_props, **state_props, **dispatch_props}
