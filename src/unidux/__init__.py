"""unidux - unidirectional state container with a props binding layer."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("unidux")
except PackageNotFoundError:
    __version__ = "0+local"
from unidux.actions import INIT_ACTION_TYPE, Action, coerce_action
from unidux.combine import combine_reducers
from unidux.config import UniduxConfig
from unidux.connect import Binding, BoundComponent, connect, shallow_equal
from unidux.deferred import dispatch_safe, dispatch_soon, dispatch_threadsafe
from unidux.exceptions import (
    InvalidActionError,
    InvalidReducerError,
    ReentrantDispatchError,
    UniduxError,
)
from unidux.store import Store, create_store

__all__ = [
    "__version__",
    "INIT_ACTION_TYPE",
    "Action",
    "Binding",
    "BoundComponent",
    "InvalidActionError",
    "InvalidReducerError",
    "ReentrantDispatchError",
    "Store",
    "UniduxConfig",
    "UniduxError",
    "coerce_action",
    "combine_reducers",
    "connect",
    "create_store",
    "dispatch_safe",
    "dispatch_soon",
    "dispatch_threadsafe",
    "shallow_equal",
]
