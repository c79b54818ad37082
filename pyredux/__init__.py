from ._action import Action, ActionTypes, is_action
from ._binding import bind_action_creators
from ._compose import compose
from ._config import Settings, configure, get_settings
from ._errors import (
    ConcurrencyError,
    ConfigurationError,
    InvalidActionError,
    InvalidStateError,
    StoreError,
    UsageError
)
from ._middleware import Middleware, MiddlewareAPI, apply_middleware
from ._reducer import Reducer, combine_reducers
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    Observable,
    Store,
    StoreCreator,
    Subscription,
    Unsubscribe,
    create_store
)


__all__ = (
    "Action",
    "ActionTypes",
    "ConcurrencyError",
    "ConfigurationError",
    "Dispatch",
    "Enhancer",
    "InvalidActionError",
    "InvalidStateError",
    "Listener",
    "Middleware",
    "MiddlewareAPI",
    "Observable",
    "Reducer",
    "Settings",
    "Store",
    "StoreCreator",
    "StoreError",
    "Subscription",
    "Unsubscribe",
    "UsageError",

    "apply_middleware",
    "bind_action_creators",
    "combine_reducers",
    "compose",
    "configure",
    "get_settings",
    "is_action",
)
