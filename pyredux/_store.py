from __future__ import annotations

import logging

from typing import (
    Any,
    Callable,
    Generic,
    Mapping,
    Optional,
    TypeVar
)

from ._action import Action, ActionTypes, is_action
from ._errors import (
    ConcurrencyError,
    ConfigurationError,
    InvalidActionError,
    InvalidStateError,
    UsageError
)
from ._reducer import Reducer


__all__ = (
    "Dispatch",
    "Enhancer",
    "Listener",
    "Observable",
    "Store",
    "StoreCreator",
    "Subscription",
    "Unsubscribe",

    "create_store",
)


A = TypeVar("A", bound=Action)
S = TypeVar("S")


_logger = logging.getLogger(__name__)


Dispatch = Callable[[A], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class Subscription:
    __slots__ = ("_unsubscribe",)

    def __init__(self, unsubscribe: Unsubscribe) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


class Observable(Generic[S]):
    """Minimal observable of the store's state.

    An observer is any object, or mapping, with an optional ``next``
    callable. It receives the current state on subscription and the new
    state after every dispatch.
    """

    __slots__ = ("_store",)

    def __init__(self, store: Store[S, Any]) -> None:
        self._store = store

    def subscribe(self, observer: Any) -> Subscription:
        if observer is None or callable(observer) or \
                isinstance(observer, (str, bytes, int, float)):
            raise UsageError("Expected the observer to be an object.")

        def observe_state() -> None:
            if isinstance(observer, Mapping):
                on_next = observer.get("next")
            else:
                on_next = getattr(observer, "next", None)

            if on_next is not None:
                on_next(self._store.get_state())

        observe_state()

        return Subscription(self._store.subscribe(observe_state))

    def observable(self) -> Observable[S]:
        return self


class Store(Generic[S, A]):
    def dispatch(self, action: A) -> Any:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def replace_reducer(self, next_reducer: Reducer[S, A]) -> None:
        raise NotImplementedError

    def observable(self) -> Observable[S]:
        raise NotImplementedError


StoreCreator = Callable[..., Store[S, A]]
Enhancer = Callable[[StoreCreator], StoreCreator]


class _DefaultStore(Store[S, A]):
    _reducer: Reducer[S, A]
    _state: Optional[S]

    _current_listeners: list[Listener]
    _next_listeners: list[Listener]

    _is_dispatching: bool

    def __init__(
        self,
        reducer: Reducer[S, A],
        preloaded_state: Optional[S] = None
    ) -> None:
        self._reducer = reducer
        self._state = preloaded_state

        self._current_listeners = []
        self._next_listeners = self._current_listeners

        self._is_dispatching = False

        # Every reducer reports its initial state before the store is
        # handed out.
        self._init()

    def _init(self) -> None:
        _logger.debug("Dispatching %s", ActionTypes.INIT)

        self.dispatch(Action(type=ActionTypes.INIT))

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = self._current_listeners.copy()

    def get_state(self) -> S:
        return self._state  # type: ignore[return-value]

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Add a change listener, called after every dispatch.

        Listeners are snapshotted when a dispatch starts: subscribing or
        unsubscribing while listeners run only affects the next dispatch,
        nested or not.
        """

        if not callable(listener):
            raise UsageError("Expected listener to be a callable.")

        is_subscribed = True

        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed

            if not is_subscribed:
                return

            is_subscribed = False

            self._ensure_can_mutate_next_listeners()
            self._next_listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: A) -> A:
        if not is_action(action):
            raise InvalidActionError(
                f"Actions must be Action instances, got "
                f"{type(action).__name__}. Use custom middleware for async "
                "actions."
            )

        if getattr(action, "type", None) is None:
            raise InvalidActionError(
                "Actions may not have a None \"type\" field. Have you "
                "misspelled a constant?"
            )

        if self._is_dispatching:
            raise ConcurrencyError("Reducers may not dispatch actions.")

        # Subscriptions made from here on only affect the next dispatch.
        listeners = self._current_listeners = self._next_listeners

        try:
            self._is_dispatching = True
            next_state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        if next_state is None:
            raise InvalidStateError(
                f"Given action \"{action.type}\", the reducer returned None. "
                "To ignore an action, you must explicitly return the "
                "previous state."
            )

        self._state = next_state

        for listener in listeners:
            listener()

        return action

    def replace_reducer(self, next_reducer: Reducer[S, A]) -> None:
        if not callable(next_reducer):
            raise ConfigurationError(
                "Expected the next_reducer to be a callable."
            )

        _logger.debug("Replacing reducer with %r", next_reducer)

        self._reducer = next_reducer
        self._init()

    def observable(self) -> Observable[S]:
        return Observable(self)


def create_store(
    reducer: Reducer[S, A],
    preloaded_state: Optional[S] = None,
    enhancer: Optional[Enhancer] = None
) -> Store[S, A]:
    """Create a store holding the state tree.

    The only way to change the state is to ``dispatch`` an action. The
    enhancer, when given, receives this function and gets full control of
    store construction, e.g. ``apply_middleware(...)``. It may also be
    passed in place of ``preloaded_state``.
    """

    if enhancer is None and callable(preloaded_state):
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise ConfigurationError("Expected the enhancer to be a callable.")

        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise ConfigurationError("Expected the reducer to be a callable.")

    return _DefaultStore(reducer, preloaded_state)
