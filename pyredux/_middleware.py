from __future__ import annotations

import logging

from typing import Any, Callable, Optional, TypeVar

from ._action import Action
from ._compose import compose
from ._reducer import Reducer
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    Observable,
    Store,
    StoreCreator,
    Unsubscribe
)


__all__ = (
    "Middleware",
    "MiddlewareAPI",

    "apply_middleware",
)


A = TypeVar("A", bound=Action)
S = TypeVar("S")


_logger = logging.getLogger(__name__)


class MiddlewareAPI:
    __slots__ = ("_get_state", "_dispatch")

    def __init__(
        self,
        get_state: Callable[[], Any],
        dispatch: Dispatch
    ) -> None:
        self._get_state = get_state
        self._dispatch = dispatch

    def get_state(self) -> Any:
        return self._get_state()

    def dispatch(self, action: Any) -> Any:
        return self._dispatch(action)


Middleware = Callable[[MiddlewareAPI], Callable[[Dispatch], Dispatch]]


def apply_middleware(*middleware: Middleware) -> Enhancer:
    """Create a store enhancer applying middleware to ``dispatch``.

    Each middleware has the form ``middleware(api)(next_dispatch)(action)``
    where ``api`` exposes ``get_state`` and ``dispatch``. ``api.dispatch``
    goes through the whole chain, ``next_dispatch`` only through the rest
    of it. Because middleware may be asynchronous, this should be the
    first enhancer in a composition chain.
    """

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create(
            reducer: Reducer[S, A],
            preloaded_state: Optional[S] = None
        ) -> Store[S, A]:
            original_store = create_store(reducer, preloaded_state)
            enhanced_dispatch: Dispatch = original_store.dispatch

            api = MiddlewareAPI(
                original_store.get_state,
                lambda action: enhanced_dispatch(action)
            )

            chain = [layer(api) for layer in middleware]
            enhanced_dispatch = compose(*chain)(original_store.dispatch)

            _logger.debug("Applied %d middleware", len(chain))

            class EnhancedStore(Store[S, A]):
                def dispatch(self, action: A) -> Any:
                    return enhanced_dispatch(action)

                def get_state(self) -> S:
                    return original_store.get_state()

                def subscribe(self, listener: Listener) -> Unsubscribe:
                    return original_store.subscribe(listener)

                def replace_reducer(self, next_reducer: Reducer[S, A]) -> None:
                    original_store.replace_reducer(next_reducer)

                def observable(self) -> Observable[S]:
                    return original_store.observable()

            return EnhancedStore()

        return create

    return enhancer
