from __future__ import annotations

import logging

from typing import (
    Any,
    Callable,
    Mapping,
    Optional,
    Protocol,
    TypeVar
)

from uuid import uuid4

from ._action import Action, ActionTypes
from ._config import get_settings
from ._errors import ConfigurationError, InvalidStateError


__all__ = (
    "Reducer",

    "combine_reducers",
)


A = TypeVar("A", bound=Action)
S = TypeVar("S")


_logger = logging.getLogger(__name__)


class Reducer(Protocol[S, A]):
    def __call__(self, state: Optional[S], action: A) -> S:
        ...


def _describe_action(action: Action) -> str:
    action_type = getattr(action, "type", None)

    if action_type is None:
        return "an action"

    return f'"{action_type}"'


def _undefined_state_message(key: str, action: Action) -> str:
    return (
        f"Given action {_describe_action(action)}, reducer \"{key}\" "
        "returned None. To ignore an action, you must explicitly return "
        "the previous state."
    )


def _unexpected_state_shape_message(
    state: Any,
    reducers: Mapping[str, Reducer],
    action: Action,
    unexpected_key_cache: set[str]
) -> Optional[str]:
    reducer_keys = list(reducers)
    expected_keys = '", "'.join(reducer_keys)

    if action.type == ActionTypes.INIT:
        argument_name = "preloaded_state argument passed to create_store"
    else:
        argument_name = "previous state received by the reducer"

    if not reducer_keys:
        return (
            "Store does not have a valid reducer. Make sure the argument "
            "passed to combine_reducers is a mapping whose values are "
            "reducers."
        )

    if not isinstance(state, dict):
        return (
            f"The {argument_name} has unexpected type of "
            f"\"{type(state).__name__}\". Expected argument to be a dict "
            f"with the following keys: \"{expected_keys}\""
        )

    unexpected_keys = [
        key for key in state
        if key not in reducers and key not in unexpected_key_cache
    ]

    unexpected_key_cache.update(unexpected_keys)

    if not unexpected_keys:
        return None

    noun = "keys" if len(unexpected_keys) > 1 else "key"
    found = '", "'.join(map(str, unexpected_keys))

    return (
        f"Unexpected {noun} \"{found}\" found in {argument_name}. "
        f"Expected to find one of the known reducer keys instead: "
        f"\"{expected_keys}\". Unexpected keys will be ignored."
    )


def _probe_action_type() -> str:
    return f"{ActionTypes.PROBE_UNKNOWN_ACTION}_{'.'.join(uuid4().hex[:7])}"


def _assert_reducer_sanity(reducers: Mapping[str, Reducer]) -> None:
    for key, reducer in reducers.items():
        initial_state = reducer(None, Action(type=ActionTypes.INIT))

        if initial_state is None:
            raise ConfigurationError(
                f"Reducer \"{key}\" returned None during initialization. "
                "If the state passed to the reducer is None, you must "
                "explicitly return the initial state. The initial state "
                "may not be None."
            )

        if reducer(None, Action(type=_probe_action_type())) is None:
            raise ConfigurationError(
                f"Reducer \"{key}\" returned None when probed with a random "
                f"type. Don't try to handle {ActionTypes.INIT} or other "
                "actions in the \"@@redux/*\" namespace. They are considered "
                "private. Instead, you must return the current state for any "
                "unknown actions, unless it is None, in which case you must "
                "return the initial state, regardless of the action type. "
                "The initial state may not be None."
            )


def combine_reducers(
    reducers: Mapping[str, Optional[Callable[..., Any]]],
    *,
    development: Optional[bool] = None
) -> Reducer[dict[str, Any], Action]:
    """Turn a mapping of reducers into a single reducer.

    The resulting reducer calls every child reducer with the value stored
    under its key and gathers the results into a dict of the same shape.
    When no child changed its slice and the state has no extra keys, the
    input state is returned as is.

    A reducer without an initial state, or one that returns ``None`` for
    unknown actions, is reported the first time the combined reducer runs.
    """

    if development is None:
        development = get_settings().development

    final_reducers: dict[str, Reducer] = {}

    for key, reducer in reducers.items():
        if callable(reducer):
            final_reducers[key] = reducer
        elif development and reducer is None:
            _logger.warning("No reducer provided for key \"%s\"", key)
        elif development:
            _logger.warning(
                "Reducer for key \"%s\" is a %s, not a callable; ignoring it",
                key,
                type(reducer).__name__
            )

    unexpected_key_cache: set[str] = set()
    sanity_error: Optional[ConfigurationError] = None

    try:
        _assert_reducer_sanity(final_reducers)
    except ConfigurationError as error:
        sanity_error = error

    def combination(
        state: Optional[dict[str, Any]],
        action: Action
    ) -> dict[str, Any]:
        if sanity_error is not None:
            raise sanity_error

        if state is None:
            state = {}

        if development:
            message = _unexpected_state_shape_message(
                state,
                final_reducers,
                action,
                unexpected_key_cache
            )

            if message:
                _logger.warning("%s", message)

        has_changed = False
        next_state: dict[str, Any] = {}

        is_mapping = isinstance(state, Mapping)

        for key, reducer in final_reducers.items():
            previous_state_for_key = state.get(key) if is_mapping else None
            next_state_for_key = reducer(previous_state_for_key, action)

            if next_state_for_key is None:
                raise InvalidStateError(_undefined_state_message(key, action))

            next_state[key] = next_state_for_key
            has_changed = has_changed or \
                next_state_for_key is not previous_state_for_key

        # Keys without a reducer are dropped from the shape.
        has_changed = has_changed or not is_mapping or \
            len(state) != len(final_reducers)

        return next_state if has_changed else state

    return combination
