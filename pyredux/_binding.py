from __future__ import annotations

from typing import Any, Callable, Mapping, Union

from ._errors import UsageError
from ._store import Dispatch


__all__ = (
    "bind_action_creators",
)


ActionCreator = Callable[..., Any]


def _bind_action_creator(
    action_creator: ActionCreator,
    dispatch: Dispatch
) -> ActionCreator:
    def bound(*args: Any, **kwargs: Any) -> Any:
        return dispatch(action_creator(*args, **kwargs))

    return bound


def bind_action_creators(
    action_creators: Union[ActionCreator, Mapping[str, Any]],
    dispatch: Dispatch
) -> Union[ActionCreator, dict[str, ActionCreator]]:
    """Wrap action creators so that calling them dispatches their result.

    A single callable gives back a single callable. A mapping gives back a
    dict with the same keys, keeping only the callable values.
    """

    if callable(action_creators):
        return _bind_action_creator(action_creators, dispatch)

    if not isinstance(action_creators, Mapping):
        raise UsageError(
            "bind_action_creators expected a mapping or a callable, "
            f"instead received {type(action_creators).__name__}."
        )

    return {
        key: _bind_action_creator(action_creator, dispatch)
        for key, action_creator in action_creators.items()
        if callable(action_creator)
    }
