from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "ActionTypes",
    "is_action",
)


class ActionTypes:
    """Action types reserved by the store.

    Reducers must return the current state for any unknown action, or the
    initial state when the current state is ``None``. Never handle these
    types explicitly.
    """

    INIT = "@@redux/INIT"
    PROBE_UNKNOWN_ACTION = "@@redux/PROBE_UNKNOWN_ACTION"


class Action(BaseModel):
    """A plain data record describing a state transition.

    Extra fields are kept as payload::

        Action(type="todos/add", text="Buy milk").text

    Tagged variants pin the discriminant with a default::

        class AddTodo(Action):
            type: Literal["todos/add"] = "todos/add"
            text: str
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any


def is_action(value: Any) -> bool:
    return isinstance(value, Action)
