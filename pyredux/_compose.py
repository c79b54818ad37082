from __future__ import annotations

from functools import reduce
from typing import Any, Callable


__all__ = (
    "compose",
)


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose single-argument functions from right to left.

    The rightmost function may take any arguments, as it provides the
    signature of the result: ``compose(f, g, h)(*args)`` is
    ``f(g(h(*args)))``. With no functions the identity is returned, with
    one that very function.
    """

    if not funcs:
        return lambda arg: arg

    if len(funcs) == 1:
        return funcs[0]

    last = funcs[-1]
    rest = funcs[:-1]

    def composed(*args: Any, **kwargs: Any) -> Any:
        return reduce(
            lambda value, func: func(value),
            reversed(rest),
            last(*args, **kwargs)
        )

    return composed
