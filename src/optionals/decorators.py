"""@early_return: lets ``bail()`` and ``with opt as value`` leave a function early."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from optionals.option import NothingType, Some
from optionals.propagate import Propagate

__all__ = ['early_return']


def _checked(wrapped: Callable[..., Any], result: object) -> Some[Any] | NothingType:
    if not isinstance(result, Some | NothingType):
        raise TypeError(
            f'@early_return function {wrapped.__qualname__}() returned {type(result).__name__}, '
            'expected Some or Nothing'
        )
    return result


async def _awaited(wrapped: Callable[..., Awaitable[object]], args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    try:
        result = await wrapped(*args, **kwargs)
    except Propagate as p:
        return p.value
    return _checked(wrapped, result)


@wrapt.decorator
def early_return(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    """Turn a propagated Nothing into the decorated function's return value.

    Inside the decorated function, ``opt.bail()`` and ``with opt as value:``
    give back the value of a Some. On Nothing they raise Propagate, and the
    function returns Nothing without running the rest of its body.
    Coroutine functions are supported; the check runs on the awaited result.

    Raises:
        TypeError: If the function body returns something that is not an
            Option, such as a bare value or None from a missing return.

    Example:
        ```python
        @early_return
        def greeting(name: Option[str]) -> Option[str]:
            valid_name = name.bail()
            return Some(f'Ahoy, {valid_name}!')

        greeting(Some('Donald'))  # Some(value='Ahoy, Donald!')
        greeting(Nothing)         # Nothing
        ```
    """
    if inspect.iscoroutinefunction(wrapped):
        return _awaited(wrapped, args, kwargs)
    try:
        result = wrapped(*args, **kwargs)
    except Propagate as p:
        return p.value
    return _checked(wrapped, result)
