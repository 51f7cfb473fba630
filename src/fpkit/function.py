"""
Function composition helpers.

`pipe` threads a value through a series of unary functions, left to right.
`dual` lets a data-first function also be used data-last, which is the form
`pipe` needs. With `append` declared through `dual(2)`, both of these give
`[1, 2, 3, 4]`:

    pipe([1, 2, 3], append(4))
    append([1, 2, 3], 4)
"""

import functools
from typing import Any, Callable, Optional, TypeVar

from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def identity(value: T) -> T:
    """Return the argument unchanged."""
    return value


def pipe(initial: Any, *fns: Callable[[Any], Any]) -> Any:
    """
    Apply each function to the running result, in order.

    Args:
        initial: Seed value
        *fns: Unary functions applied left to right

    Returns:
        Result of the last function, or `initial` itself when no
        functions are given
    """
    result = initial
    for fn in fns:
        result = fn(result)
    logger.debug(f"pipe applied {len(fns)} stages")
    return result


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right into a single unary function."""
    if not fns:
        return identity

    def flowed(value: Any) -> Any:
        return pipe(value, *fns)

    return flowed


def dual(arity: int, fn: Optional[Callable[..., Any]] = None) -> Callable[..., Any]:
    """
    Make `fn(data, *args)` callable both data-first and data-last.

    Called with `arity` arguments, positional or keyword, the wrapper
    applies `fn` right away. Called with one fewer it returns a function
    waiting for the data argument, ready to be dropped into `pipe`. When
    `fn` is omitted, returns a decorator.

    Args:
        arity: Number of arguments of `fn`, data included
        fn: Function taking the data argument first

    Returns:
        Wrapper accepting either call form

    Raises:
        ValueError: If arity is below 2
        TypeError: If the wrapper is called with any other argument count
    """
    if arity < 2:
        raise ValueError(f"dual needs arity >= 2, got {arity}")

    if fn is None:
        return functools.partial(dual, arity)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        given = len(args) + len(kwargs)
        if given == arity:
            return fn(*args, **kwargs)
        if given == arity - 1:
            return lambda data: fn(data, *args, **kwargs)
        raise TypeError(
            f"{fn.__name__}() takes {arity} or {arity - 1} arguments "
            f"but {given} were given"
        )

    return wrapper
