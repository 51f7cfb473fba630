"""
Pure operations over ordered sequences.

Nothing here mutates its input: operations that "change" a sequence return a
new list, and lookups that can miss return an Option. Every operation that
takes an argument besides the sequence can be called data-first or, with the
sequence left out, used as a step in `pipe`:

    any([1, 2, 3], lambda n: n > 2)             # True
    pipe([1, 2, 3], at(5), unwrap_or(0))         # 0

Several names (all, any, map, filter) shadow builtins, so import the
module as a namespace, `from fpkit import array as A`, rather than with
`from fpkit.array import *`.
"""

import builtins
from typing import Callable, List, Sequence, TypeVar

from .function import dual
from .logging import get_logger
from .option import NOTHING, Option, Some, from_nullable

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dual(2)
def all(seq: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    """True if every element satisfies `predicate`. Empty sequences give True."""
    return builtins.all(predicate(item) for item in seq)


@dual(2)
def any(seq: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    """True if at least one element satisfies `predicate`."""
    return builtins.any(predicate(item) for item in seq)


@dual(2)
def append(seq: Sequence[T], item: T) -> List[T]:
    """Return a new list with `item` added at the end."""
    return [*seq, item]


@dual(2)
def prepend(seq: Sequence[T], item: T) -> List[T]:
    """Return a new list with `item` added at the front."""
    return [item, *seq]


@dual(2)
def at(seq: Sequence[T], index: int) -> Option[T]:
    """
    Look up an element by position.

    Negative indexes do not count from the end: anything outside
    `0 <= index < len(seq)` is a miss.

    Args:
        seq: Sequence to read
        index: Zero-based position

    Returns:
        Some(element) when the index is in range, otherwise Nothing.
        An in-range None element also reads as Nothing.
    """
    if 0 <= index < len(seq):
        return from_nullable(seq[index])
    logger.debug(f"at: index {index} outside sequence of length {len(seq)}")
    return NOTHING


def head(seq: Sequence[T]) -> Option[T]:
    """First element, or Nothing for an empty sequence."""
    return at(seq, 0)


def last(seq: Sequence[T]) -> Option[T]:
    """Last element, or Nothing for an empty sequence."""
    return at(seq, len(seq) - 1)


@dual(2)
def concat(seq: Sequence[T], other: Sequence[T]) -> List[T]:
    """Return `seq` followed by `other` as a new list."""
    return [*seq, *other]


def clone(seq: Sequence[T]) -> List[T]:
    """Shallow copy: equal content, distinct list."""
    return list(seq)


@dual(2)
def diff(seq: Sequence[T], subtract: Sequence[T]) -> List[T]:
    """
    Elements of `seq` that do not appear in `subtract`.

    Order and duplicates of `seq` are preserved. Membership is tested by
    equality, so unhashable elements work too.

    Args:
        seq: Sequence to filter
        subtract: Elements to remove

    Returns:
        New list of the remaining elements
    """
    remaining = list(subtract)
    try:
        excluded = set(remaining)
        return [item for item in seq if item not in excluded]
    except TypeError:
        # unhashable elements, fall back to linear membership
        return [item for item in seq if item not in remaining]


@dual(2)
def drop(seq: Sequence[T], count: int) -> Option[List[T]]:
    """
    Skip the first `count` elements.

    Args:
        seq: Sequence to read
        count: Number of leading elements to skip

    Returns:
        Some(tail) for `0 < count < len(seq)`; Some([]) when `count` is zero,
        negative, or covers the whole sequence. Never Nothing.
    """
    if 0 < count < len(seq):
        return Some(list(seq[count:]))
    logger.debug(f"drop: count {count} outside (0, {len(seq)}), returning empty")
    return Some([])


@dual(2)
def take(seq: Sequence[T], count: int) -> List[T]:
    """First `count` elements as a new list. Non-positive counts give []."""
    if count <= 0:
        return []
    return list(seq[:count])


@dual(2)
def find(seq: Sequence[T], predicate: Callable[[T], bool]) -> Option[T]:
    """First element satisfying `predicate`, or Nothing."""
    for item in seq:
        if predicate(item):
            return from_nullable(item)
    return NOTHING


@dual(2)
def map(seq: Sequence[T], fn: Callable[[T], U]) -> List[U]:
    return [fn(item) for item in seq]


@dual(2)
def filter(seq: Sequence[T], predicate: Callable[[T], bool]) -> List[T]:
    return [item for item in seq if predicate(item)]


__all__ = [
    "all",
    "any",
    "append",
    "prepend",
    "at",
    "head",
    "last",
    "concat",
    "clone",
    "diff",
    "drop",
    "take",
    "find",
    "map",
    "filter",
]
