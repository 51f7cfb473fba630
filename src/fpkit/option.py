"""
Option type for values that may be absent.

An Option is either `Some(value)` or `Nothing`. Lookups that can miss
(index access, find) return an Option instead of raising, and callers get
the value out with `unwrap_or` or `match`.

The module-level combinators are pipeable:

    pipe(Some(3), unwrap_or(0))          # 3
    pipe(NOTHING, match(str, lambda: "")) # ""

The combinators map and filter shadow builtins, so import the module as
a namespace, `from fpkit import option as O`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .function import dual

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class UnwrapError(ValueError):
    """Raised when unwrap() is called on Nothing."""


class Option(ABC, Generic[T]):
    """Base class shared by Some and Nothing."""

    @abstractmethod
    def is_some(self) -> bool:
        """Check if a value is present."""

    def is_none(self) -> bool:
        """Check if the value is absent."""
        return not self.is_some()

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value, raising UnwrapError when absent."""

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the value, or `default` when absent."""

    @abstractmethod
    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Call `on_some(value)` or `on_none()` and return its result."""

    @abstractmethod
    def map(self, fn: Callable[[T], Optional[U]]) -> "Option[U]":
        """Transform a present value. A None result becomes Nothing."""

    @abstractmethod
    def flat_map(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Chain a function that itself returns an Option."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep a present value only if it satisfies `predicate`."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        ...


@dataclass(frozen=True)
class Some(Option[T]):
    """A present value. Never holds None."""
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some cannot hold None, use Nothing instead")

    def is_some(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        return on_some(self.value)

    def map(self, fn: Callable[[T], Optional[U]]) -> Option[U]:
        return from_nullable(fn(self.value))

    def flat_map(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        result = fn(self.value)
        if not isinstance(result, Option):
            raise TypeError(
                f"flat_map callback must return an Option, got {type(result).__name__}"
            )
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else NOTHING

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Option[Any]):
    """The absent value. There is a single instance, NOTHING."""

    _instance = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise UnwrapError("called unwrap() on Nothing")

    def unwrap_or(self, default: T) -> T:
        return default

    def match(self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:
        return on_none()

    def map(self, fn: Callable[[Any], Any]) -> "Nothing":
        return self

    def flat_map(self, fn: Callable[[Any], Option[Any]]) -> "Nothing":
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> "Nothing":
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()


def some(value: T) -> Option[T]:
    """Wrap a present value."""
    return Some(value)


def nothing() -> Option[Any]:
    """Return the absent value."""
    return NOTHING


def from_nullable(value: Optional[T]) -> Option[T]:
    """Turn None into Nothing and anything else into Some."""
    return NOTHING if value is None else Some(value)


# Pipeable combinators: `unwrap_or(opt, 0)` or `pipe(opt, unwrap_or(0))`.


@dual(2)
def unwrap_or(option: Option[T], default: T) -> T:
    """Return the held value, or `default` when absent."""
    return option.unwrap_or(default)


@dual(3)
def match(option: Option[T], on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
    """Dispatch to exactly one of `on_some(value)` or `on_none()`."""
    return option.match(on_some, on_none)


@dual(2)
def map(option: Option[T], fn: Callable[[T], Optional[U]]) -> Option[U]:
    return option.map(fn)


@dual(2)
def flat_map(option: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    return option.flat_map(fn)


@dual(2)
def filter(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    return option.filter(predicate)


__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "UnwrapError",
    "some",
    "nothing",
    "from_nullable",
    "unwrap_or",
    "match",
    "map",
    "flat_map",
    "filter",
]
