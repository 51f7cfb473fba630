"""fpkit: pure sequence helpers, an Option type and pipe-style composition."""

from . import array, option
from .config import Settings
from .function import dual, flow, identity, pipe
from .option import NOTHING, Nothing, Option, Some, UnwrapError, from_nullable

__all__ = [
    "array",
    "option",
    "Settings",
    "pipe",
    "flow",
    "dual",
    "identity",
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "UnwrapError",
    "from_nullable",
]
