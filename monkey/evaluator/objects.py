"""
Runtime values produced by the Monkey evaluator.

Values form a closed union: Integer, Boolean, Null and the transient
ReturnValue wrapper. They are immutable and compared by value.

Author: xwest
"""

from dataclasses import dataclass
from typing import Union

DEFAULT_NULL_SENTINEL = "nil"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def wrap_int64(value: int) -> int:
    """Wrap an arbitrary Python int to signed 64-bit two's complement."""
    return ((value - INT64_MIN) % (2 ** 64)) + INT64_MIN


@dataclass(frozen=True)
class Integer:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null:
    """Absence of a useful value, e.g. a false ``if`` with no ``else``."""

    def __str__(self) -> str:
        return DEFAULT_NULL_SENTINEL


@dataclass(frozen=True)
class ReturnValue:
    """
    Carries an in-flight ``return`` out through nested blocks.

    Only ``eval_program`` unwraps it; it must never be shown to a user.
    """
    value: 'Object'

    def __str__(self) -> str:
        return str(self.value)


Object = Union[Integer, Boolean, Null, ReturnValue]

NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def is_truthy(obj: Object) -> bool:
    """
    Truthiness rule used by ``if``.

    Integers are always truthy, Booleans are their own value, Null is
    falsy and anything else is truthy.
    """
    if isinstance(obj, Boolean):
        return obj.value
    if isinstance(obj, Null):
        return False
    return True


def inspect(obj: Object, null_sentinel: str = DEFAULT_NULL_SENTINEL) -> str:
    """Render a value for display."""
    if isinstance(obj, ReturnValue):
        return inspect(obj.value, null_sentinel)
    if isinstance(obj, Null):
        return null_sentinel
    return str(obj)
