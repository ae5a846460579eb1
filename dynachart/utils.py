"""General utility functions"""

import math
from typing import Any, Callable, Optional, Type, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")
D = TypeVar("D")

Number = Union[int, float]


# Monadic stuff !
def none_or(c: Callable[[A], B], e: Optional[A]) -> Optional[B]:
    if e is None:
        return None
    else:
        return c(e)


def coerce_or_default(
    raw: Any, target_type: Type[Number], default: D
) -> Union[Number, D]:
    """Read raw as a number of the given type (int or float), falls back to
    default instead of failing.

    Numbers are returned as-is, except integers read as floats which are
    converted, strings are parsed with target_type.
    Booleans, NaNs, infinities, unparseable strings and anything else give
    back the default"""
    if isinstance(raw, bool):
        return default
    elif isinstance(raw, (int, float)):
        value: Number = raw
        if target_type is float:
            try:
                value = float(raw)
            except OverflowError:
                return default
    elif isinstance(raw, str):
        try:
            value = target_type(raw.strip())
        except ValueError:
            return default
    else:
        return default

    if isinstance(value, float) and not math.isfinite(value):
        return default

    return value


def round_half_up(value: float) -> int:
    """Round .5 towards positive infinity instead of to the nearest even
    number like the round builtin does"""
    return math.floor(value + 0.5)
