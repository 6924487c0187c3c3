"""
Distance values that are either a finite integer or infinity.

Shortest-path tables store a Distance per vertex. An unreachable vertex has
an infinite distance, which is a first-class value rather than a sentinel:
it compares greater than every finite distance, absorbs addition, and
refuses to produce a numeric value.

Example:
    >>> Distance(3) + 4
    Distance(7)
    >>> Distance.infinite() + Distance(-10)
    Distance.infinite()
    >>> Distance(10**6) < INF
    True
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Tuple, Union

from .exceptions import InfiniteValueAccess


def _check_integral(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Distance requires an integer value, got {type(value).__name__}: {value!r}")
    return int(value)


@dataclass(frozen=True, eq=False)
class Distance:
    """
    Immutable tagged value: ``Finite(int)`` or ``Infinite``.

    Use ``Distance(n)`` / ``Distance.finite(n)`` for finite values and
    ``Distance.infinite()`` (or the module constant ``INF``) for infinity.
    Plain ints mix freely with Distances in comparisons and sums.

    Attributes:
        _value: Integer payload; meaningless (0) when infinite.
        _infinite: Tag selecting the infinite variant.
    """

    _value: int
    _infinite: bool = False

    def __post_init__(self) -> None:
        """Normalize the payload to a plain int."""
        if self._infinite:
            object.__setattr__(self, "_value", 0)
        else:
            object.__setattr__(self, "_value", _check_integral(self._value))

    @classmethod
    def finite(cls, value: int) -> "Distance":
        """Return a finite distance holding ``value``."""
        return cls(value)

    @classmethod
    def infinite(cls) -> "Distance":
        """Return the infinite distance."""
        return cls(0, True)

    def is_infinite(self) -> bool:
        return self._infinite

    def is_finite(self) -> bool:
        return not self._infinite

    def value(self) -> int:
        """
        Return the integer payload.

        Raises:
            InfiniteValueAccess: If the distance is infinite.
        """
        if self._infinite:
            raise InfiniteValueAccess("bad distance access: distance is infinite")
        return self._value

    # Ordering: infinity is the unique maximum.

    def _key(self) -> Tuple[int, int]:
        return (1, 0) if self._infinite else (0, self._value)

    @staticmethod
    def _coerce(other: object) -> "Distance | None":
        if isinstance(other, Distance):
            return other
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return Distance(other)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._key() == rhs._key()

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._key() < rhs._key()

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._key() <= rhs._key()

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._key() > rhs._key()

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._key() >= rhs._key()

    def __hash__(self) -> int:
        # Finite distances hash like the int they compare equal to.
        return hash(math.inf) if self._infinite else hash(self._value)

    # Arithmetic: infinity absorbs.

    def __add__(self, other: Union["Distance", int]) -> "Distance":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self._infinite or rhs._infinite:
            return INF
        return Distance(self._value + rhs._value)

    __radd__ = __add__

    def __float__(self) -> float:
        return math.inf if self._infinite else float(self._value)

    def __repr__(self) -> str:
        if self._infinite:
            return "Distance.infinite()"
        return f"Distance({self._value})"

    def __str__(self) -> str:
        return "inf" if self._infinite else str(self._value)


INF = Distance.infinite()

__all__ = ["Distance", "INF"]
