"""An immutable two-dimensional point with fixed-point coordinates."""

from __future__ import annotations

from typing import Union

from fixed8.fixed import Fixed

Coordinate = Union[Fixed, int, float]


def _as_fixed(value: Coordinate) -> Fixed:
    if isinstance(value, Fixed):
        return Fixed(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"cannot use {type(value).__name__} as a coordinate")
    return Fixed(float(value))


class Point:
    """A point whose coordinates cannot change after construction."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: Coordinate = 0, y: Coordinate = 0) -> None:
        self._x = _as_fixed(x)
        self._y = _as_fixed(y)

    @property
    def x(self) -> Fixed:
        """A copy of the horizontal coordinate."""
        return Fixed(self._x)

    @property
    def y(self) -> Fixed:
        """A copy of the vertical coordinate."""
        return Fixed(self._y)

    def __repr__(self) -> str:
        return f"Point({self._x}, {self._y})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x.raw, self._y.raw))