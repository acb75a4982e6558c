"""Point-in-triangle test using barycentric coordinates."""

from __future__ import annotations

from fixed8.fixed import Fixed
from fixed8.point import Point


def bsp(a: Point, b: Point, c: Point, point: Point) -> bool:
    """Return True if ``point`` lies inside or on the edge of triangle abc.

    Raises ValueError when the three vertices do not span a triangle.
    """
    x1, y1 = a.x, a.y
    x2, y2 = b.x, b.y
    x3, y3 = c.x, c.y
    x, y = point.x, point.y

    denominator = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    try:
        alpha = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / denominator
        beta = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / denominator
    except ZeroDivisionError as exc:
        raise ValueError("the vertices do not form a triangle") from exc
    gamma = Fixed(1.0) - alpha - beta

    zero = Fixed(0.0)
    one = Fixed(1.0)
    return all(zero <= weight <= one for weight in (alpha, beta, gamma))