"""2D vector primitives.

Vectors are plain ``(x, y)`` tuples. Subtraction, dot and cross products
are exact whenever the inputs satisfy the bit-length precondition of the
control points; ``to_unit_vector`` uses a square root and is not.
"""

import math

from loopcorner.domain.point import Point
from loopcorner.exceptions import DegenerateCurveError

Vector = tuple[float, float]


def subtract(p: Point, q: Point) -> Vector:
    """Vector from ``q`` to ``p``.

    Examples:
        >>> subtract(Point(3.0, 4.0), Point(1.0, 1.0))
        (2.0, 3.0)
    """
    return (p.x - q.x, p.y - q.y)


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vector, b: Vector) -> float:
    """Signed cross product; positive when ``b`` is anti-clockwise from ``a``.

    Examples:
        >>> cross((1.0, 0.0), (0.0, 1.0))
        1.0
    """
    return a[0] * b[1] - a[1] * b[0]


def length(v: Vector) -> float:
    return math.hypot(v[0], v[1])


def to_unit_vector(v: Vector) -> Vector:
    """Scale a vector to length 1.

    Args:
        v: Vector to normalize

    Returns:
        Unit vector in the direction of ``v``

    Raises:
        DegenerateCurveError: If ``v`` has zero length
    """
    size = length(v)
    if size == 0.0:
        raise DegenerateCurveError("zero-length tangent cannot be normalized")
    return (v[0] / size, v[1] / size)
