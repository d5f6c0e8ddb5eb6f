"""Bezier curves and the closed loops that own them.

A loop is an arena of curves. Neighbours are resolved by index, so a
curve never holds a reference to another curve or to its loop:
- Curve: the control points of one bezier plus its position in the loop
- Loop: a closed, cyclically ordered sequence of curves
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loopcorner.config.settings import DEGREE_LIMIT
from loopcorner.domain.corner import Corner
from loopcorner.domain.point import Point
from loopcorner.exceptions import CurveNotInLoopError, LoopError

if TYPE_CHECKING:
    from loopcorner.core.corner import CornerCache

PointLike = Point | Sequence[float]


@dataclass(frozen=True, eq=False)
class Curve:
    """A bezier curve on a shape boundary.

    Equality and hashing are by identity so curves can key a cache.

    Attributes:
        ps: Control points (2 for a line, 3 for a quadratic, 4 for a cubic)
        idx: Position of the curve in its loop
        loop_idx: Position of the owning loop in its shape
    """

    ps: tuple[Point, ...]
    idx: int
    loop_idx: int = 0

    @property
    def order(self) -> int:
        """Bezier order (1 = line, 2 = quadratic, 3 = cubic)."""
        return len(self.ps) - 1

    @property
    def start(self) -> Point:
        return self.ps[0]

    @property
    def end(self) -> Point:
        return self.ps[-1]


def _to_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        point = p
    else:
        x, y = p
        point = Point(float(x), float(y))

    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise LoopError(f"Control point {point.to_tuple()} is not finite")
    return point


@dataclass(eq=False)
class Loop:
    """A closed loop of bezier curves tracing one boundary.

    Going forward (``next``) is anti-clockwise around an outer boundary and
    clockwise around a hole. The loop owns the cache of corners at the end
    of each of its curves.

    Attributes:
        curves: Curves in cyclic order; ``curves[i].idx == i``
        angle_tolerance: Cross product threshold for quite-sharp/quite-dull
    """

    curves: list[Curve]
    angle_tolerance: float = DEGREE_LIMIT
    _corners: "CornerCache" = field(init=False, repr=False)

    def __post_init__(self) -> None:
        from loopcorner.core.corner import CornerCache

        if not self.curves:
            raise LoopError("A loop needs at least one curve")

        for i, curve in enumerate(self.curves):
            if curve.idx != i:
                raise LoopError(f"Curve at position {i} has index {curve.idx}")

        self._corners = CornerCache(self.next, angle_tolerance=self.angle_tolerance)

    @classmethod
    def from_beziers(
        cls,
        beziers: Sequence[Sequence[PointLike]],
        loop_idx: int = 0,
        angle_tolerance: float = DEGREE_LIMIT,
    ) -> "Loop":
        """Build a loop from the control points of its curves.

        Args:
            beziers: Control points of each curve, in loop order
            loop_idx: Position of the loop in its shape
            angle_tolerance: Cross product threshold for the corners

        Returns:
            Loop instance

        Raises:
            LoopError: If the loop is empty, a curve has an unsupported
                number of control points, a control point is not finite,
                or the loop is not closed
        """
        curves: list[Curve] = []
        for i, ps in enumerate(beziers):
            if not 2 <= len(ps) <= 4:
                raise LoopError(f"Curve {i} has {len(ps)} control points, expected 2 to 4")
            curves.append(Curve(ps=tuple(_to_point(p) for p in ps), idx=i, loop_idx=loop_idx))

        for i, curve in enumerate(curves):
            following = curves[(i + 1) % len(curves)]
            if curve.end != following.start:
                raise LoopError(
                    f"Loop is not closed: curve {i} ends at {curve.end.to_tuple()} "
                    f"but curve {following.idx} starts at {following.start.to_tuple()}"
                )

        return cls(curves=curves, angle_tolerance=angle_tolerance)

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    def __getitem__(self, idx: int) -> Curve:
        return self.curves[idx]

    def _owned(self, curve: Curve) -> Curve:
        if curve.idx >= len(self.curves) or self.curves[curve.idx] is not curve:
            raise CurveNotInLoopError(curve.idx)
        return curve

    def next(self, curve: Curve) -> Curve:
        """Get the curve that starts where ``curve`` ends."""
        self._owned(curve)
        return self.curves[(curve.idx + 1) % len(self.curves)]

    def prev(self, curve: Curve) -> Curve:
        """Get the curve that ends where ``curve`` starts."""
        self._owned(curve)
        return self.curves[(curve.idx - 1) % len(self.curves)]

    def corner_at_end(self, curve: Curve) -> Corner:
        """Get the (cached) corner between ``curve`` and its successor.

        Raises:
            CurveNotInLoopError: If the curve belongs to another loop
        """
        return self._corners.corner_at_end(self._owned(curve))

    @property
    def beziers(self) -> list[list[tuple[float, float]]]:
        """Control points of every curve as plain tuples."""
        return [[p.to_tuple() for p in curve.ps] for curve in self.curves]
