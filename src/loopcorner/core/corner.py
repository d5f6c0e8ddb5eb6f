"""Corner classification at the joint between consecutive curves.

Key components:
- get_corner: Pure classifier for an incoming and an outgoing curve
- CornerCache: Compute-once mapping from a curve to the corner at its end
- get_corner_at_end: Corner at the end of a curve, cached by its loop

PRECONDITION: control points have a bounded bit-length and are aligned to a
grid with a common exponent, so vectors between control points are exact.
This is not checked here.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from loopcorner.config.settings import DEGREE_LIMIT
from loopcorner.core.orientation import interface_ccw
from loopcorner.core.vector import cross, dot, subtract, to_unit_vector
from loopcorner.domain.corner import Corner
from loopcorner.domain.point import Point
from loopcorner.exceptions import DegenerateCurveError, MissingSuccessorError

if TYPE_CHECKING:
    from loopcorner.domain.curve import Curve, Loop

logger = logging.getLogger(__name__)

Classifier = Callable[..., Corner]


def get_corner(
    ps_in: Sequence[Point],
    ps_out: Sequence[Point],
    angle_tolerance: float = DEGREE_LIMIT,
) -> Corner:
    """Classify the corner where ``ps_in`` ends and ``ps_out`` starts.

    The sharp/dull sign comes from the exact interface predicate. The
    quite-sharp/quite-dull flags compare the cross product of the unit
    tangents against ``angle_tolerance`` when the tangents point the same
    way, and fall back to the exact sign otherwise.

    Args:
        ps_in: Control points of the incoming curve (ends at the corner)
        ps_out: Control points of the outgoing curve (starts at the corner)
        angle_tolerance: Cross product threshold for quite-sharp/quite-dull

    Returns:
        Corner descriptor

    Raises:
        DegenerateCurveError: If a curve has fewer than 2 control points or
            a zero-length tangent at the corner
    """
    if len(ps_in) < 2 or len(ps_out) < 2:
        raise DegenerateCurveError("a curve needs at least 2 control points")

    ccw = interface_ccw(ps_in, ps_out)
    is_sharp = ccw < 0
    is_dull = ccw > 0

    tangent_at_end = subtract(ps_in[-1], ps_in[-2])
    tangent_at_start = subtract(ps_out[1], ps_out[0])

    # Square roots: not exact
    tangents = (to_unit_vector(tangent_at_end), to_unit_vector(tangent_at_start))
    cross_tangents = cross(tangents[0], tangents[1])

    if dot(tangent_at_end, tangent_at_start) > 0:
        # Curves go in the same direction
        is_quite_sharp = cross_tangents < -angle_tolerance
        is_quite_dull = cross_tangents > angle_tolerance
    else:
        is_quite_sharp = is_sharp
        is_quite_dull = is_dull

    return Corner(
        tangents=tangents,
        cross_tangents=cross_tangents,
        is_sharp=is_sharp,
        is_dull=is_dull,
        is_quite_sharp=is_quite_sharp,
        is_quite_dull=is_quite_dull,
    )


class CornerCache:
    """Corners at the end of curves, computed once per curve.

    Curves hash by identity, so two curves with equal control points
    are cached separately. The successor of a curve is found through
    the injected ``successor`` lookup, normally ``Loop.next``. Entries live
    as long as the cache; callers must not change a curve's control points
    or successor while it is cached, or must ``invalidate`` it.

    Example:
        cache = CornerCache(loop.next)
        corner = cache.corner_at_end(loop[0])
    """

    def __init__(
        self,
        successor: Callable[["Curve"], "Curve | None"],
        classify: Classifier = get_corner,
        angle_tolerance: float = DEGREE_LIMIT,
    ) -> None:
        """Initialize the cache.

        Args:
            successor: Returns the curve that starts where a curve ends
            classify: Corner classifier taking (ps_in, ps_out, angle_tolerance)
            angle_tolerance: Cross product threshold passed to ``classify``
        """
        self._successor = successor
        self._classify = classify
        self._angle_tolerance = angle_tolerance
        self._corners: dict["Curve", Corner] = {}
        self._lock = threading.Lock()

    def corner_at_end(self, curve: "Curve") -> Corner:
        """Get the corner between ``curve`` and its successor.

        Args:
            curve: Curve whose end forms the corner

        Returns:
            Cached or freshly classified corner

        Raises:
            MissingSuccessorError: If the successor lookup returns None
        """
        with self._lock:
            cached = self._corners.get(curve)
            if cached is not None:
                return cached

            following = self._successor(curve)
            if following is None:
                raise MissingSuccessorError(curve.idx)

            corner = self._classify(curve.ps, following.ps, self._angle_tolerance)
            self._corners[curve] = corner
            logger.debug(
                "Corner classified (loop=%d, curve=%d, sharp=%s, dull=%s)",
                curve.loop_idx, curve.idx, corner.is_sharp, corner.is_dull
            )
            return corner

    def invalidate(self, curve: "Curve | None" = None) -> None:
        """Drop the cached corner of ``curve``, or every corner if None."""
        with self._lock:
            if curve is None:
                self._corners.clear()
            else:
                self._corners.pop(curve, None)

    def __contains__(self, curve: object) -> bool:
        return curve in self._corners

    def __len__(self) -> int:
        return len(self._corners)


def get_corner_at_end(loop: "Loop", curve: "Curve") -> Corner:
    """Get the corner at the end of ``curve`` (at t = 1) and the start of
    the next curve in ``loop`` (at t = 0).
    """
    return loop.corner_at_end(curve)
