"""Tests for domain models."""

import pytest

from loopcorner.domain import Corner, Curve, Loop, Point
from loopcorner.exceptions import CurveNotInLoopError, LoopError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_immutable(self) -> None:
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestCurve:
    """Tests for Curve class."""

    def test_order(self) -> None:
        line = Curve(ps=(Point(0, 0), Point(1, 0)), idx=0)
        cubic = Curve(ps=(Point(0, 0), Point(1, 0), Point(2, 1), Point(3, 0)), idx=0)
        assert line.order == 1
        assert cubic.order == 3

    def test_start_and_end(self) -> None:
        curve = Curve(ps=(Point(0, 0), Point(1, 1), Point(2, 0)), idx=0)
        assert curve.start == Point(0, 0)
        assert curve.end == Point(2, 0)

    def test_identity_equality(self) -> None:
        a = Curve(ps=(Point(0, 0), Point(1, 0)), idx=0)
        b = Curve(ps=(Point(0, 0), Point(1, 0)), idx=0)
        assert a != b
        assert len({a, b}) == 2


class TestLoop:
    """Tests for Loop class."""

    def test_from_beziers(self, square_loop) -> None:
        assert len(square_loop) == 4
        assert [curve.idx for curve in square_loop] == [0, 1, 2, 3]
        assert square_loop[1].ps == (Point(10.0, 0.0), Point(10.0, 10.0))

    def test_from_beziers_sets_loop_index(self, square_loop) -> None:
        loop = Loop.from_beziers(square_loop.beziers, loop_idx=3)
        assert all(curve.loop_idx == 3 for curve in loop)

    def test_next_and_prev_wrap_around(self, square_loop) -> None:
        first, last = square_loop[0], square_loop[3]
        assert square_loop.next(last) is first
        assert square_loop.prev(first) is last
        assert square_loop.next(first) is square_loop[1]
        assert square_loop.prev(square_loop[2]) is square_loop[1]

    def test_single_curve_loop_is_its_own_neighbour(self) -> None:
        loop = Loop.from_beziers([[(0, 0), (10, 10), (-10, 10), (0, 0)]])
        assert loop.next(loop[0]) is loop[0]

    def test_beziers_round_trip(self, square_loop) -> None:
        rebuilt = Loop.from_beziers(square_loop.beziers)
        assert rebuilt.beziers == square_loop.beziers

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_point_rejected(self, bad: float) -> None:
        with pytest.raises(LoopError, match="not finite"):
            Loop.from_beziers([[(0, 0), (bad, 0)], [(bad, 0), (0, 0)]])

    def test_open_loop_rejected(self) -> None:
        with pytest.raises(LoopError, match="not closed"):
            Loop.from_beziers([[(0, 0), (10, 0)], [(10, 0), (10, 10)]])

    def test_empty_loop_rejected(self) -> None:
        with pytest.raises(LoopError):
            Loop.from_beziers([])

    def test_unsupported_curve_order_rejected(self) -> None:
        with pytest.raises(LoopError, match="control points"):
            Loop.from_beziers([[(0, 0)]])

    def test_mismatched_indices_rejected(self) -> None:
        curves = [Curve(ps=(Point(0, 0), Point(0, 0)), idx=1)]
        with pytest.raises(LoopError):
            Loop(curves=curves)

    def test_foreign_curve_rejected(self, square_loop) -> None:
        stranger = Curve(ps=(Point(0, 0), Point(10, 0)), idx=0)
        with pytest.raises(CurveNotInLoopError):
            square_loop.next(stranger)


class TestCorner:
    """Tests for Corner class."""

    def _corner(self, **overrides) -> Corner:
        values = {
            "tangents": ((1.0, 0.0), (0.0, 1.0)),
            "cross_tangents": 1.0,
            "is_sharp": False,
            "is_dull": True,
            "is_quite_sharp": False,
            "is_quite_dull": True,
        }
        values.update(overrides)
        return Corner(**values)

    def test_is_degenerate(self) -> None:
        assert not self._corner().is_degenerate
        assert self._corner(is_dull=False, is_quite_dull=False).is_degenerate

    def test_to_dict(self) -> None:
        data = self._corner().to_dict()
        assert data["tangents"] == [[1.0, 0.0], [0.0, 1.0]]
        assert data["is_dull"] is True

    def test_corner_immutable(self) -> None:
        corner = self._corner()
        with pytest.raises(AttributeError):
            corner.is_sharp = True  # type: ignore
