"""Converters from fonttools outlines to domain loops.

Glyph outlines are drawn into a RecordingPen and the recorded commands
are turned into closed loops of line, quadratic and cubic curves.
"""

from typing import Any

from fontTools.pens.basePen import (
    decomposeQuadraticSegment,
    decomposeSuperBezierSegment,
)

from loopcorner.config.settings import DEGREE_LIMIT
from loopcorner.domain.curve import Loop

Coord = tuple[float, float]


def _coord(pt: Any) -> Coord:
    return (float(pt[0]), float(pt[1]))


def _midpoint(a: Coord, b: Coord) -> Coord:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


class _LoopBuilder:
    """Accumulates the curves of one contour."""

    def __init__(self, start: Coord) -> None:
        self.start = start
        self.current = start
        self.beziers: list[list[Coord]] = []

    def add(self, *points: Coord) -> None:
        ps = [self.current, *points]
        # Zero-length segments have no tangent
        if all(p == ps[0] for p in ps):
            return
        self.beziers.append(ps)
        self.current = ps[-1]

    def close(self) -> list[list[Coord]]:
        if self.current != self.start:
            self.add(self.start)
        return self.beziers


def recording_to_loops(
    recording: list[tuple[str, tuple[Any, ...]]],
    angle_tolerance: float = DEGREE_LIMIT,
) -> list[Loop]:
    """Convert RecordingPen commands to closed loops.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic, implied on-curve points
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Open contours (ending in endPath) are not shape boundaries and are
    dropped, as are contours that collapse to a point.

    Args:
        recording: List of drawing commands from RecordingPen
        angle_tolerance: Cross product threshold for the loops' corners

    Returns:
        List of Loop objects
    """
    loops: list[Loop] = []
    builder: _LoopBuilder | None = None

    def finish(closed: bool) -> None:
        nonlocal builder
        if builder is not None and closed:
            beziers = builder.close()
            if beziers:
                loops.append(
                    Loop.from_beziers(
                        beziers, loop_idx=len(loops), angle_tolerance=angle_tolerance
                    )
                )
        builder = None

    for command, args in recording:
        if command == "moveTo":
            finish(closed=False)
            builder = _LoopBuilder(_coord(args[0]))

        elif command == "lineTo":
            if builder is not None:
                builder.add(_coord(args[0]))

        elif command == "curveTo":
            if builder is not None:
                pts = [_coord(p) for p in args]
                if len(pts) == 3:
                    builder.add(*pts)
                else:
                    for segment in decomposeSuperBezierSegment(pts):
                        builder.add(*(_coord(p) for p in segment))

        elif command == "qCurveTo":
            if args[-1] is None:
                # Contour made only of off-curve points
                offs = [_coord(p) for p in args[:-1]]
                start = _midpoint(offs[-1], offs[0])
                builder = _LoopBuilder(start)
                pts = [*offs, start]
            else:
                if builder is None:
                    continue
                pts = [_coord(p) for p in args]

            if len(pts) == 1:
                builder.add(pts[0])
                continue
            for off, on in decomposeQuadraticSegment(pts):
                builder.add(_coord(off), _coord(on))

        elif command == "closePath":
            finish(closed=True)

        elif command == "endPath":
            finish(closed=False)

    return loops
