"""Exact orientation test at the interface of two bezier curves.

The test answers: if the incoming curve were extended past its end point,
would the outgoing curve coincide with it, or bend to its left or right?
All arithmetic is done with ``Fraction`` values built from the float
control points, so the sign of the result is never affected by rounding.

Tangent directions are compared first. When they are parallel the curves
are compared by signed curvature and then by the derivative of curvature
with respect to arc length. Both are rational in the derivatives at the
interface, so no square roots are needed.
"""

from collections.abc import Sequence
from fractions import Fraction

from loopcorner.domain.point import Point
from loopcorner.exceptions import DegenerateCurveError

ExactVector = tuple[Fraction, Fraction]

# Binomial coefficients of the finite differences for derivatives 1..3.
_DIFFERENCES = {
    1: (1, -1),
    2: (1, -2, 1),
    3: (1, -3, 3, -1),
}


def _cross(a: ExactVector, b: ExactVector) -> Fraction:
    return a[0] * b[1] - a[1] * b[0]


def _dot(a: ExactVector, b: ExactVector) -> Fraction:
    return a[0] * b[0] + a[1] * b[1]


def _derivatives(ps: Sequence[Point], at_end: bool) -> list[ExactVector]:
    """First three derivative vectors at ``t = 1`` (``at_end``) or ``t = 0``.

    Derivatives beyond the curve's order are zero vectors.
    """
    n = len(ps) - 1
    if not 1 <= n <= 3:
        raise DegenerateCurveError(f"expected 2 to 4 control points, got {len(ps)}")

    pts = [(Fraction(p.x), Fraction(p.y)) for p in ps]
    derivs: list[ExactVector] = []
    falling = 1
    for k in (1, 2, 3):
        if k > n:
            derivs.append((Fraction(0), Fraction(0)))
            continue

        falling *= n - k + 1
        coeffs = _DIFFERENCES[k]
        if at_end:
            window = [pts[n - i] for i in range(k + 1)]
        else:
            window = [pts[k - i] for i in range(k + 1)]
        x = sum((c * p[0] for c, p in zip(coeffs, window, strict=True)), Fraction(0))
        y = sum((c * p[1] for c, p in zip(coeffs, window, strict=True)), Fraction(0))
        derivs.append((falling * x, falling * y))

    return derivs


def _speed_ratio(d_in: ExactVector, d_out: ExactVector) -> Fraction:
    """Signed ratio ``r`` with ``d_out == r * d_in`` for parallel vectors."""
    if d_in[0] != 0:
        return d_out[0] / d_in[0]
    return d_out[1] / d_in[1]


def _curvature_slope(d1: ExactVector, d2: ExactVector, d3: ExactVector) -> Fraction:
    """Numerator of dk/ds; the denominator is ``|d1|**6``."""
    return _cross(d1, d3) * _dot(d1, d1) - 3 * _cross(d1, d2) * _dot(d1, d2)


def interface_ccw(ps_in: Sequence[Point], ps_out: Sequence[Point]) -> Fraction:
    """Exact turning direction where ``ps_in`` ends and ``ps_out`` starts.

    Args:
        ps_in: Control points of the curve ending at the interface
        ps_out: Control points of the curve starting at the interface

    Returns:
        A value that is negative when the outgoing curve turns right
        (clockwise), positive when it turns left and zero when it
        continues the incoming curve to third order

    Raises:
        DegenerateCurveError: If either curve has an unsupported number of
            control points or a zero-length tangent at the interface
    """
    d1_in, d2_in, d3_in = _derivatives(ps_in, at_end=True)
    d1_out, d2_out, d3_out = _derivatives(ps_out, at_end=False)

    if d1_in == (0, 0) or d1_out == (0, 0):
        raise DegenerateCurveError("zero-length tangent at interface")

    ccw = _cross(d1_in, d1_out)
    if ccw != 0:
        return ccw

    ratio = _speed_ratio(d1_in, d1_out)
    lam = abs(ratio)
    reverses = ratio < 0

    k_in = _cross(d1_in, d2_in)
    k_out = _cross(d1_out, d2_out)
    ccw = -(k_out + lam**3 * k_in) if reverses else k_out - lam**3 * k_in
    if ccw != 0:
        return ccw

    m_in = _curvature_slope(d1_in, d2_in, d3_in)
    m_out = _curvature_slope(d1_out, d2_out, d3_out)
    return lam**6 * m_in - m_out if reverses else m_out - lam**6 * m_in
