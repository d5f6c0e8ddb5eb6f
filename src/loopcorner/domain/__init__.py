"""Domain models for loopcorner.

This module contains the value types and containers describing a shape
boundary made of bezier curves:

- Point: A 2D control point
- Curve: One bezier curve and its position in a loop
- Loop: A closed, cyclically ordered arena of curves
- Corner: Classification of the joint between two consecutive curves
"""

from loopcorner.domain.corner import Corner
from loopcorner.domain.point import Point
from loopcorner.domain.curve import Curve, Loop

__all__: list[str] = [
    "Corner",
    "Curve",
    "Loop",
    "Point",
]
