"""Core algorithms for loopcorner.

This module contains:

- Vector primitives (subtraction, dot/cross products, normalization)
- The exact orientation test at a curve interface
- Corner classification and per-curve corner caching
- Corner reports over whole shapes

Key functions:
- interface_ccw: Exact turning direction at an interface
- get_corner: Classify the corner between two curves
- get_corner_at_end: Cached corner at the end of a curve in its loop

Key classes:
- CornerCache: Compute-once corners keyed by curve
- LoopAnalyzer: Corner reports and statistics for a set of loops
"""

from loopcorner.core.corner import CornerCache, get_corner, get_corner_at_end
from loopcorner.core.orientation import interface_ccw
from loopcorner.core.vector import cross, dot, subtract, to_unit_vector
from loopcorner.core.analyzer import CornerReport, LoopAnalyzer

__all__ = [
    "CornerCache",
    "CornerReport",
    "LoopAnalyzer",
    "cross",
    "dot",
    "get_corner",
    "get_corner_at_end",
    "interface_ccw",
    "subtract",
    "to_unit_vector",
]
