"""Corner descriptor for the joint between two consecutive curves."""

import math
from dataclasses import dataclass
from typing import Any

Vector = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Corner:
    """Classification of the joint where one curve ends and the next begins.

    Sharp means the outgoing curve turns right relative to the incoming one
    (clockwise), dull means it turns left. ``is_sharp`` and ``is_dull`` come
    from an exact predicate; ``is_quite_sharp`` and ``is_quite_dull`` only
    hold when the turn exceeds the angular tolerance.

    Attributes:
        tangents: Unit tangent at the end of the incoming curve and at the
            start of the outgoing curve
        cross_tangents: Cross product of the two unit tangents
        is_sharp: Outgoing curve turns right
        is_dull: Outgoing curve turns left
        is_quite_sharp: Sharp by more than the angular tolerance
        is_quite_dull: Dull by more than the angular tolerance
    """

    tangents: tuple[Vector, Vector]
    cross_tangents: float
    is_sharp: bool
    is_dull: bool
    is_quite_sharp: bool
    is_quite_dull: bool

    @property
    def is_degenerate(self) -> bool:
        """True when the outgoing curve continues the incoming one."""
        return not (self.is_sharp or self.is_dull)

    @property
    def turn_angle(self) -> float:
        """Signed angle in radians from the incoming to the outgoing tangent."""
        (ax, ay), (bx, by) = self.tangents
        return math.atan2(self.cross_tangents, ax * bx + ay * by)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the corner
        """
        return {
            "tangents": [list(t) for t in self.tangents],
            "cross_tangents": self.cross_tangents,
            "is_sharp": self.is_sharp,
            "is_dull": self.is_dull,
            "is_quite_sharp": self.is_quite_sharp,
            "is_quite_dull": self.is_quite_dull,
        }
