"""Configuration settings for Loopcorner."""

import math
from pathlib import Path

from pydantic import BaseModel, Field

# Cross product of two unit vectors for the listed angles (in degrees).
DEGREES: dict[float, float] = {
    0.25: 0.0050,
    1: 0.0167,
    4: 0.0698,
    16: 0.2756,
}

DEGREE_LIMIT = DEGREES[4]

_LEVEL_PATTERN = r"(?i)^(debug|info|warning|error|critical)$"


def angle_tolerance_for(degrees: float) -> float:
    """Convert an angle in degrees to a cross product threshold.

    Angles listed in ``DEGREES`` use the tabulated value so the default
    tolerance stays identical to ``DEGREE_LIMIT``.

    Args:
        degrees: Angle in degrees

    Returns:
        Cross product of two unit vectors separated by ``degrees``
    """
    if degrees in DEGREES:
        return DEGREES[degrees]
    return math.sin(math.radians(degrees))


class CornerConfig(BaseModel):
    """Configuration for corner classification.

    Only the quite-sharp and quite-dull flags depend on the tolerance;
    the exact sharp and dull flags never do.
    """

    angle_tolerance_degrees: float = Field(
        default=4.0,
        gt=0.0,
        lt=90.0,
        description="Minimum turn (degrees) for a corner to count as quite sharp/dull",
    )

    @property
    def cross_threshold(self) -> float:
        """Cross product threshold matching ``angle_tolerance_degrees``."""
        return angle_tolerance_for(self.angle_tolerance_degrees)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=_LEVEL_PATTERN,
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        pattern=_LEVEL_PATTERN,
        description="File log level (more verbose)",
    )


class LoopCornerSettings(BaseModel):
    """Main application settings."""

    corner: CornerConfig = Field(default_factory=CornerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LoopCornerSettings:
    """Get default application settings."""
    return LoopCornerSettings()
