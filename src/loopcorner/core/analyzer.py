"""Corner reports for whole shapes.

The classifier and cache only ever look at one joint. LoopAnalyzer asks
each loop of a shape for the corner at the end of every curve, for
reporting and statistics.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from loopcorner.domain.corner import Corner
from loopcorner.domain.curve import Loop
from loopcorner.exceptions import GeometryError
from loopcorner.utils.logging import CornerLogger, CornerStats


@dataclass(frozen=True)
class CornerReport:
    """Corner at the end of one curve.

    Attributes:
        loop_idx: Index of the loop in its shape
        curve_idx: Index of the curve whose end forms the corner
        corner: The classified corner
    """

    loop_idx: int
    curve_idx: int
    corner: Corner

    @property
    def label(self) -> str:
        """Short classification label for display."""
        corner = self.corner
        if corner.is_quite_sharp:
            return "quite sharp"
        if corner.is_quite_dull:
            return "quite dull"
        if corner.is_sharp:
            return "sharp"
        if corner.is_dull:
            return "dull"
        return "straight"


class LoopAnalyzer:
    """Collects the corners of every curve in a set of loops."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        if logger is None:
            # stdlib-backed: silent until logging is configured
            logger = structlog.wrap_logger(
                logging.getLogger(__name__),
                processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        self._log = CornerLogger(logger)

    def analyze(self, loop: Loop, loop_idx: int = 0) -> list[CornerReport]:
        """Classify the corner at the end of every curve of ``loop``.

        Args:
            loop: Loop to classify
            loop_idx: Index of the loop, used in reports and logs

        Returns:
            One report per curve, in loop order

        Raises:
            GeometryError: If a curve is degenerate at one of its ends
        """
        self._log.log_loop_start(loop_idx, len(loop))
        reports = [CornerReport(loop_idx, curve.idx, loop.corner_at_end(curve)) for curve in loop]

        # Counted only once the whole loop has classified
        for report in reports:
            self._log.log_corner(loop_idx, report.curve_idx, report.corner)
        return reports

    def analyze_all(self, loops: Iterable[Loop]) -> list[CornerReport]:
        """Classify all loops, skipping (and logging) degenerate ones."""
        reports: list[CornerReport] = []
        for loop_idx, loop in enumerate(loops):
            try:
                reports.extend(self.analyze(loop, loop_idx))
            except GeometryError as e:
                self._log.log_loop_error(loop_idx, e)
        return reports

    @property
    def stats(self) -> CornerStats:
        return self._log.stats
