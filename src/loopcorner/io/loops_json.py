"""JSON loop files.

A loop file holds the control points of every curve of every loop::

    {"loops": [[[[0, 0], [10, 0]], [[10, 0], [10, 10]], [[10, 10], [0, 0]]]]}
"""

import json
from pathlib import Path
from typing import Any

from loopcorner.config.settings import DEGREE_LIMIT
from loopcorner.domain.curve import Loop
from loopcorner.exceptions import LoopError, LoopFileError


def loops_from_data(data: Any, angle_tolerance: float = DEGREE_LIMIT) -> list[Loop]:
    """Build loops from decoded JSON data.

    Raises:
        LoopError: If the data is malformed or a loop is not closed
    """
    if not isinstance(data, dict) or not isinstance(data.get("loops"), list):
        raise LoopError("expected an object with a 'loops' list")

    return [
        Loop.from_beziers(beziers, loop_idx=i, angle_tolerance=angle_tolerance)
        for i, beziers in enumerate(data["loops"])
    ]


def load_loops(path: Path, angle_tolerance: float = DEGREE_LIMIT) -> list[Loop]:
    """Read loops from a JSON file.

    Args:
        path: Path to the loop file
        angle_tolerance: Cross product threshold for the loops' corners

    Returns:
        Loops in file order

    Raises:
        LoopFileError: If the file cannot be read or does not describe
            closed loops
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return loops_from_data(data, angle_tolerance=angle_tolerance)
    except OSError as e:
        raise LoopFileError(str(path), e.strerror or str(e)) from e
    except (ValueError, TypeError, LoopError) as e:
        raise LoopFileError(str(path), str(e)) from e


def dump_loops(loops: list[Loop], path: Path) -> None:
    """Write loops to a JSON file."""
    data = {"loops": [loop.beziers for loop in loops]}
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
