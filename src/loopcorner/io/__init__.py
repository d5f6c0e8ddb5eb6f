"""Input layer for loopcorner.

This module turns external outline data into loops of bezier curves.

Key responsibilities:
- Load TTF/OTF fonts and convert glyph outlines to loops
- Read and write JSON loop files

Key classes and functions:
- FontReader: Load fonts and extract glyph loops
- recording_to_loops: Convert pen recordings to loops
- load_loops / dump_loops: JSON loop files
"""

from loopcorner.io.converter import recording_to_loops
from loopcorner.io.loops_json import dump_loops, load_loops
from loopcorner.io.reader import FontReader

__all__ = [
    "FontReader",
    "dump_loops",
    "load_loops",
    "recording_to_loops",
]
