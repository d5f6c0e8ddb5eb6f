"""Loopcorner - Classify the corners of closed bezier loops.

Loopcorner inspects the joint where one bezier curve of a closed shape
boundary (an outer contour or a hole) ends and the next one begins, and
classifies it as sharp, dull, quite-sharp or quite-dull. The turning sign
comes from an exact orientation test, the magnitude from unit tangents.

Example:
    $ loopcorner Roboto-Regular.ttf --glyph A

This prints a table of the corners of every contour of glyph A.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
