"""Shared fixtures for loopcorner tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from loopcorner.domain import Loop

# Anti-clockwise square: every corner is a 90 degree left turn
SQUARE = [
    [(0.0, 0.0), (10.0, 0.0)],
    [(10.0, 0.0), (10.0, 10.0)],
    [(10.0, 10.0), (0.0, 10.0)],
    [(0.0, 10.0), (0.0, 0.0)],
]


@pytest.fixture
def square_loop() -> Loop:
    return Loop.from_beziers(SQUARE)


def _draw_square(pen: TTGlyphPen) -> None:
    # Clockwise: TrueType outer contour
    pen.moveTo((0, 0))
    pen.lineTo((0, 500))
    pen.lineTo((500, 500))
    pen.lineTo((500, 0))
    pen.closePath()


def _draw_round(pen: TTGlyphPen) -> None:
    # Only off-curve points; on-curve points are implied midpoints
    pen.qCurveTo((0, 0), (500, 0), (500, 500), (0, 500), None)
    pen.closePath()


@pytest.fixture
def test_font(tmp_path: Path) -> Path:
    """Build a small TrueType font with a square and a round glyph."""
    glyph_order = [".notdef", "square", "round"]
    glyphs = {}
    for name, draw in ((".notdef", None), ("square", _draw_square), ("round", _draw_round)):
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x25A0: "square", 0x25CF: "round"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Loopcorner Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    path = tmp_path / "test.ttf"
    fb.save(str(path))
    return path
