"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files
and extracting glyph outlines as loops of bezier curves.
"""

from pathlib import Path

from fontTools.pens.recordingPen import RecordingPen
from fontTools.ttLib import TTFont

from loopcorner.config.settings import DEGREE_LIMIT
from loopcorner.domain.curve import Loop
from loopcorner.exceptions import GlyphNotFoundError
from loopcorner.io.converter import recording_to_loops


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph loops.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for loop in reader.get_loops("A"):
                print(len(loop))
    """

    def __init__(self, font_path: Path, angle_tolerance: float = DEGREE_LIMIT) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            angle_tolerance: Cross product threshold for the loops' corners
        """
        self._font_path = font_path
        self._angle_tolerance = angle_tolerance
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    def _loaded(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._loaded()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._loaded()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._loaded()["maxp"].numGlyphs

    def glyph_names(self) -> list[str]:
        """Glyph names in font order."""
        return list(self._loaded().getGlyphOrder())

    def get_loops(self, name: str) -> list[Loop]:
        """Get the closed loops of a glyph's outline.

        Components of composite glyphs are drawn in place.

        Args:
            name: Name of the glyph

        Returns:
            Loops in drawing order

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no glyph called ``name``
        """
        glyph_set = self._loaded().getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        pen = RecordingPen()
        glyph_set[name].draw(pen)
        return recording_to_loops(pen.value, angle_tolerance=self._angle_tolerance)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
