"""Exception hierarchy for Loopcorner."""


class LoopCornerError(Exception):
    """Base exception for all Loopcorner errors."""

    pass


class GeometryError(LoopCornerError):
    """Errors in geometric calculations."""

    pass


class DegenerateCurveError(GeometryError):
    """Curve cannot define a tangent at the requested end."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate curve: {reason}")


class LoopError(LoopCornerError):
    """Errors related to the structure of a loop."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CurveNotInLoopError(LoopError):
    """Curve is not owned by the loop it was looked up in."""

    def __init__(self, idx: int) -> None:
        self.idx = idx
        super().__init__(f"Curve {idx} does not belong to this loop")


class MissingSuccessorError(LoopError):
    """Successor lookup produced no curve."""

    def __init__(self, idx: int) -> None:
        self.idx = idx
        super().__init__(f"Curve {idx} has no successor")


class InputError(LoopCornerError):
    """Errors related to reading loops from a file."""

    pass


class FontLoadError(InputError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(InputError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class LoopFileError(InputError):
    """Invalid or unreadable loop file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid loop file '{path}': {reason}")
