"""
Error taxonomy for picture construction and transforms.

Every error is a caller/precondition violation, raised at the call that
detects it. Each one also derives from the closest builtin so plain
``except ValueError`` / ``except IndexError`` handlers keep working.
"""


class PictureError(Exception):
    """Base class for all picturelab errors."""


class OutOfBounds(PictureError, IndexError):
    """Coordinate outside the picture extent."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"No pixel at ({x}, {y}) in a {width}x{height} picture")
        self.x = x
        self.y = y


class EmptyImage(PictureError, ValueError):
    """Picture with zero rows or zero columns."""


class InvalidDimensions(PictureError, ValueError):
    """Non-positive height or width requested for a new picture."""


class NonRectangular(PictureError, ValueError):
    """Input rows of differing lengths."""


class DimensionMismatch(PictureError, ValueError):
    """Partner picture too small for a cross-image operation."""


class DivideByZero(PictureError, ZeroDivisionError):
    """Degenerate posterize span."""


class InvalidParameter(PictureError, ValueError):
    """Negative radius / jitter, or an unparseable filter step."""
