"""
picturelab: in-memory RGB picture transforms.

A Picture is a rectangular grid of clamped RGB pixels; the services apply
colour filters, mirrors, blurs, edge detection, chromakey, steganography
and a glass filter to it.
"""

from .errors import (
    PictureError,
    OutOfBounds,
    EmptyImage,
    InvalidDimensions,
    NonRectangular,
    DimensionMismatch,
    DivideByZero,
    InvalidParameter,
)
from .models import Pixel, Picture

__version__ = "1.0.0"

__all__ = [
    "Pixel",
    "Picture",
    "PictureError",
    "OutOfBounds",
    "EmptyImage",
    "InvalidDimensions",
    "NonRectangular",
    "DimensionMismatch",
    "DivideByZero",
    "InvalidParameter",
]
