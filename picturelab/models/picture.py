from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple
import numpy as np

from ..errors import EmptyImage, InvalidDimensions, NonRectangular, OutOfBounds
from .pixel import ColorLike, Pixel


@dataclass(eq=False)
class Picture:
    """
    Simple data object: a rectangular grid of RGB pixels
    (+ optional source path and original pixels for bookkeeping).

    Storage is a single row-major buffer; coordinates are (x, y) with
    x the column and y the row.
    """
    pixels: np.ndarray  # Shape (H, W, 3), dtype uint8, RGB order.
    path: Path | None = None  # Source of the picture.
    original_pixels: np.ndarray | None = None  # Original unmodified pixels for comparison

    def __post_init__(self):
        arr = np.asarray(self.pixels)
        if arr.size == 0:
            raise EmptyImage("Can't have an empty picture")
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise InvalidDimensions(f"Expected pixels of shape (H, W, 3), got {arr.shape}")
        # Always take our own copy so no caller keeps an alias into the buffer.
        self.pixels = np.ascontiguousarray(np.clip(arr, 0, 255).astype(np.uint8))
        if self.path is not None:
            self.path = Path(self.path)

    # ── Construction ─────────────────────────────────────────────────
    @classmethod
    def from_samples(cls, rows: Sequence[Sequence[ColorLike]], path: Path | None = None) -> "Picture":
        """
        Build a Picture from row-major samples, each an (r, g, b) triple or a Pixel.

        Raises:
            EmptyImage: zero rows or zero columns.
            NonRectangular: rows of differing length.
        """
        if len(rows) == 0 or len(rows[0]) == 0:
            raise EmptyImage("Can't have an empty picture")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise NonRectangular(
                    f"Pictures must be rectangles: row 0 has {width} pixels, row {i} has {len(row)}"
                )
        samples = [[tuple(Pixel.coerce(px)) for px in row] for row in rows]
        return cls(pixels=np.array(samples, dtype=np.int64), path=path)

    @classmethod
    def filled(cls, height: int, width: int, color: ColorLike = (255, 255, 255)) -> "Picture":
        """Solid-colour picture, white unless told otherwise."""
        if height <= 0 or width <= 0:
            raise InvalidDimensions(f"Picture dimensions must be positive, got {height}x{width}")
        fill = Pixel.coerce(color).as_tuple()
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = fill
        return cls(pixels=pixels)

    # ── Geometry ─────────────────────────────────────────────────────
    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.pixels.shape[:2]

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y, self.width, self.height)

    # ── Pixel access ─────────────────────────────────────────────────
    def get_pixel(self, x: int, y: int) -> Pixel:
        """
        Return a detached copy of the colour at column x, row y.

        Mutating the returned Pixel does not touch the picture; write the
        change back with set_pixel(x, y, pixel).
        """
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, pixel: ColorLike) -> None:
        self._check_bounds(x, y)
        if pixel is None:
            raise TypeError("Pixel is None")
        self.pixels[y, x] = Pixel.coerce(pixel).as_tuple()

    # ── Copies & export ──────────────────────────────────────────────
    def clone(self) -> "Picture":
        """Deep copy; the clone shares no storage with this picture."""
        original = None if self.original_pixels is None else self.original_pixels.copy()
        return Picture(pixels=self.pixels.copy(), path=self.path, original_pixels=original)

    def to_samples(self) -> List[List[Tuple[int, int, int]]]:
        return [[tuple(int(c) for c in px) for px in row] for row in self.pixels]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Picture):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    __hash__ = None
