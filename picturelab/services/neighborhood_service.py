from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from ..errors import InvalidParameter
from ..models.picture import Picture
from .color_metric_service import ColorMetricService

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]  # (d_row, d_col)

_ORTHOGONAL: List[Offset] = [(-1, 0), (0, -1), (1, 0), (0, 1)]


class NeighborhoodService:
    """
    Filters that sample a pixel's neighbours.

    The blurs read the source and return a *new* Picture, so the source is
    preserved.  Edge detection is the odd one out: it overwrites the source.
    """

    def __init__(self):
        self.metric = ColorMetricService()

    # ─── Sampling helpers ──────────────────────────────────────────
    @staticmethod
    def _gather(src: np.ndarray, offsets: Iterable[Offset]):
        """
        Sum the samples at each offset that lands inside the grid.

        Returns:
            (sums, counts): (H, W, 3) int64 channel sums and (H, W) number of
            in-bounds samples per pixel.
        """
        h, w = src.shape[:2]
        values = src.astype(np.int64)
        sums = np.zeros((h, w, 3), dtype=np.int64)
        counts = np.zeros((h, w), dtype=np.int64)
        for dy, dx in offsets:
            y0, y1 = max(0, -dy), min(h, h - dy)
            x0, x1 = max(0, -dx), min(w, w - dx)
            if y0 >= y1 or x0 >= x1:
                continue
            sums[y0:y1, x0:x1] += values[y0 + dy:y1 + dy, x0 + dx:x1 + dx]
            counts[y0:y1, x0:x1] += 1
        return sums, counts

    @staticmethod
    def radius_offsets(radius: int) -> List[Offset]:
        """Self, then per step j: the four axis and the four diagonal samples."""
        offsets: List[Offset] = [(0, 0)]
        for j in range(1, radius + 1):
            offsets += [
                (-j, 0), (0, -j), (j, 0), (0, j),
                (-j, -j), (-j, j), (j, -j), (j, j),
            ]
        return offsets

    # ─── Public API ────────────────────────────────────────────────
    def simple_blur(self, picture: Picture, skip_last_column: bool = False) -> Picture:
        """
        Average of the up/left/down/right neighbours that exist.

        A pixel with no neighbours at all (1x1 picture) keeps its colour.
        skip_last_column=True leaves the last column at the white fill,
        matching the output of the legacy loop bound.
        """
        logger.debug(f"simple_blur on {picture.width}x{picture.height}")
        sums, counts = self._gather(picture.pixels, _ORTHOGONAL)
        averaged = sums // np.maximum(counts, 1)[:, :, np.newaxis]
        isolated = counts == 0
        averaged[isolated] = picture.pixels[isolated]

        result = Picture.filled(picture.height, picture.width)
        if skip_last_column:
            result.pixels[:, :-1] = averaged[:, :-1]
        else:
            result.pixels[...] = averaged
        return result

    def blur(self, picture: Picture, radius: int) -> Picture:
        """
        Average each pixel with its in-bounds samples up to *radius* steps away
        along the two axes and the two diagonals.

        Raises:
            InvalidParameter: radius < 0.
        """
        if radius < 0:
            raise InvalidParameter(f"Blur radius must be non-negative, got {radius}")
        logger.debug(f"blur(radius={radius}) on {picture.width}x{picture.height}")
        sums, counts = self._gather(picture.pixels, self.radius_offsets(radius))
        return Picture(pixels=sums // counts[:, :, np.newaxis])

    def edge_detection(self, picture: Picture, threshold: float) -> None:
        """
        Mark a pixel white when it is closer than *threshold* to the pixel
        below it, black otherwise.  Compares original colours; the last row
        has nothing below and stays as it was.
        """
        logger.debug(f"edge_detection(threshold={threshold}) on {picture.width}x{picture.height}")
        if picture.height < 2:
            return
        dist = self.metric.vertical_distance_map(picture.pixels)
        marks = np.where(dist < threshold, 255, 0).astype(np.uint8)
        picture.pixels[:-1] = marks[:, :, np.newaxis]
