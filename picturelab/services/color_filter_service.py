from __future__ import annotations

import logging

import numpy as np

from ..errors import DivideByZero
from ..models.picture import Picture

logger = logging.getLogger(__name__)


class ColorFilterService:
    """
    Per-pixel colour filters.  Every method rewrites picture.pixels in place
    and returns None; no pixel looks at its neighbours.
    """

    @staticmethod
    def _channels(picture: Picture) -> np.ndarray:
        # int16 leaves room for 255 - c and c * k without uint8 wraparound
        return picture.pixels.astype(np.int16)

    @staticmethod
    def _store(picture: Picture, channels: np.ndarray) -> None:
        picture.pixels[...] = np.clip(channels, 0, 255).astype(np.uint8)

    def zero_blue(self, picture: Picture) -> None:
        """Remove all blue from a picture."""
        logger.debug(f"zero_blue on {picture.width}x{picture.height}")
        picture.pixels[:, :, 2] = 0

    def keep_only_blue(self, picture: Picture) -> None:
        """Remove everything but blue; pixels without blue are left alone."""
        logger.debug(f"keep_only_blue on {picture.width}x{picture.height}")
        has_blue = picture.pixels[:, :, 2] > 0
        picture.pixels[has_blue, 0] = 0
        picture.pixels[has_blue, 1] = 0

    def negate(self, picture: Picture) -> None:
        logger.debug(f"negate on {picture.width}x{picture.height}")
        picture.pixels[...] = 255 - picture.pixels

    def solarize(self, picture: Picture, threshold: int) -> None:
        """
        Simulate film over-exposure: every channel strictly below *threshold*
        becomes 255 - channel, the rest are untouched.
        """
        logger.debug(f"solarize(threshold={threshold}) on {picture.width}x{picture.height}")
        channels = self._channels(picture)
        self._store(picture, np.where(channels < threshold, 255 - channels, channels))

    def grayscale(self, picture: Picture) -> None:
        logger.debug(f"grayscale on {picture.width}x{picture.height}")
        avg = picture.pixels.astype(np.int32).sum(axis=-1) // 3
        picture.pixels[...] = avg[:, :, np.newaxis].astype(np.uint8)

    def tint(self, picture: Picture, red: float, blue: float, green: float) -> None:
        """
        Scale each channel by its factor (note the red, blue, green order),
        truncating toward zero.  If any channel of a pixel ends above 255,
        the whole pixel saturates to white.
        """
        logger.debug(f"tint(red={red}, blue={blue}, green={green}) on {picture.width}x{picture.height}")
        factors = np.array([red, green, blue], dtype=np.float64)
        scaled = np.trunc(picture.pixels.astype(np.float64) * factors)
        overflow = (scaled > 255).any(axis=-1)
        scaled[overflow] = 255
        self._store(picture, scaled)

    def posterize(self, picture: Picture, span: int) -> None:
        """
        Reduce colour depth: channel -> (channel // span) * span.

        Raises:
            DivideByZero: span <= 0.
        """
        if span <= 0:
            raise DivideByZero(f"Posterize span must be positive, got {span}")
        logger.debug(f"posterize(span={span}) on {picture.width}x{picture.height}")
        channels = picture.pixels.astype(np.int32)
        self._store(picture, (channels // span) * span)
