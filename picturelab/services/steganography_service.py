from __future__ import annotations

import logging
import os

import numpy as np
from dotenv import load_dotenv

from ..models.picture import Picture
from ..models.pixel import Pixel
from .color_metric_service import ColorMetricService
from .compositing_service import require_covers

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class SteganographyService:
    """
    Hide a black-and-white message in the parity of a cover picture's red
    channel, one bit per pixel, and recover it.
    """

    def __init__(self, black_tolerance: float | None = None):
        self.black_tolerance = (
            black_tolerance if black_tolerance is not None
            else float(os.getenv("STEGO_BLACK_TOLERANCE", "50"))
        )
        self.metric = ColorMetricService()

    def encode(self, picture: Picture, message: Picture) -> None:
        """
        Embed *message* into *picture* in place: every red channel is made
        even, then made odd wherever the message pixel is near black.

        Raises:
            DimensionMismatch: *message* is smaller than *picture*.
        """
        require_covers(message, picture, "Message")
        logger.debug(f"encode message into {picture.width}x{picture.height}")
        red = picture.pixels[:, :, 0]
        red &= np.uint8(0xFE)
        msg = message.pixels[:picture.height, :picture.width]
        marked = self.metric.distance_map(msg, Pixel.black()) <= self.black_tolerance
        red[marked] |= np.uint8(1)

    def decode(self, picture: Picture) -> Picture:
        """Return a new white picture, black wherever the red channel is odd."""
        logger.debug(f"decode message from {picture.width}x{picture.height}")
        revealed = Picture.filled(picture.height, picture.width, Pixel.white())
        revealed.pixels[(picture.pixels[:, :, 0] & 1) == 1] = 0
        return revealed
