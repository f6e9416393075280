from __future__ import annotations

import logging
import os

import numpy as np
from dotenv import load_dotenv

from ..errors import InvalidParameter
from ..models.picture import Picture

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class GlassFilterService:
    """
    Simulate looking at a picture through a pane of frosted glass: every
    output pixel is copied from a random nearby source pixel.
    """

    def __init__(self, seed: int | None = None):
        env_seed = os.getenv("GLASS_RANDOM_SEED")
        if seed is None and env_seed:
            seed = int(env_seed)
        self.seed = seed

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def glass_filter(
            self,
            picture: Picture,
            jitter: int,
            rng: np.random.Generator | None = None,
    ) -> Picture:
        """
        Args:
            picture (Picture): Source, left untouched.
            jitter (int): Maximum offset, in pixels, along each axis.
            rng (np.random.Generator): Random source; built from the service
                seed when omitted.

        Returns:
            (Picture): New picture where (x, y) holds the source pixel at
            (x + dx, y + dy), dx and dy uniform in [-jitter, jitter],
            wrapped around the picture edges.
        """
        if jitter < 0:
            raise InvalidParameter(f"Glass jitter must be non-negative, got {jitter}")
        rng = rng if rng is not None else self.make_rng()
        h, w = picture.shape
        logger.debug(f"glass_filter(jitter={jitter}) on {w}x{h}")

        rows = np.arange(h)[:, np.newaxis] + rng.integers(-jitter, jitter + 1, size=(h, w))
        cols = np.arange(w)[np.newaxis, :] + rng.integers(-jitter, jitter + 1, size=(h, w))
        return Picture(pixels=picture.pixels[rows % h, cols % w])
