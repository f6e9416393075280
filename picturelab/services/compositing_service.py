import logging

from ..errors import DimensionMismatch
from ..models.picture import Picture
from ..models.pixel import ColorLike
from .color_metric_service import ColorMetricService

logger = logging.getLogger(__name__)


def require_covers(partner: Picture, picture: Picture, role: str) -> None:
    """Raise DimensionMismatch unless *partner* is at least as large as *picture*."""
    if partner.height < picture.height or partner.width < picture.width:
        raise DimensionMismatch(
            f"{role} is {partner.width}x{partner.height}, "
            f"needs at least {picture.width}x{picture.height}"
        )


class CompositingService:
    """Cross-image operations that pull pixels from a second picture."""

    def __init__(self):
        self.metric = ColorMetricService()

    def chromakey(
            self,
            picture: Picture,
            other: Picture,
            key_color: ColorLike,
            tolerance: float,
    ) -> None:
        """
        Replace, in place, every pixel within *tolerance* of *key_color*
        with the pixel at the same coordinate in *other*.

        Raises:
            DimensionMismatch: *other* is smaller than *picture*.
        """
        require_covers(other, picture, "Background")
        logger.debug(f"chromakey(key={tuple(key_color)}, tolerance={tolerance}) "
                     f"on {picture.width}x{picture.height}")
        keyed = self.metric.distance_map(picture.pixels, key_color) <= tolerance
        background = other.pixels[:picture.height, :picture.width]
        picture.pixels[keyed] = background[keyed]
