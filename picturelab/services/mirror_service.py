import logging

from ..models.picture import Picture

logger = logging.getLogger(__name__)


class MirrorService:
    """
    Axis mirrors and flips, all in place.

    Mirrors copy one half over the other (the source half survives, the
    destination half is lost).  verticalFlip swaps halves, so nothing is lost.
    The middle row/column of an odd dimension is never touched.
    """

    def mirror_vertical(self, picture: Picture) -> None:
        """Mirror about the vertical midline, left half onto right half."""
        half = picture.width // 2
        if half == 0:
            return
        logger.debug(f"mirror_vertical on {picture.width}x{picture.height}")
        px = picture.pixels
        px[:, picture.width - half:] = px[:, :half][:, ::-1].copy()

    def mirror_right_to_left(self, picture: Picture) -> None:
        """Mirror about the vertical midline, right half onto left half."""
        half = picture.width // 2
        if half == 0:
            return
        logger.debug(f"mirror_right_to_left on {picture.width}x{picture.height}")
        px = picture.pixels
        px[:, :half] = px[:, picture.width - half:][:, ::-1].copy()

    def mirror_horizontal(self, picture: Picture) -> None:
        """Mirror about the horizontal midline, top half onto bottom half."""
        half = picture.height // 2
        if half == 0:
            return
        logger.debug(f"mirror_horizontal on {picture.width}x{picture.height}")
        px = picture.pixels
        px[picture.height - half:] = px[:half][::-1].copy()

    def vertical_flip(self, picture: Picture) -> None:
        """Flip upside down: row r swaps with row height-1-r."""
        logger.debug(f"vertical_flip on {picture.width}x{picture.height}")
        picture.pixels[...] = picture.pixels[::-1].copy()
