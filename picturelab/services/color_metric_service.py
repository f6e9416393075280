import numpy as np

from ..models.pixel import ColorLike, Pixel


class ColorMetricService:
    """
    Euclidean RGB distance, shared by edge detection, chromakey and
    steganography. Buffers are (H, W, 3) uint8 arrays.
    """

    @staticmethod
    def distance(first: ColorLike, second: ColorLike) -> float:
        return Pixel.coerce(first).color_distance(second)

    @staticmethod
    def distance_map(pixels: np.ndarray, color: ColorLike) -> np.ndarray:
        """
        Args:
            pixels (np.ndarray): (H, W, 3) buffer.
            color (Pixel | tuple): Reference colour.

        Returns:
            (np.ndarray): (H, W) float64 distances of every pixel to *color*.
        """
        ref = np.array(Pixel.coerce(color).as_tuple(), dtype=np.float64)
        diff = pixels.astype(np.float64) - ref
        return np.sqrt((diff ** 2).sum(axis=-1))

    @staticmethod
    def vertical_distance_map(pixels: np.ndarray) -> np.ndarray:
        """(H-1, W) distances between each pixel and the one directly below it."""
        diff = pixels[:-1].astype(np.float64) - pixels[1:].astype(np.float64)
        return np.sqrt((diff ** 2).sum(axis=-1))
