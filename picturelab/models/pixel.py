from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union
import math

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def clamp_channel(value) -> int:
    """Truncate toward zero, then saturate into [0, 255]."""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, int(value)))


@dataclass
class Pixel:
    """
    Simple value object: one RGB colour, every channel kept in [0, 255].
    Out-of-range input saturates at the limit, it never wraps.
    """
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self):
        self.red = clamp_channel(self.red)
        self.green = clamp_channel(self.green)
        self.blue = clamp_channel(self.blue)

    @classmethod
    def white(cls) -> "Pixel":
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> "Pixel":
        return cls(0, 0, 0)

    @classmethod
    def coerce(cls, color: "ColorLike") -> "Pixel":
        """Accept a Pixel or any (r, g, b) triple."""
        if isinstance(color, Pixel):
            return cls(color.red, color.green, color.blue)
        r, g, b = color
        return cls(r, g, b)

    # ── Mutation (clamped) ───────────────────────────────────────────
    def set_color(self, red, green, blue) -> None:
        self.red = clamp_channel(red)
        self.green = clamp_channel(green)
        self.blue = clamp_channel(blue)

    def set_red(self, value) -> None:
        self.red = clamp_channel(value)

    def set_green(self, value) -> None:
        self.green = clamp_channel(value)

    def set_blue(self, value) -> None:
        self.blue = clamp_channel(value)

    # ── Metric ───────────────────────────────────────────────────────
    def color_distance(self, other: "ColorLike") -> float:
        """
        Euclidean distance in RGB space.

        Args:
            other (Pixel | tuple): The colour to compare against.

        Returns:
            (float): sqrt(dr² + dg² + db²), 0.0 for identical colours.
        """
        r, g, b = other
        return math.sqrt(
            (self.red - int(r)) ** 2
            + (self.green - int(g)) ** 2
            + (self.blue - int(b)) ** 2
        )

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())


ColorLike = Union[Pixel, Sequence[int]]
