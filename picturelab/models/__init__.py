from .pixel import Pixel
from .picture import Picture

__all__ = ["Pixel", "Picture"]
