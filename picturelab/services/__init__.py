from .color_metric_service import ColorMetricService
from .color_filter_service import ColorFilterService
from .mirror_service import MirrorService
from .neighborhood_service import NeighborhoodService
from .compositing_service import CompositingService
from .steganography_service import SteganographyService
from .glass_filter_service import GlassFilterService
from .picture_service import PictureService

__all__ = [
    "ColorMetricService",
    "ColorFilterService",
    "MirrorService",
    "NeighborhoodService",
    "CompositingService",
    "SteganographyService",
    "GlassFilterService",
    "PictureService",
]
