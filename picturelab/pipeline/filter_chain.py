# pipeline/filter_chain.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from ..errors import InvalidParameter
from ..models.picture import Picture
from ..services.color_filter_service import ColorFilterService
from ..services.glass_filter_service import GlassFilterService
from ..services.mirror_service import MirrorService
from ..services.neighborhood_service import NeighborhoodService
from ..services.picture_service import PictureService

logger = logging.getLogger(__name__)


@dataclass
class FilterSpec:
    """A named transform plus the converters for its positional arguments."""
    apply: Callable[..., Picture | None]
    arg_types: Tuple[type, ...] = ()


def build_registry(
    color_filters: ColorFilterService | None = None,
    mirrors: MirrorService | None = None,
    neighborhood: NeighborhoodService | None = None,
    glass: GlassFilterService | None = None,
) -> Dict[str, FilterSpec]:
    color_filters = color_filters or ColorFilterService()
    mirrors = mirrors or MirrorService()
    neighborhood = neighborhood or NeighborhoodService()
    glass = glass or GlassFilterService()
    return {
        "zero_blue": FilterSpec(color_filters.zero_blue),
        "keep_only_blue": FilterSpec(color_filters.keep_only_blue),
        "negate": FilterSpec(color_filters.negate),
        "solarize": FilterSpec(color_filters.solarize, (int,)),
        "grayscale": FilterSpec(color_filters.grayscale),
        "tint": FilterSpec(color_filters.tint, (float, float, float)),
        "posterize": FilterSpec(color_filters.posterize, (int,)),
        "mirror_vertical": FilterSpec(mirrors.mirror_vertical),
        "mirror_right_to_left": FilterSpec(mirrors.mirror_right_to_left),
        "mirror_horizontal": FilterSpec(mirrors.mirror_horizontal),
        "vertical_flip": FilterSpec(mirrors.vertical_flip),
        "edge_detection": FilterSpec(neighborhood.edge_detection, (float,)),
        "simple_blur": FilterSpec(neighborhood.simple_blur),
        "blur": FilterSpec(neighborhood.blur, (int,)),
        "glass_filter": FilterSpec(glass.glass_filter, (int,)),
    }


FILTERS: Dict[str, FilterSpec] = build_registry()


def parse_step(step: str, registry: Dict[str, FilterSpec] = FILTERS) -> Tuple[str, list]:
    """
    Parse "name" or "name:arg1,arg2" into (name, converted args).

    >>> parse_step("tint:1.25,0.75,1")
    ('tint', [1.25, 0.75, 1.0])
    """
    name, _, raw = step.strip().partition(":")
    name = name.strip()
    if name not in registry:
        raise InvalidParameter(f"Unknown filter '{name}'. Known: {', '.join(sorted(registry))}")
    spec = registry[name]
    raw_args = [a.strip() for a in raw.split(",")] if raw.strip() else []
    if len(raw_args) != len(spec.arg_types):
        raise InvalidParameter(
            f"Filter '{name}' takes {len(spec.arg_types)} argument(s), got {len(raw_args)}"
        )
    try:
        args = [convert(a) for convert, a in zip(spec.arg_types, raw_args)]
    except ValueError as err:
        raise InvalidParameter(f"Bad argument for '{name}': {err}") from err
    return name, args


def apply_steps(
    picture: Picture,
    steps: Sequence[str],
    *,
    registry: Dict[str, FilterSpec] = FILTERS,
    picture_service: PictureService | None = None,
) -> Picture:
    """
    Run *steps* over *picture* in order and return the same Picture object.

    In-place filters mutate it directly; filters that produce a new picture
    have their result written back.  The pixels as they were before the
    first step are kept in picture.original_pixels.
    """
    picture_service = picture_service or PictureService()
    parsed = [parse_step(s, registry) for s in steps]
    picture_service.preserve_original_state(picture)

    for name, args in parsed:
        logger.info(f"Applying {name}{tuple(args) if args else ''}")
        result = registry[name].apply(picture, *args)
        if isinstance(result, Picture):
            picture_service.apply_pipeline_modification(picture, result.pixels)
    return picture


def apply_to_gallery(
    gallery: Iterable[Picture],
    steps: Sequence[str],
    *,
    registry: Dict[str, FilterSpec] = FILTERS,
    picture_service: PictureService | None = None,
) -> List[Picture]:
    """
    For every Picture in *gallery* apply *steps* in memory (preserving
    the original).  Returns the same Picture objects with updated pixels.
    """
    return [
        apply_steps(picture, steps, registry=registry, picture_service=picture_service)
        for picture in gallery
    ]
