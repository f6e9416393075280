# pipeline/chromakey_demo.py
from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

from ..models.picture import Picture
from ..models.pixel import ColorLike
from ..services.compositing_service import CompositingService

# ------------------------------------------------------------------
# env‑vars
load_dotenv()


def _env_color(name: str, default: str) -> Tuple[int, int, int]:
    r, g, b = (int(v) for v in os.getenv(name, default).split(","))
    return r, g, b


DEFAULT_KEY_COLOR = _env_color("CHROMAKEY_COLOR", "10,40,75")  # blue screen
DEFAULT_TOLERANCE = float(os.getenv("CHROMAKEY_TOLERANCE", "60"))


# ------------------------------------------------------------------
def run_chromakey(
    foreground: Picture,
    background: Picture,
    *,
    key_color: ColorLike = DEFAULT_KEY_COLOR,
    tolerance: float = DEFAULT_TOLERANCE,
    compositing_service: CompositingService | None = None,
) -> Picture:
    """
    Put *background* behind the key-coloured parts of *foreground*.
    Works on a clone; both inputs are left as they were.
    """
    compositing_service = compositing_service or CompositingService()
    composed = foreground.clone()
    compositing_service.chromakey(composed, background, key_color, tolerance)
    return composed
