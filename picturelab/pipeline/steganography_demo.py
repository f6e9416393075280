# pipeline/steganography_demo.py
from __future__ import annotations

from typing import Tuple

from ..models.picture import Picture
from ..services.steganography_service import SteganographyService


def hide_and_reveal(
    cover: Picture,
    message: Picture,
    *,
    steganography_service: SteganographyService | None = None,
) -> Tuple[Picture, Picture]:
    """
    Hide *message* in a copy of *cover*, then read it back out.

    Returns:
        (encoded, revealed): the cover carrying the message (should look
        unchanged) and the recovered black-on-white message.
    """
    steganography_service = steganography_service or SteganographyService()
    encoded = cover.clone()
    steganography_service.encode(encoded, message)
    return encoded, steganography_service.decode(encoded)
