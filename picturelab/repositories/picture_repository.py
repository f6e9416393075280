from pathlib import Path
from typing import Union, Iterable, List, Iterator
import logging
import os
import signal

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.picture import Picture

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class PictureRepository:
    """
    Handles file I/O and pixel updates for Picture entities.
    """
    def __init__(self):
        self.VALID_EXTS = {
            ext.strip().lower()
            for ext in os.getenv("VALID_IMAGE_EXTENSIONS", ".jpg,.jpeg,.png,.bmp").split(",")
            if ext.strip()
        }
        self.images_dir = Path(os.getenv("PICTURE_IMAGES_DIR", "images"))
        self.output_ext = os.getenv("OUTPUT_IMG_EXT", ".jpg")
        self.load_timeout = int(os.getenv("IMAGE_LOAD_TIMEOUT", "5"))

    @staticmethod
    def load(path: Union[str, Path], timeout: int = 5) -> Picture:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"No picture at the location {path}")

        # ─── timeout wrapper (5 s default) ────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr_bgr is None:
            raise FileNotFoundError(f"Picture not found or unreadable: {path}")

        logger.info(f"Loaded {path.name}: {arr_bgr.shape[1]}x{arr_bgr.shape[0]}")
        return Picture(pixels=arr_bgr[:, :, ::-1], path=path)

    def load_named(self, name: str) -> Picture:
        """Load a picture by file name from the configured images directory."""
        return self.load(self.images_dir / name, timeout=self.load_timeout)

    def resolve_output_path(self, path: Union[str, Path]) -> Path:
        """Append the default output extension when the path carries no known one."""
        path = Path(path)
        if path.suffix.lower() not in self.VALID_EXTS:
            path = path.with_name(path.name + self.output_ext)
        return path

    def save(self, picture: Picture, path: Union[str, Path] = None, *, lossless: bool = False) -> Path:
        """
        Encode *picture* to *path* (or its own path).

        lossless=True always writes PNG to <path stem>.png, bypassing the
        configured extensions; low-bit payloads do not survive JPEG.
        """
        target = path if path is not None else picture.path
        if target is None:
            raise ValueError("Picture has no path to save to")
        if lossless:
            target = Path(target).with_suffix(".png")
        else:
            target = self.resolve_output_path(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(picture.pixels).save(target, format="PNG" if lossless else None)
        picture.path = target
        logger.info(f"File created at {target.resolve()}")
        return target

    @staticmethod
    def save_original_pixels(picture: Picture) -> None:
        """Save current pixels as original for before/after comparison"""
        if picture.original_pixels is None:
            picture.original_pixels = picture.pixels.copy()

    @staticmethod
    def update_pixels_preserve_original(picture: Picture, new_pixels: np.ndarray) -> None:
        """Update pixels while preserving original for comparison"""
        if picture.original_pixels is None:
            picture.original_pixels = picture.pixels.copy()
        picture.pixels = Picture(new_pixels).pixels

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Picture]:
        """
        Yield Picture objects one at a time.  Nothing accumulates in memory.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if p.suffix.lower() not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            if not p.is_file():
                logger.debug(f"Skipping because not file: {p}")
                continue
            try:
                yield self.load(p, timeout=self.load_timeout)
            except (FileNotFoundError, TimeoutError) as err:
                logger.warning(f"Skipping {p.name}: {err}")

    def load_dir(
        self, folder: Union[str, Path], *, recursive=False, exts=None
    ) -> List[Picture]:
        """
        Convenience helper that returns a list, but internally streams.
        """
        return list(self.iter_dir(folder, recursive=recursive, exts=exts))
