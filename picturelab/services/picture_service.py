from pathlib import Path
from typing import Iterable, Union, Iterator
import numpy as np
from PIL import Image as PILImage

from ..models.picture import Picture
from ..repositories.picture_repository import PictureRepository


class PictureService:
    """I/O helpers.  No transform logic."""
    def __init__(self):
        self.picture_repository = PictureRepository()

    def load(self, path: str | Path) -> Picture:
        """Load a single picture from disk into a Picture object."""
        return self.picture_repository.load(path, timeout=self.picture_repository.load_timeout)

    def load_named(self, name: str) -> Picture:
        """Load a picture by name from the configured images directory."""
        return self.picture_repository.load_named(name)

    def stream_gallery(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Picture]:
        """
        Yield pictures lazily instead of returning a gigantic list.
        """
        return self.picture_repository.iter_dir(folder,
                                                recursive=recursive,
                                                exts=exts)

    def save(self, picture: Picture, path: Union[str, Path] = None, *, lossless: bool = False) -> Path:
        """
        Business-level method to save the picture, to *path* or its own path.
        lossless=True writes PNG whatever the configured extensions are.
        """
        return self.picture_repository.save(picture, path, lossless=lossless)

    def preserve_original_state(self, picture: Picture) -> None:
        """
        Preserve the current picture state before a processing pipeline.
        """
        self.picture_repository.save_original_pixels(picture)

    def apply_pipeline_modification(self, picture: Picture, new_pixels: np.ndarray) -> None:
        """
        Apply a pipeline modification while preserving original for comparison.
        """
        self.picture_repository.update_pixels_preserve_original(picture, new_pixels)

    def to_pil_image(self, picture: Picture) -> PILImage.Image:
        """
        Hand a picture to a viewer: an RGB PIL Image copied from Picture.pixels,
        so whatever the viewer does never reaches the picture.
        """
        return PILImage.fromarray(picture.pixels.copy())
