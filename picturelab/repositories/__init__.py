from .picture_repository import PictureRepository

__all__ = ["PictureRepository"]
