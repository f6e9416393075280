from .demo import main

__all__ = ["main"]
