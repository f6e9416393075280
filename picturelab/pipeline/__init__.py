from .filter_chain import FILTERS, apply_steps, apply_to_gallery, parse_step
from .chromakey_demo import run_chromakey
from .steganography_demo import hide_and_reveal

__all__ = [
    "FILTERS",
    "apply_steps",
    "apply_to_gallery",
    "parse_step",
    "run_chromakey",
    "hide_and_reveal",
]
