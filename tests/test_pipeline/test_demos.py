"""Tests for the chromakey and steganography demo flows."""

from __future__ import annotations

from picturelab.models.picture import Picture
from picturelab.models.pixel import Pixel
from picturelab.pipeline.chromakey_demo import DEFAULT_KEY_COLOR, run_chromakey
from picturelab.pipeline.steganography_demo import hide_and_reveal


class TestRunChromakey:
    def test_composes_on_a_copy(self) -> None:
        foreground = Picture.from_samples([[DEFAULT_KEY_COLOR, (250, 250, 250)]])
        background = Picture.filled(1, 2, (5, 6, 7))
        composed = run_chromakey(foreground, background)
        assert composed.get_pixel(0, 0) == Pixel(5, 6, 7)
        assert composed.get_pixel(1, 0) == Pixel(250, 250, 250)
        assert foreground.get_pixel(0, 0) == Pixel(*DEFAULT_KEY_COLOR)

    def test_custom_key(self) -> None:
        foreground = Picture.filled(1, 1, (0, 255, 0))
        composed = run_chromakey(foreground, Picture.filled(1, 1), key_color=(0, 250, 0), tolerance=10)
        assert composed.get_pixel(0, 0) == Pixel.white()


class TestHideAndReveal:
    def test_round_trip(self) -> None:
        cover = Picture.filled(3, 3, (129, 64, 32))
        message = Picture.filled(3, 3)
        message.set_pixel(1, 1, Pixel.black())
        message.set_pixel(2, 0, Pixel(20, 20, 20))

        encoded, revealed = hide_and_reveal(cover, message)

        expected = Picture.filled(3, 3)
        expected.set_pixel(1, 1, Pixel.black())
        expected.set_pixel(2, 0, Pixel.black())
        assert revealed == expected
        assert cover.get_pixel(0, 0) == Pixel(129, 64, 32)
        assert encoded.get_pixel(0, 0) == Pixel(128, 64, 32)
