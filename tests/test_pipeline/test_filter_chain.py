"""Tests for the named filter registry and step runner."""

from __future__ import annotations

import pytest

from picturelab.errors import InvalidParameter
from picturelab.models.picture import Picture
from picturelab.models.pixel import Pixel
from picturelab.pipeline.filter_chain import FILTERS, apply_steps, apply_to_gallery, parse_step


class TestParseStep:
    def test_no_arguments(self) -> None:
        assert parse_step("negate") == ("negate", [])

    def test_converts_arguments(self) -> None:
        assert parse_step("solarize:127") == ("solarize", [127])
        assert parse_step(" tint : 1.25, 0.75 ,1 ") == ("tint", [1.25, 0.75, 1.0])

    def test_unknown_filter(self) -> None:
        with pytest.raises(InvalidParameter, match="Unknown filter"):
            parse_step("sepia")

    def test_wrong_argument_count(self) -> None:
        with pytest.raises(InvalidParameter):
            parse_step("posterize")
        with pytest.raises(InvalidParameter):
            parse_step("negate:3")

    def test_bad_argument(self) -> None:
        with pytest.raises(InvalidParameter):
            parse_step("blur:wide")

    def test_registry_covers_every_transform(self) -> None:
        assert set(FILTERS) == {
            "zero_blue", "keep_only_blue", "negate", "solarize", "grayscale", "tint",
            "posterize", "mirror_vertical", "mirror_right_to_left", "mirror_horizontal",
            "vertical_flip", "edge_detection", "simple_blur", "blur", "glass_filter",
        }


class TestApplySteps:
    def test_in_place_steps(self) -> None:
        picture = Picture.from_samples([[(200, 50, 10)]])
        result = apply_steps(picture, ["negate", "posterize:64"])
        assert result is picture
        assert picture.get_pixel(0, 0) == Pixel(0, 192, 192)

    def test_new_picture_steps_written_back(self) -> None:
        picture = Picture.from_samples([[(0, 0, 0), (30, 0, 0), (60, 0, 0)]])
        apply_steps(picture, ["simple_blur"])
        assert picture.pixels[:, :, 0].tolist() == [[30, 30, 30]]

    def test_original_preserved(self, gradient: Picture) -> None:
        before = gradient.pixels.copy()
        apply_steps(gradient, ["grayscale", "blur:1", "vertical_flip"])
        assert (gradient.original_pixels == before).all()
        assert not (gradient.pixels == before).all()

    def test_bad_step_leaves_picture_alone(self, gradient: Picture) -> None:
        before = gradient.clone()
        with pytest.raises(InvalidParameter):
            apply_steps(gradient, ["negate", "nonsense"])
        assert gradient == before
        assert gradient.original_pixels is None

    def test_gallery(self, gradient: Picture) -> None:
        pictures = [gradient, gradient.clone()]
        results = apply_to_gallery(pictures, ["zero_blue"])
        assert results == pictures
        assert all((p.pixels[:, :, 2] == 0).all() for p in results)
