"""Tests for the stochastic glass filter."""

from __future__ import annotations

import numpy as np
import pytest

from picturelab.errors import InvalidParameter
from picturelab.models.picture import Picture
from picturelab.services.glass_filter_service import GlassFilterService


@pytest.fixture()
def glass() -> GlassFilterService:
    return GlassFilterService(seed=1234)


def indexed(height: int, width: int) -> Picture:
    """Red = row, green = column, so every output pixel names its source."""
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[:, :, 0] = np.arange(height)[:, np.newaxis]
    pixels[:, :, 1] = np.arange(width)[np.newaxis, :]
    return Picture(pixels)


class FixedOffsets:
    """Stands in for np.random.Generator: hands out preset row, then column, offsets."""

    def __init__(self, *draws: np.ndarray):
        self.draws = list(draws)
        self.calls = []

    def integers(self, low, high, size):
        self.calls.append((low, high, size))
        return self.draws.pop(0)


def wrapped_offset(delta: np.ndarray, size: int) -> np.ndarray:
    """Smallest signed offset equivalent to *delta* modulo *size*."""
    return (delta + size // 2) % size - size // 2


class TestGlassFilter:
    def test_zero_jitter_copies(self, glass: GlassFilterService, gradient: Picture) -> None:
        assert glass.glass_filter(gradient, 0) == gradient

    def test_same_seed_same_result(self, gradient: Picture) -> None:
        first = GlassFilterService().glass_filter(gradient, 2, rng=np.random.default_rng(7))
        second = GlassFilterService().glass_filter(gradient, 2, rng=np.random.default_rng(7))
        assert first == second

    def test_service_seed_is_reproducible(self, glass: GlassFilterService, gradient: Picture) -> None:
        assert glass.glass_filter(gradient, 3) == glass.glass_filter(gradient, 3)

    def test_samples_within_jitter(self, glass: GlassFilterService) -> None:
        picture = indexed(20, 30)
        result = glass.glass_filter(picture, 2)
        rows = result.pixels[:, :, 0].astype(int)
        cols = result.pixels[:, :, 1].astype(int)
        d_row = wrapped_offset(rows - np.arange(20)[:, np.newaxis], 20)
        d_col = wrapped_offset(cols - np.arange(30)[np.newaxis, :], 30)
        assert (np.abs(d_row) <= 2).all()
        assert (np.abs(d_col) <= 2).all()

    def test_wraps_around_edges(self) -> None:
        picture = indexed(4, 4)
        # jitter larger than the picture still lands in bounds
        result = GlassFilterService().glass_filter(picture, 9, rng=np.random.default_rng(0))
        assert result.shape == (4, 4)
        assert (result.pixels[:, :, 0] < 4).all()
        assert (result.pixels[:, :, 1] < 4).all()

    def test_offsets_wrap_instead_of_clamping(self) -> None:
        picture = indexed(4, 5)
        # every row offset is -1, every column offset is +1
        rng = FixedOffsets(np.full((4, 5), -1), np.full((4, 5), 1))
        result = GlassFilterService().glass_filter(picture, 1, rng=rng)
        assert result.pixels[0, :, 0].tolist() == [3] * 5
        assert result.pixels[1, :, 0].tolist() == [0] * 5
        assert result.pixels[:, 4, 1].tolist() == [0] * 4
        assert result.pixels[:, 0, 1].tolist() == [1] * 4
        assert rng.calls == [(-1, 2, (4, 5)), (-1, 2, (4, 5))]

    def test_source_preserved(self, glass: GlassFilterService, gradient: Picture) -> None:
        before = gradient.clone()
        glass.glass_filter(gradient, 1)
        assert gradient == before

    def test_negative_jitter(self, glass: GlassFilterService, gradient: Picture) -> None:
        with pytest.raises(InvalidParameter):
            glass.glass_filter(gradient, -1)

    def test_seed_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GLASS_RANDOM_SEED", "99")
        assert GlassFilterService().seed == 99
        monkeypatch.delenv("GLASS_RANDOM_SEED")
        assert GlassFilterService().seed is None
