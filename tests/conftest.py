"""Shared test fixtures for picturelab.

Small synthetic pictures with known channel values so each test can
reason about exact outputs.
"""

from __future__ import annotations

import numpy as np
import pytest

from picturelab.models.picture import Picture


@pytest.fixture()
def gradient() -> Picture:
    """3 rows x 4 columns, every pixel a different colour."""
    pixels = np.zeros((3, 4, 3), dtype=np.uint8)
    for y in range(3):
        for x in range(4):
            pixels[y, x] = (10 * x + 40 * y, 5 * x + 100, 200 - 20 * y)
    return Picture(pixels)


@pytest.fixture()
def column_ids() -> Picture:
    """2 rows x 5 columns; red holds the column index, green the row index."""
    pixels = np.zeros((2, 5, 3), dtype=np.uint8)
    for y in range(2):
        for x in range(5):
            pixels[y, x] = (x, y, 0)
    return Picture(pixels)


@pytest.fixture()
def row_ids() -> Picture:
    """5 rows x 2 columns; red holds the row index."""
    pixels = np.zeros((5, 2, 3), dtype=np.uint8)
    for y in range(5):
        pixels[y, :] = (y, 0, 0)
    return Picture(pixels)
