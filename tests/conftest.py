"""
Shared fixtures for the badge checker test suite.

Builds synthetic RGBA rasters with numpy and writes them to temporary
PNG files with Pillow, so individual test modules stay focused on their
assertions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import numpy as np
import pytest
from PIL import Image

from badge_checker.models.raster import RgbaRaster

SIZE = 512
YELLOW = (255, 223, 0)
BLUE = (20, 40, 200)


def solid(color: Tuple[int, int, int], alpha: int = 255, size: int = SIZE) -> np.ndarray:
    arr = np.zeros((size, size, 4), dtype=np.uint8)
    arr[..., :3] = color
    arr[..., 3] = alpha
    return arr


def disc(color: Tuple[int, int, int], size: int = SIZE) -> np.ndarray:
    """Opaque disc inscribed in the square, transparent corners."""
    arr = solid(color, alpha=0, size=size)
    ys, xs = np.indices((size, size))
    inside = np.sqrt((xs - size / 2) ** 2 + (ys - size / 2) ** 2) <= size / 2
    arr[inside, 3] = 255
    return arr


# ---------------------------------------------------------------------------
# Raster fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def transparent_raster() -> RgbaRaster:
    """512x512, alpha 0 everywhere, colour noise underneath."""
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, (SIZE, SIZE, 4), dtype=np.uint8)
    arr[..., 3] = 0
    return RgbaRaster(arr)


@pytest.fixture
def yellow_disc_raster() -> RgbaRaster:
    """A valid happy badge: yellow everywhere, opaque only inside the circle."""
    return RgbaRaster(disc(YELLOW))


@pytest.fixture
def blue_disc_raster() -> RgbaRaster:
    """Circular but the wrong mood."""
    return RgbaRaster(disc(BLUE))


@pytest.fixture
def single_pixel_raster() -> Callable[[int, int], RgbaRaster]:
    """Factory: transparent 512x512 with one opaque pixel at (x, y)."""
    def _make(x: int, y: int) -> RgbaRaster:
        arr = solid(YELLOW, alpha=0)
        arr[y, x, 3] = 255
        return RgbaRaster(arr)
    return _make


# ---------------------------------------------------------------------------
# File fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[[np.ndarray, str], Path]:
    """Factory: save an RGBA array as a PNG under tmp_path."""
    def _write(arr: np.ndarray, name: str = "badge.png") -> Path:
        path = tmp_path / name
        Image.fromarray(arr).save(path, "PNG")
        return path
    return _write


@pytest.fixture
def happy_badge_file(write_png) -> Path:
    return write_png(disc(YELLOW), "happy.png")
