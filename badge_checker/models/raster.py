"""Минимальный интерфейс доступа к пикселям растра.

Валидаторы зависят только от `RasterImage` (`width`, `height`, `pixel`),
а не от внутреннего представления декодера.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Protocol

import numpy as np
from PIL import Image


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int


class RasterImage(Protocol):
    """Неизменяемое представление декодированного изображения."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def pixel(self, x: int, y: int) -> Rgba: ...


@dataclass(frozen=True)
class RgbaRaster:
    """Растр поверх массива numpy формы (H, W, 4), dtype uint8.

    Массив помечается как read-only: валидаторы не могут его изменить.
    """
    data: np.ndarray

    def __post_init__(self) -> None:
        arr = np.asarray(self.data)
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError(f"Ожидается массив (H, W, 4), получено {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError("Растр не может быть пустым")
        if arr.dtype != np.uint8:
            if arr.min() < 0 or arr.max() > 255:
                raise ValueError("Значения каналов должны быть в диапазоне 0..255")
            arr = arr.astype(np.uint8)
        else:
            arr = arr.copy()
        arr.setflags(write=False)
        object.__setattr__(self, "data", arr)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RgbaRaster":
        """Строит растр из изображения PIL (любой режим приводится к RGBA)."""
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return cls(np.asarray(rgba, dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def pixel(self, x: int, y: int) -> Rgba:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Пиксель ({x}, {y}) вне растра {self.width}x{self.height}")
        r, g, b, a = (int(v) for v in self.data[y, x])
        return Rgba(r, g, b, a)

    def as_array(self) -> np.ndarray:
        return self.data


def to_rgba_array(image: RasterImage) -> np.ndarray:
    """Возвращает пиксели растра массивом (H, W, 4) uint8.

    Для `RgbaRaster` это его собственный буфер; для прочих реализаций
    интерфейса массив собирается построчно через `pixel(x, y)`.
    """
    as_array = getattr(image, "as_array", None)
    if as_array is not None:
        return np.asarray(as_array(), dtype=np.uint8)
    out = np.empty((image.height, image.width, 4), dtype=np.uint8)
    for y in range(image.height):
        for x in range(image.width):
            out[y, x] = image.pixel(x, y)
    return out
