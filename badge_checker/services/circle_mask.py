from __future__ import annotations

import logging

import numpy as np

from badge_checker.config import settings
from badge_checker.models.raster import RasterImage, to_rgba_array
from badge_checker.models.verdict import Stage, ValidationVerdict

logger = logging.getLogger(__name__)


class CircleMaskValidator:
    """Проверка, что все непрозрачные пиксели лежат во вписанной окружности.

    `expected_size` — фиксированная сторона квадрата, которую проверяет
    стадия размеров конвейера; сам `check` работает с любым квадратным растром.
    """

    def __init__(self, expected_size: int = settings.BADGE_SIZE) -> None:
        self.expected_size = expected_size

    def accepts(self, image: RasterImage) -> bool:
        return image.width == self.expected_size and image.height == self.expected_size

    def check(self, image: RasterImage) -> ValidationVerdict:
        """
        Центр (w/2, h/2), радиус w/2 (без округления). Пиксель с alpha != 0
        и расстоянием до центра > радиуса — отказ. Граница включительно.
        Сообщается первый такой пиксель в порядке строк (сверху вниз, слева направо).
        """
        if image.width != image.height:
            raise ValueError(f"Ожидается квадратный растр, получено {image.width}x{image.height}")

        rgba = to_rgba_array(image)
        center_x = image.width / 2
        center_y = image.height / 2
        radius = image.width / 2

        ys, xs = np.indices((image.height, image.width), dtype=np.float64)
        dist = np.sqrt((xs - center_x) ** 2 + (ys - center_y) ** 2)
        outside = (rgba[..., 3] != 0) & (dist > radius)

        # argwhere возвращает индексы (y, x) в порядке обхода строк
        hits = np.argwhere(outside)
        if hits.size:
            y, x = (int(v) for v in hits[0])
            logger.debug("Pixel (%d, %d) lies outside the circle (radius %.1f)", x, y, radius)
            return ValidationVerdict.pixel_outside_circle(x, y)
        return ValidationVerdict.ok(Stage.CIRCLE)
