from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from badge_checker.models.palette import ReferencePalette
from badge_checker.models.raster import RasterImage, to_rgba_array
from badge_checker.models.validation_config import MoodConfig, validate_mood_params
from badge_checker.models.verdict import Stage, ValidationVerdict

logger = logging.getLogger(__name__)


def matching_mask(rgb: np.ndarray, palette: ReferencePalette, color_threshold: int) -> np.ndarray:
    """
    Булева маска (H, W): пиксель близок хотя бы к одному цвету палитры,
    если |r-p.r| < t и |g-p.g| < t и |b-p.b| < t (строго, по каждому каналу).
    """
    # int16: разность uint8 не должна переполняться
    px = rgb[..., :3].astype(np.int16)
    pal = np.array([c.as_tuple() for c in palette], dtype=np.int16)
    diff = np.abs(px[..., np.newaxis, :] - pal)  # (H, W, P, 3)
    close = np.all(diff < color_threshold, axis=-1)  # (H, W, P)
    return np.any(close, axis=-1)


class MoodClassifier:
    """Эвристика «настроения»: доля пикселей, близких к эталонной палитре."""

    def __init__(self, config: Optional[MoodConfig] = None) -> None:
        self.config = config if config is not None else MoodConfig()

    def coverage(
        self,
        image: RasterImage,
        palette: Optional[ReferencePalette] = None,
        color_threshold: Optional[int] = None,
    ) -> float:
        """Доля совпавших пикселей по всему растру; альфа-канал игнорируется."""
        palette = palette if palette is not None else self.config.palette
        color_threshold = color_threshold if color_threshold is not None else self.config.color_threshold
        rgba = to_rgba_array(image)
        matching = int(np.count_nonzero(matching_mask(rgba, palette, color_threshold)))
        return matching / (image.width * image.height)

    def classify(
        self,
        image: RasterImage,
        palette: Optional[ReferencePalette] = None,
        color_threshold: Optional[int] = None,
        coverage_threshold: Optional[float] = None,
    ) -> ValidationVerdict:
        """Каждый аргумент независимо переопределяет значение из конфигурации."""
        palette = palette if palette is not None else self.config.palette
        color_threshold = color_threshold if color_threshold is not None else self.config.color_threshold
        coverage_threshold = (
            coverage_threshold if coverage_threshold is not None else self.config.coverage_threshold
        )
        validate_mood_params(palette, color_threshold, coverage_threshold)

        cov = self.coverage(image, palette, color_threshold)
        logger.debug("Mood coverage %.4f (threshold %.2f)", cov, coverage_threshold)
        if cov >= coverage_threshold:
            return ValidationVerdict.ok(Stage.MOOD, coverage=cov)
        return ValidationVerdict.mood_mismatch(cov)
