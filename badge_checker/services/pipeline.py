"""Конвейер проверки бейджа: размер → круглая маска → настроение.

Принципы:
- Ранний выход: после первого отказа следующие стадии не выполняются.
- Без изменяемого состояния: один экземпляр можно вызывать повторно
  на разных изображениях.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from badge_checker.models.raster import RasterImage
from badge_checker.models.validation_config import PipelineConfig
from badge_checker.models.verdict import PipelineReport, Stage, ValidationVerdict
from badge_checker.services.circle_mask import CircleMaskValidator
from badge_checker.services.mood_classifier import MoodClassifier

logger = logging.getLogger(__name__)


class BadgeValidationPipeline:
    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        self.config = config if config is not None else PipelineConfig()
        self._circle = CircleMaskValidator(expected_size=self.config.expected_size)
        self._mood = MoodClassifier(self.config.mood)
        self._stages: Tuple[Callable[[RasterImage], ValidationVerdict], ...] = (
            self._check_dimensions,
            self._circle.check,
            self._mood.classify,
        )

    def evaluate(self, image: RasterImage) -> PipelineReport:
        """Выполняет стадии по порядку и возвращает вердикты выполненных стадий."""
        verdicts: List[ValidationVerdict] = []
        for stage in self._stages:
            verdict = stage(image)
            verdicts.append(verdict)
            # отказ стадии — ожидаемый результат, а не предупреждение
            logger.info(verdict.message)
            if not verdict.passed:
                break
        return PipelineReport(tuple(verdicts))

    def validate(self, image: RasterImage) -> ValidationVerdict:
        return self.evaluate(image).verdict

    def _check_dimensions(self, image: RasterImage) -> ValidationVerdict:
        if not self._circle.accepts(image):
            return ValidationVerdict.bad_dimensions(image.width, image.height)
        return ValidationVerdict.ok(Stage.DIMENSIONS)
