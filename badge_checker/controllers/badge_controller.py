"""Оркестрация одной проверки: загрузка → конвейер → конвертация.

SOLID:
- SRP: связывает сервисы, сама пиксели не анализирует.
- DIP: сервисы передаются в конструктор и подменяются в тестах.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from badge_checker.exceptions import ConversionError, DecodeError
from badge_checker.models.image_model import ImageData
from badge_checker.models.verdict import PipelineReport
from badge_checker.services.convert_service import ConvertService
from badge_checker.services.image_service import ImageService
from badge_checker.services.pipeline import BadgeValidationPipeline

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Итог обработки одного файла.

    Fields:
        path: Исходный файл.
        image: Загруженные данные (None, если декодирование не удалось).
        report: Вердикты стадий (None, если до проверки не дошло).
        output_path: Путь сконвертированного бейджа.
        error: Ошибка декодера или конвертера.
        messages: Строки статуса по стадиям, в порядке выполнения.
    """
    path: Path
    image: Optional[ImageData] = None
    report: Optional[PipelineReport] = None
    output_path: Optional[Path] = None
    error: Optional[Exception] = None
    messages: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.report is not None and self.report.passed

    @property
    def converted(self) -> bool:
        return self.output_path is not None


@dataclass
class BadgeController:
    pipeline: BadgeValidationPipeline = field(default_factory=BadgeValidationPipeline)
    image_service: ImageService = field(default_factory=ImageService)
    convert_service: ConvertService = field(default_factory=ConvertService)

    def load(self, file_path: str | Path) -> ImageData:
        return self.image_service.load_image(file_path)

    def validate(self, image: ImageData) -> PipelineReport:
        return self.pipeline.evaluate(image.raster)

    def convert(self, image: ImageData) -> Path:
        return self.convert_service.convert(image.path)

    def process(self, file_path: str | Path, convert: bool = True) -> ProcessResult:
        """Полный прогон для одного файла; любой отказ прерывает оставшиеся шаги."""
        result = ProcessResult(path=Path(file_path))
        try:
            result.image = self.load(file_path)
        except (FileNotFoundError, DecodeError) as exc:
            logger.info("Decode failed: %s", exc)
            result.error = exc
            result.messages.append(f"Загрузка: ошибка, {exc}")
            return result

        result.report = self.validate(result.image)
        result.messages.extend(result.report.messages)
        if not result.report.passed or not convert:
            return result

        try:
            result.output_path = self.convert(result.image)
        except ConversionError as exc:
            # вердикт проверки остаётся в силе
            logger.info("Conversion failed: %s", exc)
            result.error = exc
            result.messages.append(f"Конвертация: ошибка, {exc}")
            return result
        result.messages.append(f"Конвертация: сохранено в {result.output_path}")
        return result
