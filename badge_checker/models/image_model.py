"""Модели данных для изображений-кандидатов.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from badge_checker.models.raster import RgbaRaster


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель загруженного бейджа и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (RGBA) для отображения.
        raster: Полностью декодированный растр для валидаторов.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "P" или "RGBA".
        format: Формат файла по данным PIL ("PNG", "JPEG", ...).
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    raster: RgbaRaster
    width: int
    height: int
    mode: str
    format: Optional[str]
    size_bytes: Optional[int]
