"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за декодирование и базовое извлечение свойств.
- Растр отдаётся валидаторам целиком: частично декодированных изображений нет.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from badge_checker.exceptions import DecodeError
from badge_checker.models.image_model import ImageData
from badge_checker.models.raster import RgbaRaster

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c изображением PIL (RGBA), растром, размерами и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            DecodeError: если файл не распознан как изображение или повреждён.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as src:
                source_mode = src.mode
                source_format = src.format
                # convert() форсирует полное декодирование
                pil_image = src.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Файл не является изображением: {path}", path=str(path)) from exc
        except (Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"Не удалось декодировать {path}: {exc}", path=str(path)) from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug("Loaded %s: %dx%d %s (%s)", path, width, height, source_mode, source_format)
        return ImageData(
            path=path,
            pil_image=pil_image,
            raster=RgbaRaster.from_pil(pil_image),
            width=width,
            height=height,
            mode=source_mode,
            format=source_format,
            size_bytes=size_bytes,
        )
