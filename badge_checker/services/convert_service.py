"""Конвертация принятого изображения в нормализованный бейдж (PNG 512x512)."""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from badge_checker.config import settings
from badge_checker.exceptions import ConversionError

logger = logging.getLogger(__name__)


class ConvertService:
    def __init__(
        self,
        size: int = settings.BADGE_SIZE,
        suffix: str = settings.CONVERTED_SUFFIX,
        overwrite: bool = True,
    ) -> None:
        self.size = size
        self.suffix = suffix
        self.overwrite = overwrite

    def derive_output_path(self, input_path: str | Path) -> Path:
        """`dir/name.ext` -> `dir/name<suffix>.png`; без расширения суффикс дописывается."""
        path = Path(input_path)
        return path.with_name(f"{path.stem}{self.suffix}{settings.OUTPUT_EXTENSION}")

    def convert(self, input_path: str | Path, output_path: str | Path | None = None) -> Path:
        """Масштабирует исходный файл до size x size и сохраняет как PNG.

        Raises:
            ConversionError: если исходник не читается, цель занята
                (при `overwrite=False`) или запись не удалась.
        """
        src = Path(input_path)
        dst = Path(output_path) if output_path is not None else self.derive_output_path(src)

        if dst.exists():
            if not self.overwrite:
                raise ConversionError(
                    f"Файл уже существует: {dst}", input_path=str(src), output_path=str(dst)
                )
            logger.warning("Overwriting existing file %s", dst)

        try:
            with Image.open(src) as image:
                # P/LA/L и т.п. приводим к RGBA, чтобы сохранить прозрачность
                badge = image.convert("RGBA").resize((self.size, self.size), Image.Resampling.LANCZOS)
            badge.save(dst, settings.OUTPUT_FORMAT, optimize=True)
        except (Image.DecompressionBombError, OSError, ValueError) as exc:
            raise ConversionError(
                f"Конвертация не удалась: {exc}", input_path=str(src), output_path=str(dst)
            ) from exc

        logger.info("Image converted and saved to %s", dst)
        return dst
