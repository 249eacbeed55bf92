"""Точка входа: проверка бейджа из командной строки или окно инспектора."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from badge_checker.config import settings
from badge_checker.controllers.badge_controller import BadgeController
from badge_checker.exceptions import ConfigurationError
from badge_checker.models.palette import ReferencePalette
from badge_checker.models.validation_config import MoodConfig, PipelineConfig
from badge_checker.services.convert_service import ConvertService
from badge_checker.services.pipeline import BadgeValidationPipeline

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="badge-checker",
        description="Проверка и нормализация круглых бейджей. Без пути запускается окно инспектора.",
    )
    parser.add_argument("image", nargs="?", type=Path, help="Путь к изображению-кандидату")
    parser.add_argument("--size", type=int, default=settings.BADGE_SIZE, help="Требуемая сторона, px")
    parser.add_argument("--color-threshold", type=int, default=settings.COLOR_THRESHOLD,
                        help="Допуск по каждому каналу цвета")
    parser.add_argument("--coverage-threshold", type=float, default=settings.COVERAGE_THRESHOLD,
                        help="Минимальная доля пикселей эталонного цвета, [0, 1]")
    parser.add_argument("--palette", type=str, default=None,
                        help="Эталонные цвета через ';', например '#FFDF00;255,165,0'")
    parser.add_argument("--suffix", type=str, default=settings.CONVERTED_SUFFIX,
                        help="Суффикс имени сконвертированного файла")
    parser.add_argument("--no-convert", action="store_true", help="Только проверка, без конвертации")
    parser.add_argument("--no-overwrite", action="store_true", help="Не перезаписывать существующий файл")
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог")
    return parser


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Собирает конфигурацию из аргументов; ошибки — `ConfigurationError`."""
    mood = MoodConfig(
        color_threshold=args.color_threshold,
        coverage_threshold=args.coverage_threshold,
    )
    if args.palette:
        mood = replace(mood, palette=ReferencePalette.parse(args.palette))
    return PipelineConfig(expected_size=args.size, mood=mood)


def log_level(verbose: bool) -> int:
    # строки статуса печатаются в stdout, лог по умолчанию только для предупреждений
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=log_level(verbose),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
    )


def run_cli(args: argparse.Namespace) -> int:
    try:
        config = build_config(args)
    except ConfigurationError as exc:
        print(f"Ошибка конфигурации ({exc.field}): {exc}", file=sys.stderr)
        return EXIT_ERROR

    controller = BadgeController(
        pipeline=BadgeValidationPipeline(config),
        convert_service=ConvertService(
            size=config.expected_size, suffix=args.suffix, overwrite=not args.no_overwrite
        ),
    )
    result = controller.process(args.image, convert=not args.no_convert)
    for line in result.messages:
        print(line)

    if result.error is not None:
        return EXIT_ERROR
    return EXIT_OK if result.passed else EXIT_REJECTED


def main(argv: Optional[List[str]] = None) -> int:
    """Без пути создаёт и запускает главное окно приложения."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.image is not None:
        return run_cli(args)

    # GUI импортируется лениво: CLI не требует дисплея
    from badge_checker.app import BadgeInspectorApp

    app = BadgeInspectorApp()
    app.mainloop()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
