"""Неизменяемая конфигурация валидаторов.

Значения по умолчанию берутся из `config.settings`; переопределение
создаёт новый объект (`dataclasses.replace`), глобальное состояние не меняется.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from badge_checker.config import settings
from badge_checker.exceptions import ConfigurationError
from badge_checker.models.palette import HAPPY_PALETTE, ReferencePalette


@dataclass(frozen=True)
class MoodConfig:
    """Параметры эвристики настроения.

    Fields:
        palette: Эталонные цвета.
        color_threshold: Допуск по каждому каналу (строгое `<`).
        coverage_threshold: Минимальная доля совпавших пикселей, [0, 1].
    """
    palette: ReferencePalette = HAPPY_PALETTE
    color_threshold: int = settings.COLOR_THRESHOLD
    coverage_threshold: float = settings.COVERAGE_THRESHOLD

    def __post_init__(self) -> None:
        validate_mood_params(self.palette, self.color_threshold, self.coverage_threshold)


@dataclass(frozen=True)
class PipelineConfig:
    expected_size: int = settings.BADGE_SIZE
    mood: MoodConfig = field(default_factory=MoodConfig)

    def __post_init__(self) -> None:
        if self.expected_size <= 0:
            raise ConfigurationError(
                f"Размер бейджа должен быть положительным: {self.expected_size}", field="expected_size"
            )


def validate_mood_params(palette: ReferencePalette, color_threshold: int, coverage_threshold: float) -> None:
    if not isinstance(palette, ReferencePalette):
        raise ConfigurationError("Ожидается ReferencePalette", field="palette")
    if color_threshold < 0:
        raise ConfigurationError(f"Допуск цвета не может быть отрицательным: {color_threshold}", field="color_threshold")
    if not 0.0 <= coverage_threshold <= 1.0:
        raise ConfigurationError(
            f"Порог покрытия должен быть в [0, 1]: {coverage_threshold}", field="coverage_threshold"
        )
