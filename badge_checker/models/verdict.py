"""Результаты проверок: вердикт стадии и сводный отчёт конвейера.

Принципы:
- Ошибка валидации — ожидаемый типизированный результат, а не исключение.
- Неизменяемость: вердикт создаётся заново на каждый прогон.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Stage(str, Enum):
    DIMENSIONS = "dimensions"
    CIRCLE = "circle"
    MOOD = "mood"


class FailureReason(str, Enum):
    BAD_DIMENSIONS = "bad_dimensions"
    PIXEL_OUTSIDE_CIRCLE = "pixel_outside_circle"
    MOOD_MISMATCH = "mood_mismatch"


_STAGE_TITLES = {
    Stage.DIMENSIONS: "Размер",
    Stage.CIRCLE: "Круглая маска",
    Stage.MOOD: "Настроение",
}


@dataclass(frozen=True)
class ValidationVerdict:
    """`Pass` или `Fail(reason)` одной стадии.

    Fields:
        stage: Стадия, выдавшая вердикт.
        reason: Причина отказа; `None` для успешного вердикта.
        size: Фактический размер (w, h) для BAD_DIMENSIONS.
        pixel: Первый пиксель (x, y) вне круга для PIXEL_OUTSIDE_CIRCLE.
        coverage: Доля совпавших пикселей (заполняется стадией MOOD всегда).
    """
    stage: Stage
    reason: Optional[FailureReason] = None
    size: Optional[Tuple[int, int]] = None
    pixel: Optional[Tuple[int, int]] = None
    coverage: Optional[float] = None

    @property
    def passed(self) -> bool:
        return self.reason is None

    # ---- Конструкторы ----
    @classmethod
    def ok(cls, stage: Stage, *, coverage: Optional[float] = None) -> "ValidationVerdict":
        return cls(stage=stage, coverage=coverage)

    @classmethod
    def bad_dimensions(cls, width: int, height: int) -> "ValidationVerdict":
        return cls(stage=Stage.DIMENSIONS, reason=FailureReason.BAD_DIMENSIONS, size=(width, height))

    @classmethod
    def pixel_outside_circle(cls, x: int, y: int) -> "ValidationVerdict":
        return cls(stage=Stage.CIRCLE, reason=FailureReason.PIXEL_OUTSIDE_CIRCLE, pixel=(x, y))

    @classmethod
    def mood_mismatch(cls, coverage: float) -> "ValidationVerdict":
        return cls(stage=Stage.MOOD, reason=FailureReason.MOOD_MISMATCH, coverage=coverage)

    @property
    def message(self) -> str:
        """Человекочитаемая строка статуса (текст не является контрактом)."""
        title = _STAGE_TITLES[self.stage]
        if self.reason is None:
            if self.stage is Stage.MOOD and self.coverage is not None:
                return f"{title}: OK (покрытие {self.coverage:.1%})"
            return f"{title}: OK"
        if self.reason is FailureReason.BAD_DIMENSIONS:
            w, h = self.size or (0, 0)
            return f"{title}: ошибка, изображение {w}x{h} px"
        if self.reason is FailureReason.PIXEL_OUTSIDE_CIRCLE:
            x, y = self.pixel or (0, 0)
            return f"{title}: ошибка, пиксель ({x}, {y}) вне круга"
        return f"{title}: ошибка, покрытие {self.coverage or 0.0:.1%} ниже порога"


@dataclass(frozen=True)
class PipelineReport:
    """Вердикты стадий в порядке выполнения; после первого отказа стадий нет."""
    verdicts: Tuple[ValidationVerdict, ...]

    @property
    def verdict(self) -> ValidationVerdict:
        return self.verdicts[-1]

    @property
    def passed(self) -> bool:
        return self.verdict.passed

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(v.message for v in self.verdicts)
