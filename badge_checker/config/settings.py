"""Централизованные константы проверки бейджей.

Все «магические» числа (размер, пороги, палитра, формат вывода) живут здесь.
Изменяемые значения в рантайме не хранятся: конфигурация собирается
в неизменяемые dataclass-ы (`models.validation_config`).
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Геометрия бейджа
# ---------------------------------------------------------------------------

BADGE_SIZE = 512

# ---------------------------------------------------------------------------
# Настроение (цветовая эвристика)
# ---------------------------------------------------------------------------

COLOR_THRESHOLD = 30
COVERAGE_THRESHOLD = 0.75

# «Радостные» цвета (r, g, b)
HAPPY_COLORS = (
    (255, 223, 0),  # yellow
)

# ---------------------------------------------------------------------------
# Конвертация
# ---------------------------------------------------------------------------

CONVERTED_SUFFIX = "_converted"
OUTPUT_FORMAT = "PNG"
OUTPUT_EXTENSION = ".png"

# ---------------------------------------------------------------------------
# Логирование
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
