"""Цвета и эталонная палитра «настроения».

Принципы:
- SRP: только структура данных и разбор строковых значений цвета.
- Неизменяемость (`frozen=True`): палитра задаётся один раз при старте.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from badge_checker.config import settings
from badge_checker.exceptions import ConfigurationError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Color:
    """Цвет без альфа-канала, каналы 0..255."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ConfigurationError(f"Канал {name}={value!r} вне диапазона 0..255", field=name)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Разбирает `#RRGGBB`, `RRGGBB` или `r,g,b`."""
        text = text.strip()
        m = _HEX_RE.match(text)
        if m:
            value = m.group(1)
            return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
        parts = [p.strip() for p in text.split(",")]
        if len(parts) == 3:
            try:
                r, g, b = (int(p) for p in parts)
            except ValueError:
                pass
            else:
                return cls(r, g, b)
        raise ConfigurationError(f"Не удалось разобрать цвет: {text!r}", field="palette")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class ReferencePalette:
    """Упорядоченный непустой набор эталонных цветов."""
    colors: Tuple[Color, ...]

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if not colors:
            raise ConfigurationError("Палитра не может быть пустой", field="palette")
        object.__setattr__(self, "colors", colors)

    @classmethod
    def of(cls, colors: Iterable[Color | Tuple[int, int, int]]) -> "ReferencePalette":
        return cls(tuple(c if isinstance(c, Color) else Color(*c) for c in colors))

    @classmethod
    def parse(cls, text: str) -> "ReferencePalette":
        """Палитра из строки вида `#FFDF00;#FFA500` или `255,223,0;255,165,0`."""
        chunks = [c for c in re.split(r"[;\s]+", text.strip()) if c]
        return cls(tuple(Color.parse(c) for c in chunks))

    def __iter__(self):
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)


HAPPY_PALETTE = ReferencePalette.of(settings.HAPPY_COLORS)
