"""Боковая панель: открытие файла, информация, результаты стадий, параметры настроения.

Принципы:
- SRP: управляет только UI, не содержит алгоритмов проверки.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

import customtkinter as ctk

from badge_checker.config import settings
from badge_checker.models.image_model import ImageData
from badge_checker.models.verdict import PipelineReport, Stage

_PASS_COLOR = "#2FA84F"
_FAIL_COLOR = "#E5484D"
_IDLE_COLOR = "gray60"


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: файл, информация, курсор, проверки, настроение."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_params_change: Optional[Callable[[], None]] = None
        self.on_convert: Optional[Callable[[], None]] = None
        self.on_circle_toggle: Optional[Callable[[bool], None]] = None

        bold = ctk.CTkFont(size=16, weight="bold")

        # Controls
        self._title = ctk.CTkLabel(self, text="Инструменты", font=bold)
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=bold)
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=6, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=bold)
        self._cursor_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgba_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")

        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgba = ctk.CTkLabel(self, textvariable=self._cursor_rgba_val, anchor="w", justify="left")
        self._cursor_hex = ctk.CTkLabel(self, textvariable=self._cursor_hex_val, anchor="w", justify="left")

        self._cursor_xy.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgba.grid(row=9, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_hex.grid(row=10, column=0, padx=8, pady=(0, 2), sticky="ew")

        # Checks section: одна строка на стадию
        self._checks_title = ctk.CTkLabel(self, text="Проверки", font=bold)
        self._checks_title.grid(row=11, column=0, padx=8, pady=(8, 4), sticky="w")

        self._stage_labels: Dict[Stage, ctk.CTkLabel] = {}
        for i, stage in enumerate(Stage):
            label = ctk.CTkLabel(self, text="—", anchor="w", justify="left", wraplength=250, text_color=_IDLE_COLOR)
            label.grid(row=12 + i, column=0, padx=8, pady=(0, 2), sticky="ew")
            self._stage_labels[stage] = label

        self._circle_var = ctk.BooleanVar(value=True)
        self._circle_check = ctk.CTkCheckBox(
            self, text="Показывать круг", variable=self._circle_var, command=self._emit_circle_toggle
        )
        self._circle_check.grid(row=15, column=0, padx=8, pady=(6, 4), sticky="w")

        # Mood params
        self._mood_title = ctk.CTkLabel(self, text="Настроение", font=bold)
        self._mood_title.grid(row=16, column=0, padx=8, pady=(8, 4), sticky="w")

        self._color_thr_val = ctk.StringVar(value=str(settings.COLOR_THRESHOLD))
        self._color_thr_label = ctk.CTkLabel(self, text="Допуск цвета (по каналу):")
        self._color_thr_slider = ctk.CTkSlider(
            self, from_=0, to=255, number_of_steps=255, command=self._on_color_thr_change
        )
        self._color_thr_slider.set(settings.COLOR_THRESHOLD)
        self._color_thr_value = ctk.CTkLabel(self, textvariable=self._color_thr_val, width=48, anchor="w")
        self._color_thr_label.grid(row=17, column=0, padx=8, pady=(0, 2), sticky="w")
        self._color_thr_slider.grid(row=18, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._color_thr_value.grid(row=19, column=0, padx=8, pady=(0, 6), sticky="w")

        self._coverage_val = ctk.StringVar(value=f"{int(settings.COVERAGE_THRESHOLD * 100)}%")
        self._coverage_label = ctk.CTkLabel(self, text="Минимальное покрытие:")
        self._coverage_slider = ctk.CTkSlider(
            self, from_=0, to=100, number_of_steps=100, command=self._on_coverage_change
        )
        self._coverage_slider.set(settings.COVERAGE_THRESHOLD * 100)
        self._coverage_value = ctk.CTkLabel(self, textvariable=self._coverage_val, width=48, anchor="w")
        self._coverage_label.grid(row=20, column=0, padx=8, pady=(0, 2), sticky="w")
        self._coverage_slider.grid(row=21, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._coverage_value.grid(row=22, column=0, padx=8, pady=(0, 6), sticky="w")

        # filler
        self.grid_rowconfigure(99, weight=1)

        self._convert_btn = ctk.CTkButton(self, text="Конвертировать", command=self._emit_convert, state="disabled")
        self._convert_btn.grid(row=100, column=0, padx=8, pady=(0, 8), sticky="ew")

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path))
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(f"{image_data.format or '?'} / {image_data.mode}")

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGBA, HEX)."""
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgba_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, a = rgba
        self._cursor_rgba_val.set(f"RGBA: {r}, {g}, {b}, {a}")
        self._cursor_hex_val.set(f"HEX: {_rgba_to_hex(rgba)}")

    def set_report(self, report: Optional[PipelineReport]) -> None:
        """Показывает вердикты стадий; невыполненные стадии помечаются как пропущенные."""
        ran = {v.stage: v for v in report.verdicts} if report is not None else {}
        for stage, label in self._stage_labels.items():
            verdict = ran.get(stage)
            if verdict is None:
                label.configure(text="—" if report is None else "пропущено", text_color=_IDLE_COLOR)
            else:
                label.configure(text=verdict.message, text_color=_PASS_COLOR if verdict.passed else _FAIL_COLOR)
        self.set_convert_enabled(report is not None and report.passed)

    def set_convert_enabled(self, enabled: bool) -> None:
        self._convert_btn.configure(state="normal" if enabled else "disabled")

    def get_mood_params(self) -> Tuple[int, float]:
        """Возвращает (допуск цвета, порог покрытия в [0, 1])."""
        color_thr = int(round(self._color_thr_slider.get()))
        coverage = round(self._coverage_slider.get()) / 100.0
        return color_thr, coverage

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_convert(self) -> None:
        if self.on_convert:
            self.on_convert()

    def _emit_circle_toggle(self) -> None:
        if self.on_circle_toggle:
            self.on_circle_toggle(bool(self._circle_var.get()))

    def _on_color_thr_change(self, value: float) -> None:
        self._color_thr_val.set(str(int(round(value))))
        if self.on_params_change:
            self.on_params_change()

    def _on_coverage_change(self, value: float) -> None:
        self._coverage_val.set(f"{int(round(value))}%")
        if self.on_params_change:
            self.on_params_change()

    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        size = float(size_bytes)
        for unit in ("Б", "КБ", "МБ", "ГБ"):
            if size < 1024 or unit == "ГБ":
                return f"{size:.0f} {unit}" if unit == "Б" else f"{size:.1f} {unit}"
            size /= 1024
