"""Контроллер окна: оркестрация UI и проверки бейджа.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики анализа пикселей).
- DIP: проверка и конвертация делегируются `BadgeController`.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from tkinter import filedialog, TclError
from typing import Optional, Tuple

import customtkinter as ctk

from badge_checker.controllers.badge_controller import BadgeController
from badge_checker.exceptions import ConfigurationError, ConversionError, DecodeError
from badge_checker.models.image_model import ImageData
from badge_checker.models.verdict import FailureReason, PipelineReport
from badge_checker.services.pipeline import BadgeValidationPipeline
from badge_checker.ui.image_viewer import ImageViewer
from badge_checker.ui.sidebar import Sidebar
from badge_checker.ui.bottom_bar import BottomBar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с проверкой бейджа.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображения и прогон конвейера при открытии и смене параметров.
    - Конвертация принятого бейджа по кнопке.
    - Синхронизация состояния зума.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    badges: BadgeController

    _current_image: Optional[ImageData] = None
    _report: Optional[PipelineReport] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_params_change = self._handle_params_change
        self.sidebar.on_convert = self._handle_convert
        self.sidebar.on_circle_toggle = self.viewer.set_circle_visible

        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение бейджа",
                filetypes=(
                    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            image_data = self.badges.load(file_path)
        except (FileNotFoundError, DecodeError) as exc:
            logger.error("Decode failed: %s", exc)
            self.bottom.set_status(f"Загрузка: ошибка, {exc}", ok=False)
            return
        self._current_image = image_data

        self.viewer.set_image(image_data.pil_image)
        self.sidebar.set_image_info(image_data)
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())
        self._run_validation()

    def _handle_params_change(self) -> None:
        if self._current_image is None:
            return
        self._run_validation()

    def _handle_convert(self) -> None:
        if self._current_image is None or self._report is None or not self._report.passed:
            return
        try:
            output = self.badges.convert(self._current_image)
        except ConversionError as exc:
            logger.error("Conversion failed: %s", exc)
            self.bottom.set_status(f"Конвертация: ошибка, {exc}", ok=False)
            return
        self.bottom.set_status(f"Конвертация: сохранено в {output}", ok=True)

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgba)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # Sync bottom slider when user zooms with mouse wheel
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    # ---- Helpers ----
    def _run_validation(self) -> None:
        """Пересобирает конвейер с параметрами из сайдбара и проверяет текущее изображение."""
        if self._current_image is None:
            return
        color_thr, coverage = self.sidebar.get_mood_params()
        config = self.badges.pipeline.config
        try:
            mood = replace(config.mood, color_threshold=color_thr, coverage_threshold=coverage)
        except ConfigurationError as exc:
            self.bottom.set_status(str(exc), ok=False)
            return
        self.badges.pipeline = BadgeValidationPipeline(replace(config, mood=mood))

        report = self.badges.validate(self._current_image)
        self._report = report
        self.sidebar.set_report(report)
        verdict = report.verdict
        self.viewer.set_marker(verdict.pixel if verdict.reason is FailureReason.PIXEL_OUTSIDE_CIRCLE else None)
        self.bottom.set_status(verdict.message, ok=report.passed)
