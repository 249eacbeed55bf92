from __future__ import annotations

from typing import Optional

import customtkinter as ctk

from badge_checker.controllers.app_controller import AppController
from badge_checker.controllers.badge_controller import BadgeController
from badge_checker.ui.image_viewer import ImageViewer
from badge_checker.ui.sidebar import Sidebar
from badge_checker.ui.bottom_bar import BottomBar


class BadgeInspectorApp(ctk.CTk):
    def __init__(self, badge_controller: Optional[BadgeController] = None) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Badge Inspector")
        self.minsize(900, 600)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            badges=badge_controller or BadgeController(),
        )
        self._controller.bind_events()
