#!/usr/bin/env python3
"""TUI application - TaskPaneTUI class and cmd_tui command."""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.containers import ConditionalContainer, DynamicContainer, Float, FloatContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style

from application.ports import Storage
from application.workspace import Workspace
from config import get_db_path
from infrastructure.sqlite_storage import SqliteStorage
from interface.tui_controller import TuiController
from interface.tui_footer import build_footer_text
from interface.tui_input import normalize_key
from interface.tui_render import render_main_pane, render_project_list, render_prompt
from interface.tui_themes import DEFAULT_THEME, build_style, get_theme_palette

logger = logging.getLogger("taskpane.tui")

EXPLORER_MAX_WIDTH = 40
SPECIAL_KEYS = ("up", "down", "enter", "backspace", "c-n", "c-d", "c-j", "c-k")


class TaskPaneTUI:
    @staticmethod
    def get_theme_palette(theme: str):
        return get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        db_path: Optional[Path] = None,
        theme: str = DEFAULT_THEME,
        storage: Optional[Storage] = None,
    ):
        if storage is None:
            storage = SqliteStorage(Path(db_path).expanduser() if db_path else get_db_path())
        self.controller = TuiController(Workspace.load(storage))
        self.theme_name = theme
        self.style = self.build_style(theme)

        kb = KeyBindings()
        kb.timeout = 0
        prompt_open = Condition(lambda: bool(self.controller.prompts))

        @kb.add("escape", eager=True)
        def _(event):
            self._dispatch(event, "escape")

        for name in SPECIAL_KEYS:
            kb.add(name)(self._bind(name))

        @kb.add(Keys.Any)
        def _(event):
            self._dispatch(event, normalize_key("<any>", event.data))

        self.project_list = Window(
            content=FormattedTextControl(self.get_project_list_text),
            always_hide_cursor=True,
            wrap_lines=False,
            width=Dimension(max=EXPLORER_MAX_WIDTH, weight=3),
        )
        self.main_pane = Window(
            content=FormattedTextControl(self.get_main_text),
            always_hide_cursor=True,
            wrap_lines=False,
            width=Dimension(weight=7),
        )
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True)
        self.prompt_window = Window(
            content=FormattedTextControl(self.get_prompt_text),
            always_hide_cursor=True,
            style="class:prompt",
        )

        self.body_container = DynamicContainer(self._resolve_body_container)
        root = FloatContainer(
            content=HSplit([self.body_container, self.footer]),
            floats=[
                Float(
                    content=ConditionalContainer(self.prompt_window, filter=prompt_open),
                    width=self._prompt_width,
                )
            ],
        )
        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
        )
        # Esc must not wait for escape-sequence disambiguation; override for slow SSH sessions.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TASKPANE_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return shutil.get_terminal_size((100, 30)).columns
        except OSError:
            return 100

    def _bind(self, name: str):
        def handler(event):
            self._dispatch(event, normalize_key(name))

        return handler

    def _dispatch(self, event, key: str) -> None:
        if self.controller.handle_key(key):
            event.app.exit()

    def _prompt_width(self) -> int:
        return max(30, self.get_terminal_width() * 70 // 100)

    def _explorer_width(self) -> int:
        return min(EXPLORER_MAX_WIDTH, max(20, self.get_terminal_width() * 3 // 10))

    def _resolve_body_container(self):
        if self.controller.explorer.collapsed:
            return self.main_pane
        return VSplit([self.project_list, Window(width=1, char="│", style="class:border"), self.main_pane])

    def get_project_list_text(self):
        return render_project_list(self.controller.explorer, self.controller.store, self._explorer_width())

    def get_main_text(self):
        width = self.get_terminal_width()
        if not self.controller.explorer.collapsed:
            width -= self._explorer_width() + 1
        return render_main_pane(self.controller.explorer, self.controller.store, max(20, width))

    def get_prompt_text(self):
        return render_prompt(self.controller.prompts, self.controller.store, self._prompt_width())

    def get_footer_text(self):
        return build_footer_text(self)

    def run(self) -> None:
        logger.info("tui started")
        try:
            self.app.run()
        finally:
            self.controller.workspace.close()
            logger.info("tui stopped")


def cmd_tui(args) -> int:
    tui = TaskPaneTUI(
        db_path=getattr(args, "db", None),
        theme=getattr(args, "theme", DEFAULT_THEME),
    )
    tui.run()
    return 0
