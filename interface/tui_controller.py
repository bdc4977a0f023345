"""Executes routed actions against the workspace and the prompt stack."""

import logging

from application.workspace import Workspace
from interface.tui_input import (
    Action,
    CancelPrompt,
    CommitPrompt,
    EraseChar,
    Navigate,
    Noop,
    OpenPrompt,
    Quit,
    ToggleLayout,
    TypeChar,
    route_key,
)
from interface.tui_navigation import move_vertical_selection
from interface.tui_prompts import PromptStack

logger = logging.getLogger("taskpane.tui")


class TuiController:
    """Single owner of every mutation reachable from the keyboard."""

    def __init__(self, workspace: Workspace, prompts: PromptStack | None = None):
        self.workspace = workspace
        self.prompts = prompts if prompts is not None else PromptStack()

    @property
    def store(self):
        return self.workspace.store

    @property
    def explorer(self):
        return self.workspace.explorer

    def handle_key(self, key: str) -> bool:
        """Route and execute one key; returns True when the app should quit."""
        if not key:
            return False
        return self.execute(route_key(self.prompts, self.explorer, key))

    def execute(self, action: Action) -> bool:
        if isinstance(action, Quit):
            return True
        if isinstance(action, Noop):
            return False
        if isinstance(action, Navigate):
            move_vertical_selection(self, action.delta)
        elif isinstance(action, OpenPrompt):
            action.prompt.awake(self.store)
            self.prompts.push(action.prompt)
        elif isinstance(action, CancelPrompt):
            self.prompts.cancel()
        elif isinstance(action, CommitPrompt):
            self.prompts.commit(self.workspace)
        elif isinstance(action, TypeChar):
            prompt = self.prompts.top
            if prompt is not None and prompt.type_char(action.char):
                prompt.awake(self.store)
        elif isinstance(action, EraseChar):
            prompt = self.prompts.top
            if prompt is not None and prompt.erase():
                prompt.awake(self.store)
        elif isinstance(action, ToggleLayout):
            self.explorer.set_collapsed(action.collapsed)
        else:
            raise TypeError(f"unsupported action: {action!r}")
        return False


__all__ = ["TuiController"]
