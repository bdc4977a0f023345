"""Key routing: (prompt stack, explorer focus, key) -> Action.

Keys are prompt_toolkit key names normalized by ``normalize_key``: ``up``,
``down``, ``enter``, ``escape``, ``backspace``, ``c-<letter>``, or a single
printable character. Routing never mutates anything; the controller executes
the returned action.
"""

from dataclasses import dataclass
from typing import Union

from core import ExplorerState, Pane
from interface import tui_prompts
from interface.tui_prompts import ConfirmPrompt, InputPrompt, Prompt, PromptStack, SelectPrompt

KEY_ALIASES = {
    "c-m": "enter",
    "c-h": "backspace",
    "c-i": "tab",
    "c-@": "c-space",
}


@dataclass(frozen=True)
class Noop:
    pass


@dataclass(frozen=True)
class Navigate:
    delta: int


@dataclass(frozen=True)
class OpenPrompt:
    prompt: Prompt


@dataclass(frozen=True)
class CommitPrompt:
    pass


@dataclass(frozen=True)
class CancelPrompt:
    pass


@dataclass(frozen=True)
class TypeChar:
    char: str


@dataclass(frozen=True)
class EraseChar:
    pass


@dataclass(frozen=True)
class ToggleLayout:
    collapsed: bool


@dataclass(frozen=True)
class Quit:
    pass


Action = Union[Noop, Navigate, OpenPrompt, CommitPrompt, CancelPrompt, TypeChar, EraseChar, ToggleLayout, Quit]


def normalize_key(name: str, data: str = "") -> str:
    """Map a prompt_toolkit key (and its raw data for Keys.Any) to a router key."""
    if name == "<any>":
        return data if len(data) == 1 and data.isprintable() else ""
    return KEY_ALIASES.get(name, name)


def route_key(prompts: PromptStack, explorer: ExplorerState, key: str) -> Action:
    prompt = prompts.top
    if prompt is not None:
        return _route_prompt(prompt, key)
    return _route_idle(explorer, key)


def _route_prompt(prompt: Prompt, key: str) -> Action:
    if key == "escape":
        return CancelPrompt()
    if key == "enter":
        return CommitPrompt() if prompt.can_commit() else Noop()

    if isinstance(prompt, InputPrompt):
        if key == "backspace":
            return EraseChar()
        if len(key) == 1:
            return TypeChar(key)
        return Noop()

    if isinstance(prompt, SelectPrompt):
        if key in ("up", "c-k"):
            return Navigate(-1)
        if key in ("down", "c-j"):
            return Navigate(1)
        if key == "backspace":
            return EraseChar()
        if key == "c-n":
            return OpenPrompt(tui_prompts.new_tag(prompt.search))
        if key == "c-d":
            tag_id = prompt.options.selected_id()
            if tag_id is None:
                return Noop()
            return OpenPrompt(tui_prompts.delete_tag(tag_id))
        if len(key) == 1:
            return TypeChar(key)
        return Noop()

    if isinstance(prompt, ConfirmPrompt):
        if key == "y":
            return CommitPrompt()
        if key == "n":
            return CancelPrompt()
    return Noop()


def _route_idle(explorer: ExplorerState, key: str) -> Action:
    focus = explorer.focus
    if key == "q":
        return Quit()
    if key == "escape":
        return ToggleLayout(False) if focus is Pane.MAIN else Quit()
    if key == "enter":
        return ToggleLayout(True) if focus is Pane.EXPLORER else Noop()
    if key in ("<", ">"):
        return ToggleLayout(key == "<")
    if focus is Pane.EXPLORER:
        return _route_projects(explorer, key)
    return _route_tasks(explorer, key)


def _route_projects(explorer: ExplorerState, key: str) -> Action:
    if key in ("up", "k"):
        return Navigate(-1)
    if key in ("down", "j"):
        return Navigate(1)
    if key == "N":
        return OpenPrompt(tui_prompts.new_project())
    if key == "D":
        project_id = explorer.projects.selected_id()
        if project_id is not None:
            return OpenPrompt(tui_prompts.delete_project(project_id))
    return Noop()


def _route_tasks(explorer: ExplorerState, key: str) -> Action:
    project_id = explorer.projects.selected_id()
    if project_id is None or explorer.tasks is None:
        return Noop()
    if key in ("up", "k"):
        return Navigate(-1)
    if key in ("down", "j"):
        return Navigate(1)
    if key == "N":
        return OpenPrompt(tui_prompts.new_task(project_id))
    task_id = explorer.tasks.selected_id()
    if task_id is None:
        return Noop()
    if key == "D":
        return OpenPrompt(tui_prompts.delete_task(task_id))
    if key == "t":
        return OpenPrompt(tui_prompts.tag_task(task_id))
    return Noop()


__all__ = [
    "Action",
    "Noop",
    "Navigate",
    "OpenPrompt",
    "CommitPrompt",
    "CancelPrompt",
    "TypeChar",
    "EraseChar",
    "ToggleLayout",
    "Quit",
    "normalize_key",
    "route_key",
]
