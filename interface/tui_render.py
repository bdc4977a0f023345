#!/usr/bin/env python3
"""Formatted-text builders for the explorer panes and the prompt overlay."""

from typing import Iterable, List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText
from wcwidth import wcswidth, wcwidth

from core import EntityStore, ExplorerState, Pane, SelectionList
from interface.i18n import translate
from interface.tui_prompts import ConfirmPrompt, InputPrompt, Prompt, PromptStack, SelectPrompt

Fragments = List[Tuple[str, str]]


def display_width(text: str) -> int:
    width = wcswidth(text)
    return width if width >= 0 else len(text)


def fit(text: str, width: int) -> str:
    """Clip text to `width` terminal cells, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    out = ""
    used = 0
    for ch in text:
        cell = max(wcwidth(ch), 0)
        if used + cell > width - 1:
            break
        out += ch
        used += cell
    return out + "…"


def bindings_text(pairs: Iterable[Tuple[str, str]]) -> str:
    return ", ".join(f"{key}: {translate(label)}" for key, label in pairs)


def _header(title: str, focused: bool, width: int) -> Fragments:
    style = "class:border.focus" if focused else "class:border"
    label = f"─ {title} "
    return [(style, fit(label + "─" * max(0, width - display_width(label)), width) + "\n")]


def _list_rows(
    selection: SelectionList,
    names: List[str],
    focused: bool,
    width: int,
    bullet: str = "",
) -> Fragments:
    parts: Fragments = []
    selected_style = "class:selected" if focused else "class:selected.unfocused"
    for idx, name in enumerate(names):
        style = selected_style if idx == selection.selected else "class:text"
        if bullet:
            parts.append(("class:text.dim", bullet))
        parts.append((style, fit(name, width - display_width(bullet)) + "\n"))
    if names:
        parts.append(("class:text.dimmer", selection.position_label().rjust(width) + "\n"))
    return parts


def render_project_list(explorer: ExplorerState, store: EntityStore, width: int) -> FormattedText:
    focused = explorer.focus is Pane.EXPLORER
    parts = _header(translate("TITLE_PROJECTS"), focused, width)
    names = [store.project(project_id).name for project_id in explorer.projects.items]
    if not names:
        parts.append(("class:text.dimmer", translate("LIST_EMPTY") + "\n"))
    parts.extend(_list_rows(explorer.projects, names, focused, width))
    return FormattedText(parts)


def render_main_pane(explorer: ExplorerState, store: EntityStore, width: int) -> FormattedText:
    project = explorer.selected_project(store)
    if project is None:
        return FormattedText([
            ("class:text", translate("EMPTY_PROJECTS") + "\n"),
            ("class:text.dim", translate("EMPTY_CTA") + "\n"),
        ])
    task = explorer.selected_task(store)
    parts: Fragments = [("class:text.dim", ">> "), ("class:header", project.name)]
    if explorer.collapsed and task is not None:
        parts.append(("class:text.dim", " > "))
        parts.append(("class:text", task.name))
    parts.append(("", "\n"))

    focused = explorer.focus is Pane.MAIN
    parts.extend(_header(translate("TITLE_TASKS"), focused, width))
    tasks = explorer.tasks
    if tasks is None or not tasks:
        parts.append(("class:text", translate("EMPTY_TASKS") + "\n"))
        parts.append(("class:text.dim", translate("EMPTY_CTA") + "\n"))
        return FormattedText(parts)
    names = [store.task(task_id).name for task_id in tasks.items]
    parts.extend(_list_rows(tasks, names, focused, width, bullet="* "))

    parts.extend(_header(translate("TITLE_TAGS"), False, width))
    tag_names = sorted(store.tag(tag_id).name for tag_id in task.tags) if task else []
    parts.append(("class:text", fit(", ".join(tag_names) or translate("TAGS_NONE"), width) + "\n"))
    return FormattedText(parts)


def _prompt_bindings(prompt: Prompt) -> List[Tuple[str, str]]:
    if isinstance(prompt, SelectPrompt):
        return [
            ("esc", "KEY_CANCEL"),
            ("enter", "KEY_SELECT"),
            ("ctrl+j", "KEY_DOWN"),
            ("ctrl+k", "KEY_UP"),
            ("ctrl+n", "KEY_CREATE_TAG"),
            ("ctrl+d", "KEY_DELETE_TAG"),
        ]
    return [("esc", "KEY_CANCEL"), ("enter", "KEY_CONTINUE")]


def render_prompt(prompts: PromptStack, store: EntityStore, width: int) -> FormattedText:
    """Overlay for the top prompt; empty when no prompt is open."""
    prompt: Optional[Prompt] = prompts.top
    if prompt is None:
        return FormattedText([])
    inner = max(10, width - 2)
    parts: Fragments = []

    title = f" {prompt.title} "
    counter = ""
    counter_style = "class:prompt.counter"
    if isinstance(prompt, InputPrompt):
        counter = f" {len(prompt.value)}/{prompt.limit} "
        if len(prompt.value) >= prompt.limit:
            counter_style = "class:prompt.counter.full"
    fill = max(0, inner - display_width(title) - display_width(counter))
    parts.append(("class:border", "╭"))
    parts.append(("class:header", fit(title, inner)))
    parts.append(("class:border", "─" * fill))
    parts.append((counter_style, counter))
    parts.append(("class:border", "╮\n"))

    if isinstance(prompt, InputPrompt):
        parts.append(("class:prompt.value", " " + fit(prompt.value, inner - 1) + "\n"))
    elif isinstance(prompt, SelectPrompt):
        parts.append(("class:header", " " + translate("PROMPT_SEARCH")))
        parts.append(("class:prompt.value", prompt.search + "\n"))
        parts.append(("class:border", "├" + "─" * inner + "┤\n"))
        names = [store.tag(tag_id).name for tag_id in prompt.options.items]
        if names:
            parts.extend(_list_rows(prompt.options, names, True, inner, bullet=" * "))
        else:
            parts.append(("class:text.dimmer", " " + translate("EMPTY_TAGS") + "\n"))
    elif isinstance(prompt, ConfirmPrompt):
        body = translate("CONFIRM_BODY", action=prompt.action)
        parts.append(("class:text", " " + fit(body, inner - 1) + "\n"))

    if prompt.error:
        parts.append(("class:error", " " + fit(prompt.error, inner - 1) + "\n"))
    parts.append(("class:border", "╰" + "─" * inner + "╯\n"))
    depth = f"({len(prompts)})"
    bindings = fit(bindings_text(_prompt_bindings(prompt)), inner - len(depth))
    parts.append(("class:bindings", bindings.ljust(inner - len(depth) + 1)))
    parts.append(("class:text.dimmer", depth))
    return FormattedText(parts)


__all__ = [
    "display_width",
    "fit",
    "bindings_text",
    "render_project_list",
    "render_main_pane",
    "render_prompt",
]
