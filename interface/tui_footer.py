"""Footer renderer for TaskPaneTUI."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Pane
from interface.tui_render import bindings_text, fit


def _idle_bindings(tui) -> List[Tuple[str, str]]:
    explorer = tui.controller.explorer
    if explorer.focus is Pane.EXPLORER:
        pairs = [("N", "KEY_NEW")]
        if explorer.projects.selected_id() is not None:
            pairs += [("D", "KEY_DELETE"), ("enter", "KEY_FOCUS_TASKS")]
    else:
        pairs = []
        if explorer.projects.selected_id() is not None:
            pairs.append(("N", "KEY_NEW"))
        if explorer.tasks is not None and explorer.tasks.selected_id() is not None:
            pairs += [("D", "KEY_DELETE"), ("t", "KEY_TAG")]
        pairs.append(("esc", "KEY_FOCUS_PROJECTS"))
    pairs.append(("q", "KEY_QUIT"))
    return pairs


def build_footer_text(tui) -> FormattedText:
    # Prompt overlays carry their own bindings.
    if tui.controller.prompts:
        return FormattedText([])
    width = max(20, tui.get_terminal_width())
    return FormattedText([("class:bindings", fit(bindings_text(_idle_bindings(tui)), width))])


__all__ = ["build_footer_text"]
