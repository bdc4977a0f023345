"""Navigation helpers keeping the controller slim."""

from interface.tui_prompts import SelectPrompt


def move_vertical_selection(tui, delta: int) -> None:
    """
    Move the active cursor by `delta`, clamped to the available rows.

    With a prompt open only a tag picker has a cursor to move; otherwise the
    explorer moves whichever list has focus (project moves cascade into tasks).
    """
    prompt = tui.prompts.top
    if prompt is not None:
        if isinstance(prompt, SelectPrompt):
            step = prompt.options.previous if delta < 0 else prompt.options.next
            for _ in range(abs(delta)):
                step()
        return
    workspace = tui.workspace
    workspace.explorer.navigate(delta, workspace.store)


__all__ = ["move_vertical_selection"]
