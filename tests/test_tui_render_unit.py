from application.commands import TagTask
from interface import tui_prompts
from interface.tui_prompts import PromptStack
from interface.tui_render import display_width, fit, render_main_pane, render_project_list, render_prompt


def _text(fragments):
    return "".join(text for _, text in fragments)


def _styles_for(fragments, needle):
    return [style for style, text in fragments if needle in text]


def test_fit_clips_by_terminal_cells():
    assert fit("short", 10) == "short"
    assert fit("abcdefgh", 5) == "abcd…"
    assert display_width("漢字") == 4
    assert fit("漢字漢字", 5) == "漢字…"
    assert fit("anything", 0) == ""


def test_empty_workspace_shows_call_to_action(workspace):
    main = _text(render_main_pane(workspace.explorer, workspace.store, 60))
    projects = _text(render_project_list(workspace.explorer, workspace.store, 30))
    assert "No projects created yet." in main
    assert "Press N" in main
    assert "(no projects)" in projects


def test_project_list_marks_selection(seeded):
    fragments = render_project_list(seeded.explorer, seeded.store, 30)
    text = _text(fragments)
    assert text.index("Alpha") < text.index("Beta")
    assert "1 of 2" in text
    assert _styles_for(fragments, "Alpha") == ["class:selected"]
    assert _styles_for(fragments, "Beta") == ["class:text"]


def test_main_pane_lists_tasks_and_tags(seeded):
    seeded.apply(TagTask(10, 1))
    text = _text(render_main_pane(seeded.explorer, seeded.store, 60))
    assert ">> Alpha" in text
    assert text.index("T1") < text.index("T2")
    assert "urgent" in text

    seeded.explorer.set_collapsed(True)
    collapsed = render_main_pane(seeded.explorer, seeded.store, 60)
    assert ">> Alpha > T1" in _text(collapsed)
    assert "class:selected" in _styles_for(collapsed, "T1")


def test_main_pane_for_project_without_tasks(seeded):
    seeded.explorer.navigate(1, seeded.store)
    text = _text(render_main_pane(seeded.explorer, seeded.store, 60))
    assert ">> Beta" in text
    assert "No tasks added to this project yet." in text


def test_no_prompt_renders_nothing(seeded):
    assert render_prompt(PromptStack(), seeded.store, 50) == []


def test_input_prompt_shows_counter_and_depth(seeded):
    stack = PromptStack()
    prompt = tui_prompts.new_tag("abc")
    stack.push(prompt)
    fragments = render_prompt(stack, seeded.store, 50)
    text = _text(fragments)
    assert "New Tag" in text
    assert " 3/15 " in text
    assert "abc" in text
    assert text.endswith("(1)")

    prompt.value = "x" * 15
    assert _styles_for(render_prompt(stack, seeded.store, 50), "15/15") == ["class:prompt.counter.full"]


def test_select_prompt_lists_matches_or_hint(seeded):
    stack = PromptStack()
    picker = tui_prompts.tag_task(10)
    picker.refresh(seeded.store)
    stack.push(picker)
    text = _text(render_prompt(stack, seeded.store, 120))
    assert "Search: " in text
    assert text.index("home") < text.index("urgent")
    assert "ctrl+n: create tag" in text

    picker.search = "zz"
    picker.refresh(seeded.store)
    assert "No matching tags" in _text(render_prompt(stack, seeded.store, 60))


def test_confirm_prompt_and_error_line(seeded):
    stack = PromptStack()
    stack.push(tui_prompts.new_project())
    confirm = tui_prompts.delete_task(10)
    confirm.error = "Storage error: disk full"
    stack.push(confirm)
    fragments = render_prompt(stack, seeded.store, 60)
    text = _text(fragments)
    assert "Confirmation required" in text
    assert "Proceed with deleting selected task?" in text
    assert _styles_for(fragments, "disk full") == ["class:error"]
    assert text.endswith("(2)")
