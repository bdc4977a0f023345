from core import EntityStore, Tag
from application.commands import CreateProject, CreateTag, DeleteTask, TagTask
from interface import tui_prompts
from interface.constants import INPUT_LIMIT_TAG
from interface.tui_prompts import ConfirmPrompt, InputPrompt, PromptStack, SelectPrompt


def _tag_store(*names) -> EntityStore:
    store = EntityStore()
    for idx, name in enumerate(names, start=1):
        store.add_tag(Tag(idx, name))
    return store


def test_input_respects_limit_and_backspace():
    prompt = InputPrompt("t", CreateProject(), limit=3)
    for ch in "abcd":
        prompt.type_char(ch)
    assert prompt.value == "abc"
    assert prompt.erase() and prompt.value == "ab"
    prompt.erase()
    prompt.erase()
    assert prompt.erase() is False


def test_input_alphanumeric_restriction():
    prompt = tui_prompts.new_tag()
    assert prompt.alphanumeric and prompt.limit == INPUT_LIMIT_TAG
    assert prompt.type_char("a")
    assert not prompt.type_char(" ")
    assert not prompt.type_char("-")
    assert prompt.type_char("7")
    assert prompt.value == "a7"


def test_input_allows_spaces_when_unrestricted():
    prompt = tui_prompts.new_project()
    for ch in "my project":
        prompt.type_char(ch)
    assert prompt.value == "my project"


def test_input_commit_requires_value():
    prompt = tui_prompts.new_project()
    assert not prompt.can_commit()
    prompt.type_char("x")
    assert prompt.can_commit()
    assert prompt.payload_command() == CreateProject("x")


def test_new_tag_suggest_filters_and_truncates():
    prompt = tui_prompts.new_tag("abc" * 10)
    assert prompt.value == ("abc" * 10)[:INPUT_LIMIT_TAG]
    assert tui_prompts.new_tag("a b").value == "ab"


def test_select_filters_by_case_sensitive_prefix():
    store = _tag_store("work", "Weekend", "wait", "home")
    prompt = tui_prompts.tag_task(5)
    prompt.refresh(store)
    assert [store.tag(i).name for i in prompt.options.items] == ["Weekend", "home", "wait", "work"]

    prompt.type_char("w")
    prompt.refresh(store)
    assert [store.tag(i).name for i in prompt.options.items] == ["wait", "work"]

    prompt.type_char("o")
    prompt.refresh(store)
    assert [store.tag(i).name for i in prompt.options.items] == ["work"]
    assert prompt.payload_command() == TagTask(5, 1)


def test_select_ignores_non_alphanumeric_and_needs_option():
    store = _tag_store("work")
    prompt = SelectPrompt("pick", TagTask(1))
    assert not prompt.type_char(" ")
    prompt.type_char("z")
    prompt.refresh(store)
    assert prompt.options.items == []
    assert not prompt.can_commit()


def test_confirm_has_no_payload():
    prompt = tui_prompts.delete_task(4)
    assert isinstance(prompt, ConfirmPrompt)
    assert prompt.can_commit()
    assert not prompt.type_char("x")
    assert prompt.payload_command() == DeleteTask(4)


def test_stack_push_cancel_order():
    stack = PromptStack()
    assert stack.top is None and not stack
    first, second = tui_prompts.new_project(), tui_prompts.new_tag()
    stack.push(first)
    stack.push(second)
    assert len(stack) == 2 and stack.top is second
    assert stack.cancel() is second
    assert stack.cancel() is first
    assert stack.cancel() is None


def test_commit_applies_then_wakes_new_top(seeded):
    calls = []
    stack = PromptStack()
    select = tui_prompts.tag_task(10)
    select.search = "l"
    select.refresh(seeded.store)
    stack.push(select)
    create = tui_prompts.new_tag("later")
    stack.push(create)

    class Recorder:
        store = seeded.store

        def apply(self, command):
            calls.append(("apply", command, list(select.options.items)))
            seeded.apply(command)

    refresh_picker = select.awake

    def awake(store):
        calls.append(("awake", store.get_tag_by_name("later") is not None))
        refresh_picker(store)

    select.awake = awake

    assert stack.commit(Recorder())
    assert calls[0] == ("apply", CreateTag("later"), [])
    assert calls[1] == ("awake", True)
    assert [seeded.store.tag(i).name for i in select.options.items] == ["later"]
    assert stack.top is select


def test_commit_refused_without_valid_payload(workspace):
    stack = PromptStack()
    stack.push(tui_prompts.new_project())
    assert stack.commit(workspace) is False
    assert len(stack) == 1
