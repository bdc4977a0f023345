"""Modal prompts and the stack that routes input to them.

Each prompt carries exactly one deferred command. Committing pops the prompt,
applies the command through the Workspace, then wakes the prompt underneath so
it can re-derive its own projection. Cancelling only pops.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from core import EntityStore, ProjectId, StorageError, TagId, TaskId, SelectionList, by_name
from application.commands import (
    Command,
    CreateProject,
    CreateTag,
    CreateTask,
    DeleteProject,
    DeleteTag,
    DeleteTask,
    TagTask,
)
from interface.constants import INPUT_LIMIT_PROJECT, INPUT_LIMIT_TAG, INPUT_LIMIT_TASK
from interface.i18n import translate

logger = logging.getLogger("taskpane.tui")


@dataclass
class InputPrompt:
    title: str
    command: Command
    limit: int
    alphanumeric: bool = False
    value: str = ""
    error: str = ""

    def accepts(self, char: str) -> bool:
        if len(self.value) >= self.limit:
            return False
        if not char.isprintable():
            return False
        return char.isalnum() or not self.alphanumeric

    def suggest(self, value: str) -> "InputPrompt":
        self.value = ""
        for char in value:
            if self.accepts(char):
                self.value += char
        return self

    def type_char(self, char: str) -> bool:
        if not self.accepts(char):
            return False
        self.value += char
        self.error = ""
        return True

    def erase(self) -> bool:
        if not self.value:
            return False
        self.value = self.value[:-1]
        self.error = ""
        return True

    def can_commit(self) -> bool:
        return bool(self.value)

    def payload_command(self) -> Command:
        return self.command.with_value(self.value)

    def awake(self, store: EntityStore) -> None:
        return


@dataclass
class SelectPrompt:
    """Live-searchable tag picker; the option list is re-derived on every change."""

    title: str
    command: Command
    search: str = ""
    options: SelectionList[TagId] = field(default_factory=SelectionList)
    error: str = ""

    def refresh(self, store: EntityStore) -> None:
        prefix = self.search
        matches = [tag for tag in store.tags.values() if tag.name.startswith(prefix)]
        self.options.sync_and_sort(matches, by_name)

    def type_char(self, char: str) -> bool:
        if not char.isalnum():
            return False
        self.search += char
        self.error = ""
        return True

    def erase(self) -> bool:
        if not self.search:
            return False
        self.search = self.search[:-1]
        self.error = ""
        return True

    def can_commit(self) -> bool:
        return self.options.selected_id() is not None

    def payload_command(self) -> Command:
        return self.command.with_value(self.options.selected_id())

    def awake(self, store: EntityStore) -> None:
        self.refresh(store)


@dataclass
class ConfirmPrompt:
    action: str
    command: Command
    error: str = ""

    @property
    def title(self) -> str:
        return translate("CONFIRM_TITLE")

    def type_char(self, char: str) -> bool:
        return False

    def erase(self) -> bool:
        return False

    def can_commit(self) -> bool:
        return True

    def payload_command(self) -> Command:
        return self.command

    def awake(self, store: EntityStore) -> None:
        return


Prompt = Union[InputPrompt, SelectPrompt, ConfirmPrompt]


class PromptStack:
    def __init__(self) -> None:
        self._stack: List[Prompt] = []

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def __iter__(self):
        return iter(self._stack)

    @property
    def top(self) -> Optional[Prompt]:
        return self._stack[-1] if self._stack else None

    def push(self, prompt: Prompt) -> None:
        self._stack.append(prompt)

    def cancel(self) -> Optional[Prompt]:
        """Discard the top prompt without running its command."""
        if not self._stack:
            return None
        return self._stack.pop()

    def commit(self, workspace) -> bool:
        """Pop and apply the top prompt's command, then wake the new top.

        On StorageError the prompt goes back on the stack with ``error`` set so
        the user can retry or cancel; the store was not mutated.
        """
        prompt = self.top
        if prompt is None or not prompt.can_commit():
            return False
        command = prompt.payload_command()
        self._stack.pop()
        try:
            workspace.apply(command)
        except StorageError as exc:
            logger.warning("command %r failed: %s", command, exc)
            prompt.error = translate("ERR_STORAGE", error=exc)
            self._stack.append(prompt)
            return False
        self.awake(workspace.store)
        return True

    def awake(self, store: EntityStore) -> None:
        if self._stack:
            self._stack[-1].awake(store)


# ---- factories ----


def new_tag(suggest: str = "") -> InputPrompt:
    prompt = InputPrompt(translate("PROMPT_NEW_TAG"), CreateTag(), INPUT_LIMIT_TAG, alphanumeric=True)
    return prompt.suggest(suggest)


def delete_tag(tag_id: TagId) -> ConfirmPrompt:
    return ConfirmPrompt(translate("CONFIRM_DELETE_TAG"), DeleteTag(tag_id))


def new_project() -> InputPrompt:
    return InputPrompt(translate("PROMPT_NEW_PROJECT"), CreateProject(), INPUT_LIMIT_PROJECT)


def delete_project(project_id: ProjectId) -> ConfirmPrompt:
    return ConfirmPrompt(translate("CONFIRM_DELETE_PROJECT"), DeleteProject(project_id))


def new_task(project_id: ProjectId) -> InputPrompt:
    return InputPrompt(translate("PROMPT_NEW_TASK"), CreateTask(project_id), INPUT_LIMIT_TASK)


def delete_task(task_id: TaskId) -> ConfirmPrompt:
    return ConfirmPrompt(translate("CONFIRM_DELETE_TASK"), DeleteTask(task_id))


def tag_task(task_id: TaskId) -> SelectPrompt:
    return SelectPrompt(translate("PROMPT_ADD_TAG"), TagTask(task_id))


__all__ = [
    "InputPrompt",
    "SelectPrompt",
    "ConfirmPrompt",
    "Prompt",
    "PromptStack",
    "new_tag",
    "delete_tag",
    "new_project",
    "delete_project",
    "new_task",
    "delete_task",
    "tag_task",
]
