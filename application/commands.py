"""Deferred mutations as plain values.

A prompt stores one of these instead of a callback. Prompts that collect a
payload (typed name, selected tag) hold a partial command and complete it with
``with_value`` at commit time; the Workspace interprets the finished command.
"""

from dataclasses import dataclass, replace
from typing import ClassVar, Optional

from core import ProjectId, TagId, TaskId


@dataclass(frozen=True)
class Command:
    # Name of the field filled from the prompt payload; None for payload-free commands.
    value_field: ClassVar[Optional[str]] = None

    def with_value(self, value) -> "Command":
        if self.value_field is None:
            return self
        return replace(self, **{self.value_field: value})


@dataclass(frozen=True)
class CreateTag(Command):
    value_field: ClassVar[Optional[str]] = "name"
    name: str = ""


@dataclass(frozen=True)
class DeleteTag(Command):
    tag_id: TagId


@dataclass(frozen=True)
class CreateProject(Command):
    value_field: ClassVar[Optional[str]] = "name"
    name: str = ""


@dataclass(frozen=True)
class DeleteProject(Command):
    project_id: ProjectId


@dataclass(frozen=True)
class CreateTask(Command):
    value_field: ClassVar[Optional[str]] = "name"
    project_id: ProjectId
    name: str = ""


@dataclass(frozen=True)
class DeleteTask(Command):
    task_id: TaskId


@dataclass(frozen=True)
class TagTask(Command):
    value_field: ClassVar[Optional[str]] = "tag_id"
    task_id: TaskId
    tag_id: Optional[TagId] = None


__all__ = [
    "Command",
    "CreateTag",
    "DeleteTag",
    "CreateProject",
    "DeleteProject",
    "CreateTask",
    "DeleteTask",
    "TagTask",
]
