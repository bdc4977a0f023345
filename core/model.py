from dataclasses import dataclass, field
from typing import List, Set

TagId = int
ProjectId = int
TaskId = int


@dataclass
class Tag:
    id: TagId
    name: str


@dataclass
class Project:
    id: ProjectId
    name: str
    default_tags: Set[TagId] = field(default_factory=set)
    tasks: List[TaskId] = field(default_factory=list)


@dataclass
class Task:
    id: TaskId
    project_id: ProjectId
    name: str
    tags: Set[TagId] = field(default_factory=set)


def by_name(entity) -> str:
    """Default sort key for every projection."""
    return entity.name
